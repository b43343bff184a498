"""
Per-axis indexers.

A slicing key is an ordered sequence of indexers, one per dimension:

* `Index(i)` selects a single position and collapses the dimension,
* `Range(start, length)` keeps the dimension with a new size,
* `FULL` keeps the dimension unchanged.

Python keys (ints, ``slice`` and ``range`` objects) are converted with
`as_indexer`, which needs the dimension size to resolve open slice ends.
"""

from dataclasses import dataclass
from numbers import Integral
from typing import Union

from strata.errors import OptionError


@dataclass(frozen=True)
class Index:
    index: int


@dataclass(frozen=True)
class Range:
    start: int
    length: int


class Full:
    def __repr__(self): return "FULL"


FULL = Full()

Indexer = Union[Index, Range, Full]


def _check_step(step):
    if step not in (None, 1):
        raise OptionError(f"Only unit steps are supported, got step={step}")


def as_indexer(key, dim: int) -> Indexer:
    """
    Convert one element of a Python key into an indexer for a dimension of
    size `dim`.

    Raises
    ------
    OptionError
        For a slice or range with a step other than 1.
    TypeError
        For any other key type.
    """
    if isinstance(key, (Index, Range, Full)):
        return key
    if isinstance(key, Integral) and not isinstance(key, bool):
        return Index(int(key))
    if isinstance(key, slice):
        _check_step(key.step)
        if key.start is None and key.stop is None:
            return FULL
        start = 0 if key.start is None else int(key.start)
        stop = dim if key.stop is None else int(key.stop)
        if stop < 0:
            stop += dim
        stop = min(stop, dim)
        # start is validated by the slicing code, which knows the context
        norm_start = start + dim if start < 0 else start
        return Range(start, max(0, stop - norm_start))
    if isinstance(key, range):
        _check_step(key.step)
        return Range(key.start, len(key))
    raise TypeError(f"Unsupported index type: {type(key)}")
