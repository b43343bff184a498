"""
Layout flags: contiguity classification and buffer ownership.

The layout of an array is never set by hand. `Flags.classify` derives it
from (shape, strides) every time an array is built, so a flag value can
never describe a memory layout the strides do not have.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple
import enum


class Layout(enum.Enum):
    ROW_MAJOR = "C"
    COLUMN_MAJOR = "F"
    # Only for ndim <= 1: a 1-D array of stride 1 (or length 1) is both.
    BOTH = "CF"
    NEITHER = ""


def row_major_strides(shape: Sequence[int]) -> Tuple[int, ...]:
    """Strides (in elements) for a C-ordered array: last axis fastest."""
    strides = [0] * len(shape)
    sz = 1
    for i in reversed(range(len(shape))):
        strides[i] = sz
        sz *= shape[i]
    return tuple(strides)


def column_major_strides(shape: Sequence[int]) -> Tuple[int, ...]:
    """Strides (in elements) for an F-ordered array: first axis fastest."""
    strides = [0] * len(shape)
    sz = 1
    for i in range(len(shape)):
        strides[i] = sz
        sz *= shape[i]
    return tuple(strides)


def is_row_major(shape: Sequence[int], strides: Sequence[int]) -> bool:
    """
    Check whether `strides` are the row-major strides of `shape`.

    Dimensions are scanned from last to first. A zero-length dimension makes
    the array trivially contiguous.
    """
    if len(shape) == 0:
        return True
    if len(shape) == 1:
        return shape[0] == 1 or strides[0] == 1

    sd = 1
    for dim, stride in zip(reversed(shape), reversed(strides)):
        if dim == 0:
            return True
        if stride != sd:
            return False
        sd *= dim
    return True


def is_column_major(shape: Sequence[int], strides: Sequence[int]) -> bool:
    """Column-major counterpart of `is_row_major`, scanning first to last."""
    if len(shape) == 0:
        return True
    if len(shape) == 1:
        return shape[0] == 1 or strides[0] == 1

    sd = 1
    for dim, stride in zip(shape, strides):
        if dim == 0:
            return True
        if stride != sd:
            return False
        sd *= dim
    return True


def classify_layout(shape: Sequence[int], strides: Sequence[int]) -> Layout:
    c = is_row_major(shape, strides)
    f = is_column_major(shape, strides)
    if c and f:
        # mutually exclusive for ndim > 1, row-major wins
        return Layout.BOTH if len(shape) <= 1 else Layout.ROW_MAJOR
    if c:
        return Layout.ROW_MAJOR
    if f:
        return Layout.COLUMN_MAJOR
    return Layout.NEITHER


@dataclass(frozen=True)
class Flags:
    layout: Layout
    owns_buffer: bool

    @classmethod
    def classify(cls, shape: Sequence[int], strides: Sequence[int], owns_buffer: bool) -> "Flags":
        """The only way flags are built: a pure function of (shape, strides)."""
        return cls(classify_layout(shape, strides), owns_buffer)

    @property
    def c_contiguous(self) -> bool:
        return self.layout in (Layout.ROW_MAJOR, Layout.BOTH)

    @property
    def f_contiguous(self) -> bool:
        return self.layout in (Layout.COLUMN_MAJOR, Layout.BOTH)

    @property
    def contiguous(self) -> bool:
        return self.layout is not Layout.NEITHER

    def __repr__(self) -> str:
        return f"Flags(layout={self.layout.name}, owns_buffer={self.owns_buffer})"
