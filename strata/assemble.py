"""
Joining arrays along an axis.

Built entirely from the core: the result is allocated once and each input is
written into a range view of it.
"""

from typing import Sequence

from strata.array import Array, _normalize_axis
from strata.errors import ShapeError


def concatenate(arrays: Sequence[Array], axis: int = 0) -> Array:
    """
    Join arrays along an existing axis.

    Parameters
    ----------
    arrays : sequence of Array
        Arrays with the same number of dimensions and the same size on every
        axis except `axis`.
    axis : int
        The axis to join along; negative values count from the end.

    Returns
    -------
    Array
        A new row-major array with the dtype of the first input.

    Raises
    ------
    ShapeError
        If `arrays` is empty, `axis` is out of range, or the shapes differ
        off-axis.

    Example
    -------
    >>> t = Array.from_function([2, 3], lambda i: i, dtype=DType.Int64)
    >>> concatenate([t, t], axis=-1).tolist()
    [[0, 1, 2, 0, 1, 2], [3, 4, 5, 3, 4, 5]]
    """
    if len(arrays) == 0:
        raise ShapeError("Need at least one array to concatenate")

    first = arrays[0]
    axis = _normalize_axis(axis, first.ndim)
    newshape = list(first.shape)
    newshape[axis] = 0
    for a in arrays:
        if a.ndim != first.ndim:
            raise ShapeError(f"All arrays must have {first.ndim} dimensions, got {a.ndim}")
        if a.shape[:axis] + a.shape[axis + 1:] != first.shape[:axis] + first.shape[axis + 1:]:
            raise ShapeError(f"All arrays must match off-axis: {first.shape} vs {a.shape} along axis {axis}")
        newshape[axis] += a.shape[axis]

    ret = Array(newshape, dtype=first.dtype)
    lo = 0
    for a in arrays:
        n = a.shape[axis]
        if n == 0:
            continue
        key = [slice(None)] * ret.ndim
        key[axis] = slice(lo, lo + n)
        ret[tuple(key)] = a
        lo += n
    return ret


def vstack(arrays: Sequence[Array]) -> Array:
    """Concatenate along axis 0."""
    return concatenate(arrays, 0)


def hstack(arrays: Sequence[Array]) -> Array:
    """Concatenate along axis 1."""
    return concatenate(arrays, 1)


def dstack(arrays: Sequence[Array]) -> Array:
    """
    Stack 1-D or 2-D arrays along a third axis.

    1-D inputs of length ``n`` become ``(1, n, 1)`` and 2-D inputs of shape
    ``(r, c)`` become ``(r, c, 1)`` before concatenating along axis 2.

    Raises
    ------
    ShapeError
        If `arrays` is empty, an input has more than two dimensions, or the
        promoted shapes differ off-axis.
    """
    if len(arrays) == 0:
        raise ShapeError("Need at least one array to stack")
    promoted = []
    for a in arrays:
        if a.ndim == 1:
            promoted.append(a.reshape([1, a.size, 1]))
        elif a.ndim == 2:
            promoted.append(a.reshape(list(a.shape) + [1]))
        else:
            raise ShapeError(f"dstack takes arrays with at most two dimensions, got {a.ndim}")
    return concatenate(promoted, 2)


def column_stack(arrays: Sequence[Array]) -> Array:
    """
    Stack 1-D arrays as columns, or join 2-D arrays along axis 1.

    Raises
    ------
    ShapeError
        If `arrays` is empty, an input has more than two dimensions, or the
        inputs have different row counts.
    """
    if len(arrays) == 0:
        raise ShapeError("Need at least one array to stack")
    promoted = []
    for a in arrays:
        if a.ndim == 1:
            promoted.append(a.reshape([a.size, 1]))
        elif a.ndim == 2:
            promoted.append(a)
        else:
            raise ShapeError(f"column_stack takes arrays with at most two dimensions, got {a.ndim}")
    return concatenate(promoted, 1)
