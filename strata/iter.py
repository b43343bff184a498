"""
Iteration strategies over an array's logical elements.

Both strategies yield mutable `Element` handles in row-major logical order
(last axis fastest), independent of the physical stride layout:

* `SafeIter` walks the strides with an odometer-style multi-index and is
  correct for any layout.
* `UnsafeIter` advances linearly through the buffer. It is only valid for
  row-major contiguous arrays; using it elsewhere is a caller error that is
  not checked at runtime.

`pairwise` zips the safe sequences of two arrays of equal size. It is the
mechanism behind duplication, slice assignment, reductions and
accumulation.
"""

from typing import Iterator, Tuple

from strata.errors import ShapeError


class Element:
    """A mutable handle to one position of a buffer."""

    __slots__ = ("_buffer", "_offset")

    def __init__(self, buffer, offset: int):
        self._buffer = buffer
        self._offset = offset

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def value(self):
        return self._buffer[self._offset].item()

    @value.setter
    def value(self, value):
        self._buffer[self._offset] = value

    def __repr__(self) -> str:
        return f"Element(offset={self._offset}, value={self.value})"


class SafeIter:
    """
    Strided traversal of an array in row-major logical order.

    Keeps a multi-index per dimension and advances the buffer offset by the
    matching stride, carrying into earlier axes when an axis wraps. Correct
    for any strides, including views and transposes.

    Parameters
    ----------
    array : Array
        The array to traverse. Its shape, strides and offset are captured at
        construction.

    Example
    -------
    >>> t = Array.from_function([2, 3], lambda i: i, dtype=DType.Int64)
    >>> [e.value for e in SafeIter(t.T)]
    [0, 3, 1, 4, 2, 5]
    """

    def __init__(self, array):
        self._buffer = array._buffer
        self._offset = array._offset
        self._shape = array.shape
        self._strides = array.strides
        self._size = array.size

    def __len__(self) -> int:
        return self._size

    def offsets(self) -> Iterator[int]:
        """Buffer offsets of every logical element, in row-major order."""
        shape, strides = self._shape, self._strides
        ndim = len(shape)
        index = [0] * ndim
        ptr = self._offset
        for _ in range(self._size):
            yield ptr
            # advance the last axis, carry into earlier axes on overflow
            for d in range(ndim - 1, -1, -1):
                index[d] += 1
                ptr += strides[d]
                if index[d] < shape[d]:
                    break
                ptr -= strides[d] * shape[d]
                index[d] = 0

    def __iter__(self) -> Iterator[Element]:
        buffer = self._buffer
        for ptr in self.offsets():
            yield Element(buffer, ptr)


class UnsafeIter(SafeIter):
    """
    Linear traversal of the buffer from the array's offset.

    Visits ``offset .. offset + size - 1`` in memory order, which matches
    logical order only for row-major contiguous arrays. The layout is not
    checked.
    """

    def offsets(self) -> Iterator[int]:
        return iter(range(self._offset, self._offset + self._size))


def pairwise(a, b) -> Iterator[Tuple[Element, Element]]:
    """
    Pair the elements of two arrays position-for-position.

    Raises
    ------
    ShapeError
        If the arrays hold a different number of elements.
    """
    if a.size != b.size:
        raise ShapeError(f"Cannot pair {a.size} elements with {b.size} elements")
    return zip(SafeIter(a), SafeIter(b))
