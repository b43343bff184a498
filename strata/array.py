"""
Strata Array - strided N-dimensional array.

An `Array` is a flat typed buffer (a 1-D numpy array) plus the bookkeeping
that gives it N dimensions: an element offset into the buffer, a shape and a
stride per dimension (counted in elements, not bytes). Views share the
buffer of their ownership root and only differ in offset, shape and strides.
"""

from numbers import Integral
from typing import Callable, List, Optional, Sequence, Tuple
import itertools
import logging

import numpy as np

from strata.dtype import DType, Order, dtype_name
from strata.errors import OutOfRangeError, ShapeError
from strata.flags import (
    Flags,
    Layout,
    column_major_strides,
    row_major_strides,
)
from strata.helpers import prod
from strata.indexer import FULL, Index, Range, as_indexer
from strata.iter import SafeIter, UnsafeIter, pairwise

logger = logging.getLogger(__name__)


# ----------------------------------------------------------------------
# Internal: shape, index and axis normalization
# ----------------------------------------------------------------------

def _is_int(x) -> bool:
    return isinstance(x, Integral) and not isinstance(x, bool)


def _canonical_shape(shape) -> Tuple[int, ...]:
    """
    Validate a shape and apply the empty-array convention.

    A shape with no dimensions becomes ``(0,)``: an empty 1-D array, not a
    zero-dimensional scalar.
    """
    if _is_int(shape):
        shape = (shape,)
    shape = tuple(shape)
    if not all(_is_int(d) for d in shape):
        raise TypeError(f"Shape dimensions must be integers, got {shape}")
    shape = tuple(int(d) for d in shape)
    if any(d < 0 for d in shape):
        raise ShapeError(f"Negative dimensions are not allowed: {shape}")
    if not shape:
        return (0,)
    return shape


def _strides_for(shape: Sequence[int], order: Order) -> Tuple[int, ...]:
    if order is Order.F:
        return column_major_strides(shape)
    return row_major_strides(shape)


def _normalize_index(index: int, dim: int, axis: int) -> int:
    if index < 0:
        index += dim
    if index < 0 or index >= dim:
        raise OutOfRangeError(f"Index {index} is out of range for axis {axis} with size {dim}")
    return index


def _normalize_axis(axis: int, ndim: int) -> int:
    if axis < 0:
        axis += ndim
    if axis < 0 or axis >= ndim:
        raise ShapeError(f"Axis {axis} is out of range for an array with {ndim} dimensions")
    return axis


class Array:
    """
    Strided multi-dimensional array.

    Key features:
    --------------
    • shape / strides / flags bookkeeping over a flat numpy buffer
    • zero-copy views: slicing, transpose, reshape of contiguous data,
      diagonal
    • independent copies in C (row-major) or F (column-major) order
    • zero-copy interoperability with NumPy

    Examples
    --------
    >>> import strata
    >>> arr = strata.Array([3, 4], dtype=strata.DType.Float32)
    >>> arr.shape
    (3, 4)
    >>> arr.strides
    (4, 1)

    >>> t = strata.Array.from_function([2, 2, 3], lambda i: i, dtype=strata.DType.Int64)
    >>> t[1].tolist()
    [[6, 7, 8], [9, 10, 11]]
    """

    def __init__(self, data, dtype: DType = DType.Float32, order: Order = Order.C):
        """
        Initialize a Strata Array.

        Parameters
        ----------
        data : Union[np.ndarray, list, tuple, int]
            Input defining the array:
              • NumPy ndarray → wraps existing data (zero-copy when contiguous)
              • list / tuple / int → allocates a new zeroed array of that shape
        dtype : DType, optional
            Element type of a newly allocated array. Defaults to `Float32`.
        order : Order, optional
            Memory layout (C=row-major, F=column-major). Defaults to `Order.C`.

        Raises
        ------
        TypeError
            If the input type or numpy dtype is unsupported, or a dimension
            is not an integer.
        ShapeError
            If the shape has negative dimensions.
        OptionError
            If the order is not a recognized layout.
        """

        # ----------------------------------------------------------------------
        # Case 1: Wrap existing NumPy array
        # ----------------------------------------------------------------------
        if isinstance(data, np.ndarray):
            self._wrap_numpy(data)

        # ----------------------------------------------------------------------
        # Case 2: Allocate new array from shape
        # ----------------------------------------------------------------------
        elif isinstance(data, (list, tuple)) or _is_int(data):
            order = Order.parse(order)
            shape = _canonical_shape(data)
            buffer = np.zeros(prod(shape), dtype=dtype.numpy)
            self._init(buffer, 0, shape, _strides_for(shape, order), None)

        else:
            raise TypeError(f"Cannot create Array from type {type(data)}")

    def _init(self, buffer: np.ndarray, offset: int, shape, strides, base: Optional["Array"]):
        self._buffer = buffer
        self._offset = offset
        self._shape = tuple(shape)
        self._strides = tuple(strides)
        self._size = prod(self._shape)
        self._base = base
        self._dtype = DType.from_numpy(buffer.dtype)
        self._flags = Flags.classify(self._shape, self._strides, owns_buffer=base is None)

    def _wrap_numpy(self, data: np.ndarray):
        if data.ndim == 0:
            data = data.reshape(1)

        # Only the flat memory block is kept; the strides are re-derived from
        # the shape so that length-1 axes get canonical strides.
        if data.flags.c_contiguous:
            flat, order = data.reshape(-1), Order.C
        elif data.flags.f_contiguous:
            flat, order = data.ravel(order="F"), Order.F
        else:
            logger.debug(f"copying non-contiguous numpy array of shape {data.shape}")
            data = np.ascontiguousarray(data)
            flat, order = data.reshape(-1), Order.C

        shape = _canonical_shape(data.shape)
        self._init(flat, 0, shape, _strides_for(shape, order), None)

    @classmethod
    def _from_parts(cls, buffer: np.ndarray, offset: int, shape, strides, base: Optional["Array"]) -> "Array":
        """
        Internal: build an array from raw parts.

        Performs no validation; callers compute every shape, stride and offset
        before calling so a failing operation never leaves a partial view.
        Not part of the public API.
        """
        obj = cls.__new__(cls)
        obj._init(buffer, offset, shape, strides, base)
        return obj

    # ----------------------------------------------------------------------
    # Generator constructors
    # ----------------------------------------------------------------------

    @classmethod
    def from_function(cls, shape, fn: Callable[[int], object],
                      dtype: DType = DType.Float32, order: Order = Order.C) -> "Array":
        """
        Allocate an array and fill buffer position ``i`` with ``fn(i)``.

        The generator is keyed by the flat buffer position, so for an F-ordered
        array consecutive values run down the first axis.

        Example:
            >>> Array.from_function([2, 3], lambda i: i, dtype=DType.Int64).tolist()
            [[0, 1, 2], [3, 4, 5]]
        """
        ret = cls(_canonical_shape(shape), dtype, order)
        ret._buffer[:] = np.fromiter((fn(i) for i in range(ret.size)), dtype=dtype.numpy, count=ret.size)
        return ret

    @classmethod
    def from_indices(cls, shape, fn: Callable[..., object],
                     dtype: DType = DType.Float32, order: Order = Order.C) -> "Array":
        """
        Allocate an array and fill the element at ``(i0, .., ik)`` with
        ``fn(i0, .., ik)``, independent of the memory order.
        """
        ret = cls(_canonical_shape(shape), dtype, order)
        indices = itertools.product(*(range(d) for d in ret.shape))
        for index, element in zip(indices, ret.flat_iter()):
            element.value = fn(*index)
        return ret

    @classmethod
    def matrix(cls, nrows: int, ncols: int, fn: Callable[[int, int], object],
               dtype: DType = DType.Float32) -> "Array":
        """
        Build a row-major ``nrows x ncols`` matrix from ``fn(i, j)``.

        Example:
            >>> eye = Array.matrix(3, 3, lambda i, j: 1 if i == j else 0, dtype=DType.Int32)
            >>> eye.diagonal().tolist()
            [1, 1, 1]

        Raises:
            ShapeError: If both `nrows` and `ncols` are zero.
        """
        if nrows == 0 and ncols == 0:
            raise ShapeError("Cannot initialize an empty matrix")
        return cls.from_indices([nrows, ncols], fn, dtype, Order.C)

    # ----------------------------------------------------------------------
    # Array Metadata and Layout Accessors
    # ----------------------------------------------------------------------

    @property
    def shape(self) -> Tuple[int, ...]:
        """
        Shape of the array as a tuple of dimension sizes.

        Example:
            >>> arr.shape
            (3, 4)
        """
        return self._shape

    @property
    def strides(self) -> Tuple[int, ...]:
        """
        Strides for each dimension, counted in elements.

        For a C-contiguous array of shape (3, 4), strides = (4, 1).
        """
        return self._strides

    @property
    def ndim(self) -> int:
        return len(self._shape)

    @property
    def size(self) -> int:
        """Total number of elements: the product of all dimension sizes."""
        return self._size

    @property
    def offset(self) -> int:
        """Position of the first element in the underlying buffer."""
        return self._offset

    @property
    def flags(self) -> Flags:
        return self._flags

    @property
    def owns_buffer(self) -> bool:
        return self._flags.owns_buffer

    @property
    def base(self) -> Optional["Array"]:
        """
        The ownership root this view depends on, or ``None`` when this array
        owns its buffer.

        A view keeps its root alive, so a root always outlives its views.
        """
        return self._base

    # ----------------------------------------------------------------------
    # Memory and data type information
    # ----------------------------------------------------------------------

    @property
    def dtype(self) -> DType:
        return self._dtype

    @property
    def itemsize(self) -> int:
        """Size in bytes of a single element."""
        return self._buffer.itemsize

    @property
    def nbytes(self) -> int:
        """
        Total number of bytes occupied by the array's elements.

        Computed as: size * itemsize
        """
        return self._size * self.itemsize

    # ----------------------------------------------------------------------
    # Memory layout checks
    # ----------------------------------------------------------------------

    def is_contiguous(self) -> bool:
        """Check if array is C-contiguous (row-major layout)."""
        return self._flags.c_contiguous

    def is_f_contiguous(self) -> bool:
        """Check if array is Fortran-contiguous (column-major layout)."""
        return self._flags.f_contiguous

    # ----------------------------------------------------------------------
    # NumPy Interoperability
    # ----------------------------------------------------------------------

    def numpy(self) -> np.ndarray:
        """
        Convert to a NumPy array (zero-copy view).

        The returned array shares memory with this one and honours its offset
        and strides, so modifications to either reflect in the other.
        """
        itemsize = self.itemsize
        return np.lib.stride_tricks.as_strided(
            self._buffer[self._offset:],
            shape=self._shape,
            strides=tuple(s * itemsize for s in self._strides),
        )

    def tolist(self) -> list:
        """Nested Python lists of the elements in logical order."""
        values = (element.value for element in self.flat_iter())
        return _nest(values, self._shape)

    # ----------------------------------------------------------------------
    # Iteration
    # ----------------------------------------------------------------------

    def flat_iter(self) -> SafeIter:
        """Mutable element handles in row-major logical order, for any strides."""
        return SafeIter(self)

    def unsafe_iter(self) -> UnsafeIter:
        """
        Mutable element handles walking the buffer linearly.

        Only valid when the array is row-major contiguous; this is not checked.
        """
        return UnsafeIter(self)

    # ----------------------------------------------------------------------
    # Element Access and Assignment
    # ----------------------------------------------------------------------
    # `arr[i, j, k]` with one integer per dimension reads or writes a single
    # element. Any other key derives a view (see `slice`). A list key is
    # treated like a tuple, so `arr[[1]]` is the same as `arr[1]`.
    # ----------------------------------------------------------------------

    def _root(self) -> "Array":
        return self if self._base is None else self._base

    def _view(self, offset: int, shape, strides) -> "Array":
        return Array._from_parts(self._buffer, offset, shape, strides, self._root())

    def _element_offset(self, index: Sequence[int]) -> int:
        if len(index) != self.ndim:
            raise OutOfRangeError(f"Expected {self.ndim} indices, got {len(index)}")
        offset = self._offset
        for axis, (i, dim, stride) in enumerate(zip(index, self._shape, self._strides)):
            offset += stride * _normalize_index(i, dim, axis)
        return offset

    def _element_key(self, key: list) -> Optional[List[int]]:
        """The integer index when `key` selects a single element, else None."""
        if len(key) != self.ndim:
            return None
        index = []
        for k in key:
            if isinstance(k, Index):
                index.append(k.index)
            elif _is_int(k):
                index.append(int(k))
            else:
                return None
        return index

    def slice(self, indexers: Sequence) -> "Array":
        """
        Derive a view from one indexer per leading dimension.

        Parameters
        ----------
        indexers : sequence
            Each entry is an int / `Index` (collapses the dimension), a
            ``slice``, ``range`` or `Range` (keeps the dimension with a new
            size) or ``slice(None)`` / `FULL` (keeps it unchanged). Missing
            trailing entries default to `FULL`.

        Returns
        -------
        Array
            A non-owning view of the same buffer. When every dimension is
            collapsed the view has shape ``(1,)``.

        Raises
        ------
        OutOfRangeError
            If an index or range falls outside its dimension, or there are
            more indexers than dimensions.
        """
        indexers = list(indexers)
        if len(indexers) > self.ndim:
            raise OutOfRangeError(f"Too many indices for array: array is {self.ndim}-dimensional, "
                                  f"but {len(indexers)} were indexed")
        indexers += [FULL] * (self.ndim - len(indexers))

        offset = self._offset
        shape, strides = [], []
        for axis, (key, dim, stride) in enumerate(zip(indexers, self._shape, self._strides)):
            ix = as_indexer(key, dim)
            if isinstance(ix, Index):
                offset += stride * _normalize_index(ix.index, dim, axis)
            elif isinstance(ix, Range):
                start = ix.start + dim if ix.start < 0 else ix.start
                if ix.length < 0 or start < 0 or start + ix.length > dim:
                    raise OutOfRangeError(f"Range(start={ix.start}, length={ix.length}) is out of range "
                                          f"for axis {axis} with size {dim}")
                offset += stride * start
                shape.append(ix.length)
                strides.append(stride)
            else:
                shape.append(dim)
                strides.append(stride)

        if not shape:
            shape, strides = [1], [1]
        return self._view(offset, shape, strides)

    def __getitem__(self, key):
        """
        Retrieve an element or derive a view.

        Example:
            >>> t = Array.from_function([2, 2, 3], lambda i: i, dtype=DType.Int64)
            >>> t[1, 0, 2]
            8
            >>> t[1].shape
            (2, 3)
            >>> t[:, 1:2].shape
            (2, 1, 3)
        """
        key = list(key) if isinstance(key, (tuple, list)) else [key]
        index = self._element_key(key)
        if index is not None:
            return self._buffer[self._element_offset(index)].item()
        return self.slice(key)

    def __setitem__(self, key, value):
        """
        Assign a scalar or an array.

        A single-element key writes one element. Otherwise the selected view
        is assigned with `assign`.
        """
        key = list(key) if isinstance(key, (tuple, list)) else [key]
        index = self._element_key(key)
        if index is not None:
            self._buffer[self._element_offset(index)] = value
        else:
            self.slice(key).assign(value)

    def assign(self, value):
        """
        Write `value` into every element of this array (or view).

        An `Array` or numpy array must hold exactly as many elements as this
        one; elements are copied position-for-position in logical order. A
        scalar is written to every position.

        Raises:
            ShapeError: If an array source has a different element count.
        """
        if isinstance(value, np.ndarray):
            value = Array(value)
        if isinstance(value, Array):
            if np.may_share_memory(value._buffer, self._buffer):
                # source may overlap the destination
                value = value.duplicate()
            for dst, src in pairwise(self, value):
                dst.value = src.value
        else:
            for element in self.flat_iter():
                element.value = value

    def __len__(self) -> int:
        return self._shape[0]

    # ----------------------------------------------------------------------
    # Shape-transforming operations
    # ----------------------------------------------------------------------

    def transpose(self, order: Optional[Sequence[int]] = None) -> "Array":
        """
        Permute the dimensions of the array.

        Parameters
        ----------
        order : sequence of int, optional
            A permutation of ``0..ndim-1``; negative axes are allowed. Defaults
            to reversing all axes.

        Returns
        -------
        Array
            A view; the layout flags are re-derived from the new strides.

        Raises
        ------
        ShapeError
            If `order` has the wrong length or has an out-of-range or repeated
            axis.

        Example:
            >>> t = Array.from_function([2, 4, 3], lambda i: i, dtype=DType.Int64)
            >>> t.transpose([2, 0, 1]).shape
            (3, 2, 4)
        """
        ndim = self.ndim
        if order is None or len(order) == 0:
            order = list(reversed(range(ndim)))
        if len(order) != ndim:
            raise ShapeError(f"Axes {tuple(order)} don't match an array with {ndim} dimensions")

        permutation = []
        for axis in order:
            axis = _normalize_axis(axis, ndim)
            if axis in permutation:
                raise ShapeError(f"Repeated axis {axis} in transpose")
            permutation.append(axis)

        shape = [self._shape[p] for p in permutation]
        strides = [self._strides[p] for p in permutation]
        return self._view(self._offset, shape, strides)

    @property
    def T(self) -> "Array":
        return self.transpose()

    def reshape(self, newshape) -> "Array":
        """
        Fit the array into a new shape, without copying when possible.

        One dimension may be ``-1`` and is inferred from the others. A
        row-major contiguous array is reshaped in row-major order and a
        column-major one in column-major order, both as zero-copy views. Any
        other array is first duplicated into row-major order and the result
        owns its buffer.

        Raises
        ------
        ShapeError
            If more than one dimension is ``-1``, a dimension is otherwise
            negative, or the element count does not match.
        TypeError
            If a dimension is not an integer.

        Example:
            >>> t = Array.from_function([2, 4, 3], lambda i: i, dtype=DType.Int64)
            >>> t.reshape([2, 2, 2, 3]).shape
            (2, 2, 2, 3)
        """
        newshape = [newshape] if _is_int(newshape) else list(newshape)
        if not all(_is_int(d) for d in newshape):
            raise TypeError(f"Shape dimensions must be integers, got {tuple(newshape)}")
        newshape = [int(d) for d in newshape]
        if not newshape:
            newshape = [0]

        autosize = None
        known = 1
        for i, d in enumerate(newshape):
            if d == -1:
                if autosize is not None:
                    raise ShapeError("Only one shape dimension can be inferred")
                autosize = i
            elif d < 0:
                raise ShapeError(f"Negative dimensions are not allowed: {tuple(newshape)}")
            else:
                known *= d

        if autosize is not None:
            if known == 0 or self._size % known:
                raise ShapeError(f"Cannot reshape array of size {self._size} into shape {tuple(newshape)}")
            newshape[autosize] = self._size // known

        newshape = tuple(newshape)
        if prod(newshape) != self._size:
            raise ShapeError(f"Cannot reshape array of size {self._size} into shape {newshape}")

        if newshape == self._shape:
            return self.view()
        return self._reshaped(newshape)

    def _reshaped(self, newshape: Tuple[int, ...]) -> "Array":
        if self._flags.c_contiguous:
            return self._view(self._offset, newshape, row_major_strides(newshape))
        if self._flags.f_contiguous:
            return self._view(self._offset, newshape, column_major_strides(newshape))

        logger.debug(f"reshape of non-contiguous array {self.shape} -> {newshape} requires a copy")
        tmp = self.duplicate(Order.C)
        return Array._from_parts(tmp._buffer, 0, newshape, row_major_strides(newshape), None)

    def ravel(self) -> "Array":
        """Flatten to 1-D; a view when contiguous in either order, otherwise a copy."""
        return self._reshaped((self._size,))

    def duplicate(self, order=None) -> "Array":
        """
        Produce an independent copy that owns its buffer.

        Parameters
        ----------
        order : Order | 'C' | 'F' | None
            Memory order of the copy. ``None`` keeps the current order
            (row-major when the array is contiguous in neither).

        Returns
        -------
        Array
            Contiguous in the requested order. When the source is already
            contiguous in that order its elements are copied in one flat
            block; otherwise they are copied position-for-position.

        Raises
        ------
        OptionError
            If `order` is not a recognized layout.
        """
        if order is None:
            order = Order.F if self._flags.layout is Layout.COLUMN_MAJOR else Order.C
        else:
            order = Order.parse(order)

        ret = Array(self._shape, self._dtype, order)
        matches = self._flags.c_contiguous if order is Order.C else self._flags.f_contiguous
        if matches:
            ret._buffer[:] = self._buffer[self._offset:self._offset + self._size]
        else:
            logger.debug(f"element-wise copy of {self._flags.layout.name} array {self.shape} into {order.name} order")
            for dst, src in pairwise(ret, self):
                dst.value = src.value
        return ret

    def view(self) -> "Array":
        """Zero-copy alias with identical shape and strides that does not own the buffer."""
        return self._view(self._offset, self._shape, self._strides)

    def diagonal(self) -> "Array":
        """
        A 1-D view of the main diagonal of a matrix.

        Raises:
            ShapeError: If the array is not two-dimensional.
        """
        if self.ndim != 2:
            raise ShapeError(f"Array must be two-dimensional, got {self.ndim} dimensions")
        n = min(self._shape)
        return self._view(self._offset, [n], [self._strides[0] + self._strides[1]])

    # ----------------------------------------------------------------------
    # Axis reduction / accumulation
    # ----------------------------------------------------------------------

    def reduce_along_axis(self, axis: int, op: Callable[[object, object], object]) -> "Array":
        """
        Fold `op` over the positions of `axis`.

        The accumulator starts as a copy of position 0 along `axis`; every
        later position is combined into it with
        ``acc = op(acc, item)`` element by element.

        Example:
            >>> import operator
            >>> t = Array.from_function([2, 3], lambda i: i, dtype=DType.Int64)
            >>> t.reduce_along_axis(0, operator.add).tolist()
            [3, 5, 7]

        Raises:
            ShapeError: If `axis` is out of range or has length zero.
        """
        axis = _normalize_axis(axis, self.ndim)
        if self._shape[axis] == 0:
            raise ShapeError(f"Cannot reduce over axis {axis} of length zero")

        indexers = [FULL] * self.ndim
        indexers[axis] = Index(0)
        ret = self.slice(indexers).duplicate()
        for i in range(1, self._shape[axis]):
            indexers[axis] = Index(i)
            for acc, element in pairwise(ret, self.slice(indexers)):
                acc.value = op(acc.value, element.value)
        return ret

    def accumulate_along_axis(self, axis: int, op: Callable[[object, object], object]) -> "Array":
        """
        Running `op` along `axis`, returned as a full-size copy.

        Position ``i`` becomes ``op(result[i-1], self[i])``, so
        ``operator.add`` gives a cumulative sum.

        Raises:
            ShapeError: If `axis` is out of range.
        """
        axis = _normalize_axis(axis, self.ndim)
        ret = self.duplicate()
        if self._shape[axis] == 0:
            return ret

        indexers = [FULL] * self.ndim
        indexers[axis] = Index(0)
        prev = ret.slice(indexers)
        for i in range(1, self._shape[axis]):
            indexers[axis] = Index(i)
            cur = ret.slice(indexers)
            for c, p in pairwise(cur, prev):
                c.value = op(p.value, c.value)
            prev = cur
        return ret

    # ----------------------------------------------------------------------
    # Representation
    # ----------------------------------------------------------------------

    def __repr__(self) -> str:
        """
        Developer-friendly representation.

        Example:
            >>> strata.Array([2, 3], dtype=strata.DType.Float32)
            strata.Array(shape=(2, 3), dtype=float32, ndim=2)
        """
        return f"strata.Array(shape={self.shape}, dtype={dtype_name(self.dtype)}, ndim={self.ndim})"

    def __str__(self) -> str:
        """
        Human-readable printout; long axes are truncated.

        Example:
            >>> print(Array.from_function([2, 3], lambda i: i))
            strata.Array([[0.00, 1.00, 2.00], [3.00, 4.00, 5.00]], dtype=float32, shape=(2, 3))
        """
        body = _format_nested(self.tolist())
        return f"strata.Array({body}, dtype={dtype_name(self.dtype)}, shape={self.shape})"


# ----------------------------------------------------------------------
# Internal: nesting and formatting helpers
# ----------------------------------------------------------------------
def _nest(values, shape: Sequence[int]) -> list:
    if len(shape) == 1:
        return [next(values) for _ in range(shape[0])]
    return [_nest(values, shape[1:]) for _ in range(shape[0])]


def _format_nested(x) -> str:
    if isinstance(x, list):
        return f"[{_truncate([_format_nested(i) for i in x])}]"
    if isinstance(x, float):
        return f"{x:.2f}"
    return str(x)


def _truncate(items, max_elems: int = 6) -> str:
    """
    Helper to truncate long lists for pretty printing.
    Example:
        _truncate(['1', '2', '3', '4', '5', '6', '7']) -> '1, 2, 3, ..., 6, 7'
    """
    n = len(items)
    if n <= max_elems:
        return ", ".join(items)
    head = ", ".join(items[:3])
    tail = ", ".join(items[-2:])
    return f"{head}, ..., {tail}"


# ----------------------------------------------------------------------
# Convenience constructors
# ----------------------------------------------------------------------

def array(data, dtype: DType = DType.Float32, order: Order = Order.C) -> Array:
    """
    Create a Strata Array from Python data.

    Convenience function similar to `numpy.array()`. Nested lists are first
    converted to a typed NumPy array; a flat list, tuple or int is a shape.

    Examples:
        >>> arr = strata.array([4, 5])                 # shape (4, 5)
        >>> arr2 = strata.array([[1, 2], [3, 4]])      # values
    """
    if isinstance(data, (list, tuple)) and data and not isinstance(data[0], (int, float)):
        np_arr = np.array(data, dtype=dtype.numpy, order=Order.parse(order).value)
        return Array(np_arr)
    return Array(data, dtype, order)


def arange(stop: int, dtype: DType = DType.Int64) -> Array:
    """A 1-D array holding ``0 .. stop-1``."""
    return Array.from_function([stop], lambda i: i, dtype=dtype)


def from_numpy(np_array: np.ndarray) -> Array:
    """
    Wrap an existing NumPy array as a Strata Array.

    C- or F-contiguous inputs are shared (zero-copy): modifications in one
    reflect in the other. Other inputs are copied into C order first.
    """
    return Array(np_array)


def to_numpy(arr: Array) -> np.ndarray:
    """Zero-copy NumPy view of `arr`."""
    return arr.numpy()
