"""
Element types and memory orders.

`DType` names the element type stored in an array's buffer and maps it to
the numpy dtype used for storage. `Order` names the two canonical memory
layouts (C = row-major, F = column-major).
"""

import enum

import numpy as np

from strata.errors import OptionError


class DType(enum.Enum):
    Float32 = "float32"
    Float64 = "float64"
    Int32 = "int32"
    Int64 = "int64"

    @property
    def numpy(self) -> np.dtype:
        """The numpy dtype backing this element type."""
        return np.dtype(self.value)

    @classmethod
    def from_numpy(cls, dtype) -> "DType":
        """
        Look up the `DType` matching a numpy dtype.

        Raises
        ------
        TypeError
            If numpy's dtype has no strata counterpart.
        """
        try:
            return cls(np.dtype(dtype).name)
        except ValueError:
            raise TypeError(f"Unsupported numpy dtype: {np.dtype(dtype).name}")


class Order(enum.Enum):
    C = "C"
    F = "F"

    @classmethod
    def parse(cls, order) -> "Order":
        """Accept an `Order` or one of the characters ``'C'`` / ``'F'``."""
        if isinstance(order, cls):
            return order
        if isinstance(order, str) and order in ("C", "F"):
            return cls(order)
        raise OptionError(f"Invalid argument for order: {order!r}. Valid options are 'C' or 'F'")


def dtype_name(dtype: DType) -> str:
    return dtype.value


def dtype_size(dtype: DType) -> int:
    """Size in bytes of a single element of `dtype`."""
    return dtype.numpy.itemsize
