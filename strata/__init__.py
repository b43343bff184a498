"""
Strata - strided N-dimensional arrays ❤️

The memory-layout, view and indexing core of a numeric library:
shapes, strides, contiguity, views, reshape/transpose, copies and
element traversal. Pure Python over NumPy buffers. No magic.
"""

import logging

from strata.helpers import DEBUG

from strata.dtype import (
    DType,
    Order,
    dtype_name,
    dtype_size,
)

from strata.errors import (
    ArrayError,
    OptionError,
    OutOfRangeError,
    ShapeError,
)

from strata.flags import Flags, Layout

from strata.indexer import FULL, Index, Range

from strata.iter import Element, SafeIter, UnsafeIter, pairwise

from strata.array import (
    Array,
    arange,
    array,
    from_numpy,
    to_numpy,
)

from strata.assemble import column_stack, concatenate, dstack, hstack, vstack

if DEBUG:
    logging.getLogger(__name__).setLevel(logging.DEBUG)

__version__ = "0.1.0"
__author__ = "Suresh Neethimohan"
__license__ = "MIT"
__description__ = "Strata - strided N-dimensional arrays ❤️"

__all__ = [
    '__version__',
    '__author__',
    '__license__',
    '__description__',
    'DType',
    'Order',
    'dtype_name',
    'dtype_size',
    'ArrayError',
    'OptionError',
    'OutOfRangeError',
    'ShapeError',
    'Flags',
    'Layout',
    'FULL',
    'Index',
    'Range',
    'Element',
    'SafeIter',
    'UnsafeIter',
    'pairwise',
    'Array',
    'arange',
    'array',
    'from_numpy',
    'to_numpy',
    'concatenate',
    'hstack',
    'vstack',
    'dstack',
    'column_stack',
]
