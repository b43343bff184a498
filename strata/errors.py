"""
Strata error kinds.

Every failure raised by the core derives from `ArrayError`, and each kind
also derives from the matching builtin so that callers can catch either the
specific kind or the generic Python error.
"""


class ArrayError(Exception):
    """Base class of all errors raised by strata."""


class ShapeError(ArrayError, ValueError):
    """
    A structurally invalid shape or axis operation.

    Raised for reshape size mismatches, a diagonal view of a non-matrix,
    out-of-range axes, transpose orders that are not permutations, and
    mismatched element counts in slice assignment.
    """


class OutOfRangeError(ArrayError, IndexError):
    """An index that is still outside ``[0, dim)`` after normalization."""


class OptionError(ArrayError, ValueError):
    """An unrecognized enumerated option, e.g. an unknown memory order."""
