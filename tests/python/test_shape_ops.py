"""
Test suite for transpose, reshape, ravel, duplicate and diagonal views.
"""

import itertools
import logging

import pytest
import numpy as np
import strata

def grid(shape, dtype=strata.DType.Int64, order=strata.Order.C):
    """Array holding its own flat position at each buffer slot."""
    return strata.Array.from_function(shape, lambda i: i, dtype=dtype, order=order)

def flat(arr):
    return [e.value for e in arr.flat_iter()]

class TestTranspose:
    """Test axis permutation."""

    def test_default_reverses_axes(self):
        """Test the full reversal."""
        t = grid([2, 4, 3])
        r = t.transpose()
        assert r.shape == (3, 4, 2)
        assert r.strides == (1, 3, 12)
        assert r.is_f_contiguous() is True
        assert r.is_contiguous() is False
        assert r.base is t

    def test_explicit_order(self):
        """Test a cyclic permutation."""
        t = grid([2, 4, 3])
        r = t.transpose([2, 0, 1])
        assert r.shape == (3, 2, 4)
        assert r[0, 0].tolist() == [0, 3, 6, 9]
        assert r[2, 1].tolist() == [14, 17, 20, 23]

    def test_negative_axes(self):
        """Test that negative axes are normalized."""
        t = grid([2, 4, 3])
        assert t.transpose([-1, 0, 1]).strides == t.transpose([2, 0, 1]).strides

    def test_matches_numpy(self):
        """Test values against NumPy."""
        t = grid([2, 4, 3])
        expected = np.arange(24).reshape(2, 4, 3).transpose(1, 2, 0)
        assert t.transpose([1, 2, 0]).tolist() == expected.tolist()

    @pytest.mark.parametrize("perm", list(itertools.permutations(range(3))))
    def test_inverse_permutation_restores(self, perm):
        """Test that p followed by inverse(p) restores shape and strides."""
        t = grid([2, 4, 3])
        inverse = [0] * len(perm)
        for i, p in enumerate(perm):
            inverse[p] = i
        r = t.transpose(list(perm)).transpose(inverse)
        assert r.shape == t.shape
        assert r.strides == t.strides
        assert r.tolist() == t.tolist()

    def test_T_property(self):
        """Test the matrix transpose shortcut."""
        t = grid([2, 3])
        assert t.T.tolist() == [[0, 3], [1, 4], [2, 5]]

    def test_invalid_orders(self):
        """Test that non-permutations are rejected."""
        t = grid([2, 4, 3])
        with pytest.raises(strata.ShapeError):
            t.transpose([0, 0, 1])
        with pytest.raises(strata.ShapeError):
            t.transpose([0, 1, 3])
        with pytest.raises(strata.ShapeError):
            t.transpose([0, 1])

class TestReshape:
    """Test reshape and ravel."""

    def test_reshape_preserves_flat_order(self):
        """Test a contiguous 2x4x3 -> 2x2x2x3 reshape."""
        t = grid([2, 4, 3])
        r = t.reshape([2, 2, 2, 3])
        assert r.shape == (2, 2, 2, 3)
        assert flat(r) == list(range(24))
        assert flat(t) == list(range(24))
        assert r[1, 0, 1, 2] == 12 + 3 + 2

    def test_reshape_is_zero_copy(self):
        """Test that contiguous reshapes alias the buffer."""
        t = grid([2, 4, 3])
        r = t.reshape([6, 4])
        assert r.base is t
        assert r.owns_buffer is False
        r[0, 0] = -1
        assert t[0, 0, 0] == -1

    def test_reshape_same_shape(self):
        """Test that reshape(t.shape) is an identical zero-copy view."""
        t = grid([2, 4, 3])
        r = t.reshape(t.shape)
        assert r.shape == t.shape
        assert r.strides == t.strides
        assert r.tolist() == t.tolist()
        assert r.base is t

    def test_reshape_infers_dimension(self):
        """Test the -1 placeholder."""
        t = grid([2, 4, 3])
        assert t.reshape([4, -1]).shape == (4, 6)
        assert t.reshape(-1).shape == (24,)

    def test_reshape_errors(self):
        """Test size mismatches and invalid placeholders."""
        t = grid([2, 4, 3])
        with pytest.raises(strata.ShapeError):
            t.reshape([5, 5])
        with pytest.raises(strata.ShapeError):
            t.reshape([-1, -1])
        with pytest.raises(strata.ShapeError):
            t.reshape([5, -1])
        with pytest.raises(strata.ShapeError):
            t.reshape([-2, 12])

    def test_reshape_non_contiguous_copies(self):
        """Test that a non-contiguous reshape duplicates first."""
        t = grid([2, 4, 3])
        v = t.transpose([0, 2, 1])
        assert v.flags.layout == strata.Layout.NEITHER

        r = v.reshape([6, 4])
        assert r.owns_buffer is True
        assert r.base is None
        assert r.is_contiguous() is True
        assert r.tolist()[0] == [0, 3, 6, 9]
        assert flat(r) == flat(v)

        r[0, 0] = -1
        assert t[0, 0, 0] == 0

    def test_reshape_fortran(self):
        """Test that F-contiguous arrays reshape in F order without copying."""
        f = grid([2, 3], order=strata.Order.F)
        r = f.reshape([3, 2])
        assert r.base is f
        assert r.strides == (1, 3)
        assert r.is_f_contiguous() is True
        assert r.tolist() == [[0, 3], [1, 4], [2, 5]]

    def test_ravel_contiguous(self):
        """Test that ravel of contiguous data is a view."""
        t = grid([2, 4, 3])
        r = t.ravel()
        assert r.shape == (24,)
        assert r.base is t
        assert flat(r) == list(range(24))

    def test_ravel_non_contiguous(self):
        """Test that ravel of a strided view copies."""
        t = grid([3, 4])
        r = t[:, 1].ravel()
        assert r.owns_buffer is True
        assert r.tolist() == [1, 5, 9]

    def test_ravel_view_with_offset(self):
        """Test ravel of a contiguous view keeps its offset."""
        t = grid([3, 4])
        r = t[1:].ravel()
        assert r.tolist() == [4, 5, 6, 7, 8, 9, 10, 11]
        assert r.base is t

class TestDuplicate:
    """Test independent copies."""

    @pytest.mark.parametrize("order", [None, "C", "F", strata.Order.C, strata.Order.F])
    def test_duplicate_is_independent(self, order):
        """Test that mutating a duplicate never alters the source."""
        t = grid([2, 4, 3])
        d = t.duplicate(order)
        assert d.tolist() == t.tolist()
        assert d.owns_buffer is True
        assert d.base is None
        d[0, 0, 0] = -1
        d[1] = 7
        assert flat(t) == list(range(24))

    @pytest.mark.parametrize("order", [None, "C", "F"])
    def test_duplicate_of_view_is_independent(self, order):
        """Test that duplicates of strided views are independent too."""
        t = grid([3, 4])
        v = t[:, 1:3]
        d = v.duplicate(order)
        assert d.tolist() == [[1, 2], [5, 6], [9, 10]]
        d[0, 0] = -1
        assert t[0, 1] == 1

    def test_duplicate_to_fortran(self):
        """Test that the result is contiguous in the requested order."""
        t = grid([2, 4, 3])
        d = t.duplicate(strata.Order.F)
        assert d.is_f_contiguous() is True
        assert d.strides == (1, 2, 8)
        assert d.tolist() == t.tolist()

    def test_duplicate_keeps_current_order(self):
        """Test that no order keeps the source's layout."""
        f = grid([2, 3], order=strata.Order.F)
        assert f.duplicate().is_f_contiguous() is True
        assert grid([2, 3]).duplicate().is_contiguous() is True

    def test_duplicate_non_contiguous_defaults_to_c(self):
        """Test that a strided source is copied into row-major order."""
        t = grid([3, 4])
        d = t[:, 1:3].duplicate()
        assert d.is_contiguous() is True
        assert d.strides == (2, 1)

    def test_duplicate_view_with_offset(self):
        """Test the bulk-copy path on an offset view."""
        t = grid([2, 2, 3])
        d = t[1].duplicate()
        assert d.tolist() == [[6, 7, 8], [9, 10, 11]]
        assert d.offset == 0

    def test_duplicate_invalid_order(self):
        """Test that unknown orders are rejected."""
        t = grid([2, 3])
        with pytest.raises(strata.OptionError):
            t.duplicate("X")
        with pytest.raises(ValueError):
            t.duplicate(3)

class TestDiagonal:
    """Test diagonal views."""

    def test_identity_diagonal(self):
        """Test the diagonal of an identity matrix."""
        eye = strata.Array.matrix(3, 3, lambda i, j: 1 if i == j else 0, dtype=strata.DType.Int64)
        assert eye.diagonal().tolist() == [1, 1, 1]

    def test_rectangular_diagonal(self):
        """Test a non-square matrix."""
        t = grid([2, 4])
        d = t.diagonal()
        assert d.shape == (2,)
        assert d.strides == (5,)
        assert d.tolist() == [0, 5]

    def test_diagonal_is_a_view(self):
        """Test that writes through the diagonal reach the matrix."""
        t = grid([3, 3])
        d = t.diagonal()
        assert d.base is t
        d[1] = 99
        assert t[1, 1] == 99

    def test_diagonal_requires_matrix(self):
        """Test that only 2D arrays have a diagonal."""
        with pytest.raises(strata.ShapeError):
            grid([2, 2, 2]).diagonal()
        with pytest.raises(strata.ShapeError):
            grid([4]).diagonal()

class TestCopyLogging:
    """Test the debug records emitted when an operation has to copy."""

    def test_reshape_copy_is_logged(self, caplog):
        """Test that a non-contiguous reshape logs the copy."""
        caplog.set_level(logging.DEBUG, logger="strata")
        grid([2, 4, 3]).transpose([0, 2, 1]).reshape([6, 4])
        assert any("requires a copy" in r.getMessage() for r in caplog.records)

    def test_view_reshape_is_silent(self, caplog):
        """Test that zero-copy reshapes do not log."""
        caplog.set_level(logging.DEBUG, logger="strata")
        grid([2, 4, 3]).reshape([6, 4])
        assert not any("requires a copy" in r.getMessage() for r in caplog.records)
