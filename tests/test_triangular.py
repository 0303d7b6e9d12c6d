"""Tests for LU decomposition and triangular substitution."""

import numpy as np
import pytest

from linkern.core.exceptions import DegeneratePivotError, DimensionError
from linkern.kernels.product import multiply
from linkern.kernels.triangular import (
    lu_decompose,
    forward_substitute,
    backward_substitute,
    lu_solve,
)


def test_forward_substitution():
    """Test L y = b on a unit lower triangular system."""
    L = np.array([[1.0, 0.0, 0.0], [2.0, 1.0, 0.0], [3.0, 4.0, 1.0]])
    b = np.array([1.0, 3.0, 7.0])

    y = forward_substitute(L, b)

    np.testing.assert_array_equal(y, [1.0, 1.0, 0.0])


def test_forward_substitution_non_unit_diagonal():
    """Test the diagonal of L is divided out."""
    L = np.array([[2.0, 0.0], [1.0, 4.0]])
    b = np.array([4.0, 10.0])

    y = forward_substitute(L, b)

    np.testing.assert_array_equal(y, [2.0, 2.0])


def test_backward_substitution():
    """Test U x = y on an upper triangular system."""
    U = np.array([[1.0, 2.0, 3.0], [0.0, 1.0, 4.0], [0.0, 0.0, 1.0]])
    y = np.array([1.0, 3.0, 1.0])

    x = backward_substitute(U, y)

    np.testing.assert_array_equal(x, [0.0, -1.0, 1.0])


def test_substitution_does_not_modify_inputs():
    """Test the right-hand sides are copied before being updated."""
    L = np.array([[1.0, 0.0], [2.0, 1.0]])
    b = np.array([1.0, 3.0])
    U = L.T.copy()
    b_before = b.copy()

    forward_substitute(L, b)
    backward_substitute(U, b)

    np.testing.assert_array_equal(b, b_before)


def test_lu_decomposition_reconstructs():
    """Test L U reproduces A exactly for a small integer matrix."""
    A = np.array([[2.0, 1.0, 0.0], [4.0, 5.0, 2.0], [6.0, 15.0, 12.0]])

    L, U = lu_decompose(A)

    np.testing.assert_array_equal(multiply(L, U), A)


def test_lu_factor_structure():
    """Test L is unit lower triangular and U is upper triangular."""
    rng = np.random.default_rng(4)
    A = rng.standard_normal((5, 5)) + 5 * np.eye(5)

    L, U = lu_decompose(A)

    assert np.allclose(L, np.tril(L))
    np.testing.assert_array_equal(np.diag(L), np.ones(5))
    np.testing.assert_array_equal(U, np.triu(U))
    assert np.allclose(multiply(L, U), A)


def test_lu_zero_pivot_raises():
    """Test a zero leading pivot is reported rather than divided by."""
    A = np.array([[0.0, 1.0], [1.0, 0.0]])

    with pytest.raises(DegeneratePivotError) as excinfo:
        lu_decompose(A)

    assert excinfo.value.index == 0


def test_lu_zero_pivot_unchecked():
    """Test check_pivots=False lets IEEE division produce inf/nan."""
    A = np.array([[0.0, 1.0], [1.0, 0.0]])

    with pytest.warns(RuntimeWarning):
        L, U = lu_decompose(A, check_pivots=False)

    assert not np.all(np.isfinite(L))


def test_substitution_zero_diagonal_raises():
    """Test zero diagonal entries raise in both substitutions."""
    T = np.array([[1.0, 0.0], [0.0, 0.0]])

    with pytest.raises(DegeneratePivotError) as excinfo:
        forward_substitute(T, [1.0, 1.0])
    assert excinfo.value.index == 1

    with pytest.raises(DegeneratePivotError) as excinfo:
        backward_substitute(T, [1.0, 1.0])
    assert excinfo.value.index == 1


def test_substitution_length_mismatch():
    """Test a right-hand side of the wrong length is rejected."""
    with pytest.raises(DimensionError):
        forward_substitute(np.eye(3), [1.0, 2.0])


def test_lu_substitution_round_trip():
    """Test A x = b after LU, forward and backward substitution."""
    rng = np.random.default_rng(5)
    A = rng.standard_normal((4, 4)) + 4 * np.eye(4)
    b = rng.standard_normal(4)

    L, U = lu_decompose(A)
    y = forward_substitute(L, b)
    x = backward_substitute(U, y)

    assert np.allclose(multiply(A, x.reshape(-1, 1))[:, 0], b)


def test_lu_solve():
    """Test the one-call LU solve."""
    A = np.array([[2.0, 1.0, 0.0], [4.0, 5.0, 2.0], [6.0, 15.0, 12.0]])
    b = np.array([1.0, 2.0, 3.0])

    x = lu_solve(A, b)

    assert np.allclose(A @ x, b)
