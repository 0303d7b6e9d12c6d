"""Gaussian elimination with partial pivoting."""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

import numpy as np
from numpy.typing import ArrayLike, NDArray

from linkern.core.exceptions import DimensionError, SingularMatrixError
from linkern.core.validation import (
    check_array,
    check_finite,
    check_same_rows,
    check_square,
)
from linkern.kernels.product import identity


_LOG: logging.Logger = logging.getLogger(__name__)


class PivotStrategy(Enum):
    """How the pivot row is chosen in each column."""
    FIRST_IMPROVEMENT = auto()  # first row strictly larger than the diagonal
    MAX_MAGNITUDE = auto()      # argmax of |A[i, j]| over i >= j


@dataclass(frozen=True)
class EliminationOptions:
    """Configuration for echelon reduction and the Gauss solver."""

    pivoting: PivotStrategy = PivotStrategy.FIRST_IMPROVEMENT


DEFAULT_OPTIONS = EliminationOptions()


def _check_rhs(B: ArrayLike) -> tuple[NDArray, bool]:
    """Validate the right-hand side, returning it as 2D plus a 1D flag."""
    B = check_array(B, "B")
    if B.ndim not in (1, 2):
        raise DimensionError(
            f"B: expected 1D or 2D array, got {B.ndim}D with shape {B.shape}",
            expected=(1, 2),
            actual=B.ndim,
        )
    check_finite(B, "B")
    is_vector = B.ndim == 1
    if is_vector:
        B = B.reshape(-1, 1)
    return B, is_vector


def _select_pivot(
    A: NDArray, j: int, strategy: PivotStrategy
) -> tuple[int, float]:
    """Return (row index, magnitude) of the pivot for column j."""
    n = A.shape[0]
    max_index = j
    max_value = abs(A[j, j])

    for i in range(j + 1, n):
        abs_value = abs(A[i, j])
        if abs_value > max_value:
            max_index = i
            max_value = abs_value
            if strategy == PivotStrategy.FIRST_IMPROVEMENT:
                break

    return max_index, float(max_value)


def _row_subtract(i: int, j: int, A: NDArray, B: NDArray) -> None:
    """Eliminate A[i, j] using row j, applied to A and B in place."""
    scale = -A[i, j] / A[j, j]
    A[i, :] += A[j, :] * scale
    B[i, :] += B[j, :] * scale


def _reduce(
    A: NDArray,
    B: NDArray,
    options: EliminationOptions,
) -> int:
    """
    Reduce A to upper triangular form in place, carrying B along.

    Returns:
        Number of row swaps performed
    """
    n = A.shape[0]
    swaps = 0

    for j in range(n):
        pivot_row, magnitude = _select_pivot(A, j, options.pivoting)

        if magnitude == 0.0:
            _LOG.debug("Zero pivot in column %d of %d x %d matrix", j, n, n)
            raise SingularMatrixError(
                f"Singular matrix: no nonzero pivot in column {j}", column=j
            )

        if pivot_row != j:
            _LOG.debug("Swapping rows %d and %d", j, pivot_row)
            A[[j, pivot_row]] = A[[pivot_row, j]]
            B[[j, pivot_row]] = B[[pivot_row, j]]
            swaps += 1

        for i in range(j + 1, n):
            _row_subtract(i, j, A, B)

    return swaps


def _prepare(
    A: ArrayLike, B: ArrayLike
) -> tuple[NDArray, NDArray, bool]:
    A = check_square(A, "A")
    B, is_vector = _check_rhs(B)
    check_same_rows(A, B, ("A", "B"))
    return A, B, is_vector


def echelon_form(
    A: ArrayLike,
    B: ArrayLike,
    options: Optional[EliminationOptions] = None,
) -> tuple[NDArray, NDArray]:
    """
    Reduce the augmented system (A, B) to row echelon form.

    Inputs are copied; the caller's arrays are left untouched.

    Args:
        A: Square coefficient matrix (n, n)
        B: Right-hand side(s), shape (n, p) or (n,)
        options: Pivoting configuration

    Returns:
        (U, B') where U is upper triangular and B' has had the same row
        operations applied

    Raises:
        SingularMatrixError: If a pivot column has no nonzero candidate
    """
    A, B, is_vector = _prepare(A, B)
    _reduce(A, B, options or DEFAULT_OPTIONS)
    return A, (B[:, 0] if is_vector else B)


def gauss_elimination(
    A: ArrayLike,
    B: ArrayLike,
    options: Optional[EliminationOptions] = None,
) -> tuple[NDArray, NDArray]:
    """
    Fully reduce the augmented system (A, B) so that A becomes identity.

    Runs echelon reduction, normalizes each row by its pivot, then
    eliminates above the diagonal from the last column upward.

    Args:
        A: Square coefficient matrix (n, n)
        B: Right-hand side(s), shape (n, p) or (n,)
        options: Pivoting configuration

    Returns:
        (I, X) with A_original @ X = B_original

    Raises:
        SingularMatrixError: Propagated from echelon reduction
    """
    A, B, is_vector = _prepare(A, B)
    _reduce(A, B, options or DEFAULT_OPTIONS)
    n = A.shape[0]

    # normalize
    for j in range(n):
        pivot = A[j, j]
        A[j, :] /= pivot
        B[j, :] /= pivot

    # back substitution
    for j in range(n - 1, 0, -1):
        for i in range(j - 1, -1, -1):
            _row_subtract(i, j, A, B)

    return A, (B[:, 0] if is_vector else B)


solve = gauss_elimination


def inverse(
    A: ArrayLike,
    options: Optional[EliminationOptions] = None,
) -> NDArray:
    """
    Invert a square matrix by Gauss elimination against the identity.

    Raises:
        SingularMatrixError: If A is singular
    """
    A = check_square(A, "A")
    _, inv = gauss_elimination(A, identity(A.shape[0]), options)
    return inv


def reduce_with_swaps(
    A: ArrayLike,
    options: Optional[EliminationOptions] = None,
) -> tuple[NDArray, int]:
    """
    Reduce A alone to upper triangular form.

    Returns:
        (U, swaps) where swaps counts the row interchanges, so that
        det(A) = (-1)**swaps * prod(diag(U))
    """
    A = check_square(A, "A")
    B = np.zeros((A.shape[0], 0))
    swaps = _reduce(A, B, options or DEFAULT_OPTIONS)
    return A, swaps
