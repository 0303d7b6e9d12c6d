"""Determinants by cofactor expansion and by elimination."""

import logging

import numpy as np
from numpy.typing import ArrayLike, NDArray

from linkern.core.exceptions import SingularMatrixError
from linkern.core.validation import check_square
from linkern.kernels.elimination import (
    EliminationOptions,
    PivotStrategy,
    reduce_with_swaps,
)


_LOG: logging.Logger = logging.getLogger(__name__)

# Cofactor expansion costs O(n!); beyond this size it is impractically slow.
COFACTOR_LIMIT = 10


def _minor(A: NDArray, row: int) -> NDArray:
    """Drop the given row and the first column."""
    n = A.shape[0]
    sub = np.zeros((n - 1, n - 1))
    k = 0
    for i in range(n):
        if i == row:
            continue
        for j in range(1, n):
            sub[k, j - 1] = A[i, j]
        k += 1
    return sub


def _cofactor(A: NDArray) -> float:
    n = A.shape[0]
    if n == 0:
        return 1.0
    if n == 1:
        return float(A[0, 0])
    if n == 2:
        return float(A[0, 0] * A[1, 1] - A[1, 0] * A[0, 1])

    det = 0.0
    for i in range(n):
        sign = 1.0 if i % 2 == 0 else -1.0
        det += A[i, 0] * sign * _cofactor(_minor(A, i))
    return float(det)


def determinant(A: ArrayLike) -> float:
    """
    Determinant by Laplace expansion along the first column.

    Exact for small integer-valued matrices, but factorial in n; prefer
    determinant_lu for anything large. A singular matrix yields 0.0.
    """
    A = check_square(A, "A")
    if A.shape[0] > COFACTOR_LIMIT:
        _LOG.warning(
            "Cofactor determinant of a %d x %d matrix costs O(n!); "
            "consider determinant_lu",
            A.shape[0],
            A.shape[0],
        )
    return _cofactor(A)


def determinant_lu(A: ArrayLike) -> float:
    """
    Determinant in O(n^3) from the echelon form.

    det(A) = (-1)^swaps * prod(diag(U)), with U from elimination using
    max-magnitude pivoting. Returns 0.0 for a singular matrix.
    """
    try:
        U, swaps = reduce_with_swaps(
            A, EliminationOptions(pivoting=PivotStrategy.MAX_MAGNITUDE)
        )
    except SingularMatrixError:
        return 0.0

    det = 1.0
    for k in range(U.shape[0]):
        det *= U[k, k]
    return float(-det if swaps % 2 else det)
