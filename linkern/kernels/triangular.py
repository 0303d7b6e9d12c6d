"""LU decomposition (no pivoting) and triangular substitution."""

import numpy as np
from numpy.typing import ArrayLike, NDArray

from linkern.core.exceptions import DegeneratePivotError
from linkern.core.validation import check_square, check_vector
from linkern.kernels.product import identity, zeros


def _check_pivot(value: float, index: int, kernel: str) -> None:
    if value == 0.0:
        raise DegeneratePivotError(
            f"{kernel}: zero diagonal pivot at index {index}", index=index
        )


def lu_decompose(
    A: ArrayLike,
    check_pivots: bool = True,
) -> tuple[NDArray, NDArray]:
    """
    Doolittle LU factorization without pivoting: A = L U.

    Args:
        A: Square matrix (n, n)
        check_pivots: Raise on a zero pivot instead of dividing by it

    Returns:
        (L, U) with L unit lower triangular and U upper triangular

    Raises:
        DegeneratePivotError: If U[k, k] == 0 and check_pivots is set
    """
    U = check_square(A, "A")
    n = U.shape[0]
    L = identity(n)

    for k in range(n - 1):
        if check_pivots:
            _check_pivot(U[k, k], k, "lu_decompose")
        for i in range(k + 1, n):
            L[i, k] = np.divide(U[i, k], U[k, k])
            U[i, :k + 1] = 0.0
            for j in range(k + 1, n):
                U[i, j] -= L[i, k] * U[k, j]

    return L, U


def forward_substitute(
    L: ArrayLike,
    b: ArrayLike,
    check_pivots: bool = True,
) -> NDArray:
    """
    Solve L y = b for lower triangular L, top to bottom.

    The diagonal of L need not be unit. Entries above the diagonal are
    ignored.

    Raises:
        DegeneratePivotError: If a diagonal entry is zero and
            check_pivots is set
    """
    L = check_square(L, "L")
    n = L.shape[0]
    b = check_vector(b, "b", size=n)
    y = zeros(n)
    if n == 0:
        return y

    if check_pivots:
        _check_pivot(L[0, 0], 0, "forward_substitute")
    y[0] = np.divide(b[0], L[0, 0])
    for k in range(n - 1):
        for i in range(k + 1, n):
            b[i] -= L[i, k] * y[k]
        if check_pivots:
            _check_pivot(L[k + 1, k + 1], k + 1, "forward_substitute")
        y[k + 1] = np.divide(b[k + 1], L[k + 1, k + 1])
    return y


def backward_substitute(
    U: ArrayLike,
    y: ArrayLike,
    check_pivots: bool = True,
) -> NDArray:
    """
    Solve U x = y for upper triangular U, bottom to top.

    Raises:
        DegeneratePivotError: If a diagonal entry is zero and
            check_pivots is set
    """
    U = check_square(U, "U")
    n = U.shape[0]
    y = check_vector(y, "y", size=n)
    x = zeros(n)

    for k in range(n - 1, -1, -1):
        if check_pivots:
            _check_pivot(U[k, k], k, "backward_substitute")
        x[k] = np.divide(y[k], U[k, k])
        for i in range(k):
            y[i] -= U[i, k] * x[k]
    return x


def lu_solve(A: ArrayLike, b: ArrayLike) -> NDArray:
    """Solve A x = b through lu_decompose and two substitutions."""
    L, U = lu_decompose(A)
    return backward_substitute(U, forward_substitute(L, b))
