"""Dense linear algebra backend using NumPy/SciPy."""

from typing import Sequence

import numpy as np
import scipy.linalg
from numpy.typing import ArrayLike, NDArray

from linkern.core.exceptions import (
    DegeneratePivotError,
    DimensionError,
    SingularMatrixError,
)
from linkern.core.validation import (
    check_array,
    check_finite,
    check_matrix,
    check_same_rows,
    check_square,
    check_vector,
)


def _check_diagonal(T: NDArray, kernel: str) -> None:
    zero = np.flatnonzero(np.diag(T) == 0.0)
    if zero.size:
        index = int(zero[0])
        raise DegeneratePivotError(
            f"{kernel}: zero diagonal pivot at index {index}", index=index
        )


class DenseBackend:
    """Vectorized NumPy/SciPy implementation of the kernel operations."""

    def multiply(self, A: ArrayLike, B: ArrayLike) -> NDArray:
        """Matrix product via numpy matmul."""
        A = check_matrix(A, "A")
        B = check_matrix(B, "B")
        if A.shape[1] != B.shape[0]:
            raise DimensionError(
                f"Cannot multiply {A.shape} by {B.shape}: inner dimensions "
                f"differ",
                expected=A.shape[1],
                actual=B.shape[0],
            )
        return A @ B

    def solve(self, A: ArrayLike, B: ArrayLike) -> NDArray:
        """Solve A X = B with LAPACK gesv."""
        A = check_square(A, "A")
        B = check_array(B, "B")
        if B.ndim not in (1, 2):
            raise DimensionError(
                f"B: expected 1D or 2D array, got {B.ndim}D",
                expected=(1, 2),
                actual=B.ndim,
            )
        check_finite(B, "B")
        check_same_rows(A, B, ("A", "B"))
        try:
            return np.linalg.solve(A, B)
        except np.linalg.LinAlgError as e:
            raise SingularMatrixError(f"Singular matrix: {e}") from e

    def inverse(self, A: ArrayLike) -> NDArray:
        """Invert A with LAPACK."""
        A = check_square(A, "A")
        try:
            return np.linalg.inv(A)
        except np.linalg.LinAlgError as e:
            raise SingularMatrixError(f"Singular matrix: {e}") from e

    def determinant(self, A: ArrayLike) -> float:
        """Determinant from LAPACK's LU."""
        return float(np.linalg.det(check_square(A, "A")))

    def lu_decompose(self, A: ArrayLike) -> tuple[NDArray, NDArray]:
        """
        Doolittle LU without pivoting, one rank-1 update per column.

        scipy.linalg.lu always pivots, so the unpivoted factors are
        computed here directly.
        """
        U = check_square(A, "A")
        n = U.shape[0]
        L = np.eye(n)

        for k in range(n - 1):
            if U[k, k] == 0.0:
                raise DegeneratePivotError(
                    f"lu_decompose: zero diagonal pivot at index {k}", index=k
                )
            L[k + 1:, k] = U[k + 1:, k] / U[k, k]
            U[k + 1:, k + 1:] -= np.outer(L[k + 1:, k], U[k, k + 1:])
            U[k + 1:, k] = 0.0

        return L, U

    def forward_substitute(self, L: ArrayLike, b: ArrayLike) -> NDArray:
        """Solve L y = b with scipy's triangular solver."""
        L = check_square(L, "L")
        b = check_vector(b, "b", size=L.shape[0])
        _check_diagonal(L, "forward_substitute")
        return scipy.linalg.solve_triangular(L, b, lower=True)

    def backward_substitute(self, U: ArrayLike, y: ArrayLike) -> NDArray:
        """Solve U x = y with scipy's triangular solver."""
        U = check_square(U, "U")
        y = check_vector(y, "y", size=U.shape[0])
        _check_diagonal(U, "backward_substitute")
        return scipy.linalg.solve_triangular(U, y, lower=False)

    def gram_schmidt(self, vectors: Sequence[ArrayLike]) -> list[NDArray]:
        """Classical Gram-Schmidt with vectorized projections."""
        if len(vectors) == 0:
            return []

        first = check_vector(vectors[0], "vectors[0]")
        basis = np.zeros((len(vectors), first.shape[0]))
        basis[0] = first

        for idx in range(1, len(vectors)):
            v = check_vector(
                vectors[idx], f"vectors[{idx}]", size=first.shape[0]
            )
            prev = basis[:idx]
            norms_sq = np.einsum("ij,ij->i", prev, prev)
            live = norms_sq != 0.0
            coeffs = (prev[live] @ v) / norms_sq[live]
            basis[idx] = v - coeffs @ prev[live]

        return [row.copy() for row in basis]
