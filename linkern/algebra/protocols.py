"""Linear algebra backend protocol."""

from typing import Protocol, Sequence
from numpy.typing import ArrayLike, NDArray


class LinearAlgebraBackend(Protocol):
    """
    Protocol for the kernel operations.
    Allows swapping the loop kernels for a vectorized implementation.
    """

    def multiply(self, A: ArrayLike, B: ArrayLike) -> NDArray:
        """
        Compute the matrix product A B.

        Args:
            A: Matrix (m, n)
            B: Matrix (n, p)

        Returns:
            Product (m, p)
        """
        ...

    def solve(self, A: ArrayLike, B: ArrayLike) -> NDArray:
        """
        Solve linear system A X = B.

        Args:
            A: Square system matrix
            B: Right-hand side(s)

        Returns:
            Solution X with the shape of B

        Raises:
            SingularMatrixError: If A is singular
        """
        ...

    def inverse(self, A: ArrayLike) -> NDArray:
        """
        Invert a square matrix.

        Raises:
            SingularMatrixError: If A is singular
        """
        ...

    def determinant(self, A: ArrayLike) -> float:
        """Compute det(A); 0.0 for a singular matrix."""
        ...

    def lu_decompose(self, A: ArrayLike) -> tuple[NDArray, NDArray]:
        """
        Factor A = L U without pivoting.

        Returns:
            (L, U) with L unit lower triangular, U upper triangular
        """
        ...

    def forward_substitute(self, L: ArrayLike, b: ArrayLike) -> NDArray:
        """Solve L y = b for lower triangular L."""
        ...

    def backward_substitute(self, U: ArrayLike, y: ArrayLike) -> NDArray:
        """Solve U x = y for upper triangular U."""
        ...

    def gram_schmidt(self, vectors: Sequence[ArrayLike]) -> list[NDArray]:
        """Orthogonalize vectors without normalizing them."""
        ...
