"""Backend that runs the pure loop kernels."""

from typing import Optional, Sequence

from numpy.typing import ArrayLike, NDArray

from linkern.kernels import (
    determinants,
    elimination,
    orthogonal,
    product,
    triangular,
)
from linkern.kernels.elimination import EliminationOptions


class KernelBackend:
    """
    Loop kernels behind the backend protocol.

    Pivoting and pivot checks are fixed at construction so callers can
    hold one configured backend.
    """

    def __init__(
        self,
        options: Optional[EliminationOptions] = None,
        check_pivots: bool = True,
    ) -> None:
        self.options = options or elimination.DEFAULT_OPTIONS
        self.check_pivots = check_pivots

    def multiply(self, A: ArrayLike, B: ArrayLike) -> NDArray:
        return product.multiply(A, B)

    def solve(self, A: ArrayLike, B: ArrayLike) -> NDArray:
        """Gauss elimination; returns only the solution X."""
        _, X = elimination.gauss_elimination(A, B, self.options)
        return X

    def inverse(self, A: ArrayLike) -> NDArray:
        return elimination.inverse(A, self.options)

    def determinant(self, A: ArrayLike) -> float:
        return determinants.determinant(A)

    def lu_decompose(self, A: ArrayLike) -> tuple[NDArray, NDArray]:
        return triangular.lu_decompose(A, check_pivots=self.check_pivots)

    def forward_substitute(self, L: ArrayLike, b: ArrayLike) -> NDArray:
        return triangular.forward_substitute(
            L, b, check_pivots=self.check_pivots
        )

    def backward_substitute(self, U: ArrayLike, y: ArrayLike) -> NDArray:
        return triangular.backward_substitute(
            U, y, check_pivots=self.check_pivots
        )

    def gram_schmidt(self, vectors: Sequence[ArrayLike]) -> list[NDArray]:
        return orthogonal.gram_schmidt(vectors)
