"""Matrix/vector products and container helpers."""

import numpy as np
from numpy.typing import ArrayLike, NDArray

from linkern.core.exceptions import DimensionError
from linkern.core.validation import check_matrix, check_vector


def identity(n: int) -> NDArray:
    """Return the n x n identity matrix."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    result = np.zeros((n, n))
    for i in range(n):
        result[i, i] = 1.0
    return result


def zeros(n: int) -> NDArray:
    """Return the zero vector of length n."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    return np.zeros(n)


def transpose(A: ArrayLike) -> NDArray:
    """
    Transpose an (m, n) matrix into a new (n, m) matrix.

    The result never shares memory with the input.
    """
    A = check_matrix(A, "A")
    m, n = A.shape
    result = np.zeros((n, m))
    for i in range(m):
        for j in range(n):
            result[j, i] = A[i, j]
    return result


def multiply(A: ArrayLike, B: ArrayLike) -> NDArray:
    """
    Matrix product C = A B.

    Args:
        A: Matrix (m, n)
        B: Matrix (n, p)

    Returns:
        C of shape (m, p) with C[i, j] = Σ_k A[i, k] B[k, j]

    Raises:
        DimensionError: If the inner dimensions differ
    """
    A = check_matrix(A, "A")
    B = check_matrix(B, "B")
    m, n = A.shape
    if B.shape[0] != n:
        raise DimensionError(
            f"Cannot multiply {A.shape} by {B.shape}: inner dimensions differ",
            expected=n,
            actual=B.shape[0],
        )
    p = B.shape[1]

    result = np.zeros((m, p))
    for i in range(m):
        for j in range(p):
            for k in range(n):
                result[i, j] += A[i, k] * B[k, j]
    return result


def dot_product(v1: ArrayLike, v2: ArrayLike) -> float:
    """Inner product Σ v1[i] v2[i] of two equal-length vectors."""
    v1 = check_vector(v1, "v1")
    v2 = check_vector(v2, "v2", size=v1.shape[0])
    total = 0.0
    for a, b in zip(v1, v2):
        total += float(a) * float(b)
    return total
