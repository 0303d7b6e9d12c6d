"""Gram-Schmidt orthogonalization."""

import logging
from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from linkern.core.validation import check_vector
from linkern.kernels.product import dot_product


_LOG: logging.Logger = logging.getLogger(__name__)


def gram_schmidt(vectors: Sequence[ArrayLike]) -> list[NDArray]:
    """
    Orthogonalize a sequence of vectors (classical Gram-Schmidt).

    The first vector is kept as is; every later vector has its
    projection onto each previously produced vector removed. Results
    are orthogonal but not normalized.

    Linearly dependent input gives a (near-)zero vector at the dependent
    position. That is returned as is, not raised.

    Args:
        vectors: Vectors of equal length n

    Returns:
        List of orthogonal vectors, same length and order as the input

    Raises:
        DimensionError: If the vectors differ in length
    """
    if len(vectors) == 0:
        return []

    first = check_vector(vectors[0], "vectors[0]")
    n = first.shape[0]
    basis = [first]

    for idx in range(1, len(vectors)):
        v = check_vector(vectors[idx], f"vectors[{idx}]", size=n)
        ortho = v.copy()
        for a in basis:
            norm_sq = dot_product(a, a)
            # a zero vector spans nothing, so there is nothing to remove
            if norm_sq == 0.0:
                continue
            scale = dot_product(a, v) / norm_sq
            ortho = ortho + a * -scale
        if np.allclose(ortho, 0.0):
            _LOG.debug("Vector %d is linearly dependent on its predecessors", idx)
        basis.append(ortho)

    return basis
