"""
Linkern: dense linear algebra kernels for small fixed-size matrices.

This library provides the numerical building blocks higher-level code
composes:
- Matrix multiplication, transpose and dot products
- Gaussian elimination with partial pivoting (solve, inverse)
- LU decomposition and triangular substitution
- Determinants by cofactor expansion or elimination
- Gram-Schmidt orthogonalization
"""

import logging

__version__ = "0.1.0"

from linkern.core.exceptions import (
    LinkernError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
    DegeneratePivotError,
)
from linkern.kernels import (
    identity,
    zeros,
    transpose,
    multiply,
    dot_product,
    PivotStrategy,
    EliminationOptions,
    echelon_form,
    gauss_elimination,
    solve,
    inverse,
    lu_decompose,
    forward_substitute,
    backward_substitute,
    lu_solve,
    determinant,
    determinant_lu,
    gram_schmidt,
)
from linkern.algebra import get_backend, list_backends

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "LinkernError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
    "DegeneratePivotError",
    "identity",
    "zeros",
    "transpose",
    "multiply",
    "dot_product",
    "PivotStrategy",
    "EliminationOptions",
    "echelon_form",
    "gauss_elimination",
    "solve",
    "inverse",
    "lu_decompose",
    "forward_substitute",
    "backward_substitute",
    "lu_solve",
    "determinant",
    "determinant_lu",
    "gram_schmidt",
    "get_backend",
    "list_backends",
]
