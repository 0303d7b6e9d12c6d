"""Dense linear algebra kernels."""

from linkern.kernels.product import (
    identity,
    zeros,
    transpose,
    multiply,
    dot_product,
)
from linkern.kernels.elimination import (
    PivotStrategy,
    EliminationOptions,
    DEFAULT_OPTIONS,
    echelon_form,
    gauss_elimination,
    solve,
    inverse,
)
from linkern.kernels.triangular import (
    lu_decompose,
    forward_substitute,
    backward_substitute,
    lu_solve,
)
from linkern.kernels.determinants import determinant, determinant_lu
from linkern.kernels.orthogonal import gram_schmidt

__all__ = [
    "identity",
    "zeros",
    "transpose",
    "multiply",
    "dot_product",
    "PivotStrategy",
    "EliminationOptions",
    "DEFAULT_OPTIONS",
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
]
