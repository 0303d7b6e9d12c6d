"""Linear algebra backend abstractions."""

from linkern.algebra.protocols import LinearAlgebraBackend
from linkern.algebra.dense import DenseBackend
from linkern.algebra.kernel import KernelBackend
from linkern.algebra.factory import get_backend, list_backends

__all__ = [
    "LinearAlgebraBackend",
    "DenseBackend",
    "KernelBackend",
    "get_backend",
    "list_backends",
]
