"""Backend factory and dispatch logic."""

from typing import Any

from linkern.algebra.dense import DenseBackend
from linkern.algebra.kernel import KernelBackend
from linkern.algebra.protocols import LinearAlgebraBackend


_BACKENDS = {
    "kernel": KernelBackend,
    "dense": DenseBackend,
}


def list_backends() -> list[str]:
    """Names accepted by get_backend."""
    return sorted(_BACKENDS)


def get_backend(name: str = "kernel", **kwargs: Any) -> LinearAlgebraBackend:
    """
    Construct a backend by name.

    Args:
        name: "kernel" for the loop kernels, "dense" for NumPy/SciPy
        **kwargs: Passed to the backend constructor

    Returns:
        Backend instance

    Raises:
        ValueError: If the name is unknown
    """
    try:
        backend_cls = _BACKENDS[name]
    except KeyError:
        raise ValueError(
            f"Unknown backend {name!r}; choose from {list_backends()}"
        ) from None
    return backend_cls(**kwargs)
