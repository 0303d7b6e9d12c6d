"""Core exceptions and input validation."""

from linkern.core.exceptions import (
    LinkernError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
    DegeneratePivotError,
)

__all__ = [
    "LinkernError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
    "DegeneratePivotError",
]
