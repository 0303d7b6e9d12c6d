"""
Exception hierarchy for linkern.

All exceptions inherit from LinkernError so callers can catch any
library error in one place. Numerical failures are raised as typed
exceptions and are never swallowed or downgraded to a log message.
"""

from typing import Optional


class LinkernError(Exception):
    """Base exception for all linkern errors."""
    pass


class ValidationError(LinkernError):
    """
    Input validation failed.

    Raised when an argument cannot be used as a real-valued vector or
    matrix (non-numeric data, non-finite entries, wrong rank).
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Attributes:
        expected: Expected shape or size, if known
        actual: Shape or size that was received, if known
    """

    def __init__(
        self,
        message: str,
        expected: Optional[object] = None,
        actual: Optional[object] = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class NumericalError(LinkernError):
    """Base class for failures arising during a numerical kernel."""
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised by echelon reduction when the magnitude of the selected pivot
    in a column is exactly zero. Propagates unchanged through the Gauss
    solver and the inverse.

    Attributes:
        column: Pivot column in which elimination stopped
    """

    def __init__(self, message: str, column: Optional[int] = None):
        super().__init__(message)
        self.column = column


class DegeneratePivotError(NumericalError):
    """
    Zero diagonal pivot in an unpivoted kernel.

    Raised by LU decomposition and the triangular substitution kernels
    when a diagonal entry they must divide by is exactly zero.

    Attributes:
        index: Row/column index of the zero diagonal entry
    """

    def __init__(self, message: str, index: Optional[int] = None):
        super().__init__(message)
        self.index = index
