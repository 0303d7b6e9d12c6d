"""
Input validation for the kernels.

Validators fail fast: they raise with the parameter name and the
offending shape instead of coercing or guessing. Every validator that
returns an array returns a fresh float64 copy, so kernels can mutate
the result without touching the caller's data.
"""

from typing import Any, Optional

import numpy as np
from numpy.typing import ArrayLike, NDArray

from linkern.core.exceptions import DimensionError, ValidationError


def check_array(array: ArrayLike, name: str) -> NDArray[np.float64]:
    """
    Convert input to a float64 numpy array (always a copy).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        New float64 array

    Raises:
        ValidationError: If input cannot be converted to a real array
    """
    try:
        result = np.array(array, copy=True)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating ragged rows or "
            f"non-numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex values are not supported")

    if not (
        np.issubdtype(result.dtype, np.number) or result.dtype == np.bool_
    ):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numbers"
        )

    return result.astype(np.float64, copy=False)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_vector(
    array: ArrayLike,
    name: str,
    size: Optional[int] = None,
) -> NDArray[np.float64]:
    """
    Validate a 1D real vector.

    Args:
        array: Input to validate
        name: Parameter name for error messages
        size: Required length, if fixed by another argument

    Returns:
        Float64 copy of shape (size,)

    Raises:
        DimensionError: If input is not 1D or has the wrong length
    """
    result = check_array(array, name)
    if result.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {result.ndim}D with shape "
            f"{result.shape}",
            expected=1,
            actual=result.ndim,
        )
    if size is not None and result.shape[0] != size:
        raise DimensionError(
            f"{name}: expected length {size}, got {result.shape[0]}",
            expected=size,
            actual=result.shape[0],
        )
    check_finite(result, name)
    return result


def check_matrix(array: ArrayLike, name: str) -> NDArray[np.float64]:
    """
    Validate a 2D real matrix.

    Raises:
        DimensionError: If input is not 2D
    """
    result = check_array(array, name)
    if result.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {result.ndim}D with shape "
            f"{result.shape}",
            expected=2,
            actual=result.ndim,
        )
    check_finite(result, name)
    return result


def check_square(array: ArrayLike, name: str) -> NDArray[np.float64]:
    """
    Validate a square 2D real matrix.

    Raises:
        DimensionError: If input is not 2D or not square
    """
    result = check_matrix(array, name)
    rows, cols = result.shape
    if rows != cols:
        raise DimensionError(
            f"{name}: expected square matrix, got shape {result.shape}",
            expected=(rows, rows),
            actual=result.shape,
        )
    return result


def check_same_rows(
    a: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    names: tuple[str, str],
) -> None:
    """
    Verify two arrays share their first dimension.

    Raises:
        DimensionError: If row counts differ
    """
    if a.shape[0] != b.shape[0]:
        raise DimensionError(
            f"Inconsistent row counts: {names[0]}={a.shape[0]}, "
            f"{names[1]}={b.shape[0]}",
            expected=a.shape[0],
            actual=b.shape[0],
        )
