"""
Input validation utilities for pymatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except integer -> float promotion)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from decimal import Decimal
from typing import Any
import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import ValidationError, ShapeMismatchError
from pymatrix.core.kinds import ElementKind, BINARY


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[Any]:
    """
    Validate and convert input to a numeric numpy array.

    Accepts any array-like and converts to numpy array. Object arrays are
    accepted only when every element is a Decimal; any other object dtype
    indicates mixed types or non-numeric data. Integer input is promoted to
    float64, as is single precision.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        float64 ndarray, or object ndarray of Decimal

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        for value in result.flat:
            if not isinstance(value, Decimal):
                raise ValidationError(
                    f"{name}: converted to object dtype, indicating mixed types "
                    f"or non-numeric data (found {type(value).__name__})"
                )
        return result

    if result.dtype == np.bool_ or not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype} is not supported"
        )

    if result.dtype != np.float64:
        result = result.astype(np.float64)

    return result


def check_scalar(value: Any, name: str) -> None:
    """
    Verify a value is a real number or a Decimal.

    Raises:
        ValidationError: If the value is boolean or non-numeric
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (numbers.Real, Decimal)):
        raise ValidationError(
            f"{name}: expected a real number or Decimal, got {type(value).__name__} {value!r}"
        )


def check_finite(array: NDArray[Any], kind: ElementKind, name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        kind: Element kind of the array
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if kind is BINARY:
        if not np.all(np.isfinite(array)):
            n_nan = int(np.sum(np.isnan(array)))
            n_inf = int(np.sum(np.isinf(array)))
            raise ValidationError(
                f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
            )
        return

    n_bad = sum(1 for value in array.flat if not kind.is_finite(value))
    if n_bad:
        raise ValidationError(f"{name}: contains {n_bad} non-finite Decimal values")


def check_2d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Raises:
        ValidationError: If array is not 2D
    """
    if array.ndim != 2:
        raise ValidationError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
        )


def check_dimensions(columns: int, rows: int, name: str) -> None:
    """
    Verify matrix dimensions are non-negative integers.

    Raises:
        ValidationError: If either dimension is negative or not an integer
    """
    for label, value in (('columns', columns), ('rows', rows)):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise ValidationError(f"{name}: {label} must be an integer, got {value!r}")
        if value < 0:
            raise ValidationError(f"{name}: {label} must be >= 0, got {value}")


def check_square(shape: tuple[int, int], operation: str) -> None:
    """
    Verify a (rows, columns) shape is square.

    Raises:
        ShapeMismatchError: If rows != columns
    """
    rows, columns = shape
    if rows != columns:
        raise ShapeMismatchError(
            f"{operation}: matrix isn't square ({rows} rows x {columns} columns)",
            operation=operation,
            expected='rows == columns',
            actual=shape,
        )


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two (rows, columns) shapes are identical.

    Raises:
        ShapeMismatchError: If rows or columns differ
    """
    if left[0] != right[0]:
        raise ShapeMismatchError(
            f"{operation}: rows mismatch ({left[0]} vs {right[0]})",
            operation=operation,
            expected=f'{left[0]} rows',
            actual=(left, right),
        )
    if left[1] != right[1]:
        raise ShapeMismatchError(
            f"{operation}: columns mismatch ({left[1]} vs {right[1]})",
            operation=operation,
            expected=f'{left[1]} columns',
            actual=(left, right),
        )


def check_inner_dimensions(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify the left operand's columns equal the right operand's rows.

    Raises:
        ShapeMismatchError: If the inner dimensions differ
    """
    if left[1] != right[0]:
        raise ShapeMismatchError(
            f"{operation}: columns on left hand matrix ({left[1]}) mismatch "
            f"with rows on right hand matrix ({right[0]})",
            operation=operation,
            expected=f'{left[1]} rows on the right',
            actual=(left, right),
        )
