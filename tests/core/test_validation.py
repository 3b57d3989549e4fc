"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, integer promotion, object/bool/complex rejection
    - check_scalar: real and Decimal acceptance
    - check_finite: NaN/Inf detection for both kinds
    - check_2d / check_dimensions: structural checks
    - check_square / check_same_shape / check_inner_dimensions: shape rules
"""

from decimal import Decimal

import numpy as np
import pytest

from pymatrix.core.exceptions import ShapeMismatchError, ValidationError
from pymatrix.core.kinds import BINARY, DECIMAL
from pymatrix.core.validation import (
    check_2d,
    check_array,
    check_dimensions,
    check_finite,
    check_inner_dimensions,
    check_same_shape,
    check_scalar,
    check_square,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to ndarray and rejects non-numeric data."""

    def test_nested_list_to_float_array(self):
        result = check_array([[1, 2], [3, 4]], "m")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [[1.0, 2.0], [3.0, 4.0]])

    def test_int_array_promoted_to_float64(self):
        result = check_array(np.array([[1, 2]], dtype=np.int32), "m")
        assert result.dtype == np.float64

    def test_float32_promoted_to_float64(self):
        result = check_array(np.array([[1.5]], dtype=np.float32), "m")
        assert result.dtype == np.float64

    def test_decimal_object_array_passthrough(self):
        arr = np.array([[Decimal('1.1'), Decimal('2')]], dtype=object)
        result = check_array(arr, "m")
        assert result.dtype == object
        assert result[0, 0] == Decimal('1.1')

    def test_mixed_object_array_rejected(self):
        arr = np.array([[Decimal('1.1'), 'a']], dtype=object)
        with pytest.raises(ValidationError, match="object dtype"):
            check_array(arr, "m")

    def test_string_array_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array([["a", "b"]], "m")

    def test_bool_array_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array([[True, False]], "m")

    def test_complex_array_rejected(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([[1 + 2j]], "m")

    def test_name_in_message(self):
        with pytest.raises(ValidationError, match="^weights:"):
            check_array([["x"]], "weights")


# ═══════════════════════════════════════════════════════════════════════
# check_scalar
# ═══════════════════════════════════════════════════════════════════════


class TestCheckScalar:

    @pytest.mark.parametrize("value", [1, 1.5, np.float64(2.0), np.int64(3), Decimal('4.4')])
    def test_accepts_real_and_decimal(self, value):
        check_scalar(value, "x")

    @pytest.mark.parametrize("value", [True, "1.0", None, 1 + 1j])
    def test_rejects_non_real(self, value):
        with pytest.raises(ValidationError, match="expected a real number"):
            check_scalar(value, "x")


# ═══════════════════════════════════════════════════════════════════════
# check_finite
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFinite:

    def test_finite_binary_passes(self):
        check_finite(np.array([[1.0, 2.0]]), BINARY, "m")

    def test_nan_and_inf_counted(self):
        arr = np.array([[np.nan, np.inf], [-np.inf, 1.0]])
        with pytest.raises(ValidationError, match=r"1 NaN, 2 Inf"):
            check_finite(arr, BINARY, "m")

    def test_finite_decimal_passes(self):
        arr = np.array([[Decimal('1.1')]], dtype=object)
        check_finite(arr, DECIMAL, "m")

    def test_decimal_nan_rejected(self):
        arr = np.array([[Decimal('NaN'), Decimal('Infinity')]], dtype=object)
        with pytest.raises(ValidationError, match="2 non-finite"):
            check_finite(arr, DECIMAL, "m")


# ═══════════════════════════════════════════════════════════════════════
# Structural checks
# ═══════════════════════════════════════════════════════════════════════


class TestCheck2d:

    def test_2d_passes(self):
        check_2d(np.zeros((2, 3)), "m")

    def test_1d_rejected(self):
        with pytest.raises(ValidationError, match="expected 2D array, got 1D"):
            check_2d(np.zeros(3), "m")


class TestCheckDimensions:

    def test_zero_allowed(self):
        check_dimensions(0, 0, "zeros")

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="rows must be >= 0"):
            check_dimensions(2, -1, "zeros")

    def test_float_rejected(self):
        with pytest.raises(ValidationError, match="columns must be an integer"):
            check_dimensions(2.0, 1, "zeros")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            check_dimensions(True, 1, "zeros")


# ═══════════════════════════════════════════════════════════════════════
# Shape rules
# ═══════════════════════════════════════════════════════════════════════


class TestShapeRules:

    def test_square_passes(self):
        check_square((3, 3), "determinant")

    def test_non_square_rejected(self):
        with pytest.raises(ShapeMismatchError, match="determinant: matrix isn't square") as exc_info:
            check_square((2, 3), "determinant")
        assert exc_info.value.operation == "determinant"
        assert exc_info.value.actual == (2, 3)

    def test_same_shape_rows_mismatch(self):
        with pytest.raises(ShapeMismatchError, match="rows mismatch"):
            check_same_shape((2, 3), (3, 3), "add")

    def test_same_shape_columns_mismatch(self):
        with pytest.raises(ShapeMismatchError, match="columns mismatch"):
            check_same_shape((2, 3), (2, 2), "add")

    def test_inner_dimensions(self):
        check_inner_dimensions((2, 3), (3, 4), "matmul")
        with pytest.raises(ShapeMismatchError, match="columns on left hand matrix"):
            check_inner_dimensions((2, 3), (2, 3), "matmul")
