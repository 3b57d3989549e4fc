"""
Tests for DenseMatrixStore.

Validates:
    - Factories: zeros, identity, from_flat, from_array
    - (column, row) addressing and bounds
    - clone independence
"""

from decimal import Decimal

import numpy as np
import pytest

from pymatrix.core.exceptions import InvalidOperandError, ShapeMismatchError, ValidationError
from pymatrix.core.kinds import BINARY, DECIMAL
from pymatrix.dense.store import DenseMatrixStore


# ═══════════════════════════════════════════════════════════════════════
# Factories
# ═══════════════════════════════════════════════════════════════════════


class TestFactories:

    def test_zeros_dimensions(self):
        store = DenseMatrixStore.zeros(3, 2)
        assert store.columns == 3
        assert store.rows == 2
        assert store.shape == (2, 3)
        assert store.values == (0.0,) * 6

    def test_zero_columns_forces_zero_rows(self):
        store = DenseMatrixStore.zeros(0, 5)
        assert store.shape == (0, 0)

    def test_zeros_negative_rejected(self):
        with pytest.raises(ValidationError, match="columns must be >= 0"):
            DenseMatrixStore.zeros(-1, 2)

    def test_identity_decimal(self):
        store = DenseMatrixStore.identity(2, DECIMAL)
        assert store.kind is DECIMAL
        assert store.values == (Decimal(1), Decimal(0), Decimal(0), Decimal(1))

    def test_from_flat_row_major(self):
        store = DenseMatrixStore.from_flat(2, [1, 2, 3, 4, 5, 6])
        assert store.shape == (3, 2)
        assert store.get(1, 0) == 2.0
        assert store.get(0, 2) == 5.0

    def test_from_flat_not_multiple(self):
        with pytest.raises(ShapeMismatchError, match="not a multiple of 2 columns"):
            DenseMatrixStore.from_flat(2, [1, 2, 3])

    def test_from_flat_zero_columns_with_values(self):
        with pytest.raises(ShapeMismatchError, match="zero-column"):
            DenseMatrixStore.from_flat(0, [1.0])

    def test_from_flat_zero_columns_empty(self):
        assert DenseMatrixStore.from_flat(0, []).shape == (0, 0)

    def test_from_array_promotes_int(self):
        store = DenseMatrixStore.from_array(np.array([[1, 2]], dtype=np.int64))
        assert store.kind is BINARY
        assert store.array.dtype == np.float64

    def test_from_array_copies(self):
        source = np.array([[1.0, 2.0]])
        store = DenseMatrixStore.from_array(source)
        store.set(0, 0, 9.0)
        assert source[0, 0] == 1.0

    def test_from_array_rejects_1d(self):
        with pytest.raises(ValidationError, match="expected 2D"):
            DenseMatrixStore.from_array([1.0, 2.0])


# ═══════════════════════════════════════════════════════════════════════
# Element access
# ═══════════════════════════════════════════════════════════════════════


class TestElementAccess:

    def test_get_returns_python_float(self):
        store = DenseMatrixStore.from_flat(2, [1.5, 2.5])
        value = store.get(1, 0)
        assert value == 2.5 and type(value) is float

    def test_set_coerces_to_kind(self):
        store = DenseMatrixStore.zeros(2, 2, DECIMAL)
        store.set(1, 0, 1.1)
        assert store.get(1, 0) == Decimal('1.1')

    def test_set_rejects_bool(self):
        store = DenseMatrixStore.zeros(1, 1)
        with pytest.raises(InvalidOperandError):
            store.set(0, 0, True)

    @pytest.mark.parametrize("column, row", [(2, 0), (0, 2), (-1, 0)])
    def test_out_of_range(self, column, row):
        store = DenseMatrixStore.zeros(2, 2)
        with pytest.raises(IndexError, match="out of range"):
            store.get(column, row)


# ═══════════════════════════════════════════════════════════════════════
# clone
# ═══════════════════════════════════════════════════════════════════════


class TestClone:

    def test_clone_is_independent(self):
        store = DenseMatrixStore.from_flat(2, [1.0, 2.0, 3.0, 4.0])
        copy = store.clone()
        copy.set(0, 0, -1.0)
        assert store.get(0, 0) == 1.0
        assert copy.kind is store.kind

    def test_repr(self):
        store = DenseMatrixStore.zeros(3, 2, DECIMAL)
        assert repr(store) == "DenseMatrixStore(columns=3, rows=2, kind='decimal')"
