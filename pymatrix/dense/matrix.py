"""
Matrix: the public dense matrix value type.

A Matrix is immutable by convention: every operation returns a new Matrix
and never mutates its operands. Elements are addressed as (column, row).

Construction:
    Matrix([[1.1, 2.2], [3.3, 4.4]])                  # binary (float64)
    Matrix([[Decimal('1.1'), Decimal('2.2')]])        # decimal, detected
    Matrix([[1, 2], [3, 4]], kind='decimal')          # decimal, explicit
    Matrix.zeros(3, 2)                                # 3 columns x 2 rows
    Matrix.identity(4)
    Matrix.from_array(np.eye(3))
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Iterable, Sequence
import numbers
import operator
import warnings

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import InvalidOperandError
from pymatrix.core.kinds import ElementKind, BINARY, DECIMAL, get_kind
from pymatrix.core.validation import (
    check_scalar,
    check_square,
    check_same_shape,
    check_inner_dimensions,
)
from pymatrix.core.compute.tolerances import select_tolerance
from pymatrix.dense.store import DenseMatrixStore
from pymatrix.dense import _elementwise
from pymatrix.dense._format import render


def _is_scalar(value: Any) -> bool:
    return (
        isinstance(value, (numbers.Real, Decimal))
        and not isinstance(value, (bool, np.bool_))
    )


def _store_from_rows(
    rows: Iterable[Sequence[Any]],
    kind: str | ElementKind | None,
) -> DenseMatrixStore:
    """Build a store from nested row sequences, padding short rows with zeros."""
    materialized = [list(row) for row in rows]
    for row in materialized:
        for value in row:
            check_scalar(value, 'rows')

    if kind is None:
        has_decimal = any(isinstance(v, Decimal) for row in materialized for v in row)
        kind = DECIMAL if has_decimal else BINARY
    else:
        kind = get_kind(kind)

    columns = max((len(row) for row in materialized), default=0)
    if columns == 0:
        return DenseMatrixStore.zeros(0, 0, kind)

    if any(len(row) != columns for row in materialized):
        warnings.warn(
            f"Rows have unequal lengths; padding short rows with zeros "
            f"to {columns} columns",
            UserWarning,
            stacklevel=3,
        )

    values = [v for row in materialized for v in row + [kind.zero] * (columns - len(row))]
    return DenseMatrixStore.from_flat(columns, values, kind)


class Matrix:
    """
    Immutable dense matrix over a floating-point element kind.

    Parameters
    ----------
    rows : iterable of sequences, or Matrix
        One inner sequence per row. The column count is the longest row;
        shorter rows are zero-padded (with a UserWarning). Passing a Matrix
        copies it.
    kind : {'binary', 'decimal'}, optional
        Element kind. Defaults to 'decimal' when any element is a Decimal,
        otherwise 'binary'.
    """

    __slots__ = ('_store',)

    # numpy scalars on the left defer to the reflected operators
    __array_ufunc__ = None

    def __init__(
        self,
        rows: Iterable[Sequence[Any]] | Matrix = (),
        *,
        kind: str | ElementKind | None = None,
    ):
        if isinstance(rows, Matrix):
            store = rows._store.clone()
            if kind is not None and get_kind(kind) is not store.kind:
                target = get_kind(kind)
                store = DenseMatrixStore(target.coerce_array(store.array), target)
        else:
            store = _store_from_rows(rows, kind)
        self._store = store

    # === Factory Methods ===

    @classmethod
    def zeros(cls, columns: int, rows: int, *, kind: str | ElementKind = BINARY) -> Matrix:
        """Zero-filled matrix of the given dimensions."""
        return cls.from_store(DenseMatrixStore.zeros(columns, rows, kind))

    @classmethod
    def identity(cls, size: int, *, kind: str | ElementKind = BINARY) -> Matrix:
        """Identity matrix of the given size."""
        return cls.from_store(DenseMatrixStore.identity(size, kind))

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """Copy a 2-D array; integer input is promoted to float64."""
        return cls.from_store(DenseMatrixStore.from_array(array))

    @classmethod
    def from_store(cls, store: DenseMatrixStore) -> Matrix:
        """Wrap a store without copying it. The caller gives up ownership."""
        matrix = cls.__new__(cls)
        matrix._store = store
        return matrix

    def to_store(self) -> DenseMatrixStore:
        """Mutable copy of this matrix's buffer."""
        return self._store.clone()

    # === Properties ===

    @property
    def columns(self) -> int:
        return self._store.columns

    @property
    def rows(self) -> int:
        return self._store.rows

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns)."""
        return self._store.shape

    @property
    def kind(self) -> ElementKind:
        return self._store.kind

    @property
    def is_square(self) -> bool:
        return self.rows == self.columns

    @property
    def values(self) -> tuple[Any, ...]:
        """All elements, flat, in row-major order."""
        return self._store.values

    @property
    def T(self) -> Matrix:
        return self.transpose()

    # === Element Access ===

    def get(self, column: int, row: int) -> Any:
        """Element at (column, row)."""
        return self._store.get(column, row)

    def __getitem__(self, key: tuple[int, int]) -> Any:
        column, row = key
        return self._store.get(column, row)

    def to_list(self) -> list[list[Any]]:
        """Nested list of rows."""
        return self._store.array.tolist()

    def to_numpy(self) -> NDArray[Any]:
        """Copy of the (rows, columns) buffer."""
        return self._store.array.copy()

    # === Structural Operations ===

    def transpose(self) -> Matrix:
        """New matrix with rows and columns exchanged."""
        return self._wrap(_elementwise.transpose(self._store.array))

    def trace(self) -> Any:
        """
        Sum of the diagonal.

        Raises:
            ShapeMismatchError: If the matrix isn't square
        """
        check_square(self.shape, 'trace')
        return _elementwise.trace(self._store.array, self.kind)

    # === Linear Algebra ===

    def determinant(self) -> Any:
        """Determinant via Gaussian elimination; see pymatrix.elimination.determinant."""
        from pymatrix.elimination.solvers import determinant
        return determinant(self)

    def rank(self) -> int:
        """Number of nonzero rows after triangularization."""
        from pymatrix.elimination.solvers import rank
        return rank(self)

    def nullity(self) -> int:
        """columns - rank."""
        from pymatrix.elimination.solvers import nullity
        return nullity(self)

    def inverse(self) -> Matrix:
        """Inverse via reduction to identity form; see pymatrix.elimination.invert."""
        from pymatrix.elimination.solvers import inverse
        return inverse(self)

    # === Arithmetic ===

    def _wrap(self, array: NDArray[Any]) -> Matrix:
        return Matrix.from_store(DenseMatrixStore(array, self.kind))

    def _check_same_kind(self, other: Matrix, operation: str) -> None:
        if other.kind is not self.kind:
            raise InvalidOperandError(
                f"{operation}: element kinds differ ({self.kind.name} vs {other.kind.name})",
                operand_kind=other.kind.name,
            )

    def _elementwise(self, other: Any, op, operation: str, reflected: bool = False):
        if isinstance(other, Matrix):
            self._check_same_kind(other, operation)
            check_same_shape(self.shape, other.shape, operation)
            return self._wrap(_elementwise.combine(self._store.array, other._store.array, op))
        if not _is_scalar(other):
            return NotImplemented
        scalar = self.kind.coerce(other)
        return self._wrap(
            _elementwise.map_scalar(self._store.array, scalar, op, reflected=reflected)
        )

    def __add__(self, other: Any) -> Matrix:
        return self._elementwise(other, operator.add, 'add')

    def __radd__(self, other: Any) -> Matrix:
        return self._elementwise(other, operator.add, 'add', reflected=True)

    def __sub__(self, other: Any) -> Matrix:
        return self._elementwise(other, operator.sub, 'subtract')

    def __rsub__(self, other: Any) -> Matrix:
        return self._elementwise(other, operator.sub, 'subtract', reflected=True)

    def __mul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return NotImplemented
        return self._elementwise(other, operator.mul, 'multiply')

    def __rmul__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return NotImplemented
        return self._elementwise(other, operator.mul, 'multiply', reflected=True)

    def __truediv__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return NotImplemented
        return self._elementwise(other, operator.truediv, 'divide')

    def __rtruediv__(self, other: Any) -> Matrix:
        if isinstance(other, Matrix):
            return NotImplemented
        return self._elementwise(other, operator.truediv, 'divide', reflected=True)

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_kind(other, 'matmul')
        check_inner_dimensions(self.shape, other.shape, 'matmul')
        return self._wrap(
            _elementwise.product(self._store.array, other._store.array, self.kind)
        )

    def __neg__(self) -> Matrix:
        return self._wrap(_elementwise.negate(self._store.array))

    def __pos__(self) -> Matrix:
        return Matrix(self)

    # === Comparison ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self.kind is other.kind
            and self.shape == other.shape
            and bool(np.all(self._store.array == other._store.array))
        )

    def __hash__(self) -> int:
        return hash((self.kind.name, self.shape, self.values))

    def allclose(
        self,
        other: Matrix,
        *,
        rtol: Any = None,
        atol: Any = None,
    ) -> bool:
        """
        True if every cell satisfies |a - b| <= atol + rtol * |b|.

        Defaults come from the kind's tolerance tier. Matrices of different
        kinds or shapes are never close.
        """
        if self.kind is not other.kind or self.shape != other.shape:
            return False
        tier = select_tolerance(self.kind)
        rtol = self.kind.coerce(tier.rtol if rtol is None else rtol)
        atol = self.kind.coerce(tier.atol if atol is None else atol)

        a = self._store.array
        b = other._store.array
        return bool(np.all(np.abs(a - b) <= atol + rtol * np.abs(b)))

    # === Rendering ===

    def __str__(self) -> str:
        return render(self._store.array, self.kind)

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, columns={self.columns}, kind={self.kind.name!r})"
