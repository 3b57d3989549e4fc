"""
DenseMatrixStore: the mutable row-major buffer behind every matrix.

The public Matrix type is immutable by convention. Algorithms that need
in-place mutation (the elimination engine) clone a matrix into a store,
mutate the store exclusively for the duration of one call, and wrap the
store back into a Matrix on the way out.

Addressing is (column, row), matching the public Matrix type. The buffer
itself is a C-contiguous ndarray of shape (rows, columns), so its flat
order is row-major.
"""

from __future__ import annotations

from typing import Any, Iterable
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import ShapeMismatchError
from pymatrix.core.kinds import ElementKind, BINARY, get_kind, kind_of
from pymatrix.core.validation import check_array, check_2d, check_dimensions


class DenseMatrixStore:
    """
    Mutable dense matrix buffer.

    Construct via the factory classmethods. The constructor trusts its
    arguments: `array` must already be a 2-D C-contiguous array in the
    dtype of `kind`.
    """

    __slots__ = ('_array', '_kind')

    def __init__(self, array: NDArray[Any], kind: ElementKind):
        self._array = array
        self._kind = kind

    # === Factory Methods ===

    @classmethod
    def zeros(
        cls,
        columns: int,
        rows: int,
        kind: str | ElementKind = BINARY,
    ) -> DenseMatrixStore:
        """Zero-filled store. A zero-column store always has zero rows."""
        check_dimensions(columns, rows, 'zeros')
        kind = get_kind(kind)
        if columns == 0:
            rows = 0
        array = np.full((rows, columns), kind.zero, dtype=kind.dtype)
        return cls(array, kind)

    @classmethod
    def identity(cls, size: int, kind: str | ElementKind = BINARY) -> DenseMatrixStore:
        """Square store with ones on the diagonal and zeros elsewhere."""
        store = cls.zeros(size, size, kind)
        for index in range(size):
            store._array[index, index] = store._kind.one
        return store

    @classmethod
    def from_flat(
        cls,
        columns: int,
        values: Iterable[Any],
        kind: str | ElementKind = BINARY,
    ) -> DenseMatrixStore:
        """
        Build a store from flat row-major values.

        Raises:
            ShapeMismatchError: If the value count is not a multiple of columns
        """
        check_dimensions(columns, 0, 'from_flat')
        kind = get_kind(kind)
        values = [kind.coerce(v) for v in values]
        if columns == 0:
            if values:
                raise ShapeMismatchError(
                    f"from_flat: {len(values)} values cannot fill a zero-column matrix",
                    operation='from_flat',
                    expected='no values',
                    actual=(len(values), 0),
                )
            return cls.zeros(0, 0, kind)
        if len(values) % columns:
            raise ShapeMismatchError(
                f"from_flat: {len(values)} values is not a multiple of {columns} columns",
                operation='from_flat',
                expected=f'multiple of {columns} values',
                actual=(len(values), columns),
            )
        array = np.empty((len(values) // columns, columns), dtype=kind.dtype)
        array.flat[:] = values
        return cls(array, kind)

    @classmethod
    def from_array(cls, array: ArrayLike) -> DenseMatrixStore:
        """
        Build a store from a 2-D array, copying it.

        Integer and single-precision input is promoted to float64; object
        arrays must hold only Decimal values.
        """
        checked = check_array(array, 'array')
        check_2d(checked, 'array')
        kind = kind_of(checked)
        if checked.shape[1] == 0:
            return cls.zeros(0, 0, kind)
        return cls(kind.coerce_array(checked), kind)

    # === Properties ===

    @property
    def columns(self) -> int:
        """Number of columns."""
        return self._array.shape[1]

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._array.shape[0]

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns)."""
        return self._array.shape

    @property
    def kind(self) -> ElementKind:
        """Element kind of the stored values."""
        return self._kind

    @property
    def array(self) -> NDArray[Any]:
        """The live 2-D buffer. Mutations are visible to the store."""
        return self._array

    @property
    def values(self) -> tuple[Any, ...]:
        """All elements, flat, in row-major order."""
        return tuple(self._array.ravel().tolist())

    # === Element Access ===

    def _check_index(self, column: int, row: int) -> None:
        if not (0 <= column < self.columns and 0 <= row < self.rows):
            raise IndexError(
                f"(column={column}, row={row}) out of range for "
                f"{self.columns} columns x {self.rows} rows"
            )

    def get(self, column: int, row: int) -> Any:
        """Element at (column, row)."""
        self._check_index(column, row)
        return self._array[row, column].item() if self._kind is BINARY else self._array[row, column]

    def set(self, column: int, row: int, value: Any) -> None:
        """Overwrite the element at (column, row), coercing to the store's kind."""
        self._check_index(column, row)
        self._array[row, column] = self._kind.coerce(value)

    def clone(self) -> DenseMatrixStore:
        """Independent copy."""
        return DenseMatrixStore(self._array.copy(), self._kind)

    def __repr__(self) -> str:
        return (
            f"DenseMatrixStore(columns={self.columns}, rows={self.rows}, "
            f"kind={self._kind.name!r})"
        )
