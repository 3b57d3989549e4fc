"""
Elimination Design.

A design is the validated, owned input to the elimination engine: a
private copy of the caller's matrix that has been checked for a supported
element kind and for finiteness. Backends read from it and never write to
it, so the same design can be reduced more than once.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.kinds import ElementKind, kind_of
from pymatrix.core.validation import check_2d, check_finite
from pymatrix.dense.store import DenseMatrixStore

if TYPE_CHECKING:
    from pymatrix.dense.matrix import Matrix


@dataclass(frozen=True)
class EliminationDesign:
    """
    Validated, read-only input to Gaussian elimination.

    Immutable after construction; the wrapped buffer is read-only.

    Construction:
        EliminationDesign.from_matrix(m)          # from a Matrix
        EliminationDesign.from_store(store)       # from a DenseMatrixStore
        EliminationDesign.from_array(array)       # from any 2-D array-like
    """
    _array: NDArray[Any]
    _kind: ElementKind

    @classmethod
    def from_matrix(cls, matrix: Matrix) -> EliminationDesign:
        """Build a design from a Matrix."""
        return cls._build(matrix.to_numpy())

    @classmethod
    def from_store(cls, store: DenseMatrixStore) -> EliminationDesign:
        """Build a design from a store. The store is copied, not consumed."""
        return cls._build(store.array.copy())

    @classmethod
    def from_array(cls, array: ArrayLike) -> EliminationDesign:
        """Build a design from a 2-D array-like, promoting integers to float64."""
        store = DenseMatrixStore.from_array(array)
        return cls._build(store.array)

    @classmethod
    def _build(cls, array: NDArray[Any]) -> EliminationDesign:
        """Internal builder with validation. Takes ownership of `array`."""
        check_2d(array, 'matrix')
        kind = kind_of(array)
        check_finite(array, kind, 'matrix')

        array.flags.writeable = False
        return cls(_array=array, _kind=kind)

    # === Properties ===

    @property
    def array(self) -> NDArray[Any]:
        """Read-only (rows, columns) buffer. Copy before mutating."""
        return self._array

    @property
    def kind(self) -> ElementKind:
        """Element kind."""
        return self._kind

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._array.shape[0]

    @property
    def columns(self) -> int:
        """Number of columns."""
        return self._array.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns)."""
        return self._array.shape

    @property
    def is_square(self) -> bool:
        return self.rows == self.columns

    def working_copy(self) -> NDArray[Any]:
        """Fresh writable copy of the buffer for a backend to reduce."""
        return np.array(self._array, copy=True)
