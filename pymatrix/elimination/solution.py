"""
Elimination solution types.

Contains the parameter payloads produced by backends and the user-facing
solution wrappers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, TYPE_CHECKING
from numpy.typing import NDArray

from pymatrix.core.kinds import ElementKind
from pymatrix.core.result import Result
from pymatrix.core.validation import check_square
from pymatrix.dense.store import DenseMatrixStore
from pymatrix.dense.matrix import Matrix

if TYPE_CHECKING:
    from pymatrix.elimination.design import EliminationDesign


def _to_matrix(array: NDArray[Any], kind: ElementKind) -> Matrix:
    return Matrix.from_store(DenseMatrixStore(array.copy(), kind))


@dataclass(frozen=True)
class TriangularParams:
    """
    Parameter payload for reduction to upper-triangular form.

    determinant is None for non-square input.
    """
    triangular: NDArray[Any]
    kind: ElementKind
    row_swaps: int
    rank: int
    determinant: Any | None


@dataclass(frozen=True)
class InverseParams:
    """Parameter payload for reduction to identity form."""
    inverse: NDArray[Any]
    kind: ElementKind


@dataclass
class TriangularSolution:
    """
    User-facing triangularization results.

    Unpacks as (matrix, sign):

        >>> upper, sign = triangularize(m)
    """
    _result: Result[TriangularParams]
    _design: 'EliminationDesign'

    @property
    def matrix(self) -> Matrix:
        """The upper-triangular matrix."""
        params = self._result.params
        return _to_matrix(params.triangular, params.kind)

    @property
    def row_swaps(self) -> int:
        """Number of row exchanges performed."""
        return self._result.params.row_swaps

    @property
    def sign(self) -> Any:
        """The kind's one, negated when an odd number of rows were swapped."""
        one = self._result.params.kind.one
        return -one if self.row_swaps % 2 else one

    @property
    def rank(self) -> int:
        """Number of nonzero rows in the triangular form."""
        return self._result.params.rank

    @property
    def nullity(self) -> int:
        """columns - rank."""
        return self._design.columns - self.rank

    @property
    def determinant(self) -> Any:
        """
        Signed product of the triangular diagonal.

        Raises:
            ShapeMismatchError: If the input was not square
        """
        check_square(self._design.shape, 'determinant')
        return self._result.params.determinant

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def __iter__(self) -> Iterator[Any]:
        yield self.matrix
        yield self.sign

    def __repr__(self) -> str:
        rows, columns = self._design.shape
        return (
            f"TriangularSolution(rows={rows}, columns={columns}, "
            f"row_swaps={self.row_swaps}, rank={self.rank}, "
            f"backend={self.backend_name!r})"
        )


@dataclass
class InverseSolution:
    """User-facing inversion results."""
    _result: Result[InverseParams]
    _design: 'EliminationDesign'

    @property
    def inverse(self) -> Matrix:
        """The inverse matrix."""
        params = self._result.params
        return _to_matrix(params.inverse, params.kind)

    @property
    def iterations(self) -> int:
        """Elementary steps taken to reach identity form."""
        return self._result.info['iterations']

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        """One entry per normalization that needed its diagonal forced to one."""
        return self._result.warnings

    def __repr__(self) -> str:
        return (
            f"InverseSolution(size={self._design.rows}, "
            f"iterations={self.iterations}, backend={self.backend_name!r})"
        )
