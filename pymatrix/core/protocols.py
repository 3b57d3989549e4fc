"""
Core protocols for pymatrix.

These define structural interfaces that implementations must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so
that any row-major dense container can be handed to the engine.

Design Principles:
    - Minimal contracts: prescribe only what the engine actually touches
    - (column, row) addressing throughout, matching the public Matrix type
    - Type-safe: use generics to preserve payload types through Result
"""

from typing import Protocol, TypeVar, Any, runtime_checkable

P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class DenseMatrix(Protocol):
    """
    Minimal protocol for a row-major dense matrix.

    The elimination engine consumes this abstraction: element access,
    dimensions and cloning. Rows are derived from the flat length and the
    column count; a zero-column matrix has zero rows.
    """

    @property
    def columns(self) -> int:
        """Number of columns."""
        ...

    @property
    def rows(self) -> int:
        """Number of rows."""
        ...

    @property
    def values(self) -> tuple[Any, ...]:
        """All elements, flat, in row-major order."""
        ...

    def get(self, column: int, row: int) -> Any:
        """Element at (column, row)."""
        ...

    def clone(self) -> 'DenseMatrix':
        """Independent copy of the matrix."""
        ...


@runtime_checkable
class EliminationBackend(Protocol[D, P]):
    """
    Protocol for Gaussian-elimination backends.

    A backend takes a validated design (an owned working copy of the input)
    and reduces it to triangular or identity form. Backends are stateless;
    everything they need arrives with the design.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}', e.g. 'cpu_gauss'
        """
        ...

    def triangularize(self, design: D) -> 'Result[P]':
        """
        Reduce the design's matrix to upper-triangular form.

        Raises:
            NotReducibleError: If no elementary step applies before the
                matrix is triangular
        """
        ...

    def invert(self, design: D) -> 'Result[P]':
        """
        Reduce the design's matrix to the identity, returning the inverse.

        Raises:
            ShapeMismatchError: If the matrix is not square
            NotInvertibleError: If reduction stalls on a zero pivot
        """
        ...
