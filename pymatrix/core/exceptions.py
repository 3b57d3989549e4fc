"""
Exception hierarchy for pymatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all pymatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks (negative
    dimensions, non-numeric cells, non-finite values, wrong array rank).
    """
    pass


class InvalidOperandError(ValidationError):
    """
    Element kind is not one of the supported floating-point kinds.

    Raised when an operand holds integral, boolean, complex or otherwise
    unsupported values where a floating kind ('binary' or 'decimal') is
    required, or when two operands of different kinds are combined.

    Attributes:
        operand_kind: Description of the offending kind or dtype, if known
    """

    def __init__(self, message: str, operand_kind: str | None = None):
        super().__init__(message)
        self.operand_kind = operand_kind


class ShapeMismatchError(ValidationError):
    """
    Matrix shape does not satisfy the operation's requirement.

    Raised when an operation requires a square matrix (trace, determinant,
    inverse) or matching dimensions (elementwise ops, products) and the
    input violates it.

    Attributes:
        operation: Name of the operation that rejected the shape
        expected: Description of the required shape
        actual: The shape(s) actually received, as (rows, columns)
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        expected: str | None = None,
        actual: tuple | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.expected = expected
        self.actual = actual


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from the elimination engine.
    """
    pass


class NotReducibleError(NumericalError):
    """
    Triangularization could not make progress.

    No row swap or row combination applied while entries remained below
    the diagonal. Unreachable for well-formed floating matrices; treat as
    an internal invariant violation rather than a recoverable condition.

    Attributes:
        shape: Shape of the working matrix, as (rows, columns)
        iterations: Number of elimination steps completed before the stall
    """

    def __init__(
        self,
        message: str,
        shape: tuple[int, int] | None = None,
        iterations: int | None = None,
    ):
        super().__init__(message)
        self.shape = shape
        self.iterations = iterations


class NotInvertibleError(NumericalError):
    """
    Identity-form reduction stalled on a zero pivot.

    Raised by inversion when no swap, combination or normalization step
    applies and the working matrix is not yet the identity. This is the
    path taken for singular matrices.

    Attributes:
        shape: Shape of the matrix, as (rows, columns)
        iterations: Number of elimination steps completed before the stall
        rank: Number of nonzero rows in the stalled working matrix
    """

    def __init__(
        self,
        message: str,
        shape: tuple[int, int] | None = None,
        iterations: int | None = None,
        rank: int | None = None,
    ):
        super().__init__(message)
        self.shape = shape
        self.iterations = iterations
        self.rank = rank
