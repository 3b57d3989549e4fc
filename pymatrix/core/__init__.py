"""
Core infrastructure for pymatrix.

This module provides shared abstractions and utilities used by the dense
matrix type and the elimination engine.

Key components:
    protocols: DenseMatrix, EliminationBackend protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    kinds: Supported floating-point element kinds
    validation: Input validators
    compute: Timing and tolerance tiers
"""

from pymatrix.core.protocols import DenseMatrix, EliminationBackend
from pymatrix.core.result import Result
from pymatrix.core.kinds import ElementKind, BINARY, DECIMAL, get_kind, kind_of
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    InvalidOperandError,
    ShapeMismatchError,
    NumericalError,
    NotReducibleError,
    NotInvertibleError,
)

__all__ = [
    # Protocols
    "DenseMatrix",
    "EliminationBackend",
    # Result
    "Result",
    # Kinds
    "ElementKind",
    "BINARY",
    "DECIMAL",
    "get_kind",
    "kind_of",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "InvalidOperandError",
    "ShapeMismatchError",
    "NumericalError",
    "NotReducibleError",
    "NotInvertibleError",
]
