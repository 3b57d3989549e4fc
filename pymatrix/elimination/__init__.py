"""
Gaussian elimination.

Public API:
    triangularize(m) -> TriangularSolution
    invert(m) -> InverseSolution
    determinant(m), rank(m), nullity(m), inverse(m)
    trace(m), transpose(m)

Example:
    >>> from pymatrix.elimination import triangularize, determinant
    >>> upper, sign = triangularize([[1.1, 2.2], [3.3, 4.4]])
    >>> determinant([[2.0, 0.0], [0.0, 3.0]])
    6.0
"""

from pymatrix.elimination.design import EliminationDesign
from pymatrix.elimination.solution import (
    TriangularSolution,
    TriangularParams,
    InverseSolution,
    InverseParams,
)
from pymatrix.elimination.solvers import (
    triangularize,
    invert,
    inverse,
    determinant,
    rank,
    nullity,
    trace,
    transpose,
)

__all__ = [
    "triangularize",
    "invert",
    "inverse",
    "determinant",
    "rank",
    "nullity",
    "trace",
    "transpose",
    "EliminationDesign",
    "TriangularSolution",
    "TriangularParams",
    "InverseSolution",
    "InverseParams",
]
