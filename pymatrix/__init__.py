"""
PyMatrix: dense matrices over binary and decimal floating point.

Arithmetic, determinant, rank, nullity and inverse, all driven by a
Gaussian elimination engine with exact pivot tests.

Submodules:
    core: Element kinds, exceptions, validation, result envelope, timing
    dense: The Matrix value type and its mutable store
    elimination: Triangularization, inversion and derived quantities
"""

__version__ = "0.1.0"

from pymatrix import core
from pymatrix import dense
from pymatrix import elimination
from pymatrix.dense import Matrix
from pymatrix.elimination import determinant, rank, nullity, inverse, triangularize, invert

__all__ = [
    "__version__",
    "core",
    "dense",
    "elimination",
    "Matrix",
    "determinant",
    "rank",
    "nullity",
    "inverse",
    "triangularize",
    "invert",
]
