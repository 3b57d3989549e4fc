"""
Dense row-major matrices.

Public API:
    Matrix: immutable matrix value type with arithmetic and linear algebra
    DenseMatrixStore: mutable buffer used by algorithms that work in place

Example:
    >>> from pymatrix.dense import Matrix
    >>> m = Matrix([[1.1, 2.2], [3.3, 4.4]])
    >>> print(m.T)
    ( 1.1, 3.3 )
    ( 2.2, 4.4 )
"""

from pymatrix.dense.store import DenseMatrixStore
from pymatrix.dense.matrix import Matrix

__all__ = [
    "Matrix",
    "DenseMatrixStore",
]
