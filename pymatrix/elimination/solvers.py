"""
Solver dispatch for Gaussian elimination.

Provides triangularize() and invert() as the engine entry points, plus the
quantities read off them: determinant(), rank(), nullity(), inverse().
trace() and transpose() are re-exported for symmetry with Matrix methods.

Every function accepts a Matrix, a DenseMatrixStore, an EliminationDesign,
an ndarray or a nested sequence of rows. The input is never mutated.
"""

from __future__ import annotations

from typing import Any, Literal, Sequence, Union
import numpy as np
from numpy.typing import ArrayLike

from pymatrix.core.exceptions import ValidationError
from pymatrix.core.validation import check_square
from pymatrix.dense.store import DenseMatrixStore
from pymatrix.dense.matrix import Matrix
from pymatrix.elimination.design import EliminationDesign
from pymatrix.elimination.solution import TriangularSolution, InverseSolution
from pymatrix.elimination.backends.cpu import CPUEliminationBackend


BackendChoice = Literal['auto', 'cpu']

MatrixLike = Union[Matrix, DenseMatrixStore, EliminationDesign, ArrayLike, Sequence[Sequence[Any]]]


def _ensure_design(m: MatrixLike) -> EliminationDesign:
    """Convert any accepted input to an EliminationDesign."""
    if isinstance(m, EliminationDesign):
        return m
    if isinstance(m, Matrix):
        return EliminationDesign.from_matrix(m)
    if isinstance(m, DenseMatrixStore):
        return EliminationDesign.from_store(m)
    if isinstance(m, np.ndarray):
        return EliminationDesign.from_array(m)
    return EliminationDesign.from_matrix(Matrix(m))


def _ensure_matrix(m: MatrixLike) -> Matrix:
    if isinstance(m, Matrix):
        return m
    if isinstance(m, EliminationDesign):
        return Matrix.from_array(m.array)
    if isinstance(m, DenseMatrixStore):
        return Matrix.from_store(m.clone())
    if isinstance(m, np.ndarray):
        return Matrix.from_array(m)
    return Matrix(m)


def _get_backend(backend: BackendChoice):
    """Select backend based on preference."""
    if backend in ('auto', 'cpu'):
        return CPUEliminationBackend()
    raise ValidationError(f"Unknown backend: {backend!r}")


def triangularize(
    m: MatrixLike,
    *,
    backend: BackendChoice = 'auto',
) -> TriangularSolution:
    """
    Reduce a matrix to upper-triangular form by Gaussian elimination.

    Parameters
    ----------
    m : Matrix, DenseMatrixStore, EliminationDesign, or array-like
        Any rectangular matrix of a floating kind.
    backend : str
        'auto' or 'cpu'.

    Returns
    -------
    TriangularSolution
        .matrix is the triangular Matrix, .row_swaps the number of row
        exchanges and .sign the kind's one or minus one. Unpacks as
        (matrix, sign).

    Raises
    ------
    ValidationError
        If the input is malformed or holds NaN or infinity.
    NotReducibleError
        If elimination stalls before reaching triangular form.
    """
    design = _ensure_design(m)
    result = _get_backend(backend).triangularize(design)
    return TriangularSolution(_result=result, _design=design)


def invert(
    m: MatrixLike,
    *,
    backend: BackendChoice = 'auto',
) -> InverseSolution:
    """
    Invert a square matrix by reduction to identity form.

    Parameters
    ----------
    m : Matrix, DenseMatrixStore, EliminationDesign, or array-like
        A square matrix of a floating kind.
    backend : str
        'auto' or 'cpu'.

    Returns
    -------
    InverseSolution
        .inverse is the inverse Matrix; .warnings lists rows whose diagonal
        had to be forced to one after scaling.

    Raises
    ------
    ShapeMismatchError
        If the matrix isn't square.
    NotInvertibleError
        If the matrix is singular.
    """
    design = _ensure_design(m)
    result = _get_backend(backend).invert(design)
    return InverseSolution(_result=result, _design=design)


def inverse(m: MatrixLike) -> Matrix:
    """Inverse of a square matrix. See invert() for details."""
    return invert(m).inverse


def determinant(m: MatrixLike) -> Any:
    """
    Determinant of a square matrix.

    The product of the triangular form's diagonal, folded left to right
    starting from one and negated after an odd number of row swaps. The
    determinant of a 0x0 matrix is one.

    Returns:
        float for binary matrices, Decimal for decimal matrices

    Raises:
        ShapeMismatchError: If the matrix isn't square
    """
    design = _ensure_design(m)
    check_square(design.shape, 'determinant')
    return triangularize(design).determinant


def rank(m: MatrixLike) -> int:
    """Number of rows of the triangular form with at least one nonzero entry."""
    return triangularize(m).rank


def nullity(m: MatrixLike) -> int:
    """Number of columns minus rank."""
    return triangularize(m).nullity


def trace(m: MatrixLike) -> Any:
    """Sum of the diagonal of a square matrix."""
    return _ensure_matrix(m).trace()


def transpose(m: MatrixLike) -> Matrix:
    """Matrix with rows and columns exchanged."""
    return _ensure_matrix(m).transpose()
