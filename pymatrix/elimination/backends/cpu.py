"""
CPU backend for Gaussian elimination.

Reduces a matrix by elementary row operations, one step at a time, and
restarts the search after every step. Step priority is strict:

    triangular form: swap, forward elimination
    identity form:   swap, forward elimination, backward elimination,
                     normalization

Every zero and one test is exact, so float64 and Decimal matrices follow
identical control flow for identical values.
"""

from functools import reduce
from typing import Any
import operator

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import NotReducibleError, NotInvertibleError
from pymatrix.core.kinds import ElementKind
from pymatrix.core.result import Result
from pymatrix.core.compute.timing import Timer
from pymatrix.core.validation import check_square
from pymatrix.elimination import _row_ops
from pymatrix.elimination.design import EliminationDesign
from pymatrix.elimination.solution import TriangularParams, InverseParams


def _new_steps() -> dict[str, int]:
    return {'swap': 0, 'forward': 0, 'backward': 0, 'normalize': 0}


def _triangular_step(work: NDArray[Any], zero: Any) -> str | None:
    """Apply the first applicable step; return its name, or None if stalled."""
    leading = _row_ops.leading_zeros(work, zero)

    swap = _row_ops.find_swap(leading)
    if swap is not None:
        _row_ops.swap_rows(work, *swap)
        return 'swap'

    pivot = _row_ops.find_forward_pivot(work, leading, zero)
    if pivot is not None:
        _row_ops.eliminate(work, *pivot, zero)
        return 'forward'

    return None


def _identity_step(
    work: NDArray[Any],
    augment: NDArray[Any],
    kind: ElementKind,
    residue: list[str],
) -> str | None:
    """Apply the first applicable step to work and augment alike."""
    zero, one = kind.zero, kind.one
    leading = _row_ops.leading_zeros(work, zero)

    swap = _row_ops.find_swap(leading)
    if swap is not None:
        _row_ops.swap_rows(work, *swap)
        _row_ops.swap_rows(augment, *swap)
        return 'swap'

    pivot = _row_ops.find_forward_pivot(work, leading, zero)
    if pivot is not None:
        _row_ops.eliminate(work, *pivot, zero, augment)
        return 'forward'

    trailing = _row_ops.trailing_zeros(work, zero)
    pivot = _row_ops.find_backward_pivot(work, trailing, zero)
    if pivot is not None:
        _row_ops.eliminate(work, *pivot, zero, augment)
        return 'backward'

    row = _row_ops.find_unnormalized_row(work, zero, one)
    if row is not None:
        if not _row_ops.normalize_row(work, row, one, augment):
            residue.append(
                f"row {row}: diagonal * (1 / diagonal) was not exactly one; "
                f"diagonal set to one"
            )
        return 'normalize'

    return None


def _diagonal_product(work: NDArray[Any], kind: ElementKind, row_swaps: int) -> Any:
    product = reduce(operator.mul, np.diagonal(work).tolist(), kind.one)
    if row_swaps % 2:
        product = -product
    return kind.scalar_type(product)


class CPUEliminationBackend:
    """
    CPU backend using Gaussian elimination with exact pivot tests.

    Implements the EliminationBackend protocol for
    EliminationDesign -> TriangularParams / InverseParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_gauss'

    def triangularize(self, design: EliminationDesign) -> Result[TriangularParams]:
        """
        Reduce to upper-triangular form.

        Algorithm:
            1. While any entry below the diagonal is nonzero:
               swap rows if a later row starts further left, otherwise
               eliminate the first row starting left of the diagonal
            2. Read off rank and, for square input, the determinant

        Args:
            design: Validated elimination design

        Returns:
            Result containing TriangularParams

        Raises:
            NotReducibleError: If no step applies before the matrix is
                triangular
        """
        timer = Timer()
        timer.start()

        kind = design.kind
        work = design.working_copy()
        steps = _new_steps()

        # === Elimination ===
        with timer.section('elimination'):
            while not _row_ops.is_triangular(work, kind.zero):
                step = _triangular_step(work, kind.zero)
                if step is None:
                    raise NotReducibleError(
                        f"Matrix can't be made triangular: no swap or elimination "
                        f"applies after {sum(steps.values())} steps",
                        shape=design.shape,
                        iterations=sum(steps.values()),
                    )
                steps[step] += 1

        # === Read Off ===
        with timer.section('read_off'):
            rank = _row_ops.count_nonzero_rows(work, kind.zero)
            determinant = (
                _diagonal_product(work, kind, steps['swap'])
                if design.is_square else None
            )

        timer.stop()

        params = TriangularParams(
            triangular=work,
            kind=kind,
            row_swaps=steps['swap'],
            rank=rank,
            determinant=determinant,
        )

        info: dict[str, Any] = {
            'method': 'gaussian_elimination',
            'iterations': sum(steps.values()),
            'row_swaps': steps['swap'],
            'steps': steps,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )

    def invert(self, design: EliminationDesign) -> Result[InverseParams]:
        """
        Reduce to identity form, carrying an identity matrix along.

        Whatever the identity matrix has become when the working matrix
        reaches identity form is the inverse.

        Args:
            design: Validated elimination design

        Returns:
            Result containing InverseParams

        Raises:
            ShapeMismatchError: If the matrix is not square
            NotInvertibleError: If no step applies before identity form,
                which is the case for singular matrices
        """
        check_square(design.shape, 'invert')

        timer = Timer()
        timer.start()

        kind = design.kind
        work = design.working_copy()
        augment = np.full(design.shape, kind.zero, dtype=kind.dtype)
        for index in range(design.rows):
            augment[index, index] = kind.one
        steps = _new_steps()
        residue: list[str] = []

        # === Elimination ===
        with timer.section('elimination'):
            while not _row_ops.is_identity(work, kind.zero, kind.one):
                step = _identity_step(work, augment, kind, residue)
                if step is None:
                    rank = _row_ops.count_nonzero_rows(work, kind.zero)
                    raise NotInvertibleError(
                        f"Matrix can't be inverted: reduction stalled after "
                        f"{sum(steps.values())} steps with {rank} nonzero rows "
                        f"of {design.rows}",
                        shape=design.shape,
                        iterations=sum(steps.values()),
                        rank=rank,
                    )
                steps[step] += 1

        # === Read Off ===
        with timer.section('read_off'):
            inverse = np.ascontiguousarray(augment)

        timer.stop()

        info: dict[str, Any] = {
            'method': 'gauss_jordan',
            'iterations': sum(steps.values()),
            'row_swaps': steps['swap'],
            'steps': steps,
        }

        return Result(
            params=InverseParams(inverse=inverse, kind=kind),
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(residue),
        )
