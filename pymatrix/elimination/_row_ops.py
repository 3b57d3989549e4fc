"""
Elementary row operations for Gaussian elimination.

Every helper works on a 2-D ndarray of shape (rows, columns), float64 or
object (Decimal), and mutates it in place where it mutates at all. The
kind's zero and one are passed in explicitly; every comparison against
them is exact. No tolerance is applied anywhere in the engine.

An optional `augment` buffer receives the same row operation as `work`.
The inversion loop uses it to carry the identity matrix along.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray


def _nonzero_mask(work: NDArray[Any], zero: Any) -> NDArray[np.bool_]:
    return np.asarray(work != zero, dtype=bool)


def leading_zeros(work: NDArray[Any], zero: Any) -> NDArray[np.intp]:
    """
    Count the zeros before the first nonzero entry of each row.

    An all-zero row counts `columns`.
    """
    rows, columns = work.shape
    if columns == 0:
        return np.zeros(rows, dtype=np.intp)
    nonzero = _nonzero_mask(work, zero)
    counts = np.argmax(nonzero, axis=1)
    counts[~nonzero.any(axis=1)] = columns
    return counts


def trailing_zeros(work: NDArray[Any], zero: Any) -> NDArray[np.intp]:
    """Count the zeros after the last nonzero entry of each row."""
    return leading_zeros(work[:, ::-1], zero)


def find_swap(leading: NDArray[np.intp]) -> tuple[int, int] | None:
    """
    Find a row swap that moves an earlier-starting row up.

    The candidate is the first row whose leading-zero count differs from
    its index. A swap applies when a later mismatched row has strictly
    fewer leading zeros than the candidate.

    Returns:
        (candidate_row, later_row), or None if no swap applies
    """
    candidate = None
    for row, count in enumerate(leading):
        if count == row:
            continue
        if candidate is None:
            candidate = row
        elif count < leading[candidate]:
            return candidate, row
    return None


def swap_rows(work: NDArray[Any], first: int, second: int) -> None:
    """Exchange two rows in place."""
    work[[first, second]] = work[[second, first]]


def find_forward_pivot(
    work: NDArray[Any],
    leading: NDArray[np.intp],
    zero: Any,
) -> tuple[int, int] | None:
    """
    Find the first row (from row 1 down) that starts left of the diagonal.

    The pivot is the row's leading-zero count; the pivot row is the row
    with that index. Candidates whose pivot element is zero are skipped,
    as are all-zero rows.

    Returns:
        (row, pivot), or None if no forward elimination applies
    """
    columns = work.shape[1]
    for row in range(1, len(leading)):
        pivot = int(leading[row])
        if pivot >= row or pivot >= columns:
            continue
        if work[pivot, pivot] == zero:
            continue
        return row, pivot
    return None


def find_backward_pivot(
    work: NDArray[Any],
    trailing: NDArray[np.intp],
    zero: Any,
) -> tuple[int, int] | None:
    """
    Find the last row (from the second-to-last up) that ends right of the diagonal.

    The pivot is the column of the row's last nonzero entry. Candidates
    whose pivot element is zero are skipped.

    Returns:
        (row, pivot), or None if no backward elimination applies
    """
    rows = len(trailing)
    columns = work.shape[1]
    for row in range(rows - 2, -1, -1):
        if trailing[row] >= rows - 1 - row:
            continue
        pivot = columns - 1 - int(trailing[row])
        if work[pivot, pivot] == zero:
            continue
        return row, pivot
    return None


def eliminate(
    work: NDArray[Any],
    row: int,
    pivot: int,
    zero: Any,
    augment: NDArray[Any] | None = None,
) -> None:
    """
    Subtract a multiple of the pivot row so that work[row, pivot] becomes zero.

    The factor is work[row, pivot] / work[pivot, pivot]. The eliminated
    cell is set to exactly zero rather than left to rounding.
    """
    factor = work[row, pivot] / work[pivot, pivot]
    work[row] = work[row] - factor * work[pivot]
    work[row, pivot] = zero
    if augment is not None:
        augment[row] = augment[row] - factor * augment[pivot]


def find_unnormalized_row(work: NDArray[Any], zero: Any, one: Any) -> int | None:
    """First row whose diagonal entry is neither zero nor one, or None."""
    for row in range(min(work.shape)):
        diagonal = work[row, row]
        if diagonal != zero and diagonal != one:
            return row
    return None


def normalize_row(
    work: NDArray[Any],
    row: int,
    one: Any,
    augment: NDArray[Any] | None = None,
) -> bool:
    """
    Scale a row by the reciprocal of its diagonal entry.

    The diagonal is set to exactly one afterwards.

    Returns:
        True if diagonal * (one / diagonal) was already exactly one
    """
    diagonal = work[row, row]
    multiplier = one / diagonal
    exact = bool(diagonal * multiplier == one)
    work[row] = work[row] * multiplier
    work[row, row] = one
    if augment is not None:
        augment[row] = augment[row] * multiplier
    return exact


def is_triangular(work: NDArray[Any], zero: Any) -> bool:
    """True if every existing entry strictly below the diagonal is zero."""
    below = np.tril(np.ones(work.shape, dtype=bool), -1)
    return not _nonzero_mask(work[below], zero).any()


def is_identity(work: NDArray[Any], zero: Any, one: Any) -> bool:
    """True if a square buffer has exactly one on the diagonal and zero elsewhere."""
    size = work.shape[0]
    diagonal = np.asarray(np.diagonal(work) == one, dtype=bool)
    off_diagonal = ~np.eye(size, dtype=bool)
    return bool(diagonal.all()) and not _nonzero_mask(work[off_diagonal], zero).any()


def count_nonzero_rows(work: NDArray[Any], zero: Any) -> int:
    """Number of rows holding at least one nonzero entry."""
    if work.size == 0:
        return 0
    return int(_nonzero_mask(work, zero).any(axis=1).sum())
