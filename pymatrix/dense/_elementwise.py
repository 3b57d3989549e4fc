"""
Elementwise and structural kernels for dense matrices.

Every kernel takes 2-D buffers and returns a freshly allocated buffer;
inputs are never mutated. Each output cell depends only on its own inputs,
so numpy vectorization covers what a parallel-for would. Shape and kind
checks are the caller's job (see dense.matrix).
"""

from functools import reduce
from typing import Any, Callable
import operator

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.kinds import ElementKind


def map_scalar(
    array: NDArray[Any],
    scalar: Any,
    op: Callable[[Any, Any], Any],
    reflected: bool = False,
) -> NDArray[Any]:
    """Apply `op(cell, scalar)` (or `op(scalar, cell)` if reflected) to every cell."""
    result = op(scalar, array) if reflected else op(array, scalar)
    return np.ascontiguousarray(result, dtype=array.dtype)


def combine(
    left: NDArray[Any],
    right: NDArray[Any],
    op: Callable[[Any, Any], Any],
) -> NDArray[Any]:
    """Apply `op` cell by cell to two equally shaped buffers."""
    return np.ascontiguousarray(op(left, right), dtype=left.dtype)


def negate(array: NDArray[Any]) -> NDArray[Any]:
    """Additive inverse of every cell."""
    return np.ascontiguousarray(-array, dtype=array.dtype)


def product(left: NDArray[Any], right: NDArray[Any], kind: ElementKind) -> NDArray[Any]:
    """
    Naive matrix product.

    Each output cell is accumulated left to right over the inner dimension,
    so float64 results do not depend on BLAS blocking and Decimal results
    follow the ambient context exactly as a hand-written loop would.
    """
    rows, inner = left.shape
    columns = right.shape[1]
    if inner == 0:
        return np.full((rows, columns), kind.zero, dtype=kind.dtype)

    out = left[:, 0:1] * right[0:1, :]
    for k in range(1, inner):
        out = out + left[:, k:k + 1] * right[k:k + 1, :]
    return np.ascontiguousarray(out, dtype=kind.dtype)


def transpose(array: NDArray[Any]) -> NDArray[Any]:
    """Rows become columns."""
    return np.ascontiguousarray(array.T)


def trace(array: NDArray[Any], kind: ElementKind) -> Any:
    """Sum of the diagonal of a square buffer; the kind's zero if empty."""
    diagonal = [array[i, i] for i in range(array.shape[0])]
    total = reduce(operator.add, diagonal, kind.zero)
    return float(total) if kind.scalar_type is float else total
