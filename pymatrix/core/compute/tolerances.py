"""
Tolerance tiers for approximate matrix comparison.

The elimination engine itself never uses tolerances: every zero and one
test is exact. These tiers exist for callers comparing results that went
through rounding, e.g. checking that M @ inverse(M) is close to I.

- BINARY_FP64: double precision, a few ulps of accumulated error
- DECIMAL_DEFAULT: default 28-digit decimal context
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from pymatrix.core.kinds import ElementKind, DECIMAL, get_kind


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: Any
    atol: Any
    name: str
    description: str


BINARY_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='binary_fp64',
    description='IEEE double precision after Gaussian elimination',
)

DECIMAL_DEFAULT = ToleranceTier(
    rtol=Decimal('1e-20'),
    atol=Decimal('1e-22'),
    name='decimal',
    description='Decimal arithmetic at the default 28-digit context',
)


def select_tolerance(kind: str | ElementKind) -> ToleranceTier:
    """Select the tolerance tier for an element kind."""
    kind = get_kind(kind)
    if kind is DECIMAL:
        return DECIMAL_DEFAULT
    return BINARY_FP64


__all__ = [
    'ToleranceTier',
    'BINARY_FP64',
    'DECIMAL_DEFAULT',
    'select_tolerance',
]
