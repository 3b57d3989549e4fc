"""
Element kinds for pymatrix.

This module is the SINGLE SOURCE OF TRUTH for the floating-point kinds a
matrix may hold. Import from here, never compare dtypes by hand.

Two kinds are supported:
    binary:  IEEE-754 double precision, stored as numpy float64
    decimal: decimal.Decimal values, stored in numpy object arrays

Both satisfy the capability set the elimination engine relies on:
+, -, *, /, negation, exact equality against zero and one, and a
reciprocal for row scaling. Decimal arithmetic follows the ambient
decimal context (use decimal.localcontext() to change precision).

Usage:
    from pymatrix.core.kinds import BINARY, DECIMAL, kind_of, get_kind

    kind = kind_of(array)
    if kind is DECIMAL:
        ...
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any
import numbers

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import InvalidOperandError


@dataclass(frozen=True)
class ElementKind:
    """
    A floating-point element kind.

    Attributes:
        name: Registry key ('binary' or 'decimal')
        dtype: numpy dtype used for storage
        scalar_type: Python type of a single element
        zero: Additive identity of the kind
        one: Multiplicative identity of the kind
    """
    name: str
    dtype: np.dtype
    scalar_type: type
    zero: Any
    one: Any

    def coerce(self, value: Any) -> Any:
        """
        Convert a Python or numpy scalar into this kind.

        Raises:
            InvalidOperandError: If the value is boolean or not numeric
        """
        if isinstance(value, (bool, np.bool_)):
            raise InvalidOperandError(
                f"{self.name}: boolean value {value!r} is not a floating operand",
                operand_kind='bool',
            )

        if self.scalar_type is float:
            if isinstance(value, (numbers.Real, Decimal)):
                return float(value)
            raise InvalidOperandError(
                f"binary: cannot use {type(value).__name__} value {value!r} as a float",
                operand_kind=type(value).__name__,
            )

        if isinstance(value, Decimal):
            return value
        if isinstance(value, numbers.Integral):
            return Decimal(int(value))
        if isinstance(value, numbers.Real):
            # Shortest repr keeps 1.1 as Decimal('1.1') rather than its binary expansion
            return Decimal(repr(float(value)))
        raise InvalidOperandError(
            f"decimal: cannot use {type(value).__name__} value {value!r} as a Decimal",
            operand_kind=type(value).__name__,
        )

    def coerce_array(self, array: NDArray) -> NDArray:
        """Return a C-contiguous copy of `array` in this kind's dtype."""
        if self.scalar_type is float:
            return np.array(array, dtype=np.float64, order='C')
        out = np.empty(np.shape(array), dtype=object)
        for index, value in np.ndenumerate(np.asarray(array, dtype=object)):
            out[index] = self.coerce(value)
        return out

    def is_finite(self, value: Any) -> bool:
        """True if the value is neither NaN nor infinite."""
        if self.scalar_type is float:
            return bool(np.isfinite(value))
        return value.is_finite()

    def __repr__(self) -> str:
        return f"ElementKind({self.name!r})"


# IEEE-754 double precision
BINARY = ElementKind(
    name='binary',
    dtype=np.dtype(np.float64),
    scalar_type=float,
    zero=0.0,
    one=1.0,
)

# Exact-decimal floating point (decimal.Decimal in object arrays)
DECIMAL = ElementKind(
    name='decimal',
    dtype=np.dtype(object),
    scalar_type=Decimal,
    zero=Decimal(0),
    one=Decimal(1),
)

# All kinds by name
KINDS: dict[str, ElementKind] = {
    BINARY.name: BINARY,
    DECIMAL.name: DECIMAL,
}


def get_kind(kind: str | ElementKind) -> ElementKind:
    """
    Look up an element kind by name.

    Args:
        kind: Kind name ('binary', 'decimal') or an ElementKind

    Raises:
        InvalidOperandError: If the name is not registered
    """
    if isinstance(kind, ElementKind):
        return kind
    try:
        return KINDS[kind]
    except KeyError:
        raise InvalidOperandError(
            f"Unknown element kind {kind!r}. Available: {sorted(KINDS)}",
            operand_kind=str(kind),
        ) from None


def kind_of(array: NDArray) -> ElementKind:
    """
    Resolve the element kind of an array.

    float64 arrays are binary; object arrays whose every element is a
    Decimal are decimal. Everything else is rejected, including integral
    and single-precision dtypes: promote those explicitly before handing
    them to the engine.

    Raises:
        InvalidOperandError: If the array does not hold a supported kind
    """
    if array.dtype == BINARY.dtype:
        return BINARY
    if array.dtype == DECIMAL.dtype:
        for value in array.flat:
            if not isinstance(value, Decimal):
                raise InvalidOperandError(
                    f"Object array holds {type(value).__name__} value {value!r}; "
                    f"expected only Decimal elements",
                    operand_kind=type(value).__name__,
                )
        return DECIMAL
    raise InvalidOperandError(
        f"Matrix type must be a floating point kind (float64 or Decimal), got dtype {array.dtype}",
        operand_kind=str(array.dtype),
    )


__all__ = [
    'ElementKind',
    'BINARY',
    'DECIMAL',
    'KINDS',
    'get_kind',
    'kind_of',
]
