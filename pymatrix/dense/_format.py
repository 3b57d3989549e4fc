"""
Aligned text rendering for dense matrices.

Every cell is printed with the same number of decimal places (the most any
cell needs in its shortest exact form) and right-aligned to the widest
cell in its column, one parenthesised row per line:

    (  1.1, 10.1 )
    ( -1.0,  2.0 )

Negative zero prints as zero.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.kinds import ElementKind, BINARY


def _decimal_places(value: Any, kind: ElementKind) -> int:
    if kind is BINARY:
        text = np.format_float_positional(value, trim='-')
    else:
        text = format(value.normalize(), 'f')
    return len(text.partition('.')[2])


def render(array: NDArray[Any], kind: ElementKind) -> str:
    """Render a 2-D buffer; an empty matrix renders as ''."""
    if array.size == 0:
        return ''

    values = [[kind.zero if value == kind.zero else value for value in row] for row in array]
    places = max(_decimal_places(value, kind) for row in values for value in row)
    cells = [[format(value, f'.{places}f') for value in row] for row in values]
    widths = [max(len(row[column]) for row in cells) for column in range(len(cells[0]))]

    return '\n'.join(
        '( ' + ', '.join(cell.rjust(width) for cell, width in zip(row, widths)) + ' )'
        for row in cells
    )
