"""
pytest configuration and shared fixtures.
"""

from decimal import Decimal

import pytest
import numpy as np

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square_2x2():
    """Invertible 2x2 binary matrix with determinant -2.42."""
    return Matrix([[1.1, 2.2], [3.3, 4.4]])


@pytest.fixture
def square_3x3():
    """Invertible 3x3 binary matrix with determinant 10.648."""
    return Matrix([[1.1, 2.2, 3.3], [4.4, 1.1, 2.2], [3.3, 4.4, 5.5]])


@pytest.fixture
def singular_3x3():
    """Singular 3x3 matrix: third row is 3 * row 1 - 5 * row 0."""
    return Matrix([[1.0, -2.0, 3.0], [2.0, -3.0, 5.0], [1.0, 1.0, 0.0]])


@pytest.fixture
def decimal_2x2():
    """Decimal counterpart of square_2x2."""
    return Matrix([
        [Decimal('1.1'), Decimal('2.2')],
        [Decimal('3.3'), Decimal('4.4')],
    ])


@pytest.fixture
def random_square(rng):
    """Dense 5x5 matrix drawn from a standard normal, almost surely invertible."""
    return Matrix.from_array(rng.standard_normal((5, 5)))
