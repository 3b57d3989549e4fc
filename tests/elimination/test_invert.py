"""
Tests for inversion by reduction to identity form.

Validates:
    - Known inverses (binary and exact cases)
    - Singular input raises NotInvertibleError with diagnostics
    - Non-square input raises ShapeMismatchError
    - Normalization residue is reported in warnings, never raised
"""

import numpy as np
import pytest

from pymatrix import Matrix
from pymatrix.core.exceptions import NotInvertibleError, ShapeMismatchError
from pymatrix.elimination import invert, inverse


# ═══════════════════════════════════════════════════════════════════════
# Known inverses
# ═══════════════════════════════════════════════════════════════════════


class TestKnownInverses:

    def test_2x2(self, square_2x2):
        expected = [
            [-1.818181818181819, 0.9090909090909095],
            [1.363636363636364, -0.4545454545454547],
        ]
        assert square_2x2.inverse().to_list() == expected

    def test_3x3(self, square_3x3):
        expected = [
            [-0.34090909090909088, 0.22727272727272727, 0.11363636363636363],
            [-1.5909090909090908, -0.45454545454545436, 1.1363636363636362],
            [1.4772727272727275, 0.22727272727272718, -0.79545454545454553],
        ]
        np.testing.assert_allclose(inverse(square_3x3).to_numpy(), expected, rtol=1e-12)

    def test_matches_numpy(self, random_square):
        np.testing.assert_allclose(
            random_square.inverse().to_numpy(),
            np.linalg.inv(random_square.to_numpy()),
            rtol=1e-9,
            atol=1e-12,
        )

    def test_diagonal_is_exact(self):
        solution = invert(Matrix([[2.0, 0.0], [0.0, 4.0]]))
        assert solution.inverse.to_list() == [[0.5, 0.0], [0.0, 0.25]]
        assert solution.info['steps']['normalize'] == 2

    def test_permutation(self):
        m = Matrix([[0.0, 1.0], [1.0, 0.0]])
        assert m.inverse() == m

    def test_identity_needs_no_steps(self):
        solution = invert(Matrix.identity(3))
        assert solution.inverse == Matrix.identity(3)
        assert solution.iterations == 0

    def test_empty(self):
        assert inverse(Matrix()).shape == (0, 0)

    def test_input_not_mutated(self, square_2x2):
        before = square_2x2.to_list()
        square_2x2.inverse()
        assert square_2x2.to_list() == before


# ═══════════════════════════════════════════════════════════════════════
# Failures
# ═══════════════════════════════════════════════════════════════════════


class TestFailures:

    def test_singular_raises(self, singular_3x3):
        with pytest.raises(NotInvertibleError, match="can't be inverted") as exc_info:
            singular_3x3.inverse()
        err = exc_info.value
        assert err.shape == (3, 3)
        assert err.rank == 2
        assert err.iterations == 3

    def test_zero_row(self):
        with pytest.raises(NotInvertibleError):
            inverse([[1.0, 2.0], [0.0, 0.0]])

    def test_identical_rows(self):
        with pytest.raises(NotInvertibleError):
            inverse([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [1.0, 2.0, 3.0]])

    def test_non_square(self):
        with pytest.raises(ShapeMismatchError, match="invert: matrix isn't square"):
            Matrix([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]).inverse()


# ═══════════════════════════════════════════════════════════════════════
# Normalization residue
# ═══════════════════════════════════════════════════════════════════════


class TestNormalizationResidue:

    def test_inexact_reciprocal_recorded(self):
        solution = invert(Matrix([[49.0]]))
        assert solution.inverse.get(0, 0) == 1.0 / 49.0
        assert len(solution.warnings) == 1
        assert "row 0" in solution.warnings[0]

    def test_exact_reciprocal_silent(self):
        assert invert(Matrix([[4.0]])).warnings == ()

    def test_repr(self, square_2x2):
        assert repr(invert(square_2x2)).startswith("InverseSolution(size=2")
