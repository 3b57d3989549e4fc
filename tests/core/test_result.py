"""
Tests for the Result[P] envelope.

Validates:
    - Construction with engine payloads
    - Frozen immutability
    - Default factories (warnings, provenance)
    - has_warning() substring search
"""

from dataclasses import FrozenInstanceError, dataclass

import numpy as np
import pytest

import pymatrix
from pymatrix.core.kinds import BINARY
from pymatrix.core.result import Result, _default_provenance
from pymatrix.elimination.solution import InverseParams


@dataclass(frozen=True)
class CountParams:
    """Minimal payload for testing."""
    count: int


def _result(**overrides):
    fields = dict(
        params=CountParams(count=3),
        info={'method': 'gaussian_elimination'},
        timing=None,
        backend_name='cpu_gauss',
    )
    fields.update(overrides)
    return Result(**fields)


# ═══════════════════════════════════════════════════════════════════════
# Construction and field access
# ═══════════════════════════════════════════════════════════════════════


class TestResultConstruction:

    def test_basic_creation(self):
        result = _result(timing={'total_seconds': 0.01})
        assert result.params.count == 3
        assert result.info['method'] == 'gaussian_elimination'
        assert result.timing['total_seconds'] == 0.01
        assert result.backend_name == 'cpu_gauss'

    def test_engine_payload(self):
        params = InverseParams(inverse=np.eye(2), kind=BINARY)
        result = _result(params=params)
        np.testing.assert_array_equal(result.params.inverse, np.eye(2))
        assert result.params.kind is BINARY

    def test_timing_with_sections(self):
        result = _result(timing={'total_seconds': 1.0, 'elimination': 0.9, 'read_off': 0.1})
        assert result.timing['elimination'] == 0.9
        assert result.timing['read_off'] == 0.1


# ═══════════════════════════════════════════════════════════════════════
# Default factories
# ═══════════════════════════════════════════════════════════════════════


class TestDefaults:

    def test_warnings_default_empty_tuple(self):
        result = _result()
        assert result.warnings == ()
        assert isinstance(result.warnings, tuple)

    def test_provenance_auto_generated(self):
        provenance = _result().provenance
        assert provenance['pymatrix_version'] == pymatrix.__version__
        assert provenance['numpy_version'] == np.__version__
        assert 'python_version' in provenance

    def test_provenance_explicit_override(self):
        result = _result(provenance={'custom': 'metadata'})
        assert result.provenance == {'custom': 'metadata'}

    def test_default_provenance_returns_new_dict(self):
        first = _default_provenance()
        second = _default_provenance()
        assert first is not second
        assert first == second


# ═══════════════════════════════════════════════════════════════════════
# Immutability
# ═══════════════════════════════════════════════════════════════════════


class TestImmutability:

    def test_cannot_set_params(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.params = CountParams(count=4)

    def test_cannot_set_warnings(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.warnings = ('new warning',)


# ═══════════════════════════════════════════════════════════════════════
# has_warning()
# ═══════════════════════════════════════════════════════════════════════


class TestHasWarning:

    def test_no_warnings_returns_false(self):
        assert _result().has_warning('row') is False

    def test_substring_match(self):
        result = _result(warnings=('row 2: diagonal set to one',))
        assert result.has_warning('row 2') is True
        assert result.has_warning('diagonal') is True

    def test_no_match(self):
        result = _result(warnings=('row 2: diagonal set to one',))
        assert result.has_warning('row 3') is False
