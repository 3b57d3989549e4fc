"""
Generic result container for all pymatrix computations.

The Result class provides a standardized envelope that every engine
operation returns. This enables shared tooling for timing, diagnostics and
reproducibility while allowing each operation to define its own payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (iterations, step counts, row swaps)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any
import platform

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Library versions the result was computed with."""
    from pymatrix import __version__

    return {
        'pymatrix_version': __version__,
        'numpy_version': np.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for matrix computations.

    Type Parameters:
        P: The operation-specific parameter payload type

    Attributes:
        params: Operation-specific payload (triangular matrix, inverse, ...)
        info: Structured metadata (method, iterations, step counts)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Versions of the libraries that produced the result

    Examples:
        >>> Result(
        ...     params=TriangularParams(
        ...         triangular=work, kind=BINARY, row_swaps=1, rank=2, determinant=-2.0,
        ...     ),
        ...     info={'method': 'gaussian_elimination', 'iterations': 4},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_gauss'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
