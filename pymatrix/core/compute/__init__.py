"""
Shared compute infrastructure for pymatrix.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers for approximate comparison
"""

from pymatrix.core.compute.timing import Timer, timed
from pymatrix.core.compute.tolerances import ToleranceTier, select_tolerance

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ToleranceTier",
    "select_tolerance",
]
