"""
Elimination backends.

Available backends:
    CPUEliminationBackend: reference Gaussian elimination with exact pivot tests
"""

from pymatrix.elimination.backends.cpu import CPUEliminationBackend

__all__ = [
    "CPUEliminationBackend",
]
