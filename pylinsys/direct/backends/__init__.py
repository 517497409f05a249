"""
Direct solver backends.

Available backends:
    CramerBackend: Cramer's rule over cofactor determinants
    InversionBackend: Adjugate inverse times b
    GaussBackend: Pivoted Gaussian elimination (reference)
"""

from pylinsys.direct.backends.cramer import CramerBackend
from pylinsys.direct.backends.inversion import InversionBackend
from pylinsys.direct.backends.gauss import GaussBackend

__all__ = [
    "CramerBackend",
    "InversionBackend",
    "GaussBackend",
]
