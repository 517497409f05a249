"""
PyLinSys: direct solvers for small dense linear systems.

Cramer's rule, adjugate inversion and Gaussian elimination with partial
pivoting, exposing every intermediate value so hand computations can be
checked step by step.

Submodules:
    direct: The solvers and their solution types
    core: Exceptions, validation, result envelope, numeric kernels
"""

__version__ = "0.1.0"

from pylinsys import direct
from pylinsys.direct import (
    determinant,
    inverse,
    solve,
    solve_cramer,
    solve_gauss,
    solve_inversion,
)

__all__ = [
    "__version__",
    "direct",
    "determinant",
    "inverse",
    "solve",
    "solve_cramer",
    "solve_gauss",
    "solve_inversion",
]
