"""
Dense linear algebra kernels for PyLinSys.

All functions follow these conventions:
    - Inputs are validated float64 NumPy arrays; kernels trust their shape
    - Kernels never modify their input, except forward_eliminate, which
      works in place on a buffer the caller owns
    - Multi-stage operations return a structured result dataclass
    - Errors are raised immediately with clear messages

Submodules:
    minor: Row/column deletion and column replacement
    determinant: Cofactor expansion and LU determinants
    adjugate: Cofactor matrix, adjugate and inverse
    elimination: Pivoted forward elimination and back-substitution
"""

from pylinsys.core.compute.linalg.minor import minor, replace_column
from pylinsys.core.compute.linalg.determinant import det_cofactor, det_lu
from pylinsys.core.compute.linalg.adjugate import (
    AdjugateResult,
    adjugate_inverse,
    cofactor_matrix,
)
from pylinsys.core.compute.linalg.elimination import (
    EliminationResult,
    PivotingChoice,
    back_substitute,
    forward_eliminate,
    select_pivot_row,
)

__all__ = [
    # Submatrices
    "minor",
    "replace_column",
    # Determinants
    "det_cofactor",
    "det_lu",
    # Adjugate inversion
    "AdjugateResult",
    "adjugate_inverse",
    "cofactor_matrix",
    # Elimination
    "EliminationResult",
    "PivotingChoice",
    "back_substitute",
    "forward_eliminate",
    "select_pivot_row",
]
