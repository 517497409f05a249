"""
Thresholds and tolerance tiers for the direct solvers.

SINGULAR_THRESHOLD is the absolute cut-off below which |det(A)| or a
pivot is treated as zero. It does not scale with the entries of A, so
matrices with very large or very small entries can be misclassified.

Tolerance tiers define how closely results of different methods are
expected to agree:
- Gaussian elimination (reference): O(n^3) with pivoting, tight
- Cofactor methods (Cramer, inversion): many determinant evaluations,
  rounding accumulates
- Cross-method: the agreement promised between any two solvers on a
  well-conditioned system

Used by the solvers (threshold) and by the test suite (tiers).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# |det(A)| or |pivot| below this is singular
SINGULAR_THRESHOLD = 1e-9

# Cofactor expansion costs O(n!); warn beyond this size
COFACTOR_WARN_SIZE = 8

GAUSS_REFERENCE = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='gauss_reference',
    description='Pivoted elimination, reference solution',
)

COFACTOR = ToleranceTier(
    rtol=1e-8,
    atol=1e-10,
    name='cofactor',
    description='Cramer and adjugate inversion, accumulated determinant rounding',
)

CROSS_METHOD = ToleranceTier(
    rtol=0.0,
    atol=1e-6,
    name='cross_method',
    description='Agreement between any two solvers on a well-conditioned system',
)


def select_tolerance(method: str) -> ToleranceTier:
    """Select the tolerance tier for a solver method or backend name."""
    if 'gauss' in method:
        return GAUSS_REFERENCE
    if 'cramer' in method or 'inversion' in method:
        return COFACTOR
    raise ValueError(f"Unknown method: {method!r}")
