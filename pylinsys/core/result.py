"""
Generic result container for all PyLinSys computations.

The Result class provides a standardized envelope that every solver
backend returns. Solver-specific intermediates (determinants, cofactor
matrices, reduced augmented matrices) travel in the params payload and
the info dict, so presentation code never has to recompute them.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, pivots, intermediates)
    - timing is optional (don't burden unit tests)
    - provenance for reproducibility (versions)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, Any]:
    """Generate minimal provenance metadata."""
    import pylinsys
    provenance = {
        'pylinsys_version': pylinsys.__version__,
    }
    try:
        import numpy as np
        provenance['numpy_version'] = np.__version__
    except ImportError:
        pass
    try:
        import scipy
        provenance['scipy_version'] = scipy.__version__
    except ImportError:
        pass
    return provenance


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for linear solves.
    
    Type Parameters:
        P: The solver-specific parameter payload type
        
    Attributes:
        params: Solver payload (solution vector, determinant, intermediates)
        info: Structured metadata (method, pivoting, pivot rows)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library versions used to produce the result
        
    Examples:
        >>> Result(
        ...     params=SolveParams(x=x, determinant=-2.0),
        ...     info={'method': 'gauss', 'pivoting': 'partial'},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_gauss'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, Any] = field(default_factory=_default_provenance)
    
    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
