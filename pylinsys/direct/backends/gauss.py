"""
Gaussian elimination backend.

Forward elimination with pivoting on a freshly allocated augmented
matrix, then back-substitution. O(n^3) and pivoted, this is the
reference method the cofactor-based backends are checked against.
"""

from typing import Any
import warnings

from pylinsys.core.result import Result
from pylinsys.core.compute.timing import Timer
from pylinsys.core.compute.tolerances import SINGULAR_THRESHOLD
from pylinsys.core.compute.linalg.elimination import (
    PivotingChoice,
    back_substitute,
    forward_eliminate,
)
from pylinsys.core.exceptions import ValidationError
from pylinsys.direct._common import TraceCallback, emit
from pylinsys.direct.design import LinearSystemDesign
from pylinsys.direct.solution import SolveParams


class GaussBackend:
    """
    CPU backend using pivoted Gaussian elimination.
    
    Implements the Backend protocol for LinearSystemDesign -> SolveParams.
    
    pivoting='legacy' keeps the older pivot rule for reproducing earlier
    results; any step where it picks a smaller pivot than partial
    pivoting would is reported as a warning.
    """
    
    def __init__(
        self,
        *,
        pivoting: PivotingChoice = 'partial',
        tol: float = SINGULAR_THRESHOLD,
        trace: TraceCallback | None = None,
    ):
        if pivoting not in ('partial', 'legacy'):
            raise ValidationError(
                f"pivoting: expected 'partial' or 'legacy', got {pivoting!r}"
            )
        self._pivoting = pivoting
        self._tol = tol
        self._trace = trace
    
    @property
    def name(self) -> str:
        return 'cpu_gauss'
    
    def solve(self, design: LinearSystemDesign) -> Result[SolveParams]:
        """
        Solve Ax = b by elimination and back-substitution.
        
        Raises:
            SingularMatrixError: If a pivot's magnitude falls below tol
        """
        timer = Timer()
        timer.start()
        
        augmented = design.augmented()
        emit(self._trace, 'augmented', augmented.copy())
        
        with timer.section('forward_elimination'):
            elim = forward_eliminate(
                augmented, pivoting=self._pivoting, tol=self._tol
            )
        emit(self._trace, 'pivot_rows', elim.pivot_rows)
        emit(self._trace, 'reduced_augmented', elim.reduced)
        
        with timer.section('back_substitution'):
            x = back_substitute(elim.reduced)
        emit(self._trace, 'solution', x)
        
        timer.stop()
        
        warning_messages = []
        for step, chosen, best in elim.divergences:
            message = (
                f"legacy pivoting chose row {chosen} at step {step}; "
                f"partial pivoting would choose row {best}"
            )
            warnings.warn(message, RuntimeWarning, stacklevel=2)
            warning_messages.append(message)
        
        params = SolveParams(
            x=x,
            determinant=elim.det,
            reduced_augmented=elim.reduced,
            pivot_rows=elim.pivot_rows,
        )
        
        info: dict[str, Any] = {
            'method': 'gauss',
            'pivoting': self._pivoting,
            'tol': self._tol,
            'pivots': elim.pivots,
        }
        
        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warning_messages),
        )
