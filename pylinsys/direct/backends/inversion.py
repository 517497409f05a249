"""
Matrix-inversion backend.

Builds A^-1 = adj(A) / det(A) from the cofactor matrix and returns
x = A^-1 b. The n^2 cofactor expansions make this the slowest of the
three methods and the one with the most accumulated rounding; for
anything beyond hand-sized systems its results should be checked
against elimination.
"""

from typing import Any

from pylinsys.core.result import Result
from pylinsys.core.compute.timing import Timer
from pylinsys.core.compute.tolerances import SINGULAR_THRESHOLD
from pylinsys.core.compute.linalg.determinant import det_cofactor
from pylinsys.core.compute.linalg.adjugate import adjugate_inverse
from pylinsys.direct._common import (
    TraceCallback,
    check_determinant,
    cofactor_size_warning,
    emit,
)
from pylinsys.direct.design import LinearSystemDesign
from pylinsys.direct.solution import SolveParams


class InversionBackend:
    """
    CPU backend using the adjugate inverse.
    
    Implements the Backend protocol for LinearSystemDesign -> SolveParams.
    """
    
    def __init__(
        self,
        *,
        tol: float = SINGULAR_THRESHOLD,
        trace: TraceCallback | None = None,
    ):
        self._tol = tol
        self._trace = trace
    
    @property
    def name(self) -> str:
        return 'cpu_inversion'
    
    def solve(self, design: LinearSystemDesign) -> Result[SolveParams]:
        """
        Solve Ax = b as x = adj(A) b / det(A).
        
        Raises:
            SingularMatrixError: If |det(A)| < tol
        """
        timer = Timer()
        timer.start()
        
        A, b, n = design.A, design.b, design.n
        warning = cofactor_size_warning(n, 'inversion')
        
        with timer.section('determinant'):
            det = det_cofactor(A)
        emit(self._trace, 'determinant', det)
        check_determinant(det, self._tol)
        
        with timer.section('adjugate'):
            adj = adjugate_inverse(A, det)
        emit(self._trace, 'cofactor_matrix', adj.cofactors)
        emit(self._trace, 'adjugate', adj.adjugate)
        emit(self._trace, 'inverse', adj.inverse)
        
        with timer.section('multiply'):
            x = adj.inverse @ b
        emit(self._trace, 'solution', x)
        
        timer.stop()
        
        params = SolveParams(
            x=x,
            determinant=det,
            cofactor_matrix=adj.cofactors,
            adjugate=adj.adjugate,
            inverse=adj.inverse,
        )
        
        info: dict[str, Any] = {
            'method': 'inversion',
            'tol': self._tol,
        }
        
        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(warning,) if warning else (),
        )
