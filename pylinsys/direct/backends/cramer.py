"""
Cramer's rule backend.

x[i] = det(A_i) / det(A), where A_i is A with column i replaced by b.
Every determinant is a full cofactor expansion, so the cost is
(n + 1) expansions of O(n!) each.
"""

from typing import Any
import numpy as np

from pylinsys.core.result import Result
from pylinsys.core.compute.timing import Timer
from pylinsys.core.compute.tolerances import SINGULAR_THRESHOLD
from pylinsys.core.compute.linalg.determinant import det_cofactor
from pylinsys.core.compute.linalg.minor import replace_column
from pylinsys.direct._common import (
    TraceCallback,
    check_determinant,
    cofactor_size_warning,
    emit,
)
from pylinsys.direct.design import LinearSystemDesign
from pylinsys.direct.solution import SolveParams


class CramerBackend:
    """
    CPU backend using Cramer's rule.
    
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
        return 'cpu_cramer'
    
    def solve(self, design: LinearSystemDesign) -> Result[SolveParams]:
        """
        Solve Ax = b by Cramer's rule.
        
        Raises:
            SingularMatrixError: If |det(A)| < tol
        """
        timer = Timer()
        timer.start()
        
        A, b, n = design.A, design.b, design.n
        warning = cofactor_size_warning(n, 'cramer')
        
        with timer.section('determinant'):
            det = det_cofactor(A)
        emit(self._trace, 'determinant', det)
        check_determinant(det, self._tol)
        
        with timer.section('column_determinants'):
            det_x = np.array(
                [det_cofactor(replace_column(A, b, i)) for i in range(n)],
                dtype=np.float64,
            )
        emit(self._trace, 'column_determinants', det_x)
        
        x = det_x / det
        emit(self._trace, 'solution', x)
        
        timer.stop()
        
        params = SolveParams(
            x=x,
            determinant=det,
            column_determinants=det_x,
        )
        
        info: dict[str, Any] = {
            'method': 'cramer',
            'tol': self._tol,
        }
        
        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(warning,) if warning else (),
        )
