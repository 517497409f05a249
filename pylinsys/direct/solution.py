"""
Solution types for direct solvers.

Contains the parameter payload produced by backends, the user-facing
solution wrapper, and the plain-text formatting used by summary().
Backends never print; everything a learner wants to compare against a
hand computation is kept here and rendered on request.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pylinsys.core.result import Result

if TYPE_CHECKING:
    from pylinsys.direct.design import LinearSystemDesign


@dataclass(frozen=True)
class SolveParams:
    """
    Parameter payload for a direct solve.
    
    x and determinant are always present. The remaining fields hold the
    intermediates of whichever method produced the payload and are None
    for the others.
    """
    x: NDArray[np.floating[Any]]
    determinant: float
    column_determinants: NDArray[np.floating[Any]] | None = None
    cofactor_matrix: NDArray[np.floating[Any]] | None = None
    adjugate: NDArray[np.floating[Any]] | None = None
    inverse: NDArray[np.floating[Any]] | None = None
    reduced_augmented: NDArray[np.floating[Any]] | None = None
    pivot_rows: tuple[int, ...] | None = None


def format_vector(v: NDArray[np.floating[Any]]) -> str:
    """Space-separated entries with 6 significant digits."""
    return " ".join(f"{float(value):g}" for value in v)


def format_matrix(M: NDArray[np.floating[Any]]) -> str:
    """One line per row, entries as in format_vector."""
    return "\n".join(format_vector(row) for row in M)


@dataclass
class LinearSystemSolution:
    """
    User-facing solve results.
    
    Wraps the backend Result and provides accessors for the solution,
    its residuals and the method's intermediates.
    """
    _result: Result[SolveParams]
    _design: 'LinearSystemDesign'
    
    # Cached computations
    _residuals: NDArray[np.floating[Any]] | None = None
    
    @property
    def x(self) -> NDArray[np.floating[Any]]:
        return self._result.params.x
    
    @property
    def determinant(self) -> float:
        return self._result.params.determinant
    
    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        """b - Ax, computed once."""
        if self._residuals is None:
            self._residuals = self._design.residuals(self.x)
        return self._residuals
    
    @property
    def residual_norm(self) -> float:
        """Largest absolute residual."""
        return float(np.max(np.abs(self.residuals)))
    
    @property
    def column_determinants(self) -> NDArray[np.floating[Any]] | None:
        """det(A_i) with column i replaced by b (Cramer only)."""
        return self._result.params.column_determinants
    
    @property
    def cofactor_matrix(self) -> NDArray[np.floating[Any]] | None:
        return self._result.params.cofactor_matrix
    
    @property
    def adjugate(self) -> NDArray[np.floating[Any]] | None:
        return self._result.params.adjugate
    
    @property
    def inverse(self) -> NDArray[np.floating[Any]] | None:
        return self._result.params.inverse
    
    @property
    def reduced_augmented(self) -> NDArray[np.floating[Any]] | None:
        """[A | b] after forward elimination (Gauss only)."""
        return self._result.params.reduced_augmented
    
    @property
    def pivot_rows(self) -> tuple[int, ...] | None:
        return self._result.params.pivot_rows
    
    @property
    def n(self) -> int:
        return self._design.n
    
    @property
    def method(self) -> str:
        return self._result.info['method']
    
    @property
    def info(self) -> dict[str, Any]:
        return self._result.info
    
    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing
    
    @property
    def backend_name(self) -> str:
        return self._result.backend_name
    
    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings
    
    def summary(self) -> str:
        """Render the solve, including the method's intermediate values."""
        lines = [
            f"Linear System Solution ({self.method})",
            "=" * 60,
            f"Unknowns: {self.n}",
            f"det(A): {self.determinant:g}",
        ]
        
        if self.column_determinants is not None:
            lines.append(f"detXn : {format_vector(self.column_determinants)}")
        
        for title, matrix in (
            ("Cofactor matrix", self.cofactor_matrix),
            ("Adjugate", self.adjugate),
            ("Inverse", self.inverse),
            ("Reduced augmented matrix", self.reduced_augmented),
        ):
            if matrix is not None:
                lines.append(f"{title} :")
                lines.append(format_matrix(matrix))
        
        if self.pivot_rows is not None:
            lines.append(f"Pivot rows: {list(self.pivot_rows)}")
        
        lines.append(f"Xn : {format_vector(self.x)}")
        lines.append(f"Max |residual|: {self.residual_norm:.3e}")
        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.6f}s")
        for warning in self.warnings:
            lines.append(f"Warning: {warning}")
        
        return "\n".join(lines)
    
    def __repr__(self) -> str:
        return (
            f"LinearSystemSolution(n={self.n}, method={self.method!r}, "
            f"x={np.array2string(self.x, precision=6)})"
        )
