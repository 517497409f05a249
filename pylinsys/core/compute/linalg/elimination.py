"""
Gaussian elimination on an augmented matrix.

forward_eliminate reduces [A | b] in place to unit upper triangular form;
back_substitute then reads the solution off from the last row upward.

Pivot selection comes in two flavours:
    'partial': pick the row with the largest |M[j, i]| at or below the
               diagonal, first one wins on ties.
    'legacy':  pick row j when M[j, i] > |M[max_row, i]|, i.e. the signed
               entry is compared against the current magnitude. Negative
               candidates are never chosen. Kept so that results
               produced under this rule can be reproduced exactly; it
               can fail on systems that partial pivoting solves.
"""

from dataclasses import dataclass
from typing import Any, Literal
import numpy as np
from numpy.typing import NDArray

from pylinsys.core.exceptions import SingularMatrixError
from pylinsys.core.compute.tolerances import SINGULAR_THRESHOLD

PivotingChoice = Literal['partial', 'legacy']


@dataclass(frozen=True)
class EliminationResult:
    """
    Outcome of forward elimination.
    
    Attributes:
        reduced: The augmented matrix after elimination (n x (n+1)); the
                 left n x n block is unit upper triangular
        pivot_rows: Row chosen as pivot at each step (before the swap)
        pivots: Pivot values divided out at each step
        det: det(A) = (-1)^swaps * prod(pivots)
        divergences: (step, chosen_row, partial_row) for every step where
                     legacy selection differs from partial pivoting
    """
    reduced: NDArray[np.floating[Any]]
    pivot_rows: tuple[int, ...]
    pivots: tuple[float, ...]
    det: float
    divergences: tuple[tuple[int, int, int], ...] = ()


def select_pivot_row(
    M: NDArray[np.floating[Any]],
    step: int,
    pivoting: PivotingChoice = 'partial',
) -> int:
    """
    Index of the pivot row for column `step`, scanning rows step..n-1.
    
    Raises:
        ValueError: If pivoting is not 'partial' or 'legacy'
    """
    if pivoting not in ('partial', 'legacy'):
        raise ValueError(f"Unknown pivoting: {pivoting!r}")
    
    max_row = step
    for j in range(step + 1, M.shape[0]):
        if pivoting == 'partial':
            if abs(M[j, step]) > abs(M[max_row, step]):
                max_row = j
        elif M[j, step] > abs(M[max_row, step]):
            max_row = j
    return max_row


def forward_eliminate(
    M: NDArray[np.floating[Any]],
    *,
    pivoting: PivotingChoice = 'partial',
    tol: float = SINGULAR_THRESHOLD,
) -> EliminationResult:
    """
    Reduce an augmented matrix to unit upper triangular form, in place.
    
    For each step i:
        1. Select the pivot row and swap it into row i
        2. Reject |pivot| < tol
        3. Divide row i (columns i..n) by the pivot
        4. Subtract multiples of row i from every row below it
    
    Args:
        M: Augmented matrix (n x (n+1)); overwritten. Callers pass a
           buffer they own.
        pivoting: Pivot selection rule
        tol: Absolute pivot threshold
        
    Returns:
        EliminationResult whose `reduced` is M itself
        
    Raises:
        SingularMatrixError: If a pivot falls below tol
    """
    n = M.shape[0]
    pivot_rows: list[int] = []
    pivots: list[float] = []
    divergences: list[tuple[int, int, int]] = []
    n_swaps = 0
    
    for i in range(n):
        max_row = select_pivot_row(M, i, pivoting)
        if pivoting == 'legacy':
            best_row = select_pivot_row(M, i, 'partial')
            if abs(M[best_row, i]) > abs(M[max_row, i]):
                divergences.append((i, max_row, best_row))
        pivot_rows.append(max_row)
        
        if max_row != i:
            M[[i, max_row]] = M[[max_row, i]]
            n_swaps += 1
        
        pivot = float(M[i, i])
        if abs(pivot) < tol:
            raise SingularMatrixError(
                f"System has no unique solution: pivot {pivot:.3e} at step {i} "
                f"is below threshold {tol:.0e}",
                matrix_name='A',
                pivot_index=i,
                pivot_value=pivot,
                threshold=tol,
            )
        pivots.append(pivot)
        
        M[i, i:] /= pivot
        for m in range(i + 1, n):
            factor = M[m, i]
            M[m, i:] -= M[i, i:] * factor
    
    sign = -1.0 if n_swaps % 2 else 1.0
    det = sign * float(np.prod(pivots))
    
    return EliminationResult(
        reduced=M,
        pivot_rows=tuple(pivot_rows),
        pivots=tuple(pivots),
        det=det,
        divergences=tuple(divergences),
    )


def back_substitute(reduced: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """
    Solve a unit upper triangular augmented system from the bottom up.
    
    x[i] = M[i, n] - sum_{j > i} M[i, j] * x[j]
    
    Args:
        reduced: Output of forward_eliminate (n x (n+1))
        
    Returns:
        Solution vector x (n,)
    """
    n = reduced.shape[0]
    x = np.zeros(n, dtype=np.float64)
    for i in range(n - 1, -1, -1):
        x[i] = reduced[i, n]
        for j in range(i + 1, n):
            x[i] -= reduced[i, j] * x[j]
    return x
