"""
Solver dispatch for direct methods.

Public API:
    determinant(A)              - det(A) by cofactor expansion or LU
    inverse(A)                  - A^-1 through the adjugate
    solve_cramer(A, b)          - Cramer's rule
    solve_inversion(A, b)       - x = A^-1 b
    solve_gauss(A, b)           - pivoted Gaussian elimination
    solve(A, b, method=...)     - any of the three by name

All solve functions share one contract: inputs are validated before any
arithmetic (DimensionError, ValidationError), a system without a unique
solution raises SingularMatrixError, and the result is a
LinearSystemSolution.
"""

from __future__ import annotations

from typing import Any, Literal
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinsys.core.exceptions import ValidationError
from pylinsys.core.validation import check_square_matrix
from pylinsys.core.compute.tolerances import SINGULAR_THRESHOLD
from pylinsys.core.compute.linalg.determinant import det_cofactor, det_lu
from pylinsys.core.compute.linalg.adjugate import adjugate_inverse
from pylinsys.core.compute.linalg.elimination import PivotingChoice
from pylinsys.direct._common import TraceCallback, check_determinant, cofactor_size_warning
from pylinsys.direct.design import LinearSystemDesign
from pylinsys.direct.solution import LinearSystemSolution
from pylinsys.direct.backends.cramer import CramerBackend
from pylinsys.direct.backends.inversion import InversionBackend
from pylinsys.direct.backends.gauss import GaussBackend


MethodChoice = Literal['gauss', 'cramer', 'inversion']
DeterminantMethod = Literal['cofactor', 'lu']


def _ensure_design(
    A: ArrayLike | LinearSystemDesign,
    b: ArrayLike | None,
) -> LinearSystemDesign:
    """Convert raw arrays to LinearSystemDesign if needed."""
    if isinstance(A, LinearSystemDesign):
        if b is not None:
            raise ValueError("b must not be given together with a LinearSystemDesign")
        return A
    if b is None:
        raise ValueError("b required when A is not a LinearSystemDesign")
    return LinearSystemDesign.from_arrays(A, b)


def determinant(
    A: ArrayLike,
    *,
    method: DeterminantMethod = 'cofactor',
) -> float:
    """
    Determinant of a square matrix.
    
    Parameters
    ----------
    A : array-like
        Square matrix (n x n), n >= 1.
    method : str
        'cofactor' (default): recursive expansion along the first row,
        O(n!). This is the determinant Cramer's rule and inversion use.
        'lu': LU factorization, O(n^3), for larger matrices.
    
    Returns
    -------
    float
    
    Raises
    ------
    DimensionError
        If A is empty or not square.
    """
    arr = check_square_matrix(A, 'A')
    if method == 'cofactor':
        return det_cofactor(arr)
    if method == 'lu':
        return det_lu(arr)
    raise ValidationError(f"Unknown determinant method: {method!r}")


def inverse(
    A: ArrayLike,
    *,
    tol: float = SINGULAR_THRESHOLD,
) -> NDArray[np.floating[Any]]:
    """
    Inverse of a square matrix via its adjugate.
    
    Raises
    ------
    DimensionError
        If A is empty or not square.
    SingularMatrixError
        If |det(A)| < tol.
    """
    arr = check_square_matrix(A, 'A')
    cofactor_size_warning(arr.shape[0], 'inverse')
    det = det_cofactor(arr)
    check_determinant(det, tol)
    return adjugate_inverse(arr, det).inverse


def solve_cramer(
    A: ArrayLike | LinearSystemDesign,
    b: ArrayLike | None = None,
    *,
    tol: float = SINGULAR_THRESHOLD,
    trace: TraceCallback | None = None,
) -> LinearSystemSolution:
    """
    Solve Ax = b by Cramer's rule.
    
    Parameters
    ----------
    A : array-like or LinearSystemDesign
        Square coefficient matrix, or a prepared design.
    b : array-like
        Right-hand side of length n (omit when A is a design).
    tol : float
        Absolute threshold on |det(A)|.
    trace : callable, optional
        Receives ('determinant', det), ('column_determinants', detX)
        and ('solution', x).
    
    Returns
    -------
    LinearSystemSolution; `column_determinants` holds detX.
    """
    design = _ensure_design(A, b)
    result = CramerBackend(tol=tol, trace=trace).solve(design)
    return LinearSystemSolution(_result=result, _design=design)


def solve_inversion(
    A: ArrayLike | LinearSystemDesign,
    b: ArrayLike | None = None,
    *,
    tol: float = SINGULAR_THRESHOLD,
    trace: TraceCallback | None = None,
) -> LinearSystemSolution:
    """
    Solve Ax = b as x = A^-1 b with A^-1 = adj(A) / det(A).
    
    Parameters are as for solve_cramer. The trace callback receives
    'determinant', 'cofactor_matrix', 'adjugate', 'inverse' and
    'solution'.
    
    Returns
    -------
    LinearSystemSolution; `cofactor_matrix`, `adjugate` and `inverse`
    are populated.
    """
    design = _ensure_design(A, b)
    result = InversionBackend(tol=tol, trace=trace).solve(design)
    return LinearSystemSolution(_result=result, _design=design)


def solve_gauss(
    A: ArrayLike | LinearSystemDesign,
    b: ArrayLike | None = None,
    *,
    pivoting: PivotingChoice = 'partial',
    tol: float = SINGULAR_THRESHOLD,
    trace: TraceCallback | None = None,
) -> LinearSystemSolution:
    """
    Solve Ax = b by Gaussian elimination and back-substitution.
    
    Parameters
    ----------
    A, b, tol, trace :
        As for solve_cramer. The trace callback receives 'augmented',
        'pivot_rows', 'reduced_augmented' and 'solution'.
    pivoting : str
        'partial' (default): largest |entry| in the pivot column.
        'legacy': the older signed-comparison rule, for reproducing
        earlier results. Steps where it picks a worse pivot are
        reported in `warnings`.
    
    Returns
    -------
    LinearSystemSolution; `reduced_augmented` and `pivot_rows` are
    populated and `determinant` is (-1)^swaps * prod(pivots).
    """
    design = _ensure_design(A, b)
    result = GaussBackend(pivoting=pivoting, tol=tol, trace=trace).solve(design)
    return LinearSystemSolution(_result=result, _design=design)


def solve(
    A: ArrayLike | LinearSystemDesign,
    b: ArrayLike | None = None,
    *,
    method: MethodChoice = 'gauss',
    **options: Any,
) -> LinearSystemSolution:
    """
    Solve Ax = b with the named method.
    
    Parameters
    ----------
    method : str
        'gauss' (default), 'cramer' or 'inversion'.
    **options :
        Forwarded to the chosen solve_* function (tol, trace, pivoting).
    
    Raises
    ------
    ValidationError
        If method is unknown.
    """
    if method == 'gauss':
        return solve_gauss(A, b, **options)
    if method == 'cramer':
        return solve_cramer(A, b, **options)
    if method == 'inversion':
        return solve_inversion(A, b, **options)
    raise ValidationError(f"Unknown method: {method!r}")
