"""
Determinant kernels.

det_cofactor is the recursive Laplace expansion along the first row.
Cramer's rule and adjugate inversion are defined in terms of it, so its
recursion and sign convention are fixed: (-1)^j on column j of row 0,
starting at +1. Its cost is O(n!), which limits it to small matrices.

det_lu reaches the same value in O(n^3) through an LU factorization
(LAPACK getrf via SciPy). Summation order differs from the expansion,
so the two agree to rounding, not bit for bit.
"""

import warnings
from typing import Any
import numpy as np
from numpy.typing import NDArray
import scipy.linalg as sla

from pylinsys.core.compute.linalg.minor import minor


def det_cofactor(M: NDArray[np.floating[Any]]) -> float:
    """
    Determinant by cofactor expansion along row 0.
    
    Base cases:
        1x1: M[0, 0]
        2x2: ad - bc
    
    Otherwise:
        det(M) = sum_j (-1)^j * M[0, j] * det(minor(M, 0, j))
    
    Args:
        M: Square matrix (n x n), n >= 1
        
    Returns:
        det(M) as a Python float
    """
    n = M.shape[0]
    if n == 1:
        return float(M[0, 0])
    if n == 2:
        a, b = M[0, 0], M[0, 1]
        c, d = M[1, 0], M[1, 1]
        return float(a * d - c * b)
    
    det = 0.0
    for j in range(n):
        sign = 1.0 if j % 2 == 0 else -1.0
        det += sign * M[0, j] * det_cofactor(minor(M, 0, j))
    return float(det)


def det_lu(M: NDArray[np.floating[Any]]) -> float:
    """
    Determinant from an LU factorization.
    
    det(M) = (-1)^(row swaps) * prod(diag(U))
    
    An exactly singular M yields a zero on U's diagonal and therefore 0.0;
    SciPy's LinAlgWarning for that case is suppressed since a zero
    determinant is a valid answer here.
    
    Args:
        M: Square matrix (n x n), n >= 1
        
    Returns:
        det(M) as a Python float
    """
    with warnings.catch_warnings():
        warnings.simplefilter('ignore', sla.LinAlgWarning)
        lu, piv = sla.lu_factor(M, check_finite=False)
    
    n_swaps = int(np.sum(piv != np.arange(len(piv))))
    sign = -1.0 if n_swaps % 2 else 1.0
    return float(sign * np.prod(np.diag(lu)))
