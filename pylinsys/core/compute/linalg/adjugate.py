"""
Cofactor, adjugate and inverse via determinants.

    C[i, j] = (-1)^(i+j) * det(minor(A, i, j))
    adj(A)  = C^T
    A^-1    = adj(A) / det(A)

Each of the n^2 cofactors is a full cofactor expansion of an
(n-1) x (n-1) minor, so this path is slower and accumulates more
rounding than elimination. It exists because it is the textbook
definition learners check their hand computations against.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pylinsys.core.compute.linalg.minor import minor
from pylinsys.core.compute.linalg.determinant import det_cofactor


@dataclass(frozen=True)
class AdjugateResult:
    """
    Every stage of an adjugate inversion.
    
    Attributes:
        cofactors: Cofactor matrix C (n x n)
        adjugate: Transpose of C
        inverse: adjugate / det
        det: det(A) used for the scaling
    """
    cofactors: NDArray[np.floating[Any]]
    adjugate: NDArray[np.floating[Any]]
    inverse: NDArray[np.floating[Any]]
    det: float


def cofactor_matrix(A: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """
    Matrix of signed minor determinants.
    
    For a 1x1 matrix the only minor is empty, whose determinant is 1.
    """
    n = A.shape[0]
    if n == 1:
        return np.ones((1, 1), dtype=np.float64)
    
    C = np.zeros((n, n), dtype=np.float64)
    for i in range(n):
        for j in range(n):
            sign = 1.0 if (i + j) % 2 == 0 else -1.0
            C[i, j] = sign * det_cofactor(minor(A, i, j))
    return C


def adjugate_inverse(
    A: NDArray[np.floating[Any]],
    det: float,
) -> AdjugateResult:
    """
    Invert A through its adjugate.
    
    The caller has already computed det(A) and rejected singular A;
    det is passed in so the expansion is not repeated.
    
    Args:
        A: Square, non-singular matrix (n x n)
        det: det(A) from det_cofactor
        
    Returns:
        AdjugateResult with the cofactor matrix, adjugate and inverse
    """
    C = cofactor_matrix(A)
    adj = C.T.copy()
    inv = adj / det
    return AdjugateResult(cofactors=C, adjugate=adj, inverse=inv, det=det)
