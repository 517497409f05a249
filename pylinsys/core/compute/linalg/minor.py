"""
Submatrix helpers shared by the determinant and inversion kernels.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray


def minor(
    M: NDArray[np.floating[Any]],
    row: int,
    column: int,
) -> NDArray[np.floating[Any]]:
    """
    Matrix with one row and one column removed.
    
    Remaining rows and columns keep their relative order. Indices are
    trusted; callers only pass indices they generated from M's shape.
    
    Args:
        M: Square matrix (n x n), n >= 1
        row: Row to delete
        column: Column to delete
        
    Returns:
        New (n-1) x (n-1) array; M is not modified
    """
    return np.delete(np.delete(M, row, axis=0), column, axis=1)


def replace_column(
    M: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    column: int,
) -> NDArray[np.floating[Any]]:
    """Copy of M with the given column replaced by b."""
    replaced = M.copy()
    replaced[:, column] = b
    return replaced
