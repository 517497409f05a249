"""
Linear system design.

Design holds the coefficient matrix A and right-hand side b of one
system Ax = b. It is the validation boundary: once a Design exists,
A is a finite n x n float64 matrix with n >= 1 and b has length n, and
backends trust that without checking again.

Design owns private copies of A and b. Solvers that work in place
(Gaussian elimination) ask for a fresh augmented buffer, so the
caller's arrays are never aliased or modified.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinsys.core.validation import (
    check_array,
    check_finite,
    check_2d,
    check_1d,
    check_square,
    check_consistent_length,
)


@dataclass(frozen=True)
class LinearSystemDesign:
    """
    Square linear system Ax = b.
    
    Immutable after construction.
    
    Construction:
        LinearSystemDesign.from_arrays(A, b)
    """
    _A: NDArray[np.floating[Any]]
    _b: NDArray[np.floating[Any]]
    _n: int
    
    @classmethod
    def from_arrays(cls, A: ArrayLike, b: ArrayLike) -> LinearSystemDesign:
        """Build a design from any array-likes (nested lists, tuples, arrays)."""
        A_arr = check_array(A, 'A')
        b_arr = check_array(b, 'b')
        return cls._build(A_arr, b_arr)
    
    @classmethod
    def _build(cls, A: NDArray, b: NDArray) -> LinearSystemDesign:
        """Internal builder with validation."""
        # Column vector b is accepted as a vector
        if b.ndim == 2 and b.shape[1] == 1:
            b = b.ravel()
        
        check_2d(A, 'A')
        check_1d(b, 'b')
        check_square(A, 'A')
        check_consistent_length(A, b, names=('A', 'b'))
        check_finite(A, 'A')
        check_finite(b, 'b')
        
        A.flags.writeable = False
        b.flags.writeable = False
        return cls(_A=A, _b=b, _n=A.shape[0])
    
    # === Properties ===
    
    @property
    def A(self) -> NDArray[np.floating[Any]]:
        """Coefficient matrix (n x n), read-only."""
        return self._A
    
    @property
    def b(self) -> NDArray[np.floating[Any]]:
        """Right-hand side (n,), read-only."""
        return self._b
    
    @property
    def n(self) -> int:
        """Number of equations (and unknowns)."""
        return self._n
    
    def augmented(self) -> NDArray[np.floating[Any]]:
        """Fresh, writable n x (n+1) matrix [A | b]."""
        return np.column_stack((self._A, self._b))
    
    def residuals(self, x: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
        """b - Ax for a candidate solution x."""
        return self._b - self._A @ x
