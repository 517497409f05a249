"""
Input validation utilities for PyLinSys.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent. Every check runs before any
arithmetic, so a rejected input never leaves partial work behind.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from collections.abc import Sequence
import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pylinsys.core.exceptions import ValidationError, DimensionError


def check_rectangular(array: ArrayLike, name: str) -> None:
    """
    Verify a nested sequence has rows of equal length.
    
    NumPy refuses to build an array from ragged rows, and the resulting
    ValueError does not say which rows disagree. Arrays (already
    rectangular by construction) pass through untouched.
    
    Args:
        array: Input to validate
        name: Parameter name for error messages
        
    Raises:
        DimensionError: If rows have different lengths
    """
    if isinstance(array, np.ndarray) or not isinstance(array, Sequence):
        return
    rows = [row for row in array if hasattr(row, '__len__') and not isinstance(row, (str, bytes))]
    if not rows:
        return
    if len(rows) != len(array):
        raise DimensionError(f"{name}: mixes scalar entries and rows")
    lengths = [len(row) for row in rows]
    if len(set(lengths)) > 1:
        raise DimensionError(f"{name}: ragged rows with lengths {lengths}")


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.
    
    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).
    The result is always a fresh copy, never a view of the caller's data.
    
    Args:
        array: Input to validate
        name: Parameter name for error messages
        
    Returns:
        numpy.ndarray with float64 dtype
        
    Raises:
        DimensionError: If rows of a nested sequence have different lengths
        ValidationError: If input cannot be converted to numeric array
    """
    check_rectangular(array, name)
    try:
        result = np.array(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e
    
    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, complex, etc.)
    if not (np.issubdtype(result.dtype, np.integer)
            or np.issubdtype(result.dtype, np.floating)
            or result.dtype == np.bool_):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real-valued data"
        )

    return result.astype(np.float64)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.
    
    Args:
        array: Array to check
        name: Parameter name for error messages
        
    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.
    
    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages
        
    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_square(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify a 2D array is square with at least one row.
    
    Args:
        array: 2D array to check
        name: Parameter name for error messages
        
    Raises:
        DimensionError: If array is empty or rows != columns
    """
    n_rows, n_cols = array.shape
    if n_rows == 0 or n_cols == 0:
        raise DimensionError(f"{name}: empty matrix with shape {array.shape}")
    if n_rows != n_cols:
        raise DimensionError(
            f"{name}: expected square matrix, got {n_rows} rows x {n_cols} columns"
        )


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]], 
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).
    
    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)
        
    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )
    
    if len(arrays) < 2:
        return
    
    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_square_matrix(matrix: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Convert and validate a coefficient matrix in one step.
    
    Used by the standalone kernels (determinant, inverse) that take a
    bare matrix without a right-hand side.
    
    Returns:
        Validated float64 copy of the matrix
    """
    arr = check_array(matrix, name)
    check_2d(arr, name)
    check_square(arr, name)
    check_finite(arr, name)
    return arr
