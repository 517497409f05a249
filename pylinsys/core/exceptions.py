"""
Exception hierarchy for PyLinSys.

All exceptions inherit from PyLinSysError to allow catching any
library-specific error. Solver failures are always one of two kinds:
the input has the wrong shape (DimensionError) or the system has no
unique solution at the fixed threshold (SingularMatrixError).

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyLinSysError(Exception):
    """Base exception for all PyLinSys errors."""
    pass


class ValidationError(PyLinSysError):
    """
    Input validation failed.
    
    Raised when user-provided inputs fail validation checks
    (non-numeric data, NaN/Inf entries, unknown method names).
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.
    
    Raised when the coefficient matrix is not square, is empty, has
    ragged rows, or when the right-hand side length does not match it.
    """
    pass


class NumericalError(PyLinSysError):
    """
    Numerical computation failed.
    
    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.
    
    Raised when |det(A)| (Cramer, inversion) or a pivot magnitude
    (Gaussian elimination) falls below the absolute threshold.
    
    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: det(A), if it was computed
        pivot_index: Elimination step at which the pivot vanished
        pivot_value: The offending pivot value
        threshold: The absolute threshold that was not met
    """
    
    def __init__(
        self, 
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None,
        pivot_index: int | None = None,
        pivot_value: float | None = None,
        threshold: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant
        self.pivot_index = pivot_index
        self.pivot_value = pivot_value
        self.threshold = threshold
