"""
Core infrastructure for PyLinSys.

This module provides shared abstractions, utilities, and numeric kernels
used by the solver package.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, tolerances, linear algebra kernels
"""

from pylinsys.core.protocols import Backend
from pylinsys.core.result import Result
from pylinsys.core.exceptions import (
    PyLinSysError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyLinSysError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
]
