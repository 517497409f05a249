"""
Shared pieces of the direct solver backends.

TraceCallback is the optional diagnostic channel: backends call it with
an event name and the intermediate value (a determinant, a matrix, the
solution) at each stage. Passing print-like callables here is how a
caller reproduces step-by-step console output; tests pass a list's
append or nothing at all.
"""

from __future__ import annotations

from typing import Any, Callable
import warnings

from pylinsys.core.exceptions import SingularMatrixError
from pylinsys.core.compute.tolerances import COFACTOR_WARN_SIZE


TraceCallback = Callable[[str, Any], None]


def emit(trace: TraceCallback | None, event: str, payload: Any) -> None:
    """Send one intermediate value to the trace callback, if any."""
    if trace is not None:
        trace(event, payload)


def cofactor_size_warning(n: int, method: str) -> str | None:
    """
    Warn when cofactor expansion is asked to handle a large matrix.
    
    Returns:
        The warning message (also issued via warnings.warn), or None
    """
    if n <= COFACTOR_WARN_SIZE:
        return None
    message = (
        f"{method}: cofactor expansion on a {n}x{n} matrix costs O(n!) "
        f"determinant terms; use method='gauss' for n > {COFACTOR_WARN_SIZE}"
    )
    warnings.warn(message, RuntimeWarning, stacklevel=3)
    return message


def check_determinant(det: float, tol: float) -> None:
    """
    Reject a system whose determinant is below the absolute threshold.
    
    Raises:
        SingularMatrixError: If |det| < tol
    """
    if abs(det) < tol:
        raise SingularMatrixError(
            f"System has no unique solution: |det(A)| = {abs(det):.3e} "
            f"is below threshold {tol:.0e}",
            matrix_name='A',
            determinant=det,
            threshold=tol,
        )
