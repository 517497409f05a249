"""
Shared compute infrastructure for PyLinSys.

This module provides timing utilities, tolerance constants and the
dense linear algebra kernels that the solver backends are built from.

IMPORTANT: This is NOT where solver backends live. Those go in
direct/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Singularity threshold and comparison tiers
    linalg: Minors, determinants, adjugate, elimination
"""

from pylinsys.core.compute.timing import Timer, timed

__all__ = [
    # Timing
    "Timer",
    "timed",
]
