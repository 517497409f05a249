"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylinsys.direct import datasets


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def textbook_system():
    """3x3 system with det(A) = -2 and exact solution [2, 1, 1]."""
    return datasets.textbook_A.copy(), datasets.textbook_b.copy(), datasets.textbook_x.copy()


@pytest.fixture
def well_conditioned_system(rng):
    """Diagonally dominant 5x5 system with a known solution."""
    n = 5
    A = rng.standard_normal((n, n)) + n * np.eye(n)
    x_true = rng.standard_normal(n)
    b = A @ x_true
    return A, b, x_true


@pytest.fixture
def singular_system():
    """Rank-deficient 2x2 system (det = 0)."""
    return datasets.singular_A.copy(), datasets.singular_b.copy()


@pytest.fixture
def trace_log():
    """A list plus a trace callback that appends (event, payload) to it."""
    events = []

    def trace(event, payload):
        events.append((event, payload))

    return events, trace
