"""
Reference systems for examples and validation.

Each entry is a pair (A, b). Known solutions are given where they are
exact.
"""

import numpy as np

# Textbook 3x3 system, det(A) = -2, exact solution x = [2, 1, 1]
textbook_A = np.array([
    [1.0, -1.0, -1.0],
    [-2.0, 1.0, 2.0],
    [3.0, 3.0, -1.0],
])
textbook_b = np.array([0.0, -1.0, 8.0])
textbook_x = np.array([2.0, 1.0, 1.0])

# 4x4 exercise system with fractional coefficients
exercise_A = np.array([
    [0.79, 0.05, -0.25, 0.08],
    [0.21, -0.13, 0.27, -0.8],
    [-0.11, -0.84, 0.35, 0.06],
    [-0.08, 0.15, -0.5, -0.12],
])
exercise_b = np.array([2.15, 0.44, -0.83, 1.16])

# Rank-deficient 2x2 system, det(A) = 0
singular_A = np.array([
    [1.0, 1.0],
    [1.0, 1.0],
])
singular_b = np.array([1.0, 2.0])
