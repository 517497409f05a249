"""
Tests for LinearSystemDesign and LinearSystemSolution.

Covers the validation boundary, buffer ownership, derived properties
and the text rendering in summary().
"""

import numpy as np
import pytest

from pylinsys import solve_cramer, solve_gauss, solve_inversion
from pylinsys.direct import LinearSystemDesign, LinearSystemSolution
from pylinsys.direct.solution import format_matrix, format_vector
from pylinsys.core.exceptions import DimensionError


class TestDesign:

    def test_from_lists(self):
        design = LinearSystemDesign.from_arrays([[1, 2], [3, 4]], [5, 6])
        assert design.n == 2
        assert design.A.dtype == np.float64
        assert design.b.shape == (2,)

    def test_arrays_are_private_and_read_only(self):
        A = np.eye(2)
        design = LinearSystemDesign.from_arrays(A, [1.0, 2.0])
        A[0, 0] = 5.0
        assert design.A[0, 0] == 1.0
        with pytest.raises(ValueError):
            design.A[0, 0] = 3.0

    def test_augmented_is_fresh_buffer(self):
        design = LinearSystemDesign.from_arrays([[1, 2], [3, 4]], [5, 6])
        first = design.augmented()
        second = design.augmented()
        np.testing.assert_array_equal(first, [[1, 2, 5], [3, 4, 6]])
        assert not np.shares_memory(first, second)
        assert not np.shares_memory(first, design.A)
        first[0, 0] = 100.0
        assert design.A[0, 0] == 1.0

    def test_residuals(self):
        design = LinearSystemDesign.from_arrays([[2, 0], [0, 2]], [4, 6])
        np.testing.assert_array_equal(design.residuals(np.array([2.0, 3.0])), [0.0, 0.0])

    def test_b_length_mismatch(self):
        with pytest.raises(DimensionError, match=r"A=3.*b=4"):
            LinearSystemDesign.from_arrays(np.eye(3), np.ones(4))

    def test_one_dimensional_A(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            LinearSystemDesign.from_arrays([1.0, 2.0], [1.0, 2.0])


class TestSolutionProperties:

    def test_residuals_small(self, well_conditioned_system):
        A, b, _ = well_conditioned_system
        sol = solve_gauss(A, b)
        assert sol.residuals.shape == (5,)
        assert sol.residual_norm < 1e-10

    def test_exact_residual_norm(self):
        sol = solve_gauss([[2, 0], [0, 2]], [4, 6])
        assert sol.residual_norm == 0.0

    def test_wraps_result(self, textbook_system):
        A, b, _ = textbook_system
        sol = solve_cramer(A, b)
        assert isinstance(sol, LinearSystemSolution)
        assert sol.n == 3
        assert sol.info['tol'] == 1e-9
        assert 'pylinsys_version' in sol._result.provenance

    def test_repr(self):
        sol = solve_gauss([[2, 0], [0, 2]], [4, 6])
        assert repr(sol).startswith("LinearSystemSolution(n=2, method='gauss'")


class TestFormatting:

    def test_format_vector(self):
        assert format_vector(np.array([2.0, -1.0, 0.5])) == "2 -1 0.5"

    def test_format_matrix(self):
        assert format_matrix(np.array([[1.0, 2.0], [3.0, 4.0]])) == "1 2\n3 4"


class TestSummary:

    def test_cramer_summary(self, textbook_system):
        A, b, _ = textbook_system
        text = solve_cramer(A, b).summary()
        assert "Linear System Solution (cramer)" in text
        assert "det(A): -2" in text
        assert "detXn : -4 -2 -2" in text
        assert "Xn : 2 1 1" in text
        assert "Backend: cpu_cramer" in text

    def test_inversion_summary(self, textbook_system):
        A, b, _ = textbook_system
        text = solve_inversion(A, b).summary()
        assert "Cofactor matrix :" in text
        assert "Adjugate :" in text
        assert "Inverse :\n3.5 2 0.5" in text
        assert "detXn" not in text

    def test_gauss_summary(self, textbook_system):
        A, b, _ = textbook_system
        text = solve_gauss(A, b).summary()
        assert "Reduced augmented matrix :" in text
        assert "Pivot rows: [2, 1, 2]" in text
        assert "Cofactor matrix" not in text

    def test_summary_lists_warnings(self):
        A = np.array([[1.0, 1.0, 1.0], [-5.0, 2.0, 1.0], [2.0, 1.0, 3.0]])
        with pytest.warns(RuntimeWarning):
            sol = solve_gauss(A, A @ np.ones(3), pivoting='legacy')
        assert "Warning: legacy pivoting chose row 2" in sol.summary()
