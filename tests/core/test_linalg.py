"""
Tests for the dense linear algebra kernels.

Validates:
    - minor / replace_column: shape, order, no mutation
    - det_cofactor: base cases, sign convention, known values
    - det_lu: agreement with cofactor expansion, permutation sign
    - cofactor_matrix / adjugate_inverse: hand-computed 3x3 values
    - forward_eliminate / back_substitute: pivot choice, determinant,
      singular detection, legacy pivot rule
"""

import numpy as np
import pytest

from pylinsys.core.exceptions import SingularMatrixError
from pylinsys.core.compute.tolerances import COFACTOR, select_tolerance
from pylinsys.core.compute.linalg import (
    adjugate_inverse,
    back_substitute,
    cofactor_matrix,
    det_cofactor,
    det_lu,
    forward_eliminate,
    minor,
    replace_column,
    select_pivot_row,
)


TEXTBOOK_COFACTORS = np.array([
    [-7.0, 4.0, -9.0],
    [-4.0, 2.0, -6.0],
    [-1.0, 0.0, -1.0],
])

TEXTBOOK_INVERSE = np.array([
    [3.5, 2.0, 0.5],
    [-2.0, -1.0, 0.0],
    [4.5, 3.0, 0.5],
])


# ═══════════════════════════════════════════════════════════════════════
# Submatrices
# ═══════════════════════════════════════════════════════════════════════


class TestMinor:

    def test_removes_row_and_column(self):
        M = np.arange(9.0).reshape(3, 3)
        np.testing.assert_array_equal(minor(M, 1, 2), [[0.0, 1.0], [6.0, 7.0]])

    def test_corner(self):
        M = np.arange(9.0).reshape(3, 3)
        np.testing.assert_array_equal(minor(M, 0, 0), [[4.0, 5.0], [7.0, 8.0]])

    def test_two_by_two_gives_scalar_matrix(self):
        M = np.array([[1.0, 2.0], [3.0, 4.0]])
        np.testing.assert_array_equal(minor(M, 0, 1), [[3.0]])

    def test_input_unchanged(self):
        M = np.arange(16.0).reshape(4, 4)
        before = M.copy()
        minor(M, 2, 1)
        np.testing.assert_array_equal(M, before)


class TestReplaceColumn:

    def test_replaces_one_column(self):
        M = np.eye(3)
        result = replace_column(M, np.array([7.0, 8.0, 9.0]), 1)
        np.testing.assert_array_equal(result[:, 1], [7.0, 8.0, 9.0])
        np.testing.assert_array_equal(result[:, 0], [1.0, 0.0, 0.0])

    def test_input_unchanged(self):
        M = np.eye(3)
        replace_column(M, np.ones(3), 0)
        np.testing.assert_array_equal(M, np.eye(3))


# ═══════════════════════════════════════════════════════════════════════
# Determinants
# ═══════════════════════════════════════════════════════════════════════


class TestDetCofactor:

    def test_one_by_one(self):
        assert det_cofactor(np.array([[-3.5]])) == -3.5

    def test_two_by_two(self):
        assert det_cofactor(np.array([[1.0, 2.0], [3.0, 4.0]])) == -2.0

    def test_textbook(self, textbook_system):
        A, _, _ = textbook_system
        assert det_cofactor(A) == -2.0

    @pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 6])
    def test_identity(self, n):
        assert det_cofactor(np.eye(n)) == 1.0

    def test_zero_row(self):
        A = np.array([[1.0, 2.0, 3.0], [0.0, 0.0, 0.0], [4.0, 5.0, 6.0]])
        assert det_cofactor(A) == 0.0

    def test_upper_triangular_is_diagonal_product(self):
        A = np.triu(np.arange(1.0, 17.0).reshape(4, 4))
        assert det_cofactor(A) == pytest.approx(np.prod(np.diag(A)))

    def test_row_swap_negates(self, textbook_system):
        A, _, _ = textbook_system
        swapped = A[[1, 0, 2]]
        assert det_cofactor(swapped) == -det_cofactor(A)

    def test_returns_python_float(self):
        assert type(det_cofactor(np.eye(3))) is float


class TestDetLU:

    def test_matches_cofactor(self, rng):
        A = rng.standard_normal((5, 5))
        tier = COFACTOR
        assert det_lu(A) == pytest.approx(det_cofactor(A), rel=tier.rtol, abs=tier.atol)

    def test_permutation_sign(self):
        P = np.array([[0.0, 1.0], [1.0, 0.0]])
        assert det_lu(P) == pytest.approx(-1.0)

    def test_singular_is_zero(self):
        A = np.array([[1.0, 2.0, 3.0], [0.0, 0.0, 0.0], [4.0, 5.0, 6.0]])
        assert det_lu(A) == 0.0

    def test_one_by_one(self):
        assert det_lu(np.array([[7.0]])) == pytest.approx(7.0)


# ═══════════════════════════════════════════════════════════════════════
# Adjugate inversion
# ═══════════════════════════════════════════════════════════════════════


class TestAdjugate:

    def test_cofactor_matrix_textbook(self, textbook_system):
        A, _, _ = textbook_system
        np.testing.assert_allclose(cofactor_matrix(A), TEXTBOOK_COFACTORS)

    def test_cofactor_matrix_one_by_one(self):
        np.testing.assert_array_equal(cofactor_matrix(np.array([[5.0]])), [[1.0]])

    def test_adjugate_is_transpose(self, textbook_system):
        A, _, _ = textbook_system
        result = adjugate_inverse(A, det_cofactor(A))
        np.testing.assert_array_equal(result.adjugate, result.cofactors.T)

    def test_inverse_textbook(self, textbook_system):
        A, _, _ = textbook_system
        result = adjugate_inverse(A, -2.0)
        np.testing.assert_allclose(result.inverse, TEXTBOOK_INVERSE)
        assert result.det == -2.0

    def test_inverse_times_matrix_is_identity(self, rng):
        A = rng.standard_normal((4, 4)) + 4 * np.eye(4)
        inv = adjugate_inverse(A, det_cofactor(A)).inverse
        tier = select_tolerance('inversion')
        np.testing.assert_allclose(inv @ A, np.eye(4), rtol=tier.rtol, atol=1e-9)


# ═══════════════════════════════════════════════════════════════════════
# Elimination
# ═══════════════════════════════════════════════════════════════════════


class TestSelectPivotRow:

    def test_partial_picks_largest_magnitude(self):
        M = np.array([[1.0], [-5.0], [2.0]])
        assert select_pivot_row(M, 0, 'partial') == 1

    def test_legacy_ignores_negative_candidates(self):
        M = np.array([[1.0], [-5.0], [2.0]])
        assert select_pivot_row(M, 0, 'legacy') == 2

    def test_ties_keep_first(self):
        M = np.array([[2.0], [-2.0], [2.0]])
        assert select_pivot_row(M, 0, 'partial') == 0

    def test_scans_from_step(self):
        M = np.array([[9.0, 0.0], [0.0, 1.0], [0.0, 3.0]])
        assert select_pivot_row(M, 1, 'partial') == 2

    def test_unknown_rule(self):
        with pytest.raises(ValueError, match="Unknown pivoting"):
            select_pivot_row(np.eye(2), 0, 'complete')


class TestForwardEliminate:

    def test_textbook_pivots_and_determinant(self, textbook_system):
        A, b, _ = textbook_system
        result = forward_eliminate(np.column_stack((A, b)))
        assert result.pivot_rows == (2, 1, 2)
        np.testing.assert_allclose(result.pivots, [3.0, 3.0, 2.0 / 9.0])
        assert result.det == pytest.approx(-2.0)
        assert result.divergences == ()

    def test_unit_upper_triangular(self, textbook_system):
        A, b, _ = textbook_system
        reduced = forward_eliminate(np.column_stack((A, b))).reduced
        left = reduced[:, :3]
        np.testing.assert_allclose(np.diag(left), np.ones(3))
        np.testing.assert_allclose(np.tril(left, -1), np.zeros((3, 3)), atol=1e-15)

    def test_works_in_place(self, textbook_system):
        A, b, _ = textbook_system
        M = np.column_stack((A, b))
        result = forward_eliminate(M)
        assert result.reduced is M

    def test_singular_pivot(self, singular_system):
        A, b = singular_system
        with pytest.raises(SingularMatrixError) as exc_info:
            forward_eliminate(np.column_stack((A, b)))
        assert exc_info.value.pivot_index == 1
        assert exc_info.value.threshold == 1e-9

    def test_legacy_records_divergence(self):
        M = np.array([
            [1.0, 1.0, 1.0, 6.0],
            [-5.0, 2.0, 1.0, 2.0],
            [2.0, 1.0, 3.0, 13.0],
        ])
        result = forward_eliminate(M, pivoting='legacy')
        assert result.pivot_rows[0] == 2
        assert result.divergences[0] == (0, 2, 1)

    def test_legacy_fails_where_partial_succeeds(self):
        M = np.array([[0.0, 1.0, 1.0], [-1.0, 0.0, 2.0]])
        with pytest.raises(SingularMatrixError):
            forward_eliminate(M.copy(), pivoting='legacy')
        result = forward_eliminate(M.copy(), pivoting='partial')
        np.testing.assert_allclose(back_substitute(result.reduced), [-2.0, 1.0])


class TestBackSubstitute:

    def test_unit_upper_triangular(self):
        reduced = np.array([
            [1.0, 2.0, 3.0, 14.0],
            [0.0, 1.0, 4.0, 14.0],
            [0.0, 0.0, 1.0, 3.0],
        ])
        np.testing.assert_allclose(back_substitute(reduced), [1.0, 2.0, 3.0])

    def test_one_by_one(self):
        np.testing.assert_array_equal(back_substitute(np.array([[1.0, 4.0]])), [4.0])
