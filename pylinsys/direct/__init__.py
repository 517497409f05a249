"""
Direct solvers for small dense linear systems Ax = b.

Three classical methods, each returning a LinearSystemSolution:
    solve_cramer(A, b)     - ratios of determinants
    solve_inversion(A, b)  - adjugate inverse times b
    solve_gauss(A, b)      - pivoted elimination, the reference method

plus determinant(A), inverse(A) and the dispatcher solve(A, b, method=...).

Example:
    >>> from pylinsys.direct import solve_gauss
    >>> sol = solve_gauss([[2, 0], [0, 2]], [4, 6])
    >>> sol.x
    array([2., 3.])
    >>> print(sol.summary())
"""

from pylinsys.direct.design import LinearSystemDesign
from pylinsys.direct.solution import LinearSystemSolution, SolveParams
from pylinsys.direct.solvers import (
    determinant,
    inverse,
    solve,
    solve_cramer,
    solve_gauss,
    solve_inversion,
)

__all__ = [
    "determinant",
    "inverse",
    "solve",
    "solve_cramer",
    "solve_gauss",
    "solve_inversion",
    "LinearSystemDesign",
    "LinearSystemSolution",
    "SolveParams",
]
