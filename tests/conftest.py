import pytest

from tableau_lp import Constraint, ProblemDescription, Sense


def make_problem(sense, objective, rows, names=None):
    names = names or [f"x{j+1}" for j in range(len(objective))]
    constraints = [Constraint(coeffs, sign, rhs) for coeffs, sign, rhs in rows]
    return ProblemDescription(Sense(sense), names, objective, constraints)


@pytest.fixture
def wyndor():
    # max 3x1 + 5x2, optimum (2, 6) with Z = 36
    return make_problem("max", [3, 5], [
        ([1, 0], "<=", 4),
        ([0, 2], "<=", 12),
        ([3, 2], "<=", 18),
    ])


@pytest.fixture
def wyndor_dual():
    # the dual of wyndor written as a primal: min 4y1 + 12y2 + 18y3
    return make_problem("min", [4, 12, 18], [
        ([1, 0, 3], ">=", 3),
        ([0, 2, 2], ">=", 5),
    ], names=["y1", "y2", "y3"])


@pytest.fixture
def integer_problem():
    # relaxed optimum (2.25, 1.5) Z = 12.75, integer optimum Z = 12
    return make_problem("max", [3, 4], [
        ([2, 1], "<=", 6),
        ([2, 3], "<=", 9),
    ])
