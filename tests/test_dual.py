import pytest

from conftest import make_problem
from tableau_lp import ProblemDescription, Restriction, Sense, Sign, Status, formulate_dual, solve
from tableau_lp.model import Constraint


def test_dual_of_wyndor(wyndor):
    dual = formulate_dual(wyndor)
    assert dual.sense is Sense.MINIMIZE
    assert [v.name for v in dual.variables] == ["y1", "y2", "y3"]
    assert all(v.restriction is Restriction.NON_NEGATIVE for v in dual.variables)
    assert len(dual.constraints) == 2
    assert dual.constraints[0].coefficients == (1, 0, 3)
    assert dual.constraints[1].coefficients == (0, 2, 2)
    assert all(c.sign is Sign.GE for c in dual.constraints)
    assert [c.rhs for c in dual.constraints] == [3, 5]
    assert dual.objective == (4, 12, 18)


def test_restrictions_for_maximize():
    primal = make_problem("max", [1, 1], [
        ([1, 1], "<=", 4),
        ([1, 0], ">=", 1),
        ([0, 1], "=", 2),
    ])
    dual = formulate_dual(primal)
    assert [v.restriction for v in dual.variables] == [
        Restriction.NON_NEGATIVE, Restriction.NON_POSITIVE, Restriction.UNRESTRICTED,
    ]


def test_restrictions_for_minimize():
    primal = make_problem("min", [1, 1], [
        ([1, 1], ">=", 4),
        ([1, 0], "<=", 3),
        ([0, 1], "=", 2),
    ])
    dual = formulate_dual(primal)
    assert dual.sense is Sense.MAXIMIZE
    assert [v.restriction for v in dual.variables] == [
        Restriction.NON_NEGATIVE, Restriction.NON_POSITIVE, Restriction.UNRESTRICTED,
    ]
    assert all(c.sign is Sign.LE for c in dual.constraints)


def test_strong_duality(wyndor):
    primal = solve(wyndor)
    dual = formulate_dual(wyndor)
    as_problem = ProblemDescription(
        dual.sense,
        [v.name for v in dual.variables],
        dual.objective,
        [Constraint(c.coefficients, c.sign, c.rhs) for c in dual.constraints],
    )
    res = solve(as_problem)
    assert res.status is Status.OPTIMAL
    assert res.objective_value == pytest.approx(primal.objective_value)
    assert res.values == pytest.approx(primal.shadow_prices, abs=1e-6)


def test_dual_text(wyndor):
    lines = formulate_dual(wyndor).lines()
    assert lines[0] == "Minimize W = 4y1 + 12y2 + 18y3"
    assert "  1y1 + 0y2 + 3y3 >= 3" in lines
    assert lines[-1] == "  y1 >= 0, y2 >= 0, y3 >= 0"
