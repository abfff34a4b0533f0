import numpy as np

from conftest import make_problem
from tableau_lp import SolverConfig
from tableau_lp.engine import SimplexEngine
from tableau_lp.standard_form import build_tableau

M = 100000.0


def mixed_problem():
    return make_problem("max", [2, 3], [
        ([1, 1], "<=", 4),
        ([1, 3], ">=", 6),
        ([1, 0], "=", 1),
        ([0, 1], "<=", 5),
    ])


def test_headers_are_grouped_by_family():
    tab = build_tableau(mixed_problem())
    assert tab.headers == ["x1", "x2", "s1", "s2", "e1", "a1", "a2"]
    assert tab.T.shape == (5, 8)


def test_initial_basis_and_column_map():
    tab = build_tableau(mixed_problem())
    assert tab.basis == [2, 5, 6, 3]
    assert tab.slack_cols == [2, None, None, 3]
    assert tab.surplus_cols == [None, 4, None, None]
    assert tab.artificial_cols == [None, 5, 6, None]


def test_constraint_rows():
    tab = build_tableau(mixed_problem())
    np.testing.assert_array_almost_equal(tab.T[0], [1, 1, 1, 0, 0, 0, 0, 4])
    np.testing.assert_array_almost_equal(tab.T[1], [1, 3, 0, 0, -1, 1, 0, 6])
    np.testing.assert_array_almost_equal(tab.T[2], [1, 0, 0, 0, 0, 0, 1, 1])
    np.testing.assert_array_almost_equal(tab.T[3], [0, 1, 0, 1, 0, 0, 0, 5])


def test_big_m_objective_row():
    tab = build_tableau(mixed_problem())
    expected = [-2 - 2*M, -3 - 3*M, 0, 0, M, 0, 0, -7*M]
    np.testing.assert_array_almost_equal(tab.T[-1], expected)


def test_big_m_is_configurable():
    tab = build_tableau(mixed_problem(), SolverConfig(big_m=10))
    np.testing.assert_array_almost_equal(tab.T[-1], [-22, -33, 0, 0, 10, 0, 0, -70])
    assert tab.big_m == 10


def test_minimize_negates_objective():
    plain = make_problem("min", [2, 3], [([1, 1], "<=", 4)])
    tab = build_tableau(plain)
    np.testing.assert_array_almost_equal(tab.T[-1], [2, 3, 0, 0])
    assert tab.minimize


def test_initial_state_is_iteration_zero(wyndor):
    engine = SimplexEngine(build_tableau(wyndor))
    first = engine.iterations[0]
    assert len(engine.iterations) == 1
    assert first.number == 0
    assert first.entering is None and first.leaving is None
    assert first.basis == ("s1", "s2", "s3")
    np.testing.assert_array_almost_equal(first.objective_row, [-3, -5, 0, 0, 0, 0])
