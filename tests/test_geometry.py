import math

import pytest

from conftest import make_problem
from tableau_lp import SolverConfig, project, solve
from tableau_lp.geometry import PALETTE, clip_line, feasible_vertices, intersect


def test_wyndor_polygon(wyndor):
    vertices = feasible_vertices(wyndor)
    assert [tuple(p[:2]) for p in vertices] == [
        pytest.approx((0, 0)), pytest.approx((4, 0)), pytest.approx((4, 3)),
        pytest.approx((2, 6)), pytest.approx((0, 6)),
    ]


@pytest.mark.parametrize("name", ["wyndor", "integer_problem"])
def test_vertices_are_feasible_and_distinct(name, request):
    problem = request.getfixturevalue(name)
    res = solve(problem)
    vertices = res.graph.vertices
    assert len(vertices) >= 3
    for p in vertices:
        assert problem.is_feasible((p.x, p.y), 1e-5)
    tol = SolverConfig().dedup_tol
    for p, q in zip(vertices, vertices[1:] + vertices[:1]):
        assert abs(p.x - q.x) > tol or abs(p.y - q.y) > tol


def test_vertices_wind_counter_clockwise(integer_problem):
    vertices = feasible_vertices(integer_problem)
    cx = sum(p.x for p in vertices) / len(vertices)
    cy = sum(p.y for p in vertices) / len(vertices)
    angles = [math.atan2(p.y - cy, p.x - cx) for p in vertices]
    assert angles == sorted(angles)


def test_equality_constraint_region():
    problem = make_problem("max", [1, 1], [([1, 1], "=", 2)])
    vertices = feasible_vertices(problem)
    assert sorted(tuple(p[:2]) for p in vertices) == [(0.0, 2.0), (2.0, 0.0)]


def test_empty_region():
    problem = make_problem("max", [1, 1], [([1, 0], ">=", 5), ([1, 0], "<=", 2)])
    assert feasible_vertices(problem) == []


def test_constraint_segments(wyndor):
    graph = solve(wyndor).graph
    first, second, third = graph.constraints
    assert first.name == "R1"
    assert len(first.points) == 2
    assert first.points[0][:2] == pytest.approx((4, 0))
    assert first.points[1][:2] == pytest.approx((4, 15))
    assert second.points[0][:2] == pytest.approx((0, 6))
    assert second.points[1][:2] == pytest.approx((15, 6))
    assert third.points[0][:2] == pytest.approx((0, 9))
    assert third.points[1][:2] == pytest.approx((6, 0))
    assert [c.color for c in graph.constraints] == list(PALETTE[:3])
    assert first.equation == "1x1 + 0x2 <= 4"
    assert graph.objective_line.equation == "3x1 + 5x2 = 36"


def test_objective_line_passes_through_optimum(wyndor):
    graph = solve(wyndor).graph
    line = graph.objective_line
    assert len(line.points) == 2
    for p in line.points:
        assert 3*p.x + 5*p.y == pytest.approx(36)
    assert line.points[0][:2] == pytest.approx((0, 7.2))
    assert line.points[1][:2] == pytest.approx((12, 0))


def test_palette_cycles():
    rows = [([1, 0], "<=", k + 1) for k in range(len(PALETTE) + 1)]
    problem = make_problem("max", [1, 1], rows + [([0, 1], "<=", 3)])
    graph = solve(problem).graph
    assert graph.constraints[len(PALETTE)].color == PALETTE[0]
    assert graph.constraints[1].color == PALETTE[1]


def test_minimum_extent():
    problem = make_problem("max", [1, 1], [([1, 0], "<=", 1), ([0, 1], "<=", 1)])
    graph = solve(problem).graph
    # limit is 1.5 * 10
    assert graph.constraints[0].points[-1][:2] == pytest.approx((1, 15))


def test_clip_line_touching_corner():
    # x + y = 0 meets the square only at the origin
    assert clip_line(1, 1, 0, 15) == ((0.0, 0.0, None),)
    assert clip_line(1, 1, 40, 15) == ()


def test_parallel_lines_do_not_intersect():
    assert intersect((1, 2, 3), (2, 4, 5), 1e-10) is None
    assert intersect((1, 0, 4), (0, 1, 3), 1e-10) == pytest.approx((4, 3))


def test_three_variables_have_no_geometry():
    problem = make_problem("max", [1, 1, 1], [([1, 1, 1], "<=", 1)])
    assert project(problem, (1, 0, 0), 1) is None
