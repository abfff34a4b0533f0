from __future__ import annotations

"""
Geometry for two-variable problems.

- Feasible region: every pairwise intersection of the constraint lines and the
  axes x=0, y=0 that satisfies all constraints, ordered by angle around the
  centroid so the list can be drawn directly as a polygon.
- Constraint lines and the objective iso-line, clipped to the square
  [0, limit] x [0, limit] that contains the region and the optimum.
"""

from itertools import combinations
import math
from typing import List, Optional, Sequence, Tuple

from .config import DEFAULT_CONFIG, SolverConfig
from .errors import SingularSystemError
from .linear_system import solve_linear_system
from .model import ConstraintLine, GraphData, Point, ProblemDescription, _fmt

PALETTE = ("#ef4444", "#3b82f6", "#f59e0b", "#8b5cf6", "#ec4899", "#06b6d4")
OBJECTIVE_COLOR = "#000000"

Line = Tuple[float, float, float]   # a x + b y = rhs


def constraint_color(index: int) -> str:
    return PALETTE[index % len(PALETTE)]


def intersect(l1: Line, l2: Line, tol: float) -> Optional[Tuple[float, float]]:
    a1, b1, r1 = l1
    a2, b2, r2 = l2
    try:
        x, y = solve_linear_system([[a1, b1], [a2, b2]], [r1, r2], tol)
    except SingularSystemError:
        return None
    return x, y


def feasible_vertices(problem: ProblemDescription, config: SolverConfig = DEFAULT_CONFIG) -> List[Point]:
    lines: List[Line] = [(con.coefficients[0], con.coefficients[1], con.rhs) for con in problem.constraints]
    lines.append((1.0, 0.0, 0.0))  # x = 0
    lines.append((0.0, 1.0, 0.0))  # y = 0

    pts: List[Point] = []
    for l1, l2 in combinations(lines, 2):
        p = intersect(l1, l2, config.parallel_tol)
        if p is None or not problem.is_feasible(p, config.feasibility_tol):
            continue
        x, y = p
        if not any(abs(x - q.x) < config.dedup_tol and abs(y - q.y) < config.dedup_tol for q in pts):
            pts.append(Point(x, y))

    if pts:
        cx = sum(p.x for p in pts) / len(pts)
        cy = sum(p.y for p in pts) / len(pts)
        pts.sort(key=lambda p: math.atan2(p.y - cy, p.x - cx))
    return pts


def clip_line(a: float, b: float, rhs: float, limit: float, tol: float = 1e-10) -> Tuple[Point, ...]:
    """Clip ``a x + b y = rhs`` to the square [0, limit]^2 and return its two end points."""
    cand: List[Point] = []
    if abs(b) > tol:
        cand.append(Point(0.0, rhs / b))
        cand.append(Point(limit, (rhs - a*limit) / b))
    if abs(a) > tol:
        cand.append(Point(rhs / a, 0.0))
        cand.append(Point((rhs - b*limit) / a, limit))

    eps = 1e-9 * max(1.0, limit)
    inside = [p for p in cand if -eps <= p.x <= limit + eps and -eps <= p.y <= limit + eps]
    inside.sort()
    if len(inside) < 2:
        return tuple(inside)
    first, last = inside[0], inside[-1]
    if abs(first.x - last.x) <= eps and abs(first.y - last.y) <= eps:
        # the line only touches a corner
        return (first,)
    return first, last


def plot_limit(vertices: Sequence[Point], optimum: Point, config: SolverConfig = DEFAULT_CONFIG) -> float:
    coords = [optimum.x, optimum.y, config.min_plot_extent]
    for p in vertices:
        coords += [p.x, p.y]
    return max(coords) * config.plot_margin


def project(problem: ProblemDescription, values: Sequence[float], objective_value: float,
            config: SolverConfig = DEFAULT_CONFIG) -> Optional[GraphData]:
    """Build the plottable geometry of a two-variable problem (None otherwise)."""
    if problem.num_vars != 2:
        return None
    names = problem.variables

    vertices = feasible_vertices(problem, config)
    optimum = Point(float(values[0]), float(values[1]), float(objective_value))
    limit = plot_limit(vertices, optimum, config)

    lines = tuple(
        ConstraintLine(
            name=f"R{i+1}",
            points=clip_line(con.coefficients[0], con.coefficients[1], con.rhs, limit, config.parallel_tol),
            color=constraint_color(i),
            equation=con.equation(names),
        )
        for i, con in enumerate(problem.constraints)
    )

    c1, c2 = problem.objective
    objective_line = ConstraintLine(
        name="Z",
        points=clip_line(c1, c2, optimum.value, limit, config.parallel_tol),
        color=OBJECTIVE_COLOR,
        equation=f"{_fmt(c1)}{names[0]} + {_fmt(c2)}{names[1]} = {_fmt(optimum.value)}",
    )
    return GraphData(
        vertices=tuple(vertices),
        constraints=lines,
        objective_line=objective_line,
        optimal_point=optimum,
    )
