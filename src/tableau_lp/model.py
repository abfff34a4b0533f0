from __future__ import annotations

"""
Value types exchanged with the solver.

- ProblemDescription / Constraint: the caller's model (inputs, never mutated).
- Iteration: one frozen tableau snapshot.
- Solution: the result of one solve, always returned even when the LP is
  infeasible, unbounded or did not converge (see Solution.status).
- DualProblem: the dual formulation derived from a primal description.
- GraphData: plottable geometry for two-variable problems.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple

import numpy as np


class Sense(str, Enum):
    MAXIMIZE = "max"
    MINIMIZE = "min"

    def flipped(self) -> "Sense":
        return Sense.MINIMIZE if self is Sense.MAXIMIZE else Sense.MAXIMIZE


class Sign(str, Enum):
    LE = "<="
    GE = ">="
    EQ = "="


class Status(str, Enum):
    OPTIMAL = "optimal"
    INFEASIBLE = "infeasible"
    UNBOUNDED = "unbounded"
    NON_CONVERGENT = "non_convergent"
    NODE_LIMIT = "node_limit"


class Restriction(str, Enum):
    NON_NEGATIVE = ">= 0"
    NON_POSITIVE = "<= 0"
    UNRESTRICTED = "free"


def _fmt(x: float) -> str:
    # 2.00 -> 2, 2.50 -> 2.50
    s = f"{float(x):.2f}"
    return s[:-3] if s.endswith(".00") else s


@dataclass(frozen=True)
class Constraint:
    coefficients: Tuple[float, ...]
    sign: Sign
    rhs: float

    def __post_init__(self):
        object.__setattr__(self, "coefficients", tuple(float(v) for v in self.coefficients))
        object.__setattr__(self, "sign", Sign(self.sign))
        object.__setattr__(self, "rhs", float(self.rhs))

    def lhs(self, values: Sequence[float]) -> float:
        return sum(a * x for a, x in zip(self.coefficients, values))

    def is_satisfied(self, values: Sequence[float], tol: float = 1e-5) -> bool:
        lhs = self.lhs(values)
        if self.sign is Sign.LE:
            return lhs <= self.rhs + tol
        if self.sign is Sign.GE:
            return lhs >= self.rhs - tol
        return abs(lhs - self.rhs) <= tol

    def equation(self, names: Sequence[str]) -> str:
        terms = " + ".join(f"{_fmt(a)}{name}" for a, name in zip(self.coefficients, names))
        return f"{terms} {self.sign.value} {_fmt(self.rhs)}"


@dataclass(frozen=True)
class ProblemDescription:
    sense: Sense
    variables: Tuple[str, ...]
    objective: Tuple[float, ...]
    constraints: Tuple[Constraint, ...]

    def __post_init__(self):
        object.__setattr__(self, "sense", Sense(self.sense))
        object.__setattr__(self, "variables", tuple(self.variables))
        object.__setattr__(self, "objective", tuple(float(v) for v in self.objective))
        object.__setattr__(self, "constraints", tuple(self.constraints))

    @property
    def num_vars(self) -> int:
        return len(self.variables)

    @property
    def maximize(self) -> bool:
        return self.sense is Sense.MAXIMIZE

    def objective_at(self, values: Sequence[float]) -> float:
        return sum(c * x for c, x in zip(self.objective, values))

    def is_feasible(self, values: Sequence[float], tol: float = 1e-5) -> bool:
        if any(x < -tol for x in values):
            return False
        return all(con.is_satisfied(values, tol) for con in self.constraints)


class Point(NamedTuple):
    x: float
    y: float
    value: Optional[float] = None


@dataclass(frozen=True)
class ConstraintLine:
    name: str
    points: Tuple[Point, ...]
    color: str
    equation: str


@dataclass(frozen=True)
class GraphData:
    vertices: Tuple[Point, ...]
    constraints: Tuple[ConstraintLine, ...]
    objective_line: ConstraintLine
    optimal_point: Point
    integer_optimal_point: Optional[Point] = None

    def to_dict(self) -> Dict[str, object]:
        def line(cl: ConstraintLine):
            return {"name": cl.name, "points": [p._asdict() for p in cl.points],
                    "color": cl.color, "equation": cl.equation}

        return {
            "feasible_region": [p._asdict() for p in self.vertices],
            "constraints": [line(cl) for cl in self.constraints],
            "objective_line": line(self.objective_line),
            "optimal_point": self.optimal_point._asdict(),
            "integer_optimal_point": (self.integer_optimal_point._asdict()
                                      if self.integer_optimal_point is not None else None),
        }


@dataclass(frozen=True, eq=False)
class Iteration:
    number: int
    headers: Tuple[str, ...]
    objective_row: np.ndarray   # read-only, last entry is the RHS
    rows: np.ndarray            # read-only, one row per constraint
    basis: Tuple[str, ...]
    entering: Optional[str] = None
    leaving: Optional[str] = None
    pivot_row: Optional[int] = None
    pivot_col: Optional[int] = None

    def to_dict(self) -> Dict[str, object]:
        return {
            "id": self.number,
            "headers": list(self.headers),
            "z_row": self.objective_row.tolist(),
            "rows": self.rows.tolist(),
            "base": list(self.basis),
            "entering_var": self.entering,
            "leaving_var": self.leaving,
            "pivot_row": self.pivot_row,
            "pivot_col": self.pivot_col,
        }


@dataclass(frozen=True)
class Solution:
    status: Status
    objective_value: float
    variables: Tuple[str, ...]
    values: Tuple[float, ...]
    shadow_prices: Tuple[float, ...]
    iterations: Tuple[Iteration, ...] = field(default_factory=tuple)
    multiple_solutions: bool = False
    alternate_values: Optional[Tuple[float, ...]] = None
    graph: Optional[GraphData] = None

    @property
    def is_optimal(self) -> bool:
        return self.status is Status.OPTIMAL

    def value_map(self) -> Dict[str, float]:
        return dict(zip(self.variables, self.values))

    def to_dict(self) -> Dict[str, object]:
        return {
            "status": self.status.value,
            "z_value": self.objective_value,
            "variables": [{"name": n, "value": v} for n, v in zip(self.variables, self.values)],
            "shadow_prices": list(self.shadow_prices),
            "iterations": [it.to_dict() for it in self.iterations],
            "multiple_solutions": self.multiple_solutions,
            "alternative_solutions": (list(self.alternate_values)
                                      if self.alternate_values is not None else None),
            "graph_data": self.graph.to_dict() if self.graph is not None else None,
        }


@dataclass(frozen=True)
class DualVariable:
    name: str
    restriction: Restriction


@dataclass(frozen=True)
class DualConstraint:
    coefficients: Tuple[float, ...]
    sign: Sign
    rhs: float


@dataclass(frozen=True)
class DualProblem:
    sense: Sense
    variables: Tuple[DualVariable, ...]
    constraints: Tuple[DualConstraint, ...]
    objective: Tuple[float, ...]

    def lines(self) -> List[str]:
        """Render the dual as readable text, one statement per line."""
        names = [v.name for v in self.variables]
        goal = "Minimize" if self.sense is Sense.MINIMIZE else "Maximize"
        terms = " + ".join(f"{_fmt(b)}{n}" for b, n in zip(self.objective, names))
        out = [f"{goal} W = {terms}", "subject to:"]
        for con in self.constraints:
            lhs = " + ".join(f"{_fmt(a)}{n}" for a, n in zip(con.coefficients, names))
            out.append(f"  {lhs} {con.sign.value} {_fmt(con.rhs)}")
        out.append("  " + ", ".join(f"{v.name} {v.restriction.value}" for v in self.variables))
        return out
