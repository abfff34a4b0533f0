from __future__ import annotations

"""
Depth-first branch and bound for problems whose variables must all be integer.

Each node holds its own constraint tuple (the original constraints plus the
branching bounds added on the way down) and the relaxed objective of its
parent. Nodes are kept on an explicit LIFO stack; the search stops after
``config.max_nodes`` expansions, and an incumbent found before that is
returned with ``Status.NODE_LIMIT``.
"""

from dataclasses import dataclass, replace
import logging
import math
from typing import List, Optional, Tuple

from .config import DEFAULT_CONFIG, SolverConfig
from .geometry import project
from .model import Constraint, Point, ProblemDescription, Sign, Solution, Status
from .solver import solve

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BranchNode:
    constraints: Tuple[Constraint, ...]
    bound: float
    depth: int = 0


def _bound(problem: ProblemDescription, var: int, sign: Sign, rhs: float) -> Constraint:
    coeffs = [0.0] * problem.num_vars
    coeffs[var] = 1.0
    return Constraint(tuple(coeffs), sign, rhs)


class BranchAndBoundSolver:

    def __init__(self, problem: ProblemDescription, config: Optional[SolverConfig] = None):
        self.problem = problem
        self.config = config or DEFAULT_CONFIG
        self.nodes_explored = 0
        self.exhausted = False
        self.root: Optional[Solution] = None
        self.incumbent: Optional[Solution] = None

    def _improves(self, z: float, best: Optional[float]) -> bool:
        if best is None:
            return True
        return z > best if self.problem.maximize else z < best

    def _most_fractional(self, values) -> Optional[int]:
        best_j, best_frac = None, self.config.integrality_tol
        for j, v in enumerate(values):
            frac = abs(v - round(v))
            if frac > best_frac:
                best_j, best_frac = j, frac
        return best_j

    def solve(self) -> Optional[Solution]:
        """Return the best all-integer solution found, or None."""
        start = math.inf if self.problem.maximize else -math.inf
        stack: List[BranchNode] = [BranchNode(self.problem.constraints, start)]
        best_z: Optional[float] = None

        while stack:
            if self.nodes_explored >= self.config.max_nodes:
                self.exhausted = True
                logger.warning("branch and bound stopped after %d nodes with %d open",
                               self.nodes_explored, len(stack))
                break
            node = stack.pop()
            self.nodes_explored += 1

            # a child can never beat its parent's relaxation
            if not self._improves(node.bound, best_z):
                continue

            sub = replace(self.problem, constraints=node.constraints)
            result = solve(sub, self.config, graph=False)
            if self.root is None:
                self.root = result
            if not result.is_optimal:
                logger.debug("node %d pruned: %s", self.nodes_explored, result.status.value)
                continue
            if not self._improves(result.objective_value, best_z):
                continue

            j = self._most_fractional(result.values)
            if j is None:
                best_z = result.objective_value
                self.incumbent = result
                logger.debug("node %d: new incumbent z=%g", self.nodes_explored, best_z)
                continue

            v = result.values[j]
            low = _bound(self.problem, j, Sign.LE, math.floor(v))
            high = _bound(self.problem, j, Sign.GE, math.ceil(v))
            logger.debug("node %d (depth %d): branching on %s=%g",
                         self.nodes_explored, node.depth, self.problem.variables[j], v)
            stack.append(BranchNode(node.constraints + (low,), result.objective_value, node.depth + 1))
            stack.append(BranchNode(node.constraints + (high,), result.objective_value, node.depth + 1))

        logger.info("branch and bound explored %d nodes, best z=%s", self.nodes_explored, best_z)
        best = self.incumbent
        if best is not None and self.exhausted:
            # the incumbent is feasible but not proven optimal
            best = replace(best, status=Status.NODE_LIMIT)
        return self._with_graph(best)

    def _with_graph(self, best: Optional[Solution]) -> Optional[Solution]:
        if best is None or self.problem.num_vars != 2 or self.root is None:
            return best
        # the continuous region of the root relaxation with the integer point on top
        graph = project(self.problem, self.root.values, self.root.objective_value, self.config)
        graph = replace(graph, integer_optimal_point=Point(best.values[0], best.values[1], best.objective_value))
        return replace(best, graph=graph)


def solve_integer(problem: ProblemDescription, config: Optional[SolverConfig] = None) -> Optional[Solution]:
    return BranchAndBoundSolver(problem, config).solve()
