"""Tableau simplex (Big-M) with shadow prices, dual formulation, branch and bound and 2-D geometry."""

from .branch_and_bound import BranchAndBoundSolver, solve_integer
from .config import DEFAULT_CONFIG, SolverConfig
from .dual import formulate_dual
from .errors import (
    NonConvergenceError,
    SimplexError,
    SingularSystemError,
    TableauLPError,
    UnboundedError,
)
from .geometry import project
from .linear_system import solve_linear_system
from .model import (
    Constraint,
    ConstraintLine,
    DualConstraint,
    DualProblem,
    DualVariable,
    GraphData,
    Iteration,
    Point,
    ProblemDescription,
    Restriction,
    Sense,
    Sign,
    Solution,
    Status,
)
from .solver import solve

__version__ = "0.1.0"
