from __future__ import annotations

import logging
from typing import Optional

from .analysis import (
    detect_alternate_optimum,
    has_positive_artificial,
    objective_value,
    shadow_prices,
    variable_values,
)
from .config import DEFAULT_CONFIG, SolverConfig
from .engine import SimplexEngine
from .errors import NonConvergenceError, UnboundedError
from .geometry import project
from .model import ProblemDescription, Solution, Status
from .standard_form import build_tableau

logger = logging.getLogger(__name__)


def solve(problem: ProblemDescription, config: Optional[SolverConfig] = None, graph: bool = True) -> Solution:
    """Solve ``problem`` with the Big-M tableau simplex.

    Never raises for unbounded, infeasible or non-convergent problems: the
    outcome is reported in ``Solution.status`` and the rest of the solution is
    read from whatever tableau the iteration stopped at.
    """
    config = config or DEFAULT_CONFIG
    engine = SimplexEngine(build_tableau(problem, config), config)

    status = Status.OPTIMAL
    try:
        engine.run()
    except UnboundedError as e:
        logger.info("%s", e)
        status = Status.UNBOUNDED
    except NonConvergenceError as e:
        logger.warning("%s", e)
        status = Status.NON_CONVERGENT

    tab = engine.tableau
    if status is Status.OPTIMAL and has_positive_artificial(tab, config.feasibility_tol):
        status = Status.INFEASIBLE

    values = variable_values(tab)
    z = objective_value(tab)

    multiple, alternate = False, None
    if status is Status.OPTIMAL:
        multiple, alternate = detect_alternate_optimum(tab, config)

    logger.info("solve finished: status=%s z=%g after %d pivots", status.value, z, engine.pivots)
    return Solution(
        status=status,
        objective_value=z,
        variables=problem.variables,
        values=tuple(values),
        shadow_prices=tuple(shadow_prices(tab, problem)),
        iterations=tuple(engine.iterations),
        multiple_solutions=multiple,
        alternate_values=tuple(alternate) if alternate is not None else None,
        graph=project(problem, values, z, config) if graph else None,
    )
