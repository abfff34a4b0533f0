from __future__ import annotations

import logging
from typing import List

from .config import DEFAULT_CONFIG, SolverConfig
from .errors import NonConvergenceError, UnboundedError
from .model import Iteration
from .tableau import Tableau

logger = logging.getLogger(__name__)


class SimplexEngine:
    """Run Big-M simplex pivots on a tableau, keeping a snapshot per pivot.

    The initial tableau is recorded as iteration 0 on construction. ``run``
    returns once the objective row has no entry below ``-entering_tol``;
    it raises UnboundedError when the ratio test finds no row and
    NonConvergenceError once ``max_iterations`` pivots were not enough. In both
    cases ``tableau`` and ``iterations`` keep the state reached so far.
    """

    def __init__(self, tableau: Tableau, config: SolverConfig = DEFAULT_CONFIG):
        self.tableau = tableau
        self.config = config
        self.iterations: List[Iteration] = [tableau.snapshot(0)]

    @property
    def pivots(self) -> int:
        return len(self.iterations) - 1

    def step(self) -> bool:
        """Perform one pivot. Returns False when the tableau is already optimal."""
        tab = self.tableau
        enter_j = tab.choose_entering(self.config.entering_tol)
        if enter_j is None:
            return False
        leave_i = tab.choose_leaving(enter_j, self.config.ratio_tol)
        if leave_i is None:
            raise UnboundedError(tab.headers[enter_j])

        leaving = tab.headers[tab.basis[leave_i]]
        tab.pivot(leave_i, enter_j)
        logger.debug("pivot %d: %s enters, %s leaves (row %d, col %d)",
                     self.pivots + 1, tab.headers[enter_j], leaving, leave_i, enter_j)
        self.iterations.append(
            tab.snapshot(len(self.iterations), entering=enter_j, leaving=leaving, pivot_row=leave_i)
        )
        return True

    def run(self) -> Tableau:
        while self.step():
            if (self.pivots >= self.config.max_iterations
                    and self.tableau.choose_entering(self.config.entering_tol) is not None):
                raise NonConvergenceError(self.config.max_iterations)
        return self.tableau
