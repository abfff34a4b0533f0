"""Read results back out of a final tableau."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .config import DEFAULT_CONFIG, SolverConfig
from .model import ProblemDescription, Sign
from .tableau import Tableau

logger = logging.getLogger(__name__)


def objective_value(tab: Tableau) -> float:
    z = float(tab.T[-1, -1])
    return -z if tab.minimize else z


def variable_values(tab: Tableau) -> List[float]:
    return [tab.value_of(j) for j in range(tab.num_decision)]


def shadow_prices(tab: Tableau, problem: ProblemDescription) -> List[float]:
    """Marginal objective change per unit increase of each constraint's RHS.

    ``<=`` rows read their slack column, ``>=`` rows the negated surplus column
    and ``=`` rows their artificial column with the Big-M penalty removed.
    """
    z_row = tab.T[-1]
    flip = -1.0 if tab.minimize else 1.0
    prices = []
    for i, con in enumerate(problem.constraints):
        if con.sign is Sign.LE:
            val = z_row[tab.slack_cols[i]]
        elif con.sign is Sign.GE:
            val = -z_row[tab.surplus_cols[i]]
        else:
            val = z_row[tab.artificial_cols[i]] - tab.big_m
        prices.append(float(flip * val))
    return prices


def has_positive_artificial(tab: Tableau, tol: float) -> bool:
    art = set(tab.artificial_indices())
    return any(bj in art and tab.T[i, -1] > tol for i, bj in enumerate(tab.basis))


def zero_reduced_cost_columns(tab: Tableau, tol: float) -> List[int]:
    basic = set(tab.basis)
    z_row = tab.T[-1]
    return [j for j in range(tab.num_vars) if j not in basic and abs(z_row[j]) < tol]


def alternate_values(tab: Tableau, col: int, config: SolverConfig = DEFAULT_CONFIG) -> Optional[List[float]]:
    """Pivot a copy of ``tab`` once on ``col`` and return the new vertex, if any."""
    alt = tab.copy()
    row = alt.choose_leaving(col, config.ratio_tol)
    if row is None:
        logger.debug("no pivot row for alternate optimum on column %s", tab.headers[col])
        return None
    alt.pivot(row, col)
    return variable_values(alt)


def detect_alternate_optimum(tab: Tableau, config: SolverConfig = DEFAULT_CONFIG) -> Tuple[bool, Optional[List[float]]]:
    candidates = zero_reduced_cost_columns(tab, config.reduced_cost_tol)
    if not candidates:
        return False, None
    return True, alternate_values(tab, candidates[0], config)
