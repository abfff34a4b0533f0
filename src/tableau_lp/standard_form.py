from __future__ import annotations

from typing import List, Optional

import numpy as np

from .config import DEFAULT_CONFIG, SolverConfig
from .model import ProblemDescription, Sign
from .tableau import Tableau


def build_tableau(problem: ProblemDescription, config: SolverConfig = DEFAULT_CONFIG) -> Tableau:
    """Build the initial Big-M tableau for ``problem``.

    The tableau always maximizes: a MINIMIZE objective is negated here and the
    sign of the optimum is restored when the solution is read back.

    - ``<=`` adds a slack (basic in its row)
    - ``>=`` adds a surplus (-1) and an artificial (+1, basic)
    - ``=``  adds an artificial (basic)

    Artificial columns are penalized with ``config.big_m`` and the penalty is
    eliminated from the objective row so every basic column starts with a zero
    reduced cost.
    """
    m, n = len(problem.constraints), problem.num_vars
    c = np.array(problem.objective, dtype=float)
    if not problem.maximize:
        c = -c

    # Count extra columns per family, then lay them out family by family
    num_slack = sum(1 for con in problem.constraints if con.sign is Sign.LE)
    num_surplus = sum(1 for con in problem.constraints if con.sign is Sign.GE)
    num_art = sum(1 for con in problem.constraints if con.sign in (Sign.GE, Sign.EQ))

    slack_start = n
    surplus_start = slack_start + num_slack
    art_start = surplus_start + num_surplus
    N = art_start + num_art

    headers = list(problem.variables)
    headers += [f"s{k+1}" for k in range(num_slack)]
    headers += [f"e{k+1}" for k in range(num_surplus)]
    headers += [f"a{k+1}" for k in range(num_art)]

    T = np.zeros((m + 1, N + 1))
    basis = [-1] * m
    slack_cols: List[Optional[int]] = [None] * m
    surplus_cols: List[Optional[int]] = [None] * m
    art_cols: List[Optional[int]] = [None] * m

    ns = ne = na = 0
    for i, con in enumerate(problem.constraints):
        T[i, :n] = con.coefficients
        T[i, -1] = con.rhs
        if con.sign is Sign.LE:
            j = slack_start + ns
            ns += 1
            T[i, j] = 1.0
            slack_cols[i] = j
            basis[i] = j
        elif con.sign is Sign.GE:
            j = surplus_start + ne
            ne += 1
            T[i, j] = -1.0
            surplus_cols[i] = j
            a = art_start + na
            na += 1
            T[i, a] = 1.0
            art_cols[i] = a
            basis[i] = a
        else:
            a = art_start + na
            na += 1
            T[i, a] = 1.0
            art_cols[i] = a
            basis[i] = a

    # Z - c x = 0, so the objective row holds -c
    T[-1, :n] = -c

    M = config.big_m
    for i, a in enumerate(art_cols):
        if a is None:
            continue
        # max c x - M a  =>  coefficient +M in the Z row, then eliminate it
        T[-1, a] = M
        T[-1, :] -= M * T[i, :]

    return Tableau(T, headers, basis, slack_cols, surplus_cols, art_cols,
                   num_decision=n, minimize=not problem.maximize, big_m=M)
