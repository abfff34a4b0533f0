from __future__ import annotations

from .model import (
    DualConstraint,
    DualProblem,
    DualVariable,
    ProblemDescription,
    Restriction,
    Sense,
    Sign,
)


def _restriction(sign: Sign, sense: Sense) -> Restriction:
    if sign is Sign.EQ:
        return Restriction.UNRESTRICTED
    natural = Sign.LE if sense is Sense.MAXIMIZE else Sign.GE
    return Restriction.NON_NEGATIVE if sign is natural else Restriction.NON_POSITIVE


def formulate_dual(problem: ProblemDescription) -> DualProblem:
    """Write down the dual of ``problem``.

    Assumes every primal variable is non-negative, so each dual constraint is
    ``>=`` for a maximization primal and ``<=`` for a minimization primal.
    The optimal dual values are the primal shadow prices; nothing is solved here.
    """
    variables = tuple(
        DualVariable(f"y{i+1}", _restriction(con.sign, problem.sense))
        for i, con in enumerate(problem.constraints)
    )
    sign = Sign.GE if problem.sense is Sense.MAXIMIZE else Sign.LE
    constraints = tuple(
        DualConstraint(
            coefficients=tuple(con.coefficients[j] for con in problem.constraints),
            sign=sign,
            rhs=problem.objective[j],
        )
        for j in range(problem.num_vars)
    )
    return DualProblem(
        sense=problem.sense.flipped(),
        variables=variables,
        constraints=constraints,
        objective=tuple(con.rhs for con in problem.constraints),
    )
