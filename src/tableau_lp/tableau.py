from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np

from .model import Iteration


class Tableau:
    """Augmented simplex tableau.

    Matrix layout per row: [var1, var2, ..., varN, RHS]; the objective row is last.
    Column order is decision variables, slacks, surpluses, artificials.
    ``basis[i]`` is the column index of the variable basic in row ``i``.
    """

    def __init__(self, mat, headers: Sequence[str], basis: Sequence[int],
                 slack_cols: Sequence[Optional[int]],
                 surplus_cols: Sequence[Optional[int]],
                 artificial_cols: Sequence[Optional[int]],
                 num_decision: int, minimize: bool = False, big_m: float = 0.0):
        self.T = np.array(mat, dtype=float)
        self.m = self.T.shape[0] - 1
        self.cols = self.T.shape[1]        # including RHS
        self.num_vars = self.cols - 1      # variable columns
        self.headers = list(headers)
        self.basis = list(basis)
        # per constraint: column of its slack / surplus / artificial, or None
        self.slack_cols = list(slack_cols)
        self.surplus_cols = list(surplus_cols)
        self.artificial_cols = list(artificial_cols)
        self.num_decision = num_decision
        self.minimize = minimize
        self.big_m = big_m

    @property
    def objective_row(self) -> np.ndarray:
        return self.T[-1]

    @property
    def rhs(self) -> np.ndarray:
        return self.T[:-1, -1]

    def artificial_indices(self) -> List[int]:
        return [j for j in self.artificial_cols if j is not None]

    def value_of(self, col: int) -> float:
        """Current value of the variable in column ``col`` (0 when non-basic)."""
        for i, bj in enumerate(self.basis):
            if bj == col:
                return float(self.T[i, -1])
        return 0.0

    def choose_entering(self, tol: float) -> Optional[int]:
        # most negative reduced cost; np.argmin keeps the first occurrence on ties
        reduced = self.T[-1, :-1]
        j = int(np.argmin(reduced))
        if reduced[j] < -tol:
            return j
        return None

    def choose_leaving(self, enter_j: int, tol: float) -> Optional[int]:
        best_i = None
        best_ratio = np.inf
        for i in range(self.m):
            aij = self.T[i, enter_j]
            if aij > tol:
                ratio = self.T[i, -1] / aij
                if ratio < best_ratio:
                    best_ratio = ratio
                    best_i = i
        return best_i

    def pivot(self, row: int, col: int):
        piv = self.T[row, col]
        if piv == 0:
            raise ZeroDivisionError("Zero pivot encountered")
        self.T[row, :] /= piv
        for i in range(self.m + 1):
            if i == row:
                continue
            coeff = self.T[i, col]
            if coeff != 0:
                self.T[i, :] -= coeff * self.T[row, :]
        self.basis[row] = col

    def copy(self) -> "Tableau":
        return Tableau(self.T.copy(), self.headers, self.basis, self.slack_cols,
                       self.surplus_cols, self.artificial_cols, self.num_decision,
                       minimize=self.minimize, big_m=self.big_m)

    def snapshot(self, number: int, entering: Optional[int] = None,
                 leaving: Optional[str] = None, pivot_row: Optional[int] = None) -> Iteration:
        z_row = self.T[-1].copy()
        rows = self.T[:-1].copy()
        z_row.setflags(write=False)
        rows.setflags(write=False)
        return Iteration(
            number=number,
            headers=tuple(self.headers),
            objective_row=z_row,
            rows=rows,
            basis=tuple(self.headers[j] for j in self.basis),
            entering=self.headers[entering] if entering is not None else None,
            leaving=leaving,
            pivot_row=pivot_row,
            pivot_col=entering,
        )
