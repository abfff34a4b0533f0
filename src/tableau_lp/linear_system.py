from __future__ import annotations

from typing import List, Sequence

import numpy as np

from .errors import SingularSystemError

SINGULAR_TOL = 1e-10


def solve_linear_system(matrix: Sequence[Sequence[float]], rhs: Sequence[float],
                        tol: float = SINGULAR_TOL) -> List[float]:
    """Solve the square system ``A x = b``.

    Raises SingularSystemError when ``|det(A)|`` is below ``tol``, i.e. the
    system has no unique solution (parallel lines in the 2x2 case).
    """
    A = np.array(matrix, dtype=float)
    b = np.array(rhs, dtype=float)
    n = len(b)
    if A.shape != (n, n):
        raise ValueError(f"expected a {n}x{n} matrix, got shape {A.shape}")
    if abs(np.linalg.det(A)) < tol:
        raise SingularSystemError("Singular or ill-conditioned system (no unique solution).")
    try:
        x = np.linalg.solve(A, b)
    except np.linalg.LinAlgError as e:
        raise SingularSystemError(str(e)) from e
    return x.tolist()
