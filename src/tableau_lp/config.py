"""Numeric constants used by the solver, grouped so callers can override them."""

from dataclasses import dataclass
import math

BIG_M = 100000.0


@dataclass(frozen=True)
class SolverConfig:
    big_m: float = BIG_M
    entering_tol: float = 1e-9       # objective-row entries below -tol may enter
    ratio_tol: float = 1e-9          # pivot column entries must exceed tol
    feasibility_tol: float = 1e-5
    reduced_cost_tol: float = 1e-5
    integrality_tol: float = 1e-5
    parallel_tol: float = 1e-10
    dedup_tol: float = 1e-3
    max_iterations: int = 100
    max_nodes: int = 5000
    plot_margin: float = 1.5
    min_plot_extent: float = 10.0

    def __post_init__(self):
        if not math.isfinite(self.big_m) or self.big_m <= 0:
            raise ValueError("big_m must be a positive finite number.")
        for name in ("entering_tol", "ratio_tol", "feasibility_tol", "reduced_cost_tol",
                     "integrality_tol", "parallel_tol", "dedup_tol"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative.")
        if self.max_iterations <= 0 or self.max_nodes <= 0:
            raise ValueError("max_iterations and max_nodes must be positive.")
        if self.plot_margin <= 0 or self.min_plot_extent <= 0:
            raise ValueError("plot_margin and min_plot_extent must be positive.")


DEFAULT_CONFIG = SolverConfig()
