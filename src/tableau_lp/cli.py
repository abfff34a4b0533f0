from __future__ import annotations

"""
Command line front end.

Reads a JSON model, prints each tableau iteration and the result:

    {
      "c": [3, 5],
      "A": [[1, 0], [0, 2], [3, 2]],
      "b": [4, 12, 18],
      "senses": ["<=", "<=", "<="],
      "maximize": true,
      "variables": ["x1", "x2"]      (optional)
    }
"""

import argparse
import json
import logging
import math
import sys
from fractions import Fraction
from typing import Dict, List, Optional, Sequence

from .branch_and_bound import BranchAndBoundSolver
from .config import DEFAULT_CONFIG, SolverConfig
from .dual import formulate_dual
from .model import Constraint, GraphData, Iteration, ProblemDescription, Sense, Solution, Status
from .solver import solve

logger = logging.getLogger(__name__)


def fmt_num(x: float) -> str:
    """Format a number as an integer or reduced fraction without float artifacts."""
    x = float(x)
    if math.isnan(x) or math.isinf(x):
        return str(x)
    if abs(x) < 1e-12:
        return "0"
    fr = Fraction.from_float(x).limit_denominator(10**6)
    if fr.denominator == 1:
        return str(fr.numerator)
    sign = '-' if fr.numerator * fr.denominator < 0 else ''
    return f"{sign}{abs(fr.numerator)}/{abs(fr.denominator)}"


def problem_from_dict(cfg: Dict[str, object], sense: Optional[str] = None) -> ProblemDescription:
    try:
        c = [float(v) for v in cfg["c"]]
        A = [[float(v) for v in row] for row in cfg["A"]]
        b = [float(v) for v in cfg["b"]]
        senses = list(cfg["senses"])
    except KeyError as e:
        raise ValueError(f"missing field {e.args[0]!r} in LP description") from e
    except TypeError as e:
        raise ValueError("c, b and senses must be lists and A a list of lists") from e
    if not (len(A) == len(b) == len(senses)):
        raise ValueError("A, b and senses must have one entry per constraint")
    if any(len(row) != len(c) for row in A):
        raise ValueError("every constraint needs one coefficient per objective coefficient")
    if sense is None:
        sense = "max" if cfg.get("maximize", True) else "min"
    names = cfg.get("variables") or [f"x{j+1}" for j in range(len(c))]
    if len(names) != len(c):
        raise ValueError("variables must name every objective coefficient")
    try:
        constraints = [Constraint(row, s, rhs) for row, s, rhs in zip(A, senses, b)]
    except ValueError as e:
        raise ValueError("sense must be one of <=, >=, =") from e
    return ProblemDescription(Sense(sense), names, c, constraints)


def format_tableau(it: Iteration) -> str:
    # Layout: Iteration k, then header: BV x1 x2 ... RHS
    if it.number == 0:
        title = "Initial tableau (Iteration 0)"
    else:
        title = (f"Iteration {it.number}: {it.entering} enters, {it.leaving} leaves "
                 f"(pivot row {it.pivot_row + 1}, column {it.entering})")
    headers = ["BV"] + list(it.headers) + ["RHS"]
    cells: List[List[str]] = []
    for name, row in zip(it.basis, it.rows):
        line = [name] + [fmt_num(v) for v in row]
        cells.append(line)
    cells.append(["Z"] + [fmt_num(v) for v in it.objective_row])

    colw = max(6, max(len(s) for s in headers + [c for line in cells for c in line]) + 2)
    out = [title, " ".join(f"{h:>{colw}}" for h in headers), "-" * (len(headers) * (colw + 1))]
    for i, line in enumerate(cells):
        if it.pivot_row is not None and i == it.pivot_row:
            line = line[:]
            line[it.pivot_col + 1] = f"*{line[it.pivot_col + 1]}"
        out.append(" ".join(f"{c:>{colw}}" for c in line))
    return "\n".join(out)


def print_result(res: Solution, title: str = "Result"):
    print(f"\n=== {title} ===")
    print("Status:", res.status.value)
    if res.status in (Status.OPTIMAL, Status.NODE_LIMIT):
        print("Optimal value:" if res.is_optimal else "Best value found:", fmt_num(res.objective_value))
        print("Solution:", ", ".join(f"{n} = {fmt_num(v)}" for n, v in zip(res.variables, res.values)))
        print("Shadow prices:", [fmt_num(v) for v in res.shadow_prices])
    print("Iterations:", len(res.iterations) - 1)
    if res.multiple_solutions:
        print("Note: Infinite many optimal solutions (alternate optimal).")
        if res.alternate_values is not None:
            print("Alternate vertex:", ", ".join(
                f"{n} = {fmt_num(v)}" for n, v in zip(res.variables, res.alternate_values)))


def plot_graph(graph: GraphData, names: Sequence[str] = ("x1", "x2")):
    """Plot the feasible region, constraint lines, iso-profit line and optima."""
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(figsize=(6, 6))
    if len(graph.vertices) >= 3:
        ax.fill([p.x for p in graph.vertices], [p.y for p in graph.vertices],
                color='#e8f7ff', alpha=0.8, edgecolor='#1f5f8b', label='feasible region')
    for line in graph.constraints:
        if len(line.points) == 2:
            ax.plot([p.x for p in line.points], [p.y for p in line.points],
                    color=line.color, alpha=0.8, label=f"{line.name}: {line.equation}")
    if len(graph.objective_line.points) == 2:
        pts = graph.objective_line.points
        ax.plot([p.x for p in pts], [p.y for p in pts], 'k--', label=f"iso-profit: {graph.objective_line.equation}")
    if graph.vertices:
        ax.scatter([p.x for p in graph.vertices], [p.y for p in graph.vertices], s=25, color='#444444', label='BFS')
    opt = graph.optimal_point
    ax.plot([opt.x], [opt.y], 'ro', label=f"optimal ({opt.x:.3g}, {opt.y:.3g})")
    ax.annotate(f"Z* = {fmt_num(opt.value)}", (opt.x, opt.y), textcoords="offset points", xytext=(8, 8))
    if graph.integer_optimal_point is not None:
        ip = graph.integer_optimal_point
        ax.plot([ip.x], [ip.y], 'gs', label=f"integer optimal ({ip.x:.3g}, {ip.y:.3g})")

    ax.set_xlim(left=0)
    ax.set_ylim(bottom=0)
    ax.set_xlabel(names[0])
    ax.set_ylabel(names[1])
    ax.set_title('Constraints, Feasible Region, Iso-profit')
    ax.legend(loc='best', fontsize=8)
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    plt.show()
    return fig


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="tableau-lp",
                                description="Big-M tableau simplex with dual and integer extensions (shows iterations)")
    p.add_argument("json", help="Path to JSON file describing the LP")
    p.add_argument("--sense", choices=["max", "min"], default=None, help="Objective sense (default: use JSON or max)")
    p.add_argument("--no-verbose", action="store_true", help="Hide iteration printouts")
    p.add_argument("--M", type=float, default=DEFAULT_CONFIG.big_m, help="Big-M penalty for artificial variables")
    p.add_argument("--max-iterations", type=int, default=DEFAULT_CONFIG.max_iterations, help="Simplex pivot limit")
    p.add_argument("--max-nodes", type=int, default=DEFAULT_CONFIG.max_nodes, help="Branch and bound node limit")
    p.add_argument("--integer", action="store_true", help="Also solve with all variables integer (branch and bound)")
    p.add_argument("--dual", action="store_true", help="Print the dual problem")
    p.add_argument("--json-output", action="store_true", help="Print the result as JSON instead of text")
    p.add_argument("--graph", action="store_true", help="Plot constraints and iso-profit (2 variables only)")
    p.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, ...)")
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    try:
        with open(args.json, "r") as f:
            cfg = json.load(f)
        problem = problem_from_dict(cfg, args.sense)
        config = SolverConfig(big_m=args.M, max_iterations=args.max_iterations, max_nodes=args.max_nodes)
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    res = solve(problem, config)
    integer = None
    if args.integer:
        bnb = BranchAndBoundSolver(problem, config)
        integer = bnb.solve()
        if bnb.exhausted:
            logger.warning("node limit reached; integer result may not be optimal")
    dual = formulate_dual(problem) if args.dual else None

    if args.json_output:
        out = {"solution": res.to_dict()}
        if args.integer:
            out["integer_solution"] = integer.to_dict() if integer is not None else None
        if dual is not None:
            out["dual"] = {
                "type": dual.sense.value,
                "variables": [{"name": v.name, "sign": v.restriction.value} for v in dual.variables],
                "constraints": [{"coeffs": list(c.coefficients), "sign": c.sign.value, "rhs": c.rhs}
                                for c in dual.constraints],
                "objective": list(dual.objective),
            }
        print(json.dumps(out, indent=2))
    else:
        if not args.no_verbose:
            for it in res.iterations:
                print()
                print(format_tableau(it))
        print_result(res)
        if args.integer:
            if integer is None:
                print("\n=== Integer result ===\nNo integer solution found.")
            else:
                print_result(integer, "Integer result")
        if dual is not None:
            print("\n=== Dual problem ===")
            print("\n".join(dual.lines()))

    if args.graph:
        graph = (integer.graph if integer is not None and integer.graph is not None else res.graph)
        if graph is None:
            print("Graph only supports 2 variables.")
        else:
            plot_graph(graph, problem.variables)
    return 0


if __name__ == "__main__":
    sys.exit(main())
