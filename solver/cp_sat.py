# solver/cp_sat.py
"""
Independent CP-SAT check of a backtracking placement.

The model is the classic one-variable-per-row formulation: each row's
variable holds the queen's column, and columns plus both diagonal offsets must
be pairwise different. Pinning the variables to a placement turns the model
into a yes/no check of that placement.
"""
from typing import Optional, Sequence, Tuple

from config import CFG
from models import Board


def build_model(n: int, fixed_columns: Optional[Sequence[int]] = None) -> Tuple[object, list]:
    from ortools.sat.python import cp_model as _cp  # optional dependency

    m = _cp.CpModel()
    queens = [m.new_int_var(0, n - 1, f"q_{r}") for r in range(n)]

    m.add_all_different(queens)
    m.add_all_different(queens[r] + r for r in range(n))
    m.add_all_different(queens[r] - r for r in range(n))

    if fixed_columns is not None:
        for r, col in enumerate(fixed_columns):
            m.add(queens[r] == int(col))
    return m, queens


def is_feasible(
    n: int,
    fixed_columns: Optional[Sequence[int]] = None,
    max_seconds: Optional[float] = None,
) -> bool:
    from ortools.sat.python import cp_model as _cp

    m, _queens = build_model(n, fixed_columns)

    solver = _cp.CpSolver()
    seconds = CFG.CP_SAT_SECONDS if max_seconds is None else max_seconds
    solver.parameters.max_time_in_seconds = float(seconds)
    solver.parameters.num_search_workers = int(getattr(CFG, "WORKERS", 1))
    solver.parameters.log_search_progress = False

    res = solver.Solve(m)
    return res in (_cp.OPTIMAL, _cp.FEASIBLE)


def verify_placement(board: Board, max_seconds: Optional[float] = None) -> bool:
    columns = board.columns()
    if len(columns) != board.n or any(c < 0 for c in columns):
        return False
    if len(board.queens()) != board.n:
        return False
    return is_feasible(board.n, columns, max_seconds)


__all__ = ["build_model", "is_feasible", "verify_placement"]
