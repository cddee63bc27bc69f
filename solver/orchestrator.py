# Orchestrator: validate, search, render
from __future__ import annotations

import time
from typing import Any, Optional

from config import CFG
from models import SIZE_ERROR, Board, InvalidSize, NoSolution, SearchOutcome, SearchStats, SolveResult
from progress import set_size, set_stats, set_done
from render import render_result
from solver.backtracking import resolve_search

# Sizes with no placement at all; answered without running the search.
UNSOLVABLE = frozenset({2, 3})


def validate_size(n: Any) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidSize(SIZE_ERROR)
    if n <= 0 or n > CFG.MAX_N:
        raise InvalidSize(SIZE_ERROR)
    return n


def parse_size(raw: Any) -> int:
    """Board size from user text (CLI argument, query string); bad text is an InvalidSize."""
    if isinstance(raw, int) and not isinstance(raw, bool):
        return validate_size(raw)
    try:
        n = int(str(raw).strip())
    except ValueError:
        raise InvalidSize(SIZE_ERROR) from None
    return validate_size(n)


def _cross_check(board: Board) -> None:
    from solver.cp_sat import verify_placement

    if not verify_placement(board):
        raise RuntimeError(f"CP-SAT rejected the {board.n}-queens placement {board.columns()}")


def solve_board(n: Any, mode: Optional[str] = None, verify: Optional[bool] = None) -> SolveResult:
    """
    Run one solve for size ``n`` and return the finished board.

    ``mode`` picks the search driver (``recursive`` / ``iterative``) and
    ``verify`` the CP-SAT cross-check; both default to :data:`CFG`.
    """
    n = validate_size(n)
    mode = (mode or CFG.SEARCH_MODE or "recursive").strip().lower()
    run_search = resolve_search(mode)
    verify = CFG.VERIFY_CP_SAT if verify is None else bool(verify)

    set_size(n, mode)

    if n in UNSOLVABLE:
        result = NoSolution(n)
        set_done(True, reason=result.message)
        return result

    board = Board.empty(n)
    stats = SearchStats()
    t0 = time.perf_counter()
    try:
        outcome = run_search(board, stats)
        stats.elapsed = time.perf_counter() - t0
        set_stats(stats.placements, stats.backtracks, stats.elapsed)

        if outcome is SearchOutcome.NOT_FOUND:
            result = NoSolution(n)
            set_done(True, reason=result.message)
            return result

        if verify:
            _cross_check(board)
    except Exception as e:
        set_done(False, reason=f"{type(e).__name__}: {e}")
        raise

    set_done(True)
    return board


def solve(n: Any) -> str:
    """Rendered text for size ``n``: a grid, or the no-solution line for 2 and 3."""
    return render_result(solve_board(n))


__all__ = ["solve", "solve_board", "validate_size", "parse_size", "UNSOLVABLE"]
