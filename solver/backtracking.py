# solver/backtracking.py
from typing import Callable, Dict, List, Optional, Tuple

from models import Board, SearchOutcome, SearchStats, UnknownSearchMode
from solver.board import Occupancy


def _descend(occ: Occupancy, row: int, stats: SearchStats) -> SearchOutcome:
    n = occ.board.n
    if row == n:
        # every row holds a queen
        return SearchOutcome.FOUND

    for col in occ.free_columns(row):
        occ.place(row, col)
        stats.placements += 1

        if _descend(occ, row + 1, stats) is SearchOutcome.FOUND:
            return SearchOutcome.FOUND

        occ.remove(row, col)
        stats.backtracks += 1

    return SearchOutcome.NOT_FOUND


def search(board: Board, row: int = 0, stats: Optional[SearchStats] = None) -> SearchOutcome:
    """
    Row-by-row depth-first search for one non-attacking placement.

    Columns are tried left to right, so the first solution found is always the
    same for a given N. On ``FOUND`` the queens stay on ``board``; on
    ``NOT_FOUND`` every placement made below ``row`` has been undone.
    Attacks are looked up in an :class:`Occupancy` index built from ``board``.
    """
    if stats is None:
        stats = SearchStats()
    return _descend(Occupancy(board), row, stats)


def search_iterative(board: Board, stats: Optional[SearchStats] = None) -> SearchOutcome:
    """Same walk as :func:`search`, driven by an explicit stack of (row, next_col) frames."""
    if stats is None:
        stats = SearchStats()

    occ = Occupancy(board)
    n = board.n
    stack: List[Tuple[int, int]] = [(0, 0)]

    while stack:
        row, start = stack.pop()
        if row == n:
            return SearchOutcome.FOUND

        for col in occ.free_columns(row, start):
            occ.place(row, col)
            stats.placements += 1
            # resume point for this row if the subtree fails, then the subtree
            stack.append((row, col + 1))
            stack.append((row + 1, 0))
            break
        else:
            # row exhausted: lift the queen above so its frame can move right
            if row > 0:
                prev_col = board.occupied[row - 1].index(True)
                occ.remove(row - 1, prev_col)
                stats.backtracks += 1

    return SearchOutcome.NOT_FOUND


def _search_from_top(board: Board, stats: Optional[SearchStats] = None) -> SearchOutcome:
    return search(board, 0, stats)


SEARCH_MODES: Dict[str, Callable[..., SearchOutcome]] = {
    "recursive": _search_from_top,
    "iterative": search_iterative,
}


def resolve_search(mode: Optional[str]) -> Callable[..., SearchOutcome]:
    key = (mode or "").strip().lower() or "recursive"
    try:
        return SEARCH_MODES[key]
    except KeyError:
        raise UnknownSearchMode(mode) from None


__all__ = ["search", "search_iterative", "SEARCH_MODES", "resolve_search"]
