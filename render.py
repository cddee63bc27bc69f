from typing import Optional

from config import CFG
from models import Board, NoSolution, SolveResult


def _newline(newline: Optional[str]) -> str:
    return CFG.NEWLINE if newline is None else newline


def render_board(board: Board, newline: Optional[str] = None) -> str:
    """
    Text grid for a finished board.

    Every token (``Q`` or ``.``) is followed by one space and every row by one
    line terminator, so each row is ``2*n`` characters plus the terminator.
    Nothing follows the last row's terminator.
    """
    nl = _newline(newline)
    rows = []
    for row in board.occupied:
        rows.append("".join("Q " if square else ". " for square in row) + nl)
    return "".join(rows)


def render_no_solution(n: int) -> str:
    return NoSolution(n).message


def render_result(result: SolveResult, newline: Optional[str] = None) -> str:
    if isinstance(result, NoSolution):
        return result.message
    return render_board(result, newline)
