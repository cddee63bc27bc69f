# solver/board.py
from typing import List, Set

from models import Board


def is_square_taken(board: Board, row: int, col: int) -> bool:
    """Whether a queen sits on (row, col); squares off the board are never taken."""
    n = board.n
    if row < 0 or row >= n or col < 0 or col >= n:
        return False
    return board.occupied[row][col]


def is_row_attacked(board: Board, row: int) -> bool:
    if row < 0 or row >= board.n:
        return False
    return any(board.occupied[row])


def is_column_attacked(board: Board, col: int) -> bool:
    if col < 0 or col >= board.n:
        return False
    return any(r[col] for r in board.occupied)


def is_diagonally_attacked(board: Board, row: int, col: int) -> bool:
    """
    Scan both diagonal families through (row, col).

    The offset runs over -N..N so the walk needs no bounds arithmetic;
    ``is_square_taken`` absorbs the cells that fall off the board.
    """
    n = board.n
    # negative slope: row - col constant
    for i in range(-n, n + 1):
        if is_square_taken(board, row + i, col + i):
            return True
    # positive slope: row + col constant
    for i in range(-n, n + 1):
        if is_square_taken(board, row - i, col + i):
            return True
    return False


def is_attacked(board: Board, row: int, col: int) -> bool:
    return (
        is_row_attacked(board, row)
        or is_column_attacked(board, col)
        or is_diagonally_attacked(board, row, col)
    )


def place(board: Board, row: int, col: int) -> None:
    board.occupied[row][col] = True


def remove(board: Board, row: int, col: int) -> None:
    board.occupied[row][col] = False


class Occupancy:
    """
    Row, column and diagonal index sets kept in step with a board.

    ``is_attacked`` answers the same question as the scanning predicate in
    O(1): a diagonal is identified by ``row - col`` or ``row + col``.
    All placements made through this object also land on ``board``.
    """

    def __init__(self, board: Board):
        self.board = board
        self.rows: Set[int] = set()
        self.cols: Set[int] = set()
        self.diags: Set[int] = set()
        self.anti_diags: Set[int] = set()
        for r, c in board.queens():
            self._add(r, c)

    def _add(self, row: int, col: int) -> None:
        self.rows.add(row)
        self.cols.add(col)
        self.diags.add(row - col)
        self.anti_diags.add(row + col)

    def is_attacked(self, row: int, col: int) -> bool:
        n = self.board.n
        if row < 0 or row >= n or col < 0 or col >= n:
            # same answer the scan gives for squares off the board
            return is_attacked(self.board, row, col)
        return (
            row in self.rows
            or col in self.cols
            or (row - col) in self.diags
            or (row + col) in self.anti_diags
        )

    def free_columns(self, row: int, start: int = 0) -> List[int]:
        """Columns from ``start`` on where a queen in ``row`` would be safe, leftmost first."""
        if row in self.rows:
            return []
        cols, diags, anti = self.cols, self.diags, self.anti_diags
        return [
            c for c in range(max(0, start), self.board.n)
            if c not in cols and (row - c) not in diags and (row + c) not in anti
        ]

    def place(self, row: int, col: int) -> None:
        place(self.board, row, col)
        self._add(row, col)

    def remove(self, row: int, col: int) -> None:
        remove(self.board, row, col)
        self.rows.discard(row)
        self.cols.discard(col)
        self.diags.discard(row - col)
        self.anti_diags.discard(row + col)


__all__ = [
    "Occupancy",
    "is_square_taken",
    "is_row_attacked",
    "is_column_attacked",
    "is_diagonally_attacked",
    "is_attacked",
    "place",
    "remove",
]
