from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple, Union

SIZE_ERROR = "n should be between 0 and 32"


class InvalidSize(ValueError):
    """Raised when a board size falls outside 1..31."""

    def __init__(self, message: str = SIZE_ERROR):
        super().__init__(message)


class UnknownSearchMode(ValueError):
    """Raised for a search driver name outside ``SEARCH_MODES``."""

    def __init__(self, mode: object):
        super().__init__(f"unknown search mode: {mode!r}")
        self.mode = mode


class SearchOutcome(Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"


@dataclass
class SearchStats:
    placements: int = 0
    backtracks: int = 0
    elapsed: float = 0.0


@dataclass
class Board:
    n: int
    occupied: List[List[bool]] = field(default_factory=list)

    @classmethod
    def empty(cls, n: int) -> "Board":
        return cls(n, [[False] * n for _ in range(n)])

    def queens(self) -> List[Tuple[int, int]]:
        return [
            (r, c)
            for r, row in enumerate(self.occupied)
            for c, taken in enumerate(row)
            if taken
        ]

    def columns(self) -> List[int]:
        """Column of the queen in each row, -1 where a row is still empty."""
        out: List[int] = []
        for row in self.occupied:
            out.append(row.index(True) if True in row else -1)
        return out


@dataclass(frozen=True)
class NoSolution:
    n: int

    @property
    def message(self) -> str:
        return f"no solution for {self.n}-queens"


SolveResult = Union[Board, NoSolution]
