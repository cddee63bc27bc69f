# config.py
import os

# ======= Search =======
SEARCH_MODE = os.getenv("NQ_SEARCH_MODE", "recursive").strip().lower()

# Accepted board sizes are 1..MAX_N; anything else is rejected up front.
MAX_N     = 31
DEFAULT_N = int(os.getenv("NQ_DEFAULT_N", "8"))

# ======= CP-SAT cross-check =======
VERIFY_CP_SAT  = int(os.getenv("NQ_VERIFY_CP_SAT", "0")) != 0
CP_SAT_SECONDS = float(os.getenv("NQ_CP_SAT_SECONDS", "10"))
WORKERS        = int(os.getenv("NQ_WORKERS", "1"))

# ======= Rendering =======
_NEWLINES = {"native": os.linesep, "lf": "\n", "crlf": "\r\n"}


def _resolve_newline(token: str) -> str:
    return _NEWLINES.get((token or "").strip().lower(), os.linesep)


NEWLINE = _resolve_newline(os.getenv("NQ_NEWLINE", "native"))

# ======= Output names =======
BOARD_OUT = os.getenv("NQ_BOARD_OUT", "board.txt")
LOG_FILE  = os.getenv("NQ_LOG_FILE", os.path.join("logs", "solver_runs.log"))


class CFG:
    SEARCH_MODE = SEARCH_MODE
    MAX_N       = MAX_N
    DEFAULT_N   = DEFAULT_N

    VERIFY_CP_SAT  = VERIFY_CP_SAT
    CP_SAT_SECONDS = CP_SAT_SECONDS
    WORKERS        = WORKERS

    NEWLINE = NEWLINE

    BOARD_OUT = BOARD_OUT
    LOG_FILE  = LOG_FILE


__all__ = ["CFG", "MAX_N"]
