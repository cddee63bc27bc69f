from __future__ import annotations

import logging
import os
import threading
import time
from pathlib import Path
from typing import Any, Dict, Optional

from config import CFG

# ------------------------------
# Thread-safe global run state
# ------------------------------

PROGRESS_LOCK = threading.Lock()


def _log_path() -> Path:
    configured = CFG.LOG_FILE
    path = Path(configured)
    if path.is_absolute():
        return path
    return Path(__file__).resolve().parent / path


def _run_handler(path: Path) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    return handler


def _init_logger() -> logging.Logger:
    logger = logging.getLogger("solver.run_log")
    if logger.handlers:
        return logger
    logger.setLevel(logging.INFO)
    logger.propagate = False
    try:
        logger.addHandler(_run_handler(_log_path()))
    except OSError:
        # unwritable log location: the run log stays off
        pass
    return logger


RUN_LOGGER = _init_logger()


def _fmt_seconds(seconds: Optional[float]) -> Optional[str]:
    if seconds is None:
        return None
    try:
        return f"{float(seconds):.4f}s"
    except (TypeError, ValueError):
        return None


def _emit_log(event: str, **fields: Any) -> None:
    """One ``event | key=value ...`` line; empty fields are left out."""
    if not RUN_LOGGER.handlers:
        return
    detail = " ".join(f"{k}={v}" for k, v in fields.items() if v is not None and v != "")
    # handler errors are reported by logging itself (Handler.handleError)
    if detail:
        RUN_LOGGER.info("%s | %s", event, detail)
    else:
        RUN_LOGGER.info("%s", event)


PROGRESS: Dict[str, Any] = {
    "status": "Idle",          # Idle | Solving | Solved | Error
    "n": None,                 # board size of the current run
    "mode": "",                # recursive | iterative
    "placements": 0,           # queens placed during the search
    "backtracks": 0,           # queens lifted during the search
    "elapsed_start": None,     # t0 (float) when solving started
    "elapsed": 0.0,            # seconds snapshot
    "message": "",             # optional note
    "done": False,             # run completed
    "ok": None,                # True once a board was rendered
    "run_id": 0,               # monotonically increasing identifier
}

# ------------------------------
# Helpers
# ------------------------------

def _now() -> float:
    return time.time()


def _touch_elapsed_locked() -> None:
    t0 = PROGRESS.get("elapsed_start")
    if t0 is not None and not PROGRESS.get("done"):
        PROGRESS["elapsed"] = _now() - float(t0)


def reset() -> None:
    with PROGRESS_LOCK:
        new_run_id = int(PROGRESS.get("run_id") or 0) + 1
        PROGRESS.update({
            "status": "Idle",
            "n": None,
            "mode": "",
            "placements": 0,
            "backtracks": 0,
            "elapsed_start": None,
            "elapsed": 0.0,
            "message": "",
            "done": False,
            "ok": None,
            "run_id": new_run_id,
        })
        _emit_log("Progress reset", run_id=new_run_id)

# ------------------------------
# Setters
# ------------------------------

def set_status(v: Any) -> None:
    with PROGRESS_LOCK:
        PROGRESS["status"] = str(v)


def set_size(n: Any, mode: Any = "") -> None:
    """Mark the start of a run for board size ``n``."""
    with PROGRESS_LOCK:
        now = _now()
        PROGRESS["n"] = n
        PROGRESS["mode"] = "" if mode is None else str(mode)
        PROGRESS["status"] = "Solving"
        PROGRESS["elapsed_start"] = now
        PROGRESS["elapsed"] = 0.0
        PROGRESS["done"] = False
        PROGRESS["ok"] = None
        _emit_log("Run started", run_id=PROGRESS["run_id"], n=n, mode=PROGRESS["mode"])


def set_stats(placements: Any = 0, backtracks: Any = 0, elapsed: Any = None) -> None:
    with PROGRESS_LOCK:
        PROGRESS["placements"] = max(0, int(placements or 0))
        PROGRESS["backtracks"] = max(0, int(backtracks or 0))
        if elapsed is not None:
            PROGRESS["elapsed"] = max(0.0, float(elapsed))


def set_message(msg: Any) -> None:
    with PROGRESS_LOCK:
        PROGRESS["message"] = "" if msg is None else str(msg)


def set_done(ok: Any = None, *, reason: Any = None) -> None:
    """Mark the run complete.

    ``ok`` picks the final status (``Solved`` / ``Error``); without it the
    status defaults to ``Solved``. A ``reason`` lands in ``message``.
    """
    ok_flag = True if ok is None else bool(ok)

    with PROGRESS_LOCK:
        _touch_elapsed_locked()
        PROGRESS["status"] = "Solved" if ok_flag else "Error"
        PROGRESS["ok"] = ok_flag
        PROGRESS["done"] = True
        if reason is not None:
            PROGRESS["message"] = str(reason)
        _emit_log(
            "Run finished",
            run_id=PROGRESS["run_id"],
            n=PROGRESS.get("n"),
            status=PROGRESS["status"],
            placements=PROGRESS.get("placements"),
            backtracks=PROGRESS.get("backtracks"),
            duration=_fmt_seconds(PROGRESS.get("elapsed")),
            message=PROGRESS.get("message"),
        )

# ------------------------------
# Snapshots for the UI
# ------------------------------

def snapshot() -> Dict[str, Any]:
    with PROGRESS_LOCK:
        _touch_elapsed_locked()
        return {
            "status": PROGRESS["status"],
            "n": PROGRESS["n"],
            "mode": PROGRESS["mode"],
            "placements": PROGRESS["placements"],
            "backtracks": PROGRESS["backtracks"],
            "elapsed": PROGRESS["elapsed"],
            "message": PROGRESS["message"],
            "done": PROGRESS["done"],
            "ok": PROGRESS["ok"],
            "run_id": PROGRESS["run_id"],
            "pid": os.getpid(),
        }


def as_json() -> Dict[str, Any]:
    # Alias used by /progress
    return snapshot()


__all__ = [
    "reset", "set_status", "set_size", "set_stats", "set_message",
    "set_done", "snapshot", "as_json", "PROGRESS_LOCK",
]
