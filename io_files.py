"""Helpers for sending rendered boards to disk or a text stream."""

from __future__ import annotations

import os
import sys
from typing import Optional, TextIO

from config import CFG


def _resolve_output_path(base_dir: str, configured_name: str, fallback: str) -> str:
    """Return the absolute path where an output artifact should be written."""

    name = (configured_name or "").strip() or fallback
    if os.path.isabs(name):
        return name
    return os.path.join(base_dir, name)


def board_output_path(base_dir: str, name: Optional[str] = None) -> str:
    return _resolve_output_path(base_dir, name or CFG.BOARD_OUT, "board.txt")


def write_board(text: str, base_dir: str, name: Optional[str] = None) -> str:
    """Write the rendered board text to ``name`` (default: the configured file), byte for byte."""

    path = board_output_path(base_dir, name)
    os.makedirs(os.path.dirname(path) or base_dir, exist_ok=True)

    # newline="" keeps the terminators chosen at render time
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)
    return path


def print_board(text: str, stream: Optional[TextIO] = None) -> None:
    """Print rendered text, adding a terminator only when it lacks one.

    Text streams with a binary buffer get the encoded bytes directly so the
    terminators chosen at render time are not translated a second time.
    """

    out = sys.stdout if stream is None else stream
    if not text.endswith(("\n", "\r")):
        text += CFG.NEWLINE

    buffer = getattr(out, "buffer", None)
    if buffer is None:
        out.write(text)
        out.flush()
        return

    out.flush()
    buffer.write(text.encode(getattr(out, "encoding", None) or "utf-8"))
    buffer.flush()


__all__ = ["board_output_path", "write_board", "print_board"]
