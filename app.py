# app.py: HTTP adapter around solver.orchestrator
from __future__ import annotations
import os
from typing import Any, Dict, Optional, Tuple

from flask import Flask, Response, request, jsonify, send_from_directory

from solver.orchestrator import parse_size, solve_board
from config import CFG
from io_files import board_output_path, write_board
from models import Board, InvalidSize, UnknownSearchMode
from render import render_result
from progress import reset as progress_reset, as_json as progress_json

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

app = Flask(__name__)


@app.after_request
def _no_cache_progress(resp):
    if request.path == "/progress":
        resp.headers["Cache-Control"] = "no-store, max-age=0"
        resp.headers["Pragma"] = "no-cache"
        resp.headers["Expires"] = "0"
    return resp


def _size_from_request() -> int:
    raw = request.args.get("n")
    if raw is None or raw.strip() == "":
        return CFG.DEFAULT_N
    return parse_size(raw)


def _mode_from_request() -> Optional[str]:
    return request.args.get("mode") or None


def _run() -> Tuple[Any, str]:
    progress_reset()
    n = _size_from_request()
    result = solve_board(n, mode=_mode_from_request())
    text = render_result(result)
    write_board(text, BASE_DIR)
    return result, text


@app.errorhandler(InvalidSize)
@app.errorhandler(UnknownSearchMode)
def _bad_request(e: ValueError):
    if request.path.endswith(".json"):
        return jsonify({"ok": False, "message": str(e)}), 400
    return Response(str(e), status=400, mimetype="text/plain")


@app.route("/solve")
def solve_text():
    _result, text = _run()
    return Response(text, mimetype="text/plain")


@app.route("/solve.json")
def solve_json():
    result, text = _run()
    payload: Dict[str, Any] = {"ok": isinstance(result, Board), "n": result.n, "board": text}
    if isinstance(result, Board):
        payload["columns"] = result.columns()
        payload["message"] = ""
    else:
        payload["columns"] = []
        payload["message"] = result.message
    return jsonify(payload)


@app.route("/download/board")
def download_board():
    path = board_output_path(BASE_DIR)
    return send_from_directory(os.path.dirname(path), os.path.basename(path), as_attachment=True)


@app.route("/progress")
def progress():
    return jsonify(progress_json())


if __name__ == "__main__":
    app.run(debug=False)
