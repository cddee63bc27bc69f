import pytest

import app as app_module
from config import CFG


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setattr(CFG, "BOARD_OUT", str(tmp_path / "board.txt"))
    monkeypatch.setattr(CFG, "NEWLINE", "\n")
    monkeypatch.setattr(CFG, "SEARCH_MODE", "recursive")
    monkeypatch.setattr(CFG, "VERIFY_CP_SAT", False)
    app_module.app.config["TESTING"] = True
    with app_module.app.test_client() as c:
        yield c


def test_solve_returns_plain_text_grid(client, tmp_path):
    resp = client.get("/solve?n=4")
    assert resp.status_code == 200
    assert resp.mimetype == "text/plain"
    assert resp.get_data(as_text=True) == ". Q . . \n. . . Q \nQ . . . \n. . Q . \n"
    assert (tmp_path / "board.txt").read_text() == resp.get_data(as_text=True)


def test_solve_defaults_to_configured_size(client, monkeypatch):
    monkeypatch.setattr(CFG, "DEFAULT_N", 1)
    resp = client.get("/solve")
    assert resp.get_data(as_text=True) == "Q \n"


@pytest.mark.parametrize("query", ["n=0", "n=32", "n=-1", "n=abc"])
def test_invalid_size_is_a_bad_request(client, query):
    resp = client.get(f"/solve?{query}")
    assert resp.status_code == 400
    assert resp.get_data(as_text=True) == "n should be between 0 and 32"


def test_solve_json_for_solvable_size(client):
    data = client.get("/solve.json?n=5&mode=iterative").get_json()
    assert data["ok"] is True
    assert data["n"] == 5
    assert data["columns"] == [0, 2, 4, 1, 3]
    assert data["message"] == ""


def test_solve_json_for_unsolvable_size(client):
    data = client.get("/solve.json?n=2").get_json()
    assert data["ok"] is False
    assert data["columns"] == []
    assert data["message"] == "no solution for 2-queens"
    assert data["board"] == "no solution for 2-queens"


def test_solve_json_invalid_size(client):
    resp = client.get("/solve.json?n=99")
    assert resp.status_code == 400
    assert resp.get_json() == {"ok": False, "message": "n should be between 0 and 32"}


def test_progress_is_not_cached(client):
    client.get("/solve?n=6")
    resp = client.get("/progress")
    assert resp.headers["Cache-Control"].startswith("no-store")
    snap = resp.get_json()
    assert snap["n"] == 6
    assert snap["status"] == "Solved"


def test_download_board(client):
    client.get("/solve?n=1")
    resp = client.get("/download/board")
    assert resp.status_code == 200
    assert resp.get_data(as_text=True) == "Q \n"
    resp.close()


@pytest.mark.parametrize("path", ["/solve", "/solve.json"])
def test_unknown_search_mode_is_a_bad_request(client, path, monkeypatch):
    monkeypatch.setitem(app_module.app.config, "TESTING", False)
    resp = client.get(f"{path}?n=4&mode=bitmask")
    assert resp.status_code == 400
    if path.endswith(".json"):
        assert resp.get_json() == {"ok": False, "message": "unknown search mode: 'bitmask'"}
    else:
        assert resp.get_data(as_text=True) == "unknown search mode: 'bitmask'"
