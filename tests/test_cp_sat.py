import pytest
from ortools.sat.python import cp_model

import solver.cp_sat as cp_sat
from config import CFG
from models import Board
from solver.board import place
from solver.orchestrator import solve_board


@pytest.mark.parametrize("n", [2, 3])
def test_cp_sat_agrees_small_sizes_are_unsolvable(n):
    assert not cp_sat.is_feasible(n, max_seconds=5.0)


@pytest.mark.parametrize("n", [1, 4, 6, 8])
def test_backtracking_placements_pass_cp_sat(n):
    board = solve_board(n, verify=False)
    assert cp_sat.verify_placement(board, max_seconds=5.0)


def test_attacking_placement_is_rejected():
    board = Board.empty(4)
    for r, c in enumerate([0, 1, 2, 3]):
        place(board, r, c)
    assert not cp_sat.verify_placement(board, max_seconds=5.0)


def test_incomplete_placement_is_rejected_without_solving():
    board = Board.empty(4)
    place(board, 0, 1)
    assert not cp_sat.verify_placement(board)


def test_orchestrator_runs_cross_check(monkeypatch):
    monkeypatch.setattr(CFG, "VERIFY_CP_SAT", True)
    monkeypatch.setattr(CFG, "CP_SAT_SECONDS", 5.0)
    board = solve_board(8)
    assert board.columns() == [0, 4, 7, 5, 2, 6, 1, 3]


def test_model_pins_fixed_columns():
    m, queens = cp_sat.build_model(4, [1, 3, 0, 2])
    solver = cp_model.CpSolver()
    assert solver.Solve(m) in (cp_model.OPTIMAL, cp_model.FEASIBLE)
    assert [solver.Value(q) for q in queens] == [1, 3, 0, 2]
