"""Solver facade: solvability gate, results, and hints."""

from __future__ import annotations

import pytest

from slidesolver.engine.generator import GameGenerator
from slidesolver.engine.solver import Solver
from slidesolver.models.board import Board, Direction


def test_solve_example() -> None:
    result = Solver.solve(Board((1, 2, 3, 4, 0, 6, 7, 5, 8)))
    assert result is not None
    assert result.moves == "DR"
    assert result.report_lines() == ["2", "DR", "3", "6", "0"]


def test_unsolvable_board_skips_search(monkeypatch: pytest.MonkeyPatch) -> None:
    def _boom(*args, **kwargs):
        raise AssertionError("search must not run for an unsolvable board")

    monkeypatch.setattr("slidesolver.engine.solver.astar", _boom)
    assert Solver.solve(Board((1, 2, 3, 4, 5, 6, 8, 7, 0))) is None
    assert not Solver.is_solvable(Board((1, 2, 3, 4, 5, 6, 8, 7, 0)))


def test_solved_board() -> None:
    result = Solver.solve(Board.goal(4))
    assert result is not None
    assert (result.moves, result.visited, result.created, result.updated) == (
        "", 1, 0, 0,
    )


@pytest.mark.parametrize("size", [2, 3, 4])
def test_solves_generated_boards(size: int) -> None:
    for seed in range(3):
        board = GameGenerator.generate(size, steps=20, seed=seed)
        result = Solver.solve(board)
        assert result is not None
        assert board.apply(result.moves).is_solved()


def test_hint() -> None:
    assert Solver.hint(Board((1, 2, 3, 4, 0, 6, 7, 5, 8))) is Direction.DOWN
    assert Solver.hint(Board.goal(3)) is None
    assert Solver.hint(Board((1, 2, 3, 4, 5, 6, 8, 7, 0))) is None
