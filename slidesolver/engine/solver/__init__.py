"""Sliding puzzle solver."""

from __future__ import annotations

from slidesolver.engine.solver import solvability
from slidesolver.engine.solver.search import astar
from slidesolver.models.board import Board, Direction
from slidesolver.models.result import SearchResult


class Solver:
    """Stateless solver; all methods are static."""

    @staticmethod
    def solve(board: Board) -> SearchResult | None:
        """Solve *board* optimally, or return ``None`` if it is unsolvable.

        The search is never started for an unsolvable board.
        """
        if not Solver.is_solvable(board):
            return None
        return astar(board, Board.goal(board.size))

    @staticmethod
    def hint(board: Board) -> Direction | None:
        """Return the first move of the solution, or ``None`` if solved / unsolvable."""
        if board.is_solved():
            return None

        result = Solver.solve(board)
        if result is None:
            return None
        return Direction(result.moves[0])

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state."""
        return solvability.is_solvable(board)


__all__ = ["Solver", "astar"]
