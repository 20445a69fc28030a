"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import random

from slidesolver.models.board import Board

# Random-walk length per tile when no explicit step count is given.
SCRAMBLE_FACTOR = 100


class GameGenerator:
    """Creates solvable puzzles by walking the blank away from the solved state."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.goal(size)

    @staticmethod
    def scramble(board: Board, steps: int, rng: random.Random) -> Board:
        """Return *board* after *steps* random blank moves.

        The blank never steps straight back to where it just was, unless it
        has no other option.
        """
        prev_blank: int | None = None
        for _ in range(steps):
            options = [b for b in board.adjacent_boards() if b is not None]
            forward = [b for b in options if b.blank != prev_blank]
            prev_blank = board.blank
            board = rng.choice(forward or options)
        return board

    @staticmethod
    def generate(size: int, steps: int | None = None, seed: int | None = None) -> Board:
        """Return a random *solvable* board of the given size that is not solved."""
        if steps is None:
            steps = size * size * SCRAMBLE_FACTOR
        if steps < 1:
            raise ValueError(f"Need at least one scramble step, got {steps}.")
        rng = random.Random(seed)
        goal = GameGenerator.solved(size)
        while True:
            board = GameGenerator.scramble(goal, steps, rng)
            if not board.is_solved():
                return board
