"""Turns the parent links recorded during search into a move string."""

from __future__ import annotations

from collections.abc import Mapping

from slidesolver.models.board import Board, Direction


def step_direction(parent: Board, child: Board) -> Direction:
    """Direction the blank moved going from *parent* to *child*."""
    n = parent.size
    delta = child.blank - parent.blank
    if delta == -1:
        return Direction.LEFT
    if delta == 1:
        return Direction.RIGHT
    if delta == -n:
        return Direction.UP
    if delta == n:
        return Direction.DOWN
    raise ValueError(
        f"Blank moved from {parent.blank} to {child.blank}; not a single step."
    )


def trace_path(goal: Board, parents: Mapping[Board, Board]) -> str:
    """Walk parent links back from *goal* and return the start→goal moves.

    The walk stops at the first board without a parent (the start board).
    """
    letters: list[str] = []
    board = goal
    parent = parents.get(board)
    while parent is not None:
        letters.append(step_direction(parent, board).value)
        board = parent
        parent = parents.get(board)
    letters.reverse()
    return "".join(letters)
