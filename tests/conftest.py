"""Shared fixtures: brute-force reference searches for small boards."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable

import pytest

from slidesolver.models.board import Board


def _reachable(start: Board) -> dict[Board, int]:
    """Breadth-first distances from *start* to every reachable board."""
    dist = {start: 0}
    queue = deque([start])
    while queue:
        board = queue.popleft()
        for _, nxt in board.neighbors():
            if nxt not in dist:
                dist[nxt] = dist[board] + 1
                queue.append(nxt)
    return dist


def _shortest(start: Board) -> int:
    """Length of the shortest move sequence from *start* to the goal."""
    goal = Board.goal(start.size)
    dist = {start: 0}
    queue = deque([start])
    while queue:
        board = queue.popleft()
        if board == goal:
            return dist[board]
        for _, nxt in board.neighbors():
            if nxt not in dist:
                dist[nxt] = dist[board] + 1
                queue.append(nxt)
    raise AssertionError(f"goal unreachable from {start.tiles}")


@pytest.fixture
def reachable() -> Callable[[Board], dict[Board, int]]:
    return _reachable


@pytest.fixture
def shortest() -> Callable[[Board], int]:
    return _shortest
