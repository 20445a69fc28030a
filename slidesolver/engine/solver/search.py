"""Best-first (A*-style) search over boards."""

from __future__ import annotations

import logging
from collections.abc import Callable

from slidesolver.engine.solver.frontier import Frontier
from slidesolver.engine.solver.heuristic import ManhattanHeuristic
from slidesolver.engine.solver.path import trace_path
from slidesolver.errors import SearchExhaustedError
from slidesolver.models.board import Board
from slidesolver.models.result import SearchResult

logger = logging.getLogger(__name__)


def astar(
    start: Board,
    goal: Board,
    heuristic: Callable[[Board], int] | None = None,
) -> SearchResult:
    """Search from *start* to *goal* and return the moves plus counters.

    ``visited`` counts frontier pops (the goal included), ``created`` counts
    boards discovered for the first time and ``updated`` counts open boards
    whose path cost improved. Every move costs 1.

    Raises ``SearchExhaustedError`` if the frontier empties first.
    """
    h = heuristic if heuristic is not None else ManhattanHeuristic(start.size)

    frontier = Frontier()
    closed: set[Board] = set()
    g_score: dict[Board, int] = {start: 0}
    parents: dict[Board, Board] = {}

    visited = created = updated = 0

    frontier.push(start, h(start), 0)

    while frontier:
        current, _ = frontier.pop()
        visited += 1

        if current == goal:
            moves = trace_path(current, parents)
            logger.debug(
                "Reached goal in %d moves: visited=%d created=%d updated=%d",
                len(moves), visited, created, updated,
            )
            return SearchResult(
                moves=moves, visited=visited, created=created, updated=updated
            )

        closed.add(current)
        tentative = g_score[current] + 1

        for nxt in current.adjacent_boards():
            if nxt is None or nxt in closed:
                continue

            known = g_score.get(nxt)
            if known is not None and tentative >= known:
                continue

            parents[nxt] = current
            if known is None:
                created += 1
            else:
                updated += 1
            g_score[nxt] = tentative
            # push() replaces any stale entry for nxt
            frontier.push(nxt, tentative + h(nxt), tentative)

    raise SearchExhaustedError(
        f"Frontier exhausted after visiting {visited} boards without reaching "
        f"the goal."
    )
