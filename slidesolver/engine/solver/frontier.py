"""Open frontier: a heap keyed by board with decrease-key support."""

from __future__ import annotations

import heapq
import itertools

from slidesolver.models.board import Board

# Marks a heap entry superseded by a later push() for the same board.
_REMOVED = None


class Frontier:
    """Indexed priority queue of boards.

    Entries are ordered by ``(f, g, insertion order)``. Pushing a board that
    is already queued replaces its entry; the old heap slot is invalidated in
    place and skipped when it surfaces.
    """

    def __init__(self) -> None:
        self._heap: list[list] = []
        self._entries: dict[Board, list] = {}
        self._counter = itertools.count()

    def push(self, board: Board, f: int, g: int) -> None:
        """Insert *board*, or update its priority if it is already queued."""
        if board in self._entries:
            self.discard(board)
        entry = [f, g, next(self._counter), board]
        self._entries[board] = entry
        heapq.heappush(self._heap, entry)

    def discard(self, board: Board) -> None:
        entry = self._entries.pop(board, None)
        if entry is not None:
            entry[-1] = _REMOVED

    def pop(self) -> tuple[Board, int]:
        """Remove and return the board with the lowest priority and its f."""
        while self._heap:
            f, _, _, board = heapq.heappop(self._heap)
            if board is not _REMOVED:
                del self._entries[board]
                return board, f
        raise KeyError("pop from an empty frontier")

    def __contains__(self, board: object) -> bool:
        return board in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)
