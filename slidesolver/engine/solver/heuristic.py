"""Doubled Manhattan-distance estimate, memoised per search."""

from __future__ import annotations

from slidesolver.models.board import Board


class ManhattanHeuristic:
    """Callable heuristic with a per-instance cache.

    Every slot contributes the Manhattan distance from its tile to that
    tile's goal slot, the blank included (its goal is bottom-right). The
    total is doubled, so the estimate is not admissible.
    """

    def __init__(self, size: int) -> None:
        self.size = size
        nn = size * size
        # goal index for each tile value; the blank belongs in the last slot
        self._goal_index = [nn - 1] + list(range(nn - 1))
        self._cache: dict[Board, int] = {}

    def __call__(self, board: Board) -> int:
        cached = self._cache.get(board)
        if cached is not None:
            return cached

        cost = self.estimate(board)
        self._cache[board] = cost
        return cost

    def estimate(self, board: Board) -> int:
        """Compute the doubled distance for *board*, bypassing the cache."""
        n = self.size
        cost = 0
        for i, tile in enumerate(board.tiles):
            goal = self._goal_index[tile]
            if goal == i:
                continue
            r, c = divmod(i, n)
            gr, gc = divmod(goal, n)
            cost += abs(r - gr) + abs(c - gc)

        return cost * 2

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, board: object) -> bool:
        return board in self._cache
