"""Inversion-parity test deciding whether the goal is reachable."""

from __future__ import annotations

from collections.abc import Sequence

from slidesolver.models.board import Board


def count_inversions(tiles: Sequence[int]) -> int:
    """Count pairs of non-blank tiles that appear in descending order."""
    flat = [v for v in tiles if v != 0]
    inversions = 0
    for i in range(len(flat)):
        for j in range(i + 1, len(flat)):
            if flat[i] > flat[j]:
                inversions += 1
    return inversions


def is_solvable(board: Board) -> bool:
    """Return True if *board* can reach the goal state.

    Odd sides need an even inversion count. Even sides additionally depend
    on the blank's row: ``blank_row_flag`` below is set when the blank's
    1-based row from the top is odd (odd side) or even (even side), which
    for even sides means the blank sits on an odd row counted from the
    bottom.
    """
    n = board.size
    odd_side = n % 2 == 1
    odd_inversions = count_inversions(board.tiles) % 2 == 1
    row_from_top = board.blank // n + 1
    blank_row_flag = (row_from_top % 2 == 1) if odd_side else (row_from_top % 2 == 0)

    return (
        (odd_side and not odd_inversions)
        or (not odd_side and odd_inversions and not blank_row_flag)
        or (not odd_inversions and blank_row_flag)
    )
