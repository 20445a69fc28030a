"""Board model for the sliding puzzle solver."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import StrEnum

from slidesolver.errors import InvalidBoardError


class Direction(StrEnum):
    """Direction the *blank* travels on a move."""

    LEFT = "L"
    RIGHT = "R"
    UP = "U"
    DOWN = "D"


# Generation order for successors; also the slot order of adjacent_boards().
MOVE_ORDER: tuple[Direction, ...] = (
    Direction.LEFT,
    Direction.RIGHT,
    Direction.UP,
    Direction.DOWN,
)


@dataclass(frozen=True)
class Board:
    """One immutable puzzle configuration.

    Tiles are stored as a flat row-major tuple. 0 represents the blank.
    Equality and hashing only look at ``tiles``.
    """

    tiles: tuple[int, ...]
    size: int = field(init=False, compare=False, repr=False)
    blank: int = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        tiles = tuple(self.tiles)
        count = len(tiles)
        size = math.isqrt(count)
        if count < 4 or size * size != count:
            raise InvalidBoardError(
                f"{count} tiles do not form a square board of side >= 2."
            )
        if sorted(tiles) != list(range(count)):
            raise InvalidBoardError(
                f"A {size}×{size} board needs each of 0..{count - 1} exactly once."
            )
        object.__setattr__(self, "tiles", tiles)
        object.__setattr__(self, "size", size)
        object.__setattr__(self, "blank", tiles.index(0))

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: Iterable[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        tiles = tuple(flat)
        if len(tiles) != size * size:
            raise InvalidBoardError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(tiles)}."
            )
        return cls(tiles)

    @classmethod
    def goal(cls, size: int) -> Board:
        """Return the goal board (tiles ascending, blank bottom-right)."""
        return cls(tuple(range(1, size * size)) + (0,))

    @classmethod
    def _unchecked(cls, tiles: tuple[int, ...], size: int, blank: int) -> Board:
        """Build a successor without re-validating the tile set."""
        obj = object.__new__(cls)
        object.__setattr__(obj, "tiles", tiles)
        object.__setattr__(obj, "size", size)
        object.__setattr__(obj, "blank", blank)
        return obj

    # -- queries --------------------------------------------------------------

    @property
    def rows(self) -> list[tuple[int, ...]]:
        n = self.size
        return [self.tiles[r * n : (r + 1) * n] for r in range(n)]

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row * self.size + col]

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        last = len(self.tiles) - 1
        return self.tiles[last] == 0 and all(
            v == i + 1 for i, v in enumerate(self.tiles[:last])
        )

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.get_tile(row, col)
        if val == 0:
            return row == self.size - 1 and col == self.size - 1
        return row * self.size + col == val - 1

    # -- moves ----------------------------------------------------------------

    def _target(self, direction: Direction) -> int | None:
        """Index the blank lands on, or ``None`` if it would leave the grid."""
        n = self.size
        row, col = divmod(self.blank, n)
        if direction is Direction.LEFT:
            return None if col == 0 else self.blank - 1
        if direction is Direction.RIGHT:
            return None if col == n - 1 else self.blank + 1
        if direction is Direction.UP:
            return None if row == 0 else self.blank - n
        return None if row == n - 1 else self.blank + n

    def move(self, direction: Direction | str) -> Board | None:
        """Slide the blank one step in *direction*.

        Returns the resulting board, or ``None`` if the move is illegal.
        """
        target = self._target(Direction(direction))
        if target is None:
            return None
        tiles = list(self.tiles)
        tiles[self.blank], tiles[target] = tiles[target], tiles[self.blank]
        return Board._unchecked(tuple(tiles), self.size, target)

    def adjacent_boards(self) -> tuple[Board | None, ...]:
        """Successors in L, R, U, D order; ``None`` marks an illegal slot."""
        return tuple(self.move(d) for d in MOVE_ORDER)

    def neighbors(self) -> Iterator[tuple[Direction, Board]]:
        for direction, board in zip(MOVE_ORDER, self.adjacent_boards()):
            if board is not None:
                yield direction, board

    def apply(self, moves: Iterable[Direction | str]) -> Board:
        """Replay *moves* (e.g. ``"DRU"``) and return the final board."""
        board = self
        for i, step in enumerate(moves):
            nxt = board.move(step)
            if nxt is None:
                raise ValueError(
                    f"Move {i} ({step}) leaves the grid with the blank at "
                    f"index {board.blank}."
                )
            board = nxt
        return board

    def __str__(self) -> str:
        width = len(str(len(self.tiles) - 1))
        return "\n".join(
            " ".join(f"{v:>{width}}" for v in row) for row in self.rows
        )
