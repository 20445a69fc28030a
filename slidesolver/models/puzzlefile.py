"""Reading puzzles from and writing results to plain text files."""

from __future__ import annotations

import logging
from pathlib import Path

from slidesolver.errors import InvalidBoardError, PuzzleFormatError
from slidesolver.models.board import Board
from slidesolver.models.result import SearchResult

logger = logging.getLogger(__name__)


# -- input --------------------------------------------------------------------


def parse_puzzle(text: str) -> Board:
    """Parse ``N`` followed by ``N*N`` row-major tile values.

    Values are separated by any whitespace; 0 marks the blank.
    """
    tokens = text.split()
    if not tokens:
        raise PuzzleFormatError("Puzzle file is empty.")
    try:
        values = [int(tok) for tok in tokens]
    except ValueError as exc:
        raise PuzzleFormatError(f"Non-integer value in puzzle: {exc}") from exc

    size, tiles = values[0], values[1:]
    if size < 2:
        raise PuzzleFormatError(f"Board side must be at least 2, got {size}.")
    if len(tiles) != size * size:
        raise PuzzleFormatError(
            f"Expected {size * size} tiles after the side length {size}, "
            f"got {len(tiles)}."
        )
    try:
        return Board.from_flat(size, tiles)
    except InvalidBoardError as exc:
        raise PuzzleFormatError(str(exc)) from exc


def read_puzzle(path: Path) -> Board:
    """Load a board from *path*. ``OSError`` propagates if it can't be read."""
    board = parse_puzzle(path.read_text())
    logger.debug("Read %d×%d puzzle from %s", board.size, board.size, path)
    return board


# -- output -------------------------------------------------------------------


def prepare_output(path: Path) -> None:
    """Remove a stale output file so a failed run leaves nothing behind."""
    if path.exists() or path.is_symlink():
        path.unlink()
        logger.debug("Deleted existing output file %s", path)


def write_result(path: Path, result: SearchResult) -> None:
    path.write_text("\n".join(result.report_lines()) + "\n")
    logger.debug("Wrote %d-move solution to %s", result.length, path)


def write_puzzle(path: Path, board: Board) -> None:
    """Write *board* in the format ``read_puzzle`` accepts."""
    lines = [str(board.size)]
    lines.extend(" ".join(str(v) for v in row) for row in board.rows)
    path.write_text("\n".join(lines) + "\n")
