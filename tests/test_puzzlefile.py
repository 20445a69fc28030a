"""Puzzle file parsing and report writing."""

from __future__ import annotations

from pathlib import Path

import pytest

from slidesolver.errors import PuzzleFormatError
from slidesolver.models.board import Board
from slidesolver.models.puzzlefile import (
    parse_puzzle,
    prepare_output,
    read_puzzle,
    write_puzzle,
    write_result,
)
from slidesolver.models.result import SearchResult


def test_parse_accepts_any_whitespace() -> None:
    board = parse_puzzle("3\n1 2 3\n4 0 6\n7\t5  8\n\n")
    assert board == Board((1, 2, 3, 4, 0, 6, 7, 5, 8))


@pytest.mark.parametrize(
    "text, message",
    [
        ("", "empty"),
        ("3 1 2 x 4 0 6 7 5 8", "Non-integer"),
        ("3 1 2 3 4 0 6 7 5", "Expected 9 tiles"),
        ("1 0", "at least 2"),
        ("2 1 1 2 0", "exactly once"),
        ("2 1 2 3 4", "exactly once"),
    ],
    ids=["empty", "non-integer", "short", "side-1", "duplicate", "no-blank"],
)
def test_parse_rejects_malformed(text: str, message: str) -> None:
    with pytest.raises(PuzzleFormatError, match=message):
        parse_puzzle(text)


def test_read_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        read_puzzle(tmp_path / "nope.txt")


def test_write_result(tmp_path: Path) -> None:
    out = tmp_path / "out.txt"
    write_result(out, SearchResult(moves="DR", visited=3, created=6, updated=0))
    assert out.read_text() == "2\nDR\n3\n6\n0\n"


def test_write_result_for_solved_board(tmp_path: Path) -> None:
    out = tmp_path / "out.txt"
    write_result(out, SearchResult(moves="", visited=1, created=0, updated=0))
    assert out.read_text().splitlines() == ["0", "", "1", "0", "0"]


def test_write_puzzle_is_readable(tmp_path: Path) -> None:
    path = tmp_path / "puzzle.txt"
    board = Board((5, 1, 2, 3, 4, 6, 0, 7, 8, 9, 10, 11, 12, 13, 14, 15))
    write_puzzle(path, board)
    assert path.read_text().splitlines()[:2] == ["4", "5 1 2 3"]
    assert read_puzzle(path) == board


def test_prepare_output(tmp_path: Path) -> None:
    out = tmp_path / "out.txt"
    prepare_output(out)
    assert not out.exists()

    out.write_text("stale\n")
    prepare_output(out)
    assert not out.exists()


def test_prepare_output_fails_on_directory(tmp_path: Path) -> None:
    target = tmp_path / "taken"
    target.mkdir()
    (target / "child").write_text("x")
    with pytest.raises(OSError):
        prepare_output(target)
