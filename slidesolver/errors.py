"""Exceptions raised by the solver and its file helpers."""

from __future__ import annotations


class SlideSolverError(Exception):
    """Base class for every error raised by this package."""


class InvalidBoardError(SlideSolverError, ValueError):
    """The tiles do not describe a valid N×N puzzle."""


class PuzzleFormatError(SlideSolverError, ValueError):
    """A puzzle file could not be parsed."""


class SearchExhaustedError(SlideSolverError, RuntimeError):
    """The open frontier ran dry before the goal was reached.

    Only possible when a board slips past the solvability gate, so this
    signals a bug rather than a bad input.
    """
