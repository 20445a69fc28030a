"""Outcome of one solver run."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SearchResult:
    """Move string plus the search counters reported alongside it."""

    moves: str
    visited: int
    created: int
    updated: int

    @property
    def length(self) -> int:
        return len(self.moves)

    def report_lines(self) -> list[str]:
        """The five lines written to the output file, in order."""
        return [
            str(self.length),
            self.moves,
            str(self.visited),
            str(self.created),
            str(self.updated),
        ]
