"""Optimal N×N sliding puzzle solver."""

from slidesolver.engine.solver import Solver
from slidesolver.models import Board, Direction, SearchResult

__all__ = ["Board", "Direction", "SearchResult", "Solver"]
__version__ = "0.1.0"
