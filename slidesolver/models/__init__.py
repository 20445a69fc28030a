from slidesolver.models.board import Board, Direction
from slidesolver.models.result import SearchResult

__all__ = ["Board", "Direction", "SearchResult"]
