from npuzzle.models.board import Board, Direction
from npuzzle.models.errors import GridFormatError, InvalidArgument, SearchTimeout

__all__ = ["Board", "Direction", "GridFormatError", "InvalidArgument", "SearchTimeout"]
