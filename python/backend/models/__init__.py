from backend.models.adjacency import STANDARD_ADJACENCY, Adjacency, Tile
from backend.models.board import (
    GOAL,
    START,
    BoardState,
    Color,
    Move,
    Piece,
    canonicalize,
    move_between,
)

__all__ = [
    "Adjacency",
    "BoardState",
    "Color",
    "GOAL",
    "Move",
    "Piece",
    "START",
    "STANDARD_ADJACENCY",
    "Tile",
    "canonicalize",
    "move_between",
]
