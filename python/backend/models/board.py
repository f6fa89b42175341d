"""Board model for the swap-bishops puzzle."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import IntEnum, StrEnum
from typing import Iterable

from backend.errors import InvalidBoardError
from backend.models.adjacency import TILES, Tile


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"


class Piece(IntEnum):
    """Index of a bishop inside a ``BoardState`` (w1, w2, b1, b2)."""

    W1 = 0
    W2 = 1
    B1 = 2
    B2 = 3

    @property
    def color(self) -> Color:
        return Color.WHITE if self < Piece.B1 else Color.BLACK

    @property
    def partner(self) -> Piece:
        """The other bishop of the same colour."""
        return Piece(self ^ 1)

    @property
    def enemies(self) -> tuple[Piece, Piece]:
        if self.color is Color.WHITE:
            return (Piece.B1, Piece.B2)
        return (Piece.W1, Piece.W2)


@dataclass(frozen=True)
class BoardState:
    """Tiles of the two white and the two black bishops.

    Field order is ``(w1, w2, b1, b2)``.  Equality is positional; use
    :func:`canonicalize` (or :meth:`is_equivalent`) to compare boards
    regardless of which same-coloured bishop sits where.
    """

    w1: Tile
    w2: Tile
    b1: Tile
    b2: Tile

    def __post_init__(self) -> None:
        tiles = self.as_tuple()
        for tile in tiles:
            if isinstance(tile, bool) or not isinstance(tile, int):
                raise InvalidBoardError(f"Tile ids must be integers, got {tile!r}.")
            if tile not in TILES:
                raise InvalidBoardError(
                    f"Tile {tile} is not on the board (valid tiles are 0-9)."
                )
        if self.w1 == self.w2:
            raise InvalidBoardError(f"Both white bishops are on tile {self.w1}.")
        if self.b1 == self.b2:
            raise InvalidBoardError(f"Both black bishops are on tile {self.b1}.")
        shared = {self.w1, self.w2} & {self.b1, self.b2}
        if shared:
            raise InvalidBoardError(
                f"A white and a black bishop share tile {min(shared)}."
            )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_tuple(cls, tiles: Iterable[Tile]) -> BoardState:
        """Create a board from ``(w1, w2, b1, b2)``."""
        values = tuple(tiles)
        if len(values) != 4:
            raise InvalidBoardError(
                f"Expected 4 tiles (w1, w2, b1, b2), got {len(values)}."
            )
        return cls(*values)

    @classmethod
    def parse(cls, text: str) -> BoardState:
        """Create a board from text like ``"0,5,2,7"``.

        Example::

            BoardState.parse("0, 5, 2, 7") == BoardState(0, 5, 2, 7)
        """
        parts = [p.strip() for p in text.split(",")]
        try:
            values = [int(p) for p in parts]
        except ValueError:
            raise InvalidBoardError(
                f"Expected four comma-separated tile ids, got {text!r}."
            ) from None
        return cls.from_tuple(values)

    # -- queries --------------------------------------------------------------

    def as_tuple(self) -> tuple[Tile, Tile, Tile, Tile]:
        return (self.w1, self.w2, self.b1, self.b2)

    def tile_of(self, piece: Piece) -> Tile:
        return self.as_tuple()[piece]

    @property
    def whites(self) -> frozenset[Tile]:
        return frozenset((self.w1, self.w2))

    @property
    def blacks(self) -> frozenset[Tile]:
        return frozenset((self.b1, self.b2))

    @property
    def occupied(self) -> frozenset[Tile]:
        return frozenset(self.as_tuple())

    def is_equivalent(self, other: BoardState) -> bool:
        """Same position once same-coloured bishops are interchangeable."""
        return canonicalize(self) == canonicalize(other)

    def with_piece(self, piece: Piece, tile: Tile) -> BoardState:
        """Return a copy with *piece* moved to *tile*."""
        name = fields(self)[piece].name
        return replace(self, **{name: tile})

    def __str__(self) -> str:
        return ",".join(str(t) for t in self.as_tuple())


def canonicalize(board: BoardState) -> BoardState:
    """Order each colour pair so its smaller tile comes first.

    White pair stays first and black pair second; tiles are never sorted
    across colours.
    """
    w1, w2, b1, b2 = board.as_tuple()
    return BoardState(min(w1, w2), max(w1, w2), min(b1, b2), max(b1, b2))


@dataclass(frozen=True)
class Move:
    """One bishop moving from *source* to *destination*."""

    piece: Piece
    source: Tile
    destination: Tile

    @property
    def color(self) -> Color:
        return self.piece.color

    def __str__(self) -> str:
        return f"{self.color.value} bishop {self.source} -> {self.destination}"


def move_between(before: BoardState, after: BoardState) -> Move:
    """Describe the single move that turns *before* into *after*.

    Raises ``ValueError`` unless exactly one bishop changed tile.
    """
    changed = [
        Piece(i)
        for i, (a, b) in enumerate(zip(before.as_tuple(), after.as_tuple()))
        if a != b
    ]
    if len(changed) != 1:
        raise ValueError(
            f"Boards {before} and {after} differ in {len(changed)} bishops, "
            "expected exactly one."
        )
    piece = changed[0]
    return Move(piece, before.tile_of(piece), after.tile_of(piece))


# The reference puzzle: whites on 0 and 5, blacks on 2 and 7, swap them.
START = BoardState(0, 5, 2, 7)
GOAL = BoardState(2, 7, 0, 5)
