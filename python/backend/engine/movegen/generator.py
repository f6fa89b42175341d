"""Generates the legal successor boards of a position."""

from __future__ import annotations

from typing import Iterator

from backend.models.adjacency import STANDARD_ADJACENCY, Adjacency, Tile
from backend.models.board import BoardState, Piece


class MoveGenerator:
    """Enumerates single-bishop moves allowed by the puzzle rules.

    A bishop may move to a tile it can reach when that tile is empty, is not
    threatened by either bishop of the other colour, and every tile it
    passes over is empty.
    """

    def __init__(self, adjacency: Adjacency = STANDARD_ADJACENCY) -> None:
        self.adjacency = adjacency

    def destinations(self, board: BoardState, piece: Piece) -> list[Tile]:
        """Return the tiles *piece* may legally move to, ascending."""
        adj = self.adjacency
        source = board.tile_of(piece)
        partner = board.tile_of(piece.partner)
        enemy1, enemy2 = (board.tile_of(e) for e in piece.enemies)
        others = (partner, enemy1, enemy2)

        out: list[Tile] = []
        for dest in adj.reachable(source):
            # Is the tile empty?
            if dest in others:
                continue
            # Would an enemy bishop threaten it?
            if adj.threatens(enemy1, dest) or adj.threatens(enemy2, dest):
                continue
            # Is anything in the way?
            if any(t in others for t in adj.blocking_path(source, dest)):
                continue
            out.append(dest)
        return out

    def successors(self, board: BoardState, piece: Piece) -> list[BoardState]:
        """Return every board reached by moving *piece* one step."""
        return [board.with_piece(piece, dest) for dest in self.destinations(board, piece)]

    def all_successors(self, board: BoardState) -> Iterator[tuple[Piece, BoardState]]:
        """Yield ``(piece, successor)`` for w1, w2, b1, b2 in that order."""
        for piece in Piece:
            for succ in self.successors(board, piece):
                yield piece, succ
