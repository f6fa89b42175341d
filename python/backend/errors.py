"""Exceptions raised by the bishops backend."""

from __future__ import annotations


class BishopsError(Exception):
    """Base class for every error raised by the backend."""


class InvalidBoardError(BishopsError, ValueError):
    """A board state violates the placement rules.

    Raised at construction time, before any search begins.
    """


class InvalidTileError(BishopsError, KeyError):
    """A tile id outside the ten valid tiles was looked up."""

    def __init__(self, tile: object) -> None:
        super().__init__(tile)
        self.tile = tile

    def __str__(self) -> str:
        return f"Unknown tile {self.tile!r} (valid tiles are 0-9)."


class SolverInvariantError(BishopsError, RuntimeError):
    """The solver's own bookkeeping is inconsistent.

    This is a programming error; the solver never returns a path it could
    not fully reconstruct.
    """
