"""Tile geometry for the ten white tiles a bishop can land on.

The tiles are numbered like this::

    0 1 2
     3 4
    5 6 7
     8 9

Every tile sits on a 5×4 display grid (see ``TILE_COORDS``).  A bishop on a
tile can reach the tiles listed in ``REACHABLE``; long diagonal moves must
pass over the intermediate tiles in ``BLOCKING_PATHS``, which have to be
empty for the move to be legal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from backend.errors import InvalidTileError

Tile = int

TILES: tuple[Tile, ...] = tuple(range(10))

# (column, row) on the 5×4 grid the board is drawn on.
TILE_COORDS: Mapping[Tile, tuple[int, int]] = MappingProxyType({
    0: (0, 0), 1: (2, 0), 2: (4, 0),
    3: (1, 1), 4: (3, 1),
    5: (0, 2), 6: (2, 2), 7: (4, 2),
    8: (1, 3), 9: (3, 3),
})

GRID_COLUMNS = 5
GRID_ROWS = 4

REACHABLE: Mapping[Tile, frozenset[Tile]] = MappingProxyType({
    0: frozenset({3, 6, 9}),
    1: frozenset({3, 4, 5, 7}),
    2: frozenset({4, 6, 8}),
    3: frozenset({0, 1, 5, 6, 9}),
    4: frozenset({1, 2, 6, 7, 8}),
    5: frozenset({1, 3, 8}),
    6: frozenset({0, 2, 3, 4, 8, 9}),
    7: frozenset({1, 4, 9}),
    8: frozenset({2, 4, 5, 6}),
    9: frozenset({0, 3, 6, 7}),
})

# (source, destination) -> tiles passed over, nearest first.
BLOCKING_PATHS: Mapping[tuple[Tile, Tile], tuple[Tile, ...]] = MappingProxyType({
    (0, 6): (3,),
    (0, 9): (3, 6),
    (1, 5): (3,),
    (1, 7): (4,),
    (2, 6): (4,),
    (2, 8): (4, 6),
    (3, 9): (6,),
    (4, 8): (6,),
    (5, 1): (3,),
    (6, 0): (3,),
    (6, 2): (4,),
    (7, 1): (4,),
    (8, 4): (6,),
    (8, 2): (6, 4),
    (9, 0): (6, 3),
    (9, 3): (6,),
})


@dataclass(frozen=True, eq=False)
class Adjacency:
    """Read-only reachability and blocking-path lookups.

    Built once and shared; nothing mutates it after construction.
    """

    reachable_map: Mapping[Tile, frozenset[Tile]] = field(
        default_factory=lambda: REACHABLE,
    )
    blocking_map: Mapping[tuple[Tile, Tile], tuple[Tile, ...]] = field(
        default_factory=lambda: BLOCKING_PATHS,
    )
    _ordered: Mapping[Tile, tuple[Tile, ...]] = field(
        init=False, repr=False, compare=False,
    )

    def __post_init__(self) -> None:
        # Frozen dataclass: bypass __setattr__ to store read-only copies.
        reachable = {t: frozenset(dests) for t, dests in self.reachable_map.items()}
        ordered = {t: tuple(sorted(dests)) for t, dests in reachable.items()}
        object.__setattr__(self, "reachable_map", MappingProxyType(reachable))
        object.__setattr__(self, "blocking_map", MappingProxyType(
            {pair: tuple(path) for pair, path in self.blocking_map.items()}
        ))
        object.__setattr__(self, "_ordered", MappingProxyType(ordered))

    # -- queries --------------------------------------------------------------

    @property
    def tiles(self) -> tuple[Tile, ...]:
        return tuple(sorted(self._ordered))

    def reachable(self, tile: Tile) -> tuple[Tile, ...]:
        """Tiles directly reachable from *tile*, in ascending order."""
        try:
            return self._ordered[tile]
        except KeyError:
            raise InvalidTileError(tile) from None

    def blocking_path(self, source: Tile, destination: Tile) -> tuple[Tile, ...]:
        """Tiles that must be vacant to move from *source* to *destination*.

        Returns ``()`` when the move passes over no other tile.
        """
        for tile in (source, destination):
            if tile not in self._ordered:
                raise InvalidTileError(tile)
        return self.blocking_map.get((source, destination), ())

    def threatens(self, attacker: Tile, target: Tile) -> bool:
        """Does a bishop on *attacker* threaten *target*?"""
        return target in self.reachable(attacker)


def tile_coordinates(tile: Tile) -> tuple[int, int]:
    """Return the ``(column, row)`` display position of *tile*."""
    try:
        return TILE_COORDS[tile]
    except KeyError:
        raise InvalidTileError(tile) from None


STANDARD_ADJACENCY = Adjacency()
