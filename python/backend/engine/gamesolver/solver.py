"""Swap-bishops solver — breadth-first search over canonical boards."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from enum import StrEnum

from backend.engine.movegen import MoveGenerator
from backend.errors import SolverInvariantError
from backend.models.adjacency import STANDARD_ADJACENCY, Adjacency
from backend.models.board import GOAL, BoardState, Move, canonicalize, move_between

LOGGER = logging.getLogger("swap_bishops.solver")


class SolveStatus(StrEnum):
    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"


@dataclass(frozen=True)
class SolveResult:
    """Outcome of a single :meth:`Solver.solve` call.

    ``path`` runs from the start board to the goal board, both included,
    and is empty when the puzzle could not be solved.
    """

    status: SolveStatus
    path: tuple[BoardState, ...] = ()
    expanded: int = 0
    generated: int = 0

    @property
    def solved(self) -> bool:
        return self.status is SolveStatus.SOLVED

    @property
    def moves(self) -> int | None:
        """Number of moves in the solution, ``None`` if unsolvable."""
        return len(self.path) - 1 if self.solved else None

    def steps(self) -> list[Move]:
        return [move_between(a, b) for a, b in zip(self.path, self.path[1:])]


class Solver:
    """Finds the shortest move sequence between two boards.

    Holds only read-only configuration, so one instance can serve any
    number of calls; each :meth:`solve` keeps its own search bookkeeping.
    """

    def __init__(
        self,
        adjacency: Adjacency = STANDARD_ADJACENCY,
        goal: BoardState = GOAL,
    ) -> None:
        self.adjacency = adjacency
        self.goal = goal
        self._generator = MoveGenerator(adjacency)

    def is_goal(self, board: BoardState) -> bool:
        """True when *board* matches the goal up to same-colour swaps."""
        return canonicalize(board) == canonicalize(self.goal)

    def solve(self, start: BoardState) -> SolveResult:
        """Return the shortest path from *start* to the goal.

        Pieces are expanded in w1, w2, b1, b2 order and destinations in
        ascending tile order, so repeated calls return the same path.
        """
        start_key = canonicalize(start)

        visited: set[BoardState] = {start_key}
        previous: dict[BoardState, BoardState] = {}
        frontier: deque[BoardState] = deque([start])
        expanded = generated = 0

        while frontier:
            board = frontier.popleft()
            if self.is_goal(board):
                path = self._reconstruct(board, start, previous)
                LOGGER.info(
                    "Solved %s in %d moves (%d boards expanded, %d generated).",
                    start, len(path) - 1, expanded, generated,
                )
                return SolveResult(SolveStatus.SOLVED, path, expanded, generated)

            expanded += 1
            for _piece, succ in self._generator.all_successors(board):
                generated += 1
                key = canonicalize(succ)
                if key in visited:
                    continue
                visited.add(key)
                previous[key] = board
                frontier.append(succ)

        LOGGER.info(
            "No solution from %s (%d boards expanded, %d generated).",
            start, expanded, generated,
        )
        return SolveResult(SolveStatus.UNSOLVABLE, (), expanded, generated)

    def hint(self, board: BoardState) -> Move | None:
        """Return the first move of the shortest solution, or ``None``.

        ``None`` means *board* is already solved or cannot be solved.
        """
        result = self.solve(board)
        if not result.solved or result.moves == 0:
            return None
        return move_between(result.path[0], result.path[1])

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _reconstruct(
        end: BoardState,
        start: BoardState,
        previous: dict[BoardState, BoardState],
    ) -> tuple[BoardState, ...]:
        path = [end]
        board = end
        while board != start:
            key = canonicalize(board)
            if key not in previous:
                raise SolverInvariantError(
                    f"No predecessor recorded for {board} while rebuilding "
                    f"the path from {start}."
                )
            board = previous[key]
            path.append(board)
            if len(path) > len(previous) + 1:
                raise SolverInvariantError(
                    f"Predecessor chain from {end} loops without reaching {start}."
                )
        path.reverse()
        LOGGER.debug("Reconstructed a %d-move path.", len(path) - 1)
        return tuple(path)
