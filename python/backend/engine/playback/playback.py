"""Step-by-step playback of a solved move sequence."""

from __future__ import annotations

from backend.engine.gamesolver import SolveResult
from backend.models.board import BoardState, Move, move_between


class Playback:
    """Walks forwards and backwards through a solution path."""

    def __init__(self, result: SolveResult) -> None:
        if not result.solved:
            raise ValueError("Cannot play back an unsolved result.")
        self.path: tuple[BoardState, ...] = result.path
        self.index: int = 0

    # -- navigation -----------------------------------------------------------

    def advance(self) -> bool:
        """Show the next board.  Returns False if already at the goal."""
        if self.is_finished:
            return False
        self.index += 1
        return True

    def rewind(self) -> bool:
        """Show the previous board.  Returns False if already at the start."""
        if self.index == 0:
            return False
        self.index -= 1
        return True

    def restart(self) -> None:
        self.index = 0

    # -- queries --------------------------------------------------------------

    @property
    def current(self) -> BoardState:
        return self.path[self.index]

    @property
    def total_moves(self) -> int:
        return len(self.path) - 1

    @property
    def is_finished(self) -> bool:
        return self.index == self.total_moves

    @property
    def last_move(self) -> Move | None:
        """The move that produced the current board, ``None`` at the start."""
        if self.index == 0:
            return None
        return move_between(self.path[self.index - 1], self.current)
