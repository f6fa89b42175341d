"""Vanilla terminal frontend — no third-party dependencies.

Prints the solution as ASCII boards, waiting for Enter between moves.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable

from backend.engine.gamesolver import Solver
from backend.engine.playback import Playback
from backend.models.adjacency import GRID_COLUMNS, GRID_ROWS, tile_coordinates
from backend.models.board import BoardState

LOGGER = logging.getLogger("swap_bishops.frontend.vanilla")


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset


def _paint(code: str, text: str) -> str:
    # Plain text when piped or redirected.
    if not sys.stdout.isatty():
        return text
    return f"{code}{text}{_R}"


# -- board rendering ----------------------------------------------------------


def render_board(board: BoardState) -> str:
    """Return the board as rows of ``|W|``, ``|B|`` and ``| |`` cells.

    The grid is 5 columns by 4 rows; only the ten tiles with a
    ``tile_coordinates`` position can ever hold a bishop.
    """
    cells = {tile_coordinates(t): "W" for t in board.whites}
    cells.update({tile_coordinates(t): "B" for t in board.blacks})

    lines: list[str] = []
    for row in range(GRID_ROWS):
        line = "|"
        for col in range(GRID_COLUMNS):
            line += cells.get((col, row), " ") + "|"
        lines.append(line)
    return "\n".join(lines)


# -- public entry point -------------------------------------------------------


def run(
    start: BoardState,
    pause: bool = True,
    solver: Solver | None = None,
    wait: Callable[[str], object] = input,
) -> int:
    """Solve from *start* and print every board of the solution.

    If *wait* hits end of input the remaining boards are printed without
    pausing.  Returns a process exit status: 0 when solved, 1 when there
    is no solution.
    """
    solver = solver or Solver()
    result = solver.solve(start)

    if not result.solved:
        print("\n" + _paint(_Y, "No solution found.") + "\n")
        print(render_board(start))
        return 1

    print("\n" + _paint(_G, f"Solved in {result.moves} moves! :-)") + "\n")

    # Start printing with the board we began from...
    playback = Playback(result)
    print(render_board(playback.current))
    while playback.advance():
        if pause:
            try:
                wait("\n" + _paint(_DIM, "Press ENTER to show next move...") + "\n")
            except EOFError:
                LOGGER.debug("End of input, printing the rest without pausing.")
                pause = False
                print()
        else:
            print()
        move = playback.last_move
        LOGGER.debug("Move %d/%d: %s", playback.index, playback.total_moves, move)
        print(_paint(_C, f"Move {playback.index}/{playback.total_moves}") + f"  {move}")
        print(render_board(playback.current))
    return 0
