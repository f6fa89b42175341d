"""Rich terminal frontend — styled board, panels and keyboard playback.

Uses the ``rich`` library for output and the shared single-key input
handler for stepping through the solution.
"""

from __future__ import annotations

import sys
from typing import Callable

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gamesolver import SolveResult, Solver
from backend.engine.playback import Playback
from backend.models.adjacency import GRID_COLUMNS, GRID_ROWS, TILES, tile_coordinates
from backend.models.board import BoardState
from frontend.cli.input_handler import get_key

console = Console()


# -- board rendering ----------------------------------------------------------


def _render_board(board: BoardState) -> Table:
    """Return a Rich Table of the 5×4 grid with the bishops on it."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(GRID_COLUMNS):
        table.add_column(width=1, justify="center")

    tiles = {tile_coordinates(t): t for t in TILES}
    for row in range(GRID_ROWS):
        cells: list[str] = []
        for col in range(GRID_COLUMNS):
            tile = tiles.get((col, row))
            if tile is None:
                cells.append("")
            elif tile in board.whites:
                cells.append("[bold white]W[/bold white]")
            elif tile in board.blacks:
                cells.append("[bold magenta]B[/bold magenta]")
            else:
                cells.append(f"[dim]{tile}[/dim]")
        table.add_row(*cells)

    return table


def _board_panel(playback: Playback, result: SolveResult) -> Panel:
    move = playback.last_move
    caption = Text()
    if move is None:
        caption.append("Start", style="bold cyan")
    else:
        caption.append(f"Move {playback.index}/{playback.total_moves}  ", style="bold cyan")
        caption.append(str(move), style="dim")

    return Panel(
        Group(Align.center(_render_board(playback.current)), Align.center(caption)),
        title=f"[bold green]Solved in {result.moves} moves![/bold green]",
        border_style="bright_blue",
        padding=(1, 2),
    )


def _controls() -> Text:
    controls = Text()
    controls.append("  Enter", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("→", style="bold cyan")
    controls.append("  next   ", style="dim")
    controls.append("B", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("←", style="bold cyan")
    controls.append("  back   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  restart   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")
    return controls


# -- screens ------------------------------------------------------------------


def _draw(playback: Playback, result: SolveResult) -> None:
    console.clear()
    console.print()
    console.print(Align.center(_board_panel(playback, result)))
    console.print(Align.center(_controls()))


def _draw_unsolvable(start: BoardState) -> None:
    panel = Panel(
        Align.center(_render_board(start)),
        title="[bold red]No solution found[/bold red]",
        border_style="red",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))


def _interactive(playback: Playback, result: SolveResult, read_key: Callable[[], str]) -> None:
    while True:
        _draw(playback, result)
        key = read_key()
        if key == "next":
            playback.advance()
        elif key == "back":
            playback.rewind()
        elif key == "restart":
            playback.restart()
        elif key == "quit":
            return


# -- public entry point -------------------------------------------------------


def run(
    start: BoardState,
    pause: bool = True,
    solver: Solver | None = None,
    read_key: Callable[[], str] | None = None,
) -> int:
    """Solve from *start* and show the solution with Rich.

    With *pause* the boards are stepped through with the keyboard;
    otherwise every board is printed once.  Without a *read_key* the
    keyboard is only used when stdin is a terminal, so piped or redirected
    runs print every board.  Returns 0 when solved, 1 when there is no
    solution.
    """
    solver = solver or Solver()
    with console.status("[cyan]Searching…[/cyan]"):
        result = solver.solve(start)

    if not result.solved:
        _draw_unsolvable(start)
        return 1

    if read_key is None and sys.stdin.isatty():
        read_key = get_key

    playback = Playback(result)
    if pause and read_key is not None:
        _interactive(playback, result, read_key)
        return 0

    console.print(Align.center(_board_panel(playback, result)))
    while playback.advance():
        console.print(Align.center(_board_panel(playback, result)))
    return 0
