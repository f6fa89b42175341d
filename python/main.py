#!/usr/bin/env python3
"""Swap Bishops puzzle solver.

Usage::

    python main.py                      # solve the classic puzzle, Enter steps
    python main.py -f rich              # Rich terminal playback
    python main.py --no-pause           # print the whole solution at once
    python main.py -s 0,3,2,7 -v        # custom start, debug logging
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.errors import InvalidBoardError  # noqa: E402
from backend.models.board import START, BoardState  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _parse_start(value: str) -> BoardState:
    try:
        return BoardState.parse(value)
    except InvalidBoardError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _configure_logging(verbose: bool, level: Optional[str]) -> None:
    if verbose:
        resolved = logging.DEBUG
    elif level:
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise typer.BadParameter(f"Unknown log level {level!r}.")
    else:
        resolved = logging.WARNING
    logging.basicConfig(
        level=resolved,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="Frontend used to show the solution.",
    ),
    start: str = typer.Option(
        str(START), "-s", "--start",
        help="Starting tiles as w1,w2,b1,b2 (tiles 0-9).",
    ),
    pause: bool = typer.Option(
        True, "--pause/--no-pause",
        help="Wait for a key between moves.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Enable debug logging.",
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level",
        envvar="SWAP_BISHOPS_LOG_LEVEL",
        help="Logging level (DEBUG, INFO, WARNING, ...).",
    ),
) -> None:
    """Swap the white and black bishops in as few moves as possible."""
    _configure_logging(verbose, log_level)
    board = _parse_start(start)

    mod = importlib.import_module(_RUNNERS[frontend])
    status = mod.run(start=board, pause=pause)
    if status:
        raise typer.Exit(code=status)


if __name__ == "__main__":
    app()
