"""Single-keypress reader used to step through a solution.

Reads one key without waiting for Enter and maps it to a playback action.
Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys


# -- low-level character readers -----------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getch().decode("utf-8", errors="ignore")


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- key mapping ---------------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "\r": "next",
    "\n": "next",
    " ": "next",
    "n": "next",
    "N": "next",
    "b": "back",
    "B": "back",
    "r": "restart",
    "R": "restart",
    "q": "quit",
    "Q": "quit",
    "\x03": "quit",  # Ctrl-C
}

# Final byte of the ESC [ x arrow-key sequences.
_ARROW_MAP: dict[str, str] = {
    "C": "next",   # right
    "B": "next",   # down
    "D": "back",   # left
    "A": "back",   # up
}


def resolve(ch: str) -> str:
    """Map a raw character to its action string ("" when unmapped)."""
    return _KEY_MAP.get(ch, "")


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Block for one keypress and return a playback action.

    Possible return values:
        "next"     — Enter / Space / n / → / ↓
        "back"     — b / ← / ↑
        "restart"  — r
        "quit"     — q / Ctrl-C / Escape
        ""         — anything else
    """
    ch = _getch()

    if ch == "\x1b":
        ch2 = _getch()
        if ch2 == "[":
            return _ARROW_MAP.get(_getch(), "")
        return "quit"  # bare Escape

    return resolve(ch)
