"""Playback navigation tests."""

from __future__ import annotations

import pytest

from backend.engine.gamesolver import SolveResult, SolveStatus, Solver
from backend.engine.playback import Playback
from backend.models.board import GOAL, START, BoardState, canonicalize


@pytest.fixture(scope="module")
def result() -> SolveResult:
    return Solver().solve(START)


def test_starts_at_the_start(result: SolveResult) -> None:
    playback = Playback(result)
    assert playback.index == 0
    assert playback.current == START
    assert playback.last_move is None
    assert playback.total_moves == result.moves


def test_advance_to_the_end(result: SolveResult) -> None:
    playback = Playback(result)
    seen = [playback.current]
    while playback.advance():
        seen.append(playback.current)

    assert tuple(seen) == result.path
    assert playback.is_finished
    assert canonicalize(playback.current) == canonicalize(GOAL)
    assert not playback.advance()


def test_last_move_matches_steps(result: SolveResult) -> None:
    playback = Playback(result)
    for step in result.steps():
        playback.advance()
        assert playback.last_move == step


def test_rewind_and_restart(result: SolveResult) -> None:
    playback = Playback(result)
    assert not playback.rewind()

    playback.advance()
    playback.advance()
    assert playback.rewind()
    assert playback.index == 1

    playback.restart()
    assert playback.current == START


def test_already_solved_board() -> None:
    playback = Playback(Solver().solve(GOAL))
    assert playback.total_moves == 0
    assert playback.is_finished
    assert not playback.advance()


def test_unsolved_result_rejected() -> None:
    unsolved = Solver().solve(BoardState(3, 4, 1, 6))
    assert unsolved.status is SolveStatus.UNSOLVABLE
    with pytest.raises(ValueError):
        Playback(unsolved)
