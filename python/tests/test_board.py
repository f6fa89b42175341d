"""Board state tests — validation, canonical form and move descriptions."""

from __future__ import annotations

import itertools

import pytest

from backend.errors import InvalidBoardError
from backend.models.board import (
    GOAL,
    START,
    BoardState,
    Color,
    Move,
    Piece,
    canonicalize,
    move_between,
)


# Every placement of two whites and two blacks on distinct tiles.
_ALL_BOARDS = [
    BoardState(*tiles) for tiles in itertools.permutations(range(10), 4)
]


# -- construction -------------------------------------------------------------


@pytest.mark.parametrize(
    "tiles",
    [
        (0, 0, 2, 7),   # duplicate white
        (0, 5, 7, 7),   # duplicate black
        (0, 5, 0, 7),   # white and black share a tile
        (0, 5, 2, 10),  # off the board
        (-1, 5, 2, 7),
    ],
    ids=str,
)
def test_invalid_board_rejected(tiles: tuple[int, ...]) -> None:
    with pytest.raises(InvalidBoardError):
        BoardState(*tiles)


def test_invalid_board_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        BoardState(3, 3, 1, 2)


def test_non_integer_tile_rejected() -> None:
    with pytest.raises(InvalidBoardError):
        BoardState(0, 5, 2, "7")  # type: ignore[arg-type]
    with pytest.raises(InvalidBoardError):
        BoardState(True, 5, 2, 7)


def test_from_tuple() -> None:
    assert BoardState.from_tuple([0, 5, 2, 7]) == START
    with pytest.raises(InvalidBoardError):
        BoardState.from_tuple([0, 5, 2])


@pytest.mark.parametrize("text", ["0,5,2,7", " 0, 5 ,2,7 "])
def test_parse(text: str) -> None:
    assert BoardState.parse(text) == START


@pytest.mark.parametrize("text", ["", "0,5,2", "a,b,c,d", "0,5,2,7,8"])
def test_parse_rejects_garbage(text: str) -> None:
    with pytest.raises(InvalidBoardError):
        BoardState.parse(text)


def test_str_round_trips_through_parse() -> None:
    assert str(START) == "0,5,2,7"
    assert BoardState.parse(str(GOAL)) == GOAL


# -- canonical form -----------------------------------------------------------


def test_canonicalize_orders_each_pair() -> None:
    assert canonicalize(BoardState(5, 0, 7, 2)) == BoardState(0, 5, 2, 7)


def test_canonicalize_keeps_colours_apart() -> None:
    # Black tiles smaller than white tiles stay in the black slots.
    assert canonicalize(BoardState(9, 8, 1, 0)) == BoardState(8, 9, 0, 1)


def test_canonicalize_is_idempotent() -> None:
    for board in _ALL_BOARDS:
        once = canonicalize(board)
        assert canonicalize(once) == once


def test_canonicalize_ignores_same_colour_swaps() -> None:
    for board in _ALL_BOARDS:
        w1, w2, b1, b2 = board.as_tuple()
        key = canonicalize(board)
        assert canonicalize(BoardState(w2, w1, b1, b2)) == key
        assert canonicalize(BoardState(w1, w2, b2, b1)) == key
        assert canonicalize(BoardState(w2, w1, b2, b1)) == key


def test_canonicalize_distinguishes_colours() -> None:
    assert canonicalize(START) != canonicalize(GOAL)


def test_is_equivalent() -> None:
    assert BoardState(7, 2, 5, 0).is_equivalent(GOAL)
    assert not START.is_equivalent(GOAL)


def test_equality_is_positional() -> None:
    assert BoardState(5, 0, 2, 7) != START


# -- pieces and moves ---------------------------------------------------------


def test_piece_helpers() -> None:
    assert Piece.W1.color is Color.WHITE
    assert Piece.B2.color is Color.BLACK
    assert Piece.W1.partner is Piece.W2
    assert Piece.B2.partner is Piece.B1
    assert Piece.W2.enemies == (Piece.B1, Piece.B2)
    assert Piece.B1.enemies == (Piece.W1, Piece.W2)


def test_tile_of_and_with_piece() -> None:
    assert [START.tile_of(p) for p in Piece] == [0, 5, 2, 7]
    moved = START.with_piece(Piece.B2, 4)
    assert moved == BoardState(0, 5, 2, 4)
    assert START == BoardState(0, 5, 2, 7)


def test_colour_sets() -> None:
    assert START.whites == {0, 5}
    assert START.blacks == {2, 7}
    assert START.occupied == {0, 2, 5, 7}


def test_move_between() -> None:
    move = move_between(START, BoardState(0, 3, 2, 7))
    assert move == Move(Piece.W2, 5, 3)
    assert move.color is Color.WHITE
    assert str(move) == "white bishop 5 -> 3"


@pytest.mark.parametrize(
    "after",
    [START, BoardState(3, 6, 2, 7)],
    ids=["no-change", "two-changes"],
)
def test_move_between_needs_exactly_one_change(after: BoardState) -> None:
    with pytest.raises(ValueError):
        move_between(START, after)
