"""Tests for move notation parsing."""

import pytest

from gan_robot_mcp.models.move import ALL_MOVES, Face, Move, Turn
from gan_robot_mcp.protocol.errors import ParseError
from gan_robot_mcp.protocol.notation import format_moves, parse_move, parse_moves


def test_canonical_roundtrip():
    """Every move's canonical notation parses back to the same move."""
    assert len(ALL_MOVES) == 18
    for move in ALL_MOVES:
        assert parse_move(str(move)) == move


def test_empty_input():
    """Empty or blank input is an empty sequence, not an error."""
    assert parse_moves("") == []
    assert parse_moves("   \t\n") == []


def test_parse_sequence():
    """Order is preserved and each token maps to one move."""
    assert parse_moves("R D2") == [
        Move(Face.RIGHT, Turn.CLOCKWISE),
        Move(Face.DOWN, Turn.HALF),
    ]


def test_whitespace_runs():
    """Tokens may be separated by any run of whitespace."""
    assert format_moves(parse_moves("  F'\t\tB  L2\n")) == "F' B L2"


def test_prime():
    assert parse_move("U'") == Move(Face.UP, Turn.COUNTER_CLOCKWISE)


def test_half_turn_aliases():
    """R2' and R'2 are accepted as aliases of R2."""
    assert parse_move("R2'") == parse_move("R2")
    assert parse_move("R'2") == parse_move("R2")


@pytest.mark.parametrize("token", ["X", "r", "2R", "'"])
def test_unknown_face(token):
    with pytest.raises(ParseError, match="unknown face"):
        parse_move(token)


@pytest.mark.parametrize("token", ["R3", "Rw", "F+"])
def test_unknown_modifier(token):
    with pytest.raises(ParseError, match="unknown modifier"):
        parse_move(token)


@pytest.mark.parametrize("token", ["R''", "R22", "R2'2", "R'2'"])
def test_duplicate_modifier(token):
    with pytest.raises(ParseError, match="duplicate modifier"):
        parse_move(token)


def test_error_reports_token_and_position():
    """The error identifies the offending token and its index."""
    with pytest.raises(ParseError) as exc_info:
        parse_moves("R U Q2 F")
    assert exc_info.value.token == "Q2"
    assert exc_info.value.position == 2
    assert "'Q2'" in str(exc_info.value)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_moves("R R''")


def test_format_moves():
    """format_moves output re-parses to the same sequence."""
    moves = parse_moves("R U' F2 D B' L")
    assert parse_moves(format_moves(moves)) == moves
