"""Tests for the caller-owned move counter."""

import logging

import pytest

from gan_robot_mcp.protocol.errors import EncodeError
from gan_robot_mcp.protocol.notation import parse_moves
from gan_robot_mcp.protocol.status import MovesRemaining
from gan_robot_mcp.session import MoveSession


def test_counter_threads_across_calls():
    session = MoveSession()
    session.encode(parse_moves("R F D"))
    session.encode(parse_moves("L B"))
    assert session.counter == 5


def test_independent_sessions():
    """Sessions do not share counter state."""
    a, b = MoveSession(), MoveSession()
    a.encode(parse_moves("R F"))
    assert b.counter == 0


def test_failed_encode_keeps_counter():
    session = MoveSession(counter=9)
    with pytest.raises(EncodeError):
        session.encode(parse_moves("R U"))
    assert session.counter == 9


def test_encode_raw():
    session = MoveSession(counter=254)
    frames = session.encode_raw([0, 1, 2])
    assert len(frames) == 1
    assert session.counter == 1


def test_acknowledged():
    """The acknowledged counter lags by the robot's queue depth."""
    session = MoveSession()
    session.encode(parse_moves("R F D L B"))
    assert session.acknowledged(MovesRemaining(remaining=2)) == 3
    assert session.acknowledged(MovesRemaining(remaining=0)) == 5
    assert session.pending(MovesRemaining(remaining=2)) == 2


def test_acknowledged_wraps():
    session = MoveSession(counter=1)
    assert session.acknowledged(MovesRemaining(remaining=3)) == 254


def test_reset():
    session = MoveSession(counter=77)
    session.reset()
    assert session.counter == 0


def test_logs_counter_advance(caplog):
    session = MoveSession()
    with caplog.at_level(logging.INFO, logger="gan_robot_mcp.session"):
        session.encode(parse_moves("R"))
    assert "Move counter 0 -> 1" in caplog.text
