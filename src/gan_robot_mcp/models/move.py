"""Cube move model.

A move is a face plus a turn. Enum values double as the notation
fragments, so ``str(Move(Face.RIGHT, Turn.COUNTER_CLOCKWISE))`` is
``"R'"``::

    +--------+-------+-------+-------+
    | Face   |  CW   | Half  |  CCW  |
    +--------+-------+-------+-------+
    | R      |  R    |  R2   |  R'   |
    | ...    |  ...  |  ...  |  ...  |
    +--------+-------+-------+-------+
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Face(Enum):
    """The six cube faces, valued by their notation letter."""

    RIGHT = "R"
    LEFT = "L"
    UP = "U"
    DOWN = "D"
    FRONT = "F"
    BACK = "B"


class Turn(Enum):
    """Turn magnitude/direction, valued by its notation suffix."""

    CLOCKWISE = ""
    COUNTER_CLOCKWISE = "'"
    HALF = "2"


@dataclass(frozen=True)
class Move:
    """A single turn of one face."""

    face: Face
    turn: Turn

    @property
    def is_half_turn(self) -> bool:
        return self.turn is Turn.HALF

    def __str__(self) -> str:
        return self.face.value + self.turn.value


ALL_FACES: tuple[Face, ...] = tuple(Face)
ALL_MOVES: tuple[Move, ...] = tuple(Move(face, turn) for face in Face for turn in Turn)
