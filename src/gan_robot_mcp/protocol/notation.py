"""Move notation parser.

Grammar for a single token::

    <face> [modifier] [modifier]

    face     := R | L | U | D | F | B
    modifier := 2 | '

Each modifier kind may appear at most once, in either order. A bare face
letter is a clockwise quarter turn, ``'`` makes it counter-clockwise and
``2`` makes it a half turn. A half turn has no direction, so ``R2``,
``R2'`` and ``R'2`` all name the same move.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..models.move import Face, Move, Turn
from .errors import ParseError

FACE_LETTERS: dict[str, Face] = {face.value: face for face in Face}
DOUBLE = "2"
PRIME = "'"


def parse_move(token: str, position: int = 0) -> Move:
    """Parse one notation token into a Move.

    Args:
        token: A token such as ``"R"``, ``"D2"`` or ``"F'"``.
        position: Index of the token within its sequence, used in errors.

    Raises:
        ParseError: If the token is not valid notation.
    """
    if not token:
        raise ParseError(token, position, "empty token")

    face = FACE_LETTERS.get(token[0])
    if face is None:
        raise ParseError(token, position, f"unknown face {token[0]!r}")

    modifiers = token[1:]
    for char in modifiers:
        if char not in (DOUBLE, PRIME):
            raise ParseError(token, position, f"unknown modifier {char!r}")
    if len(set(modifiers)) != len(modifiers):
        raise ParseError(token, position, "duplicate modifier")

    if DOUBLE in modifiers:
        turn = Turn.HALF
    elif PRIME in modifiers:
        turn = Turn.COUNTER_CLOCKWISE
    else:
        turn = Turn.CLOCKWISE
    return Move(face, turn)


def parse_moves(text: str) -> list[Move]:
    """Parse a whitespace-separated move sequence.

    Blank input yields an empty list.
    """
    return [parse_move(token, i) for i, token in enumerate(text.split())]


def format_moves(moves: Iterable[Move]) -> str:
    """Render moves back to canonical notation."""
    return " ".join(str(move) for move in moves)
