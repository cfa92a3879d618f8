"""Move code table and high-level move encoders.

The robot turns five faces; it has no actuator for U. Each of the 15
remaining moves has a 4-bit code used on the move characteristic.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from ..models.move import Face, Move, Turn
from .errors import EncodeError
from .framing import MAX_MOVES_PER_FRAME, build_move_frame

logger = logging.getLogger(__name__)

COUNTER_MODULUS = 0x100  # 8-bit move counter
QUARTER_TURN_MS = 150
HALF_TURN_MS = 250

R, L, D, F, B = Face.RIGHT, Face.LEFT, Face.DOWN, Face.FRONT, Face.BACK
CW, HALF, CCW = Turn.CLOCKWISE, Turn.HALF, Turn.COUNTER_CLOCKWISE

# Move -> 4-bit wire code, as documented for the robot
MOVE_CODES: dict[Move, int] = {
    Move(R, CW): 0x0,
    Move(R, HALF): 0x1,
    Move(R, CCW): 0x2,
    Move(F, CW): 0x3,
    Move(F, HALF): 0x4,
    Move(F, CCW): 0x5,
    Move(D, CW): 0x6,
    Move(D, HALF): 0x7,
    Move(D, CCW): 0x8,
    Move(L, CW): 0x9,
    Move(L, HALF): 0xA,
    Move(L, CCW): 0xB,
    Move(B, CW): 0xC,
    Move(B, HALF): 0xD,
    Move(B, CCW): 0xE,
}

CODE_MOVES: dict[int, Move] = {code: move for move, code in MOVE_CODES.items()}

# Faces the robot can turn, in wire-code order
ROBOT_FACES: tuple[Face, ...] = (R, F, D, L, B)


@dataclass(frozen=True)
class EncodedMoves:
    """Frames for one encode call plus the advanced move counter."""

    frames: list[bytes] = field(default_factory=list)
    counter: int = 0

    def __repr__(self) -> str:
        return f"EncodedMoves(frames={len(self.frames)}, counter={self.counter})"


def move_code(move: Move) -> int:
    """Look up the wire code for a move.

    Raises:
        EncodeError: If the robot cannot perform the move.
    """
    try:
        return MOVE_CODES[move]
    except KeyError:
        raise EncodeError(f"Move {move} is not supported by the robot") from None


def decode_move_codes(codes: Iterable[int]) -> list[Move]:
    """Map wire codes back to moves.

    Raises:
        EncodeError: If a code has no move.
    """
    moves = []
    for code in codes:
        if code not in CODE_MOVES:
            raise EncodeError(f"Unknown move code {code}")
        moves.append(CODE_MOVES[code])
    return moves


def _check_counter(counter: int) -> None:
    if not 0 <= counter < COUNTER_MODULUS:
        raise ValueError(f"Counter must be 0-{COUNTER_MODULUS - 1}, got {counter}")


def encode_raw_codes(codes: Sequence[int], counter: int = 0) -> EncodedMoves:
    """Batch raw move codes into frames of up to 36 codes each.

    Args:
        codes: Move codes in execution order.
        counter: Current move counter, owned by the caller.

    Returns:
        The frames in send order and the counter advanced by ``len(codes)``.
    """
    _check_counter(counter)
    frames = [
        build_move_frame(codes[i : i + MAX_MOVES_PER_FRAME])
        for i in range(0, len(codes), MAX_MOVES_PER_FRAME)
    ]
    new_counter = (counter + len(codes)) % COUNTER_MODULUS
    logger.debug(
        "Encoded %d moves into %d frame(s), counter %d -> %d",
        len(codes), len(frames), counter, new_counter,
    )
    return EncodedMoves(frames=frames, counter=new_counter)


def encode_moves(moves: Sequence[Move], counter: int = 0) -> EncodedMoves:
    """Encode a move sequence into move-characteristic frames.

    The wire format has no counter field, so the frames depend only on
    ``moves``; the counter is threaded through for the caller.

    Raises:
        EncodeError: If a move is not supported (any U move).
        ValueError: If ``counter`` is out of range.
    """
    return encode_raw_codes([move_code(move) for move in moves], counter)


def estimate_duration_ms(moves: Iterable[Move]) -> int:
    """Estimate how long the robot needs to execute ``moves``."""
    return sum(HALF_TURN_MS if move.is_half_turn else QUARTER_TURN_MS for move in moves)
