"""Move session: owns the move counter across encode calls.

The encoder is stateless; a session threads the counter through each
call so the host can line up status reads with the moves it sent.

Usage::

    session = MoveSession()
    for frame in session.encode(parse_moves("R F2 D'")):
        transport.write(frame)
    event = decode_status(transport.read())
    session.acknowledged(event)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from .models.move import Move
from .protocol.commands import COUNTER_MODULUS, encode_moves, encode_raw_codes
from .protocol.status import MovesRemaining

logger = logging.getLogger(__name__)


@dataclass
class MoveSession:
    """Caller-side state for one robot connection."""

    counter: int = 0

    def encode(self, moves: Sequence[Move]) -> list[bytes]:
        """Encode moves and advance the counter."""
        result = encode_moves(moves, self.counter)
        self._advance(result.counter)
        return result.frames

    def encode_raw(self, codes: Sequence[int]) -> list[bytes]:
        """Encode raw move codes and advance the counter."""
        result = encode_raw_codes(codes, self.counter)
        self._advance(result.counter)
        return result.frames

    def pending(self, event: MovesRemaining) -> int:
        return event.remaining

    def acknowledged(self, event: MovesRemaining) -> int:
        """Counter value of the last move the robot has finished."""
        return (self.counter - event.remaining) % COUNTER_MODULUS

    def reset(self) -> None:
        self.counter = 0

    def _advance(self, counter: int) -> None:
        if counter != self.counter:
            logger.info("Move counter %d -> %d", self.counter, counter)
        self.counter = counter
