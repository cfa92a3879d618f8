"""Status frame decoding for the robot's status characteristic.

Status layout::

    +-------------+------------------------+
    | Remaining   |  Trailing bytes        |
    | 1 byte      |  0-19 bytes (opaque)   |
    +-------------+------------------------+

- Remaining: number of moves the robot has queued but not finished
- A leading byte above 36 is not a queue depth; the whole frame is
  surfaced as a raw event
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .errors import DecodeError
from .framing import MAX_MOVES_PER_FRAME

STATUS_FRAME_MAX = 20  # default ATT payload (MTU 23 - 3)


@dataclass(frozen=True)
class MovesRemaining:
    """The robot's queue depth."""

    remaining: int
    extra: bytes = b""

    @property
    def idle(self) -> bool:
        return self.remaining == 0


@dataclass(frozen=True)
class RawStatus:
    """A status frame this layer does not understand."""

    payload: bytes

    def __repr__(self) -> str:
        return f"RawStatus(payload={self.payload.hex(' ')})"


StatusEvent = Union[MovesRemaining, RawStatus]


def decode_status(frame: bytes) -> StatusEvent:
    """Decode one status read.

    Raises:
        DecodeError: If the frame is empty or too long.
    """
    if not frame:
        raise DecodeError(frame, "empty frame")
    if len(frame) > STATUS_FRAME_MAX:
        raise DecodeError(
            frame, f"length {len(frame)} exceeds {STATUS_FRAME_MAX} bytes"
        )

    remaining = frame[0]
    if remaining > MAX_MOVES_PER_FRAME:
        return RawStatus(payload=bytes(frame))
    return MovesRemaining(remaining=remaining, extra=bytes(frame[1:]))


def build_status_frame(remaining: int, extra: bytes = b"") -> bytes:
    """Build a status frame as the robot would report it."""
    if not 0 <= remaining <= MAX_MOVES_PER_FRAME:
        raise ValueError(
            f"Remaining moves must be 0-{MAX_MOVES_PER_FRAME}, got {remaining}"
        )
    if 1 + len(extra) > STATUS_FRAME_MAX:
        raise ValueError(f"Status frame must be at most {STATUS_FRAME_MAX} bytes")
    return bytes([remaining]) + extra
