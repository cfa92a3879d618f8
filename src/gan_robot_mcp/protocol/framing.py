"""Move frame packing for the robot's move characteristic.

Frame layout (18 bytes, written without response)::

    +--------+--------+--------+-----+---------+
    | byte 0 | byte 1 | byte 2 | ... | byte 17 |
    +--------+--------+--------+-----+---------+
    | m0 m1  | m2 m3  | m4 m5  | ... | m34 m35 |
    +--------+--------+--------+-----+---------+

- Each ``m`` is a 4-bit move code (0x0-0xE), high nibble first
- Unused slots are filled with 0xF, so an empty byte reads 0xFF
- Up to 36 moves fit in one frame
"""

from __future__ import annotations

from collections.abc import Sequence

from .errors import EncodeError

MOVE_FRAME_SIZE = 18
MAX_MOVES_PER_FRAME = MOVE_FRAME_SIZE * 2
FILLER_NIBBLE = 0x0F
MAX_MOVE_CODE = 0x0E


def build_move_frame(codes: Sequence[int]) -> bytes:
    """Pack move codes into one 18-byte frame.

    Args:
        codes: Up to 36 move codes, in execution order.

    Returns:
        An 18-byte ``bytes`` object ready to write to the move characteristic.

    Raises:
        EncodeError: If there are too many codes or a code is out of range.
    """
    if len(codes) > MAX_MOVES_PER_FRAME:
        raise EncodeError(
            f"Too many moves: {len(codes)}. "
            f"A frame holds at most {MAX_MOVES_PER_FRAME}"
        )
    for code in codes:
        if not 0 <= code <= MAX_MOVE_CODE:
            raise EncodeError(f"Move code must be 0-{MAX_MOVE_CODE}, got {code}")

    nibbles = list(codes) + [FILLER_NIBBLE] * (MAX_MOVES_PER_FRAME - len(codes))
    return bytes(
        (nibbles[i] << 4) | nibbles[i + 1] for i in range(0, MAX_MOVES_PER_FRAME, 2)
    )


def parse_move_frame(frame: bytes) -> list[int] | None:
    """Unpack an 18-byte move frame back into its move codes.

    Returns:
        The move codes in order, or ``None`` if the frame has the wrong
        length or a move code follows a filler slot.
    """
    if len(frame) != MOVE_FRAME_SIZE:
        return None

    codes: list[int] = []
    filled = False
    for byte in frame:
        for nibble in (byte >> 4, byte & 0x0F):
            if nibble == FILLER_NIBBLE:
                filled = True
            elif filled:
                return None
            else:
                codes.append(nibble)
    return codes
