"""Protocol layer: notation, scrambles, move frames and status decoding."""

from .errors import ProtocolError, ParseError, InvalidCount, EncodeError, DecodeError
from .notation import parse_move, parse_moves, format_moves
from .scramble import generate_scramble
from .framing import build_move_frame, parse_move_frame
from .commands import EncodedMoves, ROBOT_FACES, encode_moves, encode_raw_codes
from .status import MovesRemaining, RawStatus, decode_status
