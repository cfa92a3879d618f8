"""MCP server entry point for the GAN cube-solving robot.

Exposes the move protocol as tools and resources via the Model Context
Protocol using the official Python MCP SDK with stdio transport. Tools
return hex-encoded frames; writing them to the robot is up to the BLE
transport.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from mcp.server.fastmcp import FastMCP

from .config import RobotConfig
from .models.move import ALL_FACES
from .protocol.commands import (
    MOVE_CODES,
    ROBOT_FACES,
    decode_move_codes,
    estimate_duration_ms,
)
from .protocol.errors import DecodeError, EncodeError, InvalidCount, ParseError
from .protocol.framing import MAX_MOVES_PER_FRAME, MOVE_FRAME_SIZE
from .protocol.notation import format_moves, parse_moves as parse_notation
from .protocol.scramble import generate_scramble
from .protocol.status import MovesRemaining, decode_status as decode_status_frame
from .session import MoveSession

logger = logging.getLogger(__name__)

mcp = FastMCP(
    "gan-robot",
    instructions="MCP server for the GAN cube-solving robot move protocol",
)

# Global session state
_session = MoveSession()


def _parse_error(e: ParseError) -> dict[str, Any]:
    logger.warning("Rejected moves: %s", e)
    return {"error": str(e), "token": e.token, "position": e.position}


# ─── NOTATION TOOLS ──────────────────────────────────────────────────

@mcp.tool()
def parse_moves(moves: str) -> dict[str, Any]:
    """Validate a move sequence and return it in canonical notation.

    Args:
        moves: Whitespace-separated moves, e.g. "R U2 F'".
    """
    try:
        parsed = parse_notation(moves)
    except ParseError as e:
        return _parse_error(e)
    return {"moves": format_moves(parsed), "count": len(parsed)}


@mcp.tool()
def scramble(num: int = 8, robot_faces: bool = True) -> dict[str, Any]:
    """Generate a random scramble.

    Args:
        num: Number of moves (default 8).
        robot_faces: Only use faces the robot can turn (no U moves).
    """
    faces = ROBOT_FACES if robot_faces else ALL_FACES
    try:
        moves = generate_scramble(num, faces=faces)
    except InvalidCount as e:
        logger.warning("Rejected scramble: %s", e)
        return {"error": str(e)}
    return {
        "moves": format_moves(moves),
        "count": len(moves),
        "estimated_ms": estimate_duration_ms(moves),
    }


# ─── ENCODING TOOLS ──────────────────────────────────────────────────

@mcp.tool()
def encode_moves(moves: str) -> dict[str, Any]:
    """Encode a move sequence into move-characteristic frames.

    Frames are returned as hex strings in send order. The session's move
    counter advances only when encoding succeeds.

    Args:
        moves: Whitespace-separated moves, e.g. "R F2 D'".
    """
    try:
        parsed = parse_notation(moves)
    except ParseError as e:
        return _parse_error(e)

    try:
        frames = _session.encode(parsed)
    except EncodeError as e:
        logger.warning("Rejected moves: %s", e)
        return {"error": str(e)}

    return {
        "frames": [frame.hex() for frame in frames],
        "moves": format_moves(parsed),
        "counter": _session.counter,
        "estimated_ms": estimate_duration_ms(parsed),
    }


@mcp.tool()
def encode_raw(codes: list[int]) -> dict[str, Any]:
    """Encode raw move codes (0-14) into frames, bypassing notation.

    Args:
        codes: Move codes in execution order.
    """
    try:
        frames = _session.encode_raw(codes)
    except EncodeError as e:
        logger.warning("Rejected codes: %s", e)
        return {"error": str(e)}

    return {
        "frames": [frame.hex() for frame in frames],
        "moves": format_moves(decode_move_codes(codes)),
        "counter": _session.counter,
    }


# ─── STATUS TOOLS ────────────────────────────────────────────────────

@mcp.tool()
def decode_status(frame_hex: str) -> dict[str, Any]:
    """Decode a status-characteristic read.

    Args:
        frame_hex: The raw status bytes as hex, e.g. "03".
    """
    try:
        frame = bytes.fromhex(frame_hex)
    except ValueError:
        return {"error": f"Invalid hex: {frame_hex!r}"}

    try:
        event = decode_status_frame(frame)
    except DecodeError as e:
        logger.warning("Rejected status: %s", e)
        return {"error": str(e)}

    if isinstance(event, MovesRemaining):
        return {
            "remaining": event.remaining,
            "idle": event.idle,
            "acknowledged": _session.acknowledged(event),
            "extra": event.extra.hex(),
        }
    return {"raw": event.payload.hex()}


@mcp.tool()
def reset_session() -> dict[str, int]:
    """Reset the move counter, e.g. after reconnecting to the robot."""
    _session.reset()
    return {"counter": _session.counter}


# ─── MCP RESOURCES ───────────────────────────────────────────────────

@mcp.resource("gan://protocol/moves")
def resource_move_codes() -> str:
    """Move notation to wire code table."""
    codes = [{"move": str(move), "code": code} for move, code in MOVE_CODES.items()]
    return json.dumps({
        "codes": codes,
        "frame_size": MOVE_FRAME_SIZE,
        "max_moves_per_frame": MAX_MOVES_PER_FRAME,
    })


@mcp.resource("gan://session/state")
def resource_session_state() -> str:
    """Current move counter."""
    return json.dumps({"counter": _session.counter})


@mcp.resource("gan://config")
def resource_config() -> str:
    """Robot name and characteristic UUIDs."""
    return json.dumps(RobotConfig.from_env().to_dict())


# ─── ENTRY POINT ─────────────────────────────────────────────────────

def main():
    """Run the MCP server with stdio transport."""
    logging.basicConfig(level=logging.INFO)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
