"""Exception types raised by the protocol layer.

Every error derives from ``ValueError`` so callers that only care about
"bad input" can catch that, while callers that need the details get the
offending token, count or frame on the exception.
"""

from __future__ import annotations


class ProtocolError(ValueError):
    """Base class for move protocol errors."""


class ParseError(ProtocolError):
    """A move token could not be parsed."""

    def __init__(self, token: str, position: int, reason: str) -> None:
        self.token = token
        self.position = position
        self.reason = reason
        super().__init__(f"Invalid move {token!r} at position {position}: {reason}")


class InvalidCount(ProtocolError):
    """A negative scramble length was requested."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"Move count must be >= 0, got {count}")


class EncodeError(ProtocolError):
    """A move or raw code cannot be put on the wire."""


class DecodeError(ProtocolError):
    """A status frame from the robot is malformed."""

    def __init__(self, frame: bytes, reason: str) -> None:
        self.frame = bytes(frame)
        self.reason = reason
        shown = self.frame.hex(" ") if self.frame else "(empty)"
        super().__init__(f"Cannot decode status frame {shown}: {reason}")
