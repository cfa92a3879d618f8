"""Data models for faces, turns and moves."""

from .move import Face, Turn, Move, ALL_FACES, ALL_MOVES
