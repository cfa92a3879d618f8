"""Random scramble generation."""

from __future__ import annotations

import random
from collections.abc import Sequence

from ..models.move import ALL_FACES, Face, Move, Turn
from .errors import InvalidCount

TURNS: tuple[Turn, ...] = tuple(Turn)


def generate_scramble(
    count: int,
    rng=None,
    faces: Sequence[Face] = ALL_FACES,
) -> list[Move]:
    """Generate ``count`` random moves with no face turned twice in a row.

    The first face is drawn uniformly from ``faces``; every later face is
    drawn uniformly from ``faces`` minus the previous one. The turn is
    drawn uniformly from the three turns.

    Args:
        count: Number of moves to generate.
        rng: Object with a ``choice`` method (e.g. ``random.Random``).
            Untouched when ``count`` is 0.
        faces: Faces to draw from, e.g. ``ROBOT_FACES`` to keep the
            scramble within what the robot can turn.

    Raises:
        InvalidCount: If ``count`` is negative.
        ValueError: If ``faces`` is too small to avoid repeats.
    """
    if count < 0:
        raise InvalidCount(count)
    if count == 0:
        return []

    faces = tuple(dict.fromkeys(faces))
    if not faces or (count > 1 and len(faces) < 2):
        raise ValueError(
            f"Need at least 2 distinct faces for a {count}-move scramble, "
            f"got {len(faces)}"
        )

    if rng is None:
        rng = random.Random()

    moves: list[Move] = []
    previous: Face | None = None
    for _ in range(count):
        eligible = [face for face in faces if face is not previous]
        face = rng.choice(eligible)
        moves.append(Move(face, rng.choice(TURNS)))
        previous = face
    return moves
