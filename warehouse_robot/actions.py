"""Direction enumeration.

Defines the string :class:`Direction` enum used for every movement command and
the canonical unit delta of each member. ``MOVE_DIRECTIONS`` is the ordered
list of all directions; checks like ``if token in MOVE_DIRECTIONS`` are
preferred over comparing member names.

Grid convention: ``x`` grows to the east and ``y`` grows to the north, so the
origin ``(0, 0)`` is the south-west corner.
"""

from enum import StrEnum
from typing import Dict, Optional, Tuple


class Direction(StrEnum):
    """Compass direction of a single unit step.

    Members carry their short code as value, so ``Direction("N")`` and
    ``Direction.N == "N"`` both hold. Lookup is case-sensitive.
    """

    N = "N"
    E = "E"
    S = "S"
    W = "W"


MOVE_DIRECTIONS = [Direction.N, Direction.E, Direction.S, Direction.W]

DIRECTION_DELTA: Dict[Direction, Tuple[int, int]] = {
    Direction.N: (0, 1),
    Direction.E: (1, 0),
    Direction.S: (0, -1),
    Direction.W: (-1, 0),
}


def direction_for(step: int, axis: str) -> Direction:
    """Return the direction of a signed ``step`` along ``axis`` ("x" or "y")."""
    if axis == "x":
        return Direction.E if step > 0 else Direction.W
    if axis == "y":
        return Direction.N if step > 0 else Direction.S
    raise ValueError(f"Unknown axis: {axis!r}")


def lookup_direction(token: object) -> Optional[Direction]:
    """Resolve a command token to a :class:`Direction`, or ``None`` if invalid.

    Accepts ``Direction`` members and their exact short codes. Anything else
    (lower case, padded strings, non-strings) does not resolve.
    """
    if isinstance(token, Direction):
        return token
    if not isinstance(token, str):
        return None
    try:
        return Direction(token)
    except ValueError:
        return None
