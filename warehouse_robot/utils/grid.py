"""Grid bounds helpers.

Pure predicates and transforms over coordinates on a square grid of edge
``grid_size``. Valid coordinates lie in ``[0, grid_size - 1]`` on both axes.
"""

from warehouse_robot.components import Position
from warehouse_robot.errors import InvalidArgument, OutOfBounds


def is_in_bounds(grid_size: int, x: int, y: int) -> bool:
    """Return True if ``(x, y)`` lies on the grid."""
    bound = grid_size - 1
    return 0 <= x <= bound and 0 <= y <= bound


def clamp_position(grid_size: int, pos: Position) -> Position:
    """Clamp each axis of ``pos`` independently onto the grid."""
    bound = grid_size - 1
    return Position(max(0, min(bound, pos.x)), max(0, min(bound, pos.y)))


def validate_coordinates(grid_size: int, x: int, y: int) -> Position:
    """Return ``Position(x, y)`` or raise if it is not a valid grid cell.

    Raises:
        InvalidArgument: If either coordinate is not an integer (``bool`` is
            rejected as well).
        OutOfBounds: If either coordinate lies outside ``[0, grid_size - 1]``.
    """
    for value in (x, y):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgument(f"Coordinates must be integers, got {value!r}")
    if not is_in_bounds(grid_size, x, y):
        raise OutOfBounds(x, y, grid_size - 1)
    return Position(x, y)
