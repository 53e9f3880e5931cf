"""Line rasterization into unit-step directions.

Converts the straight segment between two grid cells into the sequence of
cardinal steps that walks it, using integer-only Bresenham-style error
accumulation. Every emitted step changes exactly one axis, so a path from
``start`` to ``goal`` always has ``|dx| + |dy|`` steps.

The rasterizer knows nothing about the grid edge; callers validate both
endpoints beforehand.
"""

from typing import List

from warehouse_robot.actions import Direction, direction_for
from warehouse_robot.components import Position


def sign(value: int) -> int:
    """Return -1, 0 or 1 according to the sign of ``value``."""
    return (value > 0) - (value < 0)


def line_to_directions(start: Position, goal: Position) -> List[Direction]:
    """Rasterize the segment ``start -> goal`` into unit steps.

    The axis with the larger magnitude drives the loop; the minor axis is
    stepped whenever the accumulated error drops below zero, and never past
    its target. Ties are driven by the ``y`` axis.

    Args:
        start (Position): Starting cell.
        goal (Position): Target cell.

    Returns:
        List[Direction]: Steps in walking order; empty if ``start == goal``.
    """
    x0, y0 = start.x, start.y
    x1, y1 = goal.x, goal.y

    sx = sign(x1 - x0)
    sy = sign(y1 - y0)
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)

    directions: List[Direction] = []

    if dx > dy:
        err = dx // 2
        while x0 != x1:
            x0 += sx
            directions.append(direction_for(sx, "x"))
            err -= dy
            if err < 0 and y0 != y1:
                y0 += sy
                directions.append(direction_for(sy, "y"))
                err += dx
    else:
        err = dy // 2
        while y0 != y1:
            y0 += sy
            directions.append(direction_for(sy, "y"))
            err -= dx
            if err < 0 and x0 != x1:
                x0 += sx
                directions.append(direction_for(sx, "x"))
                err += dy

    return directions
