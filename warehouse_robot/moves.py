"""Built-in movement candidate function.

A *move function* maps ``(position, direction)`` to the position the robot
would reach with a single unit step. It does not know about the grid: clamping
and power accounting happen in :mod:`warehouse_robot.systems.movement`.

Contract (``MoveFn``):

* Must return exactly one ``Position``.
* Must not depend on anything but its arguments.
"""

from warehouse_robot.actions import DIRECTION_DELTA, Direction
from warehouse_robot.components import Position


def default_move_fn(position: Position, direction: Direction) -> Position:
    """Single-tile cardinal step without bounds handling."""
    dx, dy = DIRECTION_DELTA[direction]
    return Position(position.x + dx, position.y + dy)
