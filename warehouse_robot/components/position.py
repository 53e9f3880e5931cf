"""Position component.

Immutable integer grid coordinates of the robot. Held by
:class:`warehouse_robot.state.State`; every move produces a new instance.
"""

from dataclasses import dataclass

from warehouse_robot.types import Coordinate


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at the west edge).
        y: Row index (0 at the south edge).
    """

    x: int
    y: int

    def as_tuple(self) -> Coordinate:
        return (self.x, self.y)
