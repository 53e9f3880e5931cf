"""Immutable engine ``State`` dataclass.

A :class:`State` is the complete snapshot of one robot at a point in time:
the grid it lives on, where it stands and how much power it has spent. Systems
are pure functions that take a ``State`` and return a new one; the mutable
:class:`warehouse_robot.engine.MovementEngine` facade swaps snapshots only
after an operation has fully succeeded.
"""

from dataclasses import dataclass

from warehouse_robot.components import Position
from warehouse_robot.types import MoveFn


@dataclass(frozen=True)
class State:
    """Immutable robot state.

    Attributes:
        grid_size (int): Length of one edge of the square grid.
        move_fn (MoveFn): Candidate function mapping a position and direction
            to the unclamped next position.
        position (Position): Current grid position.
        power_used (int): Number of effective moves since construction.
    """

    grid_size: int
    move_fn: MoveFn
    position: Position
    power_used: int = 0

    def __repr__(self) -> str:
        return (
            f"State(grid_size={self.grid_size}, position={self.position}, "
            f"power_used={self.power_used})"
        )
