"""Robot movement system.

Applies a single direction to a :class:`State`:

1. The state's ``move_fn`` produces the unclamped candidate position.
2. The candidate is clamped independently per axis onto the grid.
3. Power is charged only if the clamped position differs from the current
    one. A step into the edge that leaves the robot where it stands is free.

Returns the original ``State`` object when the step has no net effect.
"""

from dataclasses import replace

from warehouse_robot.actions import Direction
from warehouse_robot.state import State
from warehouse_robot.utils.grid import clamp_position


def movement_system(state: State, direction: Direction) -> State:
    """Move the robot one tile in ``direction``, clamped to the grid.

    Args:
        state (State): Current state.
        direction (Direction): Validated direction of the step.

    Returns:
        State: Same state if the step is absorbed by the edge, otherwise a new
            state with the updated position and ``power_used`` incremented.
    """
    candidate = state.move_fn(state.position, direction)
    next_pos = clamp_position(state.grid_size, candidate)

    if next_pos == state.position:
        return state  # clamped in place: no movement, no power

    return replace(state, position=next_pos, power_used=state.power_used + 1)
