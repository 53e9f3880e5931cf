"""Command sequence reducer.

:func:`step` folds an ordered sequence of validated directions over a
:class:`State` with :func:`warehouse_robot.systems.movement.movement_system`,
one unit step at a time. It is pure: the input state is never modified and a
new snapshot is returned.
"""

from typing import Iterable

from warehouse_robot.actions import Direction
from warehouse_robot.state import State
from warehouse_robot.systems.movement import movement_system


def step(state: State, directions: Iterable[Direction]) -> State:
    """Apply ``directions`` strictly in order.

    Each direction is fully resolved (move, clamp, power) before the next one
    is considered. Validation is the caller's job; see
    :func:`warehouse_robot.commands.normalize_commands`.

    Args:
        state (State): State before the sequence.
        directions (Iterable[Direction]): Steps to apply.

    Returns:
        State: State after the last step. An empty sequence returns ``state``.
    """
    for direction in directions:
        state = movement_system(state, direction)
    return state
