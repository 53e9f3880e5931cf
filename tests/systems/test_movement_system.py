from typing import Tuple

import pytest

from warehouse_robot.actions import Direction
from warehouse_robot.components import Position
from warehouse_robot.state import State
from warehouse_robot.step import step
from warehouse_robot.systems.movement import movement_system
from tests.test_utils import make_state


@pytest.mark.parametrize(
    "start, direction, expected",
    [
        ((4, 4), Direction.N, (4, 5)),
        ((4, 4), Direction.E, (5, 4)),
        ((4, 4), Direction.S, (4, 3)),
        ((4, 4), Direction.W, (3, 4)),
    ],
)
def test_step_moves_and_costs_power(
    start: Tuple[int, int], direction: Direction, expected: Tuple[int, int]
) -> None:
    state = make_state(pos=start)
    state2 = movement_system(state, direction)
    assert state2.position == Position(*expected)
    assert state2.power_used == 1


@pytest.mark.parametrize(
    "start, direction",
    [
        ((0, 0), Direction.S),
        ((0, 0), Direction.W),
        ((9, 9), Direction.N),
        ((9, 9), Direction.E),
        ((0, 5), Direction.W),
        ((5, 9), Direction.N),
    ],
)
def test_step_into_edge_is_free(start: Tuple[int, int], direction: Direction) -> None:
    state = make_state(pos=start, power_used=3)
    state2 = movement_system(state, direction)
    assert state2 is state
    assert state2.position == Position(*start)
    assert state2.power_used == 3


def test_step_along_edge_still_costs_power() -> None:
    state = make_state(pos=(0, 0))
    state2 = movement_system(state, Direction.E)
    assert state2.position == Position(1, 0)
    assert state2.power_used == 1


def test_custom_move_fn_is_clamped() -> None:
    def leap(pos: Position, direction: Direction) -> Position:
        return Position(pos.x + 3, pos.y - 3)

    state = make_state(pos=(8, 1), move_fn=leap)
    state2 = movement_system(state, Direction.E)
    assert state2.position == Position(9, 0)
    assert state2.power_used == 1


def test_movement_does_not_mutate_input() -> None:
    state = make_state(pos=(1, 1))
    movement_system(state, Direction.N)
    assert state.position == Position(1, 1)
    assert state.power_used == 0


def test_step_applies_in_order() -> None:
    state = make_state(pos=(0, 0))
    directions = [Direction.N, Direction.N, Direction.E, Direction.E]
    final: State = step(state, directions)
    assert final.position == Position(2, 2)
    assert final.power_used == 4


def test_step_charges_only_effective_moves() -> None:
    state = make_state(pos=(0, 0))
    final = step(state, [Direction.S, Direction.W, Direction.N, Direction.S, Direction.S])
    assert final.position == Position(0, 0)
    assert final.power_used == 2


def test_step_with_no_directions_returns_same_state() -> None:
    state = make_state(pos=(3, 3))
    assert step(state, []) is state


def test_small_grid() -> None:
    state = make_state(pos=(0, 0), grid_size=1)
    final = step(state, [Direction.N, Direction.E, Direction.S, Direction.W])
    assert final.position == Position(0, 0)
    assert final.power_used == 0
