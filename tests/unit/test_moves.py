from typing import Tuple

import pytest

from warehouse_robot.actions import Direction
from warehouse_robot.components import Position
from warehouse_robot.moves import default_move_fn


@pytest.mark.parametrize(
    "start, direction, expected",
    [
        ((2, 2), Direction.N, (2, 3)),
        ((2, 2), Direction.S, (2, 1)),
        ((2, 2), Direction.E, (3, 2)),
        ((2, 2), Direction.W, (1, 2)),
        # no bounds handling
        ((0, 0), Direction.S, (0, -1)),
        ((9, 9), Direction.E, (10, 9)),
    ],
)
def test_default_move_fn(
    start: Tuple[int, int], direction: Direction, expected: Tuple[int, int]
) -> None:
    assert default_move_fn(Position(*start), direction) == Position(*expected)
