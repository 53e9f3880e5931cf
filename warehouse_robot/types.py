"""Common type aliases.

``MoveFn`` is the extension point used by :mod:`warehouse_robot.step` to turn
a direction into an (unclamped) candidate position.
"""

from typing import Callable, Sequence, Tuple, TYPE_CHECKING, Union

from warehouse_robot.actions import Direction

if TYPE_CHECKING:
    from warehouse_robot.components import Position

Coordinate = Tuple[int, int]

TokenLike = Union[str, Direction]
"""A single command token: a short code such as ``"N"`` or a ``Direction``."""

CommandInput = Union[str, Sequence[TokenLike]]
"""Comma-delimited text (``"N,E,S"``) or an ordered sequence of tokens."""

MoveFn = Callable[["Position", Direction], "Position"]
