"""Movement engine facade.

:class:`MovementEngine` is the public entry point for driving one robot. It
owns a single immutable :class:`~warehouse_robot.state.State` snapshot and
replaces it only after an operation has been fully validated and applied, so
a rejected call (``OutOfBounds``, ``InvalidArgument``, ``InvalidCommand``)
leaves ``position`` and ``power_used`` exactly as they were.

Typical use::

    engine = MovementEngine()
    engine.parse_commands("N,N,E,E")
    engine.move_to(5, 7)
    engine.position, engine.power_used
"""

import logging
from typing import Optional

from pyrsistent import pvector
from pyrsistent.typing import PVector

from warehouse_robot.actions import Direction
from warehouse_robot.commands import normalize_commands
from warehouse_robot.config import EngineConfig
from warehouse_robot.errors import EngineError
from warehouse_robot.moves import default_move_fn
from warehouse_robot.state import State
from warehouse_robot.step import step
from warehouse_robot.types import CommandInput, Coordinate
from warehouse_robot.utils.grid import validate_coordinates
from warehouse_robot.utils.line import line_to_directions

logger = logging.getLogger(__name__)


class MovementEngine:
    """A single robot on a square grid.

    Args:
        x: Starting column, defaults to the south-west corner.
        y: Starting row, defaults to the south-west corner.
        config: Grid settings; defaults to the 10x10 warehouse.

    Raises:
        OutOfBounds: If the start position is off the grid.
        InvalidArgument: If a coordinate is not an integer.
    """

    def __init__(
        self, x: int = 0, y: int = 0, config: Optional[EngineConfig] = None
    ) -> None:
        grid_size = (config or EngineConfig()).grid_size
        position = validate_coordinates(grid_size, x, y)
        self._state = State(
            grid_size=grid_size,
            move_fn=default_move_fn,
            position=position,
        )

    # ------------------------------------------------------------------
    # Queries

    @property
    def state(self) -> State:
        """Current immutable snapshot."""
        return self._state

    @property
    def x(self) -> int:
        return self._state.position.x

    @property
    def y(self) -> int:
        return self._state.position.y

    @property
    def position(self) -> Coordinate:
        return self._state.position.as_tuple()

    @property
    def power_used(self) -> int:
        return self._state.power_used

    # ------------------------------------------------------------------
    # Commands

    def parse_commands(self, commands: CommandInput) -> None:
        """Validate then execute a command sequence.

        Args:
            commands: Comma-delimited text such as ``"N,E,S,W"`` or a sequence
                of tokens (``["N", "E"]`` or ``[Direction.N, Direction.E]``).

        Raises:
            InvalidArgument: If ``commands`` is neither text nor a sequence.
            InvalidCommand: If any token is not one of N, E, S, W.
        """
        try:
            directions = normalize_commands(commands)
        except EngineError as exc:
            logger.warning("Rejected commands %r: %s", commands, exc)
            raise
        self._execute(directions)

    def plan_route(self, x: int, y: int) -> PVector[Direction]:
        """Return the steps :meth:`move_to` would take, without moving.

        Raises:
            OutOfBounds: If the target is off the grid.
            InvalidArgument: If a coordinate is not an integer.
        """
        try:
            goal = validate_coordinates(self._state.grid_size, x, y)
        except EngineError as exc:
            logger.warning("Rejected target %r: %s", (x, y), exc)
            raise
        return pvector(line_to_directions(self._state.position, goal))

    def move_to(self, x: int, y: int) -> None:
        """Walk an approximately straight line to ``(x, y)``.

        The segment is rasterized into unit steps which are executed exactly
        like :meth:`parse_commands` input. Moving to the current position is a
        no-op.

        Raises:
            OutOfBounds: If the target is off the grid.
            InvalidArgument: If a coordinate is not an integer.
        """
        directions = self.plan_route(x, y)
        logger.debug(
            "Route %s -> %s: %s",
            self.position,
            (x, y),
            "".join(directions) or "(empty)",
        )
        self._execute(directions)

    # ------------------------------------------------------------------
    def _execute(self, directions: PVector[Direction]) -> None:
        before = self._state
        self._state = step(before, directions)
        logger.debug(
            "Executed %d step(s): %s -> %s, power %d -> %d",
            len(directions),
            before.position.as_tuple(),
            self._state.position.as_tuple(),
            before.power_used,
            self._state.power_used,
        )

    def __repr__(self) -> str:
        return (
            f"MovementEngine(position={self.position}, "
            f"power_used={self.power_used}, grid_size={self._state.grid_size})"
        )
