"""Engine exceptions.

Every error is raised before the engine's state changes, so a rejected
operation never leaves a partially applied move behind. Each class also
derives from the builtin a caller would expect (``ValueError`` or
``TypeError``).
"""

from typing import Iterable, Tuple


class EngineError(Exception):
    """Base class for movement engine errors."""


class OutOfBounds(EngineError, ValueError):
    """A coordinate lies outside ``[0, bound]`` on at least one axis."""

    def __init__(self, x: int, y: int, bound: int) -> None:
        self.x = x
        self.y = y
        self.bound = bound
        super().__init__(
            f"Coordinates {(x, y)} out of bounds: must be between 0 and {bound}"
        )


class InvalidArgument(EngineError, TypeError):
    """An argument has the wrong shape (e.g. commands that are not text or a sequence)."""


class InvalidCommand(EngineError, ValueError):
    """One or more command tokens do not resolve to a direction.

    Attributes:
        tokens: Every offending token, in input order.
    """

    def __init__(self, tokens: Iterable[object]) -> None:
        self.tokens: Tuple[object, ...] = tuple(tokens)
        listed = ", ".join(repr(t) for t in self.tokens)
        super().__init__(f"Invalid direction(s): {listed}")
