"""Engine configuration.

The reference warehouse is a 10x10 square. The extent is a construction-time
option only; it is never read from files or the environment.
"""

from dataclasses import dataclass

DEFAULT_GRID_SIZE = 10


@dataclass(frozen=True)
class EngineConfig:
    """Movement engine settings.

    Attributes:
        grid_size: Length of one edge of the square grid. Valid coordinates on
            both axes lie in ``[0, grid_size - 1]``.
    """

    grid_size: int = DEFAULT_GRID_SIZE

    def __post_init__(self) -> None:
        if isinstance(self.grid_size, bool) or not isinstance(self.grid_size, int):
            raise ValueError(f"grid_size must be an integer, got {self.grid_size!r}")
        if self.grid_size < 1:
            raise ValueError(f"grid_size must be at least 1, got {self.grid_size}")

    @property
    def bound(self) -> int:
        """Largest valid coordinate on either axis."""
        return self.grid_size - 1
