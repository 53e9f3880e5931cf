"""warehouse_robot.components
=============================

Aggregate import surface for the component dataclasses used by the engine,
e.g.::

    from warehouse_robot.components import Position

Components are plain frozen ``@dataclass`` value objects manipulated by the
systems in :mod:`warehouse_robot.systems`.
"""

from .position import Position

__all__ = [
    "Position",
]
