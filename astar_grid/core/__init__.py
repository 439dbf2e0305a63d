"""core package."""

from .errors import AstarGridError, ConfigError, InvalidGridError, NoPathError
from .grid import Grid, PathfindingGrid
from .position import GridPosition
from .priority_queue import PriorityQueue

__all__ = [
    "AstarGridError",
    "ConfigError",
    "InvalidGridError",
    "NoPathError",
    "Grid",
    "PathfindingGrid",
    "GridPosition",
    "PriorityQueue",
]
