"""Exception types raised by astar_grid."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..search.pathfinding import PathStatus


class AstarGridError(Exception):
    """Base class for all package errors."""


class InvalidGridError(AstarGridError, ValueError):
    """Grid dimensions or obstacle set violate construction preconditions."""


class ConfigError(AstarGridError, ValueError):
    """Configuration values are out of range."""


class NoPathError(AstarGridError):
    """Raised by :meth:`SearchResult.unwrap` when no path was found."""

    def __init__(self, status: "PathStatus", start: Any, goal: Any) -> None:
        super().__init__(f"no path from {start} to {goal}: {status.value}")
        self.status = status
        self.start = start
        self.goal = goal


__all__ = ["AstarGridError", "InvalidGridError", "ConfigError", "NoPathError"]
