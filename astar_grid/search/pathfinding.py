"""A* search over a :class:`~astar_grid.core.grid.PathfindingGrid`."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ..core.errors import NoPathError
from ..core.grid import PathfindingGrid
from ..core.position import Coord, GridPosition, as_position
from ..core.priority_queue import PriorityQueue

logger = logging.getLogger(__name__)

STRAIGHT_COST = 1.0
# Fixed literal shared by move cost and heuristic.
DIAGONAL_COST = 1.41421


def check_costs(
    straight_cost: float,
    diagonal_cost: float,
    max_expansions: Optional[int] = None,
) -> None:
    """Raise ``ValueError`` unless the costs keep octile distance admissible."""

    if not straight_cost > 0:
        raise ValueError(f"straight_cost must be positive, got {straight_cost!r}")
    if not straight_cost < diagonal_cost < 2 * straight_cost:
        raise ValueError(
            "diagonal_cost must lie strictly between straight_cost and "
            f"2 * straight_cost, got {diagonal_cost!r}"
        )
    if max_expansions is not None and max_expansions <= 0:
        raise ValueError(f"max_expansions must be positive, got {max_expansions!r}")


def octile_distance(
    a: Coord,
    b: Coord,
    straight_cost: float = STRAIGHT_COST,
    diagonal_cost: float = DIAGONAL_COST,
) -> float:
    """Return the octile distance between ``a`` and ``b``.

    Exact cost of the cheapest obstacle-free 8-way route, so it never
    overestimates on a grid with obstacles.
    """

    dx = abs(a[0] - b[0])
    dy = abs(a[1] - b[1])
    return straight_cost * (dx + dy) + (diagonal_cost - 2 * straight_cost) * min(dx, dy)


def _is_diagonal(a: GridPosition, b: GridPosition) -> bool:
    return abs(a.x - b.x) == 1 and abs(a.y - b.y) == 1


class PathStatus(str, Enum):
    """Outcome of a single search."""

    FOUND = "found"
    INVALID_START = "invalid_start"
    INVALID_GOAL = "invalid_goal"
    UNREACHABLE = "unreachable"
    BUDGET_EXHAUSTED = "budget_exhausted"


@dataclass(slots=True, order=True)
class SearchNode:
    """Frontier entry; compared on ``priority`` only."""

    priority: float
    position: GridPosition = field(compare=False)


@dataclass(slots=True)
class SearchResult:
    """Detailed outcome of :meth:`Pathfinder.search`."""

    status: PathStatus
    start: GridPosition
    goal: GridPosition
    path: List[GridPosition] = field(default_factory=list)
    cost: float = math.inf
    expanded: int = 0

    @property
    def ok(self) -> bool:
        return self.status is PathStatus.FOUND

    def unwrap(self) -> List[GridPosition]:
        """Return the path or raise :class:`NoPathError`."""
        if not self.ok:
            raise NoPathError(self.status, self.start, self.goal)
        return self.path


class Pathfinder:
    """A* search with 8-way movement bound to one grid.

    The instance holds only configuration. All working state lives inside
    each :meth:`search` call, so one pathfinder can serve many threads.
    """

    def __init__(
        self,
        grid: PathfindingGrid,
        straight_cost: float = STRAIGHT_COST,
        diagonal_cost: float = DIAGONAL_COST,
        max_expansions: Optional[int] = None,
    ) -> None:
        check_costs(straight_cost, diagonal_cost, max_expansions)
        self.grid = grid
        self.straight_cost = straight_cost
        self.diagonal_cost = diagonal_cost
        self.max_expansions = max_expansions

    @classmethod
    def from_config(cls, grid: PathfindingGrid, cfg: Any) -> "Pathfinder":
        """Build a pathfinder from a :class:`~astar_grid.config.SearchConfig`."""
        return cls(
            grid,
            straight_cost=cfg.straight_cost,
            diagonal_cost=cfg.diagonal_cost,
            max_expansions=cfg.max_expansions,
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def find_path(self, start: Coord, goal: Coord) -> Optional[List[GridPosition]]:
        """Return the path from ``start`` to ``goal`` inclusive, or ``None``.

        Unwalkable endpoints and unreachable goals both give ``None``. Use
        :meth:`search` to tell them apart.
        """
        result = self.search(start, goal)
        return result.path if result.ok else None

    def search(self, start: Coord, goal: Coord) -> SearchResult:
        """Run A* and report how the search ended."""
        start = as_position(start)
        goal = as_position(goal)
        grid = self.grid

        if not grid.is_walkable(start):
            logger.debug("[A*] Start %s is not walkable", start)
            return SearchResult(PathStatus.INVALID_START, start, goal)
        if not grid.is_walkable(goal):
            logger.debug("[A*] Goal %s is not walkable", goal)
            return SearchResult(PathStatus.INVALID_GOAL, start, goal)

        logger.debug("[A*] Searching %s -> %s", start, goal)

        width = grid.width
        size = width * grid.height
        closed = [False] * size
        g_scores = [math.inf] * size
        came_from: Dict[GridPosition, GridPosition] = {}
        open_set: PriorityQueue[SearchNode] = PriorityQueue()

        g_scores[start.x + start.y * width] = 0.0
        open_set.enqueue(SearchNode(0.0, start))
        expanded = 0
        budget = self.max_expansions

        while not open_set.is_empty:
            current = open_set.dequeue().position
            current_index = current.x + current.y * width
            if closed[current_index]:
                continue
            if budget is not None and expanded >= budget:
                logger.debug("[A*] Gave up after %s expansions", expanded)
                return SearchResult(PathStatus.BUDGET_EXHAUSTED, start, goal, expanded=expanded)
            closed[current_index] = True
            expanded += 1

            if current == goal:
                path = self._reconstruct_path(came_from, current)
                cost = g_scores[current_index]
                logger.debug(
                    "[A*] Path found: length=%s cost=%.5f expanded=%s",
                    len(path),
                    cost,
                    expanded,
                )
                return SearchResult(PathStatus.FOUND, start, goal, path, cost, expanded)

            current_g = g_scores[current_index]
            for neighbor in grid.neighbors(current):
                neighbor_index = neighbor.x + neighbor.y * width
                move_cost = (
                    self.diagonal_cost if _is_diagonal(current, neighbor) else self.straight_cost
                )
                tentative_g = current_g + move_cost
                if tentative_g < g_scores[neighbor_index]:
                    came_from[neighbor] = current
                    g_scores[neighbor_index] = tentative_g
                    priority = tentative_g + self.heuristic(neighbor, goal)
                    open_set.enqueue(SearchNode(priority, neighbor))

        logger.debug("[A*] No path %s -> %s, expanded=%s", start, goal, expanded)
        return SearchResult(PathStatus.UNREACHABLE, start, goal, expanded=expanded)

    def heuristic(self, a: Coord, b: Coord) -> float:
        return octile_distance(a, b, self.straight_cost, self.diagonal_cost)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _reconstruct_path(
        came_from: Dict[GridPosition, GridPosition], current: GridPosition
    ) -> List[GridPosition]:
        path = [current]
        while current in came_from:
            current = came_from[current]
            path.append(current)
        path.reverse()
        return path


def a_star(grid: PathfindingGrid, start: Coord, goal: Coord) -> Optional[List[GridPosition]]:
    """Return the shortest path on ``grid`` using default costs."""

    return Pathfinder(grid).find_path(start, goal)


__all__ = [
    "STRAIGHT_COST",
    "DIAGONAL_COST",
    "check_costs",
    "octile_distance",
    "PathStatus",
    "SearchNode",
    "SearchResult",
    "Pathfinder",
    "a_star",
]
