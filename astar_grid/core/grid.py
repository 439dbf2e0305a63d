"""Static obstacle grid with a precomputed neighbour cache."""

from __future__ import annotations

import logging
from typing import Dict, FrozenSet, Iterable, Protocol, Tuple, runtime_checkable

from .errors import InvalidGridError
from .position import Coord, GridPosition, as_position

logger = logging.getLogger(__name__)

# 8-way offsets, x-major so neighbour order is stable across runs.
_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if dx != 0 or dy != 0
)


@runtime_checkable
class PathfindingGrid(Protocol):
    """Anything the A* search can walk over."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def is_valid(self, pos: Coord) -> bool: ...

    def is_walkable(self, pos: Coord) -> bool: ...

    def neighbors(self, pos: Coord) -> Tuple[GridPosition, ...]: ...


class Grid:
    """Rectangular grid whose obstacle layout is fixed at construction.

    Every walkable cell gets its list of reachable neighbours computed up
    front. Diagonal steps are only recorded when both orthogonal cells that
    flank the step are free, so a path can never squeeze between two blocked
    corners. A different obstacle layout needs a new :class:`Grid`.
    """

    __slots__ = ("_width", "_height", "_obstacles", "_neighbor_cache")

    def __init__(self, width: int, height: int, obstacles: Iterable[Coord] = ()) -> None:
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise InvalidGridError(f"{name} must be a positive integer, got {value!r}")
        self._width = width
        self._height = height

        obstacles = list(obstacles)
        for p in obstacles:
            if not all(isinstance(v, int) and not isinstance(v, bool) for v in p):
                raise InvalidGridError(f"obstacle coordinates must be integers, got {p!r}")
        blocked = frozenset(as_position(p) for p in obstacles)
        outside = [p for p in blocked if not (0 <= p.x < width and 0 <= p.y < height)]
        if outside:
            raise InvalidGridError(
                f"obstacles outside {width}x{height} grid: {sorted(outside)[:5]}"
            )
        self._obstacles: FrozenSet[GridPosition] = blocked
        self._neighbor_cache: Dict[GridPosition, Tuple[GridPosition, ...]] = (
            self._precompute_neighbors(width, height, blocked)
        )
        logger.debug(
            "[Grid] Built %sx%s grid: %s obstacles, %s walkable cells cached",
            width,
            height,
            len(blocked),
            len(self._neighbor_cache),
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _precompute_neighbors(
        width: int, height: int, obstacles: FrozenSet[GridPosition]
    ) -> Dict[GridPosition, Tuple[GridPosition, ...]]:
        cache: Dict[GridPosition, Tuple[GridPosition, ...]] = {}
        for x in range(width):
            for y in range(height):
                pos = GridPosition(x, y)
                if pos in obstacles:
                    continue
                found = []
                for dx, dy in _OFFSETS:
                    nx, ny = x + dx, y + dy
                    if not (0 <= nx < width and 0 <= ny < height):
                        continue
                    if (nx, ny) in obstacles:
                        continue
                    # no corner cutting: both flanking cells must be open
                    if dx != 0 and dy != 0 and (
                        (nx, y) in obstacles or (x, ny) in obstacles
                    ):
                        continue
                    found.append(GridPosition(nx, ny))
                cache[pos] = tuple(found)
        return cache

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def obstacles(self) -> FrozenSet[GridPosition]:
        return self._obstacles

    def is_valid(self, pos: Coord) -> bool:
        """Return ``True`` if ``pos`` lies inside the grid rectangle."""
        x, y = pos
        return 0 <= x < self._width and 0 <= y < self._height

    def is_walkable(self, pos: Coord) -> bool:
        """Return ``True`` if ``pos`` is in bounds and not an obstacle."""
        return self.is_valid(pos) and pos not in self._obstacles

    def neighbors(self, pos: Coord) -> Tuple[GridPosition, ...]:
        """Return the cached neighbours of ``pos`` (empty for blocked cells)."""
        return self._neighbor_cache.get(pos, ())

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height}, obstacles={len(self._obstacles)})"


__all__ = ["PathfindingGrid", "Grid"]
