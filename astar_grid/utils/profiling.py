"""Timing and cProfile helpers for path queries."""

from __future__ import annotations

import cProfile
import logging
import pstats
import time
from pathlib import Path
from typing import Iterable, Tuple

from ..core.position import Coord
from ..search.pathfinding import Pathfinder, SearchResult

logger = logging.getLogger(__name__)


def timed_search(
    pathfinder: Pathfinder,
    start: Coord,
    goal: Coord,
    label: str = "A*",
) -> Tuple[SearchResult, float]:
    """Run one search and return ``(result, elapsed_ms)``."""

    began = time.perf_counter()
    result = pathfinder.search(start, goal)
    elapsed_ms = (time.perf_counter() - began) * 1000.0
    logger.info("%s: %.3f ms, %d steps", label, elapsed_ms, len(result.path))
    return result, elapsed_ms


def profile_queries(
    n: int,
    pathfinder: Pathfinder,
    queries: Iterable[Tuple[Coord, Coord]],
    out_path: str | Path = "profile.prof",
) -> pstats.Stats:
    """Profile ``n`` passes over ``queries`` and dump stats to ``out_path``.

    Parameters
    ----------
    n:
        Number of passes over the query list.
    pathfinder:
        Pathfinder whose :meth:`~Pathfinder.search` is profiled.
    queries:
        ``(start, goal)`` pairs.
    out_path:
        File to write cProfile data to.

    Returns
    -------
    pstats.Stats
        Profiling statistics for the execution.
    """

    if n <= 0:
        raise ValueError("n must be positive")
    pairs = list(queries)
    path = Path(out_path)
    profiler = cProfile.Profile()
    profiler.enable()
    for _ in range(n):
        for start, goal in pairs:
            pathfinder.search(start, goal)
    profiler.disable()
    profiler.dump_stats(str(path))
    logger.info("Profiled %s queries x %s passes, stats saved to %s", len(pairs), n, path)
    return pstats.Stats(profiler)


__all__ = ["timed_search", "profile_queries"]
