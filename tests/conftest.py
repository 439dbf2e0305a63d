# tests/conftest.py
from __future__ import annotations

from typing import Callable, Iterable, Tuple

import pytest

from astar_grid.core.grid import Grid
from astar_grid.maps.ascii_map import parse_ascii_map


WALLED_MAP = """
.......
...#...
...#...
...#...
.......
"""

SPLIT_MAP = """
..#..
..#..
..#..
..#..
..#..
"""


@pytest.fixture
def make_grid() -> Callable[..., Grid]:
    def _make(width: int, height: int, obstacles: Iterable[Tuple[int, int]] = ()) -> Grid:
        return Grid(width, height, set(obstacles))

    return _make


@pytest.fixture
def walled_grid() -> Grid:
    return parse_ascii_map(WALLED_MAP)


@pytest.fixture
def split_grid() -> Grid:
    """Grid cut in two by a full-height wall at ``x == 2``."""
    return parse_ascii_map(SPLIT_MAP)
