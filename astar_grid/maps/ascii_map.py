"""Build grids from plain-text tile maps and draw paths over them.

Each non-empty line is one row (``y``) and each character one column
(``x``). Any character listed in ``wall_chars`` marks an obstacle tile.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from ..core.errors import InvalidGridError
from ..core.grid import Grid
from ..core.position import Coord

DEFAULT_WALL_CHARS = "#X"


def parse_ascii_map(text: str, wall_chars: str = DEFAULT_WALL_CHARS) -> Grid:
    """Return a :class:`Grid` for the map drawn in ``text``."""

    rows = [line for line in text.splitlines() if line]
    if not rows:
        raise InvalidGridError("map contains no rows")

    width = max(len(row) for row in rows)
    obstacles = {
        (x, y)
        for y, row in enumerate(rows)
        for x, ch in enumerate(row)
        if ch in wall_chars
    }
    return Grid(width, len(rows), obstacles)


def load_ascii_map(path: str | Path, wall_chars: str = DEFAULT_WALL_CHARS) -> Grid:
    """Read ``path`` and parse it with :func:`parse_ascii_map`."""

    return parse_ascii_map(Path(path).read_text(encoding="utf-8"), wall_chars)


def render_ascii(
    grid: Grid,
    path: Optional[Iterable[Coord]] = None,
    path_char: str = "*",
) -> str:
    """Draw ``grid`` with ``#`` walls, ``.`` floor and the optional ``path``."""

    cells = [
        ["#" if (x, y) in grid.obstacles else "." for x in range(grid.width)]
        for y in range(grid.height)
    ]
    steps = [tuple(p) for p in path] if path else []
    for x, y in steps:
        cells[y][x] = path_char
    if steps:
        sx, sy = steps[0]
        gx, gy = steps[-1]
        cells[sy][sx] = "S"
        cells[gy][gx] = "G"
    return "\n".join("".join(row) for row in cells)


__all__ = ["DEFAULT_WALL_CHARS", "parse_ascii_map", "load_ascii_map", "render_ascii"]
