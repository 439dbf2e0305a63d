"""Grid coordinate type."""

from __future__ import annotations

from typing import NamedTuple, Tuple, Union


class GridPosition(NamedTuple):
    """Integer cell coordinate. Bounds are checked by the grid, not here."""

    x: int
    y: int


Coord = Union[GridPosition, Tuple[int, int]]


def as_position(pos: Coord) -> GridPosition:
    """Return ``pos`` as a :class:`GridPosition`."""

    if isinstance(pos, GridPosition):
        return pos
    x, y = pos
    return GridPosition(int(x), int(y))


__all__ = ["GridPosition", "Coord", "as_position"]
