from pathlib import Path

import pytest

from astar_grid.core.errors import InvalidGridError
from astar_grid.maps.ascii_map import load_ascii_map, parse_ascii_map, render_ascii
from astar_grid.search.pathfinding import Pathfinder


def test_parse_marks_wall_tiles_as_obstacles():
    grid = parse_ascii_map("....\n.##.\n....\n")
    assert (grid.width, grid.height) == (4, 3)
    assert grid.obstacles == {(1, 1), (2, 1)}


def test_parse_custom_wall_chars():
    grid = parse_ascii_map("@.\n.@", wall_chars="@")
    assert grid.obstacles == {(0, 0), (1, 1)}


def test_parse_pads_short_rows_and_skips_blank_lines():
    grid = parse_ascii_map("\n#....\n..\n\n...#\n")
    assert (grid.width, grid.height) == (5, 3)
    assert grid.obstacles == {(0, 0), (3, 2)}
    assert grid.is_walkable((4, 1))


def test_space_only_row_is_kept_as_floor():
    grid = parse_ascii_map("#  \n   \n  #\n")
    assert (grid.width, grid.height) == (3, 3)
    assert grid.obstacles == {(0, 0), (2, 2)}
    assert all(grid.is_walkable((x, 1)) for x in range(3))


def test_parse_empty_map_rejected():
    with pytest.raises(InvalidGridError):
        parse_ascii_map("\n\n")


def test_load_from_file(tmp_path: Path):
    path = tmp_path / "level.txt"
    path.write_text("..X\n...\n", encoding="utf-8")
    grid = load_ascii_map(path)
    assert grid.obstacles == {(2, 0)}


def test_render_without_path():
    grid = parse_ascii_map("..X\n...")
    assert render_ascii(grid) == "..#\n..."


def test_render_with_path(walled_grid):
    path = Pathfinder(walled_grid).find_path((0, 2), (6, 2))
    text = render_ascii(walled_grid, path)
    rows = text.splitlines()
    assert len(rows) == walled_grid.height
    assert rows[2][0] == "S"
    assert rows[2][6] == "G"
    assert text.count("*") == len(path) - 2
    assert text.count("#") == 3
