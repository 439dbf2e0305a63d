"""Implementations of development CLI commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional
import logging

from ...config import CLIConfig
from ...core.grid import Grid
from ...core.position import GridPosition
from ...maps.ascii_map import render_ascii
from ...search.pathfinding import Pathfinder, SearchResult
from ..profiling import profile_queries, timed_search
from .command_parser import parse_coord

logger = logging.getLogger(__name__)


@dataclass
class CLISession:
    """Grid and pathfinder shared by every command in one CLI run."""

    grid: Grid
    pathfinder: Pathfinder
    cli: CLIConfig = field(default_factory=CLIConfig)
    pending_start: Optional[GridPosition] = None
    last_path: List[GridPosition] = field(default_factory=list)
    history: List[SearchResult] = field(default_factory=list)


def _coord_from_args(args: List[str]) -> Optional[GridPosition]:
    try:
        x, y = parse_coord(args[0], args[1])
    except (IndexError, ValueError):
        logger.error("Expected two integer coordinates, got: %s", " ".join(args))
        return None
    return GridPosition(x, y)


def show(session: CLISession) -> str:
    text = render_ascii(session.grid, session.last_path, session.cli.path_char)
    print(text)
    return text


def path(session: CLISession, args: List[str]) -> Optional[SearchResult]:
    start = _coord_from_args(args[0:2])
    goal = _coord_from_args(args[2:4])
    if start is None or goal is None:
        return None
    return _run_search(session, start, goal)


def start(session: CLISession, args: List[str]) -> None:
    pos = _coord_from_args(args)
    if pos is None:
        return
    session.pending_start = pos
    session.last_path = []
    logger.info("Start set to %s. Use /goal X Y to search.", tuple(pos))


def goal(session: CLISession, args: List[str]) -> Optional[SearchResult]:
    if session.pending_start is None:
        logger.error("No start set. Use /start X Y first.")
        return None
    pos = _coord_from_args(args)
    if pos is None:
        return None
    begin = session.pending_start
    session.pending_start = None
    return _run_search(session, begin, pos)


def _run_search(session: CLISession, begin: GridPosition, end: GridPosition) -> SearchResult:
    result, _elapsed = timed_search(session.pathfinder, begin, end)
    session.history.append(result)
    if result.ok:
        session.last_path = result.path
        logger.info("Path cost %.5f, %s nodes expanded", result.cost, result.expanded)
        show(session)
    else:
        session.last_path = []
        logger.info("No path from %s to %s (%s)", tuple(begin), tuple(end), result.status.value)
    return result


def profile(session: CLISession, passes_str: str | None = None) -> None:
    try:
        passes = int(passes_str) if passes_str else 100
        if passes <= 0:
            logger.info("Number of passes must be positive.")
            return
    except ValueError:
        logger.error("Invalid number of passes: %s", passes_str)
        return
    queries = [(r.start, r.goal) for r in session.history]
    if not queries:
        logger.info("Nothing to profile yet. Run /path first.")
        return
    out_path = Path(session.cli.profile_output)
    profile_queries(passes, session.pathfinder, queries, out_path)


def help_command(state: Dict[str, Any]) -> None:
    help_lines = [
        "\nAvailable commands:",
        "  /help                - Show this help message.",
        "  /path <sx> <sy> <gx> <gy> - Search from start to goal.",
        "  /start <x> <y>       - Pick a start cell.",
        "  /goal <x> <y>        - Search from the picked start to this cell.",
        "  /show                - Print the map with the last path.",
        "  /profile [passes]    - Profile every query run so far. Default: 100",
        "  /quit                - Exit.\n",
    ]
    for line in help_lines:
        logger.info(line)


def execute(command: str, args: list[str], session: CLISession, state: Dict[str, Any]) -> Any:
    if "running" not in state:
        state["running"] = True
    cmd_lower = command.lower()

    return_value: Any = None

    if cmd_lower == "path":
        return_value = path(session, args)
    elif cmd_lower == "start":
        start(session, args)
    elif cmd_lower == "goal":
        return_value = goal(session, args)
    elif cmd_lower == "show":
        return_value = show(session)
    elif cmd_lower == "profile":
        profile(session, args[0] if args else None)
    elif cmd_lower == "help":
        help_command(state)
    elif cmd_lower == "quit":
        state["running"] = False
        logger.info("Quit command received.")
    else:
        logger.error("Unknown command: /%s. Type /help for available commands.", command)

    return return_value


__all__ = [
    "CLISession", "show", "path", "start", "goal", "profile", "help_command", "execute",
]
