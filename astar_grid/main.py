"""Command line entry point: load a tile map and query paths on it."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

from .config import CONFIG, Config, LoggingConfig, load_config
from .core.errors import AstarGridError
from .core.position import GridPosition
from .maps.ascii_map import load_ascii_map
from .search.pathfinding import Pathfinder
from .utils.cli.command_parser import parse_command
from .utils.cli.commands import CLISession, execute

logger = logging.getLogger(__name__)


def configure_logging(log_cfg: LoggingConfig) -> None:
    """Apply the root level and any per-module levels from ``log_cfg``."""

    numeric_level = getattr(logging, log_cfg.global_level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )
    for module_name, level_str in log_cfg.module_levels.items():
        module_numeric_level = getattr(logging, level_str.upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def _coord(text: str) -> GridPosition:
    try:
        x_str, y_str = text.split(",")
        return GridPosition(int(x_str), int(y_str))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected X,Y but got {text!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="astar_grid",
        description="Find 8-way shortest paths on an ASCII tile map.",
    )
    parser.add_argument("map", type=Path, help="Text map; '#' or 'X' marks an obstacle")
    parser.add_argument("--config", type=Path, default=None, help="YAML config file")
    parser.add_argument("--start", type=_coord, help="Start cell as X,Y")
    parser.add_argument("--goal", type=_coord, help="Goal cell as X,Y")
    parser.add_argument(
        "--interactive", action="store_true", help="Read /commands from stdin"
    )
    return parser


def run_interactive(session: CLISession, lines: Iterable[str]) -> None:
    state = {"running": True}
    logger.info("Interactive mode. Type /help for commands.")
    for line in lines:
        command = parse_command(line)
        if command is None:
            continue
        execute(command.name, command.args, session, state)
        if not state["running"]:
            break


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.interactive and (args.start is None or args.goal is None):
        parser.error("--start and --goal are required unless --interactive is given")

    try:
        cfg: Config = load_config(args.config) if args.config else CONFIG
    except (OSError, AstarGridError) as exc:
        logger.error("Could not load config %s: %s", args.config, exc)
        return 2
    configure_logging(cfg.logging)

    try:
        grid = load_ascii_map(args.map, cfg.cli.wall_chars)
    except (OSError, AstarGridError) as exc:
        logger.error("Could not load map %s: %s", args.map, exc)
        return 2
    logger.info("Loaded %sx%s map with %s obstacles", grid.width, grid.height, len(grid.obstacles))

    session = CLISession(grid=grid, pathfinder=Pathfinder.from_config(grid, cfg.search), cli=cfg.cli)

    if args.interactive:
        run_interactive(session, stdin if stdin is not None else sys.stdin)
        return 0

    result = execute("path", [str(v) for v in (*args.start, *args.goal)], session, {})
    return 0 if result is not None and result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
