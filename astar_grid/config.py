"""Simple configuration loader for astar_grid."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .core.errors import ConfigError
from .search.pathfinding import DIAGONAL_COST, STRAIGHT_COST, check_costs


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class SearchConfig:
    """Movement costs and search limits."""

    straight_cost: float = STRAIGHT_COST
    diagonal_cost: float = DIAGONAL_COST
    max_expansions: Optional[int] = None


@dataclass
class LoggingConfig:
    """Root log level plus per-module overrides."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class CLIConfig:
    """Settings for the development CLI."""

    wall_chars: str = "#X"
    path_char: str = "*"
    profile_output: str = "profile.prof"


@dataclass
class Config:
    """Top level configuration dataclass."""

    search: SearchConfig = field(default_factory=SearchConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    cli: CLIConfig = field(default_factory=CLIConfig)


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    search_data = data.get("search") or {}
    max_expansions = search_data.get("max_expansions")
    try:
        search = SearchConfig(
            straight_cost=float(search_data.get("straight_cost", STRAIGHT_COST)),
            diagonal_cost=float(search_data.get("diagonal_cost", DIAGONAL_COST)),
            max_expansions=int(max_expansions) if max_expansions is not None else None,
        )
        check_costs(search.straight_cost, search.diagonal_cost, search.max_expansions)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"invalid search config: {exc}") from exc

    logging_data = data.get("logging") or {}
    log_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels={
            str(k): str(v) for k, v in (logging_data.get("module_levels") or {}).items()
        },
    )

    cli_data = data.get("cli") or {}
    cli = CLIConfig(
        wall_chars=str(cli_data.get("wall_chars", "#X")),
        path_char=str(cli_data.get("path_char", "*")),
        profile_output=str(cli_data.get("profile_output", "profile.prof")),
    )

    return Config(search=search, logging=log_cfg, cli=cli)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        try:
            raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"{path}: {exc}") from exc
    else:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: top level must be a mapping")
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "CONFIG_PATH",
    "Config",
    "SearchConfig",
    "LoggingConfig",
    "CLIConfig",
    "load_config",
]
