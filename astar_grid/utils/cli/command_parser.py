"""Simple command parsing utilities for the development CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


@dataclass
class CLICommand:
    """Result of parsing a command string."""
    name: str
    args: List[str]


def parse_command(text: str) -> Optional[CLICommand]:
    """Return a :class:`CLICommand` from ``text`` if it starts with ``/``."""
    text = text.strip()
    if not text.startswith("/"):
        return None
    parts = text[1:].replace(",", " ").split()
    if not parts:
        return None
    return CLICommand(name=parts[0].lower(), args=parts[1:])


def parse_coord(x_str: str, y_str: str) -> tuple[int, int]:
    """Parse two integer strings into an ``(x, y)`` pair."""
    return int(x_str), int(y_str)


__all__ = ["CLICommand", "parse_command", "parse_coord"]
