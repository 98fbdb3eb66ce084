"""Helpers for parsing logger-level CLI options.

This module provides utilities used by the CLI to parse options of the
form NAME=LEVEL (repeatable or comma/space-separated). It normalizes input
values into individual items and converts/validates textual log level names
into the corresponding numeric logging levels.
"""

import logging
import re

import click

# Applied before any NAME=LEVEL overrides from the command line
DEFAULT_LOGGER_LEVELS: dict[str, int] = {}


def _normalize_items(value: str | list[str] | tuple[str, ...] | None) -> list[str]:
    """Normalize an input value into a flat list of non-empty items.

    Accepts either a single string (which may contain multiple comma/space-
    separated items, e.g. from an environment variable) or a sequence of
    strings (as provided by repeatable Click options).
    """
    if not value:
        return []
    raw = [value] if isinstance(value, str) else list(value)
    items: list[str] = []
    for v in raw:
        items.extend(s for s in re.split(r"[,\s]+", v) if s)
    return items


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...] | None,
) -> dict[str, int]:
    """Click callback that parses NAME=LEVEL pairs into a name->level dict.

    Combines DEFAULT_LOGGER_LEVELS with any overrides supplied via the CLI.
    LEVEL is a standard logging level name (e.g. DEBUG, INFO, WARNING), matched
    case-insensitively. Later entries win.

    Returns:
        dict[str, int]: Mapping of logger names to numeric logging levels.

    Raises:
        click.BadParameter: If an item is malformed (not NAME=LEVEL) or LEVEL is invalid.
    """

    levels = dict(DEFAULT_LOGGER_LEVELS)
    for item in _normalize_items(value):
        try:
            name, level_str = item.split("=", 1)
        except ValueError as e:
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}") from e
        lvl = logging.getLevelNamesMapping().get(level_str.strip().upper())
        if not name.strip() or lvl is None:
            raise click.BadParameter(f"Invalid logger level: {item!r}")
        levels[name.strip()] = lvl
    return levels
