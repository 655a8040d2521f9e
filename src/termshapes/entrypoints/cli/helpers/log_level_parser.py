"""Parse ``NAME=LEVEL`` logger-level options.

Values come either from repeated ``-L`` flags or from a single comma/space
separated string (environment variable) and are turned into a mapping of
logger names to numeric levels.
"""

import logging
import re

import click

DEFAULT_LIB_LEVELS = {"asyncio": logging.WARNING}

_ITEM_SEPARATOR = re.compile(r"[,\s]+")


def _normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten a string or a sequence of strings into non-empty items."""
    values = [value] if isinstance(value, str) else list(value)
    return [item for v in values for item in _ITEM_SEPARATOR.split(v) if item]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback turning NAME=LEVEL pairs into a name->level dict.

    Starts from DEFAULT_LIB_LEVELS; later items override earlier ones.

    Returns:
        dict[str, int]: Mapping of logger names to numeric logging levels.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is unknown.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value):
        name, sep, level_str = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        lvl = logging.getLevelNamesMapping().get(level_str.strip().upper())
        if lvl is None:
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels
