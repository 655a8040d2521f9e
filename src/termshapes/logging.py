"""Logging setup for the termshapes CLI.

Console output goes through Rich on stderr so stdout stays free for rendered
trees and JSON. An optional "flight recorder" keeps recent records in memory
at DEBUG granularity and dumps them to a file once something goes wrong.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from importlib.metadata import version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "termshapes"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]

CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
FLIGHT_RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)


class ThirdPartyPrefixFilter(logging.Filter):
    """Prefix records from other libraries with their top-level package name.

    ``asyncio`` records get ``record.prefix = "[asyncio]"``; termshapes records
    get an empty prefix. Records are never dropped.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(PROJECT_PREFIX):
            record.prefix = ""
        else:
            record.prefix = f"[{record.name.split('.')[0]}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the Rich console handler.

    Args:
        level: Minimum level shown on the console. Forced to DEBUG in debug mode.
        debug_mode: Show timestamps, logger names and source paths.
        color: Disable to strip colors (mirrors click-extra's ``--no-color``).

    Returns:
        RichHandler: Handler writing to stderr.
    """
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    if debug_mode:
        handler.setFormatter(logging.Formatter(fmt=DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build the in-memory flight recorder.

    Up to *capacity* records are buffered and written to *path* when a record
    at *flush_level* or above arrives, or on close when *flush_on_close* is set.

    Args:
        path: Destination file for flushed records.
        capacity: Number of records kept in memory.
        flush_level: Level that triggers a flush.
        flush_on_close: Also flush when the handler is closed.

    Returns:
        MemoryHandler: The buffering handler, targeting a FileHandler.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FLIGHT_RECORDER_FORMAT))

    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_recorder: bool,
    flight_capacity: int | None,
    force_flush_fr: bool,
    logger_levels: dict[str, int],
) -> None:
    """Log a one-line startup summary at INFO and diagnostics at DEBUG.

    Args:
        logger: Logger used to emit startup messages.
        app_version: termshapes version string.
        level: Effective console level.
        handlers: Handlers attached to the root logger.
        log_path: Flight recorder output file, or None.
        flight_recorder: Whether the flight recorder is enabled.
        flight_capacity: Flight recorder capacity, or None when disabled.
        force_flush_fr: Whether the flight recorder flushes on close.
        logger_levels: Per-logger level overrides.
    """
    logger.info(
        "TERMSHAPES %s (console=%s, flight-recorder=%s)",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug("Rich: %s", version("rich"))
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            str(log_path) if log_path else "<none>",
            flight_capacity,
            force_flush_fr,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
        or "<none>",
    )

