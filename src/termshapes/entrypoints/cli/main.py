"""termshapes CLI entry point.

Defines the top-level ``termshapes`` command (via Click-Extra) and registers
its subcommands.

Currently available commands
- ``termshapes render``: build and print the term shapes of a taxonomy.
- ``termshapes alternates``: list the alternates of one shape kind.
- ``termshapes format-name``: print a label as a PascalCase fragment.

Examples
    $ termshapes --version
    $ termshapes render content.json --alias alias:categories
    $ termshapes alternates TermItem --content-type Category --level 2 --name Travel
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from termshapes import __version__
from termshapes.logging import (
    config_console_handler,
    config_flight_recorder,
    log_startup,
)

from .helpers.log_level_parser import parse_log_level
from .shapes import alternates, format_name, render

if TYPE_CHECKING:
    from logging import Handler
    from logging.handlers import MemoryHandler

logger = logging.getLogger(__name__)


HELP = """termshapes command-line interface.

    termshapes derives the template alternates of taxonomy shapes (Term,
    TermItem, TermContentItem, TermPart) and builds the tree of term items a
    host renderer walks, one level at a time.
    """


EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('Examples:', fg='blue', bold=True, underline=True)}",
        "  termshapes render content.json --alias alias:categories --max-depth 2",
        "  termshapes alternates TermItem --content-type Category --name Travel",
    ]
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (timestamps, logger names and source paths).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file (overrides default flight recorder path).",
    default=Path(user_log_dir("termshapes", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="TERMSHAPES_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Buffer recent DEBUG records and write them to --log-path once a "
        "WARNING or worse is logged (or on exit with --force-flush)."
    ),
    default=True,
    envvar="TERMSHAPES_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush",
    is_flag=True,
    help="Write the flight recorder buffer to --log-path on exit.",
    default=False,
    show_default=True,
    envvar="TERMSHAPES_FORCE_FLUSH_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Minimum level of one logger as NAME=LEVEL, for the console and the "
        "flight recorder alike. Repeatable, e.g. -L asyncio=INFO."
    ),
    default=("asyncio=WARNING",),
    envvar="TERMSHAPES_LOGGER_LEVEL",
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def termshapes(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder: bool,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """termshapes command-line interface."""

    # 0) effective verbosity, clamped to DEBUG..CRITICAL
    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    # 1) console
    handlers: list[Handler] = [
        config_console_handler(
            level=level, debug_mode=debug, color=ctx.color is not False
        )
    ]

    # 2) flight recorder
    recorder: MemoryHandler | None = None
    if flight_recorder:
        recorder = config_flight_recorder(log_path, flush_on_close=force_flush)
        handlers.append(recorder)

    # 3) root logger captures everything; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 4) per-logger overrides
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=recorder.capacity if recorder is not None else None,
        force_flush_fr=force_flush,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


termshapes.add_command(render)
termshapes.add_command(alternates)
termshapes.add_command(format_name)
