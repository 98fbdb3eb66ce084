"""Codeflix CLI entry point.

Defines the top-level ``codeflix`` command and registers subcommands exposed
by the project.

Currently available groups
- ``codeflix category``: build and validate catalog categories.

Notes
- The CLI version is sourced from `codeflix_catalog.__version__` (``--version``).
- Additional command groups should be registered here via ``codeflix.add_command(...)``.

Examples
    $ codeflix --version
    $ codeflix -vv category create --name Documentaries
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
from platformdirs import user_log_dir

from codeflix_catalog import __version__, config
from codeflix_catalog.logging import (
    config_console_handler,
    config_flight_recorder,
    log_startup,
    shutdown,
)

from .category import category as category_group
from .helpers import parse_log_level

if TYPE_CHECKING:
    from logging import Handler
    from logging.handlers import MemoryHandler

logger = logging.getLogger(__name__)


HELP = """Codeflix catalog command-line interface.

    Build catalog categories from the command line and check them against the
    catalog's validation rules. Nothing is stored.
    """


def _configured_id_generator() -> str:
    """Describe CODEFLIX_ID_GENERATOR for the startup summary."""
    try:
        return config.get_id_generator_name()
    except config.UnknownIdGeneratorError as e:
        return f"{e.name} (unsupported)"


def default_log_path() -> Path:
    """Default flight recorder destination in the user's log directory."""
    return Path(user_log_dir("codeflix", appauthor=False)) / "latest.log"


@click.group(help=HELP)
@click.version_option(version=__version__, prog_name="codeflix")
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
    help="Enable debug mode (DEBUG console output with logger names and paths).",
    default=False,
)
@click.option(
    "--color/--no-color",
    help="Force or disable colored output (default: auto-detect).",
    default=None,
    envvar="CODEFLIX_COLOR",
    show_envvar=True,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to the flight recorder log file.",
    default=default_log_path,
    envvar="CODEFLIX_LOG_PATH",
    show_default="<user log dir>/latest.log",
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=2000,
    hidden=True,
    envvar="CODEFLIX_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    help=(
        "Enable the in-memory flight recorder. Keeps the last N log records "
        "at DEBUG granularity (unaffected by -v/-q) and writes them to "
        "--log-path when a WARNING/ERROR occurs, or on exit if --force-flush is set."
    ),
    default=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    help="Force-flush the flight recorder buffer to --log-path on program exit.",
    default=False,
    show_default=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar="CODEFLIX_LOGGER_LEVELS",
    show_envvar=True,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to BOTH "
        "console and flight recorder. Repeatable (e.g. -L codeflix_catalog.domain=INFO) "
        "or via CODEFLIX_LOGGER_LEVELS (comma/space list)."
    ),
)
@click.pass_context
def codeflix(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    color: bool | None,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """Codeflix catalog command-line interface."""

    # 0) compute effective verbosity
    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = []

    # 1) console
    if color is not None:
        ctx.color = color
    use_color = color is not False  # None or True => allow color
    handlers.append(
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    )

    # 2) flight recorder
    recorder: MemoryHandler | None = None
    if flight_recorder:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        recorder = config_flight_recorder(
            path=log_path,
            capacity=flight_recorder_capacity,
            flush_on_close=force_flush_flight_recorder,
        )
        handlers.append(recorder)

    # 3) root logger captures everything; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 4) per-logger overrides
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        console_level=logging.DEBUG if debug else level,
        id_generator=_configured_id_generator(),
        flight_recorder=recorder,
        log_path=log_path if recorder is not None else None,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(lambda: shutdown(handlers))


codeflix.add_command(category_group)
