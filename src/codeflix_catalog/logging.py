"""Logging setup for the `codeflix` CLI.

Two handlers hang off the root logger:

- a Rich console handler on stderr whose level follows ``-v``/``-q``;
- an optional "flight recorder": a memory buffer of recent records at DEBUG
  granularity that is written to a file when a WARNING or worse is logged,
  or on exit when ``--force-flush`` is given.

`shutdown` replaces a bare `logging.shutdown()` so that a flight recorder
without force-flush never writes its leftover buffer on exit.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from logging.handlers import MemoryHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

CONSOLE_FORMAT = "%(message)s"
DEBUG_CONSOLE_FORMAT = "%(name)s: %(message)s"
FLIGHT_RECORDER_FORMAT = (
    "[%(asctime)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"
)


def config_console_handler(
    level: int = logging.WARNING, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the console handler.

    Args:
        level: Minimum level shown. Ignored in debug mode, which shows DEBUG.
        debug_mode: Show logger names and source paths.
        color: Let Rich pick a color system; False disables color.
    """
    console = Console(stderr=True, color_system="auto" if color else None)
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    handler.setFormatter(
        logging.Formatter(DEBUG_CONSOLE_FORMAT if debug_mode else CONSOLE_FORMAT)
    )
    return handler


def config_flight_recorder(
    path: Path, capacity: int = 2000, flush_on_close: bool = False
) -> MemoryHandler:
    """Build a flight recorder writing to `path`.

    The file is only created (and truncated) on the first flush.

    Args:
        path: Destination of flushed records.
        capacity: Number of records kept in memory between flushes.
        flush_on_close: Write whatever is still buffered when the handler closes.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(FLIGHT_RECORDER_FORMAT))
    return MemoryHandler(
        capacity,
        flushLevel=logging.WARNING,
        target=target,
        flushOnClose=flush_on_close,
    )


def discard_unflushed(handlers: Iterable[logging.Handler]) -> None:
    """Empty the buffer of every flight recorder that must not flush on close."""
    for handler in handlers:
        if isinstance(handler, MemoryHandler) and not handler.flushOnClose:
            handler.acquire()
            try:
                handler.buffer.clear()
            finally:
                handler.release()


def shutdown(handlers: Iterable[logging.Handler]) -> None:
    """Flush and close logging, honoring each flight recorder's flush_on_close."""
    # before 3.12, logging.shutdown() flushes every handler regardless of flushOnClose
    discard_unflushed(handlers)
    logging.shutdown()


def log_startup(  # pylint: disable=too-many-arguments
    logger: logging.Logger,
    *,
    app_version: str,
    console_level: int,
    id_generator: str,
    flight_recorder: MemoryHandler | None,
    log_path: Path | None,
    logger_levels: dict[str, int],
) -> None:
    """Log the effective CLI configuration.

    One INFO line summarizes the version, console level, configured id
    generator and flight recorder state; the details follow at DEBUG.
    """
    logger.info(
        "codeflix %s: console=%s, id-generator=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(console_level),
        id_generator,
        "ON" if flight_recorder is not None else "OFF",
    )
    logger.debug("Python %s", sys.version.split()[0])
    if flight_recorder is not None:
        logger.debug(
            "Flight recorder: path=%s, capacity=%d, flush_on_close=%s",
            log_path,
            flight_recorder.capacity,
            flight_recorder.flushOnClose,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
        or "<none>",
    )
