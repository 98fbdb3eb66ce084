"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` command that emits log messages at every
level, plus fixtures to register that command, obtain a CliRunner, and run
tests within an isolated filesystem.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from codeflix_catalog.entrypoints.cli.main import codeflix

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit representative log messages for CLI/flight-recorder tests."""
    logger = logging.getLogger("codeflix_catalog.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command for the duration of a test."""
    codeflix.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        codeflix.commands.pop("log-demo", None)


@pytest.fixture
def runner():
    """Return a CliRunner whose flight recorder writes into the working directory."""
    return CliRunner(env={"CODEFLIX_LOG_PATH": "flight_recorder.log"})


@pytest.fixture
def fs(runner):
    """Run the test inside runner.isolated_filesystem()."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture(autouse=True)
def _reset_logger_levels():
    """Undo per-logger levels set through -L so tests do not leak into each other."""
    names = ["some.thirdparty", "codeflix_catalog", "codeflix_catalog.domain"]
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)
