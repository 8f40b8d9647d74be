"""Fixtures for end-to-end CLI logging tests.

Provides a test-only `log-demo` command that logs at every level on a
corkboard logger and a third-party logger, registered on the top-level
`corkboard` group for the duration of a test.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from corkboard.entrypoints.cli.main import corkboard

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Log one message per level on 'corkboard.demo' and 'some.thirdparty'."""
    logger = logging.getLogger("corkboard.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _unregister(group: click.Group, name: str) -> None:
    group.commands.pop(name, None)
    # click-extra keeps section registries next to `commands`
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register 'log-demo' on `corkboard` for one test."""
    corkboard.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _unregister(corkboard, "log-demo")


@pytest.fixture
def runner():
    """A Click CliRunner."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated working directory."""
    with runner.isolated_filesystem():
        yield
