"""Tests for gitspace.log module."""

import logging
from typing import Generator

import pytest

from gitspace.log import LOG_FORMAT, setup_logging


@pytest.fixture
def restore_logging() -> Generator[None, None, None]:
    """Restore root logger handlers after the test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    git_level = logging.getLogger("git").level
    try:
        yield
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)
        logging.getLogger("git").setLevel(git_level)


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_level(self, restore_logging: None) -> None:
        """Test the requested level is applied to the root logger."""
        setup_logging("debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_single_handler(self, restore_logging: None) -> None:
        """Test repeated setup does not stack handlers."""
        setup_logging()
        setup_logging()

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert handlers[0].formatter is not None
        assert handlers[0].formatter._fmt == LOG_FORMAT

    def test_git_quieted(self, restore_logging: None) -> None:
        """Test GitPython's command logging is suppressed."""
        setup_logging("debug")
        assert logging.getLogger("git").level == logging.WARNING
