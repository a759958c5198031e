"""Tests for CLI logging configuration (cli/logging_setup.py)."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from depshell.cli.logging_setup import LOGGER_NAME, configure_logging


def _rich_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if isinstance(h, RichHandler)]


class TestConfigureLogging:
    def test_sets_level_and_handler(self) -> None:
        logger = configure_logging(logging.DEBUG)
        assert logger.name == LOGGER_NAME
        assert logger.level == logging.DEBUG
        assert len(_rich_handlers(logger)) == 1

    def test_reconfiguring_does_not_stack_handlers(self) -> None:
        configure_logging(logging.INFO)
        logger = configure_logging(logging.WARNING)
        assert len(_rich_handlers(logger)) == 1
        assert logger.level == logging.WARNING

    def test_module_loggers_are_children(self) -> None:
        configure_logging(logging.INFO)
        child = logging.getLogger("depshell.core.commands")
        assert child.getEffectiveLevel() == logging.INFO
