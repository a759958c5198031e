"""Logging configuration for the CLI process.

Library modules only ever call ``logging.getLogger(__name__)``; this is
the single place that attaches a handler.  Records are rendered by
Rich on stderr so they never mix with command output on stdout.
"""

from __future__ import annotations

import logging

from depshell.cli.console import get_rich_console
from depshell.exceptions import EnvironmentError

LOGGER_NAME: str = "depshell"


def configure_logging(level: int) -> logging.Logger:
    """Attach a Rich handler to the ``depshell`` logger at *level*.

    Calling it again replaces the previous handler instead of stacking.
    """
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=get_rich_console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
