"""Logging configuration for the CLI process.

Library modules only create ``logging.getLogger(__name__)`` loggers; the
handler is installed here, once per :func:`~slackpost.cli.app.main`
call, on the ``slackpost`` package logger.  Output goes to stderr so it
never mixes with command results on stdout.
"""

from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER: str = "slackpost"
_HANDLER_NAME: str = "slackpost-cli"


def _build_handler() -> logging.Handler:
    """Return a Rich handler when Rich is installed, else a plain one."""
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(levelname)s %(name)s: %(message)s"),
        )
        return handler

    return RichHandler(console=Console(stderr=True), show_path=False)


def configure_logging(level: int) -> logging.Logger:
    """Install the CLI handler on the package logger at *level*.

    Calling this again replaces the previously installed handler.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logger.removeHandler(existing)

    handler = _build_handler()
    handler.set_name(_HANDLER_NAME)
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
