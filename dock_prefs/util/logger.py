"""Logging setup for the command-line interface."""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "dock_prefs"


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """
    Attach a Rich handler writing to stderr to the package logger.

    Library modules only create loggers; handlers are installed here, once,
    by the CLI. Calling it again replaces the previous handler.

    Args:
        level: Level name ("DEBUG", "INFO", ...) or numeric level

    Returns:
        The configured package logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(console=Console(stderr=True), show_path=False, show_time=False)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
