"""Logging configuration for command-line use.

The library itself only creates module loggers; handlers are installed
here, by the CLI, so embedding applications keep control of output.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "xander"


def setup_logging(level: str = "WARNING", console: Console | None = None) -> logging.Logger:
    """Route the package's log records through rich.

    Args:
        level: Logging level name.
        console: Console to log to (stderr by default).

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper()))

    # Idempotent: repeated CLI invocations in one process replace the handler
    logger.handlers.clear()
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False

    logger.debug(f"Logging initialized - Level: {level.upper()}")
    return logger
