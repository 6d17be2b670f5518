"""Logging setup for json_typegen.

Modules get their loggers through :func:`get_logger`. Nothing is printed
until an application (the CLI) calls :func:`configure_logging`, which
routes records through rich to stderr so generated code on stdout stays
clean.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER_NAME = "json_typegen"

logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger for a module of this package."""
    return logging.getLogger(name)


def configure_logging(
    level: int = logging.WARNING, console: Console | None = None
) -> logging.Logger:
    """Attach a rich handler to the package logger.

    Calling this again replaces the previous handler instead of stacking
    a second one.

    Args:
        level: Minimum level to emit.
        console: Console to log to (defaults to a stderr console).

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
