"""Logging configuration for branchhop."""

import logging

from rich.console import Console
from rich.logging import RichHandler


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(f"branchhop.{name}")


def setup_logging(level: str = "WARNING") -> None:
    """Configure logging for branchhop.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logger = logging.getLogger("branchhop")
    logger.setLevel(getattr(logging, level.upper()))

    # Replace the handler from any previous call
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    console_handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=False,
        show_time=False,
        show_path=False,
    )
    console_handler.setLevel(getattr(logging, level.upper()))
    logger.addHandler(console_handler)

    logger.propagate = False
