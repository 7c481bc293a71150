"""
Logging setup for ego, built on loguru.

Modules obtain a logger with ``get_logger(__name__)``; the CLI calls
``setup_logging`` once per invocation to choose the level.
"""

import sys

from loguru import logger

_LOG_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> - <level>{message}</level>"
)


def setup_logging(level: str = "WARNING") -> None:
    """Replace loguru's default sink with a stderr sink at ``level``."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=_LOG_FORMAT)


def get_logger(name: str):
    """Return a loguru logger bound to a module name."""
    return logger.bind(name=name)
