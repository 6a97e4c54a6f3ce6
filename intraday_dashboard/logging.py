"""loguru setup shared by the app and the fetcher."""

import sys

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"


def configure_logging(level: str = "INFO", sink=None) -> int:
    """Replace loguru's default handler with a single sink at `level`.

    Returns the handler id so callers (tests mostly) can remove it again.
    """
    logger.remove()
    return logger.add(sink or sys.stderr, level=level.upper(), format=LOG_FORMAT)


__all__ = ["configure_logging", "logger"]
