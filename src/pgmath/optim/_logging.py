"""Package logger.

pgmath logs through the standard ``logging`` module under the ``pgmath``
name. Nothing is printed unless the application configures logging or calls
``enable_logging``.
"""

import logging
from typing import Optional

__all__ = [
    'logger',
    'get_logger',
    'enable_logging',
    'disable_logging',
]


LOGGER_NAME = 'pgmath'

# Above CRITICAL, so nothing from pgmath or its children gets through
_SILENT = logging.CRITICAL + 1

logger = logging.getLogger(LOGGER_NAME)

_handler: Optional[logging.Handler] = None


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get the package logger or one of its children."""
    if not name:
        return logger
    return logger.getChild(name)


def enable_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Calling it again only updates the level; a second handler is never added.

    Args:
        level: Logging level for the package logger

    Returns:
        The package logger
    """
    global _handler

    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(
            '%(asctime)s %(name)s %(levelname)s: %(message)s'
        ))
        logger.addHandler(_handler)

    logger.setLevel(level)
    return logger


def disable_logging() -> None:
    """Silence the package logger and its children."""
    global _handler

    if _handler is not None:
        logger.removeHandler(_handler)
        _handler = None

    logger.setLevel(_SILENT)
