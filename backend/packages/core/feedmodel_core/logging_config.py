"""
Logging configuration.

Configures the ``feedmodel`` logger hierarchy and hands out module loggers.
Context is attached with ``extra={...}`` and rendered as ``key=value`` pairs.
"""

import logging
import sys

from .config import feedmodel_config

_ROOT_LOGGER = "feedmodel"
_DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None)).keys() | {"message", "asctime"}
)

_initialized = False


class ContextFormatter(logging.Formatter):
    """Formatter that appends ``extra`` fields to the message."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = {
            key: value for key, value in vars(record).items() if key not in _RESERVED_ATTRS
        }
        if not context:
            return message
        pairs = " ".join(f"{key}={value!r}" for key, value in sorted(context.items()))
        return f"{message} | {pairs}"


def init_logging(level: str | int | None = None, fmt: str | None = None) -> logging.Logger:
    """
    Configure the feedmodel logger hierarchy.

    Safe to call more than once; only the level is updated on later calls.

    Args:
        level: Log level name or number. Defaults to the configured level.
        fmt: Optional format string for the stream handler.

    Returns:
        The root feedmodel logger.
    """
    global _initialized

    logger = logging.getLogger(_ROOT_LOGGER)
    logger.setLevel(level if level is not None else feedmodel_config.log_level.upper())

    if not _initialized:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ContextFormatter(fmt or _DEFAULT_FORMAT))
        logger.addHandler(handler)
        _initialized = True

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger inside the feedmodel hierarchy.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        Logger named ``feedmodel.<name>``.
    """
    if name == _ROOT_LOGGER or name.startswith(f"{_ROOT_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT_LOGGER}.{name}")
