"""
Structured logging for the matic_bridge SDK.

All SDK loggers are children of the ``matic_bridge`` logger, which carries a
NullHandler so the library stays silent unless the application configures
logging. Call sites pass context through ``extra={...}``.

Example:
    >>> from matic_bridge.utils.logging import configure_logging, get_logger
    >>> configure_logging("DEBUG")
    >>> _logger = get_logger(__name__)
    >>> _logger.debug("process write", extra={"method": "approve"})
"""

from __future__ import annotations

import logging
from typing import Optional, Union

ROOT_LOGGER_NAME = "matic_bridge"
DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_root = logging.getLogger(ROOT_LOGGER_NAME)
_root.addHandler(logging.NullHandler())

_handler: Optional[logging.Handler] = None


def get_logger(name: str) -> logging.Logger:
    """
    Get an SDK logger.

    Names outside the ``matic_bridge`` namespace are nested under it.
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(
    level: Union[int, str] = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    handler: Optional[logging.Handler] = None,
) -> logging.Logger:
    """
    Attach a handler to the SDK root logger.

    Calling it again replaces the handler installed by the previous call.

    Args:
        level: Log level name or number
        fmt: Format string for the default StreamHandler
        handler: Custom handler to use instead of a StreamHandler

    Returns:
        The SDK root logger
    """
    global _handler

    if _handler is not None:
        _root.removeHandler(_handler)

    _handler = handler or logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(fmt))
    _root.addHandler(_handler)
    set_level(level)
    return _root


def set_level(level: Union[int, str]) -> None:
    """Set the SDK log level."""
    if isinstance(level, str):
        level = level.upper()
    _root.setLevel(level)


def enable_debug() -> None:
    """Shortcut for DEBUG level with a console handler."""
    configure_logging(logging.DEBUG)


def disable_logging() -> None:
    """Silence every SDK logger."""
    _root.setLevel(logging.CRITICAL + 1)
