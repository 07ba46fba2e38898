"""Logging helpers for marklint.

The package logger stays silent (NullHandler) until an application calls
setup_logging().
"""

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config.models import LoggingConfig

LOGGER_NAME = "marklint"

_logger = logging.getLogger(LOGGER_NAME)
_logger.addHandler(logging.NullHandler())


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger, or a child of it."""
    if name:
        return _logger.getChild(name)
    return _logger


def setup_logging(config: "LoggingConfig") -> logging.Logger:
    """Attach a stream handler according to the logging configuration.

    Calling this more than once replaces the previously installed handler.
    """
    for handler in list(_logger.handlers):
        if getattr(handler, "_marklint_handler", False):
            _logger.removeHandler(handler)

    if config.debug:
        level = logging.DEBUG
    elif config.verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(config.format))
    handler._marklint_handler = True  # type: ignore[attr-defined]
    _logger.addHandler(handler)
    _logger.setLevel(level)
    return _logger


__all__ = ["LOGGER_NAME", "get_logger", "setup_logging"]
