"""
Interceptors for routing standard library logging into a logolang Logger.
"""

from __future__ import annotations

import logging
from typing import Optional

from .levels import Level
from .logger import Logger


def map_stdlib_level(levelno: int) -> Level:
    """
    Map a stdlib level number onto a logolang level.

    Rules:
    - CRITICAL and above -> CRITICAL
    - ERROR -> ERROR
    - WARNING, INFO -> INFO
    - anything lower -> DEBUG
    """
    if levelno >= logging.CRITICAL:
        return Level.CRITICAL
    if levelno >= logging.ERROR:
        return Level.ERROR
    if levelno >= logging.INFO:
        return Level.INFO
    return Level.DEBUG


class LogolangHandler(logging.Handler):
    """
    Redirect standard library log records to a logolang Logger.

    The record is formatted with the handler's formatter (message only by
    default) and then rendered by the logger's own template. Formatting errors
    go to ``handleError``; ``SinkWriteError`` is not an ``Exception`` and
    propagates to the caller.
    """

    def __init__(self, logger: Logger, level: int = logging.NOTSET):
        super().__init__(level)
        self.logger = logger

    def emit(self, record: logging.LogRecord) -> None:
        try:
            target = map_stdlib_level(record.levelno)
            if not self.logger.is_enabled_for(target):
                return
            self.logger.log(target, self.format(record))
        except Exception:
            self.handleError(record)


def install_handler(logger: Logger, name: Optional[str] = None) -> LogolangHandler:
    """Attach a LogolangHandler to the stdlib logger ``name`` (root by default)."""
    handler = LogolangHandler(logger)
    logging.getLogger(name).addHandler(handler)
    return handler
