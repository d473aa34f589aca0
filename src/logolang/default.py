"""
Process-wide default logger and free functions.

The default logger is created from ``LogolangSettings`` the first time it is
needed. It is never reset implicitly; use ``set_default_logger`` to replace it.
"""

from __future__ import annotations

import threading
from typing import Any, Optional

from .config import LogolangSettings
from .diagnostics import configure_diagnostics, get_logger
from .logger import Logger

# =============================================================================
# Global State
# =============================================================================

_default_logger: Optional[Logger] = None
_lock = threading.Lock()


def get_default_logger() -> Logger:
    """Return the default logger, creating it on first use."""
    global _default_logger
    if _default_logger is None:
        with _lock:
            if _default_logger is None:
                settings = LogolangSettings()
                configure_diagnostics(level=settings.diagnostics_level.value)
                _default_logger = Logger.from_settings(settings)
                get_logger(__name__).debug(
                    "default logger created",
                    threshold=settings.level.name,
                    color=settings.color,
                    format=settings.format,
                )
    return _default_logger


def set_default_logger(logger: Logger) -> None:
    """Replace the default logger used by the module-level functions."""
    global _default_logger
    with _lock:
        _default_logger = logger


# =============================================================================
# Free Functions
# =============================================================================


def critical(message: str) -> None:
    get_default_logger().critical(message)


def criticalf(fmt: str, *args: Any) -> None:
    get_default_logger().criticalf(fmt, *args)


def error(message: str) -> None:
    get_default_logger().error(message)


def errorf(fmt: str, *args: Any) -> None:
    get_default_logger().errorf(fmt, *args)


def info(message: str) -> None:
    get_default_logger().info(message)


def infof(fmt: str, *args: Any) -> None:
    get_default_logger().infof(fmt, *args)


def debug(message: str) -> None:
    get_default_logger().debug(message)


def debugf(fmt: str, *args: Any) -> None:
    get_default_logger().debugf(fmt, *args)
