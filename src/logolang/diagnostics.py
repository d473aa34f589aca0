"""
Internal diagnostics for the logolang package itself.

Library: structlog. Loggers are wrapped explicitly instead of going through
``structlog.configure`` so the host application's structlog setup is left
untouched.
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.typing import EventDict, WrappedLogger

_level: int = logging.WARNING


def _resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown diagnostics level: {level!r}")
    return resolved


def configure_diagnostics(*, level: str | int = "WARNING") -> None:
    """
    Set the minimum level of logolang's own diagnostic events.

    Args:
        level: stdlib level name or number (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    global _level
    _level = _resolve_level(level)


def diagnostics_level() -> int:
    return _level


def add_component(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Move the bound component name to the front of the rendered event."""
    component = event_dict.pop("component", None)
    if component:
        event_dict["logger"] = component
    return event_dict


def get_logger(name: str | None = None) -> structlog.typing.FilteringBoundLogger:
    """Get a diagnostics logger writing to the current ``sys.stderr``."""
    return structlog.wrap_logger(
        structlog.PrintLogger(file=sys.stderr),
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            add_component,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_level),
        context_class=dict,
        cache_logger_on_first_use=False,
    ).bind(component=name or "logolang")
