"""
Severity levels, level names and ANSI colors.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from .exceptions import InvalidLevelError

# =============================================================================
# ANSI Color Codes
# =============================================================================

COLOR_DEFAULT = "\x1b[39m"
COLOR_LIGHT_BLUE = "\x1b[94m"
COLOR_RED = "\x1b[31m"
COLOR_YELLOW = "\x1b[33m"


class Level(IntEnum):
    """Logger levels. A logger emits every level whose value is <= its own."""

    NOLOG = 0
    CRITICAL = 1
    ERROR = 2
    INFO = 3
    DEBUG = 4

    @classmethod
    def parse(cls, value: Any) -> "Level":
        """Coerce a Level, an int in [0, 4] or a level name into a Level."""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise InvalidLevelError(value)
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                raise InvalidLevelError(value) from None
        if isinstance(value, str):
            text = value.strip()
            try:
                if text.isdigit():
                    return cls(int(text))
                return cls[text.upper()]
            except (KeyError, ValueError):
                raise InvalidLevelError(value) from None
        raise InvalidLevelError(value)

    @property
    def color(self) -> str:
        return _LEVEL_COLORS.get(self, COLOR_DEFAULT)

    def label(self, *, color: bool = False) -> str:
        """Level name as it appears in a rendered line."""
        if not color:
            return self.name
        return f"{self.color}{self.name}{COLOR_DEFAULT}"


_LEVEL_COLORS = {
    Level.CRITICAL: COLOR_RED,
    Level.ERROR: COLOR_YELLOW,
    Level.INFO: COLOR_DEFAULT,
    Level.DEBUG: COLOR_LIGHT_BLUE,
}

# Emitting levels, most severe first
EMITTING_LEVELS = (Level.CRITICAL, Level.ERROR, Level.INFO, Level.DEBUG)

LEVEL_NOLOG = Level.NOLOG
LEVEL_CRITICAL = Level.CRITICAL
LEVEL_ERROR = Level.ERROR
LEVEL_INFO = Level.INFO
LEVEL_DEBUG = Level.DEBUG
