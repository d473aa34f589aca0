"""
Logolang exception hierarchy.

Two roots, split by how the caller is expected to react:

- ``LogolangError`` covers setup-time problems (bad level, conflicting
  formatter options). These are ordinary exceptions and may be handled.
- ``FatalLogError`` covers failures of the environment while logging. It derives
  from ``BaseException``, so ``except Exception`` does not catch it.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class LogolangError(Exception):
    """Base class for recoverable logolang errors."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(LogolangError):
    """Raised when a logger is built with an invalid configuration."""

    def __init__(self, message: str, *, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, code="CONFIGURATION_ERROR", details=details)


class InvalidLevelError(ConfigurationError, ValueError):
    """Raised when a level value lies outside the five known levels."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"Invalid log level {value!r}: expected 0-4 or one of NOLOG, CRITICAL, ERROR, INFO, DEBUG",
            details={"value": value},
        )
        self.code = "INVALID_LEVEL"
        self.value = value


# =============================================================================
# Fatal Errors
# =============================================================================


class FatalLogError(BaseException):
    """Unrecoverable logging failure.

    Sinks handed to a logger must be reliable. When one fails the process is
    considered broken, so this is not meant to be caught on the normal path.
    """


class SinkWriteError(FatalLogError):
    """A sink failed while writing a rendered line."""

    def __init__(self, *, level: Any, sink: Any, reason: str) -> None:
        super().__init__(f"Failed writing {level.name} line to {sink!r}: {reason}")
        self.level = level
        self.sink = sink
        self.reason = reason
