"""
Logolang: a small leveled logger.

There are five levels; a logger emits every message whose level is equal to or
less than its own:

    0: NOLOG
    1: CRITICAL
    2: ERROR
    3: INFO
    4: DEBUG

Each emitting level has its own sink. Sinks handed to a logger must be safe for
concurrent use (wrap them in ``SafeSink`` when unsure) and must be reliable: a
failed write raises ``SinkWriteError``, which is fatal.

Lines are rendered from a format string, by default
``"[%YYYY%-%MM%-%DD% %hh%:%mm%:%ss%] %LEVEL%: %MESSAGE%"``.
"""

from .config import LogolangSettings
from .default import (
    critical,
    criticalf,
    debug,
    debugf,
    error,
    errorf,
    get_default_logger,
    info,
    infof,
    set_default_logger,
)
from .diagnostics import configure_diagnostics
from .exceptions import (
    ConfigurationError,
    FatalLogError,
    InvalidLevelError,
    LogolangError,
    SinkWriteError,
)
from .interceptors import LogolangHandler, install_handler
from .levels import (
    LEVEL_CRITICAL,
    LEVEL_DEBUG,
    LEVEL_ERROR,
    LEVEL_INFO,
    LEVEL_NOLOG,
    Level,
)
from .logger import Logger
from .sinks import BaseSink, FileSink, SafeSink, Sink, StdioSink, StreamSink
from .template import DEFAULT_FORMAT, Directive, Formatter, FunctionFormatter, Template, compile_template

__version__ = "0.1.0"

__all__ = [
    "BaseSink",
    "ConfigurationError",
    "DEFAULT_FORMAT",
    "Directive",
    "FatalLogError",
    "FileSink",
    "Formatter",
    "FunctionFormatter",
    "InvalidLevelError",
    "LEVEL_CRITICAL",
    "LEVEL_DEBUG",
    "LEVEL_ERROR",
    "LEVEL_INFO",
    "LEVEL_NOLOG",
    "Level",
    "Logger",
    "LogolangError",
    "LogolangHandler",
    "LogolangSettings",
    "SafeSink",
    "Sink",
    "SinkWriteError",
    "StdioSink",
    "StreamSink",
    "Template",
    "compile_template",
    "configure_diagnostics",
    "critical",
    "criticalf",
    "debug",
    "debugf",
    "error",
    "errorf",
    "get_default_logger",
    "info",
    "infof",
    "install_handler",
    "set_default_logger",
]
