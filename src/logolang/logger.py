"""
Leveled logger.

A Logger owns one sink per emitting level and a formatter. Each emission:

1. returns immediately when the requested level is more verbose than
   ``logger.level``;
2. renders the (optionally colorized) level name and the message;
3. appends a newline and writes the UTF-8 bytes to the level's sink.

A failed write raises ``SinkWriteError`` (see ``logolang.exceptions``).

Thread safety: emission may run concurrently as long as the sinks serialize
their writes (wrap them in ``SafeSink``). ``level`` and ``color`` are plain
attributes; do not modify them concurrently with emission.
"""

from __future__ import annotations

import time
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Dict, NoReturn, Optional

from .console import enable_ansi_color
from .diagnostics import get_logger
from .exceptions import ConfigurationError, SinkWriteError
from .levels import EMITTING_LEVELS, Level
from .sinks import Sink, default_sinks
from .template import DEFAULT_FORMAT, Clock, Formatter, compile_template

if TYPE_CHECKING:
    from .config import LogolangSettings


class Logger:
    """Logger with one sink per level.

    Args:
        debug: Sink for DEBUG lines (default: standard output).
        info: Sink for INFO lines (default: standard output).
        error: Sink for ERROR lines (default: standard error).
        critical: Sink for CRITICAL lines (default: standard error).
        fmt: Format string; empty means ``DEFAULT_FORMAT``.
        formatter: Custom formatter, instead of ``fmt``.
        level: Most verbose level emitted.
        color: Colorize level names with ANSI escapes.
        clock: Epoch-nanosecond clock used by the compiled template.
    """

    def __init__(
        self,
        *,
        debug: Optional[Sink] = None,
        info: Optional[Sink] = None,
        error: Optional[Sink] = None,
        critical: Optional[Sink] = None,
        fmt: str = "",
        formatter: Optional[Formatter] = None,
        level: Any = Level.ERROR,
        color: bool = True,
        clock: Optional[Clock] = None,
    ):
        if formatter is not None and fmt:
            raise ConfigurationError(
                "Pass either a format string or a formatter, not both",
                details={"fmt": fmt, "formatter": repr(formatter)},
            )

        self.level: Level = Level.parse(level)
        self.color = color

        if formatter is None:
            formatter = compile_template(fmt or DEFAULT_FORMAT, clock=clock or time.time_ns)
        self._formatter = formatter

        uses_std_streams = any(s is None for s in (debug, info, error, critical))
        stdout, stderr = default_sinks() if uses_std_streams else (None, None)
        self._console_sinks = tuple(s for s in (stdout, stderr) if s is not None)

        self._sinks: Dict[Level, Sink] = {
            Level.DEBUG: debug if debug is not None else stdout,
            Level.INFO: info if info is not None else stdout,
            Level.ERROR: error if error is not None else stderr,
            Level.CRITICAL: critical if critical is not None else stderr,
        }

    @classmethod
    def from_settings(cls, settings: Optional["LogolangSettings"] = None, **sinks: Sink) -> "Logger":
        """Build a logger from ``LogolangSettings`` (read from the environment if omitted)."""
        from .config import LogolangSettings

        settings = settings or LogolangSettings()
        return cls(level=settings.level, color=settings.color, fmt=settings.format, **sinks)

    @property
    def formatter(self) -> Formatter:
        return self._formatter

    def sink_for(self, level: Any) -> Sink:
        level = Level.parse(level)
        if level is Level.NOLOG:
            raise ValueError("NOLOG has no sink")
        return self._sinks[level]

    def set_level(self, level: Any) -> None:
        """Set ``self.level`` after validating it."""
        self.level = Level.parse(level)

    def is_enabled_for(self, level: Level) -> bool:
        return level is not Level.NOLOG and level <= self.level

    # =========================================================================
    # Emission
    # =========================================================================

    def critical(self, message: str) -> None:
        """Log ``message`` at CRITICAL when level >= CRITICAL."""
        if self.level < Level.CRITICAL:
            return
        self._write(Level.CRITICAL, message)

    def criticalf(self, fmt: str, *args: Any) -> None:
        """Like ``critical``; ``fmt`` is %-interpolated with ``args``."""
        if self.level < Level.CRITICAL:
            return
        self._write(Level.CRITICAL, _interpolate(fmt, args))

    def error(self, message: str) -> None:
        """Log ``message`` at ERROR when level >= ERROR."""
        if self.level < Level.ERROR:
            return
        self._write(Level.ERROR, message)

    def errorf(self, fmt: str, *args: Any) -> None:
        if self.level < Level.ERROR:
            return
        self._write(Level.ERROR, _interpolate(fmt, args))

    def info(self, message: str) -> None:
        """Log ``message`` at INFO when level >= INFO."""
        if self.level < Level.INFO:
            return
        self._write(Level.INFO, message)

    def infof(self, fmt: str, *args: Any) -> None:
        if self.level < Level.INFO:
            return
        self._write(Level.INFO, _interpolate(fmt, args))

    def debug(self, message: str) -> None:
        """Log ``message`` at DEBUG when level >= DEBUG."""
        if self.level < Level.DEBUG:
            return
        self._write(Level.DEBUG, message)

    def debugf(self, fmt: str, *args: Any) -> None:
        if self.level < Level.DEBUG:
            return
        self._write(Level.DEBUG, _interpolate(fmt, args))

    def log(self, level: Any, message: str) -> None:
        """Log ``message`` at a level chosen at runtime."""
        level = Level.parse(level)
        if level not in EMITTING_LEVELS:
            raise ValueError(f"Cannot emit at level {level!r}")
        if self.level < level:
            return
        self._write(level, message)

    def _write(self, level: Level, message: str) -> None:
        line = self._formatter.render(level.label(color=self.color), message) + "\n"
        data = line.encode("utf-8")
        sink = self._sinks[level]
        # Windows consoles need ANSI support switched on before the first colored line
        if self.color and any(sink is s for s in self._console_sinks):
            enable_ansi_color()

        try:
            written = sink.write(data)
        except Exception as exc:
            self._fail(level, sink, f"{type(exc).__name__}: {exc}", exc)
        else:
            if written is not None and written < len(data):
                self._fail(level, sink, f"short write ({written} of {len(data)} bytes)", None)

    def _fail(self, level: Level, sink: Sink, reason: str, cause: Optional[BaseException]) -> NoReturn:
        get_logger(__name__).critical("sink write failed", log_level=level.name, sink=repr(sink), reason=reason)
        raise SinkWriteError(level=level, sink=sink, reason=reason) from cause

    def __repr__(self) -> str:
        return f"Logger(level={self.level.name}, color={self.color}, formatter={self._formatter!r})"


def _interpolate(fmt: str, args: tuple) -> str:
    """
    ``fmt % args``. Arguments that do not fit the format never fail the call;
    the line becomes ``"<fmt> %!(BADARGS=<args>)"`` instead.
    """
    if not args:
        return fmt
    # A single non-empty mapping feeds %(name)s placeholders, as in logging.LogRecord
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        values: Any = args[0]
    else:
        values = args
    try:
        return fmt % values
    except (TypeError, ValueError, KeyError) as exc:
        get_logger(__name__).warning("format arguments do not match", format=fmt, error=str(exc))
        return f"{fmt} %!(BADARGS={values!r})"
