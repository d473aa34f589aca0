"""
Format templates.

A format string such as ``"[%YYYY%-%MM%-%DD% %hh%:%mm%:%ss%] %LEVEL%: %MESSAGE%"``
is compiled once into a tuple of segments. Rendering walks the segments and
never parses again.

Directives:
    %YYYY%    = current year (4 digits)
    %MM%      = current month (2 digits)
    %DD%      = current day of the month (2 digits)
    %hh%      = current hour (2 digits)
    %mm%      = current minute (2 digits)
    %ss%      = current second (2 digits)
    %ns%      = current nanosecond of the second (9 digits)
    %LEVEL%   = level name
    %MESSAGE% = message

Any other ``%X%`` sequence renders as ``X``. There is no escape for a literal ``%``.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Callable, Dict, FrozenSet, NamedTuple, Optional, Protocol, Tuple, Union, runtime_checkable

from .diagnostics import get_logger

ESCAPE_CHAR = "%"

DEFAULT_FORMAT = "[%YYYY%-%MM%-%DD% %hh%:%mm%:%ss%] %LEVEL%: %MESSAGE%"

Clock = Callable[[], int]


class Directive(Enum):
    """Placeholders recognised between two ``%`` delimiters."""

    YEAR = "YYYY"
    MONTH = "MM"
    DAY = "DD"
    HOUR = "hh"
    MINUTE = "mm"
    SECOND = "ss"
    NANOSECOND = "ns"
    LEVEL = "LEVEL"
    MESSAGE = "MESSAGE"


_TOKENS: Dict[str, Directive] = {d.value: d for d in Directive}

TIME_DIRECTIVES: FrozenSet[Directive] = frozenset(Directive) - {Directive.LEVEL, Directive.MESSAGE}

Segment = Union[str, Directive]


class Instant(NamedTuple):
    """Broken-down local time used while rendering one line."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    nanosecond: int

    @classmethod
    def from_ns(cls, epoch_ns: int) -> "Instant":
        seconds, nanosecond = divmod(epoch_ns, 1_000_000_000)
        tm = time.localtime(seconds)
        return cls(tm.tm_year, tm.tm_mon, tm.tm_mday, tm.tm_hour, tm.tm_min, tm.tm_sec, nanosecond)

    @classmethod
    def from_datetime(cls, dt: datetime) -> "Instant":
        return cls(dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second, dt.microsecond * 1000)


_RENDERERS: Dict[Directive, Callable[[Optional[Instant], str, str], str]] = {
    Directive.YEAR: lambda t, level, msg: f"{t.year:04d}",
    Directive.MONTH: lambda t, level, msg: f"{t.month:02d}",
    Directive.DAY: lambda t, level, msg: f"{t.day:02d}",
    Directive.HOUR: lambda t, level, msg: f"{t.hour:02d}",
    Directive.MINUTE: lambda t, level, msg: f"{t.minute:02d}",
    Directive.SECOND: lambda t, level, msg: f"{t.second:02d}",
    Directive.NANOSECOND: lambda t, level, msg: f"{t.nanosecond:09d}",
    Directive.LEVEL: lambda t, level, msg: level,
    Directive.MESSAGE: lambda t, level, msg: msg,
}


# =============================================================================
# Formatter Abstraction
# =============================================================================


@runtime_checkable
class Formatter(Protocol):
    """Anything that turns a level name and a message into one line of text."""

    def render(self, level_name: str, message: str) -> str: ...


class FunctionFormatter:
    """Adapts a plain ``(level_name, message) -> str`` callable to ``Formatter``."""

    def __init__(self, func: Callable[[str, str], str]):
        self._func = func

    def render(self, level_name: str, message: str) -> str:
        return self._func(level_name, message)

    def __repr__(self) -> str:
        return f"FunctionFormatter({self._func!r})"


# =============================================================================
# Compiled Template
# =============================================================================


@dataclass(frozen=True)
class Template:
    """Compiled format string. Immutable and safe to share between threads."""

    source: str
    segments: Tuple[Segment, ...]
    clock: Clock = field(default=time.time_ns, compare=False, repr=False)
    uses_time: bool = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "uses_time", not self.directives.isdisjoint(TIME_DIRECTIVES))

    @classmethod
    def compile(cls, fmt: str, *, clock: Clock = time.time_ns) -> "Template":
        return compile_template(fmt, clock=clock)

    @property
    def directives(self) -> FrozenSet[Directive]:
        return frozenset(s for s in self.segments if isinstance(s, Directive))

    def render(self, level_name: str, message: str, now: Optional[datetime] = None) -> str:
        """Render one line (without trailing newline)."""
        instant: Optional[Instant] = None
        if now is not None:
            instant = Instant.from_datetime(now)
        elif self.uses_time:
            instant = Instant.from_ns(self.clock())

        parts = []
        for segment in self.segments:
            if isinstance(segment, Directive):
                parts.append(_RENDERERS[segment](instant, level_name, message))
            else:
                parts.append(segment)
        return "".join(parts)


def compile_template(fmt: str, *, clock: Clock = time.time_ns) -> Template:
    """
    Compile a format string.

    Pieces at even positions of ``fmt.split("%")`` are literal text. Pieces at odd
    positions become directives when they match a known token and literal text
    otherwise.
    """
    segments: list[Segment] = []
    literal: list[str] = []

    for index, piece in enumerate(fmt.split(ESCAPE_CHAR)):
        directive = _TOKENS.get(piece) if index % 2 else None
        if directive is None:
            if index % 2 and piece:
                get_logger(__name__).debug("unknown directive rendered as literal", token=piece, format=fmt)
            literal.append(piece)
            continue
        text = "".join(literal)
        if text:
            segments.append(text)
        literal = []
        segments.append(directive)

    tail = "".join(literal)
    if tail:
        segments.append(tail)

    return Template(source=fmt, segments=tuple(segments), clock=clock)
