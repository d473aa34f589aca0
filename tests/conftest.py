import io
import logging
import typing as t
from datetime import datetime

import pytest

from logolang import default as default_module
from logolang import diagnostics
from logolang.levels import Level
from logolang.logger import Logger
from logolang.sinks import SafeSink

PLAIN_FORMAT = "%LEVEL% %MESSAGE%"


class ListSink:
    """Sink that keeps every write as a separate chunk."""

    def __init__(self) -> None:
        self.chunks: list[bytes] = []

    def write(self, data: bytes) -> int:
        self.chunks.append(data)
        return len(data)

    @property
    def text(self) -> str:
        return b"".join(self.chunks).decode("utf-8")

    @property
    def lines(self) -> list[str]:
        return self.text.splitlines()


class FailingSink:
    """Sink whose every write raises the given exception."""

    def __init__(self, exc: BaseException) -> None:
        self.exc = exc

    def write(self, data: bytes) -> int:
        raise self.exc


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """
    Keep LOGOLANG_* variables and stray .env files out of every test, and restore
    the process-wide state touched by logolang.
    """
    import os

    for key in list(os.environ):
        if key.startswith("LOGOLANG_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(default_module, "_default_logger", None)
    monkeypatch.setattr(diagnostics, "_level", logging.WARNING)
    yield


@pytest.fixture
def list_sink() -> ListSink:
    return ListSink()


@pytest.fixture
def list_sink_factory() -> t.Callable[[], ListSink]:
    return ListSink


@pytest.fixture
def failing_sink_factory() -> t.Callable[[BaseException], FailingSink]:
    return FailingSink


@pytest.fixture
def memory_sink() -> t.Tuple[SafeSink, io.BytesIO]:
    buffer = io.BytesIO()
    return SafeSink(buffer), buffer


@pytest.fixture
def plain_format() -> str:
    """Timestamp-free format so rendered lines can be compared exactly."""
    return PLAIN_FORMAT


@pytest.fixture
def plain_logger(list_sink) -> Logger:
    """DEBUG-level, colorless logger writing every level to one ListSink."""
    return Logger(
        debug=list_sink,
        info=list_sink,
        error=list_sink,
        critical=list_sink,
        fmt=PLAIN_FORMAT,
        level=Level.DEBUG,
        color=False,
    )


@pytest.fixture
def frozen_now() -> datetime:
    return datetime(2024, 3, 5, 7, 8, 9, 123456)
