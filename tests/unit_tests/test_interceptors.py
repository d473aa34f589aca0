"""
Standard library bridge tests.
"""

from __future__ import annotations

import logging

import pytest

from logolang.exceptions import SinkWriteError
from logolang.interceptors import LogolangHandler, install_handler, map_stdlib_level
from logolang.levels import Level
from logolang.logger import Logger


@pytest.fixture
def stdlib_logger():
    """Isolated stdlib logger; handlers are removed afterwards."""
    lg = logging.getLogger("logolang.tests.interceptors")
    lg.setLevel(logging.DEBUG)
    lg.propagate = False
    yield lg
    lg.handlers = []


def _logger(sink, level=Level.DEBUG) -> Logger:
    return Logger(debug=sink, info=sink, error=sink, critical=sink, fmt="%LEVEL% %MESSAGE%", level=level, color=False)


@pytest.mark.parametrize(
    "levelno, expected",
    [
        (logging.CRITICAL, Level.CRITICAL),
        (logging.CRITICAL + 5, Level.CRITICAL),
        (logging.ERROR, Level.ERROR),
        (logging.WARNING, Level.INFO),
        (logging.INFO, Level.INFO),
        (logging.DEBUG, Level.DEBUG),
        (5, Level.DEBUG),
    ],
)
def test_map_stdlib_level(levelno, expected) -> None:
    assert map_stdlib_level(levelno) is expected


class TestLogolangHandler:
    def test_routes_records(self, stdlib_logger, list_sink) -> None:
        handler = install_handler(_logger(list_sink), stdlib_logger.name)
        assert handler in stdlib_logger.handlers

        stdlib_logger.warning("careful %s", "now")
        stdlib_logger.debug("details")
        stdlib_logger.critical("down")

        assert list_sink.lines == ["INFO careful now", "DEBUG details", "CRITICAL down"]

    def test_logolang_level_gates_records(self, stdlib_logger, list_sink) -> None:
        install_handler(_logger(list_sink, level=Level.ERROR), stdlib_logger.name)

        stdlib_logger.info("dropped")
        stdlib_logger.error("kept")

        assert list_sink.lines == ["ERROR kept"]

    def test_handler_formatter_is_applied(self, stdlib_logger, list_sink) -> None:
        handler = LogolangHandler(_logger(list_sink))
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        stdlib_logger.addHandler(handler)

        stdlib_logger.info("hi")

        assert list_sink.lines == [f"INFO {stdlib_logger.name}: hi"]

    def test_bad_record_goes_to_handle_error(self, stdlib_logger, list_sink, monkeypatch) -> None:
        handler = install_handler(_logger(list_sink), stdlib_logger.name)
        errors = []
        monkeypatch.setattr(handler, "handleError", lambda record: errors.append(record))

        stdlib_logger.info("%d", "not a number")

        assert list_sink.chunks == []
        assert len(errors) == 1

    def test_fatal_write_failure_propagates(self, stdlib_logger, failing_sink_factory) -> None:
        install_handler(_logger(failing_sink_factory(OSError("gone"))), stdlib_logger.name)
        with pytest.raises(SinkWriteError):
            stdlib_logger.error("lost")

    def test_unexpected_sink_error_is_not_handled(self, stdlib_logger, failing_sink_factory, monkeypatch) -> None:
        """Sink failures skip handleError and reach the caller"""
        handler = install_handler(_logger(failing_sink_factory(RuntimeError("gone"))), stdlib_logger.name)
        errors = []
        monkeypatch.setattr(handler, "handleError", lambda record: errors.append(record))

        with pytest.raises(SinkWriteError):
            stdlib_logger.critical("lost")
        assert errors == []
