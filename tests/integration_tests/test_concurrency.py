"""
Concurrent emission through shared SafeSinks.
"""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor

from logolang.levels import Level
from logolang.logger import Logger
from logolang.sinks import SafeSink

N_THREADS = 32


class ByteByByteSink:
    """Unsafe sink: writes one byte at a time and yields in between."""

    def __init__(self) -> None:
        self.buffer = bytearray()
        self.active = 0
        self.max_active = 0

    def write(self, data: bytes) -> int:
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        for byte in data:
            self.buffer.append(byte)
            time.sleep(0)
        self.active -= 1
        return len(data)


def _run_concurrently(logger: Logger, n: int) -> None:
    barrier = threading.Barrier(n)

    def emit(i: int) -> None:
        barrier.wait()
        logger.info(f"message {i:03d}")

    with ThreadPoolExecutor(max_workers=n) as pool:
        list(pool.map(emit, range(n)))


def test_concurrent_lines_do_not_interleave() -> None:
    raw = ByteByByteSink()
    sink = SafeSink(raw)
    logger = Logger(debug=sink, info=sink, error=sink, critical=sink, level=Level.INFO, color=False)

    _run_concurrently(logger, N_THREADS)

    lines = bytes(raw.buffer).decode("utf-8").splitlines()
    assert len(lines) == N_THREADS
    assert raw.max_active == 1
    messages = sorted(line.rsplit("INFO: ", 1)[1] for line in lines)
    assert messages == [f"message {i:03d}" for i in range(N_THREADS)]


def test_shared_template_across_levels_and_threads() -> None:
    raw = ByteByByteSink()
    sink = SafeSink(raw)
    logger = Logger(
        debug=sink, info=sink, error=sink, critical=sink, fmt="%LEVEL%:%MESSAGE%", level=Level.DEBUG, color=True
    )
    emitters = [logger.debug, logger.info, logger.error, logger.critical]

    def emit(i: int) -> None:
        emitters[i % 4](str(i))

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(emit, range(200)))

    lines = bytes(raw.buffer).decode("utf-8").splitlines()
    assert len(lines) == 200
    names = {Level.DEBUG: 0, Level.INFO: 1, Level.ERROR: 2, Level.CRITICAL: 3}
    for line in lines:
        label, number = line.rsplit(":", 1)
        level = Level[label.split("m", 1)[1].split("\x1b", 1)[0]]
        assert label == level.label(color=True)
        assert int(number) % 4 == names[level]
