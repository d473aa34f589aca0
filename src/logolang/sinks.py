"""
Sink abstractions and concrete implementations.

A sink accepts the encoded bytes of one rendered line. It either records all of
them or fails, by raising or by reporting a short write.
"""

from __future__ import annotations

import io
import sys
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, BinaryIO, Literal, Optional, Protocol, runtime_checkable

StdStream = Literal["stdout", "stderr"]


@runtime_checkable
class Sink(Protocol):
    """Write destination. ``io.BytesIO`` and binary files qualify as-is."""

    def write(self, data: bytes) -> Optional[int]: ...


# =============================================================================
# Sink Abstraction
# =============================================================================


class BaseSink(ABC):
    """Abstract base class for logolang's own sinks."""

    @abstractmethod
    def write(self, data: bytes) -> Optional[int]:
        """Write ``data``. Returns the number of bytes written, or None for all of them."""
        ...

    def close(self) -> None:
        """Close the sink and release resources."""


class SafeSink(BaseSink):
    """Serializes writes to a sink that is not safe for concurrent use.

    Results and exceptions of the wrapped sink pass through unchanged.
    """

    def __init__(self, sink: Sink):
        self.sink = sink
        self._lock = threading.Lock()

    def write(self, data: bytes) -> Optional[int]:
        with self._lock:
            return self.sink.write(data)

    def close(self) -> None:
        close = getattr(self.sink, "close", None)
        if close is not None:
            with self._lock:
                close()

    def __repr__(self) -> str:
        return f"SafeSink({self.sink!r})"


class StreamSink(BaseSink):
    """Adapts a file-like object.

    Args:
        stream: Text or binary stream. Text streams (``io.TextIOBase``, or any
            non-binary stream with an ``encoding`` attribute) receive decoded text.
        encoding: Encoding used to decode for text streams.
        flush: Flush the stream after every write.
    """

    def __init__(self, stream: Any, *, encoding: str = "utf-8", flush: bool = True):
        self._stream = stream
        self._encoding = encoding
        self._flush = flush

    @property
    def stream(self) -> Any:
        return self._stream

    def write(self, data: bytes) -> Optional[int]:
        stream = self.stream
        if _is_text_stream(stream):
            stream.write(data.decode(self._encoding))
            written: Optional[int] = len(data)
        else:
            written = stream.write(data)
        if self._flush:
            stream.flush()
        return written

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._stream!r})"


def _is_text_stream(stream: Any) -> bool:
    """
    Text streams take ``str``. Besides ``io.TextIOBase`` this covers wrappers such
    as colorama's ``StreamWrapper`` that only expose an ``encoding`` attribute.
    """
    if isinstance(stream, io.TextIOBase):
        return True
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        return False
    return hasattr(stream, "encoding")


class StdioSink(StreamSink):
    """Writes to ``sys.stdout`` or ``sys.stderr``, looked up at every write."""

    def __init__(self, name: StdStream = "stdout"):
        if name not in ("stdout", "stderr"):
            raise ValueError(f"StdioSink expects 'stdout' or 'stderr', got {name!r}")
        super().__init__(None)
        self.name = name

    @property
    def stream(self) -> Any:
        return getattr(sys, self.name)

    def __repr__(self) -> str:
        return f"StdioSink({self.name!r})"


class FileSink(BaseSink):
    """Appends lines to a local file (no rotation)."""

    def __init__(self, path: str | Path):
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file: BinaryIO = open(self._path, "ab")

    @property
    def path(self) -> Path:
        return self._path

    def write(self, data: bytes) -> Optional[int]:
        written = self._file.write(data)
        self._file.flush()
        return written

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> "FileSink":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"FileSink({str(self._path)!r})"


def default_sinks() -> tuple[SafeSink, SafeSink]:
    """Fresh ``(stdout, stderr)`` sinks, each wrapped in a SafeSink."""
    return SafeSink(StdioSink("stdout")), SafeSink(StdioSink("stderr"))
