"""Output side of every filter: stdout or a single created file."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Optional, TextIO

from .models.errors import SinkError, describe_os_error
from .sources import STDIN


class OutputSink:
    """Writes already formatted text to a buffered text stream.

    Nothing is flushed per write; ``open_sink`` flushes once when the
    sink's block exits.
    """

    def __init__(self, name: str, stream: TextIO):
        self.name = name
        self._stream = stream

    def write(self, text: str) -> None:
        if not text:
            return
        try:
            self._stream.write(text)
        except OSError as exc:
            raise SinkError(self.name, describe_os_error(exc)) from exc

    def writeln(self, text: str = "") -> None:
        self.write(text + "\n")

    def flush(self) -> None:
        try:
            self._stream.flush()
        except OSError as exc:
            raise SinkError(self.name, describe_os_error(exc)) from exc


@contextmanager
def open_sink(path: Optional[str] = None) -> Iterator[OutputSink]:
    """Yield a sink for ``path``; ``None`` or ``-`` means standard output.

    Standard output is resolved when the sink opens and is flushed, not
    closed, on exit. A file destination is created (or truncated) once,
    before anything is written, and closed when the block exits.

    Raises:
        SinkError: The destination cannot be created, written or flushed
    """
    if path is None or path == STDIN:
        sink = OutputSink(STDIN, sys.stdout)
        try:
            yield sink
        finally:
            sink.flush()
        return

    try:
        handle = open(path, "w", encoding="utf-8", newline="")
    except OSError as exc:
        raise SinkError(path, describe_os_error(exc)) from exc

    with handle:
        sink = OutputSink(path, handle)
        try:
            yield sink
        finally:
            sink.flush()


__all__ = ["OutputSink", "open_sink"]
