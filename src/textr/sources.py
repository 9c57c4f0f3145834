"""Input side of every filter: stdin or named files as raw byte streams.

An ``InputSource`` wraps one binary stream and offers the access modes the
transformers need. Nothing here decodes content except ``decode``, which
is lossy and never raises.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Union

from .models.errors import SourceError, SourceNotFoundError, describe_os_error

STDIN = "-"
NEWLINE = b"\n"


def decode(data: bytes) -> str:
    """Decode bytes as UTF-8, replacing invalid sequences."""
    return data.decode("utf-8", errors="replace")


class InputSource:
    """One opened input, file-backed or stdin-backed."""

    def __init__(self, name: str, stream: BinaryIO):
        self.name = name
        self._stream = stream

    def lines(self, keepends: bool = False) -> Iterator[bytes]:
        """Yield lines split on ``\\n``.

        The delimiter is dropped unless ``keepends`` is set. A final line
        without a delimiter is still yielded. Reading is lazy, so a
        consumer that stops early leaves the rest of the input unread.
        """
        for line in self._read_guarded(iter(self._stream)):
            if not keepends and line.endswith(NEWLINE):
                line = line[:-1]
            yield line

    def units(self) -> Iterator[bytes]:
        """Yield every line re-terminated with ``\\n``.

        The final fragment gains a newline even when the input has none.
        """
        for line in self.lines():
            yield line + NEWLINE

    def read(self) -> bytes:
        """Return all remaining bytes."""
        return b"".join(self._read_guarded(iter(lambda: self._stream.read(65536), b"")))

    def _read_guarded(self, chunks: Iterator[bytes]) -> Iterator[bytes]:
        try:
            yield from chunks
        except OSError as exc:
            raise SourceError(self.name, describe_os_error(exc)) from exc


@contextmanager
def open_source(name: str) -> Iterator[InputSource]:
    """Open ``name`` for binary reading; ``-`` means standard input.

    Standard input is never closed here. Files are closed when the block
    exits, including early exits from bounded reads.

    Raises:
        SourceNotFoundError: The file does not exist
        SourceError: Any other failure to open the file
    """
    if name == STDIN:
        yield InputSource(name, sys.stdin.buffer)
        return

    try:
        handle = open(name, "rb")
    except FileNotFoundError as exc:
        raise SourceNotFoundError(name, describe_os_error(exc)) from exc
    except OSError as exc:
        raise SourceError(name, describe_os_error(exc)) from exc

    with handle:
        yield InputSource(name, handle)


def expand_paths(
    names: Iterable[str], recursive: bool = False
) -> Iterator[Union[str, SourceError]]:
    """Resolve input names, walking directories when ``recursive`` is set.

    Files found under a directory come out in sorted order. A directory
    given without ``recursive`` is yielded as a SourceError in its place,
    so callers report problems in argument order. Missing files pass
    through and fail later in ``open_source``.
    """
    for name in names:
        path = Path(name)
        if name == STDIN or not path.is_dir():
            yield name
        elif not recursive:
            yield SourceError(name, "Is a directory")
        else:
            for child in sorted(path.rglob("*")):
                if child.is_file():
                    yield str(child)


__all__ = ["InputSource", "STDIN", "decode", "expand_paths", "open_source"]
