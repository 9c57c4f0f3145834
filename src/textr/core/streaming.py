"""Line-stream transformers.

Each policy consumes a lazy sequence of lines (or bytes) and produces the
text a command writes:
- LineNumberer: cat-style numbering
- collapse_runs: uniq
- head_lines / head_bytes: first N lines or bytes
- tail_lines / tail_bytes: last N, or everything from N onwards
- count: wc totals
- cut_line: cut selections
- find_lines: grep matching

Nothing here opens files or writes output.
"""

from __future__ import annotations

import re
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import islice
from typing import Optional

from ..models.config import Extract, NumberingMode, TakeValue
from ..sources import decode


class LineNumberer:
    """Prefix lines with a running counter.

    The counter lives on the instance, so passing the same numberer over
    several files keeps numbering across them.

    Args:
        mode: "all" numbers every line, "nonblank" skips empty lines,
            "none" passes lines through unchanged
    """

    def __init__(self, mode: NumberingMode = "none"):
        self.mode = mode
        self.counter = 0

    def number(self, lines: Iterable[str]) -> Iterator[str]:
        for line in lines:
            if self.mode == "all" or (self.mode == "nonblank" and line):
                self.counter += 1
                yield f"{self.counter:>6}\t{line}"
            else:
                yield line


def _format_run(line: str, run_count: int, show_count: bool) -> str:
    if show_count:
        return f"{run_count:>4} {line}"
    return line


def collapse_runs(lines: Iterable[str], show_count: bool = False) -> Iterator[str]:
    """Collapse adjacent duplicate lines into one record per run.

    Lines are compared with surrounding whitespace stripped, but each run
    is emitted as its first line exactly as read (terminator included).
    A run is only emitted once the next different line arrives, or at the
    end of the input.

    Args:
        lines: Decoded lines, each keeping its trailing newline
        show_count: Prefix every record with its run length

    Yields:
        One formatted record per run
    """
    previous: Optional[str] = None
    run_count = 0

    for line in lines:
        if previous is not None and previous.strip() == line.strip():
            run_count += 1
            continue
        if previous is not None:
            yield _format_run(previous, run_count, show_count)
        previous = line
        run_count = 1

    # Empty input never produces a record
    if previous is not None:
        yield _format_run(previous, run_count, show_count)


def head_lines(lines: Iterable[bytes], n: int) -> Iterator[bytes]:
    """Yield at most the first ``n`` lines without reading past them."""
    return islice(lines, n)


def head_bytes(chunks: Iterable[bytes], limit: int) -> bytes:
    """Collect the first ``limit`` bytes of ``chunks``.

    Stops pulling chunks once the limit is reached, so the remaining input
    is never read.
    """
    buffer = bytearray()
    for chunk in chunks:
        buffer += chunk[: limit - len(buffer)]
        if len(buffer) >= limit:
            break
    return bytes(buffer)


def tail_lines(lines: Iterable[bytes], take: TakeValue) -> Iterator[bytes]:
    """Yield the lines selected by ``take``.

    ``+N`` starts at line N (1-based, ``+0`` is the whole input); a plain
    count keeps the last N lines in a bounded buffer.
    """
    if take.from_start:
        yield from islice(lines, max(take.count - 1, 0), None)
        return
    if take.count == 0:
        return

    buffer: deque[bytes] = deque(lines, maxlen=take.count)
    yield from buffer


def tail_bytes(data: bytes, take: TakeValue) -> bytes:
    """Return the bytes selected by ``take`` (see ``tail_lines``)."""
    if take.from_start:
        return data[max(take.count - 1, 0) :]
    if take.count == 0:
        return b""
    return data[-take.count :]


@dataclass(frozen=True)
class FileCounts:
    """Line, word, byte and character totals for one input."""

    num_lines: int = 0
    num_words: int = 0
    num_bytes: int = 0
    num_chars: int = 0

    def __add__(self, other: "FileCounts") -> "FileCounts":
        return FileCounts(
            num_lines=self.num_lines + other.num_lines,
            num_words=self.num_words + other.num_words,
            num_bytes=self.num_bytes + other.num_bytes,
            num_chars=self.num_chars + other.num_chars,
        )


def count(lines: Iterable[bytes]) -> FileCounts:
    """Count lines, words, bytes and characters.

    Args:
        lines: Raw lines with their terminators; an unterminated last
            line still counts as a line

    Returns:
        FileCounts for the whole input
    """
    num_lines = num_words = num_bytes = num_chars = 0
    for line in lines:
        text = decode(line)
        num_lines += 1
        num_words += len(text.split())
        num_bytes += len(line)
        num_chars += len(text)

    return FileCounts(
        num_lines=num_lines,
        num_words=num_words,
        num_bytes=num_bytes,
        num_chars=num_chars,
    )


def cut_line(line: bytes, extract: Extract, delimiter: str = "\t") -> str:
    """Select bytes, characters or fields from one line.

    Selections are concatenated in the order the positions were given;
    positions past the end of the line are skipped. Selected fields are
    joined back with ``delimiter``.

    Args:
        line: Raw line without its terminator
        extract: Kind of selection and its zero-based half-open ranges
        delimiter: Field separator, used only for field selection
    """
    if extract.kind == "bytes":
        return decode(b"".join(line[start:end] for start, end in extract.positions))

    text = decode(line)
    if extract.kind == "chars":
        return "".join(text[start:end] for start, end in extract.positions)

    fields = text.split(delimiter)
    selected = [
        field for start, end in extract.positions for field in fields[start:end]
    ]
    return delimiter.join(selected)


def find_lines(
    lines: Iterable[str], regex: re.Pattern, invert_match: bool = False
) -> Iterator[str]:
    """Yield lines that match ``regex`` (or that do not, with ``invert_match``)."""
    for line in lines:
        if bool(regex.search(line)) != invert_match:
            yield line
