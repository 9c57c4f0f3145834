"""Core line-stream transformers."""

from .streaming import (
    FileCounts,
    LineNumberer,
    collapse_runs,
    count,
    cut_line,
    find_lines,
    head_bytes,
    head_lines,
    tail_bytes,
    tail_lines,
)

__all__ = [
    "FileCounts",
    "LineNumberer",
    "collapse_runs",
    "count",
    "cut_line",
    "find_lines",
    "head_bytes",
    "head_lines",
    "tail_bytes",
    "tail_lines",
]
