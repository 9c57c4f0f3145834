"""Wc command - count lines, words, bytes and characters."""

import click

from ...core.streaming import FileCounts, count
from ...models.config import WcConfig
from ...models.errors import SourceError, TextrError
from ...sinks import open_sink
from ...sources import STDIN, open_source
from ..helpers import build_config, fail, warn


def format_counts(counts: FileCounts, config: WcConfig, name: str) -> str:
    """Render one wc row: selected counts at width 8, then the name."""
    fields = []
    if config.show_lines:
        fields.append(f"{counts.num_lines:>8}")
    if config.show_words:
        fields.append(f"{counts.num_words:>8}")
    if config.show_bytes:
        fields.append(f"{counts.num_bytes:>8}")
    if config.show_chars:
        fields.append(f"{counts.num_chars:>8}")

    suffix = "" if name == STDIN else f" {name}"
    return "".join(fields) + suffix


@click.command()
@click.argument("files", nargs=-1)
@click.option("-l", "--lines", "show_lines", is_flag=True, help="Show line count")
@click.option("-w", "--words", "show_words", is_flag=True, help="Show word count")
@click.option("-c", "--bytes", "show_bytes", is_flag=True, help="Show byte count")
@click.option(
    "-m",
    "--chars",
    "show_chars",
    is_flag=True,
    help="Show character count (conflicts with --bytes)",
)
def wc(files, show_lines, show_words, show_bytes, show_chars):
    """Print line, word and byte counts for each FILE.

    With no FILE, or when FILE is -, read standard input. With more than
    one FILE a final "total" row is printed.
    """
    try:
        config = build_config(
            WcConfig,
            files=files,
            show_lines=show_lines,
            show_words=show_words,
            show_bytes=show_bytes,
            show_chars=show_chars,
        )
        total = FileCounts()

        with open_sink() as sink:
            for name in config.files:
                try:
                    with open_source(name) as source:
                        counts = count(source.lines(keepends=True))
                except SourceError as e:
                    warn(e)
                    continue
                total += counts
                sink.writeln(format_counts(counts, config, name))

            if len(config.files) > 1:
                sink.writeln(format_counts(total, config, "total"))

    except TextrError as e:
        fail(e)
