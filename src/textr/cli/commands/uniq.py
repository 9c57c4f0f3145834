"""Uniq command - collapse adjacent duplicate lines."""

import click

from ...core.streaming import collapse_runs
from ...models.config import UniqConfig
from ...models.errors import TextrError
from ...sinks import open_sink
from ...sources import decode, open_source
from ..helpers import build_config, fail


@click.command()
@click.argument("in_file", required=False, default="-")
@click.argument("out_file", required=False)
@click.option(
    "-c",
    "--count",
    "show_count",
    is_flag=True,
    default=False,
    help="Prefix lines by the number of occurrences",
)
def uniq(in_file, out_file, show_count):
    """Filter adjacent matching lines from IN_FILE, writing to OUT_FILE.

    IN_FILE defaults to standard input and OUT_FILE to standard output.
    Lines match when they are equal after stripping surrounding
    whitespace; the first line of each run is written as it was read.

    Examples:
        textr uniq words.txt             # Drop repeated lines
        textr uniq -c words.txt          # "   2 a" style counts
        sort words.txt | textr uniq - out.txt
    """
    try:
        config = build_config(
            UniqConfig, in_file=in_file, out_file=out_file, show_count=show_count
        )

        with open_source(config.in_file) as source, open_sink(config.out_file) as sink:
            lines = (decode(line) for line in source.lines(keepends=True))
            for record in collapse_runs(lines, config.show_count):
                sink.write(record)

    except TextrError as e:
        fail(e)
