"""Cat command - concatenate files, optionally numbering lines."""

import click

from ...core.streaming import LineNumberer
from ...models.config import CatConfig
from ...models.errors import SourceError, TextrError
from ...sinks import open_sink
from ...sources import decode, open_source
from ..helpers import build_config, fail, warn


@click.command()
@click.argument("files", nargs=-1)
@click.option(
    "-n",
    "--number",
    "number_lines",
    is_flag=True,
    default=False,
    help="Number all output lines",
)
@click.option(
    "-b",
    "--number-nonblank",
    "number_nonblank_lines",
    is_flag=True,
    default=False,
    help="Number non-empty output lines",
)
def cat(files, number_lines, number_nonblank_lines):
    """Concatenate FILE(s) to standard output.

    With no FILE, or when FILE is -, read standard input.

    Examples:
        textr cat notes.txt todo.txt     # Both files, in order
        textr cat -n notes.txt           # Number every line
        printf '\\nfoo\\n' | textr cat -b   # Number only non-blank lines

    Line numbers continue across files. A file that cannot be opened is
    reported on stderr and skipped.
    """
    try:
        config = build_config(
            CatConfig,
            files=files,
            number_lines=number_lines,
            number_nonblank_lines=number_nonblank_lines,
        )
        numberer = LineNumberer(config.numbering)

        with open_sink() as sink:
            for name in config.files:
                try:
                    with open_source(name) as source:
                        lines = (decode(line) for line in source.lines())
                        for line in numberer.number(lines):
                            sink.writeln(line)
                except SourceError as e:
                    warn(e)

    except TextrError as e:
        fail(e)
