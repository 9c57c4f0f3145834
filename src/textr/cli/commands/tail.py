"""Tail command - output the last lines or bytes of files."""

import click

from ...core.streaming import tail_bytes, tail_lines
from ...models.config import TailConfig, TakeValue
from ...models.errors import SourceError, TextrError
from ...sinks import open_sink
from ...sources import decode, open_source
from ..helpers import banner, build_config, fail, warn


@click.command()
@click.argument("files", nargs=-1)
@click.option(
    "-n",
    "--lines",
    "lines",
    default=None,
    metavar="N",
    help="Last N lines, or +N to start at line N [default: 10]",
)
@click.option(
    "-c",
    "--bytes",
    "bytes_",
    default=None,
    metavar="N",
    help="Last N bytes, or +N to start at byte N (conflicts with --lines)",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    default=False,
    help="Never print file name banners",
)
def tail(files, lines, bytes_, quiet):
    """Output the last part of FILE(s).

    With no FILE, or when FILE is -, read standard input.

    Examples:
        textr tail notes.txt             # Last 10 lines
        textr tail -n +5 notes.txt       # From line 5 to the end
        textr tail -c 20 a.txt b.txt     # Last 20 bytes of each, with banners
        textr tail -q -n 1 a.txt b.txt   # No banners
    """
    try:
        config = build_config(
            TailConfig,
            files=files,
            line_count=None if lines is None else TakeValue.parse(lines, "line"),
            byte_count=None if bytes_ is None else TakeValue.parse(bytes_, "byte"),
            quiet=quiet,
        )
        show_banner = not config.quiet and len(config.files) > 1

        with open_sink() as sink:
            for index, name in enumerate(config.files):
                try:
                    with open_source(name) as source:
                        if show_banner:
                            sink.writeln(banner(name, index))
                        if config.byte_count is not None:
                            taken = tail_bytes(source.read(), config.byte_count)
                            sink.write(decode(taken))
                        else:
                            lines_out = tail_lines(
                                source.lines(keepends=True), config.line_count
                            )
                            for line in lines_out:
                                sink.write(decode(line))
                except SourceError as e:
                    warn(e)

    except TextrError as e:
        fail(e)
