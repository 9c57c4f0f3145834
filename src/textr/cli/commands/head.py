"""Head command - output the first lines or bytes of files."""

from typing import Optional

import click

from ...core.streaming import head_bytes, head_lines
from ...models.config import HeadConfig, parse_positive_int
from ...models.errors import SourceError, TextrError
from ...sinks import OutputSink, open_sink
from ...sources import InputSource, decode, open_source
from ..helpers import banner, build_config, fail, warn

lines_option = click.option(
    "-n",
    "--lines",
    "lines",
    default=None,
    metavar="N",
    help="Number of lines to output [default: 10]",
)
bytes_option = click.option(
    "-c",
    "--bytes",
    "bytes_",
    default=None,
    metavar="N",
    help="Number of bytes to output (conflicts with --lines)",
)


def resolve_head_config(
    files: tuple, lines: Optional[str], bytes_: Optional[str]
) -> HeadConfig:
    """Validate head options into a HeadConfig.

    Raises:
        ArgumentError: Non-positive or non-numeric counts, or both bounds given
    """
    return build_config(
        HeadConfig,
        files=files,
        line_count=None if lines is None else parse_positive_int(lines, "line"),
        byte_count=None if bytes_ is None else parse_positive_int(bytes_, "byte"),
    )


def _write_head(source: InputSource, config: HeadConfig, sink: OutputSink) -> None:
    if config.byte_count is not None:
        # Decoded once, so a multibyte character cut by the bound is replaced
        sink.write(decode(head_bytes(source.units(), config.byte_count)))
        return

    for line in head_lines(source.lines(), config.line_count):
        sink.writeln(decode(line))


@click.command()
@click.argument("files", nargs=-1)
@lines_option
@bytes_option
def head(files, lines, bytes_):
    """Output the first part of FILE(s).

    With no FILE, or when FILE is -, read standard input. With more than
    one FILE, each is preceded by a "==> FILE <==" banner.

    Examples:
        textr head notes.txt             # First 10 lines
        textr head -n 3 a.txt b.txt      # First 3 lines of each, with banners
        textr head -c 100 notes.txt      # First 100 bytes

    Note:
        Input is read only as far as needed, so large files stop early.
    """
    try:
        config = resolve_head_config(files, lines, bytes_)
        show_banner = len(config.files) > 1

        with open_sink() as sink:
            for index, name in enumerate(config.files):
                try:
                    with open_source(name) as source:
                        if show_banner:
                            sink.writeln(banner(name, index))
                        _write_head(source, config, sink)
                except SourceError as e:
                    warn(e)

    except TextrError as e:
        fail(e)
