"""Cut command - select bytes, characters or fields from each line."""

from typing import Optional

import click

from ...core.streaming import cut_line
from ...models.config import CutConfig, Extract, parse_positions
from ...models.errors import ArgumentError, SourceError, TextrError
from ...sinks import open_sink
from ...sources import open_source
from ..helpers import build_config, fail, warn


def resolve_extract(
    bytes_: Optional[str], chars: Optional[str], fields: Optional[str]
) -> Extract:
    """Pick the one selection mode given on the command line.

    Raises:
        ArgumentError: No mode, more than one mode, or a bad position list
    """
    given = [
        (kind, value)
        for kind, value in (("bytes", bytes_), ("chars", chars), ("fields", fields))
        if value is not None
    ]
    if not given:
        raise ArgumentError("Must have --fields, --bytes, or --chars")
    if len(given) > 1:
        raise ArgumentError("--bytes, --chars and --fields are mutually exclusive")

    kind, value = given[0]
    return Extract(kind=kind, positions=parse_positions(value))


@click.command()
@click.argument("files", nargs=-1)
@click.option(
    "-b", "--bytes", "bytes_", default=None, metavar="LIST", help="Selected bytes"
)
@click.option("-c", "--chars", default=None, metavar="LIST", help="Selected characters")
@click.option("-f", "--fields", default=None, metavar="LIST", help="Selected fields")
@click.option(
    "-d",
    "--delim",
    "delimiter",
    default="\t",
    metavar="DELIM",
    help="Field delimiter, a single byte [default: TAB]",
)
def cut(files, bytes_, chars, fields, delimiter):
    """Print selected parts of each line of FILE(s).

    LIST is a comma-separated list of 1-based positions or ranges, such
    as 1,3-5. Parts are printed in the order they are listed.

    Examples:
        textr cut -f 2 data.tsv          # Second tab-separated field
        textr cut -d , -f 1,3 data.csv   # First and third comma fields
        textr cut -c 1-8 notes.txt       # First eight characters
    """
    try:
        config = build_config(
            CutConfig,
            files=files,
            delimiter=delimiter,
            extract=resolve_extract(bytes_, chars, fields),
        )

        with open_sink() as sink:
            for name in config.files:
                try:
                    with open_source(name) as source:
                        for line in source.lines():
                            sink.writeln(
                                cut_line(line, config.extract, config.delimiter)
                            )
                except SourceError as e:
                    warn(e)

    except TextrError as e:
        fail(e)
