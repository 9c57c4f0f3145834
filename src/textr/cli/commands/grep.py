"""Grep command - print lines matching a regular expression."""

import click

from ...core.streaming import find_lines
from ...models.config import GrepConfig
from ...models.errors import SourceError, TextrError
from ...sinks import open_sink
from ...sources import decode, expand_paths, open_source
from ..helpers import build_config, fail, warn


@click.command()
@click.argument("pattern")
@click.argument("files", nargs=-1)
@click.option(
    "-c", "--count", "show_count", is_flag=True, help="Print only a count of matches"
)
@click.option("-i", "--insensitive", is_flag=True, help="Case-insensitive matching")
@click.option("-v", "--invert-match", is_flag=True, help="Select non-matching lines")
@click.option("-r", "--recursive", is_flag=True, help="Search directories recursively")
def grep(pattern, files, show_count, insensitive, invert_match, recursive):
    """Search FILE(s) for lines matching PATTERN (a Python regex).

    With no FILE, or when FILE is -, read standard input. When more than
    one input is searched each line (or count) is prefixed with "FILE:".

    Examples:
        textr grep fox notes.txt         # Lines containing "fox"
        textr grep -i -c the *.txt       # Case-insensitive counts per file
        textr grep -r TODO src           # Walk a directory tree
    """
    try:
        config = build_config(
            GrepConfig,
            pattern=pattern,
            files=files,
            show_count=show_count,
            insensitive=insensitive,
            invert_match=invert_match,
            recursive=recursive,
        )
        regex = config.regex
        entries = list(expand_paths(config.files, config.recursive))
        show_names = len(entries) > 1

        with open_sink() as sink:
            for entry in entries:
                if isinstance(entry, SourceError):
                    warn(entry)
                    continue

                prefix = f"{entry}:" if show_names else ""
                try:
                    with open_source(entry) as source:
                        lines = (decode(line) for line in source.lines(keepends=True))
                        matches = find_lines(lines, regex, config.invert_match)
                        if config.show_count:
                            sink.writeln(f"{prefix}{sum(1 for _ in matches)}")
                        else:
                            for line in matches:
                                sink.write(prefix + line)
                except SourceError as e:
                    warn(e)

    except TextrError as e:
        fail(e)
