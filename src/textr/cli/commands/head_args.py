"""Head-args command - resolve head options without reading any file."""

import click

from ...models.errors import TextrError
from ..helpers import fail
from .head import bytes_option, lines_option, resolve_head_config


@click.command("head-args")
@click.argument("files", nargs=-1)
@lines_option
@bytes_option
def head_args(files, lines, bytes_):
    """Validate head options and print the resolved configuration as JSON.

    Files are listed but never opened.
    """
    try:
        config = resolve_head_config(files, lines, bytes_)
        click.echo(config.model_dump_json(indent=2))
    except TextrError as e:
        fail(e)
