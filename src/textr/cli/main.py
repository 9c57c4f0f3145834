"""textr CLI main entry point."""

import click

from .. import __version__


@click.group()
@click.version_option(__version__, prog_name="textr")
def cli():
    """textr - classic Unix text filters over line streams."""


# Register commands at module level so tests can import cli with commands attached
from .commands.cat import cat
from .commands.cut import cut
from .commands.grep import grep
from .commands.head import head
from .commands.head_args import head_args
from .commands.tail import tail
from .commands.uniq import uniq
from .commands.wc import wc

cli.add_command(cat)
cli.add_command(uniq)
cli.add_command(head)
cli.add_command(head_args)
cli.add_command(tail)
cli.add_command(wc)
cli.add_command(cut)
cli.add_command(grep)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
