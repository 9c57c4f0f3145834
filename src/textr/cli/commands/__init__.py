"""textr subcommands, one module per command."""
