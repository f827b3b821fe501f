"""CLI subcommands registered on the shared typer app."""
