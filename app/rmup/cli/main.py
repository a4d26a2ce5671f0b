"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer

from rmup import __version__
from rmup.cli.commands import config, rm
from rmup.utils.logging import setup_logging

# Create main Typer app
app = typer.Typer(
    name="rmup",
    help="Delete files or directories together with their empty parents.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"rmup version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            help="Enable debug logging.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """rmup - Delete paths and walk upward removing emptied parents.

    Each deleted path takes its now-empty ancestor directories with it,
    up to (but never including) the stop directory.
    """
    setup_logging(logging.DEBUG if debug else logging.WARNING)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    ctx.obj["quiet"] = quiet


# Register commands
app.command(name="rm")(rm.rm)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
