"""CLI package for rmup.

This package contains the Typer application and all subcommands.
"""

from rmup.cli.main import app

__all__ = ["app"]
