"""CLI commands for rmup.

This package contains all subcommand implementations.
"""

from rmup.cli.commands import config, rm

__all__ = ["config", "rm"]
