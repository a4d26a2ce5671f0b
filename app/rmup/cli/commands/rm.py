"""Remove command implementation.

Deletes the given paths and walks upward removing every parent directory
that became empty, stopping below the stop directory.
"""

import asyncio
import json
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from rmup.api import RemovalReport, remove_upward_report
from rmup.core.config import RmupConfig, load_config_or_default
from rmup.core.options import RunOptions
from rmup.errors import ConfigError, DeletionError
from rmup.utils.formatting import (
    console,
    create_deletion_table,
    print_error,
    print_info,
    print_success,
)


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    PLAIN = "plain"
    JSON = "json"


def rm(
    ctx: typer.Context,
    paths: Annotated[
        list[str],
        typer.Argument(help="Files or directories to delete.", show_default=False),
    ],
    cwd: Annotated[
        Path | None,
        typer.Option("--cwd", help="Base directory for relative paths [default: current]."),
    ] = None,
    stop: Annotated[
        Path | None,
        typer.Option(
            "--stop",
            "-s",
            help="Stop directory, never deleted [default: cwd].",
        ),
    ] = None,
    force: Annotated[
        bool | None,
        typer.Option(
            "--force/--no-force",
            "-f/-F",
            help="Ignore targets that do not exist or are not directories.",
            show_default=False,
        ),
    ] = None,
    delete_initial: Annotated[
        bool | None,
        typer.Option(
            "--delete-initial/--keep-initial",
            "-d/-D",
            help="Delete the targets themselves even if they are files or non-empty.",
            show_default=False,
        ),
    ] = None,
    verbose: Annotated[
        bool | None,
        typer.Option(
            "--verbose/--no-verbose",
            help="Report every deleted file and directory.",
            show_default=False,
        ),
    ] = None,
    absolute: Annotated[
        bool | None,
        typer.Option(
            "--absolute/--relative",
            help="Report absolute paths instead of paths relative to cwd.",
            show_default=False,
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", "-n", help="Show what would be deleted."),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            help="Output format: table, plain or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Delete paths and their empty parent directories.

    Flags not given on the command line fall back to the [defaults] table
    of the config file.

    Examples:
        rmup rm build/cache/tmp              # Delete tmp if empty, then empty parents
        rmup rm -d build/out.log             # Delete a file and its emptied parents
        rmup rm -f missing/dir --dry-run     # Preview without deleting
        rmup rm a/b c/d --stop a --format json
    """
    quiet = bool(ctx.obj and ctx.obj.get("quiet"))
    settings = _load_settings()
    defaults = settings.defaults

    options = RunOptions(
        cwd=str(cwd) if cwd else "",
        stop=str(stop) if stop else "",
        force=defaults.force if force is None else force,
        delete_initial=defaults.delete_initial if delete_initial is None else delete_initial,
        dry=dry_run,
        verbose=defaults.verbose if verbose is None else verbose,
        relative=defaults.relative if absolute is None else not absolute,
        extra_junk=tuple(settings.junk.extra_patterns),
    )

    try:
        report = asyncio.run(remove_upward_report(paths, options))
    except DeletionError as e:
        for failure in e.failures:
            print_error(f"Failed to delete {failure.path}: {failure.error}")
        raise typer.Exit(code=1) from e
    except OSError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if output_format == OutputFormat.JSON:
        _print_json(report)
        return

    if output_format == OutputFormat.PLAIN:
        for path in report.paths:
            typer.echo(path)
        return

    _print_table(report, quiet)


# === Private helper functions ===


def _load_settings() -> RmupConfig:
    """Load the config file, exiting with an error if it is invalid."""
    try:
        return load_config_or_default()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def _print_table(report: RemovalReport, quiet: bool) -> None:
    """Display deleted paths as a Rich table followed by a summary."""
    if not report.deleted:
        if not quiet:
            print_info("Nothing to delete.")
        return

    title = "Paths to Delete (dry-run)" if report.dry_run else "Deleted Paths"
    table = create_deletion_table(title)
    for entry in report.deleted:
        kind = "[directory]dir[/]" if entry.is_directory else "[file]file[/]"
        table.add_row(kind, entry.path)
    console.print(table)

    if quiet:
        return
    count = len(report.deleted)
    if report.dry_run:
        print_info(f"Dry-run: {count} path(s) would be deleted.")
    else:
        print_success(f"Deleted {count} path(s).")


def _print_json(report: RemovalReport) -> None:
    """Display deleted paths as JSON."""
    data = {
        "dry_run": report.dry_run,
        "deleted": [
            {
                "path": entry.path,
                "type": "directory" if entry.is_directory else "file",
            }
            for entry in report.deleted
        ],
    }
    console.print_json(json.dumps(data))
