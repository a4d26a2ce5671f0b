"""Configuration commands.

Inspect and initialize the rmup configuration file.
"""

from typing import Annotated

import typer
from rich.table import Table

from rmup.core.config import RmupConfig, load_config_or_default, save_config
from rmup.core.junk import JUNK_PATTERNS
from rmup.core.paths import ensure_config_dir, get_config_path
from rmup.errors import ConfigError
from rmup.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Inspect and initialize the configuration file.",
    no_args_is_help=True,
)


@app.command()
def path() -> None:
    """Print the configuration file path."""
    typer.echo(str(get_config_path()))


@app.command()
def show() -> None:
    """Show the effective configuration."""
    config_path = get_config_path()
    try:
        config = load_config_or_default(config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    source = str(config_path) if config_path.exists() else "built-in defaults"
    table = Table(title=f"Configuration ({source})", show_lines=False)
    table.add_column("Setting", style="bold")
    table.add_column("Value")

    for name, value in config.defaults.model_dump().items():
        table.add_row(f"defaults.{name}", str(value).lower())

    patterns = [*JUNK_PATTERNS, *config.junk.extra_patterns]
    table.add_row("junk.patterns", ", ".join(repr(p) for p in patterns))

    for name, value in config.colors.items():
        table.add_row(f"colors.{name}", value)

    console.print(table)


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with default settings."""
    config_path = get_config_path()
    if config_path.exists() and not force:
        print_info(f"Config already exists: {config_path} (use --force to overwrite)")
        raise typer.Exit(code=0)

    try:
        ensure_config_dir()
        saved = save_config(RmupConfig(), config_path)
    except (ConfigError, RuntimeError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")
