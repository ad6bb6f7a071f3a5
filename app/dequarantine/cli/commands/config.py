"""Config command implementation.

Shows, locates and initializes the dequarantine configuration file.
"""

from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from dequarantine.cli.types import get_config
from dequarantine.core.config import ConfigError, DequarantineConfig, save_config
from dequarantine.core.paths import get_config_path
from dequarantine.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or initialize configuration.",
    no_args_is_help=True,
)


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the effective configuration."""
    config = get_config(ctx)

    table = Table(
        title="Configuration",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Setting", style="bold")
    table.add_column("Value")

    for key, value in config.model_dump(mode="json").items():
        table.add_row(key, str(value))

    console.print(table)
    source = get_config_path()
    if source.exists():
        console.print(f"\n[dim]Loaded from {source}[/dim]")
    else:
        console.print("\n[dim]No config file, using defaults[/dim]")


@app.command()
def path() -> None:
    """Print the config file location."""
    typer.echo(str(get_config_path()))


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with default settings."""
    config_path = get_config_path()
    if config_path.exists() and not force:
        print_info(f"Config already exists: {config_path} (use --force to overwrite)")
        raise typer.Exit(code=0)

    try:
        saved = save_config(DequarantineConfig(), config_path)
    except ConfigError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")
