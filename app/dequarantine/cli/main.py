"""Main CLI application entry point.

Defines the Typer application, global options and logging setup.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler
from rich.markup import escape

from dequarantine import __version__
from dequarantine.cli.commands import clean, config, drop
from dequarantine.core.config import ConfigError, DequarantineConfig, load_config
from dequarantine.utils.formatting import err_console, print_error, print_warning

# Create main Typer app
app = typer.Typer(
    name="dequarantine",
    help="Remove the quarantine attribute from downloaded files.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"dequarantine version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr through Rich.

    Per-file warnings are already shown as notifications, so only errors
    are logged unless --verbose is given.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


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
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
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
    """dequarantine - Remove the quarantine attribute from downloaded files.

    Pass files as arguments to [bold]clean[/bold], or pipe dropped
    items into [bold]drop[/bold].
    """
    configure_logging(verbose)

    try:
        settings = load_config()
    except ConfigError as e:
        # config subcommands must still work to repair a broken file
        if ctx.invoked_subcommand != "config":
            print_error(escape(str(e)))
            raise typer.Exit(code=1) from e
        print_warning(f"{escape(str(e))} (using defaults)")
        settings = DequarantineConfig()

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config"] = settings


# Register commands
app.command(name="clean")(clean.clean)
app.command(name="check")(clean.check)
app.command(name="drop")(drop.drop)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
