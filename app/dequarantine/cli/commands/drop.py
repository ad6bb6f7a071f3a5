"""Drop command.

Reads one dropped item per line from standard input (the form in which
terminals and file managers paste dragged files) and handles them as a
single drop gesture.
"""

from typing import Annotated

import typer
from rich.markup import escape

from dequarantine.cli.display import format_outcome, print_report, print_report_json
from dequarantine.cli.types import exit_for, get_config, get_service, is_quiet, resolve_format
from dequarantine.core.config import OutputFormat
from dequarantine.ingest.drop import DropSession, item_from_text
from dequarantine.models.outcome import OperationOutcome
from dequarantine.utils.formatting import console, print_warning


def drop(
    ctx: typer.Context,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be cleaned."),
    ] = False,
    output_format: Annotated[
        OutputFormat | None,
        typer.Option(
            "--format",
            "-f",
            help="Output format (defaults to the configured format).",
            case_sensitive=False,
        ),
    ] = None,
) -> None:
    """Dequarantine items dropped on standard input, one per line."""
    stdin = typer.get_text_stream("stdin")
    items = [item_from_text(line) for line in stdin if line.strip()]
    if not items:
        print_warning("Nothing was dropped.")
        return

    fmt = resolve_format(ctx, output_format)
    quiet = is_quiet(ctx)

    def show_progress(outcome: OperationOutcome) -> None:
        status, _ = format_outcome(outcome)
        console.print(f"{status} {escape(str(outcome.path))}")

    live = fmt == OutputFormat.TABLE and not quiet
    session = DropSession(
        get_service(dry_run=dry_run),
        max_resolvers=get_config(ctx).max_resolvers,
        on_outcome=show_progress if live else None,
    )
    result = session.handle(items)

    if fmt == OutputFormat.JSON:
        print_report_json(result)
    else:
        title = "Dropped Files (dry-run)" if dry_run else "Dropped Files"
        print_report(result, title, quiet=quiet)

    exit_for(ctx, result)
