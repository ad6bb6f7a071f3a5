"""Clean and check commands.

Both commands treat their PATH arguments as one picker selection:
every path is validated first, then the whole batch is processed in
argument order.
"""

from typing import Annotated

import typer

from dequarantine.cli.display import print_report, print_report_json
from dequarantine.cli.types import exit_for, get_service, is_quiet, resolve_format
from dequarantine.core.config import OutputFormat
from dequarantine.ingest.picker import Selection, submit_selection

PathsArgument = Annotated[
    list[str],
    typer.Argument(help="Files to process (paths or file:// URLs).", show_default=False),
]

FormatOption = Annotated[
    OutputFormat | None,
    typer.Option(
        "--format",
        "-f",
        help="Output format (defaults to the configured format).",
        case_sensitive=False,
    ),
]


def clean(
    ctx: typer.Context,
    paths: PathsArgument,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be cleaned."),
    ] = False,
    output_format: FormatOption = None,
) -> None:
    """Remove the quarantine attribute from files."""
    service = get_service(dry_run=dry_run)
    result = submit_selection(Selection.of(paths), service)

    if resolve_format(ctx, output_format) == OutputFormat.JSON:
        print_report_json(result)
    else:
        title = "Dequarantine Results (dry-run)" if dry_run else "Dequarantine Results"
        print_report(result, title, quiet=is_quiet(ctx))

    exit_for(ctx, result)


def check(
    ctx: typer.Context,
    paths: PathsArgument,
    output_format: FormatOption = None,
) -> None:
    """Report which files carry the quarantine attribute, without changing them."""
    service = get_service(dry_run=True)
    result = submit_selection(Selection.of(paths), service)

    if resolve_format(ctx, output_format) == OutputFormat.JSON:
        print_report_json(result)
    else:
        print_report(result, "Quarantine Status", check_only=True, quiet=is_quiet(ctx))

    exit_for(ctx, result)
