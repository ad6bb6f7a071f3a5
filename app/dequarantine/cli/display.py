"""Shared Rich display functions for ingestion results.

Renders outcome tables, notification panels and summaries for the
clean, check and drop commands.
"""

import json

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from dequarantine.ingest.report import IngestReport
from dequarantine.models.notification import Notification
from dequarantine.models.outcome import BatchReport, OperationOutcome, OutcomeKind
from dequarantine.utils.formatting import console, err_console, print_success, print_warning


def format_outcome(outcome: OperationOutcome, check_only: bool = False) -> tuple[str, str]:
    """Format an outcome as a (status, details) pair with Rich markup.

    Args:
        outcome: Outcome to format.
        check_only: Word statuses as a marker check instead of a removal.

    Returns:
        Tuple of status markup and details text.
    """
    if outcome.kind == OutcomeKind.FAILED:
        return "[error]failed[/]", escape(outcome.reason or "Unknown error")
    if outcome.kind == OutcomeKind.NOT_MARKED:
        return "[muted]not marked[/]", ""
    if check_only:
        return "[warning]quarantined[/]", ""
    if outcome.dry_run:
        return "[info]dry-run[/]", "Would remove quarantine attribute"
    return "[success]cleaned[/]", ""


def create_outcomes_table(report: BatchReport, title: str, check_only: bool = False) -> Table:
    """Create a Rich table with one row per outcome."""
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", style="bold")
    table.add_column("Status", width=12)
    table.add_column("Details", style="dim")

    for outcome in report:
        status, details = format_outcome(outcome, check_only=check_only)
        table.add_row(escape(str(outcome.path)), status, details)

    return table


def create_notification_panel(notification: Notification) -> Panel:
    """Create an error panel for a notification."""
    lines = [escape(notification.message)]
    if notification.path:
        lines.append(f"[muted]File:[/] {escape(notification.path)}")
    if notification.detail:
        lines.append(f"The following error text was generated: {escape(notification.detail)}")
    return Panel(
        "\n".join(lines),
        title=f"[error]Error: {notification.title}[/]",
        border_style="error",
        expand=False,
    )


def print_notifications(notifications: tuple[Notification, ...]) -> None:
    """Print every notification to stderr."""
    for notification in notifications:
        err_console.print(create_notification_panel(notification))


def print_summary(report: BatchReport, check_only: bool = False) -> None:
    """Print a one-line summary of a batch."""
    if not len(report):
        print_warning("No files were processed.")
        return

    if check_only:
        quarantined = report.cleaned_count
        console.print(
            f"\n[dim]{quarantined} quarantined, {report.not_marked_count} not marked, "
            f"{report.failed_count} failed[/dim]"
        )
        return

    if report.has_failures:
        print_warning(
            f"{report.cleaned_count} cleaned, {report.not_marked_count} not marked, "
            f"{report.failed_count} failed"
        )
    else:
        print_success(
            f"All {len(report)} file(s) processed: {report.cleaned_count} cleaned, "
            f"{report.not_marked_count} not marked."
        )


def print_report(
    result: IngestReport,
    title: str,
    check_only: bool = False,
    quiet: bool = False,
) -> None:
    """Print an ingestion report as table, notifications and summary."""
    if len(result.report):
        console.print(create_outcomes_table(result.report, title, check_only=check_only))
    print_notifications(result.notifications)
    if not quiet:
        print_summary(result.report, check_only=check_only)


def print_report_json(result: IngestReport) -> None:
    """Print an ingestion report as JSON."""
    data = {
        "outcomes": [o.to_dict() for o in result.report],
        "notifications": [n.to_dict() for n in result.notifications],
    }
    console.print_json(json.dumps(data))
