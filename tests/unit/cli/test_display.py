"""Unit tests for shared display helpers."""

from pathlib import Path

from dequarantine.cli.display import (
    create_notification_panel,
    create_outcomes_table,
    format_outcome,
)
from dequarantine.models.notification import Notification
from dequarantine.models.outcome import BatchReport, OperationOutcome
from dequarantine.utils.formatting import THEME
from rich.console import Console


def _render(renderable: object) -> str:
    console = Console(width=200, color_system=None, theme=THEME)
    with console.capture() as capture:
        console.print(renderable)
    return capture.get()


class TestFormatOutcome:
    """Tests for format_outcome."""

    def test_statuses(self) -> None:
        """Each outcome kind gets its own status word."""
        path = Path("/tmp/a.zip")

        assert "cleaned" in format_outcome(OperationOutcome.cleaned(path))[0]
        assert "not marked" in format_outcome(OperationOutcome.not_marked(path))[0]
        assert "dry-run" in format_outcome(OperationOutcome.cleaned(path, dry_run=True))[0]
        assert "quarantined" in format_outcome(
            OperationOutcome.cleaned(path, dry_run=True), check_only=True
        )[0]

    def test_failure_details_escaped(self) -> None:
        """Failure reasons containing brackets are shown literally."""
        outcome = OperationOutcome.failed(Path("/tmp/a.zip"), "[Errno 13] Permission denied")

        status, details = format_outcome(outcome)

        assert "failed" in status
        assert _render(details).strip() == "[Errno 13] Permission denied"


class TestTables:
    """Tests for table and panel builders."""

    def test_outcomes_table_rows(self) -> None:
        """One row per outcome, in report order."""
        report = BatchReport.from_outcomes(
            [
                OperationOutcome.not_marked(Path("/tmp/first.txt")),
                OperationOutcome.failed(Path("/tmp/second[1].pkg"), "Permission denied"),
            ]
        )

        output = _render(create_outcomes_table(report, "Results"))

        assert output.index("/tmp/first.txt") < output.index("/tmp/second[1].pkg")
        assert "Permission denied" in output

    def test_notification_panel(self) -> None:
        """Panels carry title, static message and verbatim detail."""
        panel = create_notification_panel(Notification.selection_failed("Operation not permitted"))

        output = _render(panel)

        assert "Error: Could not select file(s)" in output
        assert "could not be imported" in output
        assert "The following error text was generated: Operation not permitted" in output
