"""Picker ingestion: a multi-select file dialog result.

A selection becomes available all at once. It either succeeds with zero
or more locations or fails with a diagnostic. A failed selection
processes no files and yields a single SELECTION_FAILED notification.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from dequarantine.core.service import AttributeService
from dequarantine.ingest.paths import InvalidFilePathError, resolve_file_path
from dequarantine.ingest.report import IngestReport
from dequarantine.models.notification import Notification

logger = logging.getLogger(__name__)


class SelectionError(Exception):
    """Raised when a file selection cannot be completed."""


@dataclass(frozen=True, slots=True)
class Selection:
    """Result of a file selection dialog.

    Attributes:
        locations: Selected paths or file URLs, in selection order.
        error: Diagnostic if the selection failed, None otherwise.
    """

    locations: tuple[str, ...] = ()
    error: str | None = None

    @classmethod
    def of(cls, locations: Iterable[str]) -> "Selection":
        """Successful selection."""
        return cls(locations=tuple(locations))

    @classmethod
    def failed(cls, diagnostic: str) -> "Selection":
        """Failed or cancelled selection."""
        return cls(error=diagnostic)

    def resolve(self) -> list[Path]:
        """Resolve every selected location to an absolute path.

        Returns:
            Absolute paths in selection order.

        Raises:
            SelectionError: If the selection failed or any location is invalid.
        """
        if self.error is not None:
            raise SelectionError(self.error)

        try:
            return [resolve_file_path(location) for location in self.locations]
        except InvalidFilePathError as e:
            raise SelectionError(str(e)) from e


def submit_selection(selection: Selection, service: AttributeService) -> IngestReport:
    """Process a picker selection as one batch.

    Args:
        selection: Result of the selection dialog.
        service: Attribute service used for every selected file.

    Returns:
        IngestReport whose outcomes follow selection order.
    """
    try:
        paths = selection.resolve()
    except SelectionError as e:
        logger.warning("File selection failed: %s", e)
        return IngestReport(notifications=(Notification.selection_failed(str(e)),))

    report = service.process_batch(paths)
    notifications = tuple(Notification.from_outcome(o) for o in report.failures)
    return IngestReport(report=report, notifications=notifications)
