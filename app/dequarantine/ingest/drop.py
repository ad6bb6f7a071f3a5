"""Drop ingestion: items dragged onto the application.

A drop gesture carries any number of items. Items that are file URLs are
resolved concurrently on a thread pool, in no particular order. Each
resolved path is handed back through a queue to the thread that owns the
gesture, which calls the attribute service and applies the outcome.
Items that are not file references never reach the service; they produce
a single UNIDENTIFIABLE_ITEM notification for the whole gesture.
"""

import logging
import os
import queue
from collections.abc import Callable, Iterable
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

from dequarantine.core.service import AttributeService
from dequarantine.ingest.paths import InvalidFilePathError, resolve_file_path
from dequarantine.ingest.report import IngestReport
from dequarantine.models.notification import Notification
from dequarantine.models.outcome import BatchReport, OperationOutcome

logger = logging.getLogger(__name__)

# Type identifiers of dropped items
FILE_URL_TYPE = "public.file-url"
PLAIN_TEXT_TYPE = "public.plain-text"


@dataclass(frozen=True, slots=True)
class DropItem:
    """One item of a drop gesture.

    Attributes:
        type_identifier: Representation the item was offered in.
        payload: Raw item data (a file URL or path for file items).
    """

    type_identifier: str
    payload: str

    @property
    def conforms(self) -> bool:
        """Check if the item is offered as a file reference."""
        return self.type_identifier == FILE_URL_TYPE


def item_from_text(text: str) -> DropItem:
    """Classify a raw dropped string.

    ``file://`` URLs and absolute (or ``~``-relative) paths are file
    references; anything else is plain text.
    """
    text = text.strip()
    if text.startswith("file://") or os.path.isabs(text) or text.startswith("~"):
        return DropItem(type_identifier=FILE_URL_TYPE, payload=text)
    return DropItem(type_identifier=PLAIN_TEXT_TYPE, payload=text)


class DropSession:
    """Handles drop gestures for the thread that owns the result.

    Attributes:
        _service: Attribute service called for every resolved path.
        _max_resolvers: Number of items resolved concurrently.
        _on_outcome: Called on the owning thread with each applied outcome.
    """

    def __init__(
        self,
        service: AttributeService,
        max_resolvers: int = 4,
        on_outcome: Callable[[OperationOutcome], None] | None = None,
    ) -> None:
        """Initialize the DropSession.

        Args:
            service: Attribute service used for every dropped file.
            max_resolvers: Maximum number of concurrent resolutions.
            on_outcome: Optional callback receiving outcomes as they are applied.
        """
        if max_resolvers < 1:
            msg = f"max_resolvers must be at least 1, got {max_resolvers}"
            raise ValueError(msg)
        self._service = service
        self._max_resolvers = max_resolvers
        self._on_outcome = on_outcome

    def handle(self, items: Iterable[DropItem]) -> IngestReport:
        """Handle one drop gesture and block until every item is done.

        Outcomes are recorded in the order resolutions complete, which is
        unrelated to the order of the items.

        Args:
            items: Items of the gesture.

        Returns:
            IngestReport for the gesture.
        """
        handoff: queue.Queue[Future[Path]] = queue.Queue()
        outcomes: list[OperationOutcome] = []
        failures: list[Notification] = []
        unidentifiable = 0

        with ThreadPoolExecutor(
            max_workers=self._max_resolvers,
            thread_name_prefix="drop-resolver",
        ) as executor:
            pending = 0
            for item in items:
                if not item.conforms:
                    logger.debug("Unidentifiable %s item dropped", item.type_identifier)
                    unidentifiable += 1
                    continue
                future = executor.submit(resolve_file_path, item.payload)
                future.add_done_callback(handoff.put)
                pending += 1

            while pending:
                future = handoff.get()
                pending -= 1
                try:
                    path = future.result()
                except InvalidFilePathError as e:
                    logger.warning("Dropped item could not be resolved: %s", e)
                    unidentifiable += 1
                    continue

                outcome = self._apply(path)
                outcomes.append(outcome)
                if outcome.is_failed:
                    failures.append(Notification.from_outcome(outcome))

        notifications: list[Notification] = []
        if unidentifiable:
            notifications.append(Notification.unidentifiable())
        notifications.extend(failures)

        return IngestReport(
            report=BatchReport.from_outcomes(outcomes),
            notifications=tuple(notifications),
        )

    def _apply(self, path: Path) -> OperationOutcome:
        """Process a resolved path and publish its outcome."""
        outcome = self._service.process(path)
        if self._on_outcome is not None:
            self._on_outcome(outcome)
        return outcome
