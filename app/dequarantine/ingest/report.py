"""Aggregated result of one ingestion (a picker selection or a drop gesture)."""

from dataclasses import dataclass, field

from dequarantine.models.notification import Notification, NotificationKind
from dequarantine.models.outcome import BatchReport


@dataclass(frozen=True, slots=True)
class IngestReport:
    """Outcomes and notifications produced by one ingestion.

    Handed to the presentation layer once, after the ingestion finished.

    Attributes:
        report: Outcomes of the files that reached the attribute service.
        notifications: Notifications to present, at most one of them
            for unidentifiable items and one for a failed selection.
    """

    report: BatchReport = field(default_factory=BatchReport)
    notifications: tuple[Notification, ...] = ()

    def notifications_of(self, kind: NotificationKind) -> list[Notification]:
        """Notifications of a single kind."""
        return [n for n in self.notifications if n.kind == kind]

    @property
    def has_failures(self) -> bool:
        """Check if anything needs the user's attention."""
        return bool(self.notifications)
