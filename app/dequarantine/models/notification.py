"""User-facing notification models.

Each failure class surfaced to the user maps to exactly one
NotificationKind with its own static wording, so selection problems,
unrecognized dropped items and attribute failures are never conflated.
"""

from dataclasses import dataclass
from enum import Enum

from dequarantine.models.outcome import OperationOutcome


class NotificationKind(str, Enum):
    """Class of a user-visible notification.

    Attributes:
        UNIDENTIFIABLE_ITEM: A dropped item could not be read as a file reference.
        SELECTION_FAILED: The file selection itself failed.
        DEQUARANTINE_FAILED: Listing or removing the attribute failed for a file.
    """

    UNIDENTIFIABLE_ITEM = "unidentifiable_item"
    SELECTION_FAILED = "selection_failed"
    DEQUARANTINE_FAILED = "dequarantine_failed"


_TITLES: dict[NotificationKind, str] = {
    NotificationKind.UNIDENTIFIABLE_ITEM: "File(s) not identifiable",
    NotificationKind.SELECTION_FAILED: "Could not select file(s)",
    NotificationKind.DEQUARANTINE_FAILED: "Could not dequarantine file",
}

_MESSAGES: dict[NotificationKind, str] = {
    NotificationKind.UNIDENTIFIABLE_ITEM: (
        "One or more of the files you provided are unidentifiable and cannot "
        "have their paths parsed. Please try again with different files."
    ),
    NotificationKind.SELECTION_FAILED: (
        "One or more of the files you selected could not be imported. "
        "Please try again with different files."
    ),
    NotificationKind.DEQUARANTINE_FAILED: (
        "The dequarantine operation could not be performed. "
        "Please try again with a different file."
    ),
}


@dataclass(frozen=True, slots=True)
class Notification:
    """A notification to present to the user.

    Attributes:
        kind: Notification class.
        detail: Verbatim diagnostic from the underlying failure, if any.
        path: File the notification refers to, if any.
    """

    kind: NotificationKind
    detail: str | None = None
    path: str | None = None

    @property
    def title(self) -> str:
        """Static title for this notification class."""
        return _TITLES[self.kind]

    @property
    def message(self) -> str:
        """Static explanatory message for this notification class."""
        return _MESSAGES[self.kind]

    @classmethod
    def unidentifiable(cls) -> "Notification":
        """Notification for dropped items that are not file references."""
        return cls(kind=NotificationKind.UNIDENTIFIABLE_ITEM)

    @classmethod
    def selection_failed(cls, detail: str) -> "Notification":
        """Notification for a failed file selection."""
        return cls(kind=NotificationKind.SELECTION_FAILED, detail=detail)

    @classmethod
    def from_outcome(cls, outcome: OperationOutcome) -> "Notification":
        """Notification for a FAILED outcome.

        Raises:
            ValueError: If the outcome did not fail.
        """
        if not outcome.is_failed:
            msg = f"Outcome for {outcome.path} did not fail"
            raise ValueError(msg)
        return cls(
            kind=NotificationKind.DEQUARANTINE_FAILED,
            detail=outcome.reason,
            path=str(outcome.path),
        )

    def to_dict(self) -> dict[str, object]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "kind": self.kind.value,
            "title": self.title,
            "detail": self.detail,
            "path": self.path,
        }
