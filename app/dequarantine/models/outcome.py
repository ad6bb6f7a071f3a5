"""Outcome models for quarantine attribute removal.

This module defines the result of processing a single file and the
ordered report produced by processing a batch of files.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class OutcomeKind(str, Enum):
    """Result of processing one file.

    Attributes:
        CLEANED: The quarantine attribute was present and was removed.
        NOT_MARKED: The attribute was absent, nothing was done.
        FAILED: Listing or removing the attribute failed.
    """

    CLEANED = "cleaned"
    NOT_MARKED = "not_marked"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class OperationOutcome:
    """Outcome of processing a single file path.

    Attributes:
        path: Absolute path that was processed.
        kind: Which of the three outcomes occurred.
        reason: Diagnostic message, only set for FAILED outcomes.
        dry_run: True if removal was skipped because of dry-run mode.
    """

    path: Path
    kind: OutcomeKind
    reason: str | None = None
    dry_run: bool = False

    def __post_init__(self) -> None:
        """Validate outcome data after initialization."""
        if self.kind == OutcomeKind.FAILED and not self.reason:
            msg = "Failed outcome requires a reason"
            raise ValueError(msg)
        if self.kind != OutcomeKind.FAILED and self.reason is not None:
            msg = f"{self.kind.value} outcome cannot carry a reason"
            raise ValueError(msg)

    @classmethod
    def cleaned(cls, path: Path, dry_run: bool = False) -> "OperationOutcome":
        """Build a CLEANED outcome."""
        return cls(path=path, kind=OutcomeKind.CLEANED, dry_run=dry_run)

    @classmethod
    def not_marked(cls, path: Path) -> "OperationOutcome":
        """Build a NOT_MARKED outcome."""
        return cls(path=path, kind=OutcomeKind.NOT_MARKED)

    @classmethod
    def failed(cls, path: Path, reason: str) -> "OperationOutcome":
        """Build a FAILED outcome carrying the underlying diagnostic."""
        return cls(path=path, kind=OutcomeKind.FAILED, reason=reason)

    @property
    def is_cleaned(self) -> bool:
        """Check if the attribute was removed."""
        return self.kind == OutcomeKind.CLEANED

    @property
    def is_not_marked(self) -> bool:
        """Check if the attribute was absent."""
        return self.kind == OutcomeKind.NOT_MARKED

    @property
    def is_failed(self) -> bool:
        """Check if processing failed."""
        return self.kind == OutcomeKind.FAILED

    def to_dict(self) -> dict[str, object]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "path": str(self.path),
            "outcome": self.kind.value,
            "reason": self.reason,
            "dry_run": self.dry_run,
        }


@dataclass(frozen=True, slots=True)
class BatchReport:
    """Ordered outcomes of a batch, in submission order.

    Attributes:
        outcomes: One outcome per submitted path.
    """

    outcomes: tuple[OperationOutcome, ...] = field(default_factory=tuple)

    @classmethod
    def from_outcomes(cls, outcomes: Iterable[OperationOutcome]) -> "BatchReport":
        """Build a report from any iterable of outcomes."""
        return cls(outcomes=tuple(outcomes))

    def __iter__(self) -> Iterator[OperationOutcome]:
        return iter(self.outcomes)

    def __len__(self) -> int:
        return len(self.outcomes)

    @property
    def cleaned_count(self) -> int:
        """Number of files whose attribute was removed."""
        return sum(1 for o in self.outcomes if o.is_cleaned)

    @property
    def not_marked_count(self) -> int:
        """Number of files that carried no attribute."""
        return sum(1 for o in self.outcomes if o.is_not_marked)

    @property
    def failures(self) -> list[OperationOutcome]:
        """Failed outcomes, in submission order."""
        return [o for o in self.outcomes if o.is_failed]

    @property
    def failed_count(self) -> int:
        """Number of failed files."""
        return len(self.failures)

    @property
    def has_failures(self) -> bool:
        """Check if any file failed."""
        return self.failed_count > 0
