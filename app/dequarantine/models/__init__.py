"""Data models for dequarantine.

This package contains the outcome, report, and notification types
shared by the attribute service, the ingestion surface and the CLI.
"""

from dequarantine.models.notification import Notification, NotificationKind
from dequarantine.models.outcome import BatchReport, OperationOutcome, OutcomeKind

__all__ = [
    "BatchReport",
    "Notification",
    "NotificationKind",
    "OperationOutcome",
    "OutcomeKind",
]
