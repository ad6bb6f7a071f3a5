"""Ingestion of candidate files.

Turns picker selections and drop gestures into attribute service calls
and aggregates their results for the presentation layer.
"""

from dequarantine.ingest.drop import DropItem, DropSession, item_from_text
from dequarantine.ingest.paths import InvalidFilePathError, resolve_file_path
from dequarantine.ingest.picker import Selection, SelectionError, submit_selection
from dequarantine.ingest.report import IngestReport

__all__ = [
    "DropItem",
    "DropSession",
    "IngestReport",
    "InvalidFilePathError",
    "Selection",
    "SelectionError",
    "item_from_text",
    "resolve_file_path",
    "submit_selection",
]
