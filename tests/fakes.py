"""Test doubles shared across test modules."""

import errno
import threading
from pathlib import Path

from dequarantine.core.attributes import QUARANTINE_ATTRIBUTE, AttributeBackend

# Typical value written by browsers: flags;timestamp;agent;event id
QUARANTINE_VALUE = "0083;65c9f0a1;Safari;3F2504E0-4F89-11D3-9A0C-0305E82C3301"


class FakeBackend(AttributeBackend):
    """In-memory attribute backend.

    Attributes are tracked per path; listing fails for paths that do not
    exist on disk, and removal fails for paths marked read-only.
    """

    def __init__(self) -> None:
        self.attributes: dict[Path, dict[str, str]] = {}
        self.read_only: set[Path] = set()
        self.list_calls: list[Path] = []
        self.remove_calls: list[tuple[Path, str]] = []
        self.threads: set[str] = set()

    @property
    def name(self) -> str:
        return "fake"

    def is_available(self) -> bool:
        return True

    def mark(self, path: Path, read_only: bool = False) -> Path:
        """Quarantine a path."""
        self.attributes.setdefault(path, {})[QUARANTINE_ATTRIBUTE] = QUARANTINE_VALUE
        if read_only:
            self.read_only.add(path)
        return path

    def list_attributes(self, path: Path) -> list[str]:
        self.list_calls.append(path)
        self.threads.add(threading.current_thread().name)
        if not path.exists():
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", str(path))
        return list(self.attributes.get(path, {}))

    def remove_attribute(self, path: Path, name: str) -> None:
        self.remove_calls.append((path, name))
        if path in self.read_only:
            raise PermissionError(errno.EACCES, "Permission denied", str(path))
        attrs = self.attributes.get(path, {})
        if name not in attrs:
            raise OSError(errno.ENODATA, "No data available", str(path))
        del attrs[name]
