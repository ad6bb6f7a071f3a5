"""Extended attribute backends.

This module defines the AttributeBackend interface used by the attribute
service, plus the two platform implementations:

- OsXattrBackend: os.listxattr / os.removexattr (Linux)
- XattrCommandBackend: the ``xattr`` tool shipped with macOS

Backends raise OSError for every filesystem-level failure so that the
service can convert it into a per-file outcome.
"""

import logging
import os
import subprocess
import sys
from abc import ABC, abstractmethod
from pathlib import Path

from dequarantine.utils.shell import command_exists, run_command

logger = logging.getLogger(__name__)

# Quarantine marker applied to downloaded files
QUARANTINE_ATTRIBUTE = "com.apple.quarantine"

# Namespace unprivileged attributes live in on Linux
LINUX_USER_NAMESPACE = "user."


class BackendUnavailableError(RuntimeError):
    """Raised when no extended attribute backend can be used on this system."""


class AttributeBackend(ABC):
    """Abstract base class for extended attribute backends.

    Example:
        >>> backend = get_backend()
        >>> name = backend.qualify(QUARANTINE_ATTRIBUTE)
        >>> if name in backend.list_attributes(Path("download.zip")):
        ...     backend.remove_attribute(Path("download.zip"), name)
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier of the backend, used in logs and output."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check if this backend can be used on the current system."""

    @abstractmethod
    def list_attributes(self, path: Path) -> list[str]:
        """List the extended attribute names of a path.

        Raises:
            OSError: If the attributes cannot be listed.
        """

    @abstractmethod
    def remove_attribute(self, path: Path, name: str) -> None:
        """Remove one extended attribute from a path.

        Raises:
            OSError: If the attribute cannot be removed.
        """

    def qualify(self, name: str) -> str:
        """Map an attribute name to the form the platform stores it under."""
        return name


class OsXattrBackend(AttributeBackend):
    """Backend using the os module xattr functions.

    Only present on Linux builds of CPython. Attribute names are
    qualified into the ``user.`` namespace.
    """

    @property
    def name(self) -> str:
        return "os"

    def is_available(self) -> bool:
        return hasattr(os, "listxattr") and hasattr(os, "removexattr")

    def list_attributes(self, path: Path) -> list[str]:
        return os.listxattr(path)

    def remove_attribute(self, path: Path, name: str) -> None:
        os.removexattr(path, name)

    def qualify(self, name: str) -> str:
        if name.startswith(LINUX_USER_NAMESPACE):
            return name
        return f"{LINUX_USER_NAMESPACE}{name}"


class XattrCommandBackend(AttributeBackend):
    """Backend driving the macOS ``xattr`` command line tool."""

    @property
    def name(self) -> str:
        return "xattr"

    def is_available(self) -> bool:
        return sys.platform == "darwin" and command_exists("xattr")

    def list_attributes(self, path: Path) -> list[str]:
        stdout = self._run(["xattr", str(path)])
        return [line.strip() for line in stdout.splitlines() if line.strip()]

    def remove_attribute(self, path: Path, name: str) -> None:
        self._run(["xattr", "-d", name, str(path)])

    def _run(self, args: list[str]) -> str:
        """Run an xattr invocation, translating failures into OSError.

        Args:
            args: Command and arguments to execute.

        Returns:
            Standard output of the command.

        Raises:
            OSError: If the command cannot run or exits non-zero.
        """
        try:
            result = run_command(args)
        except subprocess.TimeoutExpired as e:
            msg = f"xattr timed out after {e.timeout}s"
            raise OSError(msg) from e
        except UnicodeDecodeError as e:
            msg = f"xattr produced undecodable output: {e}"
            raise OSError(msg) from e

        if not result.success:
            # xattr prefixes messages with "xattr: [Errno N] ..."
            msg = result.stderr.strip() or f"xattr exited with status {result.returncode}"
            raise OSError(msg)
        return result.stdout


def get_backends() -> list[AttributeBackend]:
    """Get all backend instances in order of preference."""
    return [OsXattrBackend(), XattrCommandBackend()]


def get_backend() -> AttributeBackend:
    """Get the first backend available on this system.

    Returns:
        Available AttributeBackend instance.

    Raises:
        BackendUnavailableError: If no backend can be used.
    """
    for backend in get_backends():
        if backend.is_available():
            logger.debug("Using %s attribute backend", backend.name)
            return backend

    msg = f"No extended attribute support available on platform {sys.platform!r}"
    raise BackendUnavailableError(msg)
