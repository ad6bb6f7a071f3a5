"""File path validation at the ingestion boundary.

Everything handed to the attribute service passes through
resolve_file_path() first, so the service only ever sees absolute paths
of existing filesystem entries.
"""

import os
from pathlib import Path
from urllib.parse import unquote, urlparse


class InvalidFilePathError(ValueError):
    """Raised when a location cannot be turned into a usable file path."""


def resolve_file_path(location: str | Path) -> Path:
    """Resolve a selected or dropped location to an absolute path.

    Accepts plain paths (``~`` is expanded) and ``file://`` URLs. Symbolic
    links are not followed; a link is processed as whatever it denotes.

    Args:
        location: Path or file URL.

    Returns:
        Absolute path of an existing filesystem entry.

    Raises:
        InvalidFilePathError: If the location is empty, malformed, not a
            local file URL, or does not exist.
    """
    if isinstance(location, Path):
        raw = str(location)
    else:
        raw = location.strip()
        if raw.startswith("file:"):
            raw = _path_from_file_url(raw)

    if not raw:
        msg = "Empty file path"
        raise InvalidFilePathError(msg)
    if "\x00" in raw:
        msg = f"File path contains a NUL byte: {raw!r}"
        raise InvalidFilePathError(msg)

    path = Path(os.path.abspath(os.path.expanduser(raw)))
    if not os.path.lexists(path):
        msg = f"No such file or directory: {path}"
        raise InvalidFilePathError(msg)
    return path


def _path_from_file_url(url: str) -> str:
    """Extract the local path from a file:// URL."""
    try:
        parsed = urlparse(url)
    except ValueError as e:
        msg = f"Malformed file URL: {url}"
        raise InvalidFilePathError(msg) from e
    if parsed.netloc not in ("", "localhost"):
        msg = f"Not a local file URL: {url}"
        raise InvalidFilePathError(msg)
    return unquote(parsed.path)
