"""Core functionality for dequarantine.

This package contains the attribute backends, the attribute removal
service, and configuration handling.
"""

from dequarantine.core.attributes import (
    QUARANTINE_ATTRIBUTE,
    AttributeBackend,
    BackendUnavailableError,
    OsXattrBackend,
    XattrCommandBackend,
    get_backend,
)
from dequarantine.core.service import AttributeService

__all__ = [
    "QUARANTINE_ATTRIBUTE",
    "AttributeBackend",
    "AttributeService",
    "BackendUnavailableError",
    "OsXattrBackend",
    "XattrCommandBackend",
    "get_backend",
]
