"""Quarantine attribute removal service.

Processes file paths one at a time: list the extended attributes, remove
the quarantine marker if present, and report a per-file outcome. Every
filesystem failure is converted into a FAILED outcome so that a batch is
never aborted by a single file.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from dequarantine.core.attributes import QUARANTINE_ATTRIBUTE, AttributeBackend, get_backend
from dequarantine.models.outcome import BatchReport, OperationOutcome

logger = logging.getLogger(__name__)


class AttributeService:
    """Removes the quarantine attribute from files.

    The service holds no per-file state, so a single instance may be
    shared between threads.

    Attributes:
        _backend: Extended attribute backend used for listing and removal.
        _dry_run: If True, report what would be removed without removing.
    """

    def __init__(self, backend: AttributeBackend | None = None, dry_run: bool = False) -> None:
        """Initialize the AttributeService.

        Args:
            backend: Attribute backend to use. If None, the first available
                backend for this platform is selected.
            dry_run: If True, never remove anything.

        Raises:
            BackendUnavailableError: If backend is None and no backend is usable.
        """
        self._backend = backend if backend is not None else get_backend()
        self._dry_run = dry_run

    @property
    def dry_run(self) -> bool:
        """Check if service is in dry-run mode."""
        return self._dry_run

    @property
    def backend(self) -> AttributeBackend:
        """Backend in use."""
        return self._backend

    def process(self, path: Path) -> OperationOutcome:
        """Remove the quarantine attribute from a single path.

        Listing failure stops processing without attempting removal. An
        absent attribute is reported as NOT_MARKED, not as an error.

        Args:
            path: Absolute path of an existing filesystem entry.

        Returns:
            OperationOutcome describing what happened.
        """
        attribute = self._backend.qualify(QUARANTINE_ATTRIBUTE)

        try:
            names = self._backend.list_attributes(path)
        except OSError as e:
            logger.warning("Could not list attributes of %s: %s", path, e)
            return OperationOutcome.failed(path, str(e) or type(e).__name__)

        if attribute not in names:
            logger.debug("%s is not quarantined", path)
            return OperationOutcome.not_marked(path)

        if self._dry_run:
            logger.info("Dry-run: would remove %s from %s", attribute, path)
            return OperationOutcome.cleaned(path, dry_run=True)

        try:
            self._backend.remove_attribute(path, attribute)
        except OSError as e:
            logger.warning("Could not remove %s from %s: %s", attribute, path, e)
            return OperationOutcome.failed(path, str(e) or type(e).__name__)

        logger.info("Removed %s from %s", attribute, path)
        return OperationOutcome.cleaned(path)

    def process_batch(self, paths: Iterable[Path]) -> BatchReport:
        """Process several paths independently, in the given order.

        Args:
            paths: Paths to process.

        Returns:
            BatchReport with one outcome per path, in input order.
        """
        return BatchReport.from_outcomes(self.process(path) for path in paths)

