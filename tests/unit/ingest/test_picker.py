"""Unit tests for picker ingestion."""

from pathlib import Path

import pytest
from dequarantine.core.service import AttributeService
from dequarantine.ingest.picker import Selection, SelectionError, submit_selection
from dequarantine.models.notification import NotificationKind
from dequarantine.models.outcome import OutcomeKind

from tests.fakes import FakeBackend


class TestSelection:
    """Tests for Selection."""

    def test_resolve_in_order(self, sample_files: dict[str, Path]) -> None:
        """Locations resolve in selection order."""
        order = [sample_files["locked"], sample_files["clean"]]

        assert Selection.of(str(p) for p in order).resolve() == order

    def test_failed_selection_raises(self) -> None:
        """A failed selection raises SelectionError with its diagnostic."""
        with pytest.raises(SelectionError, match="cancelled"):
            Selection.failed("The user cancelled.").resolve()

    def test_invalid_location_raises(self, tmp_path: Path) -> None:
        """An unresolvable location fails the whole selection."""
        with pytest.raises(SelectionError, match="No such file"):
            Selection.of([str(tmp_path / "missing")]).resolve()


class TestSubmitSelection:
    """Tests for submit_selection."""

    def test_scenario(self, sample_files: dict[str, Path], fake_backend: FakeBackend) -> None:
        """Outcomes follow submission order; one notification per failure."""
        paths = [sample_files["clean"], sample_files["quarantined"], sample_files["locked"]]
        service = AttributeService(backend=fake_backend)

        result = submit_selection(Selection.of(str(p) for p in paths), service)

        assert [o.path for o in result.report] == paths
        assert [o.kind for o in result.report] == [
            OutcomeKind.NOT_MARKED,
            OutcomeKind.CLEANED,
            OutcomeKind.FAILED,
        ]
        assert len(result.notifications) == 1
        notification = result.notifications[0]
        assert notification.kind == NotificationKind.DEQUARANTINE_FAILED
        assert notification.path == str(sample_files["locked"])
        assert notification.detail is not None
        assert "Permission denied" in notification.detail

    def test_failed_selection_processes_nothing(self, fake_backend: FakeBackend) -> None:
        """A failed picker yields one SELECTION_FAILED notification and no calls."""
        service = AttributeService(backend=fake_backend)

        result = submit_selection(Selection.failed("Access denied to Downloads"), service)

        assert len(result.report) == 0
        assert len(result.notifications) == 1
        assert result.notifications[0].kind == NotificationKind.SELECTION_FAILED
        assert result.notifications[0].detail == "Access denied to Downloads"
        assert fake_backend.list_calls == []

    def test_invalid_location_processes_nothing(
        self, sample_files: dict[str, Path], tmp_path: Path, fake_backend: FakeBackend
    ) -> None:
        """One bad location rejects the selection before any file is touched."""
        service = AttributeService(backend=fake_backend)
        locations = [str(sample_files["quarantined"]), str(tmp_path / "missing")]

        result = submit_selection(Selection.of(locations), service)

        assert result.notifications_of(NotificationKind.SELECTION_FAILED)
        assert fake_backend.list_calls == []
        assert fake_backend.remove_calls == []

    def test_empty_selection(self, fake_backend: FakeBackend) -> None:
        """Selecting nothing is a successful, empty batch."""
        result = submit_selection(Selection.of([]), AttributeService(backend=fake_backend))

        assert len(result.report) == 0
        assert result.notifications == ()
        assert result.has_failures is False

    def test_malformed_file_url_fails_selection(self, fake_backend: FakeBackend) -> None:
        """An unparseable file URL becomes a SELECTION_FAILED notification."""
        service = AttributeService(backend=fake_backend)

        result = submit_selection(Selection.of(["file://[oops/a.zip"]), service)

        assert len(result.report) == 0
        assert [n.kind for n in result.notifications] == [NotificationKind.SELECTION_FAILED]
        assert "Malformed file URL" in (result.notifications[0].detail or "")
        assert fake_backend.list_calls == []
