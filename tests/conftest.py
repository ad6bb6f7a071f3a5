"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest

from tests.fakes import FakeBackend


@pytest.fixture
def fake_backend() -> FakeBackend:
    """Empty in-memory attribute backend."""
    return FakeBackend()


@pytest.fixture(autouse=True)
def isolated_config(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory for every test."""
    config_home = tmp_path_factory.mktemp("xdg-config")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def sample_files(tmp_path: Path, fake_backend: FakeBackend) -> dict[str, Path]:
    """Files for the clean / quarantined / locked scenario."""
    files = {
        "clean": tmp_path / "clean.txt",
        "quarantined": tmp_path / "quarantined.app",
        "locked": tmp_path / "locked.pkg",
    }
    for path in files.values():
        path.write_text("content")
    fake_backend.mark(files["quarantined"])
    fake_backend.mark(files["locked"], read_only=True)
    return files
