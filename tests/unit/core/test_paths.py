"""Unit tests for XDG path helpers."""

from pathlib import Path

import pytest
from dequarantine.core.paths import APP_NAME, get_config_dir, get_config_path


class TestConfigPaths:
    """Tests for config directory resolution."""

    def test_respects_xdg_config_home(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """XDG_CONFIG_HOME overrides the default location."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert get_config_dir() == tmp_path / APP_NAME
        assert get_config_path() == tmp_path / APP_NAME / "config.toml"

    def test_default_under_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without XDG_CONFIG_HOME the config lives in ~/.config."""
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.setattr(Path, "home", lambda: tmp_path)

        assert get_config_dir() == tmp_path / ".config" / "dequarantine"
