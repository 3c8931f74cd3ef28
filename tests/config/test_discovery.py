"""Tests for layers.toml walk-up discovery."""

from pathlib import Path

import pytest

from layers_showcase.config.discovery import CONFIG_ENV_VAR, CONFIG_FILENAME, find_config


@pytest.fixture(autouse=True)
def _no_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestFindConfig:
    def test_finds_in_start_dir(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        assert find_config(tmp_path) == (tmp_path / CONFIG_FILENAME).resolve()

    def test_walks_up(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        nested = tmp_path / "x" / "y"
        nested.mkdir(parents=True)
        assert find_config(nested) == (tmp_path / CONFIG_FILENAME).resolve()

    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        explicit = tmp_path / "elsewhere.toml"
        explicit.write_text("")
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(explicit))
        assert find_config(tmp_path) == explicit

    def test_env_var_pointing_nowhere(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None
