from __future__ import annotations

import importlib
from collections.abc import Iterator
from pathlib import Path

import pytest

from sector471.config.paths import Sector471Paths, reset_paths
from sector471.config.settings import settings


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    reset_paths()
    try:
        yield tmp_path
    finally:
        reset_paths()


def test_settings_do_not_write_to_disk(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    settings_path = tmp_path / "settings.json"
    settings_module = importlib.import_module("sector471.config.settings")
    monkeypatch.setattr(settings_module, "get_settings_path", lambda: settings_path)

    settings.time_scale = 0.25

    assert settings.get("time_scale") == pytest.approx(0.25)
    assert not settings_path.exists()


def test_playback_defaults() -> None:
    settings._data = {}

    assert settings.time_scale == 1.0
    assert settings.tick_seconds == pytest.approx(0.05)


def test_playback_round_trip() -> None:
    settings.time_scale = 2
    settings.tick_seconds = 0.01

    assert settings.time_scale == pytest.approx(2.0)
    assert settings.tick_seconds == pytest.approx(0.01)


def test_invalid_stored_values_fall_back_to_defaults() -> None:
    settings._data = {"time_scale": "fast", "tick_seconds": -1}

    assert settings.time_scale == 1.0
    assert settings.tick_seconds == pytest.approx(0.05)


def test_non_positive_values_are_rejected() -> None:
    with pytest.raises(ValueError):
        settings.time_scale = 0
    with pytest.raises(ValueError):
        settings.tick_seconds = -0.5


def test_scripts_path_prefers_saved_value(workspace: Path) -> None:
    saved = workspace / "custom" / "Scripts.json"
    settings.scripts_path = saved

    assert settings.scripts_path == saved.resolve()


def test_scripts_path_searches_workspace_then_data_dir(workspace: Path) -> None:
    settings.scripts_path = None
    assert settings.scripts_path is None

    data_scripts = workspace / "data" / "sector471" / "Scripts.json"
    data_scripts.parent.mkdir(parents=True)
    data_scripts.write_text("{}", encoding="utf-8")
    assert settings.scripts_path == data_scripts

    workspace_scripts = workspace / "Scripts.json"
    workspace_scripts.write_text("{}", encoding="utf-8")
    assert settings.scripts_path is not None
    assert settings.scripts_path.resolve() == workspace_scripts.resolve()


def test_paths_layout(tmp_path: Path) -> None:
    paths = Sector471Paths(
        workspace=tmp_path,
        _config_home=tmp_path / "cfg",
        _data_home=tmp_path / "share",
    )

    assert paths.debug_log == tmp_path / ".sector471" / "debug.log"
    assert paths.global_settings == tmp_path / "cfg" / "sector471" / "settings.json"
    assert paths.global_scripts == tmp_path / "share" / "sector471" / "Scripts.json"
    assert paths.scripts_file() is None
