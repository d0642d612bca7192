# tests/test_config.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from taskboard.config import Settings, get_config_dir, get_settings, save_settings


def test_defaults(isolated_home: Path) -> None:
    settings = get_settings()

    assert settings == Settings()
    assert settings.port == 8000
    assert settings.page_size == 6
    assert settings.seed is True
    assert get_config_dir() == isolated_home
    assert isolated_home.is_dir()


def test_config_file_is_read(isolated_home: Path) -> None:
    isolated_home.mkdir(parents=True, exist_ok=True)
    (isolated_home / "config.json").write_text(json.dumps({"port": 9000, "page_size": 10}))

    settings = get_settings()

    assert settings.port == 9000
    assert settings.page_size == 10


def test_environment_overrides_file(isolated_home: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    isolated_home.mkdir(parents=True, exist_ok=True)
    (isolated_home / "config.json").write_text(json.dumps({"port": 9000}))
    monkeypatch.setenv("TASKBOARD_PORT", "9100")
    monkeypatch.setenv("TASKBOARD_SEED", "false")
    monkeypatch.setenv("TASKBOARD_CORS_ORIGINS", "http://a.test, http://b.test")

    settings = get_settings()

    assert settings.port == 9100
    assert settings.seed is False
    assert settings.cors_origins == ["http://a.test", "http://b.test"]


def test_unreadable_file_falls_back_to_defaults(isolated_home: Path) -> None:
    isolated_home.mkdir(parents=True, exist_ok=True)
    (isolated_home / "config.json").write_text("{broken")

    assert get_settings() == Settings()


def test_invalid_values_fall_back_to_defaults(isolated_home: Path) -> None:
    isolated_home.mkdir(parents=True, exist_ok=True)
    (isolated_home / "config.json").write_text(json.dumps({"page_size": 0}))

    assert get_settings() == Settings()


def test_save_settings(isolated_home: Path) -> None:
    save_settings(Settings(port=8123, api_url="http://127.0.0.1:8123"))

    data = json.loads((isolated_home / "config.json").read_text())
    assert data["port"] == 8123
    assert get_settings().api_url == "http://127.0.0.1:8123"
