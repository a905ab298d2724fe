# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from taskdeck.config import Settings

ENV_NAMES = [
    "TASKDECK_APP_NAME",
    "TASKDECK_LOG_LEVEL",
    "TASKDECK_DATA_DIR",
    "TASKDECK_STORE_BACKEND",
    "TASKDECK_STORE_PATH",
    "TASKDECK_TASKS_KEY",
    "TASKDECK_THEME",
    "TASKDECK_POSTS_BASE_URL",
    "TASKDECK_POSTS_TIMEOUT_SECONDS",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.app_name == "taskdeck"
    assert s.store_backend == "sqlite"
    assert s.data_dir == Path(".local/taskdeck")
    assert s.store_path == Path(".local/taskdeck/store.sqlite3")
    assert s.tasks_key == "tasks"
    assert s.theme == "light"
    assert s.posts_base_url == "https://jsonplaceholder.typicode.com"
    assert s.posts_timeout_seconds == 10.0


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKDECK_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TASKDECK_STORE_BACKEND", "JSON")
    monkeypatch.setenv("TASKDECK_TASKS_KEY", "todo")
    monkeypatch.setenv("TASKDECK_THEME", "dark")
    monkeypatch.setenv("TASKDECK_POSTS_BASE_URL", "http://localhost:3000/")
    monkeypatch.setenv("TASKDECK_POSTS_TIMEOUT_SECONDS", "2.5")

    s = Settings.from_env()
    assert s.store_backend == "json"
    assert s.store_path == tmp_path / "store.json"
    assert s.tasks_key == "todo"
    assert s.theme == "dark"
    assert s.posts_base_url == "http://localhost:3000"
    assert s.posts_timeout_seconds == 2.5


def test_malformed_values_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASKDECK_STORE_BACKEND", "redis")
    monkeypatch.setenv("TASKDECK_THEME", "solarized")
    monkeypatch.setenv("TASKDECK_POSTS_TIMEOUT_SECONDS", "soon")
    monkeypatch.setenv("TASKDECK_TASKS_KEY", "   ")

    s = Settings.from_env()
    assert s.store_backend == "sqlite"
    assert s.theme == "light"
    assert s.posts_timeout_seconds == 10.0
    assert s.tasks_key == "tasks"
