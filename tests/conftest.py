# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskdeck.core.state import AppState
from taskdeck.posts.posts_browser import PostsBrowser
from taskdeck.storage.persistence import JsonValueStore
from taskdeck.tasks.task_ids import MonotonicIdSource
from taskdeck.tasks.task_manager import TaskManager

from .fakes import SAMPLE_POSTS, BrokenKeyValueStore, FakeClock, FakePostsSource


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    A SimpleNamespace rather than the real config keeps tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="taskdeck-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        store_backend="sqlite",
        store_path=tmp_path / "data" / "store.sqlite3",
        tasks_key="tasks",
        theme="light",
        posts_base_url="https://posts.test",
        posts_timeout_seconds=1.0,
    )


@pytest.fixture()
def kv() -> BrokenKeyValueStore:
    return BrokenKeyValueStore()


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def manager(kv: BrokenKeyValueStore, clock: FakeClock) -> TaskManager:
    return TaskManager(JsonValueStore(kv), id_source=MonotonicIdSource(clock))


@pytest.fixture()
def posts_source() -> FakePostsSource:
    return FakePostsSource(SAMPLE_POSTS)


@pytest.fixture()
def state(settings: SimpleNamespace, manager: TaskManager, posts_source: FakePostsSource) -> AppState:
    """AppState wired with an in-memory store and a fake posts source."""
    return AppState(
        settings=settings,
        tasks=manager,
        posts=PostsBrowser(posts_source),
        theme="light",
    )
