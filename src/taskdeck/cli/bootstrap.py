# src/taskdeck/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- picks the key-value backend and wires the task manager and posts browser into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import KeyValueStore
from ..core.state import AppState
from ..posts.posts_browser import PostsBrowser
from ..posts.posts_client import HttpPostsClient
from ..storage.kv_store import InMemoryKeyValueStore, JsonFileKeyValueStore, SqliteKeyValueStore
from ..storage.persistence import JsonValueStore
from ..tasks.task_manager import TaskManager

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.store_path.parent.mkdir(parents=True, exist_ok=True)


def create_backend(settings) -> KeyValueStore:
    backend = getattr(settings, "store_backend", "sqlite")
    if backend == "memory":
        logger.info("Using in-memory store; tasks will not survive restart.")
        return InMemoryKeyValueStore()
    if backend == "json":
        return JsonFileKeyValueStore(settings.store_path)
    return SqliteKeyValueStore(settings.store_path)


def create_initial_state(*, settings=None, backend: KeyValueStore | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Settings and backend are injectable for tests; if settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    if backend is None:
        backend = create_backend(settings)

    tasks = TaskManager(JsonValueStore(backend), key=settings.tasks_key)
    posts = PostsBrowser(
        HttpPostsClient(settings.posts_base_url, timeout=settings.posts_timeout_seconds)
    )

    return AppState(
        settings=settings,
        tasks=tasks,
        posts=posts,
        theme=getattr(settings, "theme", "light"),
    )
