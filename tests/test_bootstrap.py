# tests/test_bootstrap.py

from __future__ import annotations

from taskdeck.cli.bootstrap import create_backend, create_initial_state
from taskdeck.storage.kv_store import InMemoryKeyValueStore, JsonFileKeyValueStore, SqliteKeyValueStore


def test_create_backend_by_setting(settings) -> None:
    assert isinstance(create_backend(settings), SqliteKeyValueStore)

    settings.store_backend = "json"
    settings.store_path = settings.data_dir / "store.json"
    assert isinstance(create_backend(settings), JsonFileKeyValueStore)

    settings.store_backend = "memory"
    assert isinstance(create_backend(settings), InMemoryKeyValueStore)


def test_tasks_survive_restart_on_sqlite(settings) -> None:
    state = create_initial_state(settings=settings)
    task = state.tasks.add_task("persist me")
    state.tasks.toggle_task(task.id)
    state.posts.close()

    again = create_initial_state(settings=settings)
    assert again.tasks.tasks == state.tasks.tasks
    assert again.theme == "light"
    again.posts.close()


def test_injected_backend_is_used(settings) -> None:
    kv = InMemoryKeyValueStore()
    state = create_initial_state(settings=settings, backend=kv)
    state.tasks.add_task("x")
    assert "tasks" in kv.items
    assert settings.data_dir.exists()
    state.posts.close()


def test_corrupt_sqlite_file_degrades_to_memory(settings) -> None:
    settings.store_path.parent.mkdir(parents=True, exist_ok=True)
    settings.store_path.write_bytes(b"this is not a sqlite database" * 100)

    state = create_initial_state(settings=settings)
    assert state.tasks.tasks == ()

    task = state.tasks.add_task("still works")
    assert task is not None
    assert [t.text for t in state.tasks.tasks] == ["still works"]
    assert state.tasks.last_save_ok is False
    state.posts.close()


def test_namespace_subpackages_import() -> None:
    import importlib

    for name in ("taskdeck.core.ports", "taskdeck.core.state", "taskdeck.cli.main", "taskdeck.connectors.console_connector"):
        assert importlib.import_module(name) is not None

    from taskdeck.cli.main import main

    assert callable(main)
