# tests/test_kv_store.py

from __future__ import annotations

from pathlib import Path

from taskdeck.storage.kv_store import JsonFileKeyValueStore, SqliteKeyValueStore


def test_sqlite_store_get_set_remove(tmp_path: Path) -> None:
    store = SqliteKeyValueStore(tmp_path / "nested" / "store.sqlite3")

    assert store.get_item("tasks") is None
    store.set_item("tasks", "[]")
    assert store.get_item("tasks") == "[]"

    store.set_item("tasks", '[{"id": 1}]')
    assert store.get_item("tasks") == '[{"id": 1}]'

    store.remove_item("tasks")
    assert store.get_item("tasks") is None


def test_sqlite_store_survives_reopen(tmp_path: Path) -> None:
    db = tmp_path / "store.sqlite3"
    SqliteKeyValueStore(db).set_item("k", "v")
    assert SqliteKeyValueStore(db).get_item("k") == "v"


def test_json_file_store_get_set_remove(tmp_path: Path) -> None:
    path = tmp_path / "store.json"
    store = JsonFileKeyValueStore(path)

    assert store.get_item("tasks") is None
    store.set_item("tasks", "[]")
    store.set_item("other", "1")
    assert JsonFileKeyValueStore(path).get_item("tasks") == "[]"

    store.remove_item("tasks")
    assert store.get_item("tasks") is None
    assert store.get_item("other") == "1"
    assert not path.with_suffix(".json.tmp").exists()


def test_json_file_store_corrupt_file_reads_empty(tmp_path: Path) -> None:
    path = tmp_path / "store.json"
    path.write_text("not json at all", "utf-8")
    store = JsonFileKeyValueStore(path)

    assert store.get_item("tasks") is None
    store.set_item("tasks", "[]")
    assert store.get_item("tasks") == "[]"
