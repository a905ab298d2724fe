"""
Local persistence.

- kv_store.py: string key-value backends (SQLite, JSON file, in-memory)
- persistence.py: JSON value adapter with default-on-failure reads and best-effort writes
"""
