# src/taskdeck/tasks/task_manager.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace

from ..storage.persistence import JsonValueStore
from .task_ids import MonotonicIdSource
from .task_models import Task, TaskFilter, decode_tasks, encode_tasks

logger = logging.getLogger(__name__)

TaskObserver = Callable[["TaskManager"], None]

DEFAULT_TASKS_KEY = "tasks"


class TaskManager:
    """
    In-memory task list with write-through persistence.

    - hydrated once from the store at construction
    - every effective mutation writes the whole list back, then notifies observers
    - no-ops (empty text, unknown id) neither write nor notify
    - a failed write is logged and remembered in last_save_ok; the in-memory list
      stays authoritative for the session

    One manager per store: two managers over the same key will overwrite each other.
    """

    def __init__(
        self,
        store: JsonValueStore,
        *,
        key: str = DEFAULT_TASKS_KEY,
        id_source: MonotonicIdSource | None = None,
    ) -> None:
        self._store = store
        self._key = key
        self._ids = id_source or MonotonicIdSource()
        self._filter = TaskFilter.ALL
        self._observers: list[TaskObserver] = []
        self._last_save_ok = True

        self._tasks: list[Task] = store.load(key, [], decode=decode_tasks)
        for t in self._tasks:
            self._ids.observe(t.id)
        logger.info("TaskManager hydrated key=%s tasks=%d", key, len(self._tasks))

    # ---- read side ----

    @property
    def tasks(self) -> tuple[Task, ...]:
        """Full, unfiltered list in insertion order."""
        return tuple(self._tasks)

    @property
    def filter(self) -> TaskFilter:
        return self._filter

    @property
    def last_save_ok(self) -> bool:
        return self._last_save_ok

    def get_task(self, task_id: int) -> Task | None:
        for t in self._tasks:
            if t.id == task_id:
                return t
        return None

    def filtered_view(self) -> list[Task]:
        return [t for t in self._tasks if self._filter.matches(t)]

    def counts(self) -> dict[str, int]:
        done = sum(1 for t in self._tasks if t.completed)
        return {"total": len(self._tasks), "active": len(self._tasks) - done, "completed": done}

    # ---- observers ----

    def subscribe(self, observer: TaskObserver) -> Callable[[], None]:
        """Register a callback run after each change. Returns an unsubscribe function."""
        self._observers.append(observer)

        def _unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return _unsubscribe

    def _notify(self) -> None:
        for observer in list(self._observers):
            try:
                observer(self)
            except Exception:
                logger.exception("Task observer %r failed.", observer)

    # ---- mutations ----

    def _commit(self) -> None:
        self._last_save_ok = self._store.save(self._key, self._tasks, encode=encode_tasks)
        if not self._last_save_ok:
            logger.warning("Tasks not persisted; continuing with in-memory state.")
        self._notify()

    def _index_of(self, task_id: int) -> int | None:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        return None

    def add_task(self, text: str) -> Task | None:
        clean = (text or "").strip()
        if not clean:
            return None

        task = Task(id=self._ids.next_id(), text=clean)
        self._tasks.append(task)
        logger.debug("Added task id=%s", task.id)
        self._commit()
        return task

    def toggle_task(self, task_id: int) -> Task | None:
        idx = self._index_of(task_id)
        if idx is None:
            return None

        updated = replace(self._tasks[idx], completed=not self._tasks[idx].completed)
        self._tasks[idx] = updated
        logger.debug("Toggled task id=%s completed=%s", task_id, updated.completed)
        self._commit()
        return updated

    def delete_task(self, task_id: int) -> Task | None:
        idx = self._index_of(task_id)
        if idx is None:
            return None

        removed = self._tasks.pop(idx)
        logger.debug("Deleted task id=%s", task_id)
        self._commit()
        return removed

    def set_filter(self, new_filter: TaskFilter | str) -> TaskFilter:
        """Change the view filter (not persisted). Raises ValueError on unknown names."""
        self._filter = TaskFilter.parse(new_filter)
        self._notify()
        return self._filter
