# src/taskdeck/tasks/task_models.py

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

TASK_FIELDS = frozenset({"id", "text", "completed"})


class TaskFilter(StrEnum):
    """View filter over the task list. Never persisted."""

    ALL = "All"
    ACTIVE = "Active"
    COMPLETED = "Completed"

    @classmethod
    def parse(cls, raw: str | TaskFilter) -> TaskFilter:
        """Case-insensitive lookup by value. Raises ValueError on unknown names."""
        if isinstance(raw, cls):
            return raw
        name = str(raw).strip().lower()
        for f in cls:
            if f.value.lower() == name:
                return f
        raise ValueError(f"Unknown filter: {raw!r}")

    def matches(self, task: Task) -> bool:
        if self is TaskFilter.ACTIVE:
            return not task.completed
        if self is TaskFilter.COMPLETED:
            return task.completed
        return True


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    text: str
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "text": self.text, "completed": self.completed}

    @classmethod
    def from_dict(cls, data: Any) -> Task:
        """Strict decode of one stored task. Raises ValueError on any shape mismatch."""
        if not isinstance(data, dict):
            raise ValueError(f"task must be an object, got {type(data).__name__}")
        if set(data) != TASK_FIELDS:
            raise ValueError(f"task fields must be {sorted(TASK_FIELDS)}, got {sorted(data)}")

        task_id = data["id"]
        text = data["text"]
        completed = data["completed"]

        # bool is an int subclass; reject it as an id.
        if not isinstance(task_id, int) or isinstance(task_id, bool):
            raise ValueError("task id must be an integer")
        if not isinstance(text, str):
            raise ValueError("task text must be a string")
        if not text.strip():
            raise ValueError("task text must not be blank")
        if not isinstance(completed, bool):
            raise ValueError("task completed must be a boolean")

        return cls(id=task_id, text=text, completed=completed)


def decode_tasks(data: Any) -> list[Task]:
    """Decode the stored task array. Any bad element or duplicate id rejects the whole value."""
    if not isinstance(data, list):
        raise ValueError(f"tasks must be an array, got {type(data).__name__}")

    tasks = [Task.from_dict(item) for item in data]

    seen: set[int] = set()
    for t in tasks:
        if t.id in seen:
            raise ValueError(f"duplicate task id {t.id}")
        seen.add(t.id)
    return tasks


def encode_tasks(tasks: Iterable[Task]) -> list[dict[str, Any]]:
    return [t.to_dict() for t in tasks]
