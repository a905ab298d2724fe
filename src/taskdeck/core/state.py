# src/taskdeck/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..posts.posts_browser import PostsBrowser
from ..tasks.task_manager import TaskManager


@dataclass
class AppState:
    # Settings object (config.Settings or a test double with the same attributes).
    settings: Any

    tasks: TaskManager
    posts: PostsBrowser

    # UI-only; not persisted.
    theme: str = "light"

    def toggle_theme(self) -> str:
        self.theme = "dark" if self.theme == "light" else "light"
        return self.theme
