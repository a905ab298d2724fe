# src/taskdeck/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps storage backends and the posts source swappable and makes testing easier.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..posts.posts_models import Post


class KeyValueStore(Protocol):
    """
    Synchronous string-keyed store (localStorage-like).

    Backends may raise on I/O errors; callers that need best-effort semantics
    go through storage.persistence.JsonValueStore.
    """

    def get_item(self, key: str) -> str | None: ...
    def set_item(self, key: str, value: str) -> None: ...
    def remove_item(self, key: str) -> None: ...


class PostsSource(Protocol):
    """Read-only source of remote posts. Raises PostsFetchError on failure."""

    def fetch_posts(self) -> list[Post]: ...
