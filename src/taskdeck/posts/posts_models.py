# src/taskdeck/posts/posts_models.py

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


class PostsFetchError(RuntimeError):
    """Remote posts could not be fetched or had an unexpected shape."""


@dataclass(frozen=True, slots=True)
class Post:
    id: int
    user_id: int
    title: str
    body: str

    @classmethod
    def from_api(cls, data: Any) -> Post:
        if not isinstance(data, dict):
            raise ValueError("post must be an object")
        try:
            return cls(
                id=int(data["id"]),
                user_id=int(data.get("userId", 0)),
                title=str(data["title"]),
                body=str(data.get("body", "")),
            )
        except (KeyError, TypeError) as e:
            raise ValueError(f"malformed post: {e}") from e


def filter_posts(posts: Iterable[Post], query: str) -> list[Post]:
    """Case-insensitive title substring match. Empty query keeps everything."""
    q = (query or "").lower()
    return [p for p in posts if q in p.title.lower()]
