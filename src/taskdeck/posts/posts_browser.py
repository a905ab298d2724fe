# src/taskdeck/posts/posts_browser.py

from __future__ import annotations

import logging

from ..core.ports import PostsSource
from .posts_models import Post, PostsFetchError, filter_posts

logger = logging.getLogger(__name__)


class PostsBrowser:
    """
    Fetch-once, filter-by-title view over a PostsSource.

    Fetch errors are kept in `error` instead of being raised.
    """

    def __init__(self, source: PostsSource) -> None:
        self._source = source
        self.posts: list[Post] = []
        self.query = ""
        self.loaded = False
        self.error: str | None = None

    def ensure_loaded(self) -> None:
        if not self.loaded:
            self.refresh()

    def refresh(self) -> None:
        try:
            self.posts = self._source.fetch_posts()
            self.error = None
        except PostsFetchError as e:
            logger.warning("Posts fetch failed: %s", e)
            self.posts = []
            self.error = str(e)
        self.loaded = True

    def close(self) -> None:
        close = getattr(self._source, "close", None)
        if callable(close):
            close()

    def set_query(self, query: str) -> None:
        self.query = query or ""

    def visible(self) -> list[Post]:
        return filter_posts(self.posts, self.query)
