# src/taskdeck/posts/posts_client.py

from __future__ import annotations

import logging

import httpx

from .posts_models import Post, PostsFetchError

logger = logging.getLogger(__name__)


def _make_timeout(seconds: float) -> httpx.Timeout:
    # Connect fast, allow the body a little longer.
    return httpx.Timeout(seconds, connect=min(seconds, 5.0))


class HttpPostsClient:
    """
    GET {base_url}/posts over httpx.

    Every failure (transport, HTTP status, JSON, shape) is raised as PostsFetchError.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = httpx.Client(
            base_url=self._base_url,
            timeout=_make_timeout(timeout),
            transport=transport,
            headers={"Accept": "application/json"},
        )

    def close(self) -> None:
        self._client.close()

    def fetch_posts(self) -> list[Post]:
        try:
            resp = self._client.get("/posts")
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise PostsFetchError(f"HTTP {e.response.status_code} from {self._base_url}") from e
        except httpx.HTTPError as e:
            raise PostsFetchError(f"Request to {self._base_url} failed: {e}") from e

        try:
            data = resp.json()
        except ValueError as e:
            raise PostsFetchError("Response is not valid JSON") from e

        if not isinstance(data, list):
            raise PostsFetchError(f"Expected a JSON array, got {type(data).__name__}")

        try:
            posts = [Post.from_api(item) for item in data]
        except ValueError as e:
            raise PostsFetchError(str(e)) from e

        logger.info("Fetched %d posts from %s", len(posts), self._base_url)
        return posts
