# src/taskdeck/storage/persistence.py

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from ..core.ports import KeyValueStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JsonValueStore:
    """
    Typed JSON values over an opaque KeyValueStore.

    Read path: absent, malformed or wrongly shaped values resolve to the
    caller's default. Write path: failures are logged and reported as False;
    nothing is raised to the caller.
    """

    def __init__(self, backend: KeyValueStore) -> None:
        self._backend = backend

    @property
    def backend(self) -> KeyValueStore:
        return self._backend

    def load(
        self,
        key: str,
        default: T,
        decode: Callable[[Any], T] | None = None,
    ) -> T:
        """
        Return the value stored under `key`, or `default`.

        `decode` receives the parsed JSON and may raise on an unexpected shape;
        any such error also yields `default`.
        """
        try:
            raw = self._backend.get_item(key)
        except Exception:
            logger.warning("Store read failed key=%s; using default.", key, exc_info=True)
            return default

        if raw is None or raw == "":
            return default

        try:
            data = json.loads(raw)
            if decode is not None:
                return decode(data)
            # Without a decoder, the default's type is the expected shape.
            if default is not None and not isinstance(data, type(default)):
                raise ValueError(
                    f"expected {type(default).__name__}, got {type(data).__name__}"
                )
            return data
        except Exception as e:
            logger.warning("Stored value for key=%s is unusable (%s); using default.", key, e)
            return default

    def save(
        self,
        key: str,
        value: T,
        encode: Callable[[T], Any] | None = None,
    ) -> bool:
        """Overwrite `key` with `value`. Returns False if the write did not happen."""
        try:
            payload = encode(value) if encode is not None else value
            raw = json.dumps(payload, ensure_ascii=False)
        except Exception:
            logger.warning("Failed to encode value for key=%s; not saved.", key, exc_info=True)
            return False

        try:
            self._backend.set_item(key, raw)
        except Exception:
            logger.warning("Store write failed key=%s; keeping in-memory state.", key, exc_info=True)
            return False

        logger.debug("Saved key=%s (%d bytes)", key, len(raw))
        return True
