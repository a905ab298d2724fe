# src/taskdeck/tasks/task_ids.py

from __future__ import annotations

import time
from collections.abc import Callable


class MonotonicIdSource:
    """
    Millisecond-timestamp ids that never repeat or go backwards.

    If the clock has not advanced (same tick, or it was set back), the next id
    is last + 1.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._last = 0

    @property
    def last_issued(self) -> int:
        return self._last

    def observe(self, existing_id: int) -> None:
        """Account for an id issued elsewhere (e.g. hydrated from the store)."""
        if existing_id > self._last:
            self._last = existing_id

    def next_id(self) -> int:
        candidate = int(self._clock() * 1000)
        self._last = max(candidate, self._last + 1)
        return self._last
