"""Bounded in-memory cache for fetched raw file content."""

from __future__ import annotations

import time
from collections import OrderedDict
from collections.abc import Callable


class ContentCache:
    """LRU cache of raw file text keyed by raw URL, with optional expiry.

    Entries are evicted oldest-first once ``max_entries`` is exceeded and are
    dropped on lookup when older than ``ttl_seconds`` (0 disables expiry).
    Access is expected from a single event loop, so there is no locking.
    """

    def __init__(
        self,
        max_entries: int = 256,
        ttl_seconds: float = 600.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_entries = max(1, int(max_entries))
        self.ttl_seconds = max(0.0, float(ttl_seconds))
        self._clock = clock
        self._entries: OrderedDict[str, tuple[float, str]] = OrderedDict()

    def get(self, key: str) -> str | None:
        entry = self._entries.get(key)
        if entry is None:
            return None

        stored_at, value = entry
        if self._expired(stored_at):
            del self._entries[key]
            return None

        self._entries.move_to_end(key)
        return value

    def put(self, key: str, value: str) -> None:
        self._entries[key] = (self._clock(), value)
        self._entries.move_to_end(key)
        while len(self._entries) > self.max_entries:
            self._entries.popitem(last=False)

    def clear(self) -> None:
        self._entries.clear()

    def _expired(self, stored_at: float) -> bool:
        return bool(self.ttl_seconds) and self._clock() - stored_at >= self.ttl_seconds

    def __contains__(self, key: object) -> bool:
        entry = self._entries.get(key)  # type: ignore[arg-type]
        return entry is not None and not self._expired(entry[0])

    def __len__(self) -> int:
        return len(self._entries)
