"""In-process response cache with optional expiry."""

from __future__ import annotations

import time
from typing import Callable, Optional


class MemoryCache:
    """Dictionary-backed cache living for the duration of the process.

    Entries older than *ttl_seconds* are treated as absent and dropped on the
    next :meth:`fetch`. There is no size bound and no locking; concurrent
    writers race with last-write-wins semantics.

    Args:
        ttl_seconds: Entry lifetime. ``None`` keeps entries until
            :meth:`clear` is called.
        clock: Monotonic time source, injectable for tests.
    """

    def __init__(
        self,
        ttl_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl = ttl_seconds
        self._clock = clock
        self._entries: dict[str, tuple[str, Optional[float]]] = {}

    def fetch(self, key: str) -> Optional[str]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if expires_at is not None and self._clock() >= expires_at:
            del self._entries[key]
            return None
        return value

    def store(self, key: str, value: str) -> str:
        expires_at = self._clock() + self._ttl if self._ttl is not None else None
        self._entries[key] = (value, expires_at)
        return value

    def invalidate(self, key: str) -> None:
        """Remove *key* if present."""
        self._entries.pop(key, None)

    def clear(self) -> None:
        """Remove all entries."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
