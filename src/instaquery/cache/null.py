"""The no-op cache used when nothing else is configured."""

from __future__ import annotations

from typing import Optional


class NullCache:
    """A cache that never holds anything.

    :meth:`fetch` always misses and :meth:`store` hands the value straight
    back, so every query goes to the network.
    """

    def fetch(self, key: str) -> Optional[str]:
        return None

    def store(self, key: str, value: str) -> str:
        return value
