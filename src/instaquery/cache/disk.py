"""Disk-based response cache.

Uses :mod:`diskcache` to persist response bodies on the filesystem so that
repeated CLI invocations can reuse them. Entries optionally expire after a
fixed number of seconds.

Cache keys are SHA-256 hashes of the ``"<uri>|<token>"`` lookup key, so the
access token never appears in plain text inside the cache directory.

See Also:
    :class:`~instaquery.models.CacheConfig` -- selects this backend and
    controls ``ttl_seconds``.
"""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Any, Optional

import diskcache


class DiskCache:
    """Disk-backed cache for raw response bodies.

    Args:
        cache_dir: Root directory for the cache. A ``responses/``
            subdirectory is created inside it.
        ttl_seconds: Entry lifetime. ``None`` keeps entries until
            :meth:`clear` is called.

    Example::

        from instaquery.cache import DiskCache

        with DiskCache("/tmp/instaquery-cache", ttl_seconds=300) as cache:
            cache.store("https://api.instagram.com/v1/users/self?access_token=T|T", "{}")
            hit = cache.fetch("https://api.instagram.com/v1/users/self?access_token=T|T")
    """

    def __init__(self, cache_dir: str | Path, ttl_seconds: Optional[int] = None) -> None:
        self._cache_dir = Path(cache_dir)
        self._ttl = ttl_seconds
        self._cache = diskcache.Cache(str(self._cache_dir / "responses"))

    @property
    def directory(self) -> Path:
        return self._cache_dir / "responses"

    def fetch(self, key: str) -> Optional[str]:
        """Look up a stored body.

        Returns:
            The stored text, or ``None`` on a miss or after expiry.
        """
        return self._cache.get(self._make_key(key))

    def store(self, key: str, value: str) -> str:
        """Persist *value* and return it unchanged."""
        self._cache.set(self._make_key(key), value, expire=self._ttl)
        return value

    def invalidate(self, key: str) -> None:
        """Remove a specific entry by its lookup key."""
        self._cache.delete(self._make_key(key))

    def clear(self) -> None:
        """Remove all entries from the cache."""
        self._cache.clear()

    def stats(self) -> dict[str, Any]:
        """Return cache statistics.

        Returns:
            A ``dict`` with ``size`` (number of entries), ``directory``
            (str path) and ``ttl_seconds`` (int or ``None``).
        """
        return {
            "size": len(self._cache),
            "directory": str(self.directory),
            "ttl_seconds": self._ttl,
        }

    def close(self) -> None:
        """Close the underlying :class:`diskcache.Cache` and release resources."""
        self._cache.close()

    def __enter__(self) -> DiskCache:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    @staticmethod
    def _make_key(key: str) -> str:
        return hashlib.sha256(key.encode()).hexdigest()
