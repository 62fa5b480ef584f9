"""The capability contract every response cache satisfies.

:class:`~instaquery.client.Client` only ever calls :meth:`ResponseCache.fetch`
and :meth:`ResponseCache.store`, so anything with those two methods can be
injected: the bundled :class:`~instaquery.cache.NullCache`,
:class:`~instaquery.cache.MemoryCache` and :class:`~instaquery.cache.DiskCache`,
or an application's own implementation.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class ResponseCache(Protocol):
    """Key/value store for raw response bodies.

    Keys are built by :func:`~instaquery.client.build_cache_key` as
    ``"<uri>|<token>"``. Expiry and eviction are entirely up to the
    implementation.

    Warning:
        The value returned by :meth:`store` is what
        :meth:`~instaquery.client.Client.query` hands back to its caller, not
        the body received from the API. An implementation that normalises
        values on write therefore changes every fetched result, and one that
        returns the wrong value silently corrupts them.
    """

    def fetch(self, key: str) -> Optional[str]:
        """Return the stored body for *key*, or ``None`` when there is none.

        An empty string is a valid stored body and must not be reported as
        absent.
        """
        ...

    def store(self, key: str, value: str) -> str:
        """Persist *value* under *key* and return the canonical stored value."""
        ...
