"""Pluggable response caching for instaquery.

Every cache satisfies the :class:`ResponseCache` protocol (``fetch`` and
``store``). Three implementations ship with the package:

- :class:`NullCache` -- never stores anything; the default.
- :class:`MemoryCache` -- process-local dictionary with optional TTL.
- :class:`DiskCache` -- persisted with :mod:`diskcache`, shared across runs.

A :class:`~instaquery.client.Client` that is not handed a cache builds one
from the process-wide default factory, read and written through
:func:`get_default_cache_factory` and :func:`set_default_cache_factory`. The
factory is captured when the client is constructed. Set it once during
application startup, before any client is created, and from a single thread.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

from instaquery.cache.base import ResponseCache
from instaquery.cache.disk import DiskCache
from instaquery.cache.memory import MemoryCache
from instaquery.cache.null import NullCache
from instaquery.exceptions import ConfigError
from instaquery.models import CacheBackend, CacheConfig

CacheFactory = Callable[[], ResponseCache]

DEFAULT_CACHE_FACTORY: CacheFactory = NullCache
"""Factory used until :func:`set_default_cache_factory` is called."""

_default_cache_factory: CacheFactory = DEFAULT_CACHE_FACTORY


def get_default_cache_factory() -> CacheFactory:
    """Return the factory new clients use when no cache is passed in."""
    return _default_cache_factory


def set_default_cache_factory(factory: Optional[CacheFactory] = None) -> CacheFactory:
    """Replace the process-wide default cache factory.

    Calling without an argument only reads the current value, mirroring
    :func:`get_default_cache_factory`. Clients that already exist keep the
    cache they were built with.

    Args:
        factory: Zero-argument callable returning a :class:`ResponseCache`,
            typically a cache class.

    Returns:
        The factory in effect after the call.
    """
    global _default_cache_factory
    if factory is not None:
        _default_cache_factory = factory
    return _default_cache_factory


def reset_default_cache_factory() -> None:
    """Restore :data:`DEFAULT_CACHE_FACTORY`.

    Primarily useful in test suites to ensure a clean state between tests.
    """
    global _default_cache_factory
    _default_cache_factory = DEFAULT_CACHE_FACTORY


def create_cache(config: CacheConfig, cache_dir: Optional[str | Path] = None) -> ResponseCache:
    """Build the cache described by *config*.

    Args:
        config: Backend name and TTL.
        cache_dir: Root directory for :class:`DiskCache`. Defaults to
            :func:`~instaquery.config.get_cache_dir`.

    Raises:
        ConfigError: If the backend name is not recognised.
    """
    try:
        backend = CacheBackend(config.backend)
    except ValueError as exc:
        raise ConfigError(f"Unknown cache backend: {config.backend!r}") from exc

    if backend is CacheBackend.NULL:
        return NullCache()
    if backend is CacheBackend.MEMORY:
        return MemoryCache(ttl_seconds=config.ttl_seconds)

    if cache_dir is None:
        from instaquery.config import get_cache_dir

        cache_dir = get_cache_dir()
    return DiskCache(cache_dir, ttl_seconds=config.ttl_seconds)


__all__ = [
    "DEFAULT_CACHE_FACTORY",
    "CacheFactory",
    "DiskCache",
    "MemoryCache",
    "NullCache",
    "ResponseCache",
    "create_cache",
    "get_default_cache_factory",
    "reset_default_cache_factory",
    "set_default_cache_factory",
]
