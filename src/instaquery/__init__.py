"""instaquery -- a small client for the Instagram HTTP API.

The library builds request URIs, attaches an access token, performs a single
GET per query and optionally caches the raw response through a pluggable
cache. Response bodies are returned as opaque strings.

Typical use::

    from instaquery import Client, MemoryCache

    client = Client.with_token("IGQV...", cache=MemoryCache(ttl_seconds=60))
    result = client.query("users/self")
    if result:
        print(result.body)

Modules:
    client: :class:`Client`, URI and cache-key construction.
    cache: The cache protocol, bundled caches and the default cache factory.
    transport: The GET transport backed by httpx.
    result: :class:`QueryResult`, the outcome of a query.
    config: XDG-aware configuration and settings resolution.
    app: Typer CLI entry point.
"""

__version__ = "0.1.0"

from instaquery.cache import (  # noqa: E402
    DiskCache,
    MemoryCache,
    NullCache,
    ResponseCache,
    get_default_cache_factory,
    set_default_cache_factory,
)
from instaquery.client import Client  # noqa: E402
from instaquery.models import ApiConfig, ClientSettings  # noqa: E402
from instaquery.result import FailureReason, QueryResult, QueryStatus  # noqa: E402
from instaquery.transport import HttpxTransport, Transport, TransportResponse  # noqa: E402

__all__ = [
    "ApiConfig",
    "Client",
    "ClientSettings",
    "DiskCache",
    "FailureReason",
    "HttpxTransport",
    "MemoryCache",
    "NullCache",
    "QueryResult",
    "QueryStatus",
    "ResponseCache",
    "Transport",
    "TransportResponse",
    "get_default_cache_factory",
    "set_default_cache_factory",
    "__version__",
]
