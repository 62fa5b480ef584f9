"""The ``instaquery query`` command."""

from __future__ import annotations

from typing import Optional

import typer

from instaquery.exceptions import AuthError, ConnectionError_
from instaquery.result import FailureReason, QueryResult


def query_command(
    query: str = typer.Argument(
        help="Path relative to the versioned endpoint (e.g. 'users/self') or an absolute URL."
    ),
    token: Optional[str] = typer.Option(
        None, "--token", "-t", help="Access token (overrides INSTAQUERY_ACCESS_TOKEN)."
    ),
    api_version: Optional[str] = typer.Option(
        None, "--api-version", help="API version path segment (default: v1)."
    ),
    cache: Optional[str] = typer.Option(
        None, "--cache", "-c", help="Cache backend: null, memory, disk."
    ),
) -> None:
    """Perform a GET query and print the raw response body.

    Example::

        instaquery query users/self --token IGQV...
        instaquery query "users/self/media/recent?count=5" --cache disk
    """
    from instaquery.cache import create_cache
    from instaquery.client import Client
    from instaquery.config import resolve_settings
    from instaquery.models import CacheBackend
    from instaquery.output import debug, format_response, warning

    settings, cache_config = resolve_settings(
        cli_token=token, cli_version=api_version, cli_cache=cache
    )
    response_cache = create_cache(cache_config)
    debug(f"Cache backend: {cache_config.backend.value}")
    if cache_config.backend is CacheBackend.MEMORY:
        warning("The memory cache does not persist between invocations; use --cache disk.")

    try:
        with Client.from_settings(settings, cache=response_cache) as client:
            result = client.query(query)
    finally:
        close = getattr(response_cache, "close", None)
        if close is not None:
            close()

    _raise_for_failure(result, query)
    format_response(result.body)


def _raise_for_failure(result: QueryResult, query: str) -> None:
    """Translate a failed result into the matching CLI exception."""
    if result.ok:
        return
    if result.reason is FailureReason.MISSING_TOKEN:
        raise AuthError(
            "No access token. Pass --token or set INSTAQUERY_ACCESS_TOKEN."
        )
    if result.status_code is not None:
        raise ConnectionError_(f"Query '{query}' failed with HTTP {result.status_code}")
    raise ConnectionError_(f"Query '{query}' failed: the API could not be reached")
