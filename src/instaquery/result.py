"""Explicit outcome type for :meth:`~instaquery.client.Client.query`.

A query has three possible outcomes: the body was served from the cache,
the body was fetched from the API, or the query failed. :class:`QueryResult`
carries which one happened so that an empty response body is never confused
with a missing one. ``bool(result)`` is ``False`` only for failures.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional


class QueryStatus(str, enum.Enum):
    """Where the body of a :class:`QueryResult` came from."""

    CACHED = "cached"
    FETCHED = "fetched"
    FAILED = "failed"


class FailureReason(str, enum.Enum):
    """Why a query failed."""

    MISSING_TOKEN = "missing_token"
    TRANSPORT = "transport"


@dataclass(frozen=True)
class QueryResult:
    """Outcome of a single query.

    Attributes:
        status: Cache hit, network fetch, or failure.
        body: Response text for successful results, ``None`` on failure.
        reason: Set only when ``status`` is :attr:`QueryStatus.FAILED`.
        uri: The fully-qualified request URI (``None`` when no token was set).
        cache_key: The key used for the cache lookup.
        status_code: HTTP status reported by the transport, when known.
    """

    status: QueryStatus
    body: Optional[str] = None
    reason: Optional[FailureReason] = None
    uri: Optional[str] = None
    cache_key: Optional[str] = None
    status_code: Optional[int] = None

    @classmethod
    def cached(cls, body: str, uri: str, cache_key: str) -> QueryResult:
        return cls(QueryStatus.CACHED, body=body, uri=uri, cache_key=cache_key)

    @classmethod
    def fetched(
        cls,
        body: str,
        uri: str,
        cache_key: str,
        status_code: Optional[int] = None,
    ) -> QueryResult:
        return cls(
            QueryStatus.FETCHED,
            body=body,
            uri=uri,
            cache_key=cache_key,
            status_code=status_code,
        )

    @classmethod
    def failed(
        cls,
        reason: FailureReason,
        uri: Optional[str] = None,
        cache_key: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> QueryResult:
        """Build the failure sentinel returned for every unsuccessful query."""
        return cls(
            QueryStatus.FAILED,
            reason=reason,
            uri=uri,
            cache_key=cache_key,
            status_code=status_code,
        )

    @property
    def ok(self) -> bool:
        return self.status is not QueryStatus.FAILED

    @property
    def from_cache(self) -> bool:
        return self.status is QueryStatus.CACHED

    def __bool__(self) -> bool:
        return self.ok
