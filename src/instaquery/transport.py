"""HTTP GET transport used by :class:`~instaquery.client.Client`.

The client needs exactly one capability from the network layer: fetch a URL
and report whether that worked. :class:`Transport` describes that contract
and :class:`HttpxTransport` implements it on top of :class:`httpx.Client`.

Network-level failures (DNS, refused connections, timeouts) are folded into
a non-success :class:`TransportResponse` instead of being raised, so the
client sees a single success signal regardless of what went wrong.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable

import httpx


@dataclass(frozen=True)
class TransportResponse:
    """Result of one GET request.

    Attributes:
        success: ``True`` for a 2xx response.
        content: Decoded response body (empty when the request never completed).
        status_code: HTTP status, or ``None`` on a network-level failure.
        error: Short description of a network-level failure.
    """

    success: bool
    content: str = ""
    status_code: Optional[int] = None
    error: Optional[str] = None


@runtime_checkable
class Transport(Protocol):
    """Anything that can perform a blocking GET and report success."""

    def get(self, url: str) -> TransportResponse:
        ...


class HttpxTransport:
    """Blocking GET transport backed by :class:`httpx.Client`.

    Can be used as a context manager; otherwise call :meth:`close` when done.
    The timeout is the only cancellation mechanism.

    Args:
        timeout: Request timeout in seconds.
        verify_ssl: Verify TLS certificates.
        client: Pre-built :class:`httpx.Client` to use instead of creating
            one (e.g. one wired to :class:`httpx.MockTransport` in tests).
    """

    def __init__(
        self,
        timeout: float = 30,
        verify_ssl: bool = True,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._client = client or httpx.Client(
            timeout=timeout,
            verify=verify_ssl,
            follow_redirects=True,
            headers={"Accept": "application/json"},
        )

    def get(self, url: str) -> TransportResponse:
        try:
            response = self._client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            return TransportResponse(success=False, error=f"{type(exc).__name__}: {exc}")
        return TransportResponse(
            success=response.is_success,
            content=response.text,
            status_code=response.status_code,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpxTransport:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
