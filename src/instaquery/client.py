"""Instagram API client: URI building, token injection, and cached GETs.

:class:`Client` performs one query at a time against the Instagram API:

1. Compose the request URI from the endpoint, API version and the caller's
   query string (absolute ``http(s)://`` URLs are used verbatim), then
   append the ``access_token`` parameter.
2. Look the URI up in the injected :class:`~instaquery.cache.ResponseCache`
   under ``"<uri>|<token>"``.
3. On a miss, issue exactly one blocking GET through the
   :class:`~instaquery.transport.Transport` and store the body.

:meth:`Client.query` never raises. Every outcome is a
:class:`~instaquery.result.QueryResult`; a missing token and a failed
request both produce a failed result.

Example::

    from instaquery import Client

    client = Client.with_token("IGQV...")
    result = client.query("users/self")
    if result:
        print(result.body)
"""

from __future__ import annotations

import re
from typing import Any, Optional

from instaquery.cache import ResponseCache, get_default_cache_factory
from instaquery.models import ApiConfig, ClientSettings
from instaquery.output import get_output
from instaquery.result import FailureReason, QueryResult
from instaquery.transport import HttpxTransport, Transport

CACHE_KEY_SEPARATOR = "|"

_ABSOLUTE_URL = re.compile(r"^https?://")
_TOKEN_VALUE = re.compile(r"(access_token=)[^&#]*")


def build_uri(query: str, token: str, endpoint: str, version: str) -> str:
    """Return the fully-qualified request URI for *query*.

    Args:
        query: Path relative to ``<endpoint>/<version>/`` (optionally with a
            query string), or an absolute ``http(s)://`` URL.
        token: Access token appended as the ``access_token`` parameter.
        endpoint: API base URL without a trailing slash.
        version: API version path segment.
    """
    base = query if _ABSOLUTE_URL.match(query) else f"{endpoint}/{version}/{query}"
    separator = "&" if "?" in query else "?"
    return f"{base}{separator}access_token={token}"


def build_cache_key(uri: str, token: str) -> str:
    """Join *uri* and *token* into the cache lookup key."""
    return f"{uri}{CACHE_KEY_SEPARATOR}{token}"


def redact_token(uri: str) -> str:
    """Mask the ``access_token`` value in *uri* for diagnostics."""
    return _TOKEN_VALUE.sub(r"\1***", uri)


class Client:
    """Synchronous client for the Instagram API.

    Most callers use :meth:`with_token` or :meth:`with_client` rather than
    the constructor.

    Args:
        settings: Credentials and API location. Defaults to an empty
            :class:`~instaquery.models.ClientSettings` (no token).
        cache: Response cache. When ``None``, the process-wide default
            factory (see :func:`~instaquery.cache.set_default_cache_factory`)
            is called once, at construction time.
        transport: GET transport. When ``None``, an
            :class:`~instaquery.transport.HttpxTransport` is created lazily
            from ``settings.api`` on the first network request.
    """

    def __init__(
        self,
        settings: Optional[ClientSettings] = None,
        cache: Optional[ResponseCache] = None,
        transport: Optional[Transport] = None,
    ) -> None:
        self._settings = settings.model_copy(deep=True) if settings else ClientSettings()
        self._cache = cache if cache is not None else get_default_cache_factory()()
        self._transport = transport
        self._owned_transport: Optional[HttpxTransport] = None
        self.last_result: Optional[QueryResult] = None

    # ------------------------------------------------------------------ #
    # Factories
    # ------------------------------------------------------------------ #

    @classmethod
    def with_client(cls, app_id: str, app_secret: str, **kwargs: Any) -> Client:
        """Create a client from application credentials.

        The access token stays unset, so :meth:`query` fails until one is
        assigned to :attr:`access_token`. *kwargs* are forwarded to the
        constructor (``cache``, ``transport``) or, for ``api``, to the
        settings.
        """
        api = kwargs.pop("api", None) or ApiConfig()
        settings = ClientSettings(app_id=app_id, app_secret=app_secret, api=api)
        return cls(settings, **kwargs)

    @classmethod
    def with_token(cls, token: Optional[str], **kwargs: Any) -> Client:
        """Create a client from an existing access token, ready to query."""
        api = kwargs.pop("api", None) or ApiConfig()
        settings = ClientSettings(access_token=token, api=api)
        return cls(settings, **kwargs)

    @classmethod
    def from_settings(
        cls,
        settings: ClientSettings,
        cache: Optional[ResponseCache] = None,
        transport: Optional[Transport] = None,
    ) -> Client:
        return cls(settings, cache=cache, transport=transport)

    # ------------------------------------------------------------------ #
    # Properties
    # ------------------------------------------------------------------ #

    @property
    def app_id(self) -> Optional[str]:
        return self._settings.app_id

    @property
    def app_secret(self) -> Optional[str]:
        return self._settings.app_secret

    @property
    def access_token(self) -> Optional[str]:
        return self._settings.access_token

    @access_token.setter
    def access_token(self, token: Optional[str]) -> None:
        self._settings.access_token = token

    @property
    def version(self) -> str:
        return self._settings.api.version

    @property
    def endpoint(self) -> str:
        return self._settings.api.endpoint.rstrip("/")

    @property
    def cache(self) -> ResponseCache:
        return self._cache

    # ------------------------------------------------------------------ #
    # Querying
    # ------------------------------------------------------------------ #

    def uri_for(self, query: str) -> Optional[str]:
        """Return the request URI for *query*, or ``None`` without a token."""
        token = self.access_token
        if not token:
            return None
        return build_uri(query, token, self.endpoint, self.version)

    def query(self, query: str) -> QueryResult:
        """Perform a GET query, consulting the cache first.

        Args:
            query: Path relative to ``<endpoint>/<version>/`` such as
                ``"users/self/media/recent?count=5"``, or an absolute URL.

        Returns:
            A :class:`~instaquery.result.QueryResult`. Failed results have
            ``reason`` set to ``MISSING_TOKEN`` (nothing was attempted) or
            ``TRANSPORT`` (the request did not return 2xx, or never
            completed).
        """
        output = get_output()
        uri = self.uri_for(query)
        if uri is None:
            output.debug(f"No access token, skipping query: {redact_token(query)}")
            return QueryResult.failed(FailureReason.MISSING_TOKEN)

        key = build_cache_key(uri, self.access_token)

        record = self._cache.fetch(key)
        if record is not None:
            output.debug(f"Cache hit: {redact_token(uri)}")
            return QueryResult.cached(record, uri, key)

        output.debug(f"GET {redact_token(uri)}")
        response = self._get_transport().get(uri)
        if not response.success:
            detail = response.error or f"HTTP {response.status_code}"
            output.debug(f"Request failed ({redact_token(detail)}): {redact_token(uri)}")
            self.last_result = QueryResult.failed(
                FailureReason.TRANSPORT,
                uri=uri,
                cache_key=key,
                status_code=response.status_code,
            )
            return self.last_result

        stored = self._cache.store(key, response.content)
        self.last_result = QueryResult.fetched(stored, uri, key, response.status_code)
        return self.last_result

    # ------------------------------------------------------------------ #
    # Lifecycle
    # ------------------------------------------------------------------ #

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owned_transport is not None:
            self._owned_transport.close()
            self._owned_transport = None
            self._transport = None

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _get_transport(self) -> Transport:
        if self._transport is None:
            api = self._settings.api
            self._owned_transport = HttpxTransport(timeout=api.timeout, verify_ssl=api.verify_ssl)
            self._transport = self._owned_transport
        return self._transport
