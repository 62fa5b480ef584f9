"""Canonical Pydantic models shared across all instaquery modules.

**Configuration models** -- serialised as JSON in the user's config directory:
    :class:`ApiConfig`, :class:`CacheConfig`, :class:`OutputConfig` and
    :class:`GlobalConfig`.

**Runtime models** -- built from configuration, environment and CLI flags:
    :class:`ClientSettings`, the credentials and API settings a
    :class:`~instaquery.client.Client` is constructed from.

All models use Pydantic v2.
"""

from __future__ import annotations

import enum
from typing import Literal, Optional

from pydantic import BaseModel, Field

DEFAULT_ENDPOINT = "https://api.instagram.com"
DEFAULT_API_VERSION = "v1"


class CacheBackend(str, enum.Enum):
    """Names accepted by :func:`~instaquery.cache.create_cache`."""

    NULL = "null"
    MEMORY = "memory"
    DISK = "disk"


class ApiConfig(BaseModel):
    """Remote API location and transport settings."""

    endpoint: str = Field(
        default=DEFAULT_ENDPOINT, description="Base URL of the Instagram API"
    )
    version: str = Field(
        default=DEFAULT_API_VERSION, description="API version path segment"
    )
    timeout: float = Field(default=30, description="Request timeout in seconds")
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")


class CacheConfig(BaseModel):
    """Response cache settings stored in :class:`GlobalConfig`."""

    backend: CacheBackend = Field(
        default=CacheBackend.NULL, description="Cache backend: null, memory, disk"
    )
    ttl_seconds: Optional[int] = Field(
        default=None, description="Entry lifetime in seconds (None keeps entries forever)"
    )


class OutputConfig(BaseModel):
    """Default output format preferences stored in :class:`GlobalConfig`."""

    format: Literal["auto", "json", "plain", "rich"] = Field(
        default="auto", description="Output format used when no --json/--plain flag is given"
    )


class GlobalConfig(BaseModel):
    """User-wide configuration persisted at ``~/.config/instaquery/config.json``.

    Loaded and saved by :func:`~instaquery.config.load_global_config` and
    :func:`~instaquery.config.save_global_config`. The access token is
    not stored in this file; it comes from the environment or the
    ``--token`` flag.
    """

    api: ApiConfig = Field(default_factory=ApiConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


class ClientSettings(BaseModel):
    """Everything a :class:`~instaquery.client.Client` needs except its collaborators.

    ``access_token`` may be ``None``: a client built from an application
    id/secret pair has no token until one is assigned, and every query fails
    until then.
    """

    app_id: Optional[str] = None
    app_secret: Optional[str] = None
    access_token: Optional[str] = None
    api: ApiConfig = Field(default_factory=ApiConfig)
