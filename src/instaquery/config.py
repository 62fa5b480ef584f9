"""Configuration management with XDG paths, atomic writes, and precedence resolution.

* **Directory layout** -- XDG Base Directory compliant on Linux/BSD,
  ``~/.instaquery/`` on macOS and Windows. See :func:`get_config_dir`,
  :func:`get_cache_dir`, :func:`get_data_dir`.
* **Global config** -- a single :class:`~instaquery.models.GlobalConfig`
  JSON file holding the API location and cache settings.
* **Precedence resolution** -- :func:`resolve_settings` merges CLI flags,
  environment variables and the global config into the
  :class:`~instaquery.models.ClientSettings` and
  :class:`~instaquery.models.CacheConfig` a client is built from.
"""

from __future__ import annotations

import json
import os
import platform
import tempfile
from pathlib import Path
from typing import Optional

from instaquery.exceptions import ConfigError
from instaquery.models import CacheConfig, ClientSettings, GlobalConfig

_APP_NAME = "instaquery"
_CONFIG_FILENAME = "config.json"

ENV_ACCESS_TOKEN = "INSTAQUERY_ACCESS_TOKEN"
ENV_APP_ID = "INSTAQUERY_APP_ID"
ENV_APP_SECRET = "INSTAQUERY_APP_SECRET"
ENV_API_VERSION = "INSTAQUERY_API_VERSION"
ENV_CACHE = "INSTAQUERY_CACHE"


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def _fallback_base_dir() -> Path:
    return Path.home() / f".{_APP_NAME}"


def _xdg_base(env_var: str, default_segments: tuple[str, ...]) -> Path:
    """Resolve an XDG base directory from an env var with fallback segments under $HOME."""
    env_value = os.environ.get(env_var, "")
    if env_value:
        return Path(env_value)
    base = Path.home()
    for seg in default_segments:
        base = base / seg
    return base


def get_config_dir() -> Path:
    """Return the configuration directory, creating it if necessary.

    On Linux/BSD: ``$XDG_CONFIG_HOME/instaquery/`` (default ``~/.config/instaquery/``).
    On macOS/Windows: ``~/.instaquery/``.
    """
    if _is_xdg_platform():
        path = _xdg_base("XDG_CONFIG_HOME", (".config",)) / _APP_NAME
    else:
        path = _fallback_base_dir()
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_cache_dir() -> Path:
    """Return the cache directory used by :class:`~instaquery.cache.DiskCache`.

    Cached responses can be safely deleted at any time.

    On Linux/BSD: ``$XDG_CACHE_HOME/instaquery/`` (default ``~/.cache/instaquery/``).
    On macOS/Windows: ``~/.instaquery/cache/``.
    """
    if _is_xdg_platform():
        path = _xdg_base("XDG_CACHE_HOME", (".cache",)) / _APP_NAME
    else:
        path = _fallback_base_dir() / "cache"
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_data_dir() -> Path:
    """Return the data directory (crash logs), creating it if necessary.

    On Linux/BSD: ``$XDG_DATA_HOME/instaquery/`` (default ``~/.local/share/instaquery/``).
    On macOS/Windows: ``~/.instaquery/logs/``.
    """
    if _is_xdg_platform():
        path = _xdg_base("XDG_DATA_HOME", (".local", "share")) / _APP_NAME
    else:
        path = _fallback_base_dir() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


# --- Atomic file writes ---


def _atomic_write(path: Path, data: str) -> None:
    """Write data to file atomically using temp file + rename.

    The temporary file is created in the same directory as *path* so that
    ``os.replace`` is an atomic rename on POSIX systems. On any failure the
    temp file is removed.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    fd = None
    tmp_path: Optional[str] = None
    try:
        fd = tempfile.NamedTemporaryFile(
            mode="w",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        )
        tmp_path = fd.name
        fd.write(data)
        fd.flush()
        os.fsync(fd.fileno())
        fd.close()
        fd = None
        os.replace(tmp_path, path)
    except BaseException:
        if fd is not None:
            fd.close()
        if tmp_path is not None:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
        raise


# --- Global config ---


def _global_config_path() -> Path:
    return get_config_dir() / _CONFIG_FILENAME


def load_global_config() -> GlobalConfig:
    """Load the global configuration from the XDG config directory.

    Returns:
        The deserialised :class:`~instaquery.models.GlobalConfig`, or a
        default instance when the file does not exist.

    Raises:
        ConfigError: If the file exists but contains invalid JSON or fails
            Pydantic validation.
    """
    path = _global_config_path()
    if not path.is_file():
        return GlobalConfig()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return GlobalConfig.model_validate(data)
    except (json.JSONDecodeError, ValueError) as exc:
        raise ConfigError(f"Invalid global config at {path}: {exc}") from exc


def save_global_config(config: GlobalConfig) -> None:
    """Persist the global configuration atomically to disk."""
    data = config.model_dump(mode="json")
    _atomic_write(_global_config_path(), json.dumps(data, indent=2) + "\n")


# --- Precedence resolution ---


def resolve_settings(
    cli_token: Optional[str] = None,
    cli_version: Optional[str] = None,
    cli_cache: Optional[str] = None,
) -> tuple[ClientSettings, CacheConfig]:
    """Resolve client settings with the full precedence chain.

    Precedence (high to low):
        1. CLI flags (``cli_token``, ``cli_version``, ``cli_cache``)
        2. Environment variables (``INSTAQUERY_ACCESS_TOKEN``,
           ``INSTAQUERY_APP_ID``, ``INSTAQUERY_APP_SECRET``,
           ``INSTAQUERY_API_VERSION``, ``INSTAQUERY_CACHE``)
        3. User config (``~/.config/instaquery/config.json``)
        4. Defaults

    Returns:
        A tuple of ``(client_settings, cache_config)``.

    Raises:
        ConfigError: If the config file is invalid or the cache backend
            name is unknown.
    """
    global_cfg = load_global_config()
    api = global_cfg.api.model_copy()
    cache = global_cfg.cache.model_copy()

    version = cli_version or os.environ.get(ENV_API_VERSION)
    if version:
        api.version = version

    backend = cli_cache or os.environ.get(ENV_CACHE)
    if backend:
        try:
            cache = CacheConfig.model_validate({**cache.model_dump(), "backend": backend})
        except ValueError as exc:
            raise ConfigError(f"Unknown cache backend: {backend!r}") from exc

    token = cli_token if cli_token is not None else os.environ.get(ENV_ACCESS_TOKEN)

    settings = ClientSettings(
        app_id=os.environ.get(ENV_APP_ID),
        app_secret=os.environ.get(ENV_APP_SECRET),
        access_token=token or None,
        api=api,
    )
    return settings, cache
