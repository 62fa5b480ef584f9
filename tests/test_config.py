"""Tests for instaquery.config -- XDG paths, atomic writes, settings precedence."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from instaquery.config import (
    _atomic_write,
    get_cache_dir,
    get_config_dir,
    get_data_dir,
    load_global_config,
    resolve_settings,
    save_global_config,
)
from instaquery.exceptions import ConfigError
from instaquery.models import ApiConfig, CacheBackend, CacheConfig, GlobalConfig


def _write_config(root: Path, data: dict) -> None:
    path = root / "config" / "instaquery" / "config.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")


# ---------------------------------------------------------------------------
# XDG path resolution
# ---------------------------------------------------------------------------


class TestXDGPaths:
    def test_dirs_follow_xdg_env(self, isolated_config: Path) -> None:
        assert get_config_dir() == isolated_config / "config" / "instaquery"
        assert get_cache_dir() == isolated_config / "cache" / "instaquery"
        assert get_data_dir() == isolated_config / "data" / "instaquery"
        assert get_config_dir().is_dir()

    def test_config_dir_xdg_default(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("instaquery.config._is_xdg_platform", lambda: True)
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
        assert get_config_dir() == tmp_path / ".config" / "instaquery"

    def test_non_xdg_fallback(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("instaquery.config._is_xdg_platform", lambda: False)
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
        assert get_config_dir() == tmp_path / ".instaquery"
        assert get_cache_dir() == tmp_path / ".instaquery" / "cache"
        assert get_data_dir() == tmp_path / ".instaquery" / "logs"


# ---------------------------------------------------------------------------
# Atomic writes
# ---------------------------------------------------------------------------


class TestAtomicWrite:
    def test_writes_content(self, tmp_path: Path) -> None:
        target = tmp_path / "nested" / "file.json"
        _atomic_write(target, "hello")
        assert target.read_text() == "hello"

    def test_no_temp_files_left(self, tmp_path: Path) -> None:
        target = tmp_path / "file.json"
        _atomic_write(target, "a")
        _atomic_write(target, "b")
        assert [p.name for p in tmp_path.iterdir()] == ["file.json"]


# ---------------------------------------------------------------------------
# Global config
# ---------------------------------------------------------------------------


class TestGlobalConfig:
    def test_missing_file_gives_defaults(self, isolated_config: Path) -> None:
        config = load_global_config()
        assert config == GlobalConfig()
        assert config.api.endpoint == "https://api.instagram.com"
        assert config.api.version == "v1"
        assert config.cache.backend is CacheBackend.NULL

    def test_round_trip(self, isolated_config: Path) -> None:
        config = GlobalConfig(
            api=ApiConfig(version="v2", timeout=5),
            cache=CacheConfig(backend=CacheBackend.DISK, ttl_seconds=60),
        )
        save_global_config(config)
        assert load_global_config() == config

    def test_invalid_json(self, isolated_config: Path) -> None:
        path = isolated_config / "config" / "instaquery" / "config.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("{not json")
        with pytest.raises(ConfigError, match="Invalid global config"):
            load_global_config()

    def test_invalid_backend(self, isolated_config: Path) -> None:
        _write_config(isolated_config, {"cache": {"backend": "redis"}})
        with pytest.raises(ConfigError):
            load_global_config()


# ---------------------------------------------------------------------------
# Settings resolution
# ---------------------------------------------------------------------------


class TestResolveSettings:
    def test_defaults(self, isolated_config: Path) -> None:
        settings, cache = resolve_settings()
        assert settings.access_token is None
        assert settings.app_id is None
        assert settings.api.version == "v1"
        assert cache.backend is CacheBackend.NULL

    def test_env_values(self, isolated_config: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INSTAQUERY_ACCESS_TOKEN", "ENV_TOKEN")
        monkeypatch.setenv("INSTAQUERY_APP_ID", "app")
        monkeypatch.setenv("INSTAQUERY_APP_SECRET", "secret")
        monkeypatch.setenv("INSTAQUERY_API_VERSION", "v3")
        monkeypatch.setenv("INSTAQUERY_CACHE", "memory")

        settings, cache = resolve_settings()
        assert settings.access_token == "ENV_TOKEN"
        assert settings.app_id == "app"
        assert settings.app_secret == "secret"
        assert settings.api.version == "v3"
        assert cache.backend is CacheBackend.MEMORY

    def test_cli_beats_env(self, isolated_config: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INSTAQUERY_ACCESS_TOKEN", "ENV_TOKEN")
        monkeypatch.setenv("INSTAQUERY_API_VERSION", "v3")
        monkeypatch.setenv("INSTAQUERY_CACHE", "memory")

        settings, cache = resolve_settings(cli_token="CLI", cli_version="v9", cli_cache="disk")
        assert settings.access_token == "CLI"
        assert settings.api.version == "v9"
        assert cache.backend is CacheBackend.DISK

    def test_env_beats_file(self, isolated_config: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        _write_config(
            isolated_config,
            {"api": {"version": "v2"}, "cache": {"backend": "disk", "ttl_seconds": 30}},
        )
        monkeypatch.setenv("INSTAQUERY_API_VERSION", "v3")

        settings, cache = resolve_settings()
        assert settings.api.version == "v3"
        assert cache.backend is CacheBackend.DISK
        assert cache.ttl_seconds == 30

    def test_cache_override_keeps_file_ttl(self, isolated_config: Path) -> None:
        _write_config(isolated_config, {"cache": {"backend": "disk", "ttl_seconds": 30}})
        _, cache = resolve_settings(cli_cache="memory")
        assert cache.backend is CacheBackend.MEMORY
        assert cache.ttl_seconds == 30

    def test_empty_token_is_none(self, isolated_config: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INSTAQUERY_ACCESS_TOKEN", "ENV_TOKEN")
        settings, _ = resolve_settings(cli_token="")
        assert settings.access_token is None

    def test_unknown_cache_backend(self, isolated_config: Path) -> None:
        with pytest.raises(ConfigError, match="Unknown cache backend"):
            resolve_settings(cli_cache="redis")
