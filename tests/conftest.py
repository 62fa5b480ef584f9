"""Shared test fixtures for instaquery.

Provides fake transports and caches that record how they were used, an
isolated config environment, and output-state management. These fixtures
are discovered by pytest and available to all test modules without
explicit imports.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import pytest

from instaquery.cache import reset_default_cache_factory
from instaquery.output import OutputFormat, OutputManager, reset_output, set_output
from instaquery.transport import TransportResponse


# ---------------------------------------------------------------------------
# Recording collaborators
# ---------------------------------------------------------------------------


class FakeTransport:
    """Transport double that replays canned responses and records every URL."""

    def __init__(self, *responses: TransportResponse) -> None:
        self._responses = list(responses) or [TransportResponse(success=True, content="")]
        self.calls: list[str] = []

    def get(self, url: str) -> TransportResponse:
        self.calls.append(url)
        if len(self._responses) > 1:
            return self._responses.pop(0)
        return self._responses[0]


class RecordingCache:
    """Dictionary cache that records fetch/store keys."""

    def __init__(self, entries: Optional[dict[str, str]] = None) -> None:
        self.entries: dict[str, str] = dict(entries or {})
        self.fetched: list[str] = []
        self.stored: list[tuple[str, str]] = []

    def fetch(self, key: str) -> Optional[str]:
        self.fetched.append(key)
        return self.entries.get(key)

    def store(self, key: str, value: str) -> str:
        self.stored.append((key, value))
        self.entries[key] = value
        return value


@pytest.fixture
def make_transport():
    """Return the FakeTransport class so tests can script their own responses."""
    return FakeTransport


@pytest.fixture
def make_cache():
    """Return the RecordingCache class so tests can pre-populate entries."""
    return RecordingCache


@pytest.fixture
def ok_transport() -> FakeTransport:
    return FakeTransport(TransportResponse(success=True, content='{"ok":true}', status_code=200))


@pytest.fixture
def failing_transport() -> FakeTransport:
    return FakeTransport(TransportResponse(success=False, content="", status_code=500))


@pytest.fixture
def recording_cache() -> RecordingCache:
    return RecordingCache()


# ---------------------------------------------------------------------------
# Global state resets
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_global_state() -> None:
    """Reset the global OutputManager and default cache factory after every test.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time, which go stale once CliRunner restores the real streams.
    """
    yield
    reset_output()
    reset_default_cache_factory()


@pytest.fixture
def quiet_output() -> OutputManager:
    """Install a PLAIN-format, quiet OutputManager as the global output."""
    output = OutputManager(format=OutputFormat.PLAIN, quiet=True)
    set_output(output)
    yield output
    reset_output()


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate configuration to a temporary directory.

    Points the XDG directories at subdirectories of tmp_path, forces XDG
    path resolution, and clears all INSTAQUERY_* environment variables.

    Returns:
        The tmp_path root directory for additional file creation.
    """
    monkeypatch.setattr("instaquery.config._is_xdg_platform", lambda: True)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path / "cache"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))

    for var in [
        "INSTAQUERY_ACCESS_TOKEN",
        "INSTAQUERY_APP_ID",
        "INSTAQUERY_APP_SECRET",
        "INSTAQUERY_API_VERSION",
        "INSTAQUERY_CACHE",
    ]:
        monkeypatch.delenv(var, raising=False)

    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
