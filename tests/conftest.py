# tests/conftest.py
"""
Shared pytest fixtures for MyContext CLI tests.

Provides:
- Logger reset between tests
- Clean environment for settings that read env vars
- Fake aiohttp session / response objects
- Temporary project directories
"""
import subprocess
from pathlib import Path
from typing import Any, List, Optional, Tuple
from unittest.mock import patch

import pytest

from mycontext.core.logging import LogLevel, logger


ENV_VARS = [
    "MYCONTEXT_OPENROUTER_API_KEY",
    "OPENROUTER_API_KEY",
    "MYCONTEXT_OPENROUTER_MODEL",
    "OPENROUTER_BASE_URL",
    "NEXT_PUBLIC_INSTANT_APP_ID",
    "INSTANT_APP_ADMIN_TOKEN",
    "INSTANT_API_URL",
    "MYCONTEXT_PACKAGE_MANAGER",
]


# ═══════════════════════════════════════════════════════
# MOCK TYPES
# ═══════════════════════════════════════════════════════

class MockResponse:
    """Stand-in for aiohttp.ClientResponse used as an async context manager."""

    def __init__(self, status: int = 200, json_data: Any = None, text: str = "", json_error: Optional[Exception] = None):
        self.status = status
        self._json = json_data if json_data is not None else {}
        self._text = text
        self._json_error = json_error

    async def json(self):
        if self._json_error is not None:
            raise self._json_error
        return self._json

    async def text(self):
        return self._text

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False


class MockSession:
    """Stand-in for aiohttp.ClientSession recording every POST."""

    def __init__(self, response: Optional[MockResponse] = None, error: Optional[BaseException] = None):
        self.response = response or MockResponse()
        self.error = error
        self.calls: List[Tuple[str, dict]] = []

    def post(self, url: str, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False


# ═══════════════════════════════════════════════════════
# FIXTURES
# ═══════════════════════════════════════════════════════

@pytest.fixture(autouse=True)
def reset_logger():
    """Every test starts at INFO, not quiet."""
    logger.set_quiet(False)
    logger.set_level(LogLevel.INFO)
    yield
    logger.set_quiet(False)
    logger.set_level(LogLevel.INFO)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every env var the settings read."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def mock_session():
    """
    Patch aiohttp.ClientSession with a MockSession.

    Usage:
        session = mock_session(MockResponse(200, {...}))
    """
    patchers = []

    def install(response: Optional[MockResponse] = None, error: Optional[BaseException] = None) -> MockSession:
        session = MockSession(response, error)
        p = patch("aiohttp.ClientSession", return_value=session)
        p.start()
        patchers.append(p)
        return session

    yield install

    for p in patchers:
        p.stop()


@pytest.fixture
def completed_process():
    """Factory for subprocess.CompletedProcess results."""
    def make(returncode: int = 0, args: Optional[list] = None):
        return subprocess.CompletedProcess(args or [], returncode)
    return make


@pytest.fixture
def project_dir(tmp_path) -> Path:
    """Path for a project that does not exist yet."""
    return tmp_path / "demo-app"
