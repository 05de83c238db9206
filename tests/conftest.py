"""Root-level test configuration and fixtures."""

import copy
from typing import Any, Optional

import pytest

from golemio_mcp.core.lookup_cache import LookupCache
from sample_payloads import DEFAULT_RESPONSES


class FakeGolemioClient:
    """Stand-in for GolemioClient that serves canned payloads and records calls.

    A response that is an exception instance is raised instead of returned.
    """

    def __init__(self, responses: Optional[dict[str, Any]] = None):
        self.responses = dict(DEFAULT_RESPONSES if responses is None else responses)
        self.calls: list[tuple[str, dict[str, str]]] = []
        self.closed = False

    def get_json(self, path: str, params: Optional[dict[str, str]] = None) -> Any:
        self.calls.append((path, dict(params or {})))
        response = self.responses[path]
        if isinstance(response, Exception):
            raise response
        return copy.deepcopy(response)

    def calls_to(self, path: str) -> list[dict[str, str]]:
        return [params for called_path, params in self.calls if called_path == path]

    def close(self) -> None:
        self.closed = True


class ManualClock:
    """Monotonic clock advanced by hand."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep tests away from real tokens and the user's settings file."""
    monkeypatch.delenv("GOLEMIO_API_TOKEN", raising=False)
    monkeypatch.delenv("GOLEMIO_BASE_URL", raising=False)
    monkeypatch.setenv("GOLEMIO_MCP_SETTINGS", str(tmp_path / ".golemio-mcp" / "settings.json"))


@pytest.fixture
def fake_client() -> FakeGolemioClient:
    return FakeGolemioClient()


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def cache(clock: ManualClock) -> LookupCache:
    return LookupCache(clock=clock)
