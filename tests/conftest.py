"""Pytest config: import path and shared stub fetcher."""
import sys
from pathlib import Path

import pytest

root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(root))


class StubFetcher:
    """Stands in for WeatherFetcher: canned payloads keyed by URL (fetch_json) or path (fetch_query)."""

    def __init__(self, responses=None):
        self.responses = responses or {}
        self.calls = []

    async def fetch_json(self, url, headers=None):
        self.calls.append({"url": url, "headers": headers})
        return self.responses.get(url)

    async def fetch_query(self, base, path, params):
        self.calls.append({"url": f"{base}/{path}", "params": dict(params)})
        return self.responses.get(path)


@pytest.fixture
def stub_fetcher():
    return StubFetcher()


@pytest.fixture(autouse=True)
def no_openweather_env(monkeypatch):
    """Keep a developer's real key out of the tests."""
    monkeypatch.delenv("OPENWEATHER_API_KEY", raising=False)
