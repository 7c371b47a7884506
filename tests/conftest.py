"""Shared fixtures: a scripted stand-in for ``requests.Session`` and a manual clock."""

from __future__ import annotations

import json
from typing import Any

import pytest

from dingtalk_client import cache as cache_module
from dingtalk_client.config import AppSettings
from dingtalk_client.http import HttpClient


class FakeResponse:
    def __init__(self, body: Any, status_code: int = 200):
        if isinstance(body, bytes):
            self.content = body
        elif isinstance(body, str):
            self.content = body.encode("utf-8")
        else:
            self.content = json.dumps(body).encode("utf-8")
        self.status_code = status_code


class FakeSession:
    """Replays queued responses and records every request it receives."""

    def __init__(self):
        self.headers: dict[str, str] = {}
        self.calls: list[dict[str, Any]] = []
        self._queue: list[Any] = []
        self.closed = False

    def queue(self, body: Any, status_code: int = 200) -> None:
        self._queue.append(FakeResponse(body, status_code))

    def queue_error(self, error: Exception) -> None:
        self._queue.append(error)

    def close(self) -> None:
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        if not self._queue:
            raise AssertionError(f"unexpected request: {method} {url}")
        item = self._queue.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(app_key="app-key", app_secret="app-secret", timeout_seconds=5)


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def http_client(settings: AppSettings, session: FakeSession) -> HttpClient:
    return HttpClient(settings, session=session)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture(autouse=True)
def reset_process_cache(monkeypatch):
    monkeypatch.setattr(cache_module, "_cache", None)
