"""Shared fixtures for the sepay-bankhub test suite."""
from __future__ import annotations

from typing import Callable
from unittest.mock import MagicMock

import httpx
import pytest

from sepay_bankhub.config import Config, Settings


BASE_URL = "https://partner-api.sepay.vn/merchant/v1"


@pytest.fixture
def fake_settings() -> Settings:
    return Settings(
        api_key="test-api-key",
        api_secret="test-api-secret",
        api_url=BASE_URL,
        ipn_token="test-ipn-token",
        timeout=5.0,
        token_cache="memory",
        token_cache_path="./test-data/token_cache.json",
    )


@pytest.fixture
def fake_config(fake_settings) -> Config:
    return Config(settings=fake_settings)


class FakeCache:
    """In-memory TokenCache that records every call and ignores TTL."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.store: dict[str, str] = dict(initial or {})
        self.gets: list[str] = []
        self.puts: list[tuple[str, str, int]] = []
        self.forgets: list[str] = []

    def get(self, key: str) -> str | None:
        self.gets.append(key)
        return self.store.get(key)

    def put(self, key: str, value: str, ttl: int) -> None:
        self.puts.append((key, value, ttl))
        self.store[key] = value

    def forget(self, key: str) -> None:
        self.forgets.append(key)
        self.store.pop(key, None)


@pytest.fixture
def fake_cache() -> FakeCache:
    return FakeCache()


class FakeServer:
    """Scriptable BankHub stand-in for httpx.MockTransport.

    ``routes`` maps ``(method, path)`` (path without the base URL) to a
    response or a callable returning one. Unknown routes answer 404.
    ``fail_status`` and ``raise_all`` make every business path fail.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], httpx.Response | Callable[[httpx.Request], httpx.Response]] = {}
        self.requests: list[httpx.Request] = []
        self.token = "T1"
        self.ttl = 3600
        self.raise_on: set[str] = set()
        self.raise_all = False
        self.fail_status: int | None = None
        self.fail_body = "upstream failure"

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/merchant/v1")
        if path == "/token/create" and ("POST", path) not in self.routes:
            return httpx.Response(200, json={"data": {"access_token": self.token, "ttl": self.ttl}})
        if self.raise_all or path in self.raise_on:
            raise httpx.ConnectError("connection refused", request=request)
        if self.fail_status is not None and path != "/token/create":
            return httpx.Response(self.fail_status, text=self.fail_body)
        route = self.routes.get((request.method, path))
        if route is None:
            return httpx.Response(404, json={"message": "not found"})
        if callable(route):
            return route(request)
        # fresh copy so one scripted response can answer repeated calls
        return httpx.Response(route.status_code, headers=route.headers, content=route.content)

    def business_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if not r.url.path.endswith("/token/create")]

    def token_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path.endswith("/token/create")]


@pytest.fixture
def server() -> FakeServer:
    return FakeServer()


@pytest.fixture
def http(server) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(server.handler))


@pytest.fixture
def hub(fake_config, fake_cache, http):
    """Bankhub wired to the fake server and an empty FakeCache."""
    from sepay_bankhub.bankhub import Bankhub

    h = Bankhub(fake_config, cache=fake_cache, http=http)
    yield h
    h.close()


@pytest.fixture
def mock_client():
    """MagicMock standing in for BankhubClient."""
    client = MagicMock()
    client.get = MagicMock()
    client.post = MagicMock()
    client.call = MagicMock()
    client.close = MagicMock()
    return client
