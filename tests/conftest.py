from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest
import pytest_asyncio

from n8n_client import ApiClient, ClientConfig

BASE_URL = "https://n8n.example.com/api/v1"
API_PREFIX = "/api/v1"

Route = httpx.Response | Callable[[httpx.Request], httpx.Response]


class MockServer:
    """Routes requests by (method, path) and records everything it receives."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Route] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method: str, path: str, status: int = 200, body: Any = None) -> None:
        if body is None:
            self.routes[(method, path)] = httpx.Response(status)
        else:
            self.routes[(method, path)] = httpx.Response(status, json=body)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix(API_PREFIX)
        route = self.routes.get((request.method, path))
        if route is None:
            return httpx.Response(404, json={"message": "not found"})
        if callable(route):
            return route(request)
        return route

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_path(self) -> str:
        return self.last.url.path.removeprefix(API_PREFIX)

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(base_url=BASE_URL, api_key="k", debug=False)


@pytest.fixture
def server() -> MockServer:
    return MockServer()


@pytest.fixture
def make_client(server: MockServer):
    def _make(config: ClientConfig) -> ApiClient:
        def factory(**kwargs: Any) -> httpx.AsyncClient:
            return httpx.AsyncClient(transport=httpx.MockTransport(server), **kwargs)

        return ApiClient(config, transport_factory=factory)

    return _make


@pytest_asyncio.fixture
async def client(make_client, config):
    api = make_client(config)
    yield api
    await api.close()
