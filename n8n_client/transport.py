"""HTTP transport boundary used by the client."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, Protocol

import httpx

Hook = Callable[..., Awaitable[None]]


class HttpTransport(Protocol):
    """The subset of ``httpx.AsyncClient`` that ``ApiClient`` relies on.

    ``event_hooks`` maps "request" and "response" to lists of async hooks
    invoked before a request is sent and after a response is received.
    """

    event_hooks: dict[str, list[Hook]]

    async def get(self, url: str, **kwargs: Any) -> httpx.Response: ...

    async def post(self, url: str, **kwargs: Any) -> httpx.Response: ...

    async def put(self, url: str, **kwargs: Any) -> httpx.Response: ...

    async def delete(self, url: str, **kwargs: Any) -> httpx.Response: ...


class TransportFactory(Protocol):
    def __call__(
        self, *, base_url: str, headers: dict[str, str], timeout: float
    ) -> HttpTransport: ...


def default_transport(
    *, base_url: str, headers: dict[str, str], timeout: float
) -> httpx.AsyncClient:
    """Create the ``httpx.AsyncClient`` used when no factory is supplied."""
    return httpx.AsyncClient(base_url=base_url, headers=headers, timeout=timeout)
