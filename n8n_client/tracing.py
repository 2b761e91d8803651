"""Request/response tracing strategies chosen when the client is built."""

from __future__ import annotations

import logging

import httpx

from n8n_client.transport import HttpTransport

logger = logging.getLogger(__name__)


class NoTracing:
    """Leaves the transport untouched."""

    name = "none"

    def attach(self, transport: HttpTransport) -> None:
        return None


class DebugTracing:
    """Registers one request hook and one response hook that log traffic.

    Headers are not logged so the API key never reaches the log output.
    """

    name = "debug"

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def attach(self, transport: HttpTransport) -> None:
        transport.event_hooks["request"].append(self._on_request)
        transport.event_hooks["response"].append(self._on_response)

    async def _on_request(self, request: httpx.Request) -> None:
        self._log.debug("-> %s %s", request.method, request.url)

    async def _on_response(self, response: httpx.Response) -> None:
        request = response.request
        self._log.debug(
            "<- %s %s %s", response.status_code, request.method, request.url
        )


Tracing = NoTracing | DebugTracing


def select_tracing(debug: bool) -> Tracing:
    """Return the tracing strategy for a client built with ``debug``."""
    return DebugTracing() if debug else NoTracing()
