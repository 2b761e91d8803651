"""n8n public API client implementation using httpx."""

from __future__ import annotations

import logging
from typing import Any, cast

import httpx

from n8n_client.tracing import select_tracing
from n8n_client.transport import HttpTransport, TransportFactory, default_transport
from n8n_client.types import (
    ClientConfig,
    Execution,
    ExecutionAck,
    Workflow,
    WorkflowSpec,
)

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-N8N-API-KEY"
REQUEST_TIMEOUT = 10.0  # seconds


class ApiError(Exception):
    """Raised when a call to the n8n API fails.

    Exactly one of ``status_code`` and ``cause`` is set. ``status_code`` is
    set when the server answered with an error status or an unusable JSON
    body. ``cause`` is set when the request failed below HTTP: either no
    response arrived (``TransportError``) or its body could not be decoded.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        cause: BaseException | None = None,
    ) -> None:
        if (status_code is None) == (cause is None):
            raise ValueError("ApiError needs exactly one of status_code or cause")
        self.status_code = status_code
        self.message = message
        self.cause = cause
        if status_code is not None:
            super().__init__(f"n8n API error {status_code}: {message}")
        else:
            super().__init__(message)


class ConnectivityError(ApiError):
    """Raised when the connectivity probe gets anything but HTTP 200."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message, status_code=status_code)


class TransportError(ApiError):
    """Raised when a request never completed (connection failure, timeout)."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"n8n API unreachable: {cause}", cause=cause)


class ApiClient:
    """Async client for the n8n public REST API.

    Args:
        config: Base URL, API key and debug flag.
        transport_factory: Builds the HTTP transport. Defaults to
            ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        transport_factory: TransportFactory | None = None,
    ) -> None:
        self._config = config
        factory = transport_factory or default_transport
        self._transport: HttpTransport = factory(
            base_url=config.base_url,
            headers={API_KEY_HEADER: config.api_key, "Accept": "application/json"},
            timeout=REQUEST_TIMEOUT,
        )
        self._tracing = select_tracing(config.debug)
        self._tracing.attach(self._transport)
        logger.debug(
            "n8n client for %s (tracing: %s)", config.base_url, self._tracing.name
        )

    @property
    def config(self) -> ClientConfig:
        """The configuration this client was built with."""
        return self._config

    async def close(self) -> None:
        """Close the underlying transport if it supports closing."""
        aclose = getattr(self._transport, "aclose", None)
        if aclose is not None:
            await aclose()

    async def __aenter__(self) -> ApiClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def _send(
        self, method: str, path: str, *, json: Any = None
    ) -> httpx.Response:
        """Issue a request, turning transport failures into ``TransportError``."""
        kwargs: dict[str, Any] = {} if json is None else {"json": json}
        send = getattr(self._transport, method.lower())
        try:
            return await send(path, **kwargs)
        except httpx.TransportError as exc:
            raise TransportError(exc) from exc
        except httpx.DecodingError as exc:
            raise ApiError(
                f"undecodable response to {method} {path}: {exc}", cause=exc
            ) from exc

    async def _request(self, method: str, path: str, *, json: Any = None) -> Any:
        """Make a request and return the decoded JSON body."""
        resp = await self._send(method, path, json=json)
        if resp.status_code >= 400:
            raise ApiError(_error_message(resp), status_code=resp.status_code)
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as exc:
            raise ApiError(
                f"invalid JSON in response to {method} {path}",
                status_code=resp.status_code,
            ) from exc

    # ---- Health ----

    async def check_connectivity(self) -> None:
        """Confirm the API is reachable and accepts the configured key."""
        resp = await self._send("GET", "/workflows")
        if resp.status_code != 200:
            message = _error_message(resp)
            logger.warning(
                "n8n connectivity check failed: %s %s", resp.status_code, message
            )
            raise ConnectivityError(resp.status_code, message)

    # ---- Workflows ----

    async def get_workflows(self) -> list[Workflow]:
        """List workflows on the first response page."""
        data = await self._request("GET", "/workflows")
        return _collection(data)

    async def get_workflow(self, workflow_id: str) -> Workflow:
        """Get a single workflow by ID."""
        return await self._request("GET", f"/workflows/{workflow_id}")

    async def create_workflow(self, spec: WorkflowSpec) -> Workflow:
        """Create a new workflow from a workflow definition."""
        return await self._request("POST", "/workflows", json=spec)

    async def update_workflow(self, workflow_id: str, spec: WorkflowSpec) -> Workflow:
        """Replace a workflow's definition."""
        return await self._request("PUT", f"/workflows/{workflow_id}", json=spec)

    async def delete_workflow(self, workflow_id: str) -> Any:
        """Delete a workflow and return the server's confirmation payload."""
        return await self._request("DELETE", f"/workflows/{workflow_id}")

    async def activate_workflow(self, workflow_id: str) -> Workflow:
        """Activate a workflow so its triggers run."""
        return await self._request("POST", f"/workflows/{workflow_id}/activate")

    async def deactivate_workflow(self, workflow_id: str) -> Workflow:
        """Deactivate a workflow."""
        return await self._request("POST", f"/workflows/{workflow_id}/deactivate")

    async def execute_workflow(
        self, workflow_id: str, data: dict[str, Any]
    ) -> ExecutionAck:
        """Trigger a workflow run with the given input data."""
        return await self._request(
            "POST", f"/workflows/{workflow_id}/execute", json=data
        )

    # ---- Executions ----

    async def get_executions(self) -> list[Execution]:
        """List executions on the first response page."""
        data = await self._request("GET", "/executions")
        return _collection(data)

    async def get_execution(self, execution_id: str) -> Execution:
        """Get a single execution by ID."""
        return await self._request("GET", f"/executions/{execution_id}")

    async def delete_execution(self, execution_id: str) -> Any:
        """Delete an execution and return the server's confirmation payload."""
        return await self._request("DELETE", f"/executions/{execution_id}")


# ---- Response helpers ----


def _collection(body: Any) -> list[Any]:
    if not isinstance(body, dict):
        return []
    return cast(list[Any], body.get("data") or [])


def _error_message(resp: httpx.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return resp.reason_phrase or "Unknown error"
