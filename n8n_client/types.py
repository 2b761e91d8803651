"""Type definitions for the n8n client."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypedDict

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings for a single n8n instance.

    Args:
        base_url: API root, e.g. "https://n8n.example.com/api/v1".
        api_key: Value sent in the X-N8N-API-KEY header.
        debug: Log every request and response at DEBUG level.
    """

    base_url: str
    api_key: str
    debug: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientConfig:
        """Build a config from N8N_BASE_URL, N8N_API_KEY and N8N_DEBUG."""
        env = os.environ if environ is None else environ
        missing = [name for name in ("N8N_BASE_URL", "N8N_API_KEY") if not env.get(name)]
        if missing:
            raise ValueError(f"Missing required environment variable(s): {', '.join(missing)}")
        return cls(
            base_url=env["N8N_BASE_URL"],
            api_key=env["N8N_API_KEY"],
            debug=env.get("N8N_DEBUG", "").strip().lower() in _TRUTHY,
        )


class WorkflowNode(TypedDict, total=False):
    """A single node inside a workflow graph."""

    id: str
    name: str
    type: str
    typeVersion: float
    position: list[float]
    parameters: dict[str, Any]
    credentials: dict[str, Any]


class WorkflowSpec(TypedDict, total=False):
    """Request body for creating or updating a workflow."""

    name: str
    nodes: list[WorkflowNode]
    connections: dict[str, Any]
    settings: dict[str, Any]
    staticData: dict[str, Any] | None


class Workflow(WorkflowSpec, total=False):
    """A workflow as returned by the server."""

    id: str
    active: bool
    createdAt: str
    updatedAt: str
    tags: list[dict[str, Any]]


class Execution(TypedDict, total=False):
    """A single run of a workflow."""

    id: str
    workflowId: str  # lookup only
    status: str  # "success", "error", "running", "waiting", "canceled"
    mode: str
    finished: bool
    startedAt: str
    stoppedAt: str | None
    data: dict[str, Any]


class ExecutionAck(TypedDict, total=False):
    """Acknowledgement returned when a workflow execution is triggered."""

    executionId: str
    success: bool
