"""
n8n-client: async Python client for the n8n public REST API.

Example usage::

    from n8n_client import ApiClient, ClientConfig

    config = ClientConfig("https://n8n.example.com/api/v1", api_key="secret")

    async with ApiClient(config) as client:
        await client.check_connectivity()

        # List workflows
        workflows = await client.get_workflows()

        # Execute a workflow
        ack = await client.execute_workflow("wf1", {"inputs": {"value": "test"}})
        execution = await client.get_execution(ack["executionId"])
"""

from n8n_client.client import ApiClient, ApiError, ConnectivityError, TransportError
from n8n_client.tracing import DebugTracing, NoTracing
from n8n_client.transport import HttpTransport, TransportFactory
from n8n_client.types import (
    ClientConfig,
    Execution,
    ExecutionAck,
    Workflow,
    WorkflowNode,
    WorkflowSpec,
)

__all__ = [
    "ApiClient",
    "ApiError",
    "ConnectivityError",
    "TransportError",
    "DebugTracing",
    "NoTracing",
    "HttpTransport",
    "TransportFactory",
    "ClientConfig",
    "Execution",
    "ExecutionAck",
    "Workflow",
    "WorkflowNode",
    "WorkflowSpec",
]

__version__ = "0.1.0"
