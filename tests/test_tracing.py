import logging

import pytest

from n8n_client import ClientConfig, DebugTracing, NoTracing
from n8n_client.tracing import select_tracing


def test_select_tracing():
    assert isinstance(select_tracing(True), DebugTracing)
    assert isinstance(select_tracing(False), NoTracing)


def test_no_tracing_leaves_hooks_alone():
    hooks = {"request": [], "response": []}

    class Transport:
        event_hooks = hooks

    NoTracing().attach(Transport())
    assert hooks == {"request": [], "response": []}


@pytest.mark.asyncio
async def test_debug_client_logs_traffic_without_api_key(make_client, server, caplog):
    caplog.set_level(logging.DEBUG, logger="n8n_client.tracing")
    server.add("GET", "/workflows/wf1", body={"id": "wf1"})
    client = make_client(
        ClientConfig("https://n8n.example.com/api/v1", api_key="secret-key", debug=True)
    )

    await client.get_workflow("wf1")
    await client.close()

    messages = [r.getMessage() for r in caplog.records if r.name == "n8n_client.tracing"]
    assert messages == [
        "-> GET https://n8n.example.com/api/v1/workflows/wf1",
        "<- 200 GET https://n8n.example.com/api/v1/workflows/wf1",
    ]
    assert "secret-key" not in caplog.text


@pytest.mark.asyncio
async def test_quiet_client_logs_no_traffic(make_client, server, config, caplog):
    caplog.set_level(logging.DEBUG, logger="n8n_client.tracing")
    server.add("GET", "/workflows", body={"data": []})
    client = make_client(config)

    await client.get_workflows()
    await client.close()

    assert not [r for r in caplog.records if r.name == "n8n_client.tracing"]
