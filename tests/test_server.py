"""HTTP and MCP endpoint tests."""

import json

import pytest
from fastapi.testclient import TestClient

from passage_context import __version__
from passage_context.api.deps import get_context_engine
from passage_context.context_engine import ContextEngine
from passage_context.server import app
from passage_context.services.text_loader import TextLoader


@pytest.fixture
def client(engine):
    app.dependency_overrides[get_context_engine] = lambda: engine
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _rpc(client, method, params=None, id=1):
    body = {"jsonrpc": "2.0", "id": id, "method": method}
    if params is not None:
        body["params"] = params
    return client.post("/mcp", json=body)


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["version"] == __version__
        assert response.headers["x-content-type-options"] == "nosniff"
        assert "x-request-id" in response.headers

    def test_ready_when_text_loads(self, client):
        response = client.get("/ready")
        assert response.status_code == 200
        assert response.json()["checks"] == {"reference_text": True}

    def test_not_ready_when_text_missing(self, settings, cache, tmp_path):
        broken = ContextEngine(settings=settings, cache=cache, loader=TextLoader(tmp_path, "gone.txt"))
        app.dependency_overrides[get_context_engine] = lambda: broken
        try:
            with TestClient(app) as test_client:
                response = test_client.get("/ready")
        finally:
            app.dependency_overrides.clear()
        assert response.status_code == 503
        assert response.json()["status"] == "not_ready"

    def test_root(self, client):
        assert client.get("/").json()["mcp"] == "/mcp"


class TestToolEndpoint:
    def test_success(self, client):
        response = client.post(
            "/v1/tools",
            json={"tool": "heart_of_darkness", "params": {"question": "Who was Kurtz?"}},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert "remarkable man" in body["result"]["context"]
        assert body["usage"]["output_tokens"] == body["result"]["token_count"]

    def test_invalid_params_reported(self, client):
        response = client.post("/v1/tools", json={"tool": "passage_query", "params": {}})
        body = response.json()
        assert body["success"] is False
        assert body["error"].startswith("Invalid parameter")

    def test_unknown_tool_rejected_by_schema(self, client):
        response = client.post("/v1/tools", json={"tool": "nope", "params": {}})
        assert response.status_code == 422


class TestMCPTransport:
    def test_initialize(self, client):
        result = _rpc(client, "initialize").json()["result"]
        assert result["serverInfo"]["name"] == "passage-context"

    def test_tools_list(self, client):
        tools = _rpc(client, "tools/list").json()["result"]["tools"]
        assert [t["name"] for t in tools] == ["heart_of_darkness", "passage_query"]

    def test_tools_call(self, client):
        response = _rpc(
            client,
            "tools/call",
            {"name": "heart_of_darkness", "arguments": {"question": "Who was Kurtz?"}},
        )
        content = response.json()["result"]["content"][0]
        assert content["type"] == "text"
        payload = json.loads(content["text"])
        assert payload["question"] == "Who was Kurtz?"
        assert "Kurtz" in payload["context"]

    def test_tools_call_unknown_tool(self, client):
        error = _rpc(client, "tools/call", {"name": "nope", "arguments": {}}).json()["error"]
        assert error["code"] == -32602
        assert "Unknown tool" in error["message"]

    def test_tools_call_load_failure(self, settings, cache, tmp_path):
        broken = ContextEngine(settings=settings, cache=cache, loader=TextLoader(tmp_path, "gone.txt"))
        app.dependency_overrides[get_context_engine] = lambda: broken
        try:
            with TestClient(app) as test_client:
                response = _rpc(
                    test_client,
                    "tools/call",
                    {"name": "heart_of_darkness", "arguments": {"question": "river"}},
                )
        finally:
            app.dependency_overrides.clear()
        error = response.json()["error"]
        assert error["code"] == -32000
        assert error["message"].startswith("Error loading reference text")

    def test_unknown_method(self, client):
        assert _rpc(client, "resources/list").json()["error"]["code"] == -32601

    def test_notification_has_no_body(self, client):
        response = client.post("/mcp", json={"jsonrpc": "2.0", "method": "ping"})
        assert response.status_code == 204

    def test_batch(self, client):
        response = client.post(
            "/mcp",
            json=[
                {"jsonrpc": "2.0", "id": 1, "method": "ping"},
                {"jsonrpc": "2.0", "method": "ping"},
                {"jsonrpc": "2.0", "id": 2, "method": "tools/list"},
            ],
        )
        assert [r["id"] for r in response.json()] == [1, 2]

    def test_parse_error(self, client):
        response = client.post("/mcp", content=b"not json", headers={"content-type": "application/json"})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == -32700
