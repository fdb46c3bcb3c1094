"""MCP Streamable HTTP transport (JSON-RPC over POST /mcp)."""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from .. import __version__
from ..api.deps import get_context_engine, sanitize_error_message
from ..context_engine import ContextEngine
from ..services.text_loader import DocumentLoadError
from .jsonrpc import (
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    SERVER_ERROR,
    jsonrpc_error,
    jsonrpc_response,
    tool_content,
)
from .tool_defs import TOOL_DEFINITIONS

logger = logging.getLogger(__name__)

router = APIRouter(tags=["MCP Transport"])


@router.post("/mcp")
async def mcp_transport_endpoint(
    request: Request,
    engine: ContextEngine = Depends(get_context_engine),
):
    """MCP endpoint accepting single or batched JSON-RPC requests."""
    try:
        body = await request.json()
    except ValueError:
        return JSONResponse(jsonrpc_error(None, PARSE_ERROR, "Parse error"), status_code=400)

    if isinstance(body, list):
        responses = []
        for req in body:
            resp = await handle_jsonrpc_request(req, engine)
            if resp:  # Skip notifications (no id)
                responses.append(resp)
        return JSONResponse(responses)

    response = await handle_jsonrpc_request(body, engine)
    return JSONResponse(response) if response else Response(status_code=204)


async def handle_jsonrpc_request(body: Any, engine: ContextEngine) -> dict | None:
    """Handle one JSON-RPC request. Returns None for notifications."""
    if not isinstance(body, dict):
        return jsonrpc_error(None, INVALID_REQUEST, "Invalid request")

    method = body.get("method")
    id = body.get("id")
    params = body.get("params") or {}

    if id is None:
        return None

    if method == "initialize":
        return jsonrpc_response(
            id,
            {
                "protocolVersion": "2024-11-05",
                "serverInfo": {"name": "passage-context", "version": __version__},
                "capabilities": {"tools": {}},
            },
        )
    elif method == "tools/list":
        return jsonrpc_response(id, {"tools": TOOL_DEFINITIONS})
    elif method == "tools/call":
        return await _handle_call_tool(id, params, engine)
    elif method == "ping":
        return jsonrpc_response(id, {})
    else:
        return jsonrpc_error(id, METHOD_NOT_FOUND, f"Method not found: {method}")


async def _handle_call_tool(id: Any, params: dict, engine: ContextEngine) -> dict:
    tool_name = params.get("name")
    arguments = params.get("arguments") or {}

    try:
        result = await engine.execute(tool_name, arguments)
    except ValueError as e:
        return jsonrpc_error(id, INVALID_PARAMS, str(e))
    except DocumentLoadError as e:
        return jsonrpc_error(id, SERVER_ERROR, str(e))
    except Exception as e:
        return jsonrpc_error(id, SERVER_ERROR, sanitize_error_message(e))

    return tool_content(id, result.data)
