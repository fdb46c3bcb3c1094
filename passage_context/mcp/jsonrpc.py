"""JSON-RPC 2.0 envelopes for the MCP transport.

See: https://www.jsonrpc.org/specification
"""

import json
from typing import Any

# Standard JSON-RPC error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603
SERVER_ERROR = -32000  # Application errors (e.g. reference text unavailable)


def jsonrpc_response(id: Any, result: Any) -> dict:
    """Success envelope. ``id`` must echo the request id."""
    return {"jsonrpc": "2.0", "id": id, "result": result}


def jsonrpc_error(id: Any, code: int, message: str) -> dict:
    """Error envelope. ``id`` is None when the request could not be parsed."""
    return {"jsonrpc": "2.0", "id": id, "error": {"code": code, "message": message}}


def tool_content(id: Any, payload: dict) -> dict:
    """Wrap a tool payload as MCP text content."""
    return jsonrpc_response(
        id,
        {"content": [{"type": "text", "text": json.dumps(payload, indent=2, default=str)}]},
    )
