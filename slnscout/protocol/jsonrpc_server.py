"""
Lightweight JSON-RPC server over stdio.
"""

import asyncio
import json
import sys
import traceback
from typing import Any, Dict, Optional

from slnscout.config.constants import (
    JSONRPC_VERSION,
    MCP_PROTOCOL_VERSION,
    SERVER_CAPABILITIES,
    SERVER_NAME,
)
from slnscout.utils.common import get_version
from slnscout.utils.logger import log_error

FALLBACK_VERSION = "0.0.0"


class JSONRPCServer:
    """Lightweight JSON-RPC server implementation."""

    def __init__(self, name: str):
        """Initialize the JSON-RPC server."""
        self.name = name
        self.tools: Dict[str, Any] = {}

    async def handle_request(self, request: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Dispatch a JSON-RPC request; notifications return None."""
        method = request.get("method")
        params = request.get("params") or {}
        request_id = request.get("id")

        if method == "initialize":
            return self._initialize(request_id)
        elif method == "notifications/initialized":
            return None
        elif method == "tools/list":
            return self._list_tools(request_id)
        elif method == "tools/call":
            return await self._call_tool(params, request_id)
        else:
            return self._error_response(-32601, "Method not found", request_id)

    def _initialize(self, request_id: Optional[int]) -> Dict[str, Any]:
        try:
            version = get_version()
        except (FileNotFoundError, ValueError) as e:
            log_error(f"Failed to get version: {str(e)}")
            version = FALLBACK_VERSION

        return self._result(
            {
                "protocolVersion": MCP_PROTOCOL_VERSION,
                "capabilities": SERVER_CAPABILITIES,
                "serverInfo": {"name": SERVER_NAME, "version": version},
            },
            request_id,
        )

    def _list_tools(self, request_id: Optional[int]) -> Dict[str, Any]:
        tools = [
            {
                "name": tool_name,
                "description": tool.description,
                "inputSchema": tool.input_schema,
            }
            for tool_name, tool in self.tools.items()
        ]
        return self._result({"tools": tools}, request_id)

    async def _call_tool(
        self, params: Dict[str, Any], request_id: Optional[int]
    ) -> Dict[str, Any]:
        tool_name = params.get("name")
        arguments = params.get("arguments") or {}

        if tool_name not in self.tools:
            return self._error_response(
                -32601, f"Unknown tool: {tool_name}", request_id
            )

        try:
            result = await self.tools[tool_name].execute(arguments)
        except (AttributeError, TypeError, KeyError, ValueError) as e:
            error_msg = f"Tool execution error: {str(e)}"
            log_error(error_msg, {"traceback": traceback.format_exc()})
            return self._error_response(-32603, error_msg, request_id)
        except Exception as e:
            error_msg = f"Unexpected tool execution error: {str(e)}"
            log_error(error_msg, {"traceback": traceback.format_exc()})
            return self._error_response(-32603, error_msg, request_id)

        content = [
            {
                "type": getattr(item, "type", "text"),
                "text": getattr(item, "text", ""),
                "data": getattr(item, "data", None),
            }
            for item in result
        ]
        return self._result({"content": content}, request_id)

    def _result(self, result: Dict[str, Any], request_id: Optional[int]) -> Dict[str, Any]:
        response: Dict[str, Any] = {"jsonrpc": JSONRPC_VERSION, "result": result}
        if request_id is not None:
            response["id"] = request_id
        return response

    def _error_response(
        self, code: int, message: str, request_id: Optional[int]
    ) -> Dict[str, Any]:
        response: Dict[str, Any] = {
            "jsonrpc": JSONRPC_VERSION,
            "error": {"code": code, "message": message},
        }
        if request_id is not None:
            response["id"] = request_id
        return response

    def _write(self, payload: Dict[str, Any]) -> None:
        print(json.dumps(payload))
        sys.stdout.flush()

    async def run(self) -> None:
        """Run the server with stdio communication."""
        loop = asyncio.get_running_loop()
        while True:
            line = await loop.run_in_executor(None, sys.stdin.readline)
            if not line:
                break
            if not line.strip():
                continue

            try:
                request = json.loads(line)
            except json.JSONDecodeError as e:
                log_error(f"JSON decode error: {str(e)}")
                self._write(self._error_response(-32700, f"Parse error: {str(e)}", None))
                continue
            if not isinstance(request, dict):
                self._write(self._error_response(-32600, "Invalid Request", None))
                continue

            try:
                response = await self.handle_request(request)
            except (OSError, ValueError) as e:
                log_error(
                    f"Server communication error: {str(e)}",
                    {"traceback": traceback.format_exc()},
                )
                response = self._error_response(
                    -32603, f"Internal error: {str(e)}", request.get("id")
                )
            if response is not None:
                self._write(response)
