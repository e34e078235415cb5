"""
Server info tool implementation.
"""

from typing import Any, Dict, List

from slnscout.config.constants import SERVER_CAPABILITIES, SERVER_DESCRIPTION, SERVER_NAME
from slnscout.config.settings import get_config_file_path
from slnscout.protocol.types import ToolResult
from slnscout.tools.base_tool import BaseTool
from slnscout.utils.common import get_version
from slnscout.utils.error_handling import handle_tool_errors
from slnscout.utils.logger import log_info


class ServerInfoTool(BaseTool):
    """Server info tool that returns server information."""

    @property
    def name(self) -> str:
        return "get_server_info"

    @property
    def description(self) -> str:
        return "Get information about the slnscout MCP server"

    @property
    def input_schema(self) -> Dict[str, Any]:
        return {"type": "object", "properties": {}, "required": []}

    @handle_tool_errors("get_server_info")
    async def execute(self, arguments: Dict[str, Any] | None) -> List[ToolResult]:
        log_info("Server info tool called")
        config_file = get_config_file_path()
        return self.json_result(
            {
                "name": SERVER_NAME,
                "version": get_version(),
                "description": SERVER_DESCRIPTION.strip(),
                "capabilities": SERVER_CAPABILITIES,
                "config_file": str(config_file) if config_file else None,
            }
        )
