"""
Tool listing the solutions, solution filters and projects around a file.
"""

import asyncio
from functools import partial
from typing import Any, Dict, List

from slnscout.config.settings import load_config
from slnscout.core.discovery import discover
from slnscout.protocol.types import ToolResult
from slnscout.tools.base_tool import FILE_PATH_PROPERTY, BaseTool
from slnscout.utils.error_handling import handle_tool_errors
from slnscout.utils.logger import log_info


class ListTargetsTool(BaseTool):
    """List candidate targets without choosing between them."""

    @property
    def name(self) -> str:
        return "list_targets"

    @property
    def description(self) -> str:
        return "List the solution, solution filter and project files discovered for a source file"

    @property
    def input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "file_path": FILE_PATH_PROPERTY,
                "broad_search": {
                    "type": "boolean",
                    "description": "Explore the whole repository (default: from config)",
                },
            },
            "required": ["file_path"],
        }

    @handle_tool_errors("list_targets")
    async def execute(self, arguments: Dict[str, Any] | None) -> List[ToolResult]:
        file_path = self.require_file_path(arguments)
        log_info(f"list_targets called for {file_path}")

        config = load_config()
        broad_search = (arguments or {}).get("broad_search")
        if isinstance(broad_search, bool):
            config.broad_search = broad_search
        # Listing must not depend on a preference pattern picking a winner
        config.choose_target = None

        report = await asyncio.get_running_loop().run_in_executor(
            None, partial(discover, file_path, config)
        )
        discovery = report.discovery
        return self.json_result(
            {
                "status": "success",
                "targets": [str(p) for p in report.candidates],
                "solutions": [str(p) for p in discovery.solutions],
                "solution_filters": [str(p) for p in discovery.solution_filters],
                "projects": [str(p) for p in discovery.projects],
                "solution_dir": (
                    str(discovery.solution_dir) if discovery.solution_dir else None
                ),
                "broad_search_root": (
                    str(report.broad_search_root) if report.broad_search_root else None
                ),
                "errors": report.errors,
            }
        )
