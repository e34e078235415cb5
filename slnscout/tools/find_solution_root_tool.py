"""
Tool resolving the solution root for a source file.
"""

import asyncio
from functools import partial
from typing import Any, Dict, List

from slnscout.config.settings import load_config
from slnscout.core.discovery import discover
from slnscout.core.models import OutcomeKind
from slnscout.protocol.types import ToolResult
from slnscout.tools.base_tool import FILE_PATH_PROPERTY, BaseTool
from slnscout.utils.error_handling import handle_tool_errors
from slnscout.utils.logger import log_info

AMBIGUOUS_MESSAGE = "Multiple potential target files found. Pick one of the candidates and pass it as previous_target."


class FindSolutionRootTool(BaseTool):
    """Resolve the root directory a C# language server should open for a file."""

    @property
    def name(self) -> str:
        return "find_solution_root"

    @property
    def description(self) -> str:
        return (
            "Find the solution (.sln/.slnx) or solution filter (.slnf) owning a source "
            "file and return the root directory to open it with"
        )

    @property
    def input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "file_path": FILE_PATH_PROPERTY,
                "broad_search": {
                    "type": "boolean",
                    "description": "Explore the whole repository instead of the solution directory only (default: from config)",
                },
                "previous_target": {
                    "type": "string",
                    "description": "Target chosen earlier, used when the candidates are ambiguous",
                },
            },
            "required": ["file_path"],
        }

    @handle_tool_errors("find_solution_root")
    async def execute(self, arguments: Dict[str, Any] | None) -> List[ToolResult]:
        file_path = self.require_file_path(arguments)
        arguments = arguments or {}
        log_info(f"find_solution_root called for {file_path}")

        config = load_config()
        broad_search = arguments.get("broad_search")
        if isinstance(broad_search, bool):
            config.broad_search = broad_search

        report = await asyncio.get_running_loop().run_in_executor(
            None,
            partial(
                discover,
                file_path,
                config,
                previous_target=arguments.get("previous_target") or None,
            ),
        )

        payload = report.to_dict()
        if report.outcome.kind is OutcomeKind.AMBIGUOUS:
            payload["message"] = AMBIGUOUS_MESSAGE
        return self.json_result(payload)
