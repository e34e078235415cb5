"""
Tool preselecting one target out of a caller-supplied list.
"""

import asyncio
from typing import Any, Dict, List

from slnscout.config.settings import load_config
from slnscout.core.resolver import predict_target
from slnscout.core.upward_walker import walk_upward
from slnscout.protocol.types import ToolResult
from slnscout.tools.base_tool import FILE_PATH_PROPERTY, BaseTool
from slnscout.utils.error_handling import handle_tool_errors
from slnscout.utils.logger import log_info


class PredictTargetTool(BaseTool):
    """Predict the target a file belongs to, without prompting."""

    @property
    def name(self) -> str:
        return "predict_target"

    @property
    def description(self) -> str:
        return "Pick the target containing the file's project out of a list of targets, or null"

    @property
    def input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "file_path": FILE_PATH_PROPERTY,
                "targets": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Solution and solution filter paths to choose from",
                },
            },
            "required": ["file_path", "targets"],
        }

    @handle_tool_errors("predict_target")
    async def execute(self, arguments: Dict[str, Any] | None) -> List[ToolResult]:
        file_path = self.require_file_path(arguments)
        targets = (arguments or {}).get("targets")
        if not isinstance(targets, list) or not all(isinstance(t, str) for t in targets):
            raise ValueError("targets must be a list of paths")
        log_info(f"predict_target called for {file_path}", {"targets": targets})

        config = load_config()

        def run() -> Dict[str, Any]:
            discovery = walk_upward(file_path, debug=config.debug)
            projects = [discovery.project_file] if discovery.project_file else []
            result = predict_target(
                targets,
                projects,
                exclude_predicate=config.ignore_target,
                choose_fn=config.choose_target,
            )
            return {
                "status": "success",
                "target": str(result) if result else None,
                "project_file": (
                    str(discovery.project_file) if discovery.project_file else None
                ),
            }

        payload = await asyncio.get_running_loop().run_in_executor(None, run)
        return self.json_result(payload)
