"""
Tool registry for managing all available tools.
"""

from typing import Dict, List

from slnscout.tools.base_tool import BaseTool
from slnscout.tools.find_solution_root_tool import FindSolutionRootTool
from slnscout.tools.list_targets_tool import ListTargetsTool
from slnscout.tools.predict_target_tool import PredictTargetTool
from slnscout.tools.server_info_tool import ServerInfoTool


class ToolRegistry:
    """Registry for managing all available tools."""

    supported_tools = [
        FindSolutionRootTool,
        ListTargetsTool,
        PredictTargetTool,
        ServerInfoTool,
    ]

    def __init__(self) -> None:
        self._tools: Dict[str, BaseTool] = {}
        for tool in self.supported_tools:
            self.register_tool(tool())

    def register_tool(self, tool: BaseTool) -> None:
        self._tools[tool.name] = tool

    def get_tool(self, name: str) -> BaseTool | None:
        return self._tools.get(name)

    def list_tool_names(self) -> List[str]:
        return list(self._tools.keys())
