"""
Base tool class for all slnscout tools.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List

from slnscout.protocol.types import ToolResult

FILE_PATH_PROPERTY = {
    "type": "string",
    "description": "Absolute path of the source file whose solution context is resolved",
}


class BaseTool(ABC):
    """Base class for all tools."""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        pass

    @property
    @abstractmethod
    def input_schema(self) -> Dict[str, Any]:
        pass

    @abstractmethod
    async def execute(self, arguments: Dict[str, Any] | None) -> List[ToolResult]:
        pass

    @staticmethod
    def json_result(payload: Dict[str, Any]) -> List[ToolResult]:
        """Wrap a JSON payload as the tool's single text result."""
        return [
            ToolResult(
                text=json.dumps(payload, indent=2, ensure_ascii=False),
                data=payload,
            )
        ]

    @staticmethod
    def require_file_path(arguments: Dict[str, Any] | None) -> Path:
        """Extract the mandatory ``file_path`` argument.

        Raises:
            ValueError: If it is missing, not a string, or not absolute.
        """
        file_path = (arguments or {}).get("file_path")
        if not isinstance(file_path, str) or not file_path.strip():
            raise ValueError("file_path is required")
        path = Path(file_path)
        if not path.is_absolute():
            raise ValueError(f"file_path must be absolute: {file_path}")
        return path
