"""
Custom type definitions for slnscout.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class ToolResult:
    """Result from tool execution."""

    type: str = "text"
    text: str = ""
    data: Optional[Dict[str, Any]] = None
