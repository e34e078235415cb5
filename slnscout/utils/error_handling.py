"""Error handling patterns for tool functions."""

import traceback
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import ParamSpec

from slnscout.core.errors import SlnScoutError
from slnscout.protocol.types import ToolResult
from slnscout.utils.logger import log_error

P = ParamSpec("P")


def create_error_result(message: str) -> list[ToolResult]:
    """Single-item tool result carrying an error message."""
    return [ToolResult(text=f"Error: {message}")]


def handle_tool_errors(
    operation_name: str,
) -> Callable[
    [Callable[P, Awaitable[list[ToolResult]]]],
    Callable[P, Awaitable[list[ToolResult]]],
]:
    """Decorator converting exceptions raised by a tool into error results."""

    def decorator(
        func: Callable[P, Awaitable[list[ToolResult]]],
    ) -> Callable[P, Awaitable[list[ToolResult]]]:
        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> list[ToolResult]:
            try:
                return await func(*args, **kwargs)
            except (SlnScoutError, ValueError, TypeError, KeyError, OSError) as e:
                log_error(
                    f"Error in {operation_name}: {str(e)}",
                    {"traceback": traceback.format_exc()},
                )
                return create_error_result(f"Error in {operation_name}: {str(e)}")
            except Exception as e:
                log_error(
                    f"Unexpected error in {operation_name}: {str(e)}",
                    {"traceback": traceback.format_exc()},
                )
                return create_error_result(
                    f"Unexpected error in {operation_name}: {str(e)}"
                )

        return wrapper

    return decorator
