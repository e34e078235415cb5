"""
slnscout entry point.

Without arguments this launches the MCP server, talking JSON-RPC over
stdin/stdout. With ``--resolve FILE`` it runs a single discovery request and
prints the report as JSON, which is handy for scripting and debugging.
"""

import argparse
import asyncio
import json
import sys
import traceback

from slnscout.config.constants import SERVER_NAME
from slnscout.config.settings import load_config
from slnscout.core.discovery import discover
from slnscout.core.errors import SlnScoutError
from slnscout.protocol.jsonrpc_server import JSONRPCServer
from slnscout.tools.registry import ToolRegistry
from slnscout.utils.logger import log_error, log_info


class SlnScoutServer:
    """Main server implementation."""

    def __init__(self) -> None:
        self.server = JSONRPCServer(SERVER_NAME)
        self.tool_registry = ToolRegistry()
        for tool_name in self.tool_registry.list_tool_names():
            self.server.tools[tool_name] = self.tool_registry.get_tool(tool_name)

    async def run(self) -> None:
        log_info("Starting slnscout server")
        await self.server.run()


def resolve_once(file_path: str, broad_search: bool, previous_target: str | None) -> int:
    """Run one discovery request and print the report. Returns the exit status."""
    config = load_config()
    if broad_search:
        config.broad_search = True
    try:
        report = discover(file_path, config, previous_target=previous_target)
    except SlnScoutError as e:
        log_error(f"Discovery failed for {file_path}: {str(e)}")
        print(json.dumps({"status": "error", "error": str(e)}))
        return 1
    print(json.dumps(report.to_dict(), indent=2))
    return 0


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="slnscout")
    parser.add_argument(
        "--resolve",
        "-r",
        metavar="FILE",
        default=None,
        help="Resolve the solution root for FILE and print it instead of serving",
    )
    parser.add_argument(
        "--broad-search",
        action="store_true",
        help="Explore the whole repository for targets",
    )
    parser.add_argument(
        "--previous-target",
        default=None,
        help="Target chosen earlier, used to settle ambiguity",
    )
    args = parser.parse_args()

    if args.resolve:
        sys.exit(resolve_once(args.resolve, args.broad_search, args.previous_target))

    try:
        server = SlnScoutServer()
        asyncio.run(server.run())
    except KeyboardInterrupt:
        log_info("Server stopped by user.")
        sys.exit(0)
    except (OSError, RuntimeError, ValueError) as e:
        log_error(f"Server error: {str(e)}", {"traceback": traceback.format_exc()})
        sys.exit(1)


if __name__ == "__main__":
    main()
