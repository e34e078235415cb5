import os

MCP_PROTOCOL_VERSION = "2025-06-18"
JSONRPC_VERSION = "2.0"

# Server info and capabilities.
SERVER_CAPABILITIES = {"tools": {"listChanged": True}, "logging": {}}
SERVER_NAME = "slnscout"
SERVER_DESCRIPTION = """
slnscout is an MCP Server that locates the solution and project context for a source file in a .NET source tree.
"""

# Environment variables
SLNSCOUT_HOME = os.getenv("SLNSCOUT_HOME", "")
SLNSCOUT_CONFIG_FILE = os.getenv("SLNSCOUT_CONFIG_FILE", "")
CONFIG_FILE_NAME = "slnscout.yaml"

# Discovery policy defaults, overridable via env vars or the YAML config.
BROAD_SEARCH_DEFAULT = os.getenv("SLNSCOUT_BROAD_SEARCH", "false").lower() == "true"
DEBUG_DEFAULT = os.getenv("SLNSCOUT_DEBUG", "false").lower() == "true"

# Target and project file suffixes. Matching is case sensitive.
SOLUTION_SUFFIXES = (".sln", ".slnx")
SOLUTION_FILTER_SUFFIXES = (".slnf",)
PROJECT_SUFFIXES = (".csproj",)
TARGET_SUFFIXES = SOLUTION_SUFFIXES + SOLUTION_FILTER_SUFFIXES

# Directories we are not looking for solutions inside.
# Matched as lower-cased substrings, so "rebuild" is excluded by "build".
EXCLUDED_DIRECTORIES = [
    "node_modules",
    ".git",
    "dist",
    "wwwroot",
    "properties",
    "build",
    "bin",
    "debug",
    "obj",
]

# Entries marking a version-control root.
VCS_MARKERS = [".git"]
