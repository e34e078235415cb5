"""
Common utility functions for the slnscout MCP server.
"""

from pathlib import Path

VERSION_FILE = Path(__file__).resolve().parent.parent.parent / "VERSION"


def get_version() -> str:
    """Get the version from the VERSION file at the repository root.

    Returns:
        The version string from the VERSION file.

    Raises:
        FileNotFoundError: If the VERSION file is not found.
        ValueError: If the VERSION file is empty or unreadable.
    """
    if not VERSION_FILE.exists():
        raise FileNotFoundError(f"VERSION file not found at {VERSION_FILE}")

    try:
        version = VERSION_FILE.read_text(encoding="utf-8").strip()
    except OSError as e:
        raise ValueError(f"Error reading VERSION file: {e}") from e

    if not version:
        raise ValueError("VERSION file is empty")
    return version
