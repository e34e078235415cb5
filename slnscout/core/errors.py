"""
Exception types raised by the discovery core.
"""

from pathlib import Path


class SlnScoutError(Exception):
    """Base class for all discovery errors."""


class ScanError(SlnScoutError):
    """A single directory could not be listed."""

    def __init__(self, directory: Path, cause: OSError):
        super().__init__(f"Error scanning directory {directory}: {cause}")
        self.directory = directory
        self.cause = cause


class MembershipCheckError(SlnScoutError):
    """A solution or solution filter could not be read to test membership."""

    def __init__(self, target: Path, reason: str):
        super().__init__(f"Cannot read target {target}: {reason}")
        self.target = target
        self.reason = reason


class DiscoveryError(SlnScoutError):
    """Discovery could not start, e.g. the starting directory is unreadable."""


class DiscoveryCancelled(SlnScoutError):
    """A broad search was cancelled through its cancellation token."""
