"""
Upward discovery from a source file toward the filesystem root.

The walk scans one ancestor directory at a time, never descending. The first
project file and the first solution filter seen are kept (deepest wins) and the
walk stops at the first directory holding a solution file.
"""

import os

from slnscout.core.classifier import classify
from slnscout.core.errors import DiscoveryError, ScanError
from slnscout.core.models import DiscoveryResult, FileKind
from slnscout.core.scanner import normalize_path, scan
from slnscout.utils.logger import debug_trace, log_error


def walk_upward(start_file: str | os.PathLike[str], debug: bool = False) -> DiscoveryResult:
    """Walk ancestors of ``start_file`` until a solution directory is found.

    Args:
        start_file: The buffer path whose context is being resolved
        debug: Emit verbose traversal traces

    Returns:
        DiscoveryResult with the closest project, solution filter and
        solution directories. ``solution_dir`` is None when the filesystem root
        was reached without finding a solution.

    Raises:
        DiscoveryError: If the starting directory cannot be read.
    """
    result = DiscoveryResult()
    directory = normalize_path(start_file).parent
    is_start = True

    while True:
        try:
            entries = scan(directory)
        except ScanError as e:
            if is_start:
                raise DiscoveryError(
                    f"Cannot read starting directory {directory}: {e.cause}"
                ) from e
            log_error(str(e))
            result.errors.append(str(e))
            entries = []
        is_start = False

        found_solution = False
        for entry in entries:
            if not entry.is_file:
                continue
            kind = classify(entry.name)
            if kind is FileKind.PROJECT:
                result.projects.append(entry.path)
                if result.project_file is None:
                    result.project_file = entry.path
                    result.project_dir = directory
            elif kind is FileKind.SOLUTION_FILTER:
                result.solution_filters.append(entry.path)
                if result.solution_filter_file is None:
                    result.solution_filter_file = entry.path
                    result.solution_filter_dir = directory
            elif kind is FileKind.SOLUTION:
                result.solutions.append(entry.path)
                found_solution = True

        if found_solution:
            result.solution_dir = directory
            debug_trace(debug, f"walk_upward solution directory: {directory}")
            break

        parent = directory.parent
        if parent == directory:
            debug_trace(debug, f"walk_upward reached filesystem root from {start_file}")
            break
        debug_trace(debug, f"walk_upward searching one up folder {parent}")
        directory = parent

    return result
