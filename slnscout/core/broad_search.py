"""
Broad search: exhaustive breadth-first exploration of a source subtree.

Every solution, solution filter and project file below the root is collected.
Excluded and symbol-prefixed directories are pruned, and directories are
tracked by real path so symbolic-link cycles cannot cause revisits.
"""

import os
from collections import deque
from pathlib import Path
from typing import Callable, Deque, Iterable, Optional, Set

from slnscout.config.constants import EXCLUDED_DIRECTORIES
from slnscout.core.cancellation import CancellationToken
from slnscout.core.classifier import classify, is_excluded_directory, starts_with_symbol
from slnscout.core.errors import ScanError
from slnscout.core.models import BroadSearchResult, FileKind
from slnscout.core.scanner import normalize_path, scan
from slnscout.core.vcs import find_vcs_root
from slnscout.utils.logger import debug_trace, log_error


def explore(
    root: str | os.PathLike[str],
    cancel_token: Optional[CancellationToken] = None,
    excluded: Iterable[str] = EXCLUDED_DIRECTORIES,
    debug: bool = False,
) -> BroadSearchResult:
    """Collect all targets and projects below ``root`` in breadth-first order.

    Args:
        root: Directory to explore; it is scanned even if its own name is excluded
        cancel_token: Checked before each directory is dequeued
        excluded: Directory name tokens to prune
        debug: Emit verbose traversal traces

    Returns:
        BroadSearchResult with normalized, de-duplicated path lists.

    Raises:
        DiscoveryCancelled: If the token is cancelled mid-traversal.
    """
    excluded = list(excluded)
    root_path = normalize_path(root)
    result = BroadSearchResult(root=root_path)
    queue: Deque[Path] = deque([root_path])
    visited: Set[str] = set()
    seen_files: Set[Path] = set()

    while queue:
        if cancel_token is not None:
            cancel_token.raise_if_cancelled()

        directory = queue.popleft()
        real = os.path.realpath(directory)
        if real in visited:
            debug_trace(debug, f"explore skipping visited directory {directory}")
            continue
        visited.add(real)

        try:
            entries = scan(directory)
        except ScanError as e:
            log_error(str(e))
            result.errors.append(str(e))
            continue

        for entry in entries:
            if starts_with_symbol(entry.name):
                continue
            if entry.is_dir:
                if is_excluded_directory(entry.name, excluded):
                    continue
                queue.append(entry.path)
                continue

            if entry.path in seen_files:
                continue
            kind = classify(entry.name)
            if kind is FileKind.SOLUTION:
                result.solutions.append(entry.path)
            elif kind is FileKind.SOLUTION_FILTER:
                result.solution_filters.append(entry.path)
            elif kind is FileKind.PROJECT:
                result.projects.append(entry.path)
            else:
                continue
            seen_files.add(entry.path)

    debug_trace(
        debug,
        f"explore root: {root_path}",
        {
            "directories": len(visited),
            "solutions": [str(p) for p in result.solutions],
            "solution_filters": [str(p) for p in result.solution_filters],
            "projects": len(result.projects),
        },
    )
    return result


def resolve_broad_search_root(
    start_file: str | os.PathLike[str],
    solution_dir: Optional[Path],
    vcs_root: Callable[[Path], Optional[Path]] = find_vcs_root,
) -> Optional[Path]:
    """Pick the directory a broad search should start from.

    The version-control root wins when the solution boundary lies inside it,
    otherwise the solution boundary is used. Either one alone is used as-is.
    """
    repo_root = vcs_root(normalize_path(start_file))
    if solution_dir is not None and repo_root is not None:
        if normalize_path(solution_dir).is_relative_to(normalize_path(repo_root)):
            return normalize_path(repo_root)
        return normalize_path(solution_dir)
    if solution_dir is not None:
        return normalize_path(solution_dir)
    if repo_root is not None:
        return normalize_path(repo_root)
    return None
