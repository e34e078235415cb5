"""
Directory listing for discovery traversals.
"""

import os
from pathlib import Path
from typing import Iterable, List

from slnscout.core.errors import ScanError
from slnscout.core.models import DirectoryEntry, EntryKind
from slnscout.utils.logger import log_debug


def normalize_path(path: str | os.PathLike[str]) -> Path:
    """Absolute path with collapsed separators; symlinks are kept as-is."""
    return Path(os.path.normpath(os.path.abspath(os.fspath(path))))


def scan(directory: str | os.PathLike[str]) -> List[DirectoryEntry]:
    """List the immediate children of a directory, sorted by name.

    Entries that are neither files nor directories (sockets, broken symlinks)
    are skipped. The directory handle is released before returning.

    Raises:
        ScanError: If the directory cannot be listed.
    """
    root = normalize_path(directory)
    entries: List[DirectoryEntry] = []
    try:
        with os.scandir(root) as it:
            for entry in it:
                try:
                    if entry.is_file():
                        kind = EntryKind.FILE
                    elif entry.is_dir():
                        kind = EntryKind.DIRECTORY
                    else:
                        continue
                except OSError as e:
                    log_debug(f"Skipping unreadable entry {entry.path}: {e}")
                    continue
                entries.append(DirectoryEntry(entry.name, kind, root / entry.name))
    except OSError as e:
        raise ScanError(root, e) from e

    entries.sort(key=lambda e: e.name)
    return entries


def find_files_with_extensions(
    directory: str | os.PathLike[str], extensions: Iterable[str]
) -> List[Path]:
    """Shallow listing of files in ``directory`` ending with any of ``extensions``.

    Raises:
        ScanError: If the directory cannot be listed.
    """
    suffixes = tuple(extensions)
    return [
        entry.path
        for entry in scan(directory)
        if entry.is_file and entry.name.endswith(suffixes)
    ]


def unique_paths(paths: Iterable[str | os.PathLike[str]]) -> List[Path]:
    """Normalize paths and drop duplicates, keeping first-seen order."""
    seen = set()
    unique: List[Path] = []
    for path in paths:
        normalized = normalize_path(path)
        if normalized not in seen:
            seen.add(normalized)
            unique.append(normalized)
    return unique
