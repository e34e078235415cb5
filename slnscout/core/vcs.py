"""Version-control boundary detection."""

import os
from pathlib import Path
from typing import Iterable

from slnscout.config.constants import VCS_MARKERS
from slnscout.core.scanner import normalize_path


def find_vcs_root(
    path: str | os.PathLike[str], markers: Iterable[str] = VCS_MARKERS
) -> Path | None:
    """Nearest ancestor directory of ``path`` holding a version-control marker.

    A ``.git`` file (worktrees, submodules) counts the same as a ``.git``
    directory. The directory of ``path`` itself is checked first.
    """
    markers = list(markers)
    start = normalize_path(path)
    directory = start if start.is_dir() else start.parent

    while True:
        for marker in markers:
            if (directory / marker).exists():
                return directory
        parent = directory.parent
        if parent == directory:
            return None
        directory = parent
