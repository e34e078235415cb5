"""
Classification of file and directory names found during discovery.
All functions are pure and never touch the filesystem.
"""

import re
from typing import Iterable

from slnscout.config.constants import (
    EXCLUDED_DIRECTORIES,
    PROJECT_SUFFIXES,
    SOLUTION_FILTER_SUFFIXES,
    SOLUTION_SUFFIXES,
)
from slnscout.core.models import FileKind

_SYMBOL_PREFIX = re.compile(r"^[^0-9A-Za-z_]")


def classify(name: str) -> FileKind:
    """Classify a file name by its suffix.

    Symbol-prefixed names (hidden or system entries) are always ordinary.
    """
    if starts_with_symbol(name):
        return FileKind.ORDINARY
    if name.endswith(SOLUTION_SUFFIXES):
        return FileKind.SOLUTION
    if name.endswith(SOLUTION_FILTER_SUFFIXES):
        return FileKind.SOLUTION_FILTER
    if name.endswith(PROJECT_SUFFIXES):
        return FileKind.PROJECT
    return FileKind.ORDINARY


def is_target(name: str) -> bool:
    """Solutions and solution filters are both candidate targets."""
    return classify(name) in (FileKind.SOLUTION, FileKind.SOLUTION_FILTER)


def is_excluded_directory(
    name: str, excluded: Iterable[str] = EXCLUDED_DIRECTORIES
) -> bool:
    """True when the lower-cased name contains any exclusion token."""
    lowered = name.lower()
    return any(token in lowered for token in excluded)


def starts_with_symbol(name: str) -> bool:
    """Hidden and system entries start with something other than [0-9A-Za-z_]."""
    return _SYMBOL_PREFIX.match(name) is not None
