"""
Data types shared by the discovery components.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional


class FileKind(Enum):
    """Classification of a file name."""

    SOLUTION = "solution"
    SOLUTION_FILTER = "solution_filter"
    PROJECT = "project"
    ORDINARY = "ordinary"


class EntryKind(Enum):
    FILE = "file"
    DIRECTORY = "directory"


class OutcomeKind(Enum):
    """Result kinds of target resolution."""

    RESOLVED = "resolved"
    AMBIGUOUS = "ambiguous"
    NONE = "none"


@dataclass(frozen=True)
class DirectoryEntry:
    """Immediate child of a scanned directory."""

    name: str
    kind: EntryKind
    path: Path

    @property
    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


@dataclass
class DiscoveryResult:
    """
    Outcome of a single discovery pass.
    The *_dir fields hold at most one directory each, the lists hold every path seen.
    """

    project_dir: Optional[Path] = None
    project_file: Optional[Path] = None
    solution_dir: Optional[Path] = None
    solution_filter_dir: Optional[Path] = None
    solution_filter_file: Optional[Path] = None
    solutions: List[Path] = field(default_factory=list)
    solution_filters: List[Path] = field(default_factory=list)
    projects: List[Path] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "project_dir": _str_or_none(self.project_dir),
            "project_file": _str_or_none(self.project_file),
            "solution_dir": _str_or_none(self.solution_dir),
            "solution_filter_dir": _str_or_none(self.solution_filter_dir),
            "solution_filter_file": _str_or_none(self.solution_filter_file),
            "solutions": [str(p) for p in self.solutions],
            "solution_filters": [str(p) for p in self.solution_filters],
            "projects": [str(p) for p in self.projects],
            "errors": list(self.errors),
        }


@dataclass
class BroadSearchResult:
    """Every target and project file found below a broad search root."""

    root: Path
    solutions: List[Path] = field(default_factory=list)
    solution_filters: List[Path] = field(default_factory=list)
    projects: List[Path] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def targets(self) -> List[Path]:
        return self.solutions + self.solution_filters


@dataclass
class ResolutionOutcome:
    """Resolved(target), Ambiguous(candidates) or None."""

    kind: OutcomeKind
    target: Optional[Path] = None
    candidates: List[Path] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @classmethod
    def resolved(cls, target: Path, errors: List[str] | None = None) -> "ResolutionOutcome":
        return cls(OutcomeKind.RESOLVED, target=target, errors=errors or [])

    @classmethod
    def ambiguous(
        cls, candidates: List[Path], errors: List[str] | None = None
    ) -> "ResolutionOutcome":
        return cls(OutcomeKind.AMBIGUOUS, candidates=list(candidates), errors=errors or [])

    @classmethod
    def none(cls, errors: List[str] | None = None) -> "ResolutionOutcome":
        return cls(OutcomeKind.NONE, errors=errors or [])

    @property
    def is_resolved(self) -> bool:
        return self.kind is OutcomeKind.RESOLVED

    @property
    def is_ambiguous(self) -> bool:
        return self.kind is OutcomeKind.AMBIGUOUS


def _str_or_none(path: Optional[Path]) -> Optional[str]:
    return str(path) if path is not None else None
