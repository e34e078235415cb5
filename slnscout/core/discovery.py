"""
Discovery request orchestration.

A request walks upward from the buffer, gathers candidate targets either from a
shallow listing of the solution directory or from a broad search, then resolves
them against the project file found next to the buffer.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from slnscout.config.constants import TARGET_SUFFIXES
from slnscout.config.settings import DiscoveryConfig
from slnscout.core.broad_search import explore, resolve_broad_search_root
from slnscout.core.cancellation import CancellationToken
from slnscout.core.classifier import is_target
from slnscout.core.errors import ScanError
from slnscout.core.membership import exists_in_target
from slnscout.core.models import DiscoveryResult, OutcomeKind, ResolutionOutcome
from slnscout.core.resolver import MembershipTest, resolve
from slnscout.core.scanner import find_files_with_extensions, normalize_path, unique_paths
from slnscout.core.upward_walker import walk_upward
from slnscout.core.vcs import find_vcs_root
from slnscout.utils.logger import debug_trace, log_error, log_info


@dataclass
class DiscoveryReport:
    """Everything a single discovery request produced."""

    buffer_path: Path
    discovery: DiscoveryResult
    candidates: List[Path]
    outcome: ResolutionOutcome
    root_dir: Optional[Path]
    broad_search_root: Optional[Path] = None
    errors: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.outcome.kind.value,
            "buffer_path": str(self.buffer_path),
            "root_dir": str(self.root_dir) if self.root_dir else None,
            "target": str(self.outcome.target) if self.outcome.target else None,
            "candidates": [str(p) for p in self.candidates],
            "ambiguous_candidates": [str(p) for p in self.outcome.candidates],
            "project_file": (
                str(self.discovery.project_file) if self.discovery.project_file else None
            ),
            "broad_search_root": (
                str(self.broad_search_root) if self.broad_search_root else None
            ),
            "discovery": self.discovery.to_dict(),
            "errors": list(self.errors),
        }


def _collect_candidates(
    buffer_path: Path,
    result: DiscoveryResult,
    config: DiscoveryConfig,
    vcs_root: Callable[[Path], Optional[Path]],
    cancel_token: Optional[CancellationToken],
) -> tuple[List[Path], Optional[Path]]:
    if config.broad_search:
        root = resolve_broad_search_root(buffer_path, result.solution_dir, vcs_root)
        if root is not None:
            found = explore(root, cancel_token=cancel_token, debug=config.debug)
            result.solutions = unique_paths(result.solutions + found.solutions)
            result.solution_filters = unique_paths(
                result.solution_filters + found.solution_filters
            )
            result.projects = unique_paths(result.projects + found.projects)
            result.errors.extend(found.errors)
            return unique_paths(found.targets), root
        debug_trace(config.debug, f"No broad search root for {buffer_path}")

    candidates: List[Path] = []
    if result.solution_dir is not None:
        try:
            candidates.extend(
                path
                for path in find_files_with_extensions(result.solution_dir, TARGET_SUFFIXES)
                if is_target(path.name)
            )
        except ScanError as e:
            log_error(str(e))
            result.errors.append(str(e))
    if result.solution_filter_file is not None:
        candidates.append(result.solution_filter_file)
    return unique_paths(candidates), None


def root_dir(
    outcome: ResolutionOutcome,
    discovery: DiscoveryResult,
    previous_target: Optional[str | os.PathLike[str]] = None,
) -> Optional[Path]:
    """Directory the language server should use as its root.

    Resolved targets give their parent directory. Without any target the
    previously selected target's directory is used, then the project directory.
    Ambiguity yields None until the caller picks a target.
    """
    if outcome.kind is OutcomeKind.RESOLVED and outcome.target is not None:
        return outcome.target.parent
    if outcome.kind is OutcomeKind.AMBIGUOUS:
        return None
    if previous_target:
        return normalize_path(previous_target).parent
    return discovery.project_dir


def discover(
    buffer_path: str | os.PathLike[str],
    config: Optional[DiscoveryConfig] = None,
    membership_test: MembershipTest = exists_in_target,
    vcs_root: Callable[[Path], Optional[Path]] = find_vcs_root,
    previous_target: Optional[str | os.PathLike[str]] = None,
    cancel_token: Optional[CancellationToken] = None,
) -> DiscoveryReport:
    """Resolve the solution context for ``buffer_path``.

    Raises:
        DiscoveryError: If the buffer's directory cannot be read.
        DiscoveryCancelled: If a broad search is cancelled.
    """
    config = config or DiscoveryConfig()
    buffer = normalize_path(buffer_path)

    discovery = walk_upward(buffer, debug=config.debug)
    candidates, broad_root = _collect_candidates(
        buffer, discovery, config, vcs_root, cancel_token
    )
    known_projects = [discovery.project_file] if discovery.project_file else []

    outcome = resolve(
        candidates,
        known_projects,
        membership_test=membership_test,
        exclude_predicate=config.ignore_target,
        choose_fn=config.choose_target,
        previous_target=previous_target,
        debug=config.debug,
    )
    report = DiscoveryReport(
        buffer_path=buffer,
        discovery=discovery,
        candidates=candidates,
        outcome=outcome,
        root_dir=root_dir(outcome, discovery, previous_target),
        broad_search_root=broad_root,
        errors=discovery.errors + outcome.errors,
    )
    log_info(
        f"discover {buffer}: {outcome.kind.value}",
        {
            "root_dir": str(report.root_dir) if report.root_dir else None,
            "candidates": [str(p) for p in candidates],
        },
    )
    return report
