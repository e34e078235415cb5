"""
Target resolution: narrow candidate solutions and solution filters to one.

Resolution is two steps. A cheap deterministic filter runs first (caller
exclusion policy plus project membership), and the choice function is only
consulted when more than one candidate survives.
"""

import os
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from slnscout.core.errors import MembershipCheckError
from slnscout.core.membership import exists_in_target
from slnscout.core.models import ResolutionOutcome
from slnscout.core.scanner import normalize_path, unique_paths
from slnscout.utils.logger import debug_trace, log_error, log_info

PathLike = str | os.PathLike[str]
MembershipTest = Callable[[Path, Path], bool]
ExcludePredicate = Callable[[Path], bool]
ChooseFunction = Callable[[List[Path]], Optional[PathLike]]


def filter_targets(
    candidates: Iterable[PathLike],
    known_project_files: Iterable[PathLike],
    membership_test: MembershipTest = exists_in_target,
    exclude_predicate: Optional[ExcludePredicate] = None,
) -> Tuple[List[Path], List[str]]:
    """Drop excluded candidates and those not containing any known project.

    A candidate whose membership cannot be checked is treated as not containing
    the project.

    Returns:
        Tuple of (surviving candidates, membership error messages)
    """
    projects = unique_paths(known_project_files)
    filtered: List[Path] = []
    errors: List[str] = []

    for candidate in unique_paths(candidates):
        if exclude_predicate is not None and exclude_predicate(candidate):
            continue
        if not projects:
            filtered.append(candidate)
            continue
        for project in projects:
            try:
                if membership_test(candidate, project):
                    filtered.append(candidate)
                    break
            except MembershipCheckError as e:
                log_error(str(e), {"target": str(candidate), "project": str(project)})
                errors.append(str(e))
                break

    return filtered, errors


def resolve(
    candidates: Sequence[PathLike],
    known_project_files: Iterable[PathLike] = (),
    membership_test: MembershipTest = exists_in_target,
    exclude_predicate: Optional[ExcludePredicate] = None,
    choose_fn: Optional[ChooseFunction] = None,
    previous_target: Optional[PathLike] = None,
    debug: bool = False,
) -> ResolutionOutcome:
    """Reduce ``candidates`` to a single target.

    Args:
        candidates: Solution and solution filter paths
        known_project_files: Project files belonging to the buffer's directory
        membership_test: Answers whether a target contains a project
        exclude_predicate: Caller policy for ignoring targets
        choose_fn: Selector invoked only when several candidates survive
        previous_target: Target chosen earlier by the host, if any
        debug: Emit verbose traces

    Returns:
        RESOLVED with one target, AMBIGUOUS with the surviving candidates for the
        caller to pick from, or NONE when nothing applies.
    """
    original = unique_paths(candidates)
    previous = normalize_path(previous_target) if previous_target else None
    filtered, errors = filter_targets(
        original, known_project_files, membership_test, exclude_predicate
    )
    debug_trace(
        debug,
        "resolve filtered targets",
        {
            "candidates": [str(p) for p in original],
            "filtered": [str(p) for p in filtered],
            "previous_target": str(previous) if previous else None,
        },
    )

    if len(filtered) == 1:
        return ResolutionOutcome.resolved(filtered[0], errors)

    if not filtered:
        if previous is not None and previous in original:
            return ResolutionOutcome.resolved(previous, errors)
        return ResolutionOutcome.none(errors)

    chosen = choose_fn(list(filtered)) if choose_fn is not None else None
    if chosen:
        return ResolutionOutcome.resolved(normalize_path(chosen), errors)

    if previous is not None and previous in filtered:
        return ResolutionOutcome.resolved(previous, errors)

    log_info(
        "Multiple potential target files found",
        {"candidates": [str(p) for p in filtered]},
    )
    return ResolutionOutcome.ambiguous(filtered, errors)


def predict_target(
    targets: Sequence[PathLike],
    known_project_files: Iterable[PathLike] = (),
    membership_test: MembershipTest = exists_in_target,
    exclude_predicate: Optional[ExcludePredicate] = None,
    choose_fn: Optional[ChooseFunction] = None,
) -> Optional[Path]:
    """Non-interactive preselection of a target, or None when undecidable."""
    filtered, _ = filter_targets(
        targets, known_project_files, membership_test, exclude_predicate
    )
    if len(filtered) > 1:
        chosen = choose_fn(list(filtered)) if choose_fn is not None else None
        result = normalize_path(chosen) if chosen else None
    else:
        result = filtered[0] if filtered else None
    log_info(
        "predict_target",
        {"targets": [str(t) for t in targets], "result": str(result) if result else None},
    )
    return result
