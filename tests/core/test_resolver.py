"""Test suite for target resolution."""

from pathlib import Path
from typing import Dict, List, Set

from slnscout.core.errors import MembershipCheckError
from slnscout.core.models import OutcomeKind
from slnscout.core.resolver import filter_targets, predict_target, resolve

A = Path("/repo/A.sln")
B = Path("/repo/B.sln")
C = Path("/repo/filters/C.slnf")
P = Path("/repo/src/P.csproj")
Q = Path("/repo/src/Q.csproj")


def graph_membership(graph: Dict[Path, Set[Path]]):
    """Membership test backed by an in-memory project graph."""

    def membership(target: Path, project: Path) -> bool:
        if target not in graph:
            raise MembershipCheckError(target, "unreadable")
        return project in graph[target]

    return membership


class TestFilterTargets:
    def test_no_known_projects_accepts_all(self) -> None:
        filtered, errors = filter_targets([A, B], [], graph_membership({}))

        assert filtered == [A, B]
        assert errors == []

    def test_exclude_predicate(self) -> None:
        membership = graph_membership({A: {P}, B: {P}})

        filtered, _ = filter_targets([A, B], [P], membership, lambda t: t == A)

        assert filtered == [B]

    def test_any_known_project_is_enough(self) -> None:
        membership = graph_membership({A: {Q}, B: set()})

        filtered, _ = filter_targets([A, B], [P, Q], membership)

        assert filtered == [A]

    def test_membership_error_fails_closed(self) -> None:
        membership = graph_membership({A: {P}})

        filtered, errors = filter_targets([A, B], [P], membership)

        assert filtered == [A]
        assert len(errors) == 1
        assert "unreadable" in errors[0]

    def test_candidates_deduplicated(self) -> None:
        filtered, _ = filter_targets([A, "/repo/x/../A.sln", B], [], graph_membership({}))

        assert filtered == [A, B]


class TestResolve:
    def test_membership_filtering_resolves(self) -> None:
        """Only A contains P, so A wins without a choose function."""
        outcome = resolve([A, B], [P], graph_membership({A: {P}, B: {Q}}))

        assert outcome.kind is OutcomeKind.RESOLVED
        assert outcome.target == A

    def test_ambiguous_without_choose_fn(self) -> None:
        outcome = resolve([A, B], [P], graph_membership({A: {P}, B: {P}}))

        assert outcome.kind is OutcomeKind.AMBIGUOUS
        assert outcome.candidates == [A, B]
        assert outcome.target is None

    def test_choose_fn_overrides(self) -> None:
        calls: List[List[Path]] = []

        def choose(candidates: List[Path]) -> Path:
            calls.append(candidates)
            return B

        outcome = resolve(
            [A, B], [P], graph_membership({A: {P}, B: {P}}), choose_fn=choose
        )

        assert outcome.kind is OutcomeKind.RESOLVED
        assert outcome.target == B
        assert calls == [[A, B]]

    def test_choose_fn_not_called_for_single_candidate(self) -> None:
        def choose(candidates: List[Path]) -> Path:
            raise AssertionError("choose_fn must not be called")

        outcome = resolve([A, B], [P], graph_membership({A: {P}, B: set()}), choose_fn=choose)

        assert outcome.target == A

    def test_choose_fn_declining_leaves_ambiguity(self) -> None:
        outcome = resolve(
            [A, B], [], graph_membership({}), choose_fn=lambda candidates: None
        )

        assert outcome.kind is OutcomeKind.AMBIGUOUS

    def test_empty_candidates(self) -> None:
        outcome = resolve([], [P], graph_membership({}))

        assert outcome.kind is OutcomeKind.NONE

    def test_empty_after_filter_uses_previous_target(self) -> None:
        outcome = resolve(
            [A, B], [P], graph_membership({A: set(), B: set()}), previous_target=B
        )

        assert outcome.kind is OutcomeKind.RESOLVED
        assert outcome.target == B

    def test_previous_target_must_be_a_candidate(self) -> None:
        outcome = resolve(
            [A], [P], graph_membership({A: set()}), previous_target=C
        )

        assert outcome.kind is OutcomeKind.NONE

    def test_previous_target_settles_ambiguity(self) -> None:
        outcome = resolve(
            [A, B, C], [], graph_membership({}), previous_target=C
        )

        assert outcome.kind is OutcomeKind.RESOLVED
        assert outcome.target == C

    def test_membership_errors_reported(self) -> None:
        outcome = resolve([A, B], [P], graph_membership({A: {P}}))

        assert outcome.target == A
        assert len(outcome.errors) == 1


class TestPredictTarget:
    def test_single_match(self) -> None:
        assert predict_target([A, B], [P], graph_membership({A: {P}, B: set()})) == A

    def test_several_without_choose_fn(self) -> None:
        assert predict_target([A, B], [], graph_membership({})) is None

    def test_several_with_choose_fn(self) -> None:
        result = predict_target(
            [A, B], [], graph_membership({}), choose_fn=lambda candidates: candidates[-1]
        )

        assert result == B

    def test_nothing(self) -> None:
        assert predict_target([], [P], graph_membership({})) is None
