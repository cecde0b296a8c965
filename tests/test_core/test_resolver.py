from __future__ import annotations

from typing import List, Optional, Sequence

import pytest
from semantic_version import Version

from mvnlatest.core.parser import parse_qualifier
from mvnlatest.core.resolver import build_pool, resolve
from mvnlatest.utils.version_utils import parse_version

PROC_VERSIONS = ["1.0.0", "1.1.4", "1.2.3", "1.3.1"]


def _versions(raw: Sequence[str]) -> List[Version]:
    return [parse_version(v) for v in raw]


def _resolve(
    versions: Sequence[str],
    qualifiers: Sequence[str],
    include_pre_releases: bool = False,
) -> List[Optional[str]]:
    outcomes = resolve(
        _versions(versions),
        [parse_qualifier(q) for q in qualifiers],
        include_pre_releases=include_pre_releases,
    )
    return [str(o.version) if o.matched else None for o in outcomes]


@pytest.mark.unit
class TestBuildPool:
    """Tests for candidate deduplication and filtering."""

    def test_deduplicates_equivalent_versions(self) -> None:
        pool = build_pool(_versions(["1.0", "1.0.0", "1.0.0+b7"]))

        assert list(pool) == [(1, 0, 0, ())]

    def test_first_duplicate_wins(self) -> None:
        pool = build_pool([Version("1.0.0+first"), Version("1.0.0+second")])

        assert pool[(1, 0, 0, ())].build == ("first",)

    def test_drops_prereleases_by_default(self) -> None:
        pool = build_pool(_versions(["1.0.0", "1.1.0-rc1"]))

        assert list(pool) == [(1, 0, 0, ())]

    def test_keeps_prereleases_when_included(self) -> None:
        pool = build_pool(_versions(["1.0.0", "1.1.0-rc1"]), include_pre_releases=True)

        assert (1, 1, 0, ("rc1",)) in pool

    def test_returns_new_dict_each_time(self) -> None:
        candidates = _versions(PROC_VERSIONS)

        assert build_pool(candidates) is not build_pool(candidates)


@pytest.mark.unit
class TestResolveWorkedExamples:
    """The documented examples for org.neo4j.gds:proc."""

    def test_tilde_ranges_then_caret(self) -> None:
        assert _resolve(PROC_VERSIONS, ["~1.1", "~1.3", "^1"]) == [
            "1.1.4",
            "1.3.1",
            "1.2.3",
        ]

    def test_caret_ranges_consume_later_candidates(self) -> None:
        """^1.1 claims 1.1.4 through 1.3.1, leaving nothing for ^1.3."""
        assert _resolve(PROC_VERSIONS, ["1.1", "1.3", "1"]) == [
            "1.3.1",
            None,
            "1.0.0",
        ]

    def test_included_prerelease_falls_into_major_range(self) -> None:
        versions = PROC_VERSIONS + ["1.4.0-alpha02"]

        assert _resolve(versions, ["~1.1", "~1.3", "^1"], include_pre_releases=True) == [
            "1.1.4",
            "1.3.1",
            "1.4.0-alpha02",
        ]

    def test_excluded_prerelease_is_ignored(self) -> None:
        versions = PROC_VERSIONS + ["1.4.0-alpha02"]

        assert _resolve(versions, ["~1.1", "~1.3", "^1"]) == [
            "1.1.4",
            "1.3.1",
            "1.2.3",
        ]


@pytest.mark.unit
class TestResolve:
    """Tests for ordering, consumption and edge cases."""

    def test_no_qualifiers(self) -> None:
        assert resolve(_versions(PROC_VERSIONS), []) == []

    def test_no_candidates(self) -> None:
        assert _resolve([], ["*", "1"]) == [None, None]

    def test_any_takes_everything(self) -> None:
        assert _resolve(PROC_VERSIONS, ["*", "*"]) == ["1.3.1", None]

    def test_outcomes_follow_qualifier_order(self) -> None:
        qualifiers = [parse_qualifier(q) for q in ("~1.3", "~1.1", "^1")]
        outcomes = resolve(_versions(PROC_VERSIONS), qualifiers)

        assert [o.qualifier for o in outcomes] == qualifiers

    def test_no_match_leaves_pool_untouched(self) -> None:
        assert _resolve(PROC_VERSIONS, ["^2", "*"]) == [None, "1.3.1"]

    def test_winner_is_never_reported_twice(self) -> None:
        results = _resolve(PROC_VERSIONS, ["*", "1.3", "~1.3", "=1.3.1"])

        assert results == ["1.3.1", None, None, None]

    def test_order_changes_outcomes(self) -> None:
        narrow_first = _resolve(PROC_VERSIONS, ["~1.1", "1"])
        wide_first = _resolve(PROC_VERSIONS, ["1", "~1.1"])

        assert narrow_first == ["1.1.4", "1.3.1"]
        assert wide_first == ["1.3.1", None]

    def test_is_deterministic(self) -> None:
        first = _resolve(PROC_VERSIONS, ["~1.1", "~1.3", "^1"])
        second = _resolve(PROC_VERSIONS, ["~1.1", "~1.3", "^1"])

        assert first == second

    def test_candidate_order_is_irrelevant(self) -> None:
        assert _resolve(list(reversed(PROC_VERSIONS)), ["~1.1", "*"]) == [
            "1.1.4",
            "1.3.1",
        ]

    def test_does_not_mutate_candidates(self) -> None:
        candidates = _versions(PROC_VERSIONS)
        resolve(candidates, [parse_qualifier("*")])

        assert [str(v) for v in candidates] == PROC_VERSIONS

    def test_duplicate_versions_are_claimed_once(self) -> None:
        assert _resolve(["1.0", "1.0.0", "1.0.0+b1"], ["1", "*"]) == ["1.0.0", None]

    def test_prerelease_ranks_below_its_release(self) -> None:
        versions = ["2.0.0-rc1", "2.0.0"]

        assert _resolve(versions, ["2"], include_pre_releases=True) == ["2.0.0"]

    def test_prerelease_is_consumed_with_its_range(self) -> None:
        versions = ["2.0.0-rc1", "2.0.0"]

        assert _resolve(versions, ["2", "*"], include_pre_releases=True) == [
            "2.0.0",
            None,
        ]

    def test_comparator_range(self) -> None:
        assert _resolve(PROC_VERSIONS, [">=1.1, <1.3", "*"]) == ["1.2.3", "1.3.1"]


@pytest.mark.unit
class TestResolveMavenQualifiers:
    """Tests for Hibernate and Spring style version strings."""

    def test_beta_is_not_the_latest_release(self) -> None:
        assert _resolve(["5.6.0.Final", "6.0.0.Beta1"], ["*"]) == ["5.6.0+Final"]

    def test_beta_is_latest_when_prereleases_are_included(self) -> None:
        versions = ["5.6.0.Final", "6.0.0.Beta1"]

        assert _resolve(versions, ["*"], include_pre_releases=True) == ["6.0.0-Beta1"]

    def test_final_is_not_merged_into_earlier_alpha(self) -> None:
        versions = ["6.0.0.Alpha1", "6.0.0.Final"]

        assert _resolve(versions, ["*"], include_pre_releases=True) == ["6.0.0+Final"]
        assert len(build_pool(_versions(versions), include_pre_releases=True)) == 2

    def test_release_markers_share_a_key_with_plain_release(self) -> None:
        pool = build_pool(_versions(["5.3.2.RELEASE", "5.3.2"]))

        assert list(pool) == [(5, 3, 2, ())]
