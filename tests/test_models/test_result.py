from __future__ import annotations

import pytest
from semantic_version import NpmSpec, Version

from mvnlatest.models import Coordinate, Outcome, Qualifier, ResolutionResult


def _qualifier(expression: str) -> Qualifier:
    return Qualifier(raw=expression, expression=expression, spec=NpmSpec(expression))


@pytest.mark.unit
class TestOutcome:
    """Tests for Matched/NoMatch outcomes."""

    def test_matched(self) -> None:
        outcome = Outcome(qualifier=_qualifier("~1.1"), version=Version("1.1.4"))

        assert outcome.matched is True
        assert outcome.to_json() == {"qualifier": "~1.1", "version": "1.1.4"}

    def test_no_match(self) -> None:
        outcome = Outcome(qualifier=_qualifier("^1.3"))

        assert outcome.matched is False
        assert outcome.to_json() == {"qualifier": "^1.3", "version": None}


@pytest.mark.unit
class TestResolutionResult:
    def test_unmatched(self) -> None:
        missing = Outcome(qualifier=_qualifier("^1.3"))
        result = ResolutionResult(
            coordinate=Coordinate("org.neo4j.gds", "proc"),
            outcomes=[
                Outcome(qualifier=_qualifier("^1.1"), version=Version("1.3.1")),
                missing,
            ],
        )

        assert result.unmatched == [missing]

    def test_to_json(self) -> None:
        result = ResolutionResult(
            coordinate=Coordinate("org.neo4j.gds", "proc"),
            outcomes=[Outcome(qualifier=_qualifier("*"), version=Version("2.0.0"))],
            candidate_count=4,
        )

        assert result.to_json() == {
            "group_id": "org.neo4j.gds",
            "artifact_id": "proc",
            "candidates": 4,
            "versions": [{"qualifier": "*", "version": "2.0.0"}],
        }

    def test_defaults(self) -> None:
        result = ResolutionResult(coordinate=Coordinate("g", "a"))

        assert result.outcomes == []
        assert result.candidate_count == 0
