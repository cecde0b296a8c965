"""
Resolution result data models for mvnlatest.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from semantic_version import Version

from mvnlatest.models.coordinate import Coordinate
from mvnlatest.models.qualifier import Qualifier


@dataclass(frozen=True)
class Outcome:
    """Result of resolving a single qualifier.

    ``version`` set means *Matched*; ``None`` means *NoMatch*, which is a
    normal outcome rather than an error.

    Attributes:
        qualifier: The qualifier this outcome belongs to.
        version: Highest version claimed by the qualifier, if any.
    """

    qualifier: Qualifier
    version: Optional[Version] = None

    @property
    def matched(self) -> bool:
        """True if the qualifier claimed a version."""
        return self.version is not None

    def to_json(self) -> Dict[str, Optional[str]]:
        """Return a JSON-serializable representation."""
        return {
            "qualifier": self.qualifier.display,
            "version": str(self.version) if self.version is not None else None,
        }


@dataclass
class ResolutionResult:
    """Outcomes for one coordinate, in qualifier input order.

    Attributes:
        coordinate: The coordinate that was resolved.
        outcomes: One :class:`Outcome` per qualifier of the request.
        candidate_count: Number of distinct parsable versions published.
    """

    coordinate: Coordinate
    outcomes: List[Outcome] = field(default_factory=list)
    candidate_count: int = 0

    @property
    def unmatched(self) -> List[Outcome]:
        """Outcomes whose qualifier claimed nothing."""
        return [outcome for outcome in self.outcomes if not outcome.matched]

    def to_json(self) -> Dict[str, Any]:
        """Return a JSON-serializable representation."""
        return {
            **self.coordinate.to_json(),
            "candidates": self.candidate_count,
            "versions": [outcome.to_json() for outcome in self.outcomes],
        }
