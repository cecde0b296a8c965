"""
Coordinate and request data models for mvnlatest.

A :class:`Coordinate` names a published Maven artifact; a
:class:`ResolutionRequest` bundles it with the qualifiers to resolve and
the pre-release policy, exactly as the user asked for them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from mvnlatest.models.qualifier import Qualifier


@dataclass(frozen=True)
class Coordinate:
    """A ``groupId:artifactId`` pair.

    Neither part is interpreted beyond splitting the group id on ``.`` to
    build the repository path.

    Attributes:
        group_id: Maven group id, e.g. ``org.neo4j.gds``.
        artifact_id: Maven artifact id, e.g. ``proc``.
    """

    group_id: str
    artifact_id: str

    def path_segments(self) -> List[str]:
        """Return the repository path segments for this coordinate.

        Example::

            >>> Coordinate("org.neo4j.gds", "proc").path_segments()
            ['org', 'neo4j', 'gds', 'proc']
        """
        return [*self.group_id.split("."), self.artifact_id]

    def to_json(self) -> Dict[str, str]:
        """Return a JSON-serializable representation."""
        return {"group_id": self.group_id, "artifact_id": self.artifact_id}

    def __str__(self) -> str:
        return f"{self.group_id}:{self.artifact_id}"


@dataclass(frozen=True)
class ResolutionRequest:
    """Everything needed to resolve one coordinate.

    Built once per command-line argument and never modified afterwards.

    Attributes:
        coordinate: The artifact to look up.
        qualifiers: Qualifiers in priority order (first wins).
        include_pre_releases: Whether pre-release versions are candidates.
    """

    coordinate: Coordinate
    qualifiers: Tuple[Qualifier, ...]
    include_pre_releases: bool = False

    def to_log_dict(self) -> Dict[str, Any]:
        """Return the request as a dictionary for debug logging."""
        return {
            "coordinate": str(self.coordinate),
            "qualifiers": [q.display for q in self.qualifiers],
            "include_pre_releases": self.include_pre_releases,
        }
