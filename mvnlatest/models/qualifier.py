"""
Version qualifier data model for mvnlatest.

A qualifier is one npm-style version range given after a coordinate, such
as ``~1.1``, ``^1.2.0``, ``1.3`` or ``>=1.0 <2``. It answers a single
question (does this version fall in my range?) and knows how to present
itself in reports.
"""

from __future__ import annotations

from enum import IntEnum
from dataclasses import dataclass, field

from semantic_version import NpmSpec, Version


class Restrictiveness(IntEnum):
    """How wide a qualifier's range is, narrowest first.

    Only used for diagnostics. Which qualifier claims a version is decided
    purely by the order the qualifiers were given in.
    """

    EXACT = 0
    """A single version, e.g. ``=1.2.3`` or ``^0.0.3``."""

    PATCH = 1
    """Only the patch number may vary, e.g. ``~1.2`` or ``1.2.x``."""

    MINOR = 2
    """Minor and patch may vary, e.g. ``^1.2`` or ``1.x``."""

    COMPOUND = 3
    """Comparators, hyphen ranges or unions; width not classified."""

    ANY = 4
    """Every version, i.e. ``*``."""


@dataclass(frozen=True)
class Qualifier:
    """A parsed version range plus its presentation.

    Instances are created by :func:`mvnlatest.core.parser.parse_qualifier`.

    Attributes:
        raw: The qualifier exactly as typed by the user.
        expression: Canonical range expression; bare versions are turned
            into caret ranges (``1.3`` becomes ``^1.3``).
        spec: Compiled range used for matching.
        rank: Width of the range.
    """

    raw: str
    expression: str
    spec: NpmSpec = field(compare=False, repr=False)
    rank: Restrictiveness = Restrictiveness.COMPOUND

    @property
    def display(self) -> str:
        """Form used when reporting this qualifier."""
        return self.expression

    def matches(self, version: Version) -> bool:
        """Return True if *version* lies within this qualifier's range."""
        return self.spec.match(version)

    def __str__(self) -> str:
        return self.display
