"""Command-line token parser for coordinates and version qualifiers.

Each positional argument has the form::

    groupId:artifactId[:qualifier]*

Segments are separated by ``:`` and surrounding whitespace is ignored.
Qualifiers follow the npm advanced range syntax
(https://www.npmjs.com/package/semver#advanced-range-syntax) with two
adjustments:

- A bare version (``1``, ``1.3``, ``1.3.2``) is a caret range, so ``1.3``
  means ``^1.3`` (``>=1.3.0 <2.0.0``) rather than npm's ``1.3.x``.
- Comparators may be separated by commas as well as spaces
  (``>=1.2, <2``).

Typical usage::

    from mvnlatest.core.parser import parse_coordinates

    request = parse_coordinates("org.neo4j.gds:proc:~1.1:~1.3:1")
    [q.display for q in request.qualifiers]
    # ['~1.1', '~1.3', '^1']

Every problem is reported as an :class:`~mvnlatest.exceptions.InputError`
before any network traffic happens.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

from semantic_version import NpmSpec

from mvnlatest.constants import DEFAULT_QUALIFIER, RANGE_SYNTAX_URL
from mvnlatest.exceptions import CoordinateError, QualifierError
from mvnlatest.models import (
    Coordinate,
    Qualifier,
    ResolutionRequest,
    Restrictiveness,
)
from mvnlatest.utils.logger import get_logger

logger = get_logger("parser")

__all__ = ["parse_coordinates", "parse_qualifier", "parse_requests"]

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

SEGMENT_SEPARATOR = ":"

# "1", "1.3", "1.3.2" and nothing else
_BARE_VERSION = re.compile(r"^\d+(?:\.\d+){0,2}$")

# A single caret, tilde, exact or x-range term, e.g. "^1.2", "~1", "1.2.x"
_SINGLE_TERM = re.compile(
    r"""
    ^(?P<op>[\^~=]?)
    (?P<major>\d+)
    (?:\.(?P<minor>\d+|[xX*]))?
    (?:\.(?P<patch>\d+|[xX*]))?
    (?:[-+][0-9A-Za-z.+-]*)?$
    """,
    re.VERBOSE,
)

_WILDCARDS = frozenset({"", "*", "x", "X"})


# ---------------------------------------------------------------------------
# Qualifiers
# ---------------------------------------------------------------------------


def parse_qualifier(raw: str) -> Qualifier:
    """Parse a single qualifier into a :class:`Qualifier`.

    Args:
        raw: Qualifier text, e.g. ``"~1.1"`` or ``"1.3"``.

    Returns:
        The compiled qualifier.

    Raises:
        QualifierError: *raw* is empty or not a valid range.

    Example::

        >>> parse_qualifier("1.3").display
        '^1.3'
        >>> parse_qualifier("~1.1").display
        '~1.1'
    """
    expression = _normalize_expression(raw)
    if not expression:
        raise QualifierError(
            "An empty version qualifier is not a valid range. "
            f"Please provide a valid range according to {RANGE_SYNTAX_URL}",
            qualifier=raw,
        )

    try:
        spec = NpmSpec(expression)
    except ValueError as exc:
        raise QualifierError(
            f"Could not parse {raw.strip()} into a semantic version range. "
            f"Please provide a valid range according to {RANGE_SYNTAX_URL}",
            qualifier=raw,
        ) from exc

    return Qualifier(
        raw=raw,
        expression=expression,
        spec=spec,
        rank=_rank_of(expression),
    )


def _normalize_expression(raw: str) -> str:
    """Return the canonical range expression for *raw*."""
    expression = " ".join(raw.replace(",", " ").split())
    if _BARE_VERSION.match(expression):
        return f"^{expression}"
    return expression


def _rank_of(expression: str) -> Restrictiveness:
    """Classify the width of a canonical range expression."""
    if expression in _WILDCARDS:
        return Restrictiveness.ANY

    match = _SINGLE_TERM.match(expression)
    if match is None:
        return Restrictiveness.COMPOUND

    op = match.group("op")
    major = int(match.group("major"))
    minor = _component(match.group("minor"))
    patch = _component(match.group("patch"))

    if op == "~":
        return Restrictiveness.MINOR if minor is None else Restrictiveness.PATCH

    if op == "^":
        if major != 0 or minor is None:
            return Restrictiveness.MINOR
        if minor != 0 or patch is None:
            return Restrictiveness.PATCH
        return Restrictiveness.EXACT

    # "=" or plain x-range
    if minor is None:
        return Restrictiveness.MINOR
    if patch is None:
        return Restrictiveness.PATCH
    return Restrictiveness.EXACT


def _component(value: Optional[str]) -> Optional[int]:
    """Return a version component, or ``None`` when absent or a wildcard."""
    if value is None or value in _WILDCARDS:
        return None
    return int(value)


# ---------------------------------------------------------------------------
# Coordinates
# ---------------------------------------------------------------------------


def parse_coordinates(
    token: str,
    *,
    include_pre_releases: bool = False,
) -> ResolutionRequest:
    """Parse one ``groupId:artifactId[:qualifier]*`` argument.

    When no qualifier is given the request resolves ``*``, i.e. the latest
    version overall.

    Args:
        token: The raw command-line argument.
        include_pre_releases: Pre-release policy stored on the request.

    Returns:
        An immutable :class:`ResolutionRequest`.

    Raises:
        CoordinateError: The group id or artifact id is empty or missing.
        QualifierError: A qualifier is empty or not a valid range.

    Example::

        >>> request = parse_coordinates("org.neo4j.gds:proc:1.1:1")
        >>> str(request.coordinate)
        'org.neo4j.gds:proc'
        >>> [q.display for q in request.qualifiers]
        ['^1.1', '^1']
    """
    segments = [segment.strip() for segment in token.split(SEGMENT_SEPARATOR)]

    group_id = segments[0]
    if not group_id:
        raise CoordinateError(
            f"The groupId may not be empty in {token!r}",
            token=token,
        )

    if len(segments) < 2:
        raise CoordinateError(
            f"The artifact is missing in {token!r}",
            token=token,
        )

    artifact_id = segments[1]
    if not artifact_id:
        raise CoordinateError(
            f"The artifact may not be empty in {token!r}",
            token=token,
        )

    qualifier_texts = segments[2:] or [DEFAULT_QUALIFIER]
    qualifiers = tuple(parse_qualifier(text) for text in qualifier_texts)

    request = ResolutionRequest(
        coordinate=Coordinate(group_id=group_id, artifact_id=artifact_id),
        qualifiers=qualifiers,
        include_pre_releases=include_pre_releases,
    )
    logger.debug("Parsed %r: %s", token, request.to_log_dict())
    return request


def parse_requests(
    tokens: Iterable[str],
    *,
    include_pre_releases: bool = False,
) -> List[ResolutionRequest]:
    """Parse every coordinate argument, failing on the first bad one."""
    return [
        parse_coordinates(token, include_pre_releases=include_pre_releases)
        for token in tokens
    ]
