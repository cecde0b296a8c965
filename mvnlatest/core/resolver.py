"""Ordered, consuming version resolution.

Given the versions published for an artifact and a list of qualifiers, find
the latest version per qualifier. Qualifiers are processed left to right and
each one *consumes* every candidate its range matches, not only the version
it reports. A later qualifier therefore never sees a version that an
earlier qualifier's range covered:

    candidates  1.0.0  1.1.4  1.2.3  1.3.1

    ~1.1, ~1.3, ^1   ->  1.1.4, 1.3.1, 1.2.3
    ^1.1, ^1.3, ^1   ->  1.3.1, (none), 1.0.0

The second line is intended: ``^1.1`` claims 1.1.4 through 1.3.1, so
``^1.3`` is left with nothing and ``^1`` falls back to 1.0.0. Qualifiers
should be given from most to least restrictive.

Pre-release candidates are matched by their ``X.Y.Z`` release, which lets
``1.4.0-alpha02`` fall into ``^1`` when pre-releases are included.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from semantic_version import Version

from mvnlatest.models import Outcome, Qualifier
from mvnlatest.utils.logger import get_logger
from mvnlatest.utils.version_utils import (
    VersionKey,
    is_prerelease,
    release_of,
    version_key,
)

logger = get_logger("resolver")

__all__ = ["build_pool", "resolve"]


def build_pool(
    candidates: Iterable[Version],
    include_pre_releases: bool = False,
) -> Dict[VersionKey, Version]:
    """Deduplicate and filter candidates into a fresh matching pool.

    Versions that differ only in build metadata are collapsed, keeping the
    first one seen. Pre-releases are dropped unless *include_pre_releases*.

    Returns:
        A new dict owned by the caller, keyed by :func:`version_key`.
    """
    pool: Dict[VersionKey, Version] = {}
    for version in candidates:
        if not include_pre_releases and is_prerelease(version):
            continue
        pool.setdefault(version_key(version), version)
    return pool


def resolve(
    candidates: Iterable[Version],
    qualifiers: Sequence[Qualifier],
    include_pre_releases: bool = False,
) -> List[Outcome]:
    """Resolve the latest version for each qualifier, in order.

    Args:
        candidates: Parsed versions published for the artifact, in any
            order and possibly with equivalent duplicates.
        qualifiers: Qualifiers in priority order.
        include_pre_releases: Keep pre-release candidates in the pool.

    Returns:
        One :class:`Outcome` per qualifier, in the same order. A qualifier
        whose range matches nothing left in the pool gets an outcome
        without a version.

    Example::

        >>> versions = [parse_version(v) for v in ("1.0.0", "1.1.4", "1.2.3", "1.3.1")]
        >>> qualifiers = [parse_qualifier(q) for q in ("~1.1", "~1.3", "1")]
        >>> [str(o.version) for o in resolve(versions, qualifiers)]
        ['1.1.4', '1.3.1', '1.2.3']
    """
    pool = build_pool(candidates, include_pre_releases)
    outcomes: List[Outcome] = []

    for qualifier in qualifiers:
        claimed = [
            key for key, version in pool.items()
            if qualifier.matches(release_of(version))
        ]

        if not claimed:
            logger.debug("%s matched nothing (%d left)", qualifier, len(pool))
            outcomes.append(Outcome(qualifier=qualifier))
            continue

        winner = max(pool[key] for key in claimed)
        outcomes.append(Outcome(qualifier=qualifier, version=winner))

        for key in claimed:
            del pool[key]

        logger.debug(
            "%s (%s) claimed %d version(s), latest %s; %d left",
            qualifier,
            qualifier.rank.name.lower(),
            len(claimed),
            winner,
            len(pool),
        )

    return outcomes
