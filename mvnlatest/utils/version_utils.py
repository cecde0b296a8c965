"""
Version parsing utilities for mvnlatest.

Maven repositories publish whatever their uploaders typed: ``1.0``,
``2.3.1-alpha02``, ``6.0.0.Beta1``, ``4.0.0.Final``, ``1.2_3``, ``r09``.
This module turns such strings into :class:`semantic_version.Version`
values that can be ordered and matched against npm-style ranges, tolerating
the noise instead of rejecting the whole version list.

Maven-style qualifiers that follow the numbers after a dot or any other
separator are read as pre-release labels, except for the release markers
``Final``, ``RELEASE`` and ``GA``, which are kept as build metadata.

Examples:
    >>> parse_version("1.3")
    Version('1.3.0')
    >>> parse_version("1.4.0-alpha02")
    Version('1.4.0-alpha02')
    >>> parse_version("6.0.0.Beta1")
    Version('6.0.0-Beta1')
    >>> parse_version("5.6.0.Final")
    Version('5.6.0+Final')
    >>> parse_version("r09") is None
    True
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from semantic_version import Version

#: Identity of a version for matching purposes; build metadata excluded.
VersionKey = Tuple[int, int, int, Tuple[str, ...]]

#: Qualifiers that mark a final release rather than a pre-release.
RELEASE_MARKERS = frozenset({"final", "release", "ga"})

# "6.0.0.Beta1", "4.0.0_Final", "2.0.M1", "1.0.0.RC1+b2"; "-" and "+" are
# already semver syntax and left to Version.coerce
_MAVEN_QUALIFIER = re.compile(
    r"^(?P<numbers>\d+(?:\.\d+)*)"
    r"[^0-9A-Za-z+\-]?"
    r"(?P<label>[A-Za-z][^+]*)"
    r"(?:\+(?P<build>.+))?$"
)


def parse_version(raw: Optional[str]) -> Optional[Version]:
    """Leniently parse a published version string.

    Missing minor and patch components default to ``0``, numeric components
    beyond ``X.Y.Z`` are kept as build metadata, and a Maven qualifier such
    as ``.Beta1`` or ``_RC2`` becomes a pre-release label. Release markers
    (``Final``, ``RELEASE``, ``GA``, any case) are build metadata, so
    ``4.0.0.Final`` is the release ``4.0.0``.

    Args:
        raw: Version string as found in the repository metadata.

    Returns:
        The parsed version, or ``None`` when *raw* has no leading numeric
        component or cannot be coerced into a valid semantic version.

    Examples:
        >>> parse_version("2")
        Version('2.0.0')
        >>> parse_version("1.2.3.4")
        Version('1.2.3+4')
        >>> parse_version("5.0.0.RC1")
        Version('5.0.0-RC1')
        >>> parse_version("") is None
        True
    """
    if raw is None:
        return None

    text = raw.strip()
    if not text:
        return None

    try:
        return Version.coerce(_normalize_qualifier(text))
    except ValueError:
        # No leading integer, or identifiers semver refuses (e.g. "1.0-a..b")
        return None


def _normalize_qualifier(text: str) -> str:
    """Rewrite a Maven qualifier suffix into semver pre-release/build form."""
    match = _MAVEN_QUALIFIER.match(text)
    if match is None:
        return text

    numbers = match.group("numbers").split(".")
    core = (numbers + ["0", "0"])[:3]
    build = numbers[3:]

    label = match.group("label")
    prerelease = ""
    if label.lower() in RELEASE_MARKERS:
        build.append(label)
    else:
        prerelease = label

    if match.group("build"):
        build.append(match.group("build"))

    normalized = ".".join(core)
    if prerelease:
        normalized += f"-{prerelease}"
    if build:
        normalized += "+" + ".".join(build)
    return normalized


def version_key(version: Version) -> VersionKey:
    """Return the identity of *version* ignoring build metadata.

    Two versions with the same key are equivalent for matching, whatever
    their original spelling (``1.0`` and ``1.0.0+b7`` share a key).
    """
    return (
        version.major,
        version.minor,
        version.patch,
        tuple(version.prerelease or ()),
    )


def release_of(version: Version) -> Version:
    """Return the ``X.Y.Z`` release of *version*.

    Pre-release and build metadata are dropped, so ``1.4.0-alpha02``
    becomes ``1.4.0``.
    """
    return Version(major=version.major, minor=version.minor, patch=version.patch)


def is_prerelease(version: Version) -> bool:
    """Return True if *version* carries a pre-release label."""
    return bool(version.prerelease)
