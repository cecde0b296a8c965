"""
mvnlatest: latest Maven artifact versions, per version range.

Given ``groupId:artifactId`` coordinates and a list of npm-style version
ranges, mvnlatest reads the repository's ``maven-metadata.xml`` and reports
the newest published version for each range. Ranges are applied in order
and every version claimed by an earlier range is unavailable to later ones.

Library usage::

    from mvnlatest import parse_version, parse_qualifier, resolve

    versions = [parse_version(v) for v in ("1.0.0", "1.1.4", "1.2.3", "1.3.1")]
    qualifiers = [parse_qualifier(q) for q in ("~1.1", "~1.3", "1")]
    outcomes = resolve(versions, qualifiers)
"""

from __future__ import annotations

from mvnlatest.__version__ import __version__
from mvnlatest.core.parser import parse_coordinates, parse_qualifier
from mvnlatest.core.resolver import resolve
from mvnlatest.utils.version_utils import parse_version

# ---------------------------------------------------------------------------
# Package Metadata
# ---------------------------------------------------------------------------

__author__ = "mvnlatest Contributors"
__license__ = "Apache-2.0"
__description__ = "Find the latest version of Maven artifacts for each version range."

__all__ = [
    "__version__",
    "parse_coordinates",
    "parse_qualifier",
    "parse_version",
    "resolve",
]
