"""
Core functionality exports for mvnlatest.

Importing from here keeps user-facing imports short:

    from mvnlatest.core import parse_coordinates, resolve
"""

from __future__ import annotations

from mvnlatest.core.checker import VersionChecker
from mvnlatest.core.metadata import (
    MavenMetadataClient,
    parse_metadata,
    validate_repository_url,
)
from mvnlatest.core.parser import parse_coordinates, parse_qualifier, parse_requests
from mvnlatest.core.resolver import build_pool, resolve

__all__ = [
    "MavenMetadataClient",
    "VersionChecker",
    "build_pool",
    "parse_coordinates",
    "parse_metadata",
    "parse_qualifier",
    "parse_requests",
    "resolve",
    "validate_repository_url",
]
