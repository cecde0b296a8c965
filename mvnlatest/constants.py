"""
Centralized constants for mvnlatest.

This module defines immutable configuration values used across mvnlatest,
including repository endpoints, network settings, environment variable
names, and logging formats. All values are intended to be treated as
read-only.
"""

from typing import Final, Tuple

# ---------------------------------------------------------------------------
# Project metadata
# ---------------------------------------------------------------------------

#: HTTP User-Agent template used for outbound requests.
USER_AGENT_TEMPLATE: Final[str] = "mvnlatest/{version}"

# ---------------------------------------------------------------------------
# Maven repository layout
# ---------------------------------------------------------------------------

#: Default repository queried when no resolver is given.
MAVEN_CENTRAL: Final[str] = "https://repo.maven.apache.org/maven2"

#: Name of the per-artifact metadata document.
METADATA_FILE_NAME: Final[str] = "maven-metadata.xml"

#: URL schemes accepted for a resolver.
SUPPORTED_SCHEMES: Final[Tuple[str, ...]] = ("http", "https")

#: Reference for the accepted qualifier syntax, shown in error messages.
RANGE_SYNTAX_URL: Final[str] = (
    "https://www.npmjs.com/package/semver#advanced-range-syntax"
)

#: Qualifier used when a coordinate is given without any.
DEFAULT_QUALIFIER: Final[str] = "*"

# ---------------------------------------------------------------------------
# HTTP configuration
# ---------------------------------------------------------------------------

#: Default network timeout in seconds.
DEFAULT_TIMEOUT: Final[int] = 30

#: Maximum number of retries for failed HTTP requests.
DEFAULT_MAX_RETRIES: Final[int] = 3

#: Maximum number of retries honouring ``Retry-After`` on HTTP 429.
MAX_RATE_LIMIT_RETRIES: Final[int] = 5

# ---------------------------------------------------------------------------
# Environment variables
# ---------------------------------------------------------------------------

ENV_RESOLVER: Final[str] = "MVNLATEST_RESOLVER"
ENV_TIMEOUT: Final[str] = "MVNLATEST_TIMEOUT"
ENV_MAX_RETRIES: Final[str] = "MVNLATEST_MAX_RETRIES"
ENV_INCLUDE_PRE_RELEASES: Final[str] = "MVNLATEST_INCLUDE_PRE_RELEASES"
ENV_COLOR: Final[str] = "MVNLATEST_COLOR"

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

#: Timestamp format for verbose logging.
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

#: Default log format (non-verbose).
LOG_DEFAULT_FORMAT: Final[str] = "%(levelname)s: %(message)s"

#: Verbose log format including timestamp and logger name.
LOG_VERBOSE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
