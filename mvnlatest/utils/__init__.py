"""
Utility helpers for mvnlatest.

This package provides reusable utilities used across mvnlatest, including:

- Console output helpers (Rich-based)
- Logging configuration and retrieval
- Async HTTP client utilities
- Version parsing helpers

Only symbols listed in ``__all__`` are considered part of the public API.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Logging utilities
# ---------------------------------------------------------------------------

from mvnlatest.utils.logger import (
    get_logger,
    level_for_verbosity,
    setup_logging,
)

# ---------------------------------------------------------------------------
# Console utilities
# ---------------------------------------------------------------------------

from mvnlatest.utils.console import (
    get_raw_console,
    print_error,
    print_table,
    print_warning,
    reconfigure_console,
    styled,
)

# ---------------------------------------------------------------------------
# HTTP utilities
# ---------------------------------------------------------------------------

from mvnlatest.utils.http import HTTPClient

# ---------------------------------------------------------------------------
# Version utilities
# ---------------------------------------------------------------------------

from mvnlatest.utils.version_utils import (
    is_prerelease,
    parse_version,
    release_of,
    version_key,
)

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    # Console
    "print_error",
    "print_table",
    "print_warning",
    "get_raw_console",
    "reconfigure_console",
    "styled",
    # Logging
    "get_logger",
    "setup_logging",
    "level_for_verbosity",
    # HTTP
    "HTTPClient",
    # Version utilities
    "parse_version",
    "version_key",
    "release_of",
    "is_prerelease",
]
