"""
Custom exception hierarchy for mvnlatest.

This module defines structured exception types used across mvnlatest.
All exceptions inherit from :class:`MvnLatestError` and support optional
structured metadata via the ``details`` attribute to improve diagnostics
and logging.

Hierarchy::

    MvnLatestError
    ├── InputError
    │   ├── CoordinateError
    │   ├── QualifierError
    │   └── RepositoryURLError
    ├── ConfigError
    └── NetworkError
        └── RepositoryError
            ├── ArtifactNotFoundError
            └── MetadataError
"""

from __future__ import annotations

from typing import Any, Mapping, MutableMapping, Optional


class MvnLatestError(Exception):
    """Base exception for all mvnlatest errors.

    All mvnlatest-specific exceptions should inherit from this class.
    It supports structured metadata via ``details`` for richer error
    reporting and debugging.

    Args:
        message: Human-readable error message.
        details: Optional structured metadata describing the error.
    """

    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.message: str = message
        # Internally normalize to a mutable dict
        self.details: MutableMapping[str, Any] = dict(details) if details else {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        formatted = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({formatted})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, details={dict(self.details)!r})"
        )


def _add_if(details: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Add a key to ``details`` only if ``value`` is not ``None``."""
    if value is not None:
        details[key] = value


def _truncate(text: str, max_length: int = 200) -> str:
    """Truncate long text for safe logging or error reporting."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


# ---------------------------------------------------------------------------
# User input
# ---------------------------------------------------------------------------


class InputError(MvnLatestError):
    """Raised when command-line input is malformed.

    Input errors are detected before any network or matching work and
    abort the whole run.

    Args:
        message: Error description.
        token: The offending piece of user input.
    """

    __slots__ = ("token",)

    def __init__(self, message: str, *, token: Optional[str] = None) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "input", token)
        super().__init__(message, details)
        self.token = token


class CoordinateError(InputError):
    """Raised when a ``groupId:artifactId[:qualifier]*`` argument is invalid."""

    __slots__ = ()


class QualifierError(InputError):
    """Raised when a qualifier is not a valid version range.

    Args:
        message: Error description.
        qualifier: The qualifier text that failed to parse.
    """

    __slots__ = ("qualifier",)

    def __init__(self, message: str, *, qualifier: str) -> None:
        super().__init__(message, token=qualifier)
        self.qualifier = qualifier


class RepositoryURLError(InputError):
    """Raised when the resolver is not a usable repository base URL."""

    __slots__ = ()


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ConfigError(MvnLatestError):
    """Raised when configuration values are invalid.

    Args:
        message: Error description.
        variable: Environment variable holding the bad value.
        value: The rejected raw value.
    """

    __slots__ = ("variable", "value")

    def __init__(
        self,
        message: str,
        *,
        variable: Optional[str] = None,
        value: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "variable", variable)
        _add_if(details, "value", value)

        super().__init__(message, details)

        self.variable = variable
        self.value = value


# ---------------------------------------------------------------------------
# Network and repository
# ---------------------------------------------------------------------------


class NetworkError(MvnLatestError):
    """Raised when HTTP or network operations fail.

    Args:
        message: Error description.
        url: URL being accessed.
        status_code: HTTP status code, if available.
        response_body: Raw response body, truncated for safety.
    """

    __slots__ = ("url", "status_code", "response_body")

    def __init__(
        self,
        message: str,
        *,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
        response_body: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "url", url)
        _add_if(details, "status_code", status_code)

        if response_body:
            details["response"] = _truncate(response_body)

        super().__init__(message, details)

        self.url = url
        self.status_code = status_code
        self.response_body = response_body


class RepositoryError(NetworkError):
    """Raised when maven metadata cannot be obtained from a repository.

    Args:
        message: Error description.
        coordinate: ``group:artifact`` being looked up.
        repository: Base URL of the repository.
        **kwargs: Additional arguments forwarded to ``NetworkError``.
    """

    __slots__ = ("coordinate", "repository")

    def __init__(
        self,
        message: str,
        *,
        coordinate: Optional[str] = None,
        repository: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)

        self.coordinate = coordinate
        self.repository = repository
        if coordinate is not None:
            self.details["coordinate"] = coordinate


class ArtifactNotFoundError(RepositoryError):
    """Raised when the repository answers 404 for a coordinate."""

    __slots__ = ()


class MetadataError(RepositoryError):
    """Raised when ``maven-metadata.xml`` is not a readable XML document."""

    __slots__ = ()
