"""Runtime settings for mvnlatest.

mvnlatest keeps no configuration file. Defaults can be changed per shell
through environment variables, and every value can be overridden again on
the command line.

Configuration precedence: defaults < environment < CLI args.

- ``MVNLATEST_RESOLVER``: repository base URL (Maven Central)
- ``MVNLATEST_TIMEOUT``: network timeout in seconds (``30``)
- ``MVNLATEST_MAX_RETRIES``: retry budget (``3``)
- ``MVNLATEST_INCLUDE_PRE_RELEASES``: consider pre-releases (``false``)

Typical usage::

    settings = load_settings()
    settings = settings.merge(timeout=10)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional

from mvnlatest.exceptions import ConfigError
from mvnlatest.utils.logger import get_logger
from mvnlatest.constants import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT,
    ENV_INCLUDE_PRE_RELEASES,
    ENV_MAX_RETRIES,
    ENV_RESOLVER,
    ENV_TIMEOUT,
    MAVEN_CENTRAL,
)

logger = get_logger("config")

_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "off", ""})


@dataclass(frozen=True)
class Settings:
    """Validated mvnlatest settings.

    Attributes:
        resolver: Base URL of the Maven-style repository.
        timeout: Network timeout in seconds.
        max_retries: Retries for timeouts, network errors and 5xx answers.
        include_pre_releases: Consider pre-release versions by default.
    """

    resolver: str = MAVEN_CENTRAL
    timeout: int = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES
    include_pre_releases: bool = False

    def merge(self, **overrides: Any) -> "Settings":
        """Return a copy with every non-``None`` override applied.

        Raises:
            ConfigError: An override is out of range.
        """
        values = {key: value for key, value in overrides.items() if value is not None}
        merged = replace(self, **values)
        _check_timeout(merged.timeout, variable="--timeout")
        _check_retries(merged.max_retries, variable="--retries")
        return merged

    def to_log_dict(self) -> Dict[str, Any]:
        """Return settings as dictionary for debug logging."""
        return {
            "resolver": self.resolver,
            "timeout": self.timeout,
            "max_retries": self.max_retries,
            "include_pre_releases": self.include_pre_releases,
        }


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build :class:`Settings` from the environment.

    Args:
        environ: Mapping to read from. Defaults to :data:`os.environ`.

    Returns:
        Settings with defaults for every variable that is not set.

    Raises:
        ConfigError: A variable holds a value of the wrong type or range.
    """
    env = os.environ if environ is None else environ
    values: Dict[str, Any] = {}

    resolver = env.get(ENV_RESOLVER)
    if resolver is not None and resolver.strip():
        values["resolver"] = resolver.strip()

    if ENV_TIMEOUT in env:
        values["timeout"] = _check_timeout(
            _parse_int(env[ENV_TIMEOUT], ENV_TIMEOUT), variable=ENV_TIMEOUT
        )

    if ENV_MAX_RETRIES in env:
        values["max_retries"] = _check_retries(
            _parse_int(env[ENV_MAX_RETRIES], ENV_MAX_RETRIES),
            variable=ENV_MAX_RETRIES,
        )

    if ENV_INCLUDE_PRE_RELEASES in env:
        values["include_pre_releases"] = _parse_bool(
            env[ENV_INCLUDE_PRE_RELEASES], ENV_INCLUDE_PRE_RELEASES
        )

    settings = Settings(**values)
    if values:
        logger.debug("Settings from environment: %s", sorted(values))
    return settings


def _parse_int(raw: str, variable: str) -> int:
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ConfigError(
            f"{variable} must be an integer, got {raw!r}",
            variable=variable,
            value=raw,
        ) from exc


def _parse_bool(raw: str, variable: str) -> bool:
    word = raw.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ConfigError(
        f"{variable} must be a boolean (true/false, yes/no, 1/0), got {raw!r}",
        variable=variable,
        value=raw,
    )


def _check_timeout(value: int, *, variable: str) -> int:
    if value <= 0:
        raise ConfigError(
            f"{variable} must be a positive number of seconds, got {value}",
            variable=variable,
            value=str(value),
        )
    return value


def _check_retries(value: int, *, variable: str) -> int:
    if value < 0:
        raise ConfigError(
            f"{variable} must not be negative, got {value}",
            variable=variable,
            value=str(value),
        )
    return value
