"""
Logging utilities for mvnlatest.

Diagnostics (which URL was queried, how many version strings were dropped,
which qualifier consumed which candidates) go through the standard
:mod:`logging` package under the ``mvnlatest`` namespace. User-facing
output never goes through here; see :mod:`mvnlatest.utils.console`.
"""

from __future__ import annotations

import os
import sys
import copy
import logging
import threading
from typing import IO, Iterable, Optional

from mvnlatest.constants import (
    LOG_DATE_FORMAT,
    LOG_DEFAULT_FORMAT,
    LOG_VERBOSE_FORMAT,
)

ROOT_LOGGER_NAME = "mvnlatest"

#: Chatty transport loggers that are only interesting at DEBUG.
THIRD_PARTY_LOGGERS = ("httpx", "httpcore", "hpack", "h2")

_lock = threading.Lock()


class ColoredFormatter(logging.Formatter):
    """Logging formatter that colors the level name with ANSI codes."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(
        self,
        fmt: str,
        *,
        datefmt: Optional[str] = None,
        use_color: bool = True,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname)
        if not (color and self.use_color and self._should_use_color()):
            return super().format(record)

        # Other handlers may see the same record
        colored = copy.copy(record)
        colored.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(colored)

    @staticmethod
    def _should_use_color() -> bool:
        """Determine whether ANSI colors should be emitted on stderr."""
        if os.environ.get("NO_COLOR") or os.environ.get("CI"):
            return False
        try:
            return sys.stderr.isatty()
        except (AttributeError, OSError):
            return False


def level_for_verbosity(verbose: int) -> int:
    """Map the number of ``-v`` flags to a logging level.

    ``0`` is WARNING, ``1`` is INFO and anything above is DEBUG.
    """
    if verbose <= 0:
        return logging.WARNING
    if verbose == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(
    *,
    level: int = logging.WARNING,
    stream: Optional[IO[str]] = None,
) -> None:
    """Configure the ``mvnlatest`` logger hierarchy.

    Safe to call repeatedly; the previous handler is replaced. At DEBUG the
    verbose format (timestamp and logger name) is used and transport
    libraries are allowed to log as well.

    Args:
        level: Logging level (e.g. ``logging.INFO``).
        stream: Output stream; defaults to ``sys.stderr``.
    """
    verbose = level <= logging.DEBUG

    with _lock:
        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        root_logger.handlers.clear()
        root_logger.setLevel(level)

        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setLevel(level)
        handler.setFormatter(
            ColoredFormatter(
                LOG_VERBOSE_FORMAT if verbose else LOG_DEFAULT_FORMAT,
                datefmt=LOG_DATE_FORMAT,
                use_color=not os.environ.get("NO_COLOR"),
            )
        )

        root_logger.addHandler(handler)
        root_logger.propagate = False

    quiet_third_party(level=logging.DEBUG if verbose else logging.WARNING)


def quiet_third_party(
    *,
    level: int = logging.WARNING,
    names: Iterable[str] = THIRD_PARTY_LOGGERS,
) -> None:
    """Raise the threshold of noisy transport loggers."""
    for name in names:
        logging.getLogger(name).setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger within the mvnlatest namespace.

    Args:
        name: Logger name, either relative (``"resolver"``) or already
            qualified (``"mvnlatest.resolver"``).

    Returns:
        A logger instance under the ``mvnlatest`` hierarchy.
    """
    if not name or name == ROOT_LOGGER_NAME:
        logger = logging.getLogger(ROOT_LOGGER_NAME)
    elif name.startswith(f"{ROOT_LOGGER_NAME}."):
        logger = logging.getLogger(name)
    else:
        logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")

    # Library-safe behaviour when logging is not configured
    if not logger.handlers and (not logger.parent or not logger.parent.handlers):
        logger.addHandler(logging.NullHandler())

    return logger

