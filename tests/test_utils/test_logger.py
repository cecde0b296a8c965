from __future__ import annotations

import io
import logging
from typing import Generator
from unittest.mock import patch

import pytest

from mvnlatest.utils.logger import (
    ColoredFormatter,
    get_logger,
    level_for_verbosity,
    quiet_third_party,
    setup_logging,
)


@pytest.fixture
def clean_logger_state(
    monkeypatch: pytest.MonkeyPatch,
) -> Generator[None, None, None]:
    """Reset the mvnlatest logger hierarchy around a test."""
    monkeypatch.setenv("NO_COLOR", "1")
    root_logger = logging.getLogger("mvnlatest")
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)

    yield

    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
    root_logger.propagate = True


def _record(level: int = logging.WARNING, msg: str = "hello") -> logging.LogRecord:
    return logging.LogRecord("mvnlatest.test", level, __file__, 1, msg, None, None)


@pytest.mark.unit
class TestColoredFormatter:
    """Tests for ColoredFormatter ANSI color formatting."""

    def test_plain_when_color_disabled(self) -> None:
        formatter = ColoredFormatter("%(levelname)s: %(message)s", use_color=False)

        assert formatter.format(_record()) == "WARNING: hello"

    def test_colors_level_name_on_tty(self) -> None:
        formatter = ColoredFormatter("%(levelname)s: %(message)s")

        with patch.object(ColoredFormatter, "_should_use_color", return_value=True):
            output = formatter.format(_record(logging.ERROR))

        assert output == "\033[31mERROR\033[0m: hello"

    def test_does_not_mutate_record(self) -> None:
        """Other handlers must still see the plain level name."""
        formatter = ColoredFormatter("%(levelname)s")
        record = _record()

        with patch.object(ColoredFormatter, "_should_use_color", return_value=True):
            formatter.format(record)

        assert record.levelname == "WARNING"

    def test_no_color_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NO_COLOR", "1")

        assert ColoredFormatter._should_use_color() is False

    def test_ci_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("CI", "true")

        assert ColoredFormatter._should_use_color() is False


@pytest.mark.unit
class TestLevelForVerbosity:
    @pytest.mark.parametrize(
        "verbose,level",
        [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (5, logging.DEBUG)],
    )
    def test_mapping(self, verbose: int, level: int) -> None:
        assert level_for_verbosity(verbose) == level


@pytest.mark.unit
@pytest.mark.usefixtures("clean_logger_state")
class TestSetupLogging:
    """Tests for setup_logging() configuration."""

    def test_installs_single_handler(self) -> None:
        stream = io.StringIO()

        setup_logging(level=logging.INFO, stream=stream)
        setup_logging(level=logging.INFO, stream=stream)

        root_logger = logging.getLogger("mvnlatest")
        assert len(root_logger.handlers) == 1
        assert root_logger.propagate is False

    def test_respects_level(self) -> None:
        stream = io.StringIO()
        setup_logging(level=logging.WARNING, stream=stream)

        log = get_logger("resolver")
        log.info("hidden")
        log.warning("shown")

        output = stream.getvalue()
        assert "hidden" not in output
        assert "WARNING: shown" in output

    def test_debug_uses_verbose_format(self) -> None:
        stream = io.StringIO()
        setup_logging(level=logging.DEBUG, stream=stream)

        get_logger("metadata").debug("fetching")

        assert "mvnlatest.metadata" in stream.getvalue()

    def test_third_party_loggers_quiet_unless_debug(self) -> None:
        setup_logging(level=logging.INFO, stream=io.StringIO())
        assert logging.getLogger("httpx").level == logging.WARNING

        setup_logging(level=logging.DEBUG, stream=io.StringIO())
        assert logging.getLogger("httpx").level == logging.DEBUG


@pytest.mark.unit
class TestGetLogger:
    """Tests for get_logger() namespacing."""

    def test_relative_name_is_namespaced(self) -> None:
        assert get_logger("resolver").name == "mvnlatest.resolver"

    def test_qualified_name_is_kept(self) -> None:
        assert get_logger("mvnlatest.core").name == "mvnlatest.core"

    @pytest.mark.parametrize("name", [None, "", "mvnlatest"])
    def test_root_logger(self, name) -> None:
        assert get_logger(name).name == "mvnlatest"

    def test_quiet_third_party_custom_names(self) -> None:
        quiet_third_party(level=logging.ERROR, names=["some.lib"])

        assert logging.getLogger("some.lib").level == logging.ERROR
