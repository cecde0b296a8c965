from __future__ import annotations

from typing import Generator

import pytest

from mvnlatest.utils import console as console_module
from mvnlatest.utils.console import (
    MVNLATEST_THEME,
    _should_use_color,
    get_raw_console,
    print_error,
    print_table,
    print_warning,
    reconfigure_console,
    styled,
)


@pytest.fixture(autouse=True)
def reset_console() -> Generator[None, None, None]:
    """Give every test fresh, color-free console singletons."""
    reconfigure_console(color=False)
    yield
    reconfigure_console()


@pytest.mark.unit
class TestTheme:
    @pytest.mark.parametrize(
        "name", ["group", "artifact", "qualifier", "version", "nomatch", "error"]
    )
    def test_report_styles_are_defined(self, name: str) -> None:
        assert name in MVNLATEST_THEME.styles

    def test_report_colors(self) -> None:
        styles = MVNLATEST_THEME.styles

        assert str(styles["group"]) == "magenta"
        assert str(styles["artifact"]) == "blue"
        assert str(styles["qualifier"]) == "bold cyan"
        assert str(styles["version"]) == "bold green"
        assert str(styles["nomatch"]) == "bold yellow"


@pytest.mark.unit
class TestColorDetection:
    """Tests for _should_use_color()."""

    def test_override_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NO_COLOR", "1")
        reconfigure_console(color=True)

        assert _should_use_color() is True

    def test_no_color_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        reconfigure_console()
        monkeypatch.setenv("NO_COLOR", "1")

        assert _should_use_color() is False

    def test_ci_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        reconfigure_console()
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("CI", "1")

        assert _should_use_color() is False


@pytest.mark.unit
class TestConsoleSingleton:
    def test_same_instance_until_reconfigured(self) -> None:
        first = get_raw_console()

        assert get_raw_console() is first

        reconfigure_console(color=False)
        assert get_raw_console() is not first


@pytest.mark.unit
class TestStatusMessages:
    """Tests for print_error/print_warning."""

    def test_error_goes_to_stderr(self, capsys: pytest.CaptureFixture) -> None:
        print_error("broken")

        captured = capsys.readouterr()
        assert "[ERROR] broken" in captured.err
        assert captured.out == ""

    def test_warning_goes_to_stderr(self, capsys: pytest.CaptureFixture) -> None:
        print_warning("careful", prefix="!")

        assert "! careful" in capsys.readouterr().err

    def test_markup_in_message_is_printed_literally(
        self, capsys: pytest.CaptureFixture
    ) -> None:
        print_error("bad qualifier [1.0,2.0)")

        assert "bad qualifier [1.0,2.0)" in capsys.readouterr().err


@pytest.mark.unit
class TestStyled:
    def test_wraps_text_in_style(self) -> None:
        assert styled("org.neo4j", "group") == "[group]org.neo4j[/group]"

    def test_escapes_markup(self) -> None:
        assert styled("[bold]", "version") == "[version]\\[bold][/version]"


@pytest.mark.unit
class TestPrintTable:
    def test_renders_headers_and_rows(self, capsys: pytest.CaptureFixture) -> None:
        print_table(
            [{"Qualifier": "~1.1", "Latest": "1.1.4"}],
            title="Latest Versions",
        )

        out = capsys.readouterr().out
        assert "Latest Versions" in out
        assert "Qualifier" in out
        assert "~1.1" in out
        assert "1.1.4" in out

    def test_empty_data_prints_nothing(self, capsys: pytest.CaptureFixture) -> None:
        print_table([])

        assert capsys.readouterr().out == ""

    def test_respects_header_order(self, capsys: pytest.CaptureFixture) -> None:
        print_table([{"a": "first", "b": "second"}], headers=["b", "a"])

        out = capsys.readouterr().out
        assert out.index("second") < out.index("first")

    def test_module_state_is_reset(self) -> None:
        reconfigure_console(color=False)

        assert console_module._console is None
        assert console_module._color_override is False
