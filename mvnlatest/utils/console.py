"""
Console output utilities for mvnlatest using Rich.

This module provides user-facing output helpers for CLI commands.
For diagnostic or debug output, use :mod:`mvnlatest.utils.logger`.

Guidelines:
- print_* functions: user-facing status messages
- styled / print_table: report rendering
- Logging should never go through this module
"""

from __future__ import annotations

import os
import sys
import threading
from typing import Any, Callable, Dict, List, Optional

from rich.table import Table
from rich.theme import Theme
from rich.markup import escape
from rich.console import Console

# ---------------------------------------------------------------------------
# Theme configuration
# ---------------------------------------------------------------------------

MVNLATEST_THEME = Theme(
    {
        "error": "bold red",
        "warning": "bold yellow",
        # report
        "group": "magenta",
        "artifact": "blue",
        "qualifier": "bold cyan",
        "version": "bold green",
        "nomatch": "bold yellow",
    }
)

# ---------------------------------------------------------------------------
# Console lifecycle management
# ---------------------------------------------------------------------------

_console: Optional[Console] = None
_err_console: Optional[Console] = None
_color_override: Optional[bool] = None
_console_lock = threading.Lock()


def _should_use_color() -> bool:
    """Return True if colored output should be enabled."""
    if _color_override is not None:
        return _color_override
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("CI"):
        return False
    try:
        return sys.stdout.isatty()
    except (AttributeError, OSError):
        return False


def _make_console(*, stderr: bool) -> Console:
    use_color = _should_use_color()
    return Console(
        theme=MVNLATEST_THEME,
        stderr=stderr,
        no_color=not use_color,
        force_terminal=True if _color_override else None,
        highlight=False,
        soft_wrap=True,
    )


def _get_console() -> Console:
    """Return the singleton stdout Rich Console."""
    global _console

    if _console is None:
        with _console_lock:
            if _console is None:
                _console = _make_console(stderr=False)
    return _console


def _get_err_console() -> Console:
    """Return the singleton stderr Rich Console."""
    global _err_console

    if _err_console is None:
        with _console_lock:
            if _err_console is None:
                _err_console = _make_console(stderr=True)
    return _err_console


def reconfigure_console(*, color: Optional[bool] = None) -> None:
    """Reset the global console instances.

    Args:
        color: Force colors on (``True``) or off (``False``). ``None``
            restores detection from ``NO_COLOR``, ``CI`` and the terminal.
    """
    global _console, _err_console, _color_override
    with _console_lock:
        _color_override = color
        _console = None
        _err_console = None


# ---------------------------------------------------------------------------
# Status message helpers
# ---------------------------------------------------------------------------


def print_error(message: str, *, prefix: str = "[ERROR]") -> None:
    """Print an error message to stderr."""
    _get_err_console().print(f"{escape(prefix)} {escape(message)}", style="error")


def print_warning(message: str, *, prefix: str = "[WARNING]") -> None:
    """Print a warning message to stderr."""
    _get_err_console().print(
        f"{escape(prefix)} {escape(message)}", style="warning"
    )


# ---------------------------------------------------------------------------
# Structured output
# ---------------------------------------------------------------------------


def styled(text: str, style: str) -> str:
    """Return *text* as Rich markup in *style*, escaping any markup in it.

    Example::

        >>> styled("org.neo4j", "group")
        '[group]org.neo4j[/group]'
    """
    return f"[{style}]{escape(text)}[/{style}]"


def print_table(
    data: List[Dict[str, Any]],
    *,
    headers: Optional[List[str]] = None,
    title: Optional[str] = None,
    column_styles: Optional[Dict[str, Dict[str, Any]]] = None,
    row_styler: Optional[Callable[[Dict[str, Any]], Optional[str]]] = None,
) -> None:
    """Render structured data as a Rich table.

    Cell values are printed literally, never interpreted as markup.

    Args:
        data: List of row dictionaries.
        headers: Column order. Defaults to keys of the first row.
        title: Optional table title.
        column_styles: Per-column style configuration.
        row_styler: Optional callback returning a row style.
    """
    if not data:
        return

    if headers is None:
        headers = list(data[0].keys())

    table = Table(title=title, show_header=True, header_style="bold")

    column_styles = column_styles or {}
    for header in headers:
        config = column_styles.get(header, {})
        table.add_column(
            header,
            style=config.get("style"),
            justify=config.get("justify", "default"),
            no_wrap=config.get("no_wrap", False),
            overflow=config.get("overflow", "fold"),
        )

    for row in data:
        values = [escape(str(row.get(h, ""))) for h in headers]
        style = row_styler(row) if row_styler else None
        table.add_row(*values, style=style)

    _get_console().print(table)


def get_raw_console() -> Console:
    """Return the underlying stdout Rich Console instance."""
    return _get_console()
