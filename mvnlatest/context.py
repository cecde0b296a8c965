"""
Shared context object for mvnlatest CLI commands.

The group callback fills one :class:`MvnLatestContext` per invocation;
subcommands receive it through :data:`pass_context`.
"""

from __future__ import annotations

import click

from mvnlatest.config import Settings


class MvnLatestContext:
    """Global context object for mvnlatest CLI commands.

    Attributes:
        verbose: Verbosity level (0=WARNING, 1=INFO, 2+=DEBUG).
        color: Whether colored terminal output is enabled.
        settings: Settings loaded from the environment.
    """

    __slots__ = ("verbose", "color", "settings")

    def __init__(self) -> None:
        self.verbose: int = 0
        self.color: bool = True
        self.settings: Settings = Settings()


#: Click decorator for injecting :class:`MvnLatestContext` into commands.
pass_context = click.make_pass_decorator(MvnLatestContext, ensure=True)
