"""
Command-line interface for mvnlatest.

This module provides the main CLI entry point and handles global options,
settings loading, and command registration.
"""

from __future__ import annotations

import sys
import logging

import click

from mvnlatest.config import load_settings
from mvnlatest.__version__ import __version__
from mvnlatest.constants import ENV_COLOR
from mvnlatest.context import MvnLatestContext
from mvnlatest.exceptions import ConfigError, MvnLatestError
from mvnlatest.utils.logger import get_logger, level_for_verbosity, setup_logging
from mvnlatest.utils.console import print_error, print_warning, reconfigure_console

logger = get_logger("cli")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase verbosity (can be repeated: -v, -vv).",
)
@click.option(
    "--color/--no-color",
    default=True,
    help="Enable or disable colored output.",
    envvar=ENV_COLOR,
)
@click.version_option(
    version=__version__,
    prog_name="mvnlatest",
    message="%(prog)s %(version)s",
)
@click.pass_context
def cli(ctx: click.Context, verbose: int, color: bool) -> None:
    """mvnlatest: find the latest version of Maven artifacts per range.

    \b
    Available commands:
      mvnlatest check              Resolve latest versions for coordinates

    \b
    Examples:
      mvnlatest check org.neo4j.gds:proc:~1.1:~1.3:1
      mvnlatest -v check org.neo4j:neo4j

    Use ``mvnlatest COMMAND --help`` for command-specific options.
    """
    _configure_logging(verbose)
    # --color keeps terminal detection, --no-color always wins
    reconfigure_console(color=None if color else False)

    try:
        settings = load_settings()
    except ConfigError as exc:
        print_error(str(exc))
        raise SystemExit(1) from exc

    mvnlatest_ctx = MvnLatestContext()
    mvnlatest_ctx.color = color
    mvnlatest_ctx.verbose = verbose
    mvnlatest_ctx.settings = settings
    ctx.obj = mvnlatest_ctx

    logger.debug("mvnlatest v%s", __version__)
    logger.debug("Settings: %s", settings.to_log_dict())
    logger.debug("Verbosity: %s | Color: %s", verbose, color)


def _configure_logging(verbose: int) -> None:
    """Configure logging level based on verbosity flags."""
    level = level_for_verbosity(verbose)
    setup_logging(level=level)
    logger.debug("Logging initialized at %s level", logging.getLevelName(level))


# Register CLI subcommands
from mvnlatest.commands.check import check  # noqa: E402

cli.add_command(check)


def main() -> int:
    """Main entry point for the mvnlatest CLI.

    Returns:
        Exit code:
            0   Success
            1   Unhandled or application error
            2   Usage error (Click)
            130 Interrupted by user (Ctrl+C)
    """
    try:
        cli(standalone_mode=False)
        return 0

    except click.exceptions.Abort:
        print_warning("Operation cancelled by user")
        return 130

    except click.ClickException as exc:
        exc.show()
        return exc.exit_code

    except MvnLatestError as exc:
        print_error(str(exc))
        logger.debug(
            "MvnLatestError details: %s",
            exc.details or "<none>",
            exc_info=True,
        )
        return 1

    except KeyboardInterrupt:
        print_warning("Operation cancelled by user")
        return 130

    except Exception as exc:
        print_error(f"Unexpected error: {exc}")
        logger.exception("Unhandled exception in CLI")
        return 1


if __name__ == "__main__":
    sys.exit(main())
