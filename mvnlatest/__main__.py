"""
Executable module for mvnlatest.

Running:
    python -m mvnlatest

is equivalent to:
    mvnlatest

This module simply forwards execution to the CLI entrypoint defined in
`mvnlatest.cli`.
"""

from __future__ import annotations

import sys


def _print_startup_error(exc: ImportError) -> None:
    """Explain on stderr why the CLI could not be loaded."""
    sys.stderr.write("mvnlatest could not start: a dependency failed to import.\n")
    sys.stderr.write(f"Python version   : {sys.version}\n")
    try:
        from mvnlatest.__version__ import __version__
    except ImportError:
        __version__ = "<unknown>"
    sys.stderr.write(f"mvnlatest version: {__version__}\n")
    sys.stderr.write(f"ImportError: {exc}\n")


def main() -> int:
    """
    Main entrypoint when executing `python -m mvnlatest`.

    Returns:
        Exit code returned by the CLI, or 1 if it cannot be imported.
    """
    try:
        # Import lazily so dependencies are only loaded during CLI use
        from mvnlatest.cli import main as cli_main
    except ImportError as exc:
        _print_startup_error(exc)
        return 1

    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
