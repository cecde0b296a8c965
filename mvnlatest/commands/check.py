"""Check command implementation for mvnlatest.

Looks up the latest published version of one or more Maven artifacts, once
per version qualifier. Qualifiers are applied left to right and each one
claims every version its range covers, so give the most restrictive first::

    $ mvnlatest check org.neo4j.gds:proc:~1.1:~1.3:1
    Latest version(s) for org.neo4j.gds:proc:
    Latest version matching ~1.1: 1.1.4
    Latest version matching ~1.3: 1.3.1
    Latest version matching ^1: 1.2.3

The command orchestrates three core components:

1. **parse_requests**: turns every argument into a
   :class:`ResolutionRequest`, rejecting bad input before any I/O.
2. **MavenMetadataClient**: downloads ``maven-metadata.xml`` for each
   coordinate, one request at a time.
3. **VersionChecker**: parses the published versions and runs the ordered
   resolution.

Nothing is printed until every coordinate has been resolved.

Typical usage::

    # Include pre-releases
    $ mvnlatest check -i org.neo4j.gds:proc:~1.1:~1.3:1

    # Private repository with Basic auth (password is prompted for)
    $ mvnlatest check -r https://repo.example.com/maven2 -u deployer com.example:lib

    # Machine-readable JSON output
    $ mvnlatest check --format json org.neo4j:neo4j:4.4:5 > report.json
"""

from __future__ import annotations

import sys
import json
import asyncio
from typing import List, Optional, Sequence, Tuple

import click

from mvnlatest.config import Settings
from mvnlatest.exceptions import MvnLatestError
from mvnlatest.context import pass_context, MvnLatestContext
from mvnlatest.models import ResolutionRequest, ResolutionResult
from mvnlatest.core import (
    MavenMetadataClient,
    VersionChecker,
    parse_requests,
    validate_repository_url,
)
from mvnlatest.utils import (
    HTTPClient,
    get_logger,
    get_raw_console,
    print_error,
    print_table,
    styled,
)

logger = get_logger("commands.check")


@click.command()
@click.argument("coordinates", nargs=-1, required=True, metavar="COORDINATES...")
@click.option(
    "--include-pre-releases",
    "-i",
    is_flag=True,
    help="Also consider pre-release versions (e.g. 1.4.0-alpha02).",
)
@click.option(
    "--resolver",
    "--repo",
    "-r",
    "resolver",
    metavar="URL",
    default=None,
    help="Maven-style repository to query [default: Maven Central].",
)
@click.option(
    "--user",
    "--username",
    "-u",
    "user",
    default=None,
    help="Username for HTTP Basic authentication; the password is prompted for.",
)
@click.option(
    "--insecure-password",
    default=None,
    help="Password for --user, given on the command line instead of prompted.",
)
@click.option(
    "--timeout",
    type=click.IntRange(min=1),
    default=None,
    help="Network timeout in seconds.",
)
@click.option(
    "--retries",
    type=click.IntRange(min=0),
    default=None,
    help="Retries for timeouts, network failures and server errors.",
)
@click.option(
    "--format",
    "-f",
    type=click.Choice(["text", "table", "json"], case_sensitive=False),
    default="text",
    help="Output format.",
)
@pass_context
def check(
    ctx: MvnLatestContext,
    coordinates: Tuple[str, ...],
    include_pre_releases: bool,
    resolver: Optional[str],
    user: Optional[str],
    insecure_password: Optional[str],
    timeout: Optional[int],
    retries: Optional[int],
    format: str,
) -> None:
    """Find the latest version of Maven artifacts per version range.

    Each COORDINATES argument has the form groupId:artifactId[:qualifier]*.
    Qualifiers use the npm range syntax; a bare version such as 1.3 means
    ^1.3. Without qualifiers the latest version overall is shown.

    \b
    Examples:
      mvnlatest check org.neo4j.gds:proc
      mvnlatest check org.neo4j.gds:proc:~1.1:~1.3:1
      mvnlatest check -i org.neo4j.gds:proc:1.4
    """
    if insecure_password is not None and user is None:
        raise click.UsageError("--insecure-password requires --user")

    try:
        settings = ctx.settings.merge(
            resolver=resolver,
            timeout=timeout,
            max_retries=retries,
            include_pre_releases=True if include_pre_releases else None,
        )
        logger.debug("Effective settings: %s", settings.to_log_dict())

        requests = parse_requests(
            coordinates,
            include_pre_releases=settings.include_pre_releases,
        )
        validate_repository_url(settings.resolver)

        auth = _credentials(user, insecure_password)
        results = asyncio.run(_check_async(requests, settings, auth))

    except MvnLatestError as e:
        print_error(f"{e}")
        logger.debug("Error details: %s", e.details or "<none>", exc_info=True)
        sys.exit(1)

    _display(results, format.lower())


def _credentials(
    user: Optional[str],
    password: Optional[str],
) -> Optional[Tuple[str, str]]:
    """Return Basic auth credentials, prompting for a missing password."""
    if user is None:
        return None
    if password is None:
        password = click.prompt(
            f"Password for {user}",
            hide_input=True,
            err=True,
        )
    return user, password


# ---------------------------------------------------------------------------
# Async orchestration
# ---------------------------------------------------------------------------


async def _check_async(
    requests: Sequence[ResolutionRequest],
    settings: Settings,
    auth: Optional[Tuple[str, str]],
) -> List[ResolutionResult]:
    """Resolve every request against the configured repository.

    Raises:
        MvnLatestError: The first request that fails aborts the run.
    """
    logger.info(
        "Checking %d coordinate(s) against %s", len(requests), settings.resolver
    )

    async with HTTPClient(
        timeout=settings.timeout,
        max_retries=settings.max_retries,
        auth=auth,
    ) as http:
        metadata = MavenMetadataClient(http, settings.resolver)
        checker = VersionChecker(metadata)
        return await checker.check_all(requests)


# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------


def _display(results: List[ResolutionResult], format: str) -> None:
    if format == "json":
        _display_json(results)
    elif format == "table":
        _display_table(results)
    else:
        _display_text(results)


def _display_text(results: List[ResolutionResult]) -> None:
    """One block per coordinate, one line per qualifier."""
    console = get_raw_console()

    for result in results:
        coordinate = result.coordinate
        console.print(
            "Latest version(s) for "
            f"{styled(coordinate.group_id, 'group')}:"
            f"{styled(coordinate.artifact_id, 'artifact')}:"
        )
        for outcome in result.outcomes:
            qualifier = outcome.qualifier.display
            if outcome.version is not None:
                console.print(
                    f"Latest version matching {styled(qualifier, 'qualifier')}: "
                    f"{styled(str(outcome.version), 'version')}"
                )
            else:
                console.print(f"No version matching {styled(qualifier, 'nomatch')}")


def _display_table(results: List[ResolutionResult]) -> None:
    rows = [
        {
            "Coordinate": str(result.coordinate),
            "Qualifier": outcome.qualifier.display,
            "Latest": str(outcome.version) if outcome.matched else "-",
        }
        for result in results
        for outcome in result.outcomes
    ]

    print_table(
        rows,
        headers=["Coordinate", "Qualifier", "Latest"],
        title="Latest Versions",
        column_styles={
            "Coordinate": {"style": "group", "no_wrap": True},
            "Qualifier": {"style": "qualifier"},
            "Latest": {"style": "version", "justify": "right"},
        },
        row_styler=lambda row: "nomatch" if row["Latest"] == "-" else None,
    )


def _display_json(results: List[ResolutionResult]) -> None:
    """Print results as a JSON array.

    Example output::

        [
          {
            "group_id": "org.neo4j.gds",
            "artifact_id": "proc",
            "candidates": 4,
            "versions": [
              {"qualifier": "~1.1", "version": "1.1.4"},
              {"qualifier": "^1.3", "version": null}
            ]
          }
        ]
    """
    data = [result.to_json() for result in results]
    click.echo(json.dumps(data, indent=2))
