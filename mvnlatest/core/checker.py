"""Version checking for mvnlatest.

:class:`VersionChecker` ties the pieces together for one coordinate:
download the published versions through
:class:`~mvnlatest.core.metadata.MavenMetadataClient`, parse them, and run
the ordered resolution of :mod:`mvnlatest.core.resolver`.

Typical usage::

    from mvnlatest.utils.http import HTTPClient
    from mvnlatest.core.metadata import MavenMetadataClient
    from mvnlatest.core.checker import VersionChecker
    from mvnlatest.core.parser import parse_requests

    requests = parse_requests(["org.neo4j.gds:proc:~1.1:~1.3:1"])

    async with HTTPClient() as http:
        checker = VersionChecker(MavenMetadataClient(http))
        results = await checker.check_all(requests)

    for outcome in results[0].outcomes:
        print(outcome.qualifier, outcome.version)
"""

from __future__ import annotations

from typing import Iterable, List

from semantic_version import Version

from mvnlatest.core.metadata import MavenMetadataClient
from mvnlatest.core.resolver import build_pool, resolve
from mvnlatest.models import ResolutionRequest, ResolutionResult
from mvnlatest.utils.logger import get_logger
from mvnlatest.utils.version_utils import parse_version

logger = get_logger("version_checker")


class VersionChecker:
    """Resolve requests against a Maven repository.

    Args:
        metadata_client: Source of published version lists.

    Raises:
        TypeError: If *metadata_client* is ``None``.
    """

    def __init__(self, metadata_client: MavenMetadataClient) -> None:
        if metadata_client is None:
            raise TypeError(
                "metadata_client must not be None; pass a MavenMetadataClient"
            )
        self.metadata_client = metadata_client

    async def check(self, request: ResolutionRequest) -> ResolutionResult:
        """Fetch and resolve a single request.

        Version strings that cannot be parsed are skipped with a debug log
        entry; they never fail the request.

        Raises:
            RepositoryError: The metadata could not be obtained.
        """
        raw_versions = await self.metadata_client.fetch_versions(request.coordinate)
        candidates = _parse_candidates(raw_versions)

        outcomes = resolve(
            candidates,
            request.qualifiers,
            include_pre_releases=request.include_pre_releases,
        )

        # distinct versions as published, pre-releases included
        candidate_count = len(build_pool(candidates, include_pre_releases=True))

        result = ResolutionResult(
            coordinate=request.coordinate,
            outcomes=outcomes,
            candidate_count=candidate_count,
        )
        for outcome in result.unmatched:
            logger.info(
                "No version of %s matches %s", request.coordinate, outcome.qualifier
            )
        return result

    async def check_all(
        self, requests: Iterable[ResolutionRequest]
    ) -> List[ResolutionResult]:
        """Resolve *requests* one after another, in order.

        The first failure propagates and no partial results are returned.
        """
        results: List[ResolutionResult] = []
        for request in requests:
            logger.debug("Checking %s", request.to_log_dict())
            results.append(await self.check(request))
        return results


def _parse_candidates(raw_versions: Iterable[str]) -> List[Version]:
    candidates: List[Version] = []
    for raw in raw_versions:
        version = parse_version(raw)
        if version is None:
            logger.debug("Skipping unparsable version %r", raw)
            continue
        candidates.append(version)
    return candidates
