"""Maven repository metadata access for mvnlatest.

Every artifact in a Maven-style repository publishes a
``maven-metadata.xml`` next to its version directories::

    <metadata>
      <groupId>org.neo4j.gds</groupId>
      <artifactId>proc</artifactId>
      <versioning>
        <latest>1.4.0-alpha03</latest>
        <versions>
          <version>1.0.0</version>
          <version>1.1.0-alpha01</version>
          ...
        </versions>
      </versioning>
    </metadata>

:class:`MavenMetadataClient` downloads that document for a coordinate and
returns the raw ``<version>`` texts. Interpreting them is left to
:mod:`mvnlatest.utils.version_utils`.

Typical usage::

    from mvnlatest.utils.http import HTTPClient
    from mvnlatest.core.metadata import MavenMetadataClient

    async with HTTPClient() as http:
        client = MavenMetadataClient(http)
        versions = await client.fetch_versions(Coordinate("org.neo4j", "neo4j"))
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Dict, List
from urllib.parse import quote

import httpx

from mvnlatest.constants import (
    MAVEN_CENTRAL,
    METADATA_FILE_NAME,
    SUPPORTED_SCHEMES,
)
from mvnlatest.exceptions import (
    ArtifactNotFoundError,
    MetadataError,
    NetworkError,
    RepositoryError,
    RepositoryURLError,
)
from mvnlatest.models import Coordinate
from mvnlatest.utils.http import HTTPClient
from mvnlatest.utils.logger import get_logger

logger = get_logger("metadata")

__all__ = ["MavenMetadataClient", "parse_metadata", "validate_repository_url"]


def validate_repository_url(url: str) -> str:
    """Check that *url* can serve as a repository base URL.

    Args:
        url: Candidate resolver URL.

    Returns:
        The URL without trailing slashes.

    Raises:
        RepositoryURLError: The URL cannot be parsed, is not http(s) or
            has no host.
    """
    candidate = url.strip()
    try:
        parsed = httpx.URL(candidate)
    except httpx.InvalidURL as exc:
        raise RepositoryURLError(
            f"The resolver {candidate!r} is an invalid URL: {exc}",
            token=url,
        ) from exc

    if parsed.scheme not in SUPPORTED_SCHEMES or not parsed.host:
        raise RepositoryURLError(
            f"The resolver {candidate!r} is an invalid URL: "
            f"expected an absolute {' or '.join(SUPPORTED_SCHEMES)} URL",
            token=url,
        )

    return candidate.rstrip("/")


def parse_metadata(document: str) -> List[str]:
    """Extract the published version strings from ``maven-metadata.xml``.

    Text is stripped of surrounding whitespace (CDATA included) and kept in
    document order; empty ``<version>`` elements yield ``""``. A document
    without ``<versioning>/<versions>`` lists no versions.

    Args:
        document: The XML text.

    Returns:
        Version strings as published.

    Raises:
        MetadataError: *document* is not well-formed XML.
    """
    try:
        root = ET.fromstring(document)
    except ET.ParseError as exc:
        raise MetadataError(f"Unable to parse Maven metadata XML: {exc}") from exc

    # {*} also matches documents declaring the METADATA xmlns
    versions_elem = root.find("{*}versioning/{*}versions")
    if versions_elem is None:
        logger.debug("Metadata document <%s> lists no versions", root.tag)
        return []

    return [(elem.text or "").strip() for elem in versions_elem.findall("{*}version")]


class MavenMetadataClient:
    """Fetches version lists from a Maven-style repository.

    Each coordinate is downloaded at most once per client instance; nothing
    is kept beyond the lifetime of the object.

    Args:
        http_client: Open :class:`HTTPClient` used for the requests.
        repository_url: Base URL of the repository. Defaults to Maven
            Central.

    Raises:
        RepositoryURLError: *repository_url* is not a usable base URL.
    """

    def __init__(
        self,
        http_client: HTTPClient,
        repository_url: str = MAVEN_CENTRAL,
    ) -> None:
        self.http_client = http_client
        self.repository_url = validate_repository_url(repository_url)
        self._versions: Dict[Coordinate, List[str]] = {}

    def url_for(self, coordinate: Coordinate) -> str:
        """Return the metadata URL of *coordinate*.

        Example::

            >>> client.url_for(Coordinate("org.neo4j.gds", "proc"))
            'https://repo.maven.apache.org/maven2/org/neo4j/gds/proc/maven-metadata.xml'
        """
        segments = [*coordinate.path_segments(), METADATA_FILE_NAME]
        return "/".join(
            [self.repository_url, *(quote(segment, safe="") for segment in segments)]
        )

    async def fetch_versions(self, coordinate: Coordinate) -> List[str]:
        """Download and parse the version list of *coordinate*.

        Args:
            coordinate: Artifact to look up.

        Returns:
            Raw version strings in document order. Order carries no meaning.

        Raises:
            ArtifactNotFoundError: The repository answered 404.
            RepositoryError: Any other HTTP or network failure.
            MetadataError: The document is not well-formed XML.
        """
        cached = self._versions.get(coordinate)
        if cached is not None:
            return cached

        url = self.url_for(coordinate)
        logger.info("Fetching %s", url)

        try:
            document = await self.http_client.get_text(url)
        except NetworkError as exc:
            raise self._translate_error(coordinate, url, exc) from exc

        try:
            versions = parse_metadata(document)
        except MetadataError as exc:
            raise MetadataError(
                f"Unable to parse Maven metadata for {coordinate} from {url}",
                coordinate=str(coordinate),
                repository=self.repository_url,
                url=url,
                response_body=document,
            ) from exc

        logger.info("%s publishes %d version(s)", coordinate, len(versions))
        self._versions[coordinate] = versions
        return versions

    def _translate_error(
        self,
        coordinate: Coordinate,
        url: str,
        exc: NetworkError,
    ) -> RepositoryError:
        """Map a transport failure onto a user-facing repository error."""
        status = exc.status_code
        common = {
            "coordinate": str(coordinate),
            "repository": self.repository_url,
            "url": url,
            "status_code": status,
        }

        if status == 404:
            return ArtifactNotFoundError(
                f"The coordinates {coordinate} could not be found using the "
                f"resolver {self.repository_url}. Either they do not exist or "
                "the server does not follow maven style publication",
                **common,
            )

        if status in (401, 403):
            return RepositoryError(
                f"The resolver {self.repository_url} refused access to "
                f"{coordinate}. Please check the provided credentials",
                response_body=exc.response_body,
                **common,
            )

        if status is not None and 400 <= status < 500:
            return RepositoryError(
                "Could not read Maven metadata using the resolver "
                f"{self.repository_url}. There is likely something wrong with "
                "your request, please check your inputs",
                response_body=exc.response_body,
                **common,
            )

        return RepositoryError(
            "Could not read Maven metadata using the resolver "
            f"{self.repository_url}. The repository or your connection may be "
            "down, please try again later",
            **common,
        )
