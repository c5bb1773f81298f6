"""Refresh of ``versions.json`` from a Maven repository.

Reads the starter's ``maven-metadata.xml`` to find its releases, then reads
each release POM for the Camunda and Spring Boot versions it pins.

Typical usage::

    updater = VersionUpdater(config)
    await updater.update_versions()
"""

from __future__ import annotations

import asyncio
import logging
import re
import xml.etree.ElementTree as ET

import httpx
from packaging import version as pkg_version

from starter.catalog.models import VersionRecord, VersionsDocument
from starter.config import Config
from starter.utils import save_json

logger = logging.getLogger(__name__)

_POM_NS = {"m": "http://maven.apache.org/POM/4.0.0"}

# Maven qualifiers that packaging.version cannot classify on its own.
_MAVEN_PRE_RELEASE = re.compile(r"(-SNAPSHOT|[-.]M\d+)$", re.IGNORECASE)


class VersionUpdater:
    """Async client that rebuilds the starter-version catalog.

    Transport and parse failures are logged and leave the existing file
    untouched; ``update_versions`` reports how many versions it wrote.
    """

    def __init__(self, config: Config | None = None) -> None:
        self.config = config or Config()
        self.maven = self.config.maven

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _client(self) -> httpx.AsyncClient:
        """Return a fresh ``AsyncClient`` configured with our timeout."""
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self.maven.timeout, connect=10.0),
            follow_redirects=True,
        )

    @staticmethod
    def _parse_metadata(text: str) -> list[str]:
        """Extract ``versioning/versions/version`` entries from maven-metadata.xml."""
        root = ET.fromstring(text)
        versions: list[str] = []
        versioning = root.find("versioning")
        if versioning is not None:
            versions_elem = versioning.find("versions")
            if versions_elem is not None:
                for version_elem in versions_elem.findall("version"):
                    if version_elem.text and version_elem.text.strip():
                        versions.append(version_elem.text.strip())
        return versions

    @staticmethod
    def _newest_releases(candidates: list[str], limit: int) -> list[str]:
        """Drop pre-releases and return the newest *limit* versions, newest first."""
        parsed: list[tuple[pkg_version.Version, str]] = []
        for candidate in candidates:
            if _MAVEN_PRE_RELEASE.search(candidate):
                continue
            try:
                release = pkg_version.Version(candidate)
            except pkg_version.InvalidVersion:
                continue
            if release.is_prerelease or release.is_devrelease:
                continue
            parsed.append((release, candidate))
        parsed.sort(key=lambda item: item[0], reverse=True)
        return [raw for _, raw in parsed[:limit]]

    @staticmethod
    def _parse_pom(text: str, starter_version: str) -> VersionRecord | None:
        """Read ``camunda.version`` and ``spring-boot.version`` from a starter POM."""
        root = ET.fromstring(text)
        properties = root.find("m:properties", _POM_NS)
        if properties is None:
            properties = root.find("properties")
        if properties is None:
            return None

        def _prop(name: str) -> str | None:
            elem = properties.find(f"m:{name}", _POM_NS)
            if elem is None:
                elem = properties.find(name)
            if elem is None or not (elem.text or "").strip():
                return None
            return elem.text.strip()

        camunda = _prop("camunda.version")
        spring_boot = _prop("spring-boot.version")
        if camunda is None or spring_boot is None:
            return None
        return VersionRecord(
            starter_version=starter_version,
            camunda_version=camunda,
            spring_boot_version=spring_boot,
        )

    async def _fetch_record(
        self, client: httpx.AsyncClient, starter_version: str
    ) -> VersionRecord | None:
        response = await client.get(self.maven.pom_url(starter_version))
        response.raise_for_status()
        return self._parse_pom(response.text, starter_version)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def fetch_records(self) -> list[VersionRecord]:
        """Fetch catalog records for the newest starter releases, newest first.

        A release whose POM cannot be fetched or parsed is logged and left
        out; the others are still returned.

        Raises:
            httpx.HTTPError: On transport or status failures for the metadata.
            xml.etree.ElementTree.ParseError: On malformed metadata.
        """
        async with self._client() as client:
            response = await client.get(self.maven.metadata_url)
            response.raise_for_status()
            releases = self._newest_releases(
                self._parse_metadata(response.text), self.maven.max_versions
            )
            results = await asyncio.gather(
                *(self._fetch_record(client, release) for release in releases),
                return_exceptions=True,
            )

        records: list[VersionRecord] = []
        for release, result in zip(releases, results):
            if isinstance(result, (httpx.HTTPError, ET.ParseError)):
                logger.warning("Skipping starter %s: %s", release, result)
            elif isinstance(result, BaseException):
                raise result
            elif result is not None:
                records.append(result)
        return records

    async def update_versions(self) -> int:
        """Rewrite ``versions.json`` from the repository.

        Failures are logged as warnings; the file is only replaced when at
        least one release could be resolved.

        Returns:
            The number of starter versions written, ``0`` if the file was left
            untouched.
        """
        target = self.config.versions_path
        try:
            records = await self.fetch_records()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "Maven repository returned HTTP %s for %s",
                exc.response.status_code, exc.request.url,
            )
            return 0
        except httpx.HTTPError as exc:
            logger.warning("Cannot reach Maven repository at %s: %s", self.maven.repository_url, exc)
            return 0
        except ET.ParseError as exc:
            logger.warning("Malformed Maven metadata: %s", exc)
            return 0

        if not records:
            logger.warning("No usable starter releases found at %s", self.maven.metadata_url)
            return 0

        document = VersionsDocument(starter_versions=records)
        await save_json(document.model_dump(by_alias=True), target)
        logger.info("Wrote %d starter versions to %s", len(records), target)
        return len(records)
