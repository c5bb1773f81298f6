"""Loading and indexing of the starter-version catalog.

``versions.json`` is re-read on every generation call.  A missing file
triggers exactly one refresh through the injected updater followed by exactly
one more read; anything else that goes wrong is fatal straight away.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from typing import Protocol

from pydantic import ValidationError

from starter.catalog.models import VersionRecord, VersionsDocument
from starter.errors import ConfigurationUnavailable, UnrecognizedSelection

logger = logging.getLogger(__name__)


class Refresher(Protocol):
    """Anything that can rewrite the version catalog on disk."""

    async def update_versions(self) -> int: ...


class VersionCatalog(Mapping[str, VersionRecord]):
    """Ordered, read-only mapping of starter version -> ``VersionRecord``.

    Iteration follows declaration order, so the first key is the latest
    (default) starter version.
    """

    def __init__(self, records: Iterable[VersionRecord]) -> None:
        # Plain dict assignment keeps the first-seen position of a key while
        # letting a later record overwrite its value.
        index: dict[str, VersionRecord] = {}
        for record in records:
            index[record.starter_version] = record
        self._records = index

    def __getitem__(self, key: str) -> VersionRecord:
        return self._records[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"VersionCatalog({list(self._records)!r})"

    @property
    def default_version(self) -> str:
        """The first declared starter version."""
        return next(iter(self._records))

    def record(self, starter_version: str) -> VersionRecord:
        """Return the record for *starter_version* or raise ``UnrecognizedSelection``."""
        try:
            return self._records[starter_version]
        except KeyError:
            raise UnrecognizedSelection("starter version", starter_version) from None

    # -- Construction ------------------------------------------------------

    @classmethod
    def from_json(cls, raw: str, source: str | Path = "<memory>") -> "VersionCatalog":
        """Parse the ``versions.json`` payload.

        Raises:
            ConfigurationUnavailable: If the payload is malformed or lists no
                versions at all.
        """
        try:
            document = VersionsDocument.model_validate_json(raw)
        except ValidationError as exc:
            raise ConfigurationUnavailable(source, f"malformed catalog ({exc.error_count()} errors)") from exc

        if not document.starter_versions:
            raise ConfigurationUnavailable(source, "catalog lists no starter versions")
        return cls(document.starter_versions)

    @classmethod
    async def load(cls, path: str | Path, updater: Refresher) -> "VersionCatalog":
        """Read the catalog at *path*, refreshing it once if the file is absent."""
        catalog_path = Path(path)

        for attempt in (1, 2):
            try:
                raw = await asyncio.to_thread(catalog_path.read_text, encoding="utf-8")
            except FileNotFoundError as exc:
                if attempt == 2:
                    raise ConfigurationUnavailable(
                        catalog_path, "file still missing after refresh"
                    ) from exc
                logger.info("Version catalog %s not found, refreshing", catalog_path)
                await updater.update_versions()
                continue
            except (OSError, UnicodeDecodeError) as exc:
                raise ConfigurationUnavailable(catalog_path, str(exc)) from exc
            break

        catalog = cls.from_json(raw, catalog_path)
        logger.debug(
            "Loaded %d starter versions from %s (default %s)",
            len(catalog), catalog_path, catalog.default_version,
        )
        return catalog


async def load_catalog(path: str | Path, updater: Refresher) -> VersionCatalog:
    """Convenience wrapper around :meth:`VersionCatalog.load`."""
    return await VersionCatalog.load(path, updater)
