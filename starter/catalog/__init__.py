"""Starter-version catalog: loading ``versions.json`` and refreshing it from Maven."""

from starter.catalog.loader import VersionCatalog, load_catalog
from starter.catalog.models import VersionRecord, VersionsDocument
from starter.catalog.updater import VersionUpdater

__all__ = [
    "VersionCatalog",
    "VersionRecord",
    "VersionUpdater",
    "VersionsDocument",
    "load_catalog",
]
