"""Rendering of the project files and packaging them into a ZIP archive.

Layout, rooted at the artifact name::

    <artifact>/src/main/java/<group as path>/Application.java
    <artifact>/src/main/resources/application.yaml
    <artifact>/pom.xml
"""

from __future__ import annotations

import io
import logging
import zipfile
from typing import Any, NamedTuple

from starter.errors import UnrecognizedSelection
from starter.scaffolder.templates import TemplateRenderer, dot_to_slash

logger = logging.getLogger(__name__)

APPLICATION_CLASS_NAME = "Application.java"
APPLICATION_YAML_NAME = "application.yaml"
APPLICATION_POM_NAME = "pom.xml"

SOURCE_LANGUAGE = "java"
MAIN_PATH = "src/main"

# Fixed order of entries inside the archive.
PROJECT_FILES: tuple[str, ...] = (
    APPLICATION_CLASS_NAME,
    APPLICATION_YAML_NAME,
    APPLICATION_POM_NAME,
)

# Earliest timestamp a ZIP entry can carry; keeps archives byte-identical.
_ZIP_EPOCH = (1980, 1, 1, 0, 0, 0)
_ZIP_FILE_MODE = 0o644 << 16


class ArchiveEntry(NamedTuple):
    """A file inside the archive: its path relative to the archive root and its bytes."""

    path: str
    data: bytes


class ArchiveAssembler:
    """Renders the fixed project files and packs them into a ZIP archive."""

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    # -- Paths -------------------------------------------------------------

    @staticmethod
    def entry_path(file_name: str, context: dict[str, Any]) -> str:
        """Return the archive path of *file_name* for the given context."""
        artifact = context["artifact"]
        if file_name == APPLICATION_CLASS_NAME:
            package_path = dot_to_slash(context["group"])
            return f"{artifact}/{MAIN_PATH}/{SOURCE_LANGUAGE}/{package_path}/{file_name}"
        if file_name == APPLICATION_YAML_NAME:
            return f"{artifact}/{MAIN_PATH}/resources/{file_name}"
        if file_name == APPLICATION_POM_NAME:
            return f"{artifact}/{file_name}"
        raise UnrecognizedSelection("file", file_name)

    def entry_paths(self, context: dict[str, Any]) -> list[str]:
        """Return every archive path in packaging order."""
        return [self.entry_path(name, context) for name in PROJECT_FILES]

    # -- Rendering ---------------------------------------------------------

    def render_file(self, context: dict[str, Any], file_name: str) -> str:
        """Render one project file to text without packaging it.

        Raises:
            UnrecognizedSelection: If *file_name* is not one of ``PROJECT_FILES``.
        """
        if file_name not in PROJECT_FILES:
            raise UnrecognizedSelection("file", file_name)
        return self.renderer.render_file(file_name, context)

    def render_entries(self, context: dict[str, Any]) -> list[ArchiveEntry]:
        """Render every project file into an ``ArchiveEntry``.

        All files are rendered before anything is packed, so a template
        failure leaves no partial archive behind.
        """
        return [
            ArchiveEntry(
                path=self.entry_path(name, context),
                data=self.renderer.render_file(name, context).encode("utf-8"),
            )
            for name in PROJECT_FILES
        ]

    # -- Packaging ---------------------------------------------------------

    @staticmethod
    def pack(entries: list[ArchiveEntry]) -> bytes:
        """Write *entries* into a ZIP archive in the given order."""
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            for entry in entries:
                info = zipfile.ZipInfo(entry.path, date_time=_ZIP_EPOCH)
                info.compress_type = zipfile.ZIP_DEFLATED
                info.create_system = 3
                info.external_attr = _ZIP_FILE_MODE
                archive.writestr(info, entry.data)
        return buffer.getvalue()

    def assemble(self, context: dict[str, Any]) -> bytes:
        """Render all project files and return the packaged archive bytes."""
        entries = self.render_entries(context)
        data = self.pack(entries)
        logger.debug("Assembled %d entries (%d bytes) for %s", len(entries), len(data), context["artifact"])
        return data
