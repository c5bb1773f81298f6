"""Main scaffolding orchestrator.

Takes a ``GenerationRequest`` and produces either the complete project
archive or a single rendered file.  Each call re-reads the version catalog
and builds its own context; nothing is shared between calls.
"""

from __future__ import annotations

import logging
from typing import Any

from starter.catalog.loader import Refresher, VersionCatalog
from starter.catalog.updater import VersionUpdater
from starter.config import Config
from starter.scaffolder.archive import ArchiveAssembler
from starter.scaffolder.context import build_context
from starter.scaffolder.dependencies import resolve_dependencies
from starter.scaffolder.models import GenerationRequest
from starter.scaffolder.normalizer import normalize
from starter.scaffolder.templates import TemplateRenderer

logger = logging.getLogger(__name__)


class ProjectGenerator:
    """Drives load -> normalize -> resolve -> context -> render/package."""

    def __init__(
        self,
        config: Config | None = None,
        updater: Refresher | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config or Config()
        self.updater = updater or VersionUpdater(self.config)
        self.renderer = renderer or TemplateRenderer(self.config.template_dir)
        self.assembler = ArchiveAssembler(self.renderer)

    # -- Public API --------------------------------------------------------

    async def generate(self, request: GenerationRequest) -> bytes:
        """Generate the complete project and return the ZIP archive bytes."""
        context = await self.build_context(request)
        data = self.assembler.assemble(context)
        logger.info(
            "Generated %s (%s, starter %s)",
            context["artifact"], context["db_type"], context["camunda_version"],
        )
        return data

    async def generate_file(self, request: GenerationRequest, file_name: str) -> str:
        """Render a single project file (e.g. ``"pom.xml"``) to text."""
        context = await self.build_context(request)
        return self.assembler.render_file(context, file_name)

    async def load_catalog(self) -> VersionCatalog:
        """Read the version catalog, refreshing it once if it is missing."""
        return await VersionCatalog.load(self.config.versions_path, self.updater)

    async def build_context(self, request: GenerationRequest) -> dict[str, Any]:
        """Normalize *request* and build its template context."""
        catalog = await self.load_catalog()
        normalized = normalize(request, catalog)
        dependencies = resolve_dependencies(
            normalized.modules, normalized.database, normalized.starter_version
        )
        return build_context(normalized, dependencies, catalog)
