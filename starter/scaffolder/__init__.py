"""Project starter scaffolder -- resolves a request and packages the project.

Quick usage::

    from starter.scaffolder import GenerationRequest, ProjectGenerator

    generator = ProjectGenerator()
    request = GenerationRequest(group="org.acme", modules=["camunda-webapps"])
    archive = await generator.generate(request)
"""

from starter.scaffolder.archive import ArchiveAssembler, ArchiveEntry
from starter.scaffolder.context import build_context
from starter.scaffolder.dependencies import resolve_dependencies
from starter.scaffolder.generator import ProjectGenerator
from starter.scaffolder.models import Dependency, GenerationRequest
from starter.scaffolder.normalizer import normalize
from starter.scaffolder.templates import TemplateRenderer

__all__ = [
    "ArchiveAssembler",
    "ArchiveEntry",
    "Dependency",
    "GenerationRequest",
    "ProjectGenerator",
    "TemplateRenderer",
    "build_context",
    "normalize",
    "resolve_dependencies",
]
