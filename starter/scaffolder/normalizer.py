"""Defaulting of omitted request fields.

Only emptiness is checked here.  Unknown-but-present values pass through and
are rejected later by whatever interprets them.
"""

from __future__ import annotations

from typing import Any

from starter.catalog.loader import VersionCatalog
from starter.scaffolder.models import GenerationRequest

DEFAULT_MODULES: tuple[str, ...] = ("camunda-rest",)
DEFAULT_GROUP = "com.example.workflow"
DEFAULT_DATABASE = "h2"
DEFAULT_ARTIFACT = "my-project"
DEFAULT_JAVA_VERSION = "12"
DEFAULT_USERNAME = "demo"
DEFAULT_PASSWORD = "demo"
DEFAULT_PROJECT_VERSION = "1.0.0-SNAPSHOT"

_STATIC_DEFAULTS: dict[str, str] = {
    "group": DEFAULT_GROUP,
    "database": DEFAULT_DATABASE,
    "artifact": DEFAULT_ARTIFACT,
    "java_version": DEFAULT_JAVA_VERSION,
    "username": DEFAULT_USERNAME,
    "password": DEFAULT_PASSWORD,
    "version": DEFAULT_PROJECT_VERSION,
}


def normalize(request: GenerationRequest, catalog: VersionCatalog) -> GenerationRequest:
    """Return a copy of *request* with every empty field set to its default.

    The starter version defaults to the catalog's first (latest) entry.  A
    request with every field already populated comes back equal to itself.
    """
    updates: dict[str, Any] = {}

    if not request.modules:
        updates["modules"] = list(DEFAULT_MODULES)

    for field_name, default in _STATIC_DEFAULTS.items():
        if not getattr(request, field_name):
            updates[field_name] = default

    if not request.starter_version:
        updates["starter_version"] = catalog.default_version

    if not updates:
        return request
    return request.model_copy(update=updates)
