"""Shared pytest fixtures for the project starter test suite.

Provides reusable fixtures for:
- A ``versions.json`` catalog on disk (tmp_path)
- A parsed ``VersionCatalog``
- Fully-populated and empty generation requests
- A mock refresher standing in for ``VersionUpdater``
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock

import pytest

from starter.catalog.loader import VersionCatalog
from starter.config import Config
from starter.scaffolder.models import GenerationRequest


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

@pytest.fixture
def versions_payload() -> dict[str, Any]:
    """Catalog content, newest starter version first."""
    return {
        "starterVersions": [
            {
                "starterVersion": "3.4.0",
                "camundaVersion": "7.12.0",
                "springBootVersion": "2.2.1.RELEASE",
            },
            {
                "starterVersion": "3.3.1",
                "camundaVersion": "7.11.0",
                "springBootVersion": "2.1.5.RELEASE",
            },
        ]
    }


@pytest.fixture
def versions_file(tmp_path: Path, versions_payload: dict[str, Any]) -> Path:
    """``versions.json`` written to a temporary directory."""
    path = tmp_path / "versions.json"
    path.write_text(json.dumps(versions_payload), encoding="utf-8")
    return path


@pytest.fixture
def catalog(versions_payload: dict[str, Any]) -> VersionCatalog:
    """Parsed catalog matching ``versions_payload``."""
    return VersionCatalog.from_json(json.dumps(versions_payload))


@pytest.fixture
def config(versions_file: Path) -> Config:
    """Config pointing at the temporary catalog."""
    return Config(versions_path=versions_file)


@pytest.fixture
def mock_refresher() -> AsyncMock:
    """A refresher whose ``update_versions`` does nothing."""
    refresher = AsyncMock()
    refresher.update_versions = AsyncMock(return_value=0)
    return refresher


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

@pytest.fixture
def full_request() -> GenerationRequest:
    """A request with every field populated with valid values."""
    return GenerationRequest(
        group="org.acme.flow",
        artifact="acme-flow",
        version="0.3.0",
        modules=["camunda-rest", "camunda-webapps"],
        database="postgresql",
        starter_version="3.3.1",
        java_version="11",
        username="admin",
        password="secret",
    )


@pytest.fixture
def empty_request() -> GenerationRequest:
    """A request with no fields set."""
    return GenerationRequest()
