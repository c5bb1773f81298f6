"""Project starter configuration.

Typed settings for the generator and the version updater.  All settings use
Pydantic v2 models so they can be validated at construction time and
serialised to/from JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class MavenConfig(BaseModel):
    """Where the version updater looks for starter releases."""

    repository_url: str = Field(default="https://repo1.maven.org/maven2")
    starter_group: str = Field(default="org.camunda.bpm.springboot")
    starter_artifact: str = Field(default="camunda-bpm-spring-boot-starter")
    max_versions: int = Field(
        default=10, ge=1, description="How many of the newest releases to keep in the catalog"
    )
    timeout: int = Field(default=30, ge=1, description="Per-request timeout in seconds")

    @property
    def artifact_url(self) -> str:
        """Base URL of the starter artifact directory in the repository."""
        group_path = self.starter_group.replace(".", "/")
        return f"{self.repository_url.rstrip('/')}/{group_path}/{self.starter_artifact}"

    @property
    def metadata_url(self) -> str:
        """URL of the artifact's ``maven-metadata.xml``."""
        return f"{self.artifact_url}/maven-metadata.xml"

    def pom_url(self, version: str) -> str:
        """URL of the starter POM for a given release."""
        return f"{self.artifact_url}/{version}/{self.starter_artifact}-{version}.pom"


class Config(BaseModel):
    """Global starter configuration.

    Instances are typically created once by the CLI entry point and passed to
    ``ProjectGenerator`` and ``VersionUpdater``.
    """

    versions_path: Path = Field(default=Path("versions.json"))
    template_dir: Path | None = Field(
        default=None, description="Override for the packaged Jinja2 templates"
    )
    maven: MavenConfig = Field(default_factory=MavenConfig)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            STARTER_VERSIONS_PATH, STARTER_TEMPLATE_DIR, STARTER_MAVEN_URL,
            STARTER_MAX_VERSIONS, STARTER_HTTP_TIMEOUT.
        """
        maven_kwargs: dict[str, Any] = {}
        if os.environ.get("STARTER_MAVEN_URL"):
            maven_kwargs["repository_url"] = os.environ["STARTER_MAVEN_URL"]
        if os.environ.get("STARTER_MAX_VERSIONS"):
            maven_kwargs["max_versions"] = int(os.environ["STARTER_MAX_VERSIONS"])
        if os.environ.get("STARTER_HTTP_TIMEOUT"):
            maven_kwargs["timeout"] = int(os.environ["STARTER_HTTP_TIMEOUT"])

        template_dir = os.environ.get("STARTER_TEMPLATE_DIR")

        return cls(
            versions_path=Path(os.environ.get("STARTER_VERSIONS_PATH", "versions.json")),
            template_dir=Path(template_dir) if template_dir else None,
            maven=MavenConfig(**maven_kwargs),
        )
