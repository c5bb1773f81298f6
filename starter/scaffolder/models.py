"""Pydantic models describing a generation request and its resolved dependencies."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GenerationRequest(BaseModel):
    """What the caller asked for.

    Every field is optional on input; ``normalize`` returns a copy with the
    gaps filled.  camelCase aliases match the JSON posted by the start.camunda
    web form, so saved request files load unchanged.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    group: str | None = Field(default=None, description="Maven groupId / Java package")
    artifact: str | None = Field(default=None, description="Maven artifactId / project folder")
    version: str | None = Field(default=None, description="Project version")
    modules: list[str] | None = Field(default=None, description="Selected feature modules")
    database: str | None = Field(default=None, description="Database identifier")
    starter_version: str | None = Field(default=None, alias="starterVersion")
    java_version: str | None = Field(default=None, alias="javaVersion")
    username: str | None = Field(default=None, description="Admin user name")
    password: str | None = Field(default=None, description="Admin password")


class Dependency(BaseModel):
    """A Maven dependency coordinate.

    ``version=None`` means the version is managed by the parent BOM and no
    ``<version>`` element is rendered; it is not the same as ``""``.
    """

    model_config = ConfigDict(frozen=True)

    group: str
    artifact: str
    version: str | None = None

    def pinned(self, version: str) -> "Dependency":
        """Return a copy of this coordinate pinned to *version*."""
        return self.model_copy(update={"version": version})
