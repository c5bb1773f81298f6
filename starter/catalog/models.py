"""Pydantic models for the ``versions.json`` starter-version catalog."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class VersionRecord(BaseModel):
    """One starter release and the two versions it pins."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    starter_version: str = Field(..., alias="starterVersion", min_length=1)
    camunda_version: str = Field(..., alias="camundaVersion")
    spring_boot_version: str = Field(..., alias="springBootVersion")


class VersionsDocument(BaseModel):
    """Top-level shape of ``versions.json``.

    Records are listed newest first; the first one is the default.
    """

    model_config = ConfigDict(populate_by_name=True)

    starter_versions: list[VersionRecord] = Field(
        default_factory=list, alias="starterVersions"
    )
