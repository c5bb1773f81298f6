"""Unit tests for Config and MavenConfig (starter.config).

Tests cover:
- MavenConfig defaults, derived URLs, validation
- Config defaults, save/load, from_env
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from starter.config import Config, MavenConfig


# ---------------------------------------------------------------------------
# MavenConfig
# ---------------------------------------------------------------------------


class TestMavenConfig:
    @pytest.mark.unit
    def test_defaults(self):
        maven = MavenConfig()
        assert maven.repository_url == "https://repo1.maven.org/maven2"
        assert maven.starter_group == "org.camunda.bpm.springboot"
        assert maven.starter_artifact == "camunda-bpm-spring-boot-starter"
        assert maven.max_versions == 10
        assert maven.timeout == 30

    @pytest.mark.unit
    def test_metadata_url(self):
        maven = MavenConfig(repository_url="https://repo.example.com/maven2/")
        assert maven.metadata_url == (
            "https://repo.example.com/maven2/org/camunda/bpm/springboot/"
            "camunda-bpm-spring-boot-starter/maven-metadata.xml"
        )

    @pytest.mark.unit
    def test_pom_url(self):
        maven = MavenConfig()
        assert maven.pom_url("3.4.0").endswith(
            "/camunda-bpm-spring-boot-starter/3.4.0/camunda-bpm-spring-boot-starter-3.4.0.pom"
        )

    @pytest.mark.unit
    def test_max_versions_must_be_positive(self):
        with pytest.raises(ValidationError):
            MavenConfig(max_versions=0)


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------


class TestConfig:
    @pytest.mark.unit
    def test_defaults(self):
        config = Config()
        assert config.versions_path == Path("versions.json")
        assert config.template_dir is None
        assert isinstance(config.maven, MavenConfig)

    @pytest.mark.unit
    def test_save_and_load(self, tmp_path: Path):
        config = Config(
            versions_path=tmp_path / "v.json",
            maven=MavenConfig(max_versions=3),
        )
        target = config.save(tmp_path / "conf" / "starter.json")
        assert target.exists()

        loaded = Config.load(target)
        assert loaded.versions_path == tmp_path / "v.json"
        assert loaded.maven.max_versions == 3

    @pytest.mark.unit
    def test_from_env_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = Config.from_env()
        assert config.versions_path == Path("versions.json")
        assert config.template_dir is None
        assert config.maven.timeout == 30

    @pytest.mark.unit
    def test_from_env_overrides(self, tmp_path: Path):
        env = {
            "STARTER_VERSIONS_PATH": str(tmp_path / "catalog.json"),
            "STARTER_TEMPLATE_DIR": str(tmp_path / "templates"),
            "STARTER_MAVEN_URL": "https://mirror.example.com/maven2",
            "STARTER_MAX_VERSIONS": "4",
            "STARTER_HTTP_TIMEOUT": "5",
        }
        with patch.dict(os.environ, env, clear=True):
            config = Config.from_env()
        assert config.versions_path == tmp_path / "catalog.json"
        assert config.template_dir == tmp_path / "templates"
        assert config.maven.repository_url == "https://mirror.example.com/maven2"
        assert config.maven.max_versions == 4
        assert config.maven.timeout == 5
