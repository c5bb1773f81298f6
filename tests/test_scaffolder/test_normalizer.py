"""Tests for request defaulting (starter.scaffolder.normalizer)."""

from __future__ import annotations

import pytest

from starter.scaffolder.models import GenerationRequest
from starter.scaffolder.normalizer import (
    DEFAULT_ARTIFACT,
    DEFAULT_DATABASE,
    DEFAULT_GROUP,
    DEFAULT_JAVA_VERSION,
    DEFAULT_PASSWORD,
    DEFAULT_PROJECT_VERSION,
    DEFAULT_USERNAME,
    normalize,
)


pytestmark = pytest.mark.unit


class TestNormalize:
    def test_fully_populated_request_is_unchanged(self, full_request, catalog):
        assert normalize(full_request, catalog) == full_request

    def test_normalize_is_idempotent(self, empty_request, catalog):
        once = normalize(empty_request, catalog)
        assert normalize(once, catalog) == once

    def test_empty_request_gets_every_default(self, empty_request, catalog):
        result = normalize(empty_request, catalog)
        assert result.modules == ["camunda-rest"]
        assert result.group == DEFAULT_GROUP == "com.example.workflow"
        assert result.database == DEFAULT_DATABASE == "h2"
        assert result.artifact == DEFAULT_ARTIFACT == "my-project"
        assert result.starter_version == "3.4.0"
        assert result.java_version == DEFAULT_JAVA_VERSION == "12"
        assert result.username == DEFAULT_USERNAME == "demo"
        assert result.password == DEFAULT_PASSWORD == "demo"
        assert result.version == DEFAULT_PROJECT_VERSION == "1.0.0-SNAPSHOT"

    def test_input_is_not_mutated(self, empty_request, catalog):
        normalize(empty_request, catalog)
        assert empty_request.group is None
        assert empty_request.modules is None

    def test_empty_strings_count_as_missing(self, catalog):
        request = GenerationRequest(group="", artifact="", database="", starter_version="")
        result = normalize(request, catalog)
        assert result.group == DEFAULT_GROUP
        assert result.artifact == DEFAULT_ARTIFACT
        assert result.database == DEFAULT_DATABASE
        assert result.starter_version == catalog.default_version

    def test_empty_module_list_counts_as_missing(self, catalog):
        result = normalize(GenerationRequest(modules=[]), catalog)
        assert result.modules == ["camunda-rest"]

    @pytest.mark.parametrize(
        "field_name",
        ["group", "artifact", "version", "modules", "database",
         "starter_version", "java_version", "username", "password"],
    )
    def test_only_the_missing_field_changes(self, full_request, catalog, field_name):
        request = full_request.model_copy(update={field_name: None})
        result = normalize(request, catalog)
        for other in GenerationRequest.model_fields:
            if other != field_name:
                assert getattr(result, other) == getattr(full_request, other)
        assert getattr(result, field_name)

    def test_unknown_values_pass_through(self, catalog):
        request = GenerationRequest(modules=["does-not-exist"], database="oracle", starter_version="0.0.1")
        result = normalize(request, catalog)
        assert result.modules == ["does-not-exist"]
        assert result.database == "oracle"
        assert result.starter_version == "0.0.1"

    def test_camel_case_aliases(self, catalog):
        request = GenerationRequest.model_validate({"starterVersion": "3.3.1", "javaVersion": "17"})
        result = normalize(request, catalog)
        assert result.starter_version == "3.3.1"
        assert result.java_version == "17"
