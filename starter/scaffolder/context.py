"""Assembly of the flat Jinja2 context for one generation request."""

from __future__ import annotations

from typing import Any

from starter.catalog.loader import VersionCatalog
from starter.scaffolder.models import Dependency, GenerationRequest

# Only these databases get a DataSource class in application.yaml.
_DATASOURCE_CLASSES: dict[str, str] = {
    "postgresql": "org.postgresql.jdbc2.optional.SimpleDataSource",
    "mysql": "com.mysql.cj.jdbc.MysqlDataSource",
}


def db_class_ref(database: str) -> str:
    """Return the DataSource class for *database*, or ``""`` when there is none."""
    return _DATASOURCE_CLASSES.get(database.lower(), "")


def build_context(
    request: GenerationRequest,
    dependencies: list[Dependency],
    catalog: VersionCatalog,
) -> dict[str, Any]:
    """Build the template context from a normalized request.

    Raises:
        UnrecognizedSelection: If the request's starter version is not in
            *catalog*.
    """
    record = catalog.record(request.starter_version)

    return {
        "package_name": request.group,
        "db_type": request.database,
        "db_class_ref": db_class_ref(request.database),
        "admin_username": request.username,
        "admin_password": request.password,
        "camunda_version": record.camunda_version,
        "spring_boot_version": record.spring_boot_version,
        "java_version": request.java_version,
        "group": request.group,
        "artifact": request.artifact,
        "project_version": request.version,
        "dependencies": list(dependencies),
    }
