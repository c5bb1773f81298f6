"""Closed mapping of modules and databases to Maven dependencies.

These tables are hand-curated.  Anything not listed is rejected; there is no
version solving.
"""

from __future__ import annotations

from starter.errors import UnrecognizedSelection
from starter.scaffolder.models import Dependency

# ---------------------------------------------------------------------------
# Lookup tables
# ---------------------------------------------------------------------------

_CAMUNDA_STARTER_GROUP = "org.camunda.bpm.springboot"

# module -> (coordinate, pinned to the starter version?)
MODULE_DEPENDENCIES: dict[str, tuple[Dependency, bool]] = {
    "camunda-webapps": (
        Dependency(group=_CAMUNDA_STARTER_GROUP, artifact="camunda-bpm-spring-boot-starter-webapp"),
        True,
    ),
    "camunda-rest": (
        Dependency(group=_CAMUNDA_STARTER_GROUP, artifact="camunda-bpm-spring-boot-starter-rest"),
        True,
    ),
    "spring-boot-security": (
        Dependency(group="org.springframework.boot", artifact="spring-boot-starter-security"),
        False,
    ),
    "spring-boot-web": (
        Dependency(group="org.springframework.boot", artifact="spring-boot-starter-web"),
        False,
    ),
}

DATABASE_DEPENDENCIES: dict[str, Dependency] = {
    "postgresql": Dependency(group="org.postgresql", artifact="postgresql"),
    "mysql": Dependency(group="mysql", artifact="mysql-connector-java"),
    "h2": Dependency(group="com.h2database", artifact="h2"),
}


def available_modules() -> list[str]:
    """Module identifiers accepted by :func:`resolve_dependencies`."""
    return list(MODULE_DEPENDENCIES)


def available_databases() -> list[str]:
    """Database identifiers accepted by :func:`resolve_dependencies`."""
    return list(DATABASE_DEPENDENCIES)


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


def resolve_module(module: str, starter_version: str) -> Dependency:
    """Map one module identifier to its dependency.

    Raises:
        UnrecognizedSelection: If *module* is not in the table.
    """
    try:
        dependency, pinned = MODULE_DEPENDENCIES[module]
    except KeyError:
        raise UnrecognizedSelection("module", module) from None
    return dependency.pinned(starter_version) if pinned else dependency


def resolve_database(database: str) -> Dependency:
    """Map a database identifier to its JDBC driver dependency.

    Raises:
        UnrecognizedSelection: If *database* is not in the table.
    """
    try:
        return DATABASE_DEPENDENCIES[database]
    except KeyError:
        raise UnrecognizedSelection("database", database) from None


def resolve_dependencies(
    modules: list[str], database: str, starter_version: str
) -> list[Dependency]:
    """Resolve modules (in caller order) followed by exactly one database driver.

    A module listed more than once resolves once, at its first position.  Any
    unknown identifier aborts the whole resolution.
    """
    dependencies: list[Dependency] = []
    seen: set[str] = set()
    for module in modules:
        if module in seen:
            continue
        seen.add(module)
        dependencies.append(resolve_module(module, starter_version))

    dependencies.append(resolve_database(database))
    return dependencies
