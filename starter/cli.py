"""Command-line entry point for the project starter.

Usage::

    python -m starter generate --group org.acme --module camunda-webapps -o acme.zip
    python -m starter render pom.xml --database postgresql
    python -m starter versions
    python -m starter update-versions
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from rich.table import Table

from starter.catalog.updater import VersionUpdater
from starter.config import Config
from starter.errors import StarterError
from starter.scaffolder.archive import PROJECT_FILES
from starter.scaffolder.dependencies import available_databases, available_modules
from starter.scaffolder.generator import ProjectGenerator
from starter.scaffolder.models import GenerationRequest
from starter.scaffolder.normalizer import DEFAULT_ARTIFACT
from starter.utils import (
    configure_logging,
    console,
    print_error,
    print_success,
    print_summary_table,
)

# CLI flag destination -> request field
_REQUEST_FLAGS: dict[str, str] = {
    "group": "group",
    "artifact": "artifact",
    "project_version": "version",
    "modules": "modules",
    "database": "database",
    "starter_version": "starter_version",
    "java_version": "java_version",
    "username": "username",
    "password": "password",
}


def _add_request_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--request", type=Path, help="JSON file with request fields")
    parser.add_argument("--group", "-g", help="Maven groupId and Java package")
    parser.add_argument("--artifact", "-a", help="Maven artifactId and project folder")
    parser.add_argument("--project-version", help="Project version (default: 1.0.0-SNAPSHOT)")
    parser.add_argument(
        "--module", "-m",
        dest="modules",
        action="append",
        help=f"Feature module, repeatable ({', '.join(available_modules())})",
    )
    parser.add_argument(
        "--database", "-d",
        help=f"Database ({', '.join(available_databases())})",
    )
    parser.add_argument("--starter-version", help="Starter version (default: latest in catalog)")
    parser.add_argument("--java-version", help="Java version (default: 12)")
    parser.add_argument("--username", help="Admin user name (default: demo)")
    parser.add_argument("--password", help="Admin password (default: demo)")


def build_request(args: argparse.Namespace) -> GenerationRequest:
    """Merge an optional ``--request`` JSON file with explicit flags (flags win)."""
    fields: dict[str, Any] = {}
    if args.request is not None:
        raw = args.request.read_text(encoding="utf-8")
        fields.update(GenerationRequest.model_validate_json(raw).model_dump())
    for dest, field_name in _REQUEST_FLAGS.items():
        value = getattr(args, dest, None)
        if value is not None:
            fields[field_name] = value
    return GenerationRequest(**fields)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="starter",
        description="Generate a Camunda Spring Boot project skeleton",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m starter generate -g org.acme -m camunda-webapps -m camunda-rest\n"
            "  python -m starter render pom.xml -d postgresql\n"
            "  python -m starter versions\n"
        ),
    )
    parser.add_argument("--config", type=Path, help="JSON config file (default: environment)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    generate = sub.add_parser("generate", help="Generate the full project archive")
    _add_request_arguments(generate)
    generate.add_argument("--output", "-o", type=Path, help="Archive path (default: <artifact>.zip)")

    render = sub.add_parser("render", help="Render a single project file to stdout")
    render.add_argument("file_name", choices=PROJECT_FILES)
    _add_request_arguments(render)

    sub.add_parser("versions", help="List starter versions in the catalog")
    sub.add_parser("update-versions", help="Refresh the catalog from the Maven repository")
    return parser


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


async def _cmd_generate(config: Config, args: argparse.Namespace) -> None:
    request = build_request(args)
    data = await ProjectGenerator(config).generate(request)
    output = args.output or Path(f"{request.artifact or DEFAULT_ARTIFACT}.zip")
    await asyncio.to_thread(output.write_bytes, data)
    print_success(f"Wrote {output} ({len(data)} bytes)")


async def _cmd_render(config: Config, args: argparse.Namespace) -> None:
    request = build_request(args)
    text = await ProjectGenerator(config).generate_file(request, args.file_name)
    sys.stdout.write(text)


async def _cmd_versions(config: Config, args: argparse.Namespace) -> None:
    catalog = await ProjectGenerator(config).load_catalog()
    table = Table(title="Starter versions", show_header=True, header_style="bold cyan")
    table.add_column("Starter")
    table.add_column("Camunda")
    table.add_column("Spring Boot")
    for record in catalog.values():
        table.add_row(record.starter_version, record.camunda_version, record.spring_boot_version)
    console.print(table)


async def _cmd_update_versions(config: Config, args: argparse.Namespace) -> None:
    written = await VersionUpdater(config).update_versions()
    if not written:
        raise StarterError(f"Version catalog at {config.versions_path} was not updated")
    print_summary_table(
        {
            "Catalog": str(config.versions_path),
            "Repository": config.maven.repository_url,
            "Starter versions": str(written),
        },
        title="Version update",
    )


_COMMANDS = {
    "generate": _cmd_generate,
    "render": _cmd_render,
    "versions": _cmd_versions,
    "update-versions": _cmd_update_versions,
}


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``python -m starter``."""
    args = _build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = Config.load(args.config) if args.config else Config.from_env()
        asyncio.run(_COMMANDS[args.command](config, args))
    except StarterError as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)
    except (ValidationError, OSError) as exc:
        print_error(f"Error: invalid input: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
