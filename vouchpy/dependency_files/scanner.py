"""Compose locator and parsers into file-defined dependency sets."""

from __future__ import annotations

from pathlib import Path

import structlog

# Ensure parsers are registered before any scan runs.
import vouchpy.dependency_files.parsers  # noqa: F401
from vouchpy.dependency_files.locator import locate
from vouchpy.dependency_files.models import FileDefinedDependencies
from vouchpy.dependency_files.registry import get_parser

log = structlog.get_logger("vouchpy.scanner")


def identify_file_defined_dependencies(
    working_directory: Path,
) -> list[FileDefinedDependencies]:
    """Locate dependency files above *working_directory* and parse each one.

    Returns an empty list when no dependency file is found.
    """
    dependency_files = locate(working_directory)
    if dependency_files is None:
        return []

    results: list[FileDefinedDependencies] = []
    for dependency_file in dependency_files:
        parser = get_parser(dependency_file.type)
        dependencies = parser.parse(dependency_file.path)
        log.info(
            "scanner.parsed",
            path=str(dependency_file.path),
            dependency_count=len(dependencies),
        )
        results.append(
            FileDefinedDependencies(
                path=dependency_file.path,
                registry_host_name=parser.registry_host_name,
                dependencies=dependencies,
            )
        )
    return results
