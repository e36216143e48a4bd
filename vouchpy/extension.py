"""PyExtension — the Python ecosystem's entry point for the host tool."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import structlog

from vouchpy.config import RegistryConfig
from vouchpy.dependency_files.models import Dependency, FileDefinedDependencies
from vouchpy.dependency_files.scanner import identify_file_defined_dependencies
from vouchpy.exceptions import VouchError
from vouchpy.registry.client import RegistryClient
from vouchpy.registry.models import RegistryPackageMetadata
from vouchpy.registry.resolver import RegistryResolver

log = structlog.get_logger("vouchpy.extension")


@dataclass
class ResolutionFailure:
    """A dependency whose registry metadata could not be resolved."""

    path: Path
    dependency: Dependency
    error: VouchError


@dataclass
class ResolutionReport:
    """Outcome of resolving every dependency from a set of files."""

    resolved: dict[Dependency, list[RegistryPackageMetadata]] = field(default_factory=dict)
    failed: list[ResolutionFailure] = field(default_factory=list)


class PyExtension:
    """Lockfile discovery and PyPI metadata for Python packages."""

    def __init__(
        self,
        config: RegistryConfig | None = None,
        client: RegistryClient | None = None,
    ) -> None:
        self._config = config or RegistryConfig()
        self._resolver = RegistryResolver(self._config, client)

    def name(self) -> str:
        return "py"

    def registries(self) -> list[str]:
        return list(self._config.registry_host_names)

    def identify_file_defined_dependencies(
        self,
        working_directory: Path,
        extension_args: list[str] | None = None,
    ) -> list[FileDefinedDependencies]:
        """Dependencies declared in the nearest lockfile(s) above *working_directory*.

        *extension_args* is accepted for interface compatibility; no options
        are defined yet.
        """
        return identify_file_defined_dependencies(Path(working_directory))

    def registries_package_metadata(
        self,
        package_name: str,
        package_version: str | None = None,
    ) -> list[RegistryPackageMetadata]:
        return self._resolver.resolve(package_name, package_version)

    def resolve_file_defined_dependencies(
        self,
        file_defined: list[FileDefinedDependencies],
    ) -> ResolutionReport:
        """Resolve each declared dependency independently.

        A failure is recorded and logged; it never stops the other resolutions.
        """
        report = ResolutionReport()
        for group in file_defined:
            for dep in group.dependencies:
                try:
                    report.resolved[dep] = self._resolver.resolve(dep.name, dep.version)
                except VouchError as e:
                    log.warning(
                        "extension.resolve_failed",
                        path=str(group.path),
                        package=dep.name,
                        version=dep.version,
                        error=str(e),
                    )
                    report.failed.append(
                        ResolutionFailure(path=group.path, dependency=dep, error=e)
                    )
        return report
