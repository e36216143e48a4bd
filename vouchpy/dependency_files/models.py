"""Data models for dependency files."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path


class DependencyFileType(enum.Enum):
    """Recognised dependency definition files; the value is the file name."""

    PIPFILE_LOCK = "Pipfile.lock"

    @property
    def file_name(self) -> str:
        return self.value


@dataclass(frozen=True)
class DependencyFile:
    """A located dependency file and its type."""

    type: DependencyFileType
    path: Path


@dataclass(frozen=True)
class Dependency:
    """A single dependency declared in a dependency file."""

    name: str
    version: str


@dataclass
class FileDefinedDependencies:
    """All dependencies declared in one file, tagged with the target registry."""

    path: Path
    registry_host_name: str
    dependencies: list[Dependency] = field(default_factory=list)
