"""Parser registry — map each dependency file type to its parser."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from vouchpy.dependency_files.models import Dependency, DependencyFileType


@runtime_checkable
class DependencyFileParser(Protocol):
    """Interface that every dependency file parser must satisfy."""

    file_type: DependencyFileType
    registry_host_name: str

    def parse(self, file_path: Path) -> list[Dependency]: ...


PARSER_REGISTRY: dict[DependencyFileType, DependencyFileParser] = {}


def register_parser(parser: DependencyFileParser) -> None:
    """Register a parser instance by the file type it handles."""
    PARSER_REGISTRY[parser.file_type] = parser


def get_parser(file_type: DependencyFileType) -> DependencyFileParser:
    """Return the parser registered for *file_type*.

    Raises KeyError if no parser handles it.
    """
    try:
        return PARSER_REGISTRY[file_type]
    except KeyError:
        raise KeyError(f"no parser registered for {file_type.file_name}") from None
