"""Dependency files — locate and parse project lockfiles."""

from vouchpy.dependency_files.locator import locate
from vouchpy.dependency_files.models import (
    Dependency,
    DependencyFile,
    DependencyFileType,
    FileDefinedDependencies,
)
from vouchpy.dependency_files.scanner import identify_file_defined_dependencies

__all__ = [
    "Dependency",
    "DependencyFile",
    "DependencyFileType",
    "FileDefinedDependencies",
    "identify_file_defined_dependencies",
    "locate",
]
