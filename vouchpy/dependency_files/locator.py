"""Locate dependency files by walking up the directory tree."""

from __future__ import annotations

import os
from pathlib import Path

import structlog

from vouchpy.dependency_files.models import DependencyFile, DependencyFileType

log = structlog.get_logger("vouchpy.locator")


def locate(working_directory: Path) -> list[DependencyFile] | None:
    """Return the dependency files found at the nearest directory level.

    Starts at *working_directory* and moves towards the filesystem root. The
    first level holding at least one recognised file wins and every match at
    that level is returned; levels are never merged. Returns None once the
    root has been checked without a match.
    """
    if not Path(working_directory).is_absolute():
        raise ValueError(f"working directory must be absolute: {working_directory}")
    # Collapse ".." lexically so the walk never visits a descendant of the start.
    directory = Path(os.path.normpath(working_directory))

    while True:
        found = [
            DependencyFile(type=file_type, path=directory / file_type.file_name)
            for file_type in DependencyFileType
            if (directory / file_type.file_name).is_file()
        ]
        if found:
            log.debug(
                "locator.found",
                directory=str(directory),
                files=[f.path.name for f in found],
            )
            return found

        # Root is its own parent.
        if directory.parent == directory:
            break
        directory = directory.parent

    log.debug("locator.not_found", start=str(working_directory))
    return None
