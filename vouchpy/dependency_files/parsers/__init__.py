"""Dependency file parsers — auto-registered on import."""

from vouchpy.dependency_files.parsers import (
    pipfile_lock,  # noqa: F401
)
