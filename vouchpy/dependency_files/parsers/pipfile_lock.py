"""Parser for pipenv Pipfile.lock files."""

from __future__ import annotations

import json
from pathlib import Path

from vouchpy.dependency_files.models import Dependency, DependencyFileType
from vouchpy.dependency_files.registry import register_parser
from vouchpy.exceptions import MalformedInputError

# Package sections of a Pipfile.lock; "_meta" holds hashes and sources only.
_SECTIONS = ("default", "develop")


def _strip_pin(version: str) -> str:
    """``"==1.2.3"`` -> ``"1.2.3"``."""
    return version.strip().removeprefix("==").strip()


class PipfileLockParser:
    file_type = DependencyFileType.PIPFILE_LOCK
    registry_host_name = "pypi.org"

    def parse(self, file_path: Path) -> list[Dependency]:
        try:
            data = json.loads(file_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise MalformedInputError(f"cannot decode {file_path}: {e}") from e

        if not isinstance(data, dict):
            raise MalformedInputError(f"{file_path}: expected a JSON object at top level")

        deps: set[Dependency] = set()
        for section in _SECTIONS:
            entries = data.get(section, {})
            if not isinstance(entries, dict):
                raise MalformedInputError(f"{file_path}: section '{section}' is not an object")

            for name, entry in entries.items():
                if not name:
                    raise MalformedInputError(f"{file_path}: empty package name in '{section}'")
                if not isinstance(entry, dict):
                    raise MalformedInputError(f"{file_path}: entry '{name}' is not an object")

                version = entry.get("version")
                if not isinstance(version, str) or not _strip_pin(version):
                    raise MalformedInputError(
                        f"{file_path}: package '{name}' has no pinned version"
                    )
                deps.add(Dependency(name=name, version=_strip_pin(version)))

        return list(deps)


register_parser(PipfileLockParser())
