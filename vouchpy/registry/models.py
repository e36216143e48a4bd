"""Data models for registry metadata."""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class RegistryPackageMetadata:
    """Resolved registry metadata for one package version."""

    registry_host_name: str
    human_url: str
    artifact_url: str
    is_primary: bool
    package_version: str

    def to_dict(self) -> dict:
        return asdict(self)
