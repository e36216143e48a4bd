"""Resolve a package name and optional version into registry metadata."""

from __future__ import annotations

import json
from typing import Any

import httpx
import structlog

from vouchpy.config import RegistryConfig
from vouchpy.exceptions import (
    ArtifactNotFoundError,
    MalformedResponseError,
    UrlConstructionError,
    VersionNotFoundError,
)
from vouchpy.registry.client import RegistryClient
from vouchpy.registry.models import RegistryPackageMetadata
from vouchpy.registry.versions import select_latest_version

log = structlog.get_logger("vouchpy.registry")

# sdist entries carry this python_version tag; wheels carry e.g. "cp311" or "py3".
_SOURCE_TAG = "source"


def _dump(obj: Any) -> str:
    return json.dumps(obj, indent=2, default=str)


def validate_url(rendered: str) -> str:
    """Return *rendered* unchanged if it parses as an absolute URL (has a scheme)."""
    try:
        url = httpx.URL(rendered)
    except httpx.InvalidURL as e:
        raise UrlConstructionError(f"invalid URL {rendered!r}: {e}") from e
    if not url.scheme:
        raise UrlConstructionError(f"invalid URL {rendered!r}: not an absolute URL")
    return rendered


def render_human_url(template: str, package_name: str, package_version: str) -> str:
    """Render the human-facing page URL, e.g. https://pypi.org/pypi/numpy/1.18.5/"""
    try:
        rendered = template.format(package_name=package_name, package_version=package_version)
    except (KeyError, IndexError, ValueError) as e:
        raise UrlConstructionError(f"cannot render URL template {template!r}: {e}") from e
    return validate_url(rendered)


def get_releases(document: dict[str, Any]) -> dict[str, Any]:
    """Return the ``releases`` object of a package document."""
    releases = document.get("releases")
    if not isinstance(releases, dict):
        raise MalformedResponseError("failed to find releases JSON section", body=_dump(document))
    return releases


def get_archive_url(document: dict[str, Any], package_name: str, package_version: str) -> str:
    """Return the source distribution download URL for *package_version*.

    Entry order does not matter; wheels and other binaries are skipped.
    """
    release_files = get_releases(document).get(package_version)
    if not isinstance(release_files, list):
        raise ArtifactNotFoundError(package_name, package_version, "no releases for this version")

    for release in release_files:
        if not isinstance(release, dict) or release.get("python_version") != _SOURCE_TAG:
            continue
        url = release.get("url")
        if not isinstance(url, str):
            raise MalformedResponseError(
                f"source release of {package_name}=={package_version} has no download URL",
                body=_dump(release),
            )
        try:
            return validate_url(url)
        except UrlConstructionError as e:
            raise MalformedResponseError(str(e), body=_dump(release)) from e

    raise ArtifactNotFoundError(
        package_name, package_version, "failed to identify package archive URL"
    )


class RegistryResolver:
    """Turn ``(package_name, package_version | None)`` into registry metadata."""

    def __init__(
        self,
        config: RegistryConfig | None = None,
        client: RegistryClient | None = None,
    ) -> None:
        self._config = config or RegistryConfig()
        self._client = client or RegistryClient(self._config)

    def resolve(
        self,
        package_name: str,
        package_version: str | None = None,
    ) -> list[RegistryPackageMetadata]:
        """Resolve metadata for one package.

        A supplied *package_version* is used as-is; a version that was never
        published only surfaces as ArtifactNotFoundError. Without a version
        the latest release is selected from the registry document.

        Returns a list with a single entry for the primary registry. Only one
        registry is supported for now; the list leaves room for more.
        """
        if not package_name:
            raise ValueError("package_name must be a non-empty string")

        document: dict[str, Any] | None = None
        if package_version is None:
            document = self._client.get_package_json(package_name)
            package_version = select_latest_version(get_releases(document).keys())
            if package_version is None:
                raise VersionNotFoundError(package_name)
            log.debug("registry.latest_version", package=package_name, version=package_version)

        human_url = render_human_url(
            self._config.human_url_template, package_name, package_version
        )

        if document is None:
            document = self._client.get_package_json(package_name)
        artifact_url = get_archive_url(document, package_name, package_version)

        log.info(
            "registry.resolved",
            package=package_name,
            version=package_version,
            artifact_url=artifact_url,
        )
        return [
            RegistryPackageMetadata(
                registry_host_name=self._config.primary_host_name,
                human_url=human_url,
                artifact_url=artifact_url,
                is_primary=True,
                package_version=package_version,
            )
        ]
