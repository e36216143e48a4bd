"""Registry configuration — host names and URL templates."""

from __future__ import annotations

import os
from dataclasses import dataclass

_DEFAULT_HOST = "pypi.org"


@dataclass(frozen=True)
class RegistryConfig:
    """Where and how to query the package registry.

    Templates use ``str.format`` placeholders: ``{package_name}`` and, for the
    human URL, ``{package_version}``. A rendered human URL only needs to be an
    absolute URL, so ``file://`` mirrors work; the metadata URL must be
    fetchable by httpx.

    Only one registry is supported today: the resolver reports the first entry
    of ``registry_host_names``. The field stays a tuple so more registries can
    be added without changing the resolver's interface.
    """

    registry_host_names: tuple[str, ...] = (_DEFAULT_HOST,)
    human_url_template: str = "https://pypi.org/pypi/{package_name}/{package_version}/"
    package_json_url_template: str = "https://pypi.org/pypi/{package_name}/json"
    timeout: float = 30.0

    def __post_init__(self) -> None:
        if not self.registry_host_names:
            raise ValueError("registry_host_names must contain at least one host name")

    @property
    def primary_host_name(self) -> str:
        return self.registry_host_names[0]

    @classmethod
    def from_env(cls) -> RegistryConfig:
        """Build a config, overriding defaults from environment variables.

        Reads:
            VOUCHPY_REGISTRY_HOST              — registry host name
            VOUCHPY_HUMAN_URL_TEMPLATE         — human-facing page template
            VOUCHPY_PACKAGE_JSON_URL_TEMPLATE  — JSON metadata endpoint template
            VOUCHPY_HTTP_TIMEOUT               — HTTP timeout in seconds
        """
        defaults = cls()
        host = os.environ.get("VOUCHPY_REGISTRY_HOST")
        return cls(
            registry_host_names=(host,) if host else defaults.registry_host_names,
            human_url_template=os.environ.get(
                "VOUCHPY_HUMAN_URL_TEMPLATE", defaults.human_url_template
            ),
            package_json_url_template=os.environ.get(
                "VOUCHPY_PACKAGE_JSON_URL_TEMPLATE", defaults.package_json_url_template
            ),
            timeout=float(os.environ.get("VOUCHPY_HTTP_TIMEOUT", defaults.timeout)),
        )
