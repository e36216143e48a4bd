"""Blocking PyPI JSON API client."""

from __future__ import annotations

import json
from typing import Any

import httpx
import structlog

from vouchpy.config import RegistryConfig
from vouchpy.exceptions import (
    MalformedResponseError,
    RegistryUnavailableError,
    UrlConstructionError,
)

log = structlog.get_logger("vouchpy.registry")


class RegistryClient:
    """Fetch package metadata documents from the registry.

    Every call opens its own ``httpx.Client`` and closes it before returning:
    there is no connection pooling, caching or retrying. *transport* lets
    callers swap the network layer (e.g. ``httpx.MockTransport`` in tests).
    """

    def __init__(
        self,
        config: RegistryConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._config = config or RegistryConfig()
        self._transport = transport

    def package_json_url(self, package_name: str) -> str:
        template = self._config.package_json_url_template
        try:
            rendered = template.format(package_name=package_name)
        except (KeyError, IndexError, ValueError) as e:
            raise UrlConstructionError(
                f"cannot render metadata URL template {template!r}: {e}"
            ) from e
        # Control characters or oversized names are rejected by httpx's parser.
        try:
            httpx.URL(rendered)
        except httpx.InvalidURL as e:
            raise UrlConstructionError(
                f"invalid metadata URL for package {package_name[:100]!r}: {e}"
            ) from e
        return rendered

    def get_package_json(self, package_name: str) -> dict[str, Any]:
        """GET the registry's JSON document for *package_name*.

        Raises:
            RegistryUnavailableError: transport failure or non-success status.
            MalformedResponseError: body is not a JSON object (body attached).
        """
        url = self.package_json_url(package_name)
        log.debug("registry.fetch", package=package_name, url=url)

        try:
            with httpx.Client(
                transport=self._transport,
                timeout=self._config.timeout,
                follow_redirects=True,
            ) as client:
                resp = client.get(url)
        except httpx.HTTPError as e:
            log.warning("registry.fetch_failed", package=package_name, url=url, error=str(e))
            raise RegistryUnavailableError(url, str(e) or type(e).__name__) from e

        if not resp.is_success:
            log.warning(
                "registry.bad_status",
                package=package_name,
                url=url,
                status_code=resp.status_code,
            )
            raise RegistryUnavailableError(
                url, f"HTTP {resp.status_code}", status_code=resp.status_code
            )

        body = resp.text
        try:
            data = json.loads(body)
        except json.JSONDecodeError as e:
            raise MalformedResponseError(
                f"JSON was not well-formatted ({e}) from {url}", body=body
            ) from e
        if not isinstance(data, dict):
            raise MalformedResponseError(f"expected a JSON object from {url}", body=body)
        return data
