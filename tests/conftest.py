"""Shared pytest fixtures for vouchpy tests — no network access."""

from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest
import structlog

from vouchpy.config import RegistryConfig
from vouchpy.registry.client import RegistryClient


@pytest.fixture(autouse=True, scope="session")
def _structlog_to_stdlib():
    """Route structlog through stdlib logging so nothing is printed to stdout."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.KeyValueRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()


def _release(python_version: str, url: str) -> dict:
    return {"python_version": python_version, "packagetype": "", "url": url}


@pytest.fixture
def numpy_document() -> dict:
    """A trimmed PyPI JSON document for numpy."""
    return {
        "info": {"name": "numpy", "version": "1.18.5"},
        "releases": {
            "1.18.4": [
                _release(
                    "source",
                    "https://files.pythonhosted.org/packages/numpy-1.18.4.zip",
                ),
            ],
            "1.18.5": [
                _release(
                    "cp38",
                    "https://files.pythonhosted.org/packages/numpy-1.18.5-cp38-cp38-manylinux1_x86_64.whl",
                ),
                _release(
                    "source",
                    "https://files.pythonhosted.org/packages/numpy-1.18.5.zip",
                ),
            ],
            "1.19.0rc1": [
                _release(
                    "source",
                    "https://files.pythonhosted.org/packages/numpy-1.19.0rc1.zip",
                ),
            ],
        },
    }


@pytest.fixture
def make_client() -> Callable[..., tuple[RegistryClient, list[httpx.Request]]]:
    """Build a RegistryClient backed by httpx.MockTransport.

    *routes* maps package name -> JSON-able document, raw ``str`` body, or an
    ``httpx.Response``. Returns the client and the list of seen requests.
    """

    def _make(routes: dict, config: RegistryConfig | None = None):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            # /pypi/<name>/json
            name = request.url.path.strip("/").split("/")[1]
            if name not in routes:
                return httpx.Response(404, text="Not Found")
            payload = routes[name]
            if isinstance(payload, httpx.Response):
                return payload
            if isinstance(payload, str):
                return httpx.Response(200, text=payload)
            return httpx.Response(200, text=json.dumps(payload))

        client = RegistryClient(config or RegistryConfig(), transport=httpx.MockTransport(handler))
        return client, seen

    return _make


@pytest.fixture
def pipfile_lock_content() -> dict:
    return {
        "_meta": {
            "hash": {"sha256": "0" * 64},
            "pipfile-spec": 6,
            "requires": {"python_version": "3.11"},
            "sources": [{"name": "pypi", "url": "https://pypi.org/simple", "verify_ssl": True}],
        },
        "default": {
            "requests": {"hashes": ["sha256:abc"], "index": "pypi", "version": "==2.31.0"},
            "idna": {"hashes": ["sha256:def"], "index": "pypi", "version": "==3.6"},
        },
        "develop": {
            "pytest": {"hashes": ["sha256:123"], "index": "pypi", "version": "==8.0.0"},
        },
    }
