"""Registry metadata resolution against the PyPI JSON API."""

from vouchpy.registry.client import RegistryClient
from vouchpy.registry.models import RegistryPackageMetadata
from vouchpy.registry.resolver import RegistryResolver
from vouchpy.registry.versions import is_release_version, select_latest_version

__all__ = [
    "RegistryClient",
    "RegistryPackageMetadata",
    "RegistryResolver",
    "is_release_version",
    "select_latest_version",
]
