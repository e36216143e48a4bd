"""Custom exceptions for vouchpy."""


class VouchError(Exception):
    """Base exception for all extension errors."""


class MalformedInputError(VouchError):
    """Raised when a dependency file cannot be decoded or lacks required fields."""


class VersionNotFoundError(VouchError):
    """Raised when no published version qualifies as the latest release."""

    def __init__(self, package_name: str):
        self.package_name = package_name
        super().__init__(f"no eligible release version found for package '{package_name}'")


class RegistryUnavailableError(VouchError):
    """Raised on transport failures or non-success HTTP responses."""

    def __init__(self, url: str, reason: str, status_code: int | None = None):
        self.url = url
        self.status_code = status_code
        super().__init__(f"registry request to {url} failed: {reason}")


class MalformedResponseError(VouchError):
    """Raised when the registry replies with a body we cannot use.

    The raw response body is kept on ``body`` for diagnosis.
    """

    def __init__(self, message: str, body: str | None = None):
        self.body = body
        if body is not None:
            message = f"{message}:\n{body}"
        super().__init__(message)


class UrlConstructionError(VouchError):
    """Raised when a URL template renders to something that is not a valid URL."""


class ArtifactNotFoundError(VouchError):
    """Raised when no source distribution exists for the resolved version."""

    def __init__(self, package_name: str, package_version: str, reason: str):
        self.package_name = package_name
        self.package_version = package_version
        super().__init__(f"{package_name}=={package_version}: {reason}")
