"""Errors raised while resolving host provisioning configuration."""

from __future__ import annotations


class ResolutionError(Exception):
    """Raised when a host's configuration cannot be resolved."""

    pass


class NotFoundError(ResolutionError):
    """No inventory disk matches the host's recorded installation disk."""

    def __init__(self, host_id: str) -> None:
        self.host_id = host_id
        super().__init__(f"installation disk not found for host {host_id}")


class InvalidInventoryError(ResolutionError):
    """The host's inventory document is not valid JSON of the expected shape."""

    pass


class InvalidCertificateError(ResolutionError):
    """A CA certificate source is not valid base64/PEM."""

    pass


class InvalidOverrideDocumentError(ResolutionError):
    """The host's ignition config overrides are not valid JSON."""

    pass


class InvalidEndpointURLError(ResolutionError):
    """The cluster's custom ignition endpoint is not a valid URL."""

    pass


class ClusterNotFoundError(ResolutionError):
    """A host references a cluster missing from the store."""

    pass


class HostNotFoundError(ResolutionError):
    pass
