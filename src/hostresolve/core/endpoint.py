"""Ignition endpoint and CA bundle resolution."""

from __future__ import annotations

import ipaddress
import logging
from dataclasses import dataclass
from typing import Any

from pydantic import AnyUrl, TypeAdapter, ValidationError

from hostresolve.core.certs import (
    decode_bundle,
    decode_data_url,
    encode_merged_bundle,
    merge_certificates,
    parse_pem_bundle,
)
from hostresolve.core.errors import InvalidEndpointURLError, InvalidOverrideDocumentError
from hostresolve.core.records import Cluster, Host
from hostresolve.core.schema import HostRole, IgnitionOverrides, ResolverSettings

logger = logging.getLogger(__name__)

_url_adapter = TypeAdapter(AnyUrl)


@dataclass(frozen=True)
class ResolvedEndpoint:
    """Where a host fetches its ignition config from, and what to trust."""

    url: str
    ca_certificate: str | None = None  # base64 PEM bundle

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"url": self.url}
        if self.ca_certificate:
            result["ca_certificate"] = self.ca_certificate
        return result


def _is_ip_literal(name: str) -> bool:
    try:
        ipaddress.ip_address(name)
    except ValueError:
        return False
    return True


class EndpointResolver:
    """
    Resolves the ignition endpoint URL and CA bundle for a host.

    The CA bundle merges the cluster's ignition endpoint certificate with
    the certificate authorities in the host's ignition config overrides.
    A bundle switches the derived endpoint to HTTPS on the internal API
    name. A custom endpoint configured on the cluster is used as-is.
    """

    def __init__(self, settings: ResolverSettings | None = None) -> None:
        self._settings = settings or ResolverSettings()

    @property
    def settings(self) -> ResolverSettings:
        return self._settings

    def pool_selector(self, host: Host) -> str:
        """Machine config pool the host fetches its config for."""
        if host.machine_config_pool_name:
            return host.machine_config_pool_name
        if host.role == HostRole.MASTER:
            return self._settings.master_pool
        # Worker, arbiter, bootstrap, auto-assign and unknown roles
        return self._settings.worker_pool

    def cluster_certificates(self, cluster: Cluster) -> list[bytes]:
        if not cluster.ignition_endpoint_ca_certificate:
            return []
        return decode_bundle(cluster.ignition_endpoint_ca_certificate)

    def host_certificates(self, host: Host) -> list[bytes]:
        """CA certificates declared in the host's ignition config overrides."""
        if not host.ignition_config_overrides:
            return []
        try:
            overrides = IgnitionOverrides.model_validate_json(host.ignition_config_overrides)
        except ValidationError as e:
            raise InvalidOverrideDocumentError(
                f"Failed to parse ignition config overrides for host {host.id}: {e}"
            ) from e

        certs: list[bytes] = []
        for source in overrides.certificate_sources():
            certs.extend(parse_pem_bundle(decode_data_url(source)))
        return certs

    def custom_url(self, endpoint: str, selector: str) -> str:
        try:
            _url_adapter.validate_python(endpoint)
        except ValidationError as e:
            raise InvalidEndpointURLError(f"Invalid ignition endpoint URL {endpoint!r}: {e}") from e
        return f"{endpoint.rstrip('/')}/{selector}"

    def derived_url(self, api_vip_dns_name: str, selector: str, https: bool) -> str:
        """Build the machine config server URL from the cluster's API VIP name."""
        if not api_vip_dns_name:
            raise InvalidEndpointURLError("Cluster has no API VIP DNS name")

        settings = self._settings
        host = api_vip_dns_name.strip("[]")
        is_ip = _is_ip_literal(host)

        scheme, port = "http", settings.http_port
        if https:
            scheme, port = "https", settings.https_port
            if (
                not is_ip
                and host.startswith(settings.api_prefix)
                and not host.startswith(settings.internal_api_prefix)
            ):
                host = settings.internal_api_prefix + host[len(settings.api_prefix) :]
                logger.debug("Using internal API name %s for ignition", host)

        if is_ip and ":" in host:
            host = f"[{host}]"

        return f"{scheme}://{host}:{port}/{settings.config_path_prefix}{selector}"

    def resolve(self, cluster: Cluster, host: Host) -> ResolvedEndpoint:
        """
        Resolve the ignition endpoint for a host.

        Raises:
            InvalidCertificateError: a CA source is not valid base64/PEM
            InvalidOverrideDocumentError: the host overrides are not valid JSON
            InvalidEndpointURLError: the custom endpoint is not a valid URL
        """
        certs = merge_certificates(
            self.cluster_certificates(cluster),
            self.host_certificates(host),
        )
        bundle = encode_merged_bundle(certs)
        selector = self.pool_selector(host)

        if cluster.ignition_endpoint_url:
            url = self.custom_url(cluster.ignition_endpoint_url, selector)
        else:
            url = self.derived_url(cluster.api_vip_dns_name, selector, https=bundle is not None)

        logger.debug("Resolved ignition endpoint for host %s: %s", host.id, url)
        return ResolvedEndpoint(url=url, ca_certificate=bundle)


def resolve_endpoint(
    cluster: Cluster, host: Host, settings: ResolverSettings | None = None
) -> ResolvedEndpoint:
    """Resolve a host's ignition endpoint with the given (or default) settings."""
    return EndpointResolver(settings).resolve(cluster, host)


def config_pool_selector(host: Host, settings: ResolverSettings | None = None) -> str:
    return EndpointResolver(settings).pool_selector(host)
