"""API VIP connectivity check request for a host."""

from __future__ import annotations

import json

from pydantic import BaseModel, Field

from hostresolve.core.endpoint import EndpointResolver
from hostresolve.core.records import Cluster, Host
from hostresolve.core.schema import ResolverSettings


class RequestHeader(BaseModel):
    key: str
    value: str


class APIVipConnectivityRequest(BaseModel):
    """
    Arguments for checking that a host can reach its ignition endpoint.

    Fields that are not set are left out of the serialized request.
    """

    url: str
    ca_certificate: str | None = None
    ignition_endpoint_token: str | None = None
    request_headers: list[RequestHeader] = Field(default_factory=list)

    def to_json(self) -> str:
        """Compact JSON with sorted keys."""
        data = self.model_dump(exclude_none=True)
        if not data["request_headers"]:
            del data["request_headers"]
        return json.dumps(data, sort_keys=True, separators=(",", ":"))


def build_connectivity_request(
    cluster: Cluster, host: Host, settings: ResolverSettings | None = None
) -> APIVipConnectivityRequest:
    endpoint = EndpointResolver(settings).resolve(cluster, host)

    token = host.ignition_endpoint_token or None
    headers = [RequestHeader(key="Authorization", value=f"Bearer {token}")] if token else []
    return APIVipConnectivityRequest(
        url=endpoint.url,
        ca_certificate=endpoint.ca_certificate,
        ignition_endpoint_token=token,
        request_headers=headers,
    )
