"""Host and cluster records, and the store they are loaded from."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterator

import yaml

from hostresolve.core.errors import ClusterNotFoundError, HostNotFoundError
from hostresolve.core.schema import (
    ClusterSchema,
    DiskEncryptionEnableOn,
    HostRole,
    HostSchema,
    StoreSchema,
)


class Host:
    """
    A node being installed.

    The ID is the primary identifier, passed separately from the host
    data since it's the dictionary key in the store. Records are read
    only; resolvers never modify them.
    """

    def __init__(self, host_id: str, data: dict[str, Any] | None = None) -> None:
        """
        Initialize a host.

        Args:
            host_id: The host's ID (primary key from the store)
            data: Host record data (without the id field)
        """
        self._id = host_id
        self._data = dict(data or {})
        self._schema = HostSchema(**self._data)

    @property
    def id(self) -> str:
        return self._id

    @property
    def cluster_id(self) -> str | None:
        return self._schema.cluster_id

    @property
    def role(self) -> HostRole | None:
        """The host role, or None when empty or not a known role."""
        return HostRole.parse(self._schema.role)

    @property
    def raw_role(self) -> str:
        return self._schema.role

    @property
    def machine_config_pool_name(self) -> str | None:
        return self._schema.machine_config_pool_name

    @property
    def installation_disk_id(self) -> str:
        return self._schema.installation_disk_id

    @property
    def installation_disk_path(self) -> str:
        return self._schema.installation_disk_path

    @property
    def ignition_endpoint_token(self) -> str | None:
        return self._schema.ignition_endpoint_token

    @property
    def ignition_config_overrides(self) -> str | None:
        return self._schema.ignition_config_overrides

    @property
    def inventory(self) -> str:
        """Raw inventory JSON document."""
        return self._schema.inventory

    def to_dict(self) -> dict[str, Any]:
        """Return host data as dictionary (includes id)."""
        result = self._data.copy()
        result["id"] = self._id
        return result

    def __repr__(self) -> str:
        return f"Host({self._id}, cluster={self.cluster_id}, role={self.raw_role})"


class Cluster:
    """The cluster a host is being installed into."""

    def __init__(self, cluster_id: str, data: dict[str, Any] | None = None) -> None:
        self._id = cluster_id
        self._data = dict(data or {})
        self._schema = ClusterSchema(**self._data)

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str | None:
        return self._schema.name

    @property
    def api_vip_dns_name(self) -> str:
        return self._schema.api_vip_dns_name

    @property
    def base_dns_domain(self) -> str | None:
        return self._schema.base_dns_domain

    @property
    def ignition_endpoint_url(self) -> str | None:
        return self._schema.ignition_endpoint_url

    @property
    def ignition_endpoint_ca_certificate(self) -> str | None:
        return self._schema.ignition_endpoint_ca_certificate

    @property
    def disk_encryption_enable_on(self) -> DiskEncryptionEnableOn:
        return self._schema.disk_encryption_enable_on

    def to_dict(self) -> dict[str, Any]:
        result = self._data.copy()
        result["id"] = self._id
        return result

    def __repr__(self) -> str:
        return f"Cluster({self._id}, api_vip_dns_name={self.api_vip_dns_name})"


class RecordStore:
    """
    Host and cluster records loaded from a YAML store file.

    Looking records up is the only thing the store does; the resolvers
    receive already-loaded records.
    """

    def __init__(self, clusters: dict[str, Cluster], hosts: dict[str, Host]) -> None:
        self._clusters = clusters  # ID -> Cluster
        self._hosts = hosts  # ID -> Host

    @classmethod
    def load(cls, path: str | Path) -> RecordStore:
        """Load a store from a YAML file."""
        path = Path(path)
        with path.open() as f:
            data = yaml.safe_load(f)

        # Validate with schema
        schema = StoreSchema(**(data or {}))

        clusters = {
            cid: Cluster(cid, c.model_dump(mode="json", exclude_unset=True))
            for cid, c in schema.clusters.items()
        }
        hosts = {
            hid: Host(hid, h.model_dump(mode="json", exclude_unset=True))
            for hid, h in schema.hosts.items()
        }
        return cls(clusters, hosts)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RecordStore:
        """Create a store from a dictionary."""
        clusters = {cid: Cluster(cid, c) for cid, c in data.get("clusters", {}).items()}
        hosts = {hid: Host(hid, h) for hid, h in data.get("hosts", {}).items()}
        return cls(clusters, hosts)

    def get_host(self, host_id: str) -> Host:
        host = self._hosts.get(host_id)
        if host is None:
            raise HostNotFoundError(f"Host not found: {host_id}")
        return host

    def get_cluster(self, cluster_id: str) -> Cluster:
        cluster = self._clusters.get(cluster_id)
        if cluster is None:
            raise ClusterNotFoundError(f"Cluster not found: {cluster_id}")
        return cluster

    def cluster_for(self, host: Host) -> Cluster:
        """Get the cluster a host belongs to."""
        if not host.cluster_id or host.cluster_id not in self._clusters:
            raise ClusterNotFoundError(
                f"Cluster {host.cluster_id} not found for host {host.id}"
            )
        return self._clusters[host.cluster_id]

    def hosts_in_cluster(self, cluster_id: str) -> list[Host]:
        return [h for h in self._hosts.values() if h.cluster_id == cluster_id]

    @property
    def clusters(self) -> list[Cluster]:
        return list(self._clusters.values())

    def __len__(self) -> int:
        return len(self._hosts)

    def __iter__(self) -> Iterator[Host]:
        return iter(self._hosts.values())

    def __contains__(self, host_id: str) -> bool:
        return host_id in self._hosts
