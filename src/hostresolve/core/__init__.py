"""Core resolution logic for host provisioning."""

from hostresolve.core.records import Cluster, Host, RecordStore
from hostresolve.core.disks import (
    disks_of_holder,
    disks_of_holder_by_type,
    parse_inventory,
    resolve_recorded_disk,
    select_disk,
)
from hostresolve.core.endpoint import EndpointResolver, ResolvedEndpoint, resolve_endpoint
from hostresolve.core.errors import ResolutionError
from hostresolve.core.policy import is_encryption_enabled
from hostresolve.core.schema import Disk, DiskEncryptionEnableOn, DriveType, HostRole, ResolverSettings

__all__ = [
    "Cluster",
    "Host",
    "RecordStore",
    "disks_of_holder",
    "disks_of_holder_by_type",
    "parse_inventory",
    "resolve_recorded_disk",
    "select_disk",
    "EndpointResolver",
    "ResolvedEndpoint",
    "resolve_endpoint",
    "ResolutionError",
    "is_encryption_enabled",
    "Disk",
    "DiskEncryptionEnableOn",
    "DriveType",
    "HostRole",
    "ResolverSettings",
]
