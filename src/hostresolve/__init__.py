"""
Hostresolve - installation disk and ignition endpoint resolution for cluster hosts.

This package provides tools for:
- Selecting the installation disk from a host's hardware inventory
- Re-resolving a host's recorded installation disk
- Grouping multipath member disks under their holder
- Evaluating the disk encryption policy for a node role
- Resolving the ignition endpoint URL and merged CA bundle for a host
"""

__version__ = "0.1.0"

from hostresolve.core.records import Cluster, Host, RecordStore
from hostresolve.core.endpoint import EndpointResolver, ResolvedEndpoint, resolve_endpoint
from hostresolve.core.disks import resolve_recorded_disk, select_disk

__all__ = [
    "__version__",
    "Cluster",
    "Host",
    "RecordStore",
    "EndpointResolver",
    "ResolvedEndpoint",
    "resolve_endpoint",
    "resolve_recorded_disk",
    "select_disk",
]
