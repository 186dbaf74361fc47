"""Disk encryption policy by node role."""

from __future__ import annotations

from hostresolve.core.records import Cluster, Host
from hostresolve.core.schema import DiskEncryptionEnableOn, HostRole

# Bootstrap nodes are masters as far as encryption goes.
# Auto-assign has no token and only matches ALL.
_ROLE_TOKENS: dict[HostRole, str] = {
    HostRole.MASTER: "masters",
    HostRole.BOOTSTRAP: "masters",
    HostRole.ARBITER: "arbiters",
    HostRole.WORKER: "workers",
}


def is_encryption_enabled(policy: DiskEncryptionEnableOn | str, role: HostRole | str | None) -> bool:
    """Check whether a disk encryption policy covers a role."""
    policy = DiskEncryptionEnableOn(policy)
    if policy == DiskEncryptionEnableOn.ALL:
        return True
    if policy == DiskEncryptionEnableOn.NONE:
        return False

    if not isinstance(role, HostRole):
        role = HostRole.parse(role)
    token = _ROLE_TOKENS.get(role) if role else None
    return token is not None and token in policy.roles


def is_encryption_enabled_for_host(cluster: Cluster, host: Host) -> bool:
    return is_encryption_enabled(cluster.disk_encryption_enable_on, host.role)
