"""Installation disk selection from host inventory."""

from __future__ import annotations

import logging
from typing import Sequence

from pydantic import ValidationError

from hostresolve.core.errors import InvalidInventoryError, NotFoundError
from hostresolve.core.records import Host
from hostresolve.core.schema import Disk, DriveType, Inventory

logger = logging.getLogger(__name__)


def parse_inventory(raw: str, host_id: str | None = None) -> Inventory:
    """
    Parse a raw inventory JSON document.

    Disk order is kept as reported by the host.
    """
    try:
        return Inventory.model_validate_json(raw)
    except ValidationError as e:
        who = f" for host {host_id}" if host_id else ""
        raise InvalidInventoryError(f"Failed to parse inventory{who}: {e}") from e


def select_disk(disks: Sequence[Disk], prior_selection_id: str | None = None) -> Disk | None:
    """
    Pick the installation disk.

    A previous selection is kept as long as the disk is still in the
    inventory, even if a higher priority disk has shown up since.
    Otherwise the first disk wins; the inventory order is the priority.
    Returns None for an empty inventory.
    """
    if prior_selection_id:
        for disk in disks:
            if disk.id == prior_selection_id:
                logger.debug("Keeping previously selected disk %s", disk.id)
                return disk

    if not disks:
        return None

    logger.debug("Selecting first inventory disk %s", disks[0].id)
    return disks[0]


def _find_by_path(disks: Sequence[Disk], path: str) -> Disk | None:
    for disk in disks:
        if disk.by_path == path:
            return disk
    for disk in disks:
        if disk.device_path == path:
            return disk
    return None


def resolve_recorded_disk(host: Host) -> Disk:
    """
    Get the disk object for a host's recorded installation disk.

    The recorded disk ID takes precedence over the recorded path. A path
    matches a disk's by-path identifier first, then its /dev/<name> path.
    """
    inventory = parse_inventory(host.inventory, host.id)

    disk: Disk | None = None
    if host.installation_disk_id:
        disk = next((d for d in inventory.disks if d.id == host.installation_disk_id), None)
    elif host.installation_disk_path:
        disk = _find_by_path(inventory.disks, host.installation_disk_path)

    if disk is None:
        raise NotFoundError(host.id)
    return disk


# --- Multipath ---


def disks_of_holder(disks: Sequence[Disk], holder: Disk) -> list[Disk]:
    """Get the member disks of a multipath holder, in inventory order."""
    return [d for d in disks if d.holders == holder.name]


def disks_of_holder_by_type(
    disks: Sequence[Disk], holder: Disk, drive_type: DriveType | str
) -> list[Disk]:
    """Get the member disks of a holder that have a given drive type."""
    return [d for d in disks_of_holder(disks, holder) if d.drive_type == drive_type]
