"""Installation disk CLI commands."""

from __future__ import annotations

import click
from rich.console import Console
from rich.markup import escape

from hostresolve.cli.main import Context, pass_context

console = Console()


@click.command()
@click.argument("host_id")
@click.option(
    "--recorded",
    is_flag=True,
    help="Resolve the host's recorded installation disk instead of selecting one",
)
@pass_context
def disk(ctx: Context, host_id: str, recorded: bool) -> None:
    """
    Show the installation disk for a host.

    By default the disk is selected from the inventory, keeping the
    recorded disk when it is still present. With --recorded the recorded
    disk ID or path must match an inventory disk.
    """
    from hostresolve.core.disks import parse_inventory, resolve_recorded_disk, select_disk
    from hostresolve.core.errors import ResolutionError

    host, _ = ctx.host_and_cluster(host_id)

    try:
        if recorded:
            selected = resolve_recorded_disk(host)
        else:
            inventory = parse_inventory(host.inventory, host.id)
            selected = select_disk(inventory.disks, host.installation_disk_id)
    except ResolutionError as e:
        console.print(f"[red]Resolution error:[/red] {escape(str(e))}")
        raise SystemExit(1)

    if selected is None:
        console.print("[yellow]No disks in inventory[/yellow]")
        raise SystemExit(1)

    click.echo(selected.id)


@click.command()
@click.argument("host_id")
@pass_context
def disks(ctx: Context, host_id: str) -> None:
    """List inventory disks, with multipath members under their holder."""
    from rich.table import Table

    from hostresolve.core.disks import disks_of_holder, parse_inventory
    from hostresolve.core.errors import ResolutionError
    from hostresolve.core.schema import DriveType

    host, _ = ctx.host_and_cluster(host_id)

    try:
        inventory = parse_inventory(host.inventory, host.id)
    except ResolutionError as e:
        console.print(f"[red]Resolution error:[/red] {escape(str(e))}")
        raise SystemExit(1)

    if not inventory.disks:
        console.print("[yellow]No disks in inventory[/yellow]")
        return

    table = Table(title=f"Disks of {host.id}")
    table.add_column("Name", style="cyan")
    table.add_column("ID", style="dim")
    table.add_column("Type")
    table.add_column("By Path")

    holder_names = {d.name for d in inventory.disks if d.drive_type == DriveType.MULTIPATH}
    for d in inventory.disks:
        if d.holders in holder_names:
            continue  # Listed under the holder
        table.add_row(d.name, d.id, d.drive_type or "-", d.by_path or "-")
        if d.name in holder_names:
            for member in disks_of_holder(inventory.disks, d):
                table.add_row(f"  └ {member.name}", member.id, member.drive_type or "-", member.by_path or "-")

    console.print(table)
