"""Validation CLI command."""

from __future__ import annotations

import click
from rich.console import Console
from rich.markup import escape

from hostresolve.cli.main import Context, pass_context

console = Console()


@click.command()
@click.option(
    "--strict",
    is_flag=True,
    help="Fail on warnings",
)
@pass_context
def validate(ctx: Context, strict: bool) -> None:
    """
    Check that every host in the store resolves.

    For each host: the cluster exists, the inventory parses, an
    installation disk can be selected, and the ignition endpoint resolves.

    Examples:

        # Basic validation
        hostresolve validate

        # Fail when a host has no disk or lost its recorded disk
        hostresolve validate --strict
    """
    from hostresolve.core.disks import parse_inventory, select_disk
    from hostresolve.core.endpoint import EndpointResolver
    from hostresolve.core.errors import ResolutionError

    errors: list[str] = []
    warnings: list[str] = []

    console.print("[bold]Loading store...[/bold]")
    try:
        store = ctx.store
        settings = ctx.settings
        console.print(f"  [green]✓[/green] Store loaded: {len(store)} hosts, {len(store.clusters)} clusters")
    except Exception as e:
        console.print(f"  [red]✗[/red] Store validation failed: {escape(str(e))}")
        raise SystemExit(1)

    resolver = EndpointResolver(settings)

    console.print("[bold]Resolving hosts...[/bold]")
    for host in store:
        try:
            cluster = store.cluster_for(host)
            inventory = parse_inventory(host.inventory, host.id)
            selected = select_disk(inventory.disks, host.installation_disk_id)
            resolver.resolve(cluster, host)
        except ResolutionError as e:
            errors.append(str(e))
            console.print(f"  [red]✗[/red] {escape(host.id)}: {escape(str(e))}")
            continue

        if selected is None:
            warnings.append(f"Host {host.id}: no disks in inventory")
        elif host.installation_disk_id and selected.id != host.installation_disk_id:
            warnings.append(
                f"Host {host.id}: recorded disk {host.installation_disk_id} is gone, would select {selected.id}"
            )

    if not errors:
        console.print(f"  [green]✓[/green] All hosts resolvable")

    # Summary
    console.print("\n[bold]Validation Summary[/bold]")
    console.print(f"  Errors: {len(errors)}")
    console.print(f"  Warnings: {len(warnings)}")

    if errors:
        console.print("\n[red bold]Validation failed[/red bold]")
        raise SystemExit(1)

    if warnings and strict:
        console.print("\n[yellow bold]Validation failed (strict mode)[/yellow bold]")
        for warn in warnings:
            console.print(f"  [yellow]•[/yellow] {escape(warn)}")
        raise SystemExit(1)

    if warnings:
        console.print("\n[yellow]Warnings:[/yellow]")
        for warn in warnings:
            console.print(f"  [yellow]•[/yellow] {escape(warn)}")

    console.print("\n[green bold]Validation passed[/green bold]")
