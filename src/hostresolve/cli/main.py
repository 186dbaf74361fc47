"""Main CLI entry point for hostresolve."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.markup import escape

from hostresolve import __version__

console = Console()

# Default paths (can be overridden)
DEFAULT_STORE = "hosts.yml"


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.store_path: Path | None = None
        self.settings_path: Path | None = None
        self.verbose: bool = False
        self._store: Any = None
        self._settings: Any = None

    @property
    def store(self) -> Any:
        """Lazy-load the host/cluster store."""
        if self._store is None:
            from hostresolve.core.records import RecordStore

            if self.store_path and self.store_path.exists():
                self._store = RecordStore.load(self.store_path)
            else:
                raise click.ClickException(f"Store not found: {self.store_path}")
        return self._store

    @property
    def settings(self) -> Any:
        """Lazy-load resolver settings; defaults when no file is given."""
        if self._settings is None:
            from hostresolve.core.schema import ResolverSettings

            if self.settings_path is None:
                self._settings = ResolverSettings()
            elif self.settings_path.exists():
                self._settings = ResolverSettings.load(self.settings_path)
            else:
                raise click.ClickException(f"Settings not found: {self.settings_path}")
        return self._settings

    def host_and_cluster(self, host_id: str) -> Any:
        """Look up a host and its cluster, exiting on a miss."""
        from hostresolve.core.errors import ResolutionError

        try:
            host = self.store.get_host(host_id)
            return host, self.store.cluster_for(host)
        except ResolutionError as e:
            console.print(f"[red]Error:[/red] {escape(str(e))}")
            raise SystemExit(1)


pass_context = click.make_pass_decorator(Context, ensure=True)


@click.group()
@click.version_option(version=__version__, prog_name="hostresolve")
@click.option(
    "-s",
    "--store",
    type=click.Path(exists=False, path_type=Path),
    default=DEFAULT_STORE,
    help="Path to hosts/clusters YAML file",
)
@click.option(
    "--settings",
    type=click.Path(exists=False, path_type=Path),
    default=None,
    help="Path to resolver settings YAML file",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@pass_context
def cli(ctx: Context, store: Path, settings: Path | None, verbose: bool) -> None:
    """
    Hostresolve - installation disk and ignition endpoint resolution.

    Decide which disk a host installs to and where its first boot
    fetches the ignition config from.
    """
    ctx.store_path = store
    ctx.settings_path = settings
    ctx.verbose = verbose
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from hostresolve.cli.disk import disk, disks
from hostresolve.cli.endpoint import endpoint
from hostresolve.cli.validate import validate

cli.add_command(disk)
cli.add_command(disks)
cli.add_command(endpoint)
cli.add_command(validate)


@cli.command()
@click.option("-c", "--cluster", "cluster_id", default=None, help="Only list hosts of this cluster")
@click.option("--json", "as_json", is_flag=True, help="Print host records as JSON")
@pass_context
def hosts(ctx: Context, cluster_id: str | None, as_json: bool) -> None:
    """List hosts in the store."""
    from rich.table import Table

    from hostresolve.core.errors import ResolutionError

    try:
        store = ctx.store
        if cluster_id:
            store.get_cluster(cluster_id)
            records = store.hosts_in_cluster(cluster_id)
        else:
            records = list(store)
    except click.ClickException as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return
    except ResolutionError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(1)

    records = sorted(records, key=lambda h: h.id)

    if as_json:
        click.echo(json.dumps([h.to_dict() for h in records], indent=2))
        return

    table = Table(title="Hosts")
    table.add_column("ID", style="cyan")
    table.add_column("Cluster", style="dim")
    table.add_column("Role")
    table.add_column("Pool")
    table.add_column("Installation Disk")

    for host in records:
        table.add_row(
            host.id,
            host.cluster_id or "-",
            host.raw_role or "-",
            host.machine_config_pool_name or "-",
            host.installation_disk_id or host.installation_disk_path or "-",
        )

    console.print(table)


@cli.command()
@click.argument("cluster_id")
@pass_context
def cluster(ctx: Context, cluster_id: str) -> None:
    """Print a cluster record and its host IDs as JSON."""
    from hostresolve.core.errors import ResolutionError

    try:
        record = ctx.store.get_cluster(cluster_id)
    except ResolutionError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(1)

    data = record.to_dict()
    data["hosts"] = sorted(h.id for h in ctx.store.hosts_in_cluster(cluster_id))
    click.echo(json.dumps(data, indent=2, sort_keys=True))


@cli.command()
@click.argument("host_id")
@pass_context
def encryption(ctx: Context, host_id: str) -> None:
    """Show whether disk encryption applies to a host."""
    from hostresolve.core.policy import is_encryption_enabled_for_host

    host, cluster = ctx.host_and_cluster(host_id)
    enabled = is_encryption_enabled_for_host(cluster, host)
    console.print("enabled" if enabled else "disabled")


if __name__ == "__main__":
    cli()
