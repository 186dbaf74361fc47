"""Ignition endpoint CLI command."""

from __future__ import annotations

import click
from rich.console import Console
from rich.markup import escape

from hostresolve.cli.main import Context, pass_context

console = Console()


@click.command()
@click.argument("host_id")
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["url", "json", "request"]),
    default="url",
    help="Output format",
)
@pass_context
def endpoint(ctx: Context, host_id: str, output_format: str) -> None:
    """
    Resolve the ignition endpoint for a host.

    Examples:

        # Get the ignition URL
        hostresolve endpoint 7d8f...

        # URL and merged CA bundle as JSON
        hostresolve endpoint 7d8f... --format json

        # API VIP connectivity check request
        hostresolve endpoint 7d8f... --format request
    """
    import json

    from hostresolve.core.connectivity import build_connectivity_request
    from hostresolve.core.endpoint import EndpointResolver
    from hostresolve.core.errors import ResolutionError

    host, cluster = ctx.host_and_cluster(host_id)

    try:
        if output_format == "request":
            request = build_connectivity_request(cluster, host, ctx.settings)
            click.echo(request.to_json())
            return

        resolved = EndpointResolver(ctx.settings).resolve(cluster, host)
        if output_format == "url":
            click.echo(resolved.url)
        else:
            click.echo(json.dumps(resolved.to_dict(), indent=2))

    except ResolutionError as e:
        console.print(f"[red]Resolution error:[/red] {escape(str(e))}")
        raise SystemExit(1)
