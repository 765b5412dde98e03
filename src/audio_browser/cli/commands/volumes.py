"""Volume discovery command."""

import click

from ..display import console, display_source_summary, display_volumes
from .app import BrowserApp


@click.command("volumes")
@click.option("--verbose", "-v", is_flag=True, help="Show per-source results")
@click.pass_obj
def volumes_command(app: BrowserApp, verbose: bool) -> None:
    """List the storage volumes available for browsing."""
    discovery = app.discovery()
    found = discovery.discover_volumes()
    display_volumes(found)

    if verbose:
        console.print("\n[bold]Sources[/bold]")
        display_source_summary(discovery.last_results)
