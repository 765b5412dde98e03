"""Favorites (pinned paths) commands."""

import os

import click
from rich.markup import escape

from ...exceptions import FavoritesError
from ...models import Entry
from ..display import console, display_favorites
from .app import BrowserApp


@click.group("pins")
def pins() -> None:
    """Manage pinned files and directories."""
    pass


@pins.command("list")
@click.pass_obj
def list_pins(app: BrowserApp) -> None:
    """Show pinned entries, oldest first."""
    service = app.favorites_service
    entries = app.favorites.list_pinned()
    display_favorites(entries, service.get_statistics() if service else {})


@pins.command("add")
@click.argument("path", type=click.Path(exists=True, path_type=str))
@click.pass_obj
def add_pin(app: BrowserApp, path: str) -> None:
    """Pin PATH."""
    path = os.path.abspath(path)
    entry = Entry(
        path=path,
        name=os.path.basename(path) or "/",
        is_directory=os.path.isdir(path),
    )
    app.favorites.set_pinned(entry, True)
    console.print(f"[green]📌 Pinned {entry.path}[/green]")


@pins.command("remove")
@click.argument("path", type=str)
@click.pass_obj
def remove_pin(app: BrowserApp, path: str) -> None:
    """Unpin PATH."""
    path = os.path.abspath(path)
    service = app.favorites_service
    if service is None:
        console.print("[red]❌ Pins are not persisted with --no-persist[/red]")
        raise click.exceptions.Exit(1)
    try:
        service.remove_favorite(path)
    except FavoritesError as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise click.exceptions.Exit(1) from e
    console.print(f"[green]Unpinned {path}[/green]")
