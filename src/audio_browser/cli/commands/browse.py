"""Directory listing and interactive browsing commands."""

import asyncio
import logging
from typing import Optional

import click
from rich.markup import escape

from ...core import Navigator
from ..display import console, display_entries, display_state
from .app import BrowserApp

logger = logging.getLogger(__name__)

BROWSE_HELP = (
    "[dim]<n> open · b back · p <n> pin/unpin · f favorites · r refresh · q quit[/dim]"
)


@click.command("ls")
@click.argument("path", type=click.Path(file_okay=False, path_type=str))
@click.pass_obj
def ls_command(app: BrowserApp, path: str) -> None:
    """List the directories and audio files in PATH."""
    navigator = app.navigator()
    asyncio.run(navigator.navigate_to(path, set_root=True))

    state = navigator.state
    if state.error:
        console.print(f"[red]❌ {escape(state.error)}[/red]")
        raise click.exceptions.Exit(1)

    display_entries(state.items, title=path)


def _parse_index(raw: str, navigator: Navigator) -> Optional[int]:
    """Convert a 1-based item number into an index into the current items."""
    try:
        index = int(raw) - 1
    except ValueError:
        return None
    if 0 <= index < len(navigator.state.items):
        return index
    return None


async def _browse(navigator: Navigator) -> None:
    await navigator.init()

    while True:
        display_state(navigator.state)
        console.print(BROWSE_HELP)
        command = click.prompt(">", default="q", show_default=False).strip()

        if command in ("q", "quit"):
            return
        if command in ("b", "back"):
            await navigator.go_back()
            continue
        if command in ("f", "favorites"):
            display_entries(await navigator.favorites(), title="Favorites")
            continue
        if command in ("r", "refresh"):
            state = navigator.state
            if state.is_root_screen:
                await navigator.init()
            else:
                await navigator.navigate_to(state.current_path)
            continue
        if command.startswith("p"):
            index = _parse_index(command[1:].strip(), navigator)
            if index is None:
                console.print("[yellow]Usage: p <number>[/yellow]")
                continue
            await navigator.toggle_pin(navigator.state.items[index])
            continue

        index = _parse_index(command, navigator)
        if index is None:
            console.print(f"[yellow]Unknown command: {command}[/yellow]")
            continue

        entry = navigator.state.items[index]
        if not entry.is_directory:
            console.print(f"🎵 {entry.path}")
            continue
        await navigator.navigate_to(entry.path)


@click.command("browse")
@click.pass_obj
def browse_command(app: BrowserApp) -> None:
    """Browse storage volumes interactively."""
    asyncio.run(_browse(app.navigator()))
