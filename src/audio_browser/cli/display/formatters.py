"""Display formatters and UI helpers for CLI."""

from typing import Any, Dict, Iterable, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ...core.storage import SourceResult
from ...models import BrowserState, Entry

console = Console()


def _entry_label(entry: Entry) -> str:
    icon = "📁" if entry.is_directory else "🎵"
    pin = " 📌" if entry.is_pinned else ""
    return f"{icon} {escape(entry.name)}{pin}"


def display_entries(entries: Sequence[Entry], title: str = "") -> None:
    """Display a numbered table of entries.

    Args:
        entries: Entries in display order
        title: Optional table title
    """
    if not entries:
        console.print("[dim]No directories or audio files here.[/dim]")
        return

    table = Table(title=title or None, show_header=True, header_style="bold magenta")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Path", style="dim", overflow="fold")

    for index, entry in enumerate(entries, start=1):
        table.add_row(str(index), _entry_label(entry), escape(entry.path))

    console.print(table)


def display_volumes(volumes: Sequence[Entry]) -> None:
    """Display discovered storage volumes."""
    table = Table(
        title="Storage Volumes", show_header=True, header_style="bold magenta"
    )
    table.add_column("#", style="dim", justify="right")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Path", style="green", overflow="fold")
    table.add_column("Primary", justify="center")

    for index, volume in enumerate(volumes, start=1):
        table.add_row(
            str(index),
            escape(volume.name),
            escape(volume.path),
            "✅" if volume.is_primary else "",
        )

    console.print(table)


def display_source_summary(sources: Iterable[SourceResult]) -> None:
    """Display the outcome of each discovery source."""
    labels = ("External storage directories", "Storage root scan")
    for label, source in zip(labels, sources):
        if source.failed:
            reason = escape(str(source.error))
            console.print(f"  [yellow]⚠️ {label}: failed ({reason})[/yellow]")
        else:
            count = len(source.volumes)
            console.print(f"  [green]✓[/green] {label}: {count} volume(s)")


def display_state(state: BrowserState) -> None:
    """Display a browser snapshot: header, error and items."""
    if state.is_root_screen:
        display_entries(state.items, title="Storage Volumes")
    else:
        console.print(
            f"\n[bold]{escape(state.current_path)}[/bold] "
            f"[dim](root: {escape(state.root_path or '')})[/dim]"
        )
        display_entries(state.items)

    if state.error:
        console.print(f"[red]❌ {escape(state.error)}[/red]")


def display_favorites(entries: Sequence[Entry], stats: Dict[str, Any]) -> None:
    """Display pinned entries with store statistics."""
    display_entries(entries, title="Favorites")
    if stats:
        console.print(
            f"[dim]{stats.get('favorites', len(entries))} favorite(s) - "
            f"{stats.get('directories', 0)} directories, "
            f"{stats.get('files', 0)} files[/dim]"
        )
