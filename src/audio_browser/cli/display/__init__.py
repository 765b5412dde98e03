"""Display formatters for CLI output."""

from .formatters import (
    console,
    display_entries,
    display_favorites,
    display_source_summary,
    display_state,
    display_volumes,
)

__all__ = [
    "console",
    "display_entries",
    "display_favorites",
    "display_source_summary",
    "display_state",
    "display_volumes",
]
