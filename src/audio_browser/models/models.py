"""Data models for the audio browser.

Both models are frozen: the navigator never mutates a snapshot, it builds the
next one from the previous one.
"""

from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator


class Entry(BaseModel):
    """One file or directory node as exposed to the browsing UI."""

    path: str
    name: str
    is_directory: bool
    is_pinned: bool = False
    is_primary: bool = False

    model_config = ConfigDict(frozen=True)

    @field_validator("path", mode="before")
    @classmethod
    def validate_path(cls, v: Any) -> str:
        """Accept path-like values."""
        return str(v)

    def with_pin(self, pinned: bool) -> "Entry":
        """Return a copy carrying a different pin flag."""
        if pinned == self.is_pinned:
            return self
        return self.model_copy(update={"is_pinned": pinned})


class BrowserState(BaseModel):
    """Immutable snapshot of a browsing session.

    On the volume-selection screen ``current_path`` is empty and ``items`` is
    the cached ``storages`` sequence. On the listing screen ``root_path`` and
    ``current_path`` are both set and ``items`` holds the filtered listing.
    """

    root_path: Optional[str] = None
    current_path: str = ""
    items: Tuple[Entry, ...] = ()
    is_loading: bool = False
    error: Optional[str] = None
    is_root_screen: bool = True
    storages: Tuple[Entry, ...] = ()

    model_config = ConfigDict(frozen=True)

    def evolve(self, **changes: Any) -> "BrowserState":
        """Build the next snapshot.

        ``error`` is cleared unless it is part of ``changes``.
        """
        changes.setdefault("error", None)
        for key in ("items", "storages"):
            if key in changes:
                changes[key] = tuple(changes[key])
        return self.model_copy(update=changes)

    def find_item(self, path: str) -> Optional[Entry]:
        """Return the visible entry with ``path``, if any."""
        for item in self.items:
            if item.path == path:
                return item
        return None
