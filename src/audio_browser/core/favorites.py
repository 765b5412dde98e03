"""Favorites (pinned paths) capability.

The navigator only reads and writes pins through :class:`FavoritesStore`;
the SQLite-backed implementation lives in ``audio_browser.database``.
"""

import logging
from typing import Dict, List, Protocol

from ..models import Entry

logger = logging.getLogger(__name__)


class FavoritesStore(Protocol):
    """Pin state keyed by path."""

    def is_pinned(self, path: str) -> bool:
        """Return whether ``path`` is pinned."""
        ...

    def set_pinned(self, entry: Entry, pinned: bool) -> None:
        """Pin or unpin ``entry``."""
        ...

    def list_pinned(self) -> List[Entry]:
        """Return the pinned entries in pin order."""
        ...


class InMemoryFavoritesStore:
    """Favorites store that lives for the process only."""

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._entries: Dict[str, Entry] = {}

    def is_pinned(self, path: str) -> bool:
        """Return whether ``path`` is pinned."""
        return path in self._entries

    def set_pinned(self, entry: Entry, pinned: bool) -> None:
        """Pin or unpin ``entry``."""
        if pinned:
            self._entries[entry.path] = entry.with_pin(True)
            logger.debug("Pinned %s", entry.path)
        elif self._entries.pop(entry.path, None) is not None:
            logger.debug("Unpinned %s", entry.path)

    def list_pinned(self) -> List[Entry]:
        """Return the pinned entries in pin order."""
        return list(self._entries.values())
