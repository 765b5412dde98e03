"""Navigator: the browsing state machine.

The navigator owns one :class:`BrowserState` snapshot and replaces it
wholesale on every transition. It has two screens: volume selection (the
initial screen, listing the discovered volumes) and a directory listing.
Filesystem work runs in a worker thread via :func:`asyncio.to_thread`.

Every operation converts its failures into the snapshot's ``error`` field;
nothing is raised to the caller.
"""

import asyncio
import logging
import os
from typing import Callable, Iterable, List, Optional

from ..config import DEFAULT_AUDIO_EXTENSIONS
from ..exceptions import DirectoryNotFoundError, PermissionDeniedError
from ..models import BrowserState, Entry
from .favorites import FavoritesStore
from .permissions import PermissionGate
from .storage import VolumeDiscovery

logger = logging.getLogger(__name__)

StateListener = Callable[[BrowserState], None]


def audio_extension_of(path: str) -> str:
    """Return the final dot-delimited suffix of ``path``, lowercased."""
    return "." + path.rsplit(".", 1)[-1].lower()


def entry_sort_key(entry: Entry) -> tuple:
    """Directories first, then case-insensitive name."""
    return (not entry.is_directory, entry.name.lower())


def list_directory(
    path: str, extensions: Iterable[str] = DEFAULT_AUDIO_EXTENSIONS
) -> List[Entry]:
    """List the browsable children of ``path``.

    Keeps every directory and the files whose suffix is in ``extensions``.
    Symlinks are not followed. Enumeration errors yield an empty list.

    Args:
        path: Directory to list
        extensions: Allowed lowercase file suffixes, dot included

    Returns:
        Unsorted, unpinned entries
    """
    allowed = {ext.lower() for ext in extensions}
    entries: List[Entry] = []
    try:
        with os.scandir(path) as children:
            for child in children:
                is_dir = child.is_dir(follow_symlinks=False)
                if not is_dir and audio_extension_of(child.path) not in allowed:
                    continue
                entries.append(
                    Entry(
                        path=child.path,
                        name=os.path.basename(child.path) or "/",
                        is_directory=is_dir,
                    )
                )
    except OSError as e:
        logger.warning("Could not list %s: %s", path, e)
        return []
    return entries


class Navigator:
    """Browsing session over the device's storage volumes."""

    def __init__(
        self,
        discovery: Optional[VolumeDiscovery] = None,
        permission_gate: Optional[PermissionGate] = None,
        favorites_store: Optional[FavoritesStore] = None,
        audio_extensions: Iterable[str] = DEFAULT_AUDIO_EXTENSIONS,
    ) -> None:
        """Initialize navigator.

        Args:
            discovery: Volume discovery service
            permission_gate: Storage permission gate
            favorites_store: Optional pin store; pins are disabled without one
            audio_extensions: File suffixes shown in listings
        """
        self.discovery = discovery or VolumeDiscovery()
        self.permission_gate = permission_gate or PermissionGate()
        self.favorites_store = favorites_store
        self.audio_extensions = tuple(ext.lower() for ext in audio_extensions)
        self._state = BrowserState()
        self._listeners: List[StateListener] = []
        self._request_seq = 0
        self._pin_version = 0

    @property
    def state(self) -> BrowserState:
        """Current snapshot."""
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register ``listener`` for every new snapshot.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set_state(self, state: BrowserState) -> None:
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("State listener failed")

    def _next_request(self) -> int:
        self._request_seq += 1
        return self._request_seq

    def _is_stale(self, request: int) -> bool:
        if request != self._request_seq:
            logger.debug(
                "Discarding stale request %d (latest %d)", request, self._request_seq
            )
            return True
        return False

    async def init(self) -> None:
        """Discover volumes and show the volume-selection screen."""
        request = self._next_request()
        previous = self._state
        self._set_state(previous.evolve(is_loading=True))
        try:
            storages = await asyncio.to_thread(self._load_volumes)
        except Exception as e:
            logger.error("Volume discovery failed: %s", e)
            if not self._is_stale(request):
                self._set_state(previous.evolve(is_loading=False, error=str(e)))
            return

        if self._is_stale(request):
            return
        self._set_state(
            self._state.evolve(
                storages=storages,
                items=storages,
                current_path="",
                is_root_screen=True,
                is_loading=False,
            )
        )

    async def navigate_to(self, path: str, set_root: bool = False) -> None:
        """Show the filtered listing of ``path``.

        Leaving the volume-selection screen checks storage permission first
        and makes ``path`` the browsing root.

        Args:
            path: Directory to list
            set_root: Also make ``path`` the browsing root
        """
        request = self._next_request()
        previous = self._state
        state = previous.evolve(is_loading=True)
        self._set_state(state)
        try:
            if state.is_root_screen:
                granted = await asyncio.to_thread(
                    self.permission_gate.ensure_permission
                )
                if not granted:
                    raise PermissionDeniedError()
                state = state.evolve(is_root_screen=False, root_path=path)

            if not await asyncio.to_thread(os.path.isdir, path):
                raise DirectoryNotFoundError(path)

            pin_version = self._pin_version
            entries = await asyncio.to_thread(self._load_listing, path)
            if self._pin_version != pin_version:
                # A pin toggled while the listing was loading
                entries = await asyncio.to_thread(self._apply_pins, entries)
        except (PermissionDeniedError, DirectoryNotFoundError) as e:
            logger.info("Navigation to %s refused: %s", path, e)
            if not self._is_stale(request):
                self._set_state(previous.evolve(is_loading=False, error=str(e)))
            return
        except Exception as e:
            logger.error("Navigation to %s failed: %s", path, e)
            if not self._is_stale(request):
                self._set_state(previous.evolve(is_loading=False, error=str(e)))
            return

        if self._is_stale(request):
            return
        self._set_state(
            state.evolve(
                root_path=path if set_root else state.root_path,
                current_path=path,
                items=entries,
                is_loading=False,
                is_root_screen=False,
            )
        )
        logger.debug("Listed %s: %d entries", path, len(entries))

    async def go_back(self) -> None:
        """Go to the parent directory, or to volume selection from the root."""
        state = self._state
        if state.is_root_screen:
            return

        current = os.path.normpath(state.current_path)
        root = os.path.normpath(state.root_path or "")
        if current == root:
            # Supersedes any navigation still in flight
            self._next_request()
            self._set_state(
                state.evolve(
                    is_root_screen=True,
                    current_path="",
                    items=state.storages,
                    is_loading=False,
                )
            )
            return

        await self.navigate_to(os.path.dirname(current))

    async def toggle_pin(self, entry: Entry) -> None:
        """Flip the pin state of ``entry`` and reflect it in the snapshot."""
        store = self.favorites_store
        if store is None:
            logger.debug("No favorites store configured; ignoring pin toggle")
            return

        try:
            pinned = not await asyncio.to_thread(store.is_pinned, entry.path)
            await asyncio.to_thread(store.set_pinned, entry, pinned)
            self._pin_version += 1
        except Exception as e:
            logger.error("Could not toggle pin for %s: %s", entry.path, e)
            self._set_state(self._state.evolve(error=str(e)))
            return

        def repin(entries: Iterable[Entry]) -> List[Entry]:
            return [
                item.with_pin(pinned) if item.path == entry.path else item
                for item in entries
            ]

        current = self._state
        self._set_state(
            current.evolve(items=repin(current.items), storages=repin(current.storages))
        )
        logger.info("%s %s", "Pinned" if pinned else "Unpinned", entry.path)

    async def favorites(self) -> List[Entry]:
        """Return the pinned entries, or an empty list without a store."""
        store = self.favorites_store
        if store is None:
            return []
        try:
            return await asyncio.to_thread(store.list_pinned)
        except Exception as e:
            logger.error("Could not read favorites: %s", e)
            self._set_state(self._state.evolve(error=str(e)))
            return []

    def _load_volumes(self) -> List[Entry]:
        return self._apply_pins(self.discovery.discover_volumes())

    def _load_listing(self, path: str) -> List[Entry]:
        entries = list_directory(path, self.audio_extensions)
        return sorted(self._apply_pins(entries), key=entry_sort_key)

    def _apply_pins(self, entries: List[Entry]) -> List[Entry]:
        """Hydrate ``is_pinned`` from the favorites store."""
        store = self.favorites_store
        if store is None:
            return entries
        return [entry.with_pin(store.is_pinned(entry.path)) for entry in entries]
