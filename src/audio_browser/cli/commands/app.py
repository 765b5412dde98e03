"""Application context shared by CLI commands."""

import logging
from pathlib import Path
from typing import Optional

from ...config import Config
from ...core import InMemoryFavoritesStore, Navigator, PermissionGate, VolumeDiscovery
from ...core.favorites import FavoritesStore
from ...database import FavoritesService

logger = logging.getLogger(__name__)


class BrowserApp:
    """Wires configuration, storage and the favorites store for a CLI run."""

    def __init__(self, config: Optional[Config] = None, persist: bool = True) -> None:
        """Initialize the application.

        Args:
            config: Configuration; loaded from the environment when omitted
            persist: Keep favorites in the SQLite database; in memory otherwise
        """
        self.config = config or Config()
        self.persist = persist
        self._favorites: Optional[FavoritesStore] = None

    def set_storage_root(self, storage_root: Path) -> None:
        """Override the configured storage root."""
        self.config.storage_root = storage_root

    @property
    def favorites(self) -> FavoritesStore:
        """Favorites store, opened on first use."""
        if self._favorites is None:
            if self.persist:
                self._favorites = FavoritesService(self.config.favorites_db_path)
            else:
                self._favorites = InMemoryFavoritesStore()
        return self._favorites

    @property
    def favorites_service(self) -> Optional[FavoritesService]:
        """The persistent favorites service, if persistence is enabled."""
        store = self.favorites
        return store if isinstance(store, FavoritesService) else None

    def discovery(self) -> VolumeDiscovery:
        """Build volume discovery for the configured storage root."""
        return VolumeDiscovery(storage_root=self.config.storage_root)

    def navigator(self) -> Navigator:
        """Build a navigator session."""
        return Navigator(
            discovery=self.discovery(),
            permission_gate=PermissionGate(),
            favorites_store=self.favorites,
            audio_extensions=self.config.audio_extensions,
        )

    def close(self) -> None:
        """Release the favorites database."""
        if isinstance(self._favorites, FavoritesService):
            self._favorites.close()
        self._favorites = None
