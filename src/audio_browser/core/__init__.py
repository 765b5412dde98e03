"""Browsing core: volume discovery, permission gate, navigator."""

from .favorites import FavoritesStore, InMemoryFavoritesStore
from .navigator import Navigator, audio_extension_of, list_directory
from .permissions import PermissionBackend, PermissionGate, PermissionStatus
from .storage import SourceResult, VolumeDiscovery

__all__ = [
    "Navigator",
    "list_directory",
    "audio_extension_of",
    "PermissionGate",
    "PermissionBackend",
    "PermissionStatus",
    "VolumeDiscovery",
    "SourceResult",
    "FavoritesStore",
    "InMemoryFavoritesStore",
]
