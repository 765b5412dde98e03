"""Storage module.

Discovers the mounted storage volumes a session can browse.
"""

from .discovery import (
    INTERNAL_STORAGE_NAME,
    REMOVABLE_STORAGE_NAME,
    SourceResult,
    VolumeDiscovery,
    environment_storage_directories,
)

__all__ = [
    "VolumeDiscovery",
    "SourceResult",
    "environment_storage_directories",
    "INTERNAL_STORAGE_NAME",
    "REMOVABLE_STORAGE_NAME",
]
