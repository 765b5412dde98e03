"""Storage volume discovery.

Two independent sources feed the volume list:

1. The platform's external-storage directory list (app-specific directories
   such as ``/storage/emulated/0/Android/data/<pkg>/files``), reduced to the
   volume each one lives on.
2. A raw scan of the storage root for UUID-named removable mounts
   (``/storage/ABCD-1234``).

Results are merged in that order and deduplicated by path. The primary
volume is always present and always first.
"""

import logging
import os
import re
from dataclasses import dataclass
from dataclasses import field as dataclass_field
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Set, Union

from ...models import Entry

logger = logging.getLogger(__name__)

INTERNAL_STORAGE_NAME = "Internal Storage"
REMOVABLE_STORAGE_NAME = "SD Card"

PRIMARY_VOLUME_ID = "emulated"
PRIMARY_USER_DIR = "0"
SKIPPED_MOUNTS = frozenset({"emulated", "self", "sdcard0"})
UUID_MOUNT_PATTERN = re.compile(r"^[0-9A-F]{4}-[0-9A-F]{4}$", re.IGNORECASE)

ExternalDirectoriesProvider = Callable[[], Optional[Iterable[Union[str, Path]]]]


def environment_storage_directories() -> List[str]:
    """Return the external storage directories advertised by the environment.

    Android exports ``EXTERNAL_STORAGE`` and a colon-separated
    ``SECONDARY_STORAGE``; elsewhere both are usually unset.
    """
    directories: List[str] = []
    for var in ("EXTERNAL_STORAGE", "SECONDARY_STORAGE"):
        value = os.environ.get(var, "")
        directories.extend(part for part in value.split(":") if part)
    return directories


@dataclass
class SourceResult:
    """Outcome of a single discovery source.

    ``failed`` separates "ran and found nothing" from "errored"; callers
    treat both as zero volumes.
    """

    volumes: List[Entry] = dataclass_field(default_factory=list)
    failed: bool = False
    error: Optional[str] = None

    @classmethod
    def failure(cls, exc: BaseException) -> "SourceResult":
        """Build a failed result from an exception."""
        return cls(volumes=[], failed=True, error=str(exc))


class VolumeDiscovery:
    """Enumerates the browsable storage roots of the device."""

    def __init__(
        self,
        storage_root: Union[str, Path] = "/storage",
        external_directories: Optional[ExternalDirectoriesProvider] = None,
    ) -> None:
        """Initialize volume discovery.

        Args:
            storage_root: Directory holding every mounted volume
            external_directories: Callable returning the platform's external
                storage directories; defaults to the environment lookup
        """
        self.storage_root = Path(storage_root)
        self.external_directories = (
            external_directories or environment_storage_directories
        )
        self.last_results: List[SourceResult] = []

    @property
    def primary_path(self) -> str:
        """Canonical path of the primary volume."""
        return str(self.storage_root / PRIMARY_VOLUME_ID / PRIMARY_USER_DIR)

    def primary_entry(self) -> Entry:
        """Build the primary volume entry."""
        return Entry(
            path=self.primary_path,
            name=INTERNAL_STORAGE_NAME,
            is_directory=True,
            is_primary=True,
        )

    def discover_volumes(self) -> List[Entry]:
        """Discover storage volumes.

        Returns:
            Volumes in source order, primary first
        """
        results = [self.read_external_directories(), self.scan_storage_mounts()]
        self.last_results = results

        volumes: List[Entry] = []
        seen: Set[str] = set()
        for result in results:
            if result.failed:
                logger.debug("Volume source failed: %s", result.error)
            for volume in result.volumes:
                if volume.path in seen:
                    continue
                seen.add(volume.path)
                volumes.append(volume)

        if not any(volume.is_primary for volume in volumes):
            volumes.insert(0, self.primary_entry())
        else:
            # Stable: the other volumes keep source order
            volumes.sort(key=lambda volume: not volume.is_primary)

        logger.info("Discovered %d storage volume(s)", len(volumes))
        return volumes

    def read_external_directories(self) -> SourceResult:
        """Map the platform's external storage directories to volumes."""
        try:
            directories = self.external_directories() or []
            volumes: List[Entry] = []
            seen: Set[str] = set()
            for directory in directories:
                volume = self._volume_for_directory(Path(directory))
                if volume is None or volume.path in seen:
                    continue
                seen.add(volume.path)
                volumes.append(volume)
            return SourceResult(volumes=volumes)
        except Exception as e:
            return SourceResult.failure(e)

    def scan_storage_mounts(self) -> SourceResult:
        """Scan the storage root for UUID-named removable volumes."""
        try:
            if not self.storage_root.is_dir():
                return SourceResult()

            with os.scandir(self.storage_root) as entries:
                names = sorted(entry.name for entry in entries)

            volumes = [
                Entry(
                    path=str(self.storage_root / name),
                    name=REMOVABLE_STORAGE_NAME,
                    is_directory=True,
                )
                for name in names
                if name not in SKIPPED_MOUNTS and UUID_MOUNT_PATTERN.match(name)
            ]
            return SourceResult(volumes=volumes)
        except OSError as e:
            return SourceResult.failure(e)

    def _volume_for_directory(self, directory: Path) -> Optional[Entry]:
        """Reduce a path under the storage root to the volume holding it.

        The path must have at least one segment below the volume id.
        """
        try:
            parts = directory.relative_to(self.storage_root).parts
        except ValueError:
            logger.debug("Ignoring directory outside storage root: %s", directory)
            return None

        if len(parts) < 2:
            return None

        volume_id = parts[0]
        if volume_id == PRIMARY_VOLUME_ID:
            return self.primary_entry()
        return Entry(
            path=str(self.storage_root / volume_id),
            name=REMOVABLE_STORAGE_NAME,
            is_directory=True,
        )
