"""Storage permission gate."""

import logging
from enum import Enum
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


class PermissionStatus(str, Enum):
    """Grant status reported by the OS permission subsystem."""

    GRANTED = "granted"
    DENIED = "denied"
    PERMANENTLY_DENIED = "permanently_denied"
    RESTRICTED = "restricted"


class PermissionBackend(Protocol):
    """OS permission subsystem for broad storage access."""

    def status(self) -> PermissionStatus:
        """Return the current grant status."""
        ...

    def request(self) -> PermissionStatus:
        """Show the interactive grant request and return its result."""
        ...

    def open_settings(self) -> None:
        """Open the system settings screen for this app."""
        ...


class PermissionGate:
    """Ensures the process may read arbitrary storage paths."""

    def __init__(self, backend: Optional[PermissionBackend] = None) -> None:
        """Initialize the gate.

        Args:
            backend: OS permission backend; None on platforms without a
                storage-permission model, where access is always granted
        """
        self.backend = backend

    def ensure_permission(self) -> bool:
        """Check, and if needed request, storage access.

        Returns:
            True if access is granted after this call
        """
        if self.backend is None:
            return True

        status = self.backend.status()
        if status == PermissionStatus.GRANTED:
            return True

        logger.info("Requesting storage permission (current: %s)", status.value)
        status = self.backend.request()
        if status == PermissionStatus.PERMANENTLY_DENIED:
            self._open_settings()

        granted = status == PermissionStatus.GRANTED
        if not granted:
            logger.warning("Storage permission not granted: %s", status.value)
        return granted

    def _open_settings(self) -> None:
        """Open system settings; failures do not affect the grant result."""
        try:
            self.backend.open_settings()  # type: ignore[union-attr]
        except Exception as e:
            logger.warning("Could not open app settings: %s", e)
