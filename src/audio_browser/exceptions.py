"""Exceptions raised inside the browsing core.

None of these cross the Navigator boundary: the navigator converts them into
the ``error`` field of the next state snapshot.
"""


class BrowserError(Exception):
    """Base class for audio browser errors."""


class PermissionDeniedError(BrowserError):
    """The user or the OS refused storage access."""

    def __init__(self, message: str = "Storage permission denied") -> None:
        """Initialize with the user-facing message."""
        super().__init__(message)


class DirectoryNotFoundError(BrowserError):
    """Target directory is missing or was removed between checks."""

    def __init__(self, path: str, message: str = "Directory does not exist") -> None:
        """Initialize with the missing path and the user-facing message."""
        super().__init__(message)
        self.path = path


class FavoritesError(BrowserError):
    """Favorites store could not complete an operation."""
