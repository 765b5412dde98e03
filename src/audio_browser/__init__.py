"""Audio Browser.

Storage-volume discovery and directory navigation for browsing audio files
on a device's mounted volumes.
"""

__version__ = "1.0.0"
__author__ = "Anton"
__email__ = ""

from .config import Config
from .core import Navigator, PermissionGate, VolumeDiscovery
from .models import BrowserState, Entry

__all__ = [
    "BrowserState",
    "Config",
    "Entry",
    "Navigator",
    "PermissionGate",
    "VolumeDiscovery",
]
