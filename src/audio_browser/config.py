"""Configuration management for the audio browser."""

import os
from pathlib import Path
from typing import Tuple

from dotenv import load_dotenv

# Load .env file from config directory or project root
config_env = Path(__file__).parent.parent.parent / "config" / ".env"
if config_env.exists():
    load_dotenv(config_env)
else:
    # Fallback to project root .env
    load_dotenv()

DEFAULT_AUDIO_EXTENSIONS: Tuple[str, ...] = (
    ".mp3",
    ".wav",
    ".flac",
    ".m4a",
    ".aac",
    ".ogg",
    ".wma",
    ".opus",
)


def _parse_extensions(raw: str) -> Tuple[str, ...]:
    """Parse a comma-separated extension list into lowercase dotted suffixes."""
    extensions = []
    for part in raw.split(","):
        ext = part.strip().lower()
        if not ext:
            continue
        if not ext.startswith("."):
            ext = f".{ext}"
        extensions.append(ext)
    return tuple(extensions) or DEFAULT_AUDIO_EXTENSIONS


class Config:
    """Application configuration."""

    def __init__(self) -> None:
        """Initialize configuration from environment variables."""
        # Mount point that holds every storage volume
        self.storage_root = Path(os.getenv("AUDIO_BROWSER_STORAGE_ROOT", "/storage"))

        # Listing filter
        raw_extensions = os.getenv("AUDIO_BROWSER_AUDIO_EXTENSIONS")
        self.audio_extensions = (
            _parse_extensions(raw_extensions)
            if raw_extensions
            else DEFAULT_AUDIO_EXTENSIONS
        )

        # Favorites database
        default_db_path = str(Path.home() / ".audio-browser" / "favorites.db")
        self.favorites_db_path = Path(
            os.getenv("AUDIO_BROWSER_FAVORITES_DB", default_db_path)
        )

        self.log_level = os.getenv("AUDIO_BROWSER_LOG_LEVEL", "INFO").upper()


def get_config() -> Config:
    """Get application configuration."""
    return Config()
