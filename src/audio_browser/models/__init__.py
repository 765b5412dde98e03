"""Data models for the audio browser."""

from .models import BrowserState, Entry

__all__ = ["Entry", "BrowserState"]
