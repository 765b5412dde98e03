"""Shared fixtures for audio browser tests."""

from pathlib import Path
from typing import Iterable

import pytest


def make_tree(root: Path, files: Iterable[str] = (), dirs: Iterable[str] = ()) -> Path:
    """Create ``dirs`` and empty ``files`` (relative paths) under ``root``."""
    root.mkdir(parents=True, exist_ok=True)
    for directory in dirs:
        (root / directory).mkdir(parents=True, exist_ok=True)
    for file_name in files:
        file_path = root / file_name
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text("test content")
    return root


@pytest.fixture(autouse=True)
def no_android_storage_env(monkeypatch):
    """Keep the host environment out of volume discovery."""
    monkeypatch.delenv("EXTERNAL_STORAGE", raising=False)
    monkeypatch.delenv("SECONDARY_STORAGE", raising=False)


@pytest.fixture
def storage_root(tmp_path: Path) -> Path:
    """Create a fake /storage with an internal volume and one SD card."""
    root = tmp_path / "storage"
    make_tree(root, dirs=["emulated/0", "self/primary", "ABCD-1234"])
    return root


@pytest.fixture
def internal(storage_root: Path) -> Path:
    """Internal storage volume root."""
    return storage_root / "emulated" / "0"


@pytest.fixture
def music_dir(internal: Path) -> Path:
    """Music directory with a mix of audio files, other files and folders."""
    return make_tree(
        internal / "Music",
        files=["b.mp3", "c.txt", "a.flac", "A/inner.ogg"],
        dirs=["A"],
    )
