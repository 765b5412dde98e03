"""Tests for the command-line interface."""

import logging

import pytest
from click.testing import CliRunner

from audio_browser.cli.display import console
from audio_browser.cli.main import cli


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Drop the handlers the CLI installs on the root logger."""
    root = logging.getLogger()
    handlers = [(handler, handler.level) for handler in root.handlers]
    level = root.level
    yield
    root.handlers[:] = [handler for handler, _ in handlers]
    for handler, handler_level in handlers:
        handler.setLevel(handler_level)
    root.setLevel(level)


@pytest.fixture(autouse=True)
def wide_console(monkeypatch):
    """Render tables wide enough that temporary paths do not wrap."""
    monkeypatch.setattr(console, "width", 200)


@pytest.fixture
def runner(monkeypatch, tmp_path):
    """CLI runner with favorites stored in a temporary database."""
    monkeypatch.setenv("AUDIO_BROWSER_FAVORITES_DB", str(tmp_path / "db" / "fav.db"))
    monkeypatch.setenv("AUDIO_BROWSER_LOG_LEVEL", "WARNING")
    return CliRunner()


class TestVolumesCommand:
    """Test the volumes command."""

    def test_lists_volumes(self, runner, storage_root):
        """Test internal storage and SD card are shown."""
        result = runner.invoke(
            cli, ["--storage-root", str(storage_root), "volumes", "--verbose"]
        )
        assert result.exit_code == 0, result.output
        assert "Internal Storage" in result.output
        assert "SD Card" in result.output
        assert "Storage root scan" in result.output


class TestLsCommand:
    """Test the ls command."""

    def test_lists_audio_only(self, runner, music_dir):
        """Test the listing hides non-audio files."""
        result = runner.invoke(cli, ["--no-persist", "ls", str(music_dir)])
        assert result.exit_code == 0, result.output
        assert "a.flac" in result.output
        assert "b.mp3" in result.output
        assert "c.txt" not in result.output

    def test_missing_directory(self, runner, tmp_path):
        """Test a missing directory exits non-zero with the error."""
        result = runner.invoke(cli, ["--no-persist", "ls", str(tmp_path / "nope")])
        assert result.exit_code == 1
        assert "Directory does not exist" in result.output


class TestBrowseCommand:
    """Test the interactive browser."""

    def test_open_volume_and_quit(self, runner, storage_root):
        """Test opening the first volume lists its contents."""
        (storage_root / "emulated" / "0" / "Podcasts").mkdir()
        result = runner.invoke(
            cli,
            ["--no-persist", "--storage-root", str(storage_root), "browse"],
            input="1\nb\nq\n",
        )
        assert result.exit_code == 0, result.output
        assert "Internal Storage" in result.output
        assert "Podcasts" in result.output

    def test_unknown_command(self, runner, storage_root):
        """Test unknown input is reported and the loop continues."""
        result = runner.invoke(
            cli,
            ["--no-persist", "--storage-root", str(storage_root), "browse"],
            input="xyz\nq\n",
        )
        assert result.exit_code == 0, result.output
        assert "Unknown command" in result.output


class TestPinsCommands:
    """Test favorites commands."""

    def test_add_list_remove(self, runner, music_dir):
        """Test a pin round trip through the persistent store."""
        target = str(music_dir / "b.mp3")

        result = runner.invoke(cli, ["pins", "add", target])
        assert result.exit_code == 0, result.output
        assert "Pinned" in result.output

        result = runner.invoke(cli, ["pins", "list"])
        assert result.exit_code == 0, result.output
        assert "b.mp3" in result.output
        assert "1 favorite(s)" in result.output

        result = runner.invoke(cli, ["pins", "remove", target])
        assert result.exit_code == 0, result.output

        result = runner.invoke(cli, ["pins", "list"])
        assert "b.mp3" not in result.output

    def test_remove_unknown(self, runner, tmp_path):
        """Test removing an unknown pin fails."""
        result = runner.invoke(cli, ["pins", "remove", str(tmp_path / "x.mp3")])
        assert result.exit_code == 1
        assert "Favorite not found" in result.output

    def test_remove_without_persistence(self, runner, tmp_path):
        """Test removing a pin under --no-persist reports that nothing is stored."""
        result = runner.invoke(
            cli, ["--no-persist", "pins", "remove", str(tmp_path / "x.mp3")]
        )
        assert result.exit_code == 1
        assert "not persisted" in result.output
