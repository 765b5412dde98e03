"""Tests for configuration and logging setup."""

import logging
from pathlib import Path

import pytest

from audio_browser.config import DEFAULT_AUDIO_EXTENSIONS, Config, get_config
from audio_browser.utils.logging_config import (
    ColoredFormatter,
    configure_third_party_loggers,
    setup_logging,
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove audio browser variables from the environment."""
    for var in (
        "AUDIO_BROWSER_STORAGE_ROOT",
        "AUDIO_BROWSER_FAVORITES_DB",
        "AUDIO_BROWSER_AUDIO_EXTENSIONS",
        "AUDIO_BROWSER_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after a test."""
    root = logging.getLogger()
    handlers = [(handler, handler.level) for handler in root.handlers]
    level = root.level
    yield
    root.handlers[:] = [handler for handler, _ in handlers]
    for handler, handler_level in handlers:
        handler.setLevel(handler_level)
    root.setLevel(level)


class TestConfig:
    """Test configuration management."""

    def test_defaults(self, clean_env):
        """Test config can be created with defaults."""
        config = Config()
        assert config.storage_root == Path("/storage")
        assert config.audio_extensions == DEFAULT_AUDIO_EXTENSIONS
        assert config.favorites_db_path.name == "favorites.db"
        assert config.log_level == "INFO"

    def test_environment_overrides(self, clean_env, monkeypatch, tmp_path):
        """Test values are read from the environment."""
        monkeypatch.setenv("AUDIO_BROWSER_STORAGE_ROOT", str(tmp_path))
        monkeypatch.setenv("AUDIO_BROWSER_FAVORITES_DB", str(tmp_path / "f.db"))
        monkeypatch.setenv("AUDIO_BROWSER_LOG_LEVEL", "debug")

        config = get_config()
        assert config.storage_root == tmp_path
        assert config.favorites_db_path == tmp_path / "f.db"
        assert config.log_level == "DEBUG"

    def test_extension_list_normalized(self, clean_env, monkeypatch):
        """Test extensions are lowercased and dotted."""
        monkeypatch.setenv("AUDIO_BROWSER_AUDIO_EXTENSIONS", "MP3, .flac,,dsf")
        assert Config().audio_extensions == (".mp3", ".flac", ".dsf")

    def test_blank_extension_list_uses_defaults(self, clean_env, monkeypatch):
        """Test a list with no usable values falls back to the defaults."""
        monkeypatch.setenv("AUDIO_BROWSER_AUDIO_EXTENSIONS", " , ")
        assert Config().audio_extensions == DEFAULT_AUDIO_EXTENSIONS

    def test_config_does_not_create_directories(self, clean_env, monkeypatch, tmp_path):
        """Test the favorites directory is only created by the store."""
        monkeypatch.setenv("AUDIO_BROWSER_FAVORITES_DB", str(tmp_path / "x" / "f.db"))
        Config()
        assert not (tmp_path / "x").exists()


class TestLogging:
    """Test logging setup."""

    def test_setup_logging_with_file(self, tmp_path, restore_root_logger):
        """Test file logging writes records with locations."""
        log_file = tmp_path / "logs" / "browser.log"
        setup_logging(log_level="DEBUG", log_file=log_file, console_output=False)
        logging.getLogger("audio_browser.test").info("hello from test")

        for handler in logging.getLogger().handlers:
            handler.flush()
        content = log_file.read_text()
        assert "hello from test" in content
        assert "test_config.py" in content

    def test_colored_formatter_restores_levelname(self):
        """Test the colored level name does not leak to other handlers."""
        record = logging.LogRecord("x", logging.WARNING, __file__, 1, "msg", (), None)
        formatted = ColoredFormatter(fmt="%(levelname)s %(message)s").format(record)
        assert "\033[33m" in formatted
        assert record.levelname == "WARNING"

    def test_configure_third_party_loggers_quiets_sqlalchemy(self):
        """Test SQLAlchemy engine logging is raised to WARNING."""
        engine_logger = logging.getLogger("sqlalchemy.engine")
        previous = engine_logger.level
        try:
            engine_logger.setLevel(logging.DEBUG)
            configure_third_party_loggers()
            assert engine_logger.level == logging.WARNING
        finally:
            engine_logger.setLevel(previous)
