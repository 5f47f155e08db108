import logging
import uuid

from unempty.logging import get_logger


class TestGetLogger:
    def test_default_level_is_warning(self, monkeypatch):
        """Test that library loggers default to WARNING."""
        monkeypatch.delenv('UNEMPTY_LOG_LEVEL', raising=False)
        logger = get_logger(f"unempty.test.{uuid.uuid4().hex}")
        assert logger.level == logging.WARNING

    def test_env_override(self, monkeypatch):
        """Test that UNEMPTY_LOG_LEVEL sets the level."""
        monkeypatch.setenv('UNEMPTY_LOG_LEVEL', 'debug')
        logger = get_logger(f"unempty.test.{uuid.uuid4().hex}")
        assert logger.level == logging.DEBUG

    def test_unknown_level_falls_back(self, monkeypatch):
        """Test that an unknown level name falls back to the default."""
        monkeypatch.setenv('UNEMPTY_LOG_LEVEL', 'chatty')
        logger = get_logger(f"unempty.test.{uuid.uuid4().hex}")
        assert logger.level == logging.WARNING

    def test_single_handler(self):
        """Test that repeated calls do not stack handlers."""
        name = f"unempty.test.{uuid.uuid4().hex}"
        get_logger(name)
        logger = get_logger(name)
        assert len(logger.handlers) == 1
