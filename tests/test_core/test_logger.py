"""
Tests for the logging module.

Tests the one-time root logger setup, the config-driven first call of
get_logger and the console-only fallback used when no config exists.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from fulltext.core.exceptions import EmptyQueryError
from fulltext.core.logger import LOG_FILENAME, setup_logging, get_logger


@pytest.fixture
def root_handlers():
    """
    Remove handlers added to the root logger during a test.

    Yields:
        The root logger.
    """
    root_logger = logging.getLogger()
    before = list(root_logger.handlers)
    level = root_logger.level
    yield root_logger
    for handler in list(root_logger.handlers):
        if handler not in before:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)


def _file_handlers(root_logger: logging.Logger) -> list:
    return [h for h in root_logger.handlers if isinstance(h, RotatingFileHandler)]


def _flush(root_logger: logging.Logger) -> None:
    for handler in root_logger.handlers:
        handler.flush()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_level_is_applied(self, reset_logger_singleton, root_handlers):
        """Test that the requested level reaches the root logger."""
        setup_logging(log_level="DEBUG")

        assert root_handlers.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, reset_logger_singleton, root_handlers):
        """Test that a misspelled level does not break setup."""
        setup_logging(log_level="chatty")

        assert root_handlers.level == logging.INFO

    def test_file_handler_writes_search_log(
        self, temp_dir: Path, reset_logger_singleton, root_handlers
    ):
        """Test that records land in fulltext_search.log inside a new directory."""
        logs_dir = temp_dir / "nested" / "logs"

        setup_logging(
            log_level="INFO",
            log_format="%(name)s|%(message)s",
            logs_directory=logs_dir,
            max_file_size_mb=1,
            backup_count=2
        )
        logging.getLogger("fulltext.search.engine").info("ranked 3 documents")
        _flush(root_handlers)

        content = (logs_dir / LOG_FILENAME).read_text(encoding="utf-8")
        assert "fulltext.search.engine|ranked 3 documents" in content

        handler = _file_handlers(root_handlers)[-1]
        assert handler.maxBytes == 1024 * 1024
        assert handler.backupCount == 2

    def test_setup_only_runs_once(self, temp_dir: Path, reset_logger_singleton, root_handlers):
        """Test that a second call neither adds handlers nor changes the level."""
        setup_logging(log_level="DEBUG")
        initial_handlers = len(root_handlers.handlers)

        setup_logging(log_level="WARNING", logs_directory=temp_dir / "logs")

        assert len(root_handlers.handlers) == initial_handlers
        assert root_handlers.level == logging.DEBUG
        assert not (temp_dir / "logs").exists()


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger_returns_named_logger(self, reset_logger_singleton, root_handlers):
        """Test that get_logger returns a logger with the given name."""
        logger = get_logger("fulltext.search.scorer")

        assert logger.name == "fulltext.search.scorer"

    def test_no_config_falls_back_to_console_only(
        self, temp_dir: Path, monkeypatch, reset_logger_singleton,
        reset_config_singleton, root_handlers
    ):
        """Test that without a config file nothing is written to disk."""
        monkeypatch.chdir(temp_dir)
        before = len(_file_handlers(root_handlers))

        logger = get_logger("fallback")
        logger.warning("no config available")
        _flush(root_handlers)

        assert len(_file_handlers(root_handlers)) == before
        assert list(temp_dir.rglob(LOG_FILENAME)) == []
        assert root_handlers.level == logging.INFO

    def test_configured_logs_directory_receives_records(
        self, temp_config: Path, reset_logger_singleton, reset_config_singleton, root_handlers
    ):
        """Test that the first call applies the configured level, format and directory."""
        from fulltext.core.config_loader import get_config
        config = get_config(temp_config)

        get_logger("configured").debug("parsed 2 terms")
        _flush(root_handlers)

        assert root_handlers.level == logging.DEBUG
        content = (config.paths.logs_directory / LOG_FILENAME).read_text(encoding="utf-8")
        assert "DEBUG - parsed 2 terms" in content

    def test_rejected_search_is_logged(
        self, temp_config: Path, body_index, reset_logger_singleton,
        reset_config_singleton, root_handlers
    ):
        """Test that executor warnings reach the configured log file."""
        from fulltext.core.config_loader import get_config
        from fulltext.search.executor import execute_search
        from fulltext.search.models import SearchFilterState
        config = get_config(temp_config)
        get_logger("configured")

        with pytest.raises(EmptyQueryError):
            execute_search([], SearchFilterState("body", "   "), body_index)
        _flush(root_handlers)

        content = (config.paths.logs_directory / LOG_FILENAME).read_text(encoding="utf-8")
        assert "WARNING - Rejected empty query on index 'search_body'" in content
