"""Tests for structured logging configuration."""

import json
import logging

import structlog

from cli.logging_config import _redact_sensitive, setup_logging


class TestLoggingConfig:
    """Test structlog setup modes."""

    def test_console_mode(self, capsys):
        """Console mode uses dev renderer."""
        setup_logging(json_mode=False, level="DEBUG")
        logger = structlog.get_logger()
        logger.info("test message", key="value")
        captured = capsys.readouterr()
        assert "test message" in captured.err

    def test_level_filtering(self):
        """Log level filters lower messages."""
        setup_logging(json_mode=False, level="WARNING")
        root = logging.getLogger()
        assert root.level == logging.WARNING

    def test_default_level_is_info(self):
        setup_logging()
        assert logging.getLogger().level == logging.INFO

    def test_file_handler_writes_json(self, tmp_path):
        log_file = tmp_path / "logs" / "moodlog.log"
        setup_logging(level="WARNING", log_file=log_file, file_level="DEBUG")
        assert logging.getLogger().level == logging.DEBUG

        structlog.get_logger("test_file").info("file only")
        for handler in logging.getLogger().handlers:
            handler.flush()

        record = json.loads(log_file.read_text(encoding="utf-8").strip().splitlines()[-1])
        assert record["event"] == "file only"
        assert record["level"] == "info"


class TestRedaction:
    def test_password_key_masked(self):
        event = _redact_sensitive(None, None, {"event": "login", "password": "hunter2"})
        assert event["password"] == "REDACTED"

    def test_password_in_message_masked(self):
        event = _redact_sensitive(None, None, {"event": "bad config password=hunter2"})
        assert "hunter2" not in event["event"]
        assert "password=REDACTED" in event["event"]

    def test_other_values_untouched(self):
        event = _redact_sensitive(None, None, {"event": "entry_added", "mood": "happy"})
        assert event["mood"] == "happy"
