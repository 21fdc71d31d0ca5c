"""Tests for structured logging."""

import json
import logging
from pathlib import Path

import pytest
import structlog

from subo.config.models import LoggingConfig, LogOutputConfig
from subo.core.logging import configure_logging, get_log_file_path, get_logger


class TestLoggingConfiguration:
    """Logging configuration tests."""

    def setup_method(self) -> None:
        """Reset structlog and stdlib logging before each test."""
        structlog.reset_defaults()
        logging.getLogger().handlers.clear()

    def teardown_method(self) -> None:
        for handler in logging.getLogger().handlers:
            handler.close()
        logging.getLogger().handlers.clear()
        structlog.reset_defaults()

    def test_given_json_format_when_log_then_valid_json_output(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """JSON format produces valid JSON with required fields."""
        # Given
        configure_logging(json_format=True, level="INFO")
        logger = get_logger("test")

        # When
        logger.info("test message", key="value")

        # Then
        captured = capsys.readouterr()
        lines = [line for line in captured.err.strip().split("\n") if line]
        assert lines
        data = json.loads(lines[-1])
        assert data["event"] == "test message"
        assert data["key"] == "value"
        assert "timestamp" in data
        assert data["level"] == "info"

    def test_given_config_object_when_configure_then_takes_precedence(self, tmp_path: Path) -> None:
        """LoggingConfig object takes precedence over simple params."""
        # Given
        log_file = tmp_path / "test.log"
        config = LoggingConfig(
            level="DEBUG",
            outputs=[LogOutputConfig(format="json", destination=str(log_file))],
        )

        # When - config's DEBUG should override the level="ERROR" param
        configure_logging(config=config, json_format=False, level="ERROR")
        get_logger().debug("debug msg")

        # Then
        assert "debug msg" in log_file.read_text()
        assert get_log_file_path() == log_file

    def test_given_multi_output_config_when_configure_then_logs_to_all(
        self, tmp_path: Path
    ) -> None:
        """Multiple outputs receive logs according to their levels."""
        # Given
        debug_file = tmp_path / "debug.log"
        warn_file = tmp_path / "warn.log"
        config = LoggingConfig(
            level="DEBUG",
            outputs=[
                LogOutputConfig(format="json", destination=str(warn_file), level="WARNING"),
                LogOutputConfig(format="json", destination=str(debug_file)),
            ],
        )

        # When
        configure_logging(config=config)
        logger = get_logger("scanner")
        logger.debug("scanner.runnable_found")
        logger.warning("scanner.dir_unreadable", path="/p/locked")

        # Then
        warn_lines = warn_file.read_text().strip().splitlines()
        assert len(warn_lines) == 1
        record = json.loads(warn_lines[0])
        assert record["event"] == "scanner.dir_unreadable"
        assert record["logger"] == "scanner"
        assert record["path"] == "/p/locked"

        debug_content = debug_file.read_text()
        assert "scanner.runnable_found" in debug_content
        assert "scanner.dir_unreadable" in debug_content

    def test_given_console_only_when_configure_then_no_log_file(self) -> None:
        configure_logging(level="INFO")

        assert get_log_file_path() is None
