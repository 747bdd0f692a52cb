"""Unit tests for logging utilities."""

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from phink._logging import (
    STDLIB_LOGGER_NAME,
    _get_log_level,
    _log_level_from_string,
    create_logger,
)

if TYPE_CHECKING:
    from pyfakefs.fake_filesystem import FakeFilesystem


class TestCreateLogger:
    def test_creates_log_directory_if_missing(self, fs: "FakeFilesystem") -> None:
        log_path = Path("/logs/nested/phink.log")
        assert not log_path.parent.exists()

        _ = create_logger(log_file=str(log_path))

        assert log_path.parent.exists()

    def test_default_format_is_json(self, fs: "FakeFilesystem") -> None:
        logger = create_logger(log_file="/logs/phink.log")

        logger.info("test_event", key="value")

        payload = json.loads(Path("/logs/phink.log").read_text().strip())
        assert payload["event"] == "test_event"
        assert payload["key"] == "value"
        assert payload["level"] == "info"
        assert "timestamp" in payload

    def test_text_format(self, fs: "FakeFilesystem") -> None:
        logger = create_logger(log_file="/logs/phink.log", log_format="text")

        logger.info("test_event", key="value")

        log_content = Path("/logs/phink.log").read_text()
        assert "test_event" in log_content
        assert "key=value" in log_content

    def test_appends_to_existing_file(self, fs: "FakeFilesystem") -> None:
        _ = fs.create_file("/logs/phink.log", contents="previous\n")
        logger = create_logger(log_file="/logs/phink.log")

        logger.info("next")

        lines = Path("/logs/phink.log").read_text().splitlines()
        assert lines[0] == "previous"
        assert len(lines) == 2

    def test_level_filters_records(self, fs: "FakeFilesystem") -> None:
        logger = create_logger(level="warning", log_file="/logs/phink.log")

        logger.info("dropped")
        logger.warning("kept")

        log_content = Path("/logs/phink.log").read_text()
        assert "dropped" not in log_content
        assert "kept" in log_content

    def test_debug_env_overrides_level(
        self, fs: "FakeFilesystem", monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PHINK_DEBUG", "1")
        logger = create_logger(level="error", log_file="/logs/phink.log")

        logger.debug("verbose")

        assert "verbose" in Path("/logs/phink.log").read_text()

    def test_cached_per_arguments(self) -> None:
        assert create_logger(level="info") is create_logger(level="info")
        assert create_logger(level="info") is not create_logger(level="debug")

    def test_without_file_routes_to_stdlib_logger(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.INFO, logger=STDLIB_LOGGER_NAME)
        logger = create_logger(level="info")

        logger.info("routed", answer=42)

        records = [r for r in caplog.records if r.name == STDLIB_LOGGER_NAME]
        assert len(records) == 1
        assert records[0].levelno == logging.INFO
        payload = json.loads(records[0].getMessage())
        assert payload["event"] == "routed"
        assert payload["answer"] == 42


class TestLogLevelResolution:
    def test_default_is_info(self) -> None:
        assert _get_log_level() == logging.INFO

    def test_log_level_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PHINK_LOG_LEVEL", "error")
        assert _get_log_level() == logging.ERROR

    def test_unknown_env_level_falls_back_to_info(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PHINK_LOG_LEVEL", "chatty")
        assert _get_log_level() == logging.INFO

    def test_debug_env_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PHINK_LOG_LEVEL", "error")
        monkeypatch.setenv("PHINK_DEBUG", "1")
        assert _get_log_level() == logging.DEBUG

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            ("debug", logging.DEBUG),
            ("INFO", logging.INFO),
            ("warning", logging.WARNING),
            ("error", logging.ERROR),
            ("nonsense", logging.INFO),
        ],
    )
    def test_from_string(self, level: str, expected: int) -> None:
        assert _log_level_from_string(level) == expected

    def test_from_string_respects_debug_env_only_when_asked(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PHINK_DEBUG", "1")
        assert _log_level_from_string("error") == logging.ERROR
        assert _log_level_from_string("error", respect_env=True) == logging.DEBUG
