"""Tests for cetkaik/core/logging_config.py - logging setup for embedding apps."""

import logging

import pytest

from cetkaik.core.logging_config import (
    COMPACT_FORMAT,
    DEFAULT_FORMAT,
    DETAILED_FORMAT,
    LOG_LEVEL_ENV,
    STRUCTURED_FORMAT,
    LogContext,
    get_logger,
    setup_logging,
)
from cetkaik.errors import ParseError
from cetkaik.models import Color
from cetkaik.notation import parse_move


class TestSetupLogging:
    """Test setup_logging function."""

    def test_level_defaults_to_info(self, monkeypatch):
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        logger = setup_logging("cetkaik_test_level_default")
        assert logger.level == logging.INFO

    def test_level_from_env(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
        logger = setup_logging("cetkaik_test_level_env")
        assert logger.level == logging.DEBUG

    def test_level_as_string(self):
        logger = setup_logging("cetkaik_test_level_str", level="WARNING")
        assert logger.level == logging.WARNING

    def test_unknown_level_name_means_info(self):
        logger = setup_logging("cetkaik_test_level_bogus", level="LOUD")
        assert logger.level == logging.INFO

    def test_repeat_call_does_not_stack_handlers(self):
        first = setup_logging("cetkaik_test_idempotent")
        count = len(first.handlers)
        second = setup_logging("cetkaik_test_idempotent", level=logging.DEBUG)
        assert first is second
        assert len(second.handlers) == count
        assert second.level == logging.DEBUG

    def test_no_console(self):
        logger = setup_logging("cetkaik_test_no_console", console=False)
        assert not [h for h in logger.handlers if type(h) is logging.StreamHandler]

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "notation.log"
        logger = setup_logging("cetkaik_test_file", log_file=log_file, console=False)
        logger.info("rendered 赤兵ZIA")
        for handler in logger.handlers:
            handler.flush()
        assert "rendered 赤兵ZIA" in log_file.read_text(encoding="utf-8")

    def test_log_dir(self, tmp_path):
        setup_logging("cetkaik_test_dir", log_dir=tmp_path / "logs", console=False)
        assert (tmp_path / "logs" / "cetkaik_test_dir.log").exists()

    def test_propagate(self):
        assert setup_logging("cetkaik_test_prop_off").propagate is False
        assert setup_logging("cetkaik_test_prop_on", propagate=True).propagate is True

    @pytest.mark.parametrize("style", ["default", "compact", "detailed", "structured", "nonexistent"])
    def test_format_styles(self, style):
        logger = setup_logging(f"cetkaik_test_style_{style}", format_style=style)
        assert logger.handlers


class TestLibraryLogging:
    """The package logs parse rejections at DEBUG."""

    def test_color_rejection_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="cetkaik.models"):
            with pytest.raises(ParseError):
                Color.parse("紫")
        assert "Rejected color '紫'" in caplog.text

    def test_notation_rejection_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="cetkaik.notation.parse"):
            with pytest.raises(ParseError):
                parse_move("X片YZ", str)
        assert "can be split 2 ways" in caplog.text


class TestHelpers:
    """Test get_logger and LogContext."""

    def test_get_logger_same_instance(self):
        assert get_logger("cetkaik.models") is logging.getLogger("cetkaik.models")

    def test_log_context_restores_level(self):
        logger = setup_logging("cetkaik_test_context", level=logging.INFO)
        with pytest.raises(ValueError):
            with LogContext(logger, logging.DEBUG) as inner:
                assert inner is logger
                assert logger.level == logging.DEBUG
                raise ValueError("bad notation")
        assert logger.level == logging.INFO

    def test_format_constants(self):
        for field in ("%(asctime)s", "%(name)s", "%(levelname)s", "%(message)s"):
            assert field in DEFAULT_FORMAT
        assert len(COMPACT_FORMAT) < len(DEFAULT_FORMAT)
        assert "%(lineno)d" in DETAILED_FORMAT
        assert STRUCTURED_FORMAT.startswith("{") and STRUCTURED_FORMAT.endswith("}")
