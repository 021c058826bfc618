"""Tests for console logging setup."""

from __future__ import annotations

import io
import logging
import sys

import pytest

from brightsky.utils.logging_config import ColoredFormatter, LogColors, configure_logging


@pytest.fixture
def logger_name():
    """Use a private logger and clean up its handlers afterwards."""
    name = "brightsky.tests.logging"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


def _record(level: int = logging.INFO, msg: str = "hello %s", args=("world",)) -> logging.LogRecord:
    return logging.LogRecord("brightsky.client", level, __file__, 1, msg, args, None)


class TestColoredFormatter:
    """Tests for ColoredFormatter."""

    def test_plain_format(self):
        formatter = ColoredFormatter(use_colors=False)
        assert formatter.format(_record()) == "[INFO] brightsky.client - hello world"

    def test_colored_format(self):
        formatter = ColoredFormatter(use_colors=True)
        output = formatter.format(_record(logging.ERROR))
        assert LogColors.ERROR in output
        assert output.endswith("hello world")

    def test_exception_is_appended(self):
        formatter = ColoredFormatter(use_colors=False)
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = logging.LogRecord(
                "brightsky", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
            )
        output = formatter.format(record)
        assert output.startswith("[ERROR] brightsky - failed\n")
        assert "RuntimeError: boom" in output


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_writes_to_stream(self, logger_name, monkeypatch):
        monkeypatch.delenv("FORCE_COLOR", raising=False)
        stream = io.StringIO()
        logger = configure_logging(logging.DEBUG, stream=stream, logger_name=logger_name)

        logger.debug("GET %s", "https://api.brightsky.dev/alerts")

        assert stream.getvalue() == (
            f"[DEBUG] {logger_name} - GET https://api.brightsky.dev/alerts\n"
        )

    def test_repeated_calls_keep_one_handler(self, logger_name):
        stream = io.StringIO()
        configure_logging(stream=stream, logger_name=logger_name)
        logger = configure_logging(stream=stream, logger_name=logger_name)

        assert len(logger.handlers) == 1

    def test_level_applied(self, logger_name):
        logger = configure_logging(logging.WARNING, stream=io.StringIO(), logger_name=logger_name)
        assert logger.level == logging.WARNING

    def test_urllib3_quietened(self, logger_name):
        configure_logging(stream=io.StringIO(), logger_name=logger_name)
        assert logging.getLogger("urllib3").level == logging.WARNING

    def test_force_color(self, logger_name, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("FORCE_COLOR", "1")
        stream = io.StringIO()
        logger = configure_logging(stream=stream, logger_name=logger_name)

        logger.info("colored")

        assert LogColors.RESET in stream.getvalue()

    def test_no_color_wins(self, logger_name, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        monkeypatch.setenv("FORCE_COLOR", "1")
        stream = io.StringIO()
        logger = configure_logging(stream=stream, logger_name=logger_name)

        logger.info("plain")

        assert "\033[" not in stream.getvalue()
