"""Colored console logging for scripts and notebooks using the Bright Sky client.

The library itself only creates module loggers (``logging.getLogger(__name__)``)
and never installs handlers; applications opt in via ``configure_logging``.
"""
from __future__ import annotations
import logging
import os
import sys
from typing import Optional, TextIO


def _supports_ansi(stream: TextIO) -> bool:
    """Decide whether ANSI color codes should be written to ``stream``.

    NO_COLOR (https://no-color.org/) wins over FORCE_COLOR; otherwise colors
    are used only for TTYs.
    """
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


class LogColors:
    """ANSI escape codes used by ColoredFormatter."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DEBUG = '\033[36m'      # Cyan
    INFO = '\033[32m'       # Green
    WARNING = '\033[33m'    # Yellow
    ERROR = '\033[31m'      # Red
    CRITICAL = '\033[35m'   # Magenta
    MODULE = '\033[94m'     # Blue

    LEVELS = {
        'DEBUG': DEBUG,
        'INFO': INFO,
        'WARNING': WARNING,
        'ERROR': ERROR,
        'CRITICAL': CRITICAL,
    }


class ColoredFormatter(logging.Formatter):
    """Formats records as ``[LEVEL] logger - message``, optionally colored."""

    def __init__(self, use_colors: bool = True) -> None:
        super().__init__()
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        if not self.use_colors:
            return f"[{record.levelname}] {record.name} - {message}"
        level_color = LogColors.LEVELS.get(record.levelname, LogColors.RESET)
        levelname = f"{level_color}{LogColors.BOLD}[{record.levelname}]{LogColors.RESET}"
        name = f"{LogColors.MODULE}{record.name}{LogColors.RESET}"
        return f"{levelname} {name} - {message}"


def configure_logging(
    level: int = logging.INFO,
    stream: Optional[TextIO] = None,
    logger_name: str = "brightsky",
) -> logging.Logger:
    """
    Attach a single colored console handler to the ``brightsky`` logger.

    Calling it again replaces the previous handler instead of adding a second
    one. Noisy urllib3 connection logs are limited to WARNING.

    Args:
        level: Logging level (default: logging.INFO).
        stream: Output stream (default: sys.stderr).
        logger_name: Logger to configure; "" configures the root logger.

    Returns:
        The configured logger.

    Example:
        >>> from brightsky.utils import configure_logging
        >>> configure_logging(logging.DEBUG)  # log every request URL
    """
    stream = stream or sys.stderr
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        if getattr(handler, "_brightsky_handler", False):
            logger.removeHandler(handler)
    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(ColoredFormatter(use_colors=_supports_ansi(stream)))
    handler._brightsky_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    return logger


__all__ = ["LogColors", "ColoredFormatter", "configure_logging"]
