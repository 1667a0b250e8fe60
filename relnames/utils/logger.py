"""
Logging utilities for relnames.

Library modules obtain their logger through :func:`get_logger` and never
configure handlers themselves; the CLI calls :func:`setup_logging` once per
invocation. Parsers that accept a ``logger`` argument default to the logger
returned here.
"""

from __future__ import annotations

import os
import sys
import logging
import threading
from typing import IO, Optional

from relnames.constants import (
    LOG_DATE_FORMAT,
    LOG_DEFAULT_FORMAT,
    LOG_VERBOSE_FORMAT,
)

ROOT_LOGGER_NAME = "relnames"

_logging_configured: bool = False
_lock = threading.Lock()


class ColoredFormatter(logging.Formatter):
    """Formatter that wraps the level name in ANSI colors on a terminal."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(
        self,
        fmt: str,
        *,
        datefmt: Optional[str] = None,
        use_color: bool = True,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname)
        if not (color and self.use_color and self._should_use_color()):
            return super().format(record)

        # The record is shared with other handlers; restore it afterwards.
        original = record.levelname
        record.levelname = f"{color}{original}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original

    @staticmethod
    def _should_use_color() -> bool:
        if os.environ.get("NO_COLOR") or os.environ.get("CI"):
            return False
        try:
            return sys.stderr.isatty()
        except (AttributeError, OSError):
            return False


def setup_logging(
    *,
    level: int = logging.INFO,
    verbose: bool = False,
    stream: Optional[IO[str]] = None,
) -> None:
    """Configure the ``relnames`` logger hierarchy.

    Safe to call repeatedly; each call replaces the previous handler.

    Args:
        level: Logging level (e.g. ``logging.INFO``).
        verbose: Include timestamps and logger names in records.
        stream: Output stream; defaults to ``sys.stderr``.
    """
    global _logging_configured

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        ColoredFormatter(
            LOG_VERBOSE_FORMAT if verbose else LOG_DEFAULT_FORMAT,
            datefmt=LOG_DATE_FORMAT,
            use_color=not os.environ.get("NO_COLOR"),
        )
    )

    with _lock:
        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        root_logger.handlers.clear()
        root_logger.setLevel(level)
        root_logger.addHandler(handler)
        root_logger.propagate = False
        _logging_configured = True


def _qualified_name(name: Optional[str]) -> str:
    if not name or name == ROOT_LOGGER_NAME:
        return ROOT_LOGGER_NAME
    if name.startswith(f"{ROOT_LOGGER_NAME}."):
        return name
    return f"{ROOT_LOGGER_NAME}.{name}"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger in the ``relnames`` namespace.

    Args:
        name: Short (``"branch_name"``) or fully qualified
            (``"relnames.models.branch_name"``) logger name.

    Returns:
        The logger. A ``NullHandler`` is attached when nothing upstream
        handles records, so importing relnames never prints on its own.
    """
    logger = logging.getLogger(_qualified_name(name))

    if not logger.handlers and (not logger.parent or not logger.parent.handlers):
        logger.addHandler(logging.NullHandler())

    return logger


def is_logging_configured() -> bool:
    """Return True once :func:`setup_logging` has run."""
    return _logging_configured


def disable_logging() -> None:
    """Silence all relnames log output."""
    global _logging_configured

    with _lock:
        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        root_logger.handlers.clear()
        root_logger.addHandler(logging.NullHandler())
        root_logger.setLevel(logging.NOTSET)
        _logging_configured = False
