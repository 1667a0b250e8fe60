from __future__ import annotations

import io
import logging
from typing import Generator
from unittest.mock import patch

import pytest

import relnames.utils.logger as logger_module
from relnames.utils.logger import (
    ROOT_LOGGER_NAME,
    ColoredFormatter,
    disable_logging,
    get_logger,
    is_logging_configured,
    setup_logging,
)


@pytest.fixture(autouse=True)
def clean_logger_state() -> Generator[None, None, None]:
    """Reset the relnames logger hierarchy around each test."""
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    saved_propagate = root_logger.propagate
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
    logger_module._logging_configured = False

    yield

    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
    root_logger.propagate = saved_propagate
    logger_module._logging_configured = False


def _record(level: int, msg: str = "message") -> logging.LogRecord:
    return logging.LogRecord(
        name="relnames.test",
        level=level,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


@pytest.mark.unit
class TestColoredFormatter:
    """Tests for ColoredFormatter."""

    def test_colors_level_name(self) -> None:
        """Test the level name is wrapped in ANSI codes when color applies."""
        formatter = ColoredFormatter("%(levelname)s: %(message)s")

        with patch.object(ColoredFormatter, "_should_use_color", return_value=True):
            result = formatter.format(_record(logging.WARNING))

        assert result == (
            f"{ColoredFormatter.COLORS['WARNING']}WARNING{ColoredFormatter.RESET}: message"
        )

    def test_plain_when_disabled(self) -> None:
        """Test use_color=False produces plain text."""
        formatter = ColoredFormatter("%(levelname)s: %(message)s", use_color=False)

        assert formatter.format(_record(logging.ERROR)) == "ERROR: message"

    def test_plain_when_not_a_terminal(self) -> None:
        """Test color is skipped when the terminal check fails."""
        formatter = ColoredFormatter("%(levelname)s: %(message)s")

        with patch.object(ColoredFormatter, "_should_use_color", return_value=False):
            assert formatter.format(_record(logging.INFO)) == "INFO: message"

    def test_restores_record_level_name(self) -> None:
        """Test the shared record is left untouched for other handlers."""
        formatter = ColoredFormatter("%(levelname)s")
        record = _record(logging.DEBUG)

        with patch.object(ColoredFormatter, "_should_use_color", return_value=True):
            formatter.format(record)

        assert record.levelname == "DEBUG"

    @pytest.mark.parametrize("env", [{"NO_COLOR": "1"}, {"CI": "true"}])
    def test_should_use_color_respects_env(
        self, env: dict, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test NO_COLOR and CI disable color even on a terminal."""
        for key, value in env.items():
            monkeypatch.setenv(key, value)

        with patch("sys.stderr") as stderr:
            stderr.isatty.return_value = True
            assert ColoredFormatter._should_use_color() is False

    def test_should_use_color_on_terminal(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test a terminal without overrides gets color."""
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.delenv("CI", raising=False)

        with patch("sys.stderr") as stderr:
            stderr.isatty.return_value = True
            assert ColoredFormatter._should_use_color() is True


@pytest.mark.unit
class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_writes_to_stream(self) -> None:
        """Test records reach the supplied stream."""
        stream = io.StringIO()

        setup_logging(level=logging.INFO, stream=stream)
        get_logger("config").info("Loading configuration")

        assert "INFO: Loading configuration" in stream.getvalue()

    def test_level_filters_records(self) -> None:
        """Test records below the configured level are dropped."""
        stream = io.StringIO()

        setup_logging(level=logging.WARNING, stream=stream)
        get_logger("config").info("hidden")
        get_logger("config").warning("shown")

        assert "hidden" not in stream.getvalue()
        assert "shown" in stream.getvalue()

    def test_verbose_format_includes_logger_name(self) -> None:
        """Test verbose mode adds the qualified logger name."""
        stream = io.StringIO()

        setup_logging(level=logging.DEBUG, verbose=True, stream=stream)
        get_logger("models.branch_name").debug("parsed")

        assert "relnames.models.branch_name - DEBUG - parsed" in stream.getvalue()

    def test_repeated_calls_replace_handler(self) -> None:
        """Test calling setup twice leaves one handler."""
        setup_logging(stream=io.StringIO())
        setup_logging(stream=io.StringIO())

        assert len(logging.getLogger(ROOT_LOGGER_NAME).handlers) == 1

    def test_marks_configured(self) -> None:
        """Test is_logging_configured() flips after setup."""
        assert is_logging_configured() is False

        setup_logging(stream=io.StringIO())

        assert is_logging_configured() is True


@pytest.mark.unit
class TestGetLogger:
    """Tests for get_logger()."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            (None, "relnames"),
            ("relnames", "relnames"),
            ("config", "relnames.config"),
            ("relnames.models.version", "relnames.models.version"),
        ],
    )
    def test_qualified_names(self, name: str, expected: str) -> None:
        """Test short names are placed under the relnames namespace."""
        assert get_logger(name).name == expected

    def test_null_handler_when_unconfigured(self) -> None:
        """Test an unconfigured logger gets a NullHandler."""
        logger = get_logger("fresh.unconfigured")

        assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)


@pytest.mark.unit
class TestDisableLogging:
    """Tests for disable_logging()."""

    def test_silences_output(self) -> None:
        """Test nothing is written after disabling."""
        stream = io.StringIO()
        setup_logging(stream=stream)

        disable_logging()
        get_logger("config").error("should not appear")

        assert stream.getvalue() == ""
        assert is_logging_configured() is False
