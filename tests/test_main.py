from __future__ import annotations

import sys
from unittest.mock import MagicMock, patch

import pytest

from relnames.__main__ import _print_startup_error, main


@pytest.mark.unit
class TestMain:
    """Tests for the ``python -m relnames`` entry point."""

    @pytest.mark.parametrize("exit_code", [0, 1, 130], ids=["ok", "error", "interrupted"])
    def test_returns_cli_exit_code(self, exit_code: int) -> None:
        """Test the CLI's exit code is passed through."""
        cli_module = MagicMock()
        cli_module.main.return_value = exit_code

        with patch.dict(sys.modules, {"relnames.cli": cli_module}):
            assert main() == exit_code

        cli_module.main.assert_called_once_with()

    def test_import_error_returns_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test a broken CLI import is reported instead of raised."""
        with patch.dict(sys.modules, {"relnames.cli": None}):
            result = main()

        assert result == 1
        err = capsys.readouterr().err
        assert "relnames CLI could not be loaded." in err
        assert "ImportError:" in err


@pytest.mark.unit
class TestPrintStartupError:
    """Tests for _print_startup_error()."""

    def test_includes_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test the installed version is reported."""
        version_module = MagicMock(__version__="9.8.7")

        with patch.dict(sys.modules, {"relnames.__version__": version_module}):
            _print_startup_error(ImportError("No module named 'click'"))

        captured = capsys.readouterr()
        assert "relnames version: 9.8.7" in captured.err
        assert "ImportError: No module named 'click'" in captured.err
        assert captured.out == ""

    def test_unknown_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test a missing version module is reported as unknown."""
        with patch.dict(sys.modules, {"relnames.__version__": None}):
            _print_startup_error(ImportError("boom"))

        assert "relnames version: <unknown>" in capsys.readouterr().err

    def test_blank_line_before_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test a blank line separates the header from the error."""
        _print_startup_error(ImportError("boom"))

        lines = capsys.readouterr().err.split("\n")
        assert lines[lines.index("ImportError: boom") - 1] == ""
