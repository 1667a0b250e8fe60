from __future__ import annotations

import pytest

from relnames.exceptions import (
    ConfigError,
    RelnamesError,
    UnknownVersionFormatError,
    VersionParseError,
)


@pytest.mark.unit
class TestRelnamesError:
    """Tests for the base exception."""

    def test_message_only(self) -> None:
        """Test str() is the bare message without details."""
        exc = RelnamesError("something failed")

        assert str(exc) == "something failed"
        assert exc.details == {}

    def test_details_appended(self) -> None:
        """Test details are rendered after the message."""
        exc = RelnamesError("bad", {"a": 1, "b": "x"})

        assert str(exc) == "bad (a=1, b=x)"

    def test_details_are_copied(self) -> None:
        """Test the caller's mapping is not shared."""
        details = {"a": 1}
        exc = RelnamesError("bad", details)
        details["b"] = 2

        assert exc.details == {"a": 1}

    def test_repr(self) -> None:
        """Test repr() names the class and its fields."""
        assert repr(RelnamesError("bad", {"a": 1})) == (
            "RelnamesError(message='bad', details={'a': 1})"
        )


@pytest.mark.unit
class TestSubclasses:
    """Tests for the concrete exception types."""

    @pytest.mark.parametrize(
        "exc",
        [
            VersionParseError("x", version_string="1"),
            UnknownVersionFormatError("x"),
            ConfigError("x"),
        ],
    )
    def test_hierarchy(self, exc: RelnamesError) -> None:
        """Test every error can be caught as RelnamesError."""
        assert isinstance(exc, RelnamesError)

    def test_version_parse_error(self) -> None:
        """Test the offending input is kept and shown."""
        exc = VersionParseError("unable to parse", version_string="abc")

        assert exc.version_string == "abc"
        assert str(exc) == "unable to parse (version=abc)"

    def test_unknown_version_format_error(self) -> None:
        """Test available names are sorted and listed."""
        exc = UnknownVersionFormatError("cargo", available=["semver", "python", "ruby"])

        assert exc.available == ["python", "ruby", "semver"]
        assert str(exc) == (
            "Unknown version format: cargo (available=python, ruby, semver)"
        )

    def test_config_error_omits_missing_fields(self) -> None:
        """Test only provided fields appear in details."""
        exc = ConfigError("bad option", option="include_v")

        assert exc.config_path is None
        assert exc.details == {"option": "include_v"}
