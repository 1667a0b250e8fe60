"""
Custom exception hierarchy for relnames.

This module defines structured exception types used across relnames.
All exceptions inherit from :class:`RelnamesError` and support optional
structured metadata via the ``details`` attribute to improve diagnostics
and logging.

Only the legacy :meth:`relnames.models.Version.parse` entry point and the
configuration layer raise; the option-returning parsers return ``None``.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, MutableMapping, Optional


class RelnamesError(Exception):
    """Base exception for all relnames errors.

    Args:
        message: Human-readable error message.
        details: Optional structured metadata describing the error.
    """

    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str,
        details: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.message: str = message
        self.details: MutableMapping[str, Any] = dict(details) if details else {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        formatted = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"{self.message} ({formatted})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, details={dict(self.details)!r})"
        )


def _add_if(details: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Add a key to ``details`` only if ``value`` is not ``None``."""
    if value is not None:
        details[key] = value


class VersionParseError(RelnamesError):
    """Raised when a version string cannot be parsed by the legacy parser.

    Args:
        message: Error description.
        version_string: The offending input.
    """

    __slots__ = ("version_string",)

    def __init__(
        self,
        message: str,
        *,
        version_string: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "version", version_string)

        super().__init__(message, details)

        self.version_string = version_string


class UnknownVersionFormatError(RelnamesError):
    """Raised when a version format name is not registered.

    Args:
        name: Requested format name.
        available: Registered format names.
    """

    __slots__ = ("name", "available")

    def __init__(
        self,
        name: str,
        *,
        available: Optional[Iterable[str]] = None,
    ) -> None:
        self.name = name
        self.available = sorted(available) if available is not None else []

        details: MutableMapping[str, Any] = {}
        if self.available:
            details["available"] = ", ".join(self.available)

        super().__init__(f"Unknown version format: {name}", details)


class ConfigError(RelnamesError):
    """Raised when configuration cannot be loaded or is invalid.

    Args:
        message: Error description.
        config_path: Path to the configuration file involved.
        option: Name of the offending option, if any.
    """

    __slots__ = ("config_path", "option")

    def __init__(
        self,
        message: str,
        *,
        config_path: Optional[str] = None,
        option: Optional[str] = None,
    ) -> None:
        details: MutableMapping[str, Any] = {}
        _add_if(details, "path", config_path)
        _add_if(details, "option", option)

        super().__init__(message, details)

        self.config_path = config_path
        self.option = option
