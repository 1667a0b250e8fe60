"""
Version value type for relnames.

A :class:`Version` holds the numeric ``major.minor.patch`` triple plus the
opaque prerelease and build strings. It knows nothing about dialects: how a
version is written in a given ecosystem is the job of a
:class:`~relnames.core.version_format.VersionFormat`. ``str(version)`` always
uses the SemVer spelling and is meant for logs and generic contexts.
"""

from __future__ import annotations

import re
import logging
from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union

from relnames.exceptions import VersionParseError
from relnames.utils.logger import get_logger

_logger = get_logger("models.version")

_NUMERIC_IDENTIFIER = re.compile(r"[0-9]+")


def _is_numeric(identifier: str) -> bool:
    return _NUMERIC_IDENTIFIER.fullmatch(identifier) is not None


def _compare_identifiers(left: str, right: str) -> int:
    """Compare two prerelease identifiers."""
    left_numeric = _is_numeric(left)
    right_numeric = _is_numeric(right)

    if left_numeric and right_numeric:
        a, b = int(left), int(right)
    elif left_numeric:
        return -1
    elif right_numeric:
        return 1
    else:
        a, b = left, right  # type: ignore[assignment]

    return (a > b) - (a < b)


def _compare_pre_release(left: Optional[str], right: Optional[str]) -> int:
    """Compare prerelease strings; ``None`` (a release) ranks highest."""
    if left == right:
        return 0
    if left is None:
        return 1
    if right is None:
        return -1

    left_ids = left.split(".")
    right_ids = right.split(".")
    for a, b in zip(left_ids, right_ids):
        result = _compare_identifiers(a, b)
        if result:
            return result

    return (len(left_ids) > len(right_ids)) - (len(left_ids) < len(right_ids))


@dataclass(frozen=True, eq=False)
class Version:
    """
    An immutable ``major.minor.patch[-pre_release][+build]`` version.

    Equality, hashing and ordering follow :meth:`compare`, so build metadata
    does not take part in any of them.

    Attributes:
        major: Major component.
        minor: Minor component.
        patch: Patch component.
        pre_release: Opaque prerelease text, e.g. ``"alpha.1"``.
        build: Opaque build metadata, e.g. ``"build.5"``.
    """

    major: int
    minor: int
    patch: int
    pre_release: Optional[str] = None
    build: Optional[str] = None

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

        # An empty prerelease renders like a release, so it must compare like one.
        object.__setattr__(self, "pre_release", self.pre_release or None)
        object.__setattr__(self, "build", self.build or None)

    # ------------------------------------------------------------------
    # Legacy parsing
    # ------------------------------------------------------------------

    @classmethod
    def parse(
        cls,
        version_string: str,
        version_regex: Optional[Union[str, "re.Pattern[str]"]] = None,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> "Version":
        """
        Parse a version string, raising on failure.

        Without ``version_regex`` the SemVer dialect is used. Passing a
        custom pattern is deprecated; implement a
        :class:`~relnames.core.version_format.VersionFormat` instead. The
        pattern must define ``major``, ``minor`` and ``patch`` named groups
        and may define ``pre_release`` (or ``preRelease``) and ``build``.

        Args:
            version_string: Text to parse.
            version_regex: Deprecated custom pattern.
            logger: Receives the deprecation warning.

        Returns:
            The parsed version.

        Raises:
            VersionParseError: No match was found.
        """
        if version_regex is not None:
            (logger or _logger).warning(
                "Version.parse version_regex parameter is deprecated. "
                "Implement the VersionFormat interface for custom version formats."
            )
            version = cls._parse_with_pattern(version_string, version_regex)
        else:
            from relnames.core.version_format import SemverVersionFormat

            version = SemverVersionFormat().parse(version_string)

        if version is None:
            raise VersionParseError(
                f"unable to parse version string: {version_string}",
                version_string=version_string,
            )
        return version

    @classmethod
    def _parse_with_pattern(
        cls,
        version_string: str,
        version_regex: Union[str, "re.Pattern[str]"],
    ) -> Optional["Version"]:
        match = re.search(version_regex, version_string)
        if match is None:
            return None

        groups = match.groupdict()
        # Optional groups that did not take part in the match come back as None.
        parts = [groups.get(name) for name in ("major", "minor", "patch")]
        if not all(part is not None and _is_numeric(part) for part in parts):
            return None

        pre_release = groups.get("pre_release") or groups.get("preRelease")
        return cls(
            *(int(part) for part in parts),
            pre_release or None,
            groups.get("build") or None,
        )

    # ------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------

    def compare(self, other: "Version") -> int:
        """
        Compare by SemVer precedence.

        Returns:
            ``-1`` if this version is earlier, ``0`` if both have the same
            precedence, ``1`` otherwise.
        """
        left = (self.major, self.minor, self.patch)
        right = (other.major, other.minor, other.patch)
        if left != right:
            return -1 if left < right else 1
        return _compare_pre_release(self.pre_release, other.pre_release)

    def _key(self) -> Tuple[Any, ...]:
        # "rc.01" and "rc.1" have equal precedence, so they must hash alike.
        pre_release: Optional[Tuple[Any, ...]] = None
        if self.pre_release is not None:
            pre_release = tuple(
                int(part) if _is_numeric(part) else part
                for part in self.pre_release.split(".")
            )
        return (self.major, self.minor, self.patch, pre_release)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) == 0

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) >= 0

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        pre_release = f"-{self.pre_release}" if self.pre_release else ""
        build = f"+{self.build}" if self.build else ""
        return f"{self.major}.{self.minor}.{self.patch}{pre_release}{build}"

    @property
    def is_pre_major(self) -> bool:
        """True for ``0.x.y`` versions."""
        return self.major < 1
