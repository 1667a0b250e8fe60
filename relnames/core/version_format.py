"""
Ecosystem-specific version dialects.

A :class:`VersionFormat` turns version text into a
:class:`~relnames.models.Version` and back. Ecosystems disagree on spelling:

- SemVer: ``1.2.3-alpha.1+build``
- Ruby gems: ``1.2.3.alpha.1`` (no build metadata)
- Python (PEP 440): ``1.2.3a1+local``

Branch and tag parsing take a format as an argument, so version grammar is
decided by the caller rather than by those parsers. ``parse`` never raises;
it returns ``None`` when the text is not a complete version in the dialect.
"""

from __future__ import annotations

import re
from typing import Mapping, Optional, Protocol, runtime_checkable

from packaging.version import InvalidVersion
from packaging.version import Version as Pep440Version

from relnames.constants import (
    RUBY_GRAMMAR_FRAGMENT,
    RUBY_PATTERN,
    SEMVER_PATTERN,
)
from relnames.exceptions import UnknownVersionFormatError
from relnames.models.version import Version

#: Characters a PEP 440 local label cannot contain collapse to ``.``.
_LOCAL_LABEL_SEPARATORS = re.compile(r"[^a-zA-Z0-9]+")


@runtime_checkable
class VersionFormat(Protocol):
    """Parses and formats versions for one ecosystem."""

    def parse(self, version_string: str) -> Optional[Version]:
        """Return the parsed version, or ``None`` if ``version_string`` does
        not match this dialect."""
        ...

    def format(self, version: Version) -> str:
        """Render ``version`` in this dialect."""
        ...


@runtime_checkable
class SupportsGrammarFragment(Protocol):
    """A format that can share its grammar with text-rewriting code."""

    def grammar_fragment(self) -> str:
        ...


def get_grammar_fragment(version_format: VersionFormat) -> Optional[str]:
    """Return the dialect's reusable pattern fragment, if it exposes one."""
    if isinstance(version_format, SupportsGrammarFragment):
        return version_format.grammar_fragment()
    return None


def _version_from_match(match: "re.Match[str]") -> Version:
    groups = match.groupdict()
    return Version(
        int(groups["major"]),
        int(groups["minor"]),
        int(groups["patch"]),
        groups.get("pre_release") or None,
        groups.get("build") or None,
    )


class SemverVersionFormat:
    """Standard SemVer: ``1.2.3-alpha.1+build``."""

    REGEX = re.compile(SEMVER_PATTERN, re.ASCII)

    def parse(self, version_string: str) -> Optional[Version]:
        match = self.REGEX.fullmatch(version_string)
        if match is None:
            return None
        return _version_from_match(match)

    def format(self, version: Version) -> str:
        pre_release = f"-{version.pre_release}" if version.pre_release else ""
        build = f"+{version.build}" if version.build else ""
        return f"{version.major}.{version.minor}.{version.patch}{pre_release}{build}"

    def __repr__(self) -> str:
        return "SemverVersionFormat()"


class RubyVersionFormat:
    """Ruby gem versions: ``1.2.3.alpha.1``.

    Gems have no build metadata. A ``+...`` suffix is kept inside the
    prerelease on parse, and ``format`` drops ``Version.build``.
    """

    #: Pattern source for composing larger patterns in updaters. Wrapped in a
    #: capture group so replacements can refer to the whole version.
    SOURCE = RUBY_GRAMMAR_FRAGMENT

    REGEX = re.compile(RUBY_PATTERN, re.ASCII)

    def parse(self, version_string: str) -> Optional[Version]:
        match = self.REGEX.fullmatch(version_string)
        if match is None:
            return None
        return _version_from_match(match)

    def format(self, version: Version) -> str:
        pre_release = f".{version.pre_release}" if version.pre_release else ""
        return f"{version.major}.{version.minor}.{version.patch}{pre_release}"

    def grammar_fragment(self) -> str:
        return self.SOURCE

    def __repr__(self) -> str:
        return "RubyVersionFormat()"


class PythonVersionFormat:
    """PEP 440 versions: ``1.2.3rc1+local``.

    Only versions that map onto SemVer precedence are accepted: epoch 0, at
    most three release components, an optional ``a``/``b``/``rc``
    pre-release and an optional local label. Post and dev releases order
    differently under SemVer and are rejected, as are the ``v`` prefix and
    surrounding whitespace that PEP 440 otherwise tolerates.

    The pre-release is stored as ``"<letter>.<number>"`` (``"rc.1"``) so that
    :meth:`Version.compare` orders ``rc9`` below ``rc10``.

    ``format`` always emits normalized PEP 440. A pre-release that PEP 440
    cannot spell as ``a``/``b``/``rc`` (``"SNAPSHOT"``, ``"post.1"``) is moved
    into the local label, ahead of the build metadata.
    """

    def parse(self, version_string: str) -> Optional[Version]:
        if version_string != version_string.strip() or version_string[:1] in ("v", "V"):
            return None
        try:
            parsed = Pep440Version(version_string)
        except InvalidVersion:
            return None

        if (
            parsed.epoch
            or len(parsed.release) > 3
            or parsed.post is not None
            or parsed.dev is not None
        ):
            return None

        major, minor, patch = (parsed.release + (0, 0))[:3]
        pre_release = None
        if parsed.pre is not None:
            letter, number = parsed.pre
            pre_release = f"{letter}.{number}"

        return Version(major, minor, patch, pre_release, parsed.local)

    def format(self, version: Version) -> str:
        release = f"{version.major}.{version.minor}.{version.patch}"
        pre_release = ""
        local = [version.build] if version.build else []

        if version.pre_release:
            parsed = self._parse_pre_release(release, version.pre_release)
            if parsed is None:
                local.insert(0, version.pre_release)
            else:
                letter, number = parsed.pre
                pre_release = f"{letter}{number}"
                if parsed.local:
                    local.insert(0, parsed.local)

        labels = [
            _LOCAL_LABEL_SEPARATORS.sub(".", label).strip(".").lower()
            for label in local
        ]
        labels = [label for label in labels if label]
        build = f"+{'.'.join(labels)}" if labels else ""
        return f"{release}{pre_release}{build}"

    @staticmethod
    def _parse_pre_release(release: str, pre_release: str) -> Optional[Pep440Version]:
        """Return ``release-pre_release`` as PEP 440 if it is a plain pre-release."""
        try:
            parsed = Pep440Version(f"{release}-{pre_release}")
        except InvalidVersion:
            return None
        if parsed.pre is None or parsed.post is not None or parsed.dev is not None:
            return None
        return parsed

    def __repr__(self) -> str:
        return "PythonVersionFormat()"


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

VERSION_FORMATS: Mapping[str, VersionFormat] = {
    "semver": SemverVersionFormat(),
    "ruby": RubyVersionFormat(),
    "python": PythonVersionFormat(),
}


def get_version_format(name: str) -> VersionFormat:
    """Look up a registered dialect by name.

    Args:
        name: Dialect name, case-insensitive (``"semver"``, ``"ruby"``,
            ``"python"``).

    Returns:
        The shared, stateless format instance.

    Raises:
        UnknownVersionFormatError: No dialect is registered under ``name``.
    """
    try:
        return VERSION_FORMATS[name.lower()]
    except KeyError:
        raise UnknownVersionFormatError(name, available=VERSION_FORMATS) from None

