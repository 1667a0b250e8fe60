"""
Centralized constants for relnames.

This module defines the textual grammars shared with existing repositories'
branch and tag history, configuration defaults, and logging formats. The
grammar strings are wire contracts: changing them breaks recognition of
branches and tags that already exist.
"""

from typing import Final, Tuple

# ---------------------------------------------------------------------------
# Reserved branch prefix
# ---------------------------------------------------------------------------

#: Literal token prefixing every branch managed by the release tooling.
RESERVED_BRANCH_PREFIX: Final[str] = "release-please"

#: Prefix of the current double-dash branch family. Autorelease names must
#: never start with it.
RESERVED_BRANCHES_PREFIX: Final[str] = f"{RESERVED_BRANCH_PREFIX}--branches"

# ---------------------------------------------------------------------------
# Version grammars
# ---------------------------------------------------------------------------

#: SemVer dialect: ``M.m.p[-pre][+build]``.
SEMVER_PATTERN: Final[str] = (
    r"(?P<major>\d+)\.(?P<minor>\d+)\.(?P<patch>\d+)"
    r"(-(?P<pre_release>[^+]+))?(\+(?P<build>.*))?"
)

#: Ruby dialect: ``M.m.p`` then everything after ``.`` or ``-`` is prerelease.
RUBY_PATTERN: Final[str] = (
    r"(?P<major>\d+)\.(?P<minor>\d+)\.(?P<patch>\d+)(?:[.-](?P<pre_release>.+))?"
)

#: Reusable Ruby grammar fragment for embedding in larger patterns.
RUBY_GRAMMAR_FRAGMENT: Final[str] = r"((\d+)\.(\d+)\.(\d+)([.-]\w+.*)?)"

# ---------------------------------------------------------------------------
# Branch grammars
# ---------------------------------------------------------------------------

#: Legacy branch pattern used by releasetool.
AUTORELEASE_BRANCH_PATTERN: Final[str] = (
    r"release-?(?P<component>[\w.-]*)?-v(?P<version>[0-9].*)"
)

DEFAULT_BRANCH_PATTERN: Final[str] = (
    rf"{RESERVED_BRANCH_PREFIX}--branches--(?P<branch>.+)"
)

COMPONENT_BRANCH_PATTERN: Final[str] = (
    rf"{RESERVED_BRANCH_PREFIX}--branches--(?P<branch>.+)--components--(?P<component>.+)"
)

GROUP_BRANCH_PATTERN: Final[str] = (
    rf"{RESERVED_BRANCH_PREFIX}--branches--(?P<branch>.+)--groups--(?P<group>.+)"
)

#: Deprecated v12 form; ``/`` makes git treat parts as directories.
V12_DEFAULT_BRANCH_PATTERN: Final[str] = (
    rf"{RESERVED_BRANCH_PREFIX}/branches/(?P<branch>[^/]+)"
)

#: Deprecated v12 form with a component.
V12_COMPONENT_BRANCH_PATTERN: Final[str] = (
    rf"{RESERVED_BRANCH_PREFIX}/branches/(?P<branch>[^/]+)/components/(?P<component>.+)"
)

# ---------------------------------------------------------------------------
# Tag grammar
# ---------------------------------------------------------------------------

TAG_PATTERN: Final[str] = (
    r"((?P<component>.*)(?P<separator>[^a-zA-Z0-9]))?(?P<v>v)?"
    r"(?P<version>\d+\.\d+\.\d+.*)"
)

#: Separator used between component and version when none is given.
DEFAULT_TAG_SEPARATOR: Final[str] = "-"

# ---------------------------------------------------------------------------
# Configuration defaults
# ---------------------------------------------------------------------------

#: Name of the dialect used when neither flag nor config picks one.
DEFAULT_VERSION_FORMAT: Final[str] = "semver"

#: Whether re-rendered tags carry a literal ``v``.
DEFAULT_INCLUDE_V: Final[bool] = True

#: Output modes accepted by the inspection commands.
OUTPUT_FORMATS: Final[Tuple[str, ...]] = ("table", "json")

# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

#: Timestamp format for verbose logging.
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

#: Default log format (non-verbose).
LOG_DEFAULT_FORMAT: Final[str] = "%(levelname)s: %(message)s"

#: Verbose log format including timestamp and logger name.
LOG_VERBOSE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
