"""
relnames: release identifier formats.

Parses and builds the three identifiers a release pipeline shares with
external tooling, across pluggable version dialects:

    • Versions (SemVer, Ruby gem and PEP 440 dialects)
    • Release branch names (six recognised shapes, two deprecated)
    • Tag names (``[<component><separator>][v]<version>``)

Example::

    >>> from relnames import BranchName, RubyVersionFormat, Version
    >>> str(BranchName.of_version(Version(1, 2, 3, "alpha.1"), RubyVersionFormat()))
    'release-v1.2.3.alpha.1'
"""

from __future__ import annotations

from relnames.__version__ import __version__
from relnames.exceptions import (
    ConfigError,
    RelnamesError,
    UnknownVersionFormatError,
    VersionParseError,
)
from relnames.models import BranchName, BranchShape, TagName, Version, safe_branch_name
from relnames.core import (
    PythonVersionFormat,
    RubyVersionFormat,
    SemverVersionFormat,
    VersionFormat,
    get_grammar_fragment,
    get_version_format,
)

__license__ = "Apache-2.0"

__all__ = [
    "__version__",
    # Models
    "Version",
    "TagName",
    "BranchName",
    "BranchShape",
    "safe_branch_name",
    # Dialects
    "VersionFormat",
    "SemverVersionFormat",
    "RubyVersionFormat",
    "PythonVersionFormat",
    "get_grammar_fragment",
    "get_version_format",
    # Errors
    "RelnamesError",
    "VersionParseError",
    "UnknownVersionFormatError",
    "ConfigError",
]
