"""
Core version dialects for relnames.

    from relnames.core import RubyVersionFormat, get_version_format

New dialects implement :class:`VersionFormat` and, to be selectable by name
from the CLI and configuration, are added to ``VERSION_FORMATS``.
"""

from __future__ import annotations

from relnames.core.version_format import (
    VERSION_FORMATS,
    PythonVersionFormat,
    RubyVersionFormat,
    SemverVersionFormat,
    SupportsGrammarFragment,
    VersionFormat,
    get_grammar_fragment,
    get_version_format,
)

__all__ = [
    "VersionFormat",
    "SupportsGrammarFragment",
    "SemverVersionFormat",
    "RubyVersionFormat",
    "PythonVersionFormat",
    "VERSION_FORMATS",
    "get_grammar_fragment",
    "get_version_format",
]
