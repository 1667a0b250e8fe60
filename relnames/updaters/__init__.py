"""
Content updaters that rewrite versions inside manifest files.

Updaters work on file *content*; reading and writing files is left to the
caller.
"""

from __future__ import annotations

from relnames.updaters.gemfile_lock import (
    GemfileLockUpdater,
    build_gemfile_lock_version_pattern,
)

__all__ = [
    "GemfileLockUpdater",
    "build_gemfile_lock_version_pattern",
]
