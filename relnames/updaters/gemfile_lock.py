"""Gemfile.lock version updater.

Locates a gem's own entry in a ``Gemfile.lock`` and rewrites its version::

    rails (7.0.1)
    rails (7.0.1.alpha1)

The version grammar comes from :attr:`RubyVersionFormat.SOURCE`, so the
updater and the Ruby dialect agree on what a gem version looks like.
Replacement is regex based, which keeps the rest of the lock file
byte-for-byte intact.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from relnames.core.version_format import RubyVersionFormat
from relnames.models.version import Version
from relnames.utils.logger import get_logger

logger = get_logger("updaters.gemfile_lock")

_ruby_format = RubyVersionFormat()


def build_gemfile_lock_version_pattern(gem_name: str) -> "re.Pattern[str]":
    """Build a pattern matching ``<gem_name> (<version>)``.

    Args:
        gem_name: Gem whose entry should be matched. Regex metacharacters
            are escaped, and the name must not be the tail of a longer
            gem name (``actionrails`` does not match ``rails``).

    Returns:
        Compiled pattern; group 1 captures the whole version.
    """
    return re.compile(
        rf"(?<![\w.-]){re.escape(gem_name)} \({RubyVersionFormat.SOURCE}\)"
    )


@dataclass(frozen=True)
class GemfileLockUpdater:
    """Rewrites the version of ``gem_name`` in Gemfile.lock content.

    Attributes:
        version: Version to write, rendered in the Ruby dialect.
        gem_name: Name of the gem to update.
    """

    version: Version
    gem_name: str

    def update_content(self, content: str) -> str:
        """Return ``content`` with the first ``gem_name`` entry updated.

        Content is returned unchanged when ``gem_name`` is empty or the gem
        does not appear.
        """
        if not self.gem_name:
            return content

        replacement = f"{self.gem_name} ({_ruby_format.format(self.version)})"
        updated, count = build_gemfile_lock_version_pattern(self.gem_name).subn(
            lambda _match: replacement, content, count=1
        )
        if count == 0:
            logger.debug("No version entry for gem %s", self.gem_name)
        else:
            logger.debug("Updated gem %s to %s", self.gem_name, replacement)
        return updated
