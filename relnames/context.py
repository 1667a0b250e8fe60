"""
Shared context object for relnames CLI commands.

One :class:`RelnamesContext` is created per invocation and handed to
subcommands through Click's context mechanism.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional

import click

from relnames.constants import DEFAULT_INCLUDE_V, DEFAULT_VERSION_FORMAT

if TYPE_CHECKING:
    from relnames.config import RelnamesConfig


class RelnamesContext:
    """Global context object for relnames CLI commands.

    Attributes:
        config_path: Path to the configuration file, if any.
        verbose: Verbosity level (0=WARNING, 1=INFO, 2+=DEBUG).
        color: Whether colored terminal output is enabled.
        config: Loaded configuration, set by the top-level group.
    """

    __slots__ = ("config_path", "verbose", "color", "config")

    def __init__(self) -> None:
        self.config_path: Optional[Path] = None
        self.verbose: int = 0
        self.color: bool = True
        self.config: Optional[RelnamesConfig] = None

    @property
    def default_version_format(self) -> str:
        """Dialect name from configuration, or the built-in default."""
        return self.config.version_format if self.config else DEFAULT_VERSION_FORMAT

    @property
    def include_v(self) -> bool:
        return self.config.include_v if self.config else DEFAULT_INCLUDE_V


#: Click decorator for injecting :class:`RelnamesContext` into commands.
pass_context = click.make_pass_decorator(RelnamesContext, ensure=True)
