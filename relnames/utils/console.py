"""
Console output utilities for relnames using Rich.

User-facing output of CLI commands goes through this module; diagnostics go
through :mod:`relnames.utils.logger`.
"""

from __future__ import annotations

import os
import sys
import threading
from typing import Any, Dict, Optional

from rich.text import Text
from rich.table import Table
from rich.theme import Theme
from rich.console import Console

RELNAMES_THEME = Theme(
    {
        "success": "bold green",
        "error": "bold red",
        "warning": "bold yellow",
        "info": "bold cyan",
        "dim": "dim",
    }
)

_console: Optional[Console] = None
_console_lock = threading.Lock()


def _should_use_color() -> bool:
    if os.environ.get("NO_COLOR") or os.environ.get("CI"):
        return False
    try:
        return sys.stdout.isatty()
    except (AttributeError, OSError):
        return False


def _get_console() -> Console:
    """Return the shared Rich console, creating it on first use."""
    global _console

    if _console is None:
        with _console_lock:
            if _console is None:
                use_color = _should_use_color()
                _console = Console(
                    theme=RELNAMES_THEME,
                    no_color=not use_color,
                    highlight=use_color,
                )
    return _console


def reconfigure_console() -> None:
    """Drop the shared console so the next call picks up a changed environment."""
    global _console
    with _console_lock:
        _console = None


def print_error(message: str, *, prefix: str = "[ERROR]") -> None:
    _get_console().print(f"{prefix} {message}", style="error", markup=False)


def print_warning(message: str, *, prefix: str = "[WARNING]") -> None:
    _get_console().print(f"{prefix} {message}", style="warning", markup=False)


def print_fields(
    fields: Dict[str, Any],
    *,
    title: Optional[str] = None,
) -> None:
    """Render a ``name -> value`` mapping as a two-column table.

    ``None`` values are shown as ``-``.
    """
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("Field", style="info", no_wrap=True)
    table.add_column("Value", overflow="fold")

    for name, value in fields.items():
        table.add_row(name, Text("-" if value is None else str(value)))

    _get_console().print(table)

