"""
Utility helpers for relnames.

- Logging configuration and retrieval
- Console output helpers (Rich-based)

Only symbols listed in ``__all__`` are considered part of the public API.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Logging utilities
# ---------------------------------------------------------------------------

from relnames.utils.logger import (
    disable_logging,
    get_logger,
    is_logging_configured,
    setup_logging,
)

# ---------------------------------------------------------------------------
# Console utilities
# ---------------------------------------------------------------------------

from relnames.utils.console import (
    print_error,
    print_fields,
    print_warning,
    reconfigure_console,
)

__all__ = [
    # Console
    "print_error",
    "print_fields",
    "print_warning",
    "reconfigure_console",
    # Logging
    "get_logger",
    "setup_logging",
    "disable_logging",
    "is_logging_configured",
]
