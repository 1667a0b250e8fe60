"""
CLI subcommands for relnames.

Each module defines Click commands that are registered on the top-level
group in :mod:`relnames.cli`. Commands report expected failures with
:func:`fail`, which exits through Click so that :func:`relnames.cli.main`
receives the exit code as a return value.
"""

from __future__ import annotations

import json
from typing import Any, NoReturn, Optional

import click

from relnames.constants import OUTPUT_FORMATS
from relnames.context import RelnamesContext
from relnames.models.version import Version
from relnames.utils import get_logger, print_error
from relnames.core.version_format import VERSION_FORMATS, VersionFormat, get_version_format

logger = get_logger("commands")

#: Shared ``--version-format`` option; ``None`` falls back to configuration.
version_format_option = click.option(
    "--version-format",
    "-f",
    "version_format",
    type=click.Choice(sorted(VERSION_FORMATS), case_sensitive=False),
    default=None,
    help="Version dialect (default: from configuration, else semver).",
)

#: Shared ``--output`` option for inspection commands.
output_option = click.option(
    "--output",
    "-o",
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    default="table",
    help="Output format.",
)


def fail(message: str) -> NoReturn:
    """Print ``message`` as an error and exit with status 1."""
    print_error(message)
    click.get_current_context().exit(1)


def resolve_version_format(ctx: RelnamesContext, name: Optional[str]) -> VersionFormat:
    """Return the dialect named on the command line or in configuration.

    Raises:
        UnknownVersionFormatError: The name is not registered.
    """
    chosen = name or ctx.default_version_format
    logger.debug(
        "Using %s version format (%s)",
        chosen,
        "--version-format" if name else "configuration",
    )
    return get_version_format(chosen)


def parse_version_or_fail(fmt: VersionFormat, text: str) -> Version:
    """Parse ``text`` with ``fmt``, failing the command when it is invalid."""
    parsed = fmt.parse(text)
    if parsed is None:
        fail(f"Invalid version {text!r} for {fmt!r}")
    return parsed


def echo_json(data: Any) -> None:
    """Print ``data`` as indented JSON for machine consumption."""
    click.echo(json.dumps(data, indent=2))
