"""Version commands for relnames.

``version`` parses a version in one dialect and renders it in another;
``compare`` orders two versions by SemVer precedence::

    $ relnames version 1.2.3.rc.1 --version-format ruby --to semver
    $ relnames compare 1.2.3-rc.1 1.2.3
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import click

from relnames.context import pass_context, RelnamesContext
from relnames.core.version_format import VERSION_FORMATS, get_grammar_fragment
from relnames.commands import (
    echo_json,
    output_option,
    parse_version_or_fail,
    resolve_version_format,
    version_format_option,
)
from relnames.utils import print_fields

_SYMBOLS = {-1: "<", 0: "=", 1: ">"}


@click.command()
@click.argument("text")
@version_format_option
@click.option(
    "--to",
    "target_format",
    type=click.Choice(sorted(VERSION_FORMATS), case_sensitive=False),
    default=None,
    help="Dialect to render into (default: same as --version-format).",
)
@output_option
@pass_context
def version(
    ctx: RelnamesContext,
    text: str,
    version_format: Optional[str],
    target_format: Optional[str],
    output: str,
) -> None:
    """Parse version TEXT and show its fields and renderings."""
    source = resolve_version_format(ctx, version_format)
    target = resolve_version_format(ctx, target_format or version_format)

    parsed = parse_version_or_fail(source, text)

    data: Dict[str, Any] = {
        "major": parsed.major,
        "minor": parsed.minor,
        "patch": parsed.patch,
        "pre_release": parsed.pre_release,
        "build": parsed.build,
        "pre_major": parsed.is_pre_major,
        "canonical": str(parsed),
        "formatted": target.format(parsed),
        "grammar_fragment": get_grammar_fragment(target),
    }

    if output == "json":
        echo_json(data)
    else:
        print_fields(data, title="Version")


@click.command()
@click.argument("left")
@click.argument("right")
@version_format_option
@pass_context
def compare(
    ctx: RelnamesContext,
    left: str,
    right: str,
    version_format: Optional[str],
) -> None:
    """Compare versions LEFT and RIGHT, printing '<', '=' or '>'."""
    fmt = resolve_version_format(ctx, version_format)

    versions = [parse_version_or_fail(fmt, text) for text in (left, right)]

    click.echo(f"{left} {_SYMBOLS[versions[0].compare(versions[1])]} {right}")
