"""Tag name commands for relnames.

::

    $ relnames tag my-lib-v1.2.3
    $ relnames tag api@2.0.0.rc.1 --version-format ruby
    $ relnames new-tag 1.2.3 --component my-lib --separator /
"""

from __future__ import annotations

import re
from typing import Optional

import click

from relnames.models import TagName
from relnames.constants import DEFAULT_TAG_SEPARATOR
from relnames.context import pass_context, RelnamesContext
from relnames.commands import (
    echo_json,
    fail,
    output_option,
    parse_version_or_fail,
    resolve_version_format,
    version_format_option,
)
from relnames.utils import get_logger, print_fields

logger = get_logger("commands.tag")

#: Same separator class as the tag grammar: one ASCII non-alphanumeric.
_SEPARATOR = re.compile(r"[^a-zA-Z0-9]")


@click.command()
@click.argument("name")
@version_format_option
@output_option
@pass_context
def tag(
    ctx: RelnamesContext,
    name: str,
    version_format: Optional[str],
    output: str,
) -> None:
    """Parse a tag NAME and show its fields."""
    fmt = resolve_version_format(ctx, version_format)

    parsed = TagName.parse(name, fmt)
    if parsed is None:
        component = TagName.extract_component(name)
        if component:
            logger.info("Tag %s has component %s", name, component)
        fail(f"Not a valid tag for {fmt!r}: {name!r}")

    if output == "json":
        echo_json(parsed.to_dict())
    else:
        print_fields(parsed.to_dict(), title="Tag")


def _validate_separator(
    _ctx: click.Context, _param: click.Parameter, value: str
) -> str:
    if _SEPARATOR.fullmatch(value) is None:
        raise click.BadParameter("must be a single non-alphanumeric character")
    return value


@click.command("new-tag")
@click.argument("version")
@click.option("--component", "-c", help="Component prefix.")
@click.option(
    "--separator",
    "-s",
    default=DEFAULT_TAG_SEPARATOR,
    show_default=True,
    callback=_validate_separator,
    help="Character between component and version.",
)
@click.option(
    "--v/--no-v",
    "include_v",
    default=None,
    help="Prefix the version with 'v' (default: from configuration).",
)
@version_format_option
@pass_context
def new_tag(
    ctx: RelnamesContext,
    version: str,
    component: Optional[str],
    separator: str,
    include_v: Optional[bool],
    version_format: Optional[str],
) -> None:
    """Build a tag name for VERSION and print it."""
    fmt = resolve_version_format(ctx, version_format)

    parsed = parse_version_or_fail(fmt, version)

    built = TagName(
        parsed,
        component=component,
        separator=separator,
        include_v=ctx.include_v if include_v is None else include_v,
    )
    click.echo(str(built))
