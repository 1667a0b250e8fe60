"""Branch name commands for relnames.

``branch`` inspects an existing branch name; ``new-branch`` builds one::

    $ relnames branch release-please--branches--main--components--api
    $ relnames branch release-v1.2.3.rc.1 --version-format ruby --output json
    $ relnames new-branch --target main --group "web/frontend"
    $ relnames new-branch --version 1.2.3 --component api
"""

from __future__ import annotations

from typing import Optional

import click

from relnames.models import BranchName
from relnames.context import pass_context, RelnamesContext
from relnames.commands import (
    echo_json,
    fail,
    output_option,
    parse_version_or_fail,
    resolve_version_format,
    version_format_option,
)
from relnames.utils import get_logger, print_fields, print_warning

logger = get_logger("commands.branch")


@click.command()
@click.argument("name")
@version_format_option
@output_option
@pass_context
def branch(
    ctx: RelnamesContext,
    name: str,
    version_format: Optional[str],
    output: str,
) -> None:
    """Parse a release branch NAME and show its fields.

    Exits with 1 when NAME is not a release branch, or when it is a
    versioned (autorelease) branch whose version is not valid in the chosen
    dialect.
    """
    fmt = resolve_version_format(ctx, version_format)

    parsed = BranchName.parse(name, fmt, logger=logger)
    if parsed is None:
        if BranchName.is_release_please_branch(name):
            fail(f"Release branch {name!r} has no valid version for {fmt!r}")
        fail(f"Not a release branch: {name!r}")

    logger.debug("Parsed %s as %s", name, parsed.shape.value)

    if output == "json":
        echo_json(parsed.to_dict())
    else:
        print_fields(parsed.to_dict(), title="Branch")
        if parsed.shape.is_deprecated:
            print_warning(f"{parsed.shape.value} branch names are deprecated")


@click.command("new-branch")
@click.option("--target", "-t", "target_branch", help="Branch the release targets.")
@click.option("--version", "release_version", help="Release version (legacy form).")
@click.option("--component", "-c", help="Component name.")
@click.option("--group", "-g", help="Group name; unsafe characters become '-'.")
@version_format_option
@pass_context
def new_branch(
    ctx: RelnamesContext,
    target_branch: Optional[str],
    release_version: Optional[str],
    component: Optional[str],
    group: Optional[str],
    version_format: Optional[str],
) -> None:
    """Build a release branch name and print it.

    With --target the name follows the current grammar; with --version it
    follows the legacy ``release-[<component>-]v<version>`` form.
    """
    if bool(target_branch) == bool(release_version):
        raise click.UsageError("Pass exactly one of --target or --version.")
    if component and group:
        raise click.UsageError("--component and --group are mutually exclusive.")

    if release_version:
        if group:
            raise click.UsageError("--group requires --target.")
        fmt = resolve_version_format(ctx, version_format)
        version = parse_version_or_fail(fmt, release_version)

        if component:
            built = BranchName.of_component_version(component, version, fmt)
        else:
            built = BranchName.of_version(version, fmt)
    elif group:
        built = BranchName.of_group_target_branch(group, target_branch)
    elif component:
        built = BranchName.of_component_target_branch(component, target_branch)
    else:
        built = BranchName.of_target_branch(target_branch)

    click.echo(str(built))
