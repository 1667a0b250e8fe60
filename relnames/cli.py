"""
Command-line interface for relnames.

The top-level group loads ``relnames.toml``, sets up logging and color, and
hands a :class:`~relnames.context.RelnamesContext` to the subcommands.
:func:`main` runs the group without Click's standalone handling and turns
every outcome into an exit code.
"""

from __future__ import annotations

import os
import sys
import logging
from pathlib import Path
from typing import Optional

import click

from relnames.__version__ import __version__
from relnames.config import RelnamesConfig, load_config
from relnames.context import RelnamesContext
from relnames.exceptions import (
    ConfigError,
    RelnamesError,
    UnknownVersionFormatError,
    VersionParseError,
)
from relnames.utils.logger import get_logger, setup_logging
from relnames.utils.console import print_error, print_warning, reconfigure_console

logger = get_logger("cli")

#: ``-v`` count to log level; anything past the last entry is DEBUG.
_VERBOSITY_LEVELS = (logging.WARNING, logging.INFO)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to relnames.toml (default: search upward from the cwd).",
    envvar="RELNAMES_CONFIG",
)
@click.option("--verbose", "-v", count=True, help="-v for info, -vv for debug.")
@click.option(
    "--color/--no-color",
    default=True,
    help="Enable or disable colored output.",
    envvar="RELNAMES_COLOR",
)
@click.version_option(__version__, prog_name="relnames", message="%(prog)s %(version)s")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    verbose: int,
    color: bool,
) -> None:
    """Parse and build release-please branch names, tag names and versions."""
    level = _VERBOSITY_LEVELS[verbose] if verbose < len(_VERBOSITY_LEVELS) else logging.DEBUG
    setup_logging(level=level, verbose=verbose > 1)

    try:
        loaded = load_config(config)
    except ConfigError as exc:
        print_error(str(exc))
        ctx.exit(1)

    ctx.obj = _build_context(loaded, config, verbose, color)
    _apply_color(color)

    logger.debug(
        "relnames %s: config %s, default version format %s, include_v %s",
        __version__,
        ctx.obj.config_path or "<none>",
        ctx.obj.default_version_format,
        ctx.obj.include_v,
    )


def _build_context(
    loaded: RelnamesConfig, config: Optional[Path], verbose: int, color: bool
) -> RelnamesContext:
    relnames_ctx = RelnamesContext()
    relnames_ctx.config = loaded
    relnames_ctx.config_path = config or loaded.source_path
    relnames_ctx.verbose = verbose
    relnames_ctx.color = color
    return relnames_ctx


def _apply_color(color: bool) -> None:
    # The console reads NO_COLOR when it is rebuilt.
    if color:
        os.environ.pop("NO_COLOR", None)
    else:
        os.environ["NO_COLOR"] = "1"
    reconfigure_console()


from relnames.commands.branch import branch, new_branch  # noqa: E402
from relnames.commands.tag import new_tag, tag  # noqa: E402
from relnames.commands.version import compare, version  # noqa: E402

for _command in (branch, new_branch, tag, new_tag, version, compare):
    cli.add_command(_command)


def main() -> int:
    """Run the CLI and return its exit code.

    Commands exit through Click, so their status comes back as the return
    value of the group. Library errors that escape a command are reported
    here.

    Returns:
        0 on success, 1 on a failed command or relnames error, 2 on a usage
        error, 130 when interrupted.
    """
    try:
        code = cli(standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        # Click turns Ctrl+C into Abort when it is not in standalone mode.
        print_warning("Interrupted")
        return 130
    except UnknownVersionFormatError as exc:
        print_error(f"Unknown version format {exc.name!r}")
        if exc.available:
            print_warning(f"Available formats: {', '.join(exc.available)}")
        return 1
    except VersionParseError as exc:
        print_error(f"Invalid version {exc.version_string!r}")
        logger.debug("Parse failure", exc_info=True)
        return 1
    except RelnamesError as exc:
        print_error(str(exc))
        logger.debug("Details: %s", exc.details or "<none>", exc_info=True)
        return 1
    except Exception as exc:
        print_error(f"Unexpected error: {exc}")
        logger.exception("Unhandled exception in CLI")
        return 1

    return code if isinstance(code, int) else 0


if __name__ == "__main__":
    sys.exit(main())
