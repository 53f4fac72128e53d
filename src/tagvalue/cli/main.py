# topmark:header:start
#
#   project      : TagValue
#   file         : main.py
#   file_relpath : src/tagvalue/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TagValue CLI entry point.

Group-level options (verbosity, color) are resolved once and placed into
``ctx.obj``; subcommands read the shared console and verbosity from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tagvalue.cli.commands.config import config_command
from tagvalue.cli.commands.parse import parse_command, pairs_command, records_command
from tagvalue.cli.commands.version import version_command
from tagvalue.cli.console import ClickConsole
from tagvalue.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from tagvalue.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from tagvalue.config.logging import TagValueLogger

logger: TagValueLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured from the environment only
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    logger.debug(
        "CLI state: verbosity=%d, color=%s, log_level=%s",
        ctx.obj["verbosity_level"],
        enable_color,
        level_env,
    )


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="TagValue CLI: parse 'key: value' documents into pairs and records.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the TagValue CLI."""
    init_common_state(
        ctx, verbose=verbose, quiet=quiet, color_mode=color_mode, no_color=no_color
    )
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'tagvalue pairs FILE' or 'tagvalue records FILE'.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(pairs_command)

cli.add_command(records_command)

cli.add_command(parse_command)

cli.add_command(config_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
