# topmark:header:start
#
#   project      : TagValue
#   file         : config.py
#   file_relpath : src/tagvalue/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TagValue `config` command group.

- ``tagvalue config dump``: print the effective configuration (defaults, then
  the discovered or given config file, then CLI options) as TOML.
- ``tagvalue config defaults``: print the built-in defaults as TOML.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from tagvalue.cli.commands.parse import resolve_config
from tagvalue.cli.options import EnumChoiceParam
from tagvalue.config.model import Config
from tagvalue.parsing.policy import PolicyKind

if TYPE_CHECKING:
    from tagvalue.cli.console import ClickConsole


@click.group(name="config", help="Inspect TagValue configuration.")
def config_command() -> None:
    """Group for configuration subcommands."""


@config_command.command(name="dump", help="Print the effective configuration as TOML.")
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read settings from this TOML file instead of discovering one.",
)
@click.option(
    "--policy",
    type=EnumChoiceParam(PolicyKind),
    default=None,
    help=f"Multi-line value policy ({', '.join(PolicyKind.keys())}).",
)
@click.option("--strict/--lenient", "strict", default=None, help="End-of-input mode.")
def dump_command(
    *,
    config_file: Path | None,
    policy: PolicyKind | None,
    strict: bool | None,
) -> None:
    """Print the merged configuration."""
    ctx = click.get_current_context()
    console: ClickConsole = ctx.obj["console"]
    config: Config = resolve_config(
        start=Path.cwd(),
        config_file=config_file,
        cli_args={"policy": policy, "strict": strict},
    )
    if ctx.obj.get("verbosity_level", 0) > 0:
        sources = ", ".join(str(p) for p in config.config_files) or "<defaults>"
        console.print(f"# sources: {sources}")
    console.print(config.to_toml(), nl=False)


@config_command.command(name="defaults", help="Print the built-in defaults as TOML.")
def defaults_command() -> None:
    """Print the default configuration."""
    ctx = click.get_current_context()
    console: ClickConsole = ctx.obj["console"]
    console.print(Config().to_toml(), nl=False)
