# topmark:header:start
#
#   project      : TagValue
#   file         : version.py
#   file_relpath : src/tagvalue/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TagValue `version` command.

Prints the current TagValue version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from tagvalue.cli.options import EnumChoiceParam
from tagvalue.constants import TAGVALUE_VERSION
from tagvalue.core.formats import OutputFormat, is_machine_format

if TYPE_CHECKING:
    from tagvalue.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of TagValue.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(OutputFormat.keys())}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of TagValue.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    if is_machine_format(output_format):
        console.print(json.dumps({"version": TAGVALUE_VERSION}))
    elif ctx.obj.get("verbosity_level", 0) > 0:
        console.print(console.styled("TagValue version:", bold=True, underline=True))
        console.print(f"    {console.styled(TAGVALUE_VERSION, bold=True)}")
    else:
        console.print(console.styled(TAGVALUE_VERSION, bold=True))
