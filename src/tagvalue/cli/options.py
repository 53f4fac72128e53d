# topmark:header:start
#
#   project      : TagValue
#   file         : options.py
#   file_relpath : src/tagvalue/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, parsing) and their
resolution logic, so commands and groups can stay thin. The helpers here are
Click-aware.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path
from typing import Callable, Generic, NoReturn, ParamSpec, TypeVar, cast

import click

from tagvalue.cli.errors import TagValueUsageError
from tagvalue.core.formats import OutputFormat
from tagvalue.parsing.policy import PolicyKind

P = ParamSpec("P")
R = TypeVar("R")
E = TypeVar("E", bound=Enum)


class EnumChoiceParam(click.ParamType, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum."""

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.choices = [cast("str", e.value) for e in self.enum_cls]

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        """Raise a BadParameter with a NoReturn signature (clear to type checkers)."""
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: object,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Convert a string (case-insensitive, by value) to a member of the Enum."""
        if value is None or isinstance(value, self.enum_cls):
            return cast("E | None", value)

        # KeyedStrEnum members also accept their names and aliases
        parse = getattr(self.enum_cls, "parse", None)
        if callable(parse):
            member = parse(str(value))
            if member is not None:
                return cast("E", member)

        lookup: dict[str, E] = {
            cast("str", choice.value).lower(): choice for choice in self.enum_cls
        }
        key = str(value).lower()
        if key in lookup:
            return lookup[key]

        self._fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode: Explicit color mode from CLI options (auto, always, never).
        stdout_isatty: Whether stdout is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled, False otherwise.

    Behavior:
        Honors --color and --no-color CLI flags.
        Honors FORCE_COLOR and NO_COLOR environment variables.
        Defaults to enabling color if stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v`` and ``-q`` counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        ``verbose_count`` (positive), ``-quiet_count`` (negative) or 0.

    Raises:
        TagValueUsageError: If both verbose and quiet flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise TagValueUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    return verbose_count if verbose_count else -quiet_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` counting options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity (report diagnostics and summaries).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress diagnostics on stderr.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--color`` and ``--no-color`` options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color the output: auto (default, when stdout is a terminal), always, never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        default=False,
        help="Disable ANSI colors in program output.",
    )(f)
    return f


def common_parse_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the options shared by the parsing commands.

    Every option defaults to ``None`` so that unset options do not override the
    configuration file (see
    [`MutableConfig.apply_cli_args`][tagvalue.config.model.MutableConfig.apply_cli_args]).
    """
    f = click.option(
        "--config",
        "config_file",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Read settings from this TOML file instead of discovering one.",
    )(f)
    f = click.option(
        "--policy",
        type=EnumChoiceParam(PolicyKind),
        default=None,
        help=f"Multi-line value policy ({', '.join(PolicyKind.keys())}).",
    )(f)
    f = click.option(
        "--open-marker",
        type=str,
        default=None,
        help="Open marker for the 'markers' policy (default: <text>).",
    )(f)
    f = click.option(
        "--close-marker",
        type=str,
        default=None,
        help="Close marker for the 'markers' policy (default: </text>).",
    )(f)
    f = click.option(
        "--strict/--lenient",
        "strict",
        default=None,
        help="Fail on (strict) or complete (lenient) a multi-line value left open at end of input.",
    )(f)
    f = click.option(
        "--fail-on-keyless/--no-fail-on-keyless",
        "fail_on_keyless",
        default=None,
        help="Exit with status 2 if any line has no key.",
    )(f)
    f = click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=None,
        help=f"Output format ({', '.join(OutputFormat.keys())}).",
    )(f)
    return f
