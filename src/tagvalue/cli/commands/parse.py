# topmark:header:start
#
#   project      : TagValue
#   file         : parse.py
#   file_relpath : src/tagvalue/cli/commands/parse.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TagValue `pairs`, `records` and `parse` commands.

`pairs` and `records` force their mode; `parse` follows the ``records`` setting
(config file, or ``--records/--pairs``). All three read one document (a file,
or standard input when the path is ``-``), resolve the effective configuration, run
[`scan_document`][tagvalue.api.scan_document] and render the result.

Exit codes:
    - ``0``: success (keyless lines are reported but tolerated by default).
    - ``2``: keyless lines were found and ``--fail-on-keyless`` is in effect.
    - ``65``: a multi-line value was left open at end of input in strict mode.
    - ``66``/``74``: the input file is missing or unreadable.

Diagnostics are written to stderr in text mode (unless ``-q``) and embedded
in the output document for machine formats.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click
from tomlkit.exceptions import ParseError as TomlkitParseError

from tagvalue.api import ScanResult, scan_document
from tagvalue.cli.errors import (
    TagValueConfigError,
    TagValueDataError,
    TagValueFileNotFoundError,
    TagValueIOError,
)
from tagvalue.cli.options import common_parse_options
from tagvalue.config.io import parse_toml_file
from tagvalue.config.logging import get_logger
from tagvalue.config.model import Config, MutableConfig
from tagvalue.core.diagnostics import compute_diagnostic_stats
from tagvalue.core.exit_codes import ExitCode
from tagvalue.core.formats import OutputFormat
from tagvalue.parsing.errors import TruncatedValueError
from tagvalue.parsing.line import split_lines

if TYPE_CHECKING:
    from tagvalue.cli.console import ClickConsole
    from tagvalue.config.logging import TagValueLogger
    from tagvalue.parsing.pair import KeyValuePair

logger: TagValueLogger = get_logger(__name__)

STDIN_PATH = "-"


def resolve_config(
    *,
    start: Path,
    config_file: Path | None,
    cli_args: dict[str, Any],
) -> Config:
    """Merge defaults, the config file and CLI arguments into a frozen `Config`.

    Raises:
        TagValueConfigError: If an explicitly given config file cannot be loaded.
    """
    if config_file is not None:
        try:
            parse_toml_file(config_file)
        except (OSError, TomlkitParseError, UnicodeDecodeError) as exc:
            raise TagValueConfigError(f"Cannot load config file {config_file}: {exc}") from exc
    layered: MutableConfig = MutableConfig.load_merged(start=start, config_file=config_file)
    return layered.apply_cli_args(cli_args).freeze()


def read_input_lines(path: Path) -> list[str]:
    """Read the document at ``path`` (or stdin for ``-``) and split it into lines.

    Raises:
        TagValueFileNotFoundError: If ``path`` does not exist.
        TagValueIOError: If ``path`` cannot be read or is not valid UTF-8.
    """
    if str(path) == STDIN_PATH:
        source: str = "standard input"
        data: bytes = click.get_binary_stream("stdin").read()
    else:
        if not path.exists():
            raise TagValueFileNotFoundError(f"No such file: {path}")
        source = str(path)
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise TagValueIOError(f"Cannot read {path}: {exc}") from exc
    # Decoded from bytes so that a lone "\r" is not taken for a line break
    try:
        return split_lines(data.decode("utf-8"))
    except UnicodeDecodeError as exc:
        raise TagValueIOError(f"Cannot decode {source} as UTF-8: {exc}") from exc


def _pair_to_dict(line_number: int, pair: KeyValuePair) -> dict[str, Any]:
    return {"line": line_number, "key": pair.key, "value": pair.value}


def _format_pair_text(console: ClickConsole, pair: KeyValuePair, margin: int = 0) -> str:
    # Continuation lines of a multi-line value line up under the first one
    value = pair.value.replace("\n", "\n" + " " * (margin + len(pair.key) + 2))
    return f"{console.styled(pair.key, bold=True)}: {value}"


def _render_text(console: ClickConsole, result: ScanResult, *, records: bool) -> None:
    if records:
        for index, numbered in enumerate(result.records, start=1):
            if index > 1:
                console.print()
            console.print(
                console.styled(f"# record {index} (line {numbered.line_number})", dim=True)
            )
            for pair in numbered.value:
                console.print(_format_pair_text(console, pair))
        return
    width: int = len(str(result.lines_processed))
    for numbered in result.pairs:
        prefix: str = f"{numbered.line_number:>{width}}  "
        text: str = _format_pair_text(console, numbered.value, margin=len(prefix))
        console.print(console.styled(prefix, dim=True) + text)


def _render_machine(
    console: ClickConsole,
    result: ScanResult,
    *,
    records: bool,
    fmt: OutputFormat,
) -> None:
    if records:
        items: list[dict[str, Any]] = [
            {
                "line": numbered.line_number,
                "fields": [pair.to_dict() for pair in numbered.value],
            }
            for numbered in result.records
        ]
    else:
        items = [_pair_to_dict(n.line_number, n.value) for n in result.pairs]
    diagnostics: list[dict[str, object]] = [d.to_dict() for d in result.diagnostics]

    if fmt is OutputFormat.NDJSON:
        kind: str = "record" if records else "pair"
        for item in items:
            console.print(json.dumps({"kind": kind, **item}))
        for diag in diagnostics:
            console.print(json.dumps({"kind": "diagnostic", **diag}))
        return

    key: str = "records" if records else "pairs"
    console.print(
        json.dumps(
            {
                key: items,
                "diagnostics": diagnostics,
                "lines_processed": result.lines_processed,
            },
            indent=2,
        )
    )


def run_parse_command(
    ctx: click.Context,
    *,
    path: Path,
    records: bool | None,
    cli_args: dict[str, Any],
    output_format: OutputFormat | None,
) -> None:
    """Shared implementation of the parsing commands.

    Args:
        ctx (click.Context): Current Click context.
        path (Path): Input document, or ``-`` for stdin.
        records (bool | None): Force record (``True``) or pair (``False``) mode;
            ``None`` defers to the configuration.
        cli_args (dict[str, Any]): Values of the shared parsing options.
        output_format (OutputFormat | None): Requested output format.
    """
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    verbosity_level: int = ctx.obj.get("verbosity_level", 0)
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    start: Path = Path.cwd() if str(path) == STDIN_PATH else path.parent
    config: Config = resolve_config(
        start=start,
        config_file=cli_args.pop("config_file", None),
        cli_args={**cli_args, "records": records},
    )
    logger.debug("Effective config: %r", config)

    lines: list[str] = read_input_lines(path)
    try:
        result: ScanResult = scan_document(
            lines,
            policy=config.make_policy(),
            records=config.records,
            strict=config.strict,
        )
    except TruncatedValueError as exc:
        raise TagValueDataError(str(exc)) from exc

    if fmt is OutputFormat.TEXT:
        _render_text(console, result, records=config.records)
        if verbosity_level >= 0:
            for diag in result.diagnostics:
                console.warn(diag.render(color=console.enable_color))
        if verbosity_level > 0:
            stats = compute_diagnostic_stats(result.diagnostics)
            found: int = len(result.records) if config.records else len(result.pairs)
            noun: str = "record(s)" if config.records else "pair(s)"
            console.print(
                console.styled(
                    f"{result.lines_processed} line(s), {found} {noun}, "
                    f"{stats.n_warning} warning(s), {stats.n_error} error(s)",
                    dim=True,
                )
            )
    else:
        _render_machine(console, result, records=config.records, fmt=fmt)

    if config.fail_on_keyless and result.n_keyless:
        ctx.exit(ExitCode.KEYLESS_FOUND)


_PATH_ARGUMENT = click.argument(
    "path",
    type=click.Path(dir_okay=False, allow_dash=True, path_type=Path),
    default=STDIN_PATH,
    required=False,
)


@click.command(
    name="pairs",
    help="Print every key-value pair found in PATH (default: stdin).",
)
@_PATH_ARGUMENT
@common_parse_options
@click.pass_context
def pairs_command(
    ctx: click.Context,
    path: Path,
    output_format: OutputFormat | None,
    **cli_args: Any,
) -> None:
    """Print the pairs of a document."""
    run_parse_command(
        ctx, path=path, records=False, cli_args=cli_args, output_format=output_format
    )


@click.command(
    name="records",
    help="Print every blank-line-delimited record found in PATH (default: stdin).",
)
@_PATH_ARGUMENT
@common_parse_options
@click.pass_context
def records_command(
    ctx: click.Context,
    path: Path,
    output_format: OutputFormat | None,
    **cli_args: Any,
) -> None:
    """Print the records of a document."""
    run_parse_command(
        ctx, path=path, records=True, cli_args=cli_args, output_format=output_format
    )


@click.command(
    name="parse",
    help="Print the pairs or records found in PATH (default: stdin), as configured.",
)
@_PATH_ARGUMENT
@common_parse_options
@click.option(
    "--records/--pairs",
    "records",
    default=None,
    help="Group pairs into records (default: the 'records' config setting).",
)
@click.pass_context
def parse_command(
    ctx: click.Context,
    path: Path,
    output_format: OutputFormat | None,
    records: bool | None,
    **cli_args: Any,
) -> None:
    """Print pairs or records, following the ``records`` setting."""
    run_parse_command(
        ctx, path=path, records=records, cli_args=cli_args, output_format=output_format
    )
