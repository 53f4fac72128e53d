# topmark:header:start
#
#   project      : TagValue
#   file         : api.py
#   file_relpath : src/tagvalue/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Stream-level convenience API.

These helpers drive a [`KVParser`][tagvalue.parsing.parser.KVParser] or
[`RecordParser`][tagvalue.parsing.record.RecordParser] over an iterable of
already-split lines and take care of the end-of-input flush. Reading the lines
(from a file, a socket, ...) stays with the caller.

Example:
    ```python
    from tagvalue.api import iter_records
    from tagvalue.parsing import SPDXParsePolicy

    # newline="\\n": only "\\n" ends a line, form feeds stay inside values
    with open("doc.spdx", encoding="utf-8", newline="\\n") as fh:
        for numbered in iter_records(
            (line.rstrip("\\r\\n") for line in fh), policy=SPDXParsePolicy()
        ):
            print(numbered.line_number, numbered.value.value_for_key("PackageName"))
    ```
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from tagvalue.config.logging import get_logger
from tagvalue.core.diagnostics import Diagnostic, DiagnosticLevel
from tagvalue.parsing.line import split_lines
from tagvalue.parsing.output import LineNumber
from tagvalue.parsing.parser import KVParser
from tagvalue.parsing.record import Record, RecordParser

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from tagvalue.config.logging import TagValueLogger
    from tagvalue.parsing.pair import KeyValuePair
    from tagvalue.parsing.policy import ParsePolicy

logger: TagValueLogger = get_logger(__name__)


def iter_pairs(
    lines: Iterable[str],
    *,
    policy: ParsePolicy | None = None,
    strict: bool = False,
) -> Iterator[LineNumber[KeyValuePair]]:
    """Yield every completed pair found in ``lines``.

    A multi-line value still open when ``lines`` is exhausted is flushed and
    yielded last, tagged with the total line count.

    Args:
        lines (Iterable[str]): Input lines without line terminators.
        policy (ParsePolicy | None): Parse policy; trivial if ``None``.
        strict (bool): Raise `TruncatedValueError` on an unterminated value
            instead of flushing it.

    Yields:
        LineNumber[KeyValuePair]: Each pair with the line on which it completed.
    """
    parser = KVParser(policy)
    for line in lines:
        numbered = parser.process_line(line)
        pair = numbered.value.ok()
        if pair is not None:
            yield LineNumber(numbered.line_number, pair)
    pending = parser.take_pending_pair(strict=strict)
    if pending is not None:
        yield LineNumber(parser.lines_processed, pending)


def iter_records(
    lines: Iterable[str],
    *,
    policy: ParsePolicy | None = None,
    strict: bool = False,
) -> Iterator[LineNumber[Record]]:
    """Yield every blank-line-delimited record found in ``lines``.

    The trailing record is yielded even without a closing blank line.

    Args:
        lines (Iterable[str]): Input lines without line terminators.
        policy (ParsePolicy | None): Parse policy; trivial if ``None``.
        strict (bool): Raise `TruncatedValueError` on an unterminated value
            instead of flushing it.

    Yields:
        LineNumber[Record]: Each record with the line on which it completed.
    """
    parser = RecordParser(KVParser(policy))
    for line in lines:
        numbered = parser.process_line(line)
        record = Record.from_output(numbered.value)
        if record is not None:
            yield LineNumber(numbered.line_number, record)
    record = Record.from_output(parser.end_input(strict=strict))
    if record is not None:
        yield LineNumber(parser.lines_processed, record)


def parse_pairs(
    text: str, *, policy: ParsePolicy | None = None, strict: bool = False
) -> list[KeyValuePair]:
    """Parse a whole document into its pairs (see `iter_pairs`)."""
    return [n.value for n in iter_pairs(split_lines(text), policy=policy, strict=strict)]


def parse_records(
    text: str, *, policy: ParsePolicy | None = None, strict: bool = False
) -> list[Record]:
    """Parse a whole document into its records (see `iter_records`)."""
    return [n.value for n in iter_records(split_lines(text), policy=policy, strict=strict)]


# --- Scanning with diagnostics (used by the CLI) ---


@dataclass
class ScanResult:
    """Everything found while scanning a document.

    Attributes:
        pairs (list[LineNumber[KeyValuePair]]): Completed pairs (pair mode only).
        records (list[LineNumber[Record]]): Completed records (record mode only).
        diagnostics (list[Diagnostic]): Keyless lines and truncated values.
        lines_processed (int): Total number of lines fed to the parser.
        n_keyless (int): Number of keyless lines seen.
    """

    pairs: list[LineNumber[KeyValuePair]] = field(default_factory=list)
    records: list[LineNumber[Record]] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    lines_processed: int = 0
    n_keyless: int = 0


def scan_document(
    lines: Iterable[str],
    *,
    policy: ParsePolicy | None = None,
    records: bool = False,
    strict: bool = False,
) -> ScanResult:
    """Run a parser over ``lines``, collecting results and diagnostics.

    Keyless lines are reported as WARNING diagnostics. An unterminated
    multi-line value is reported as an ERROR diagnostic in lenient mode, and
    raises in strict mode.

    Args:
        lines (Iterable[str]): Input lines without line terminators.
        policy (ParsePolicy | None): Parse policy; trivial if ``None``.
        records (bool): Group pairs into records.
        strict (bool): Raise `TruncatedValueError` on an unterminated value.

    Returns:
        ScanResult: Pairs or records, plus diagnostics.
    """
    result = ScanResult()
    pair_parser = KVParser(policy)
    record_parser: RecordParser | None = RecordParser(pair_parser) if records else None

    for line in lines:
        if record_parser is not None:
            numbered_record = record_parser.process_line(line)
            output = numbered_record.value
            record = Record.from_output(output)
            if record is not None:
                result.records.append(LineNumber(numbered_record.line_number, record))
        else:
            numbered_pair = pair_parser.process_line(line)
            output = numbered_pair.value
            pair = output.ok()
            if pair is not None:
                result.pairs.append(LineNumber(numbered_pair.line_number, pair))
        if output.is_keyless:
            result.n_keyless += 1
            result.diagnostics.append(
                Diagnostic(
                    DiagnosticLevel.WARNING,
                    f"line has no key: {output.text!r}",
                    pair_parser.lines_processed,
                )
            )

    truncated_key: str | None = pair_parser.pending_key
    if record_parser is not None:
        record = Record.from_output(record_parser.end_input(strict=strict))
        if record is not None:
            result.records.append(LineNumber(pair_parser.lines_processed, record))
    else:
        pending = pair_parser.take_pending_pair(strict=strict)
        if pending is not None:
            result.pairs.append(LineNumber(pair_parser.lines_processed, pending))
    if truncated_key is not None:
        result.diagnostics.append(
            Diagnostic(
                DiagnosticLevel.ERROR,
                f"input ended inside the multi-line value for key {truncated_key!r}",
                pair_parser.lines_processed,
            )
        )

    result.lines_processed = pair_parser.lines_processed
    logger.debug(
        "scanned %d line(s): %d pair(s), %d record(s), %d diagnostic(s)",
        result.lines_processed,
        len(result.pairs),
        len(result.records),
        len(result.diagnostics),
    )
    return result
