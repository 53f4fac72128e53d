# topmark:header:start
#
#   project      : TagValue
#   file         : __init__.py
#   file_relpath : src/tagvalue/parsing/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Incremental tag-value parsing.

Layers, leaf first:

- ``line``: classify one raw line (blank, keyless, or ``key: value``).
- ``policy``: pluggable strategies deciding whether a value spans lines.
- ``parser``: the `KVParser` state machine emitting one output per line.
- ``record``: `RecordParser`, grouping pairs into blank-line-delimited records.
"""

from __future__ import annotations

from tagvalue.parsing.errors import (
    MissingFieldError,
    RecordError,
    TagValueError,
    TruncatedValueError,
    WantedAtMostOneFoundMoreError,
    WantedOneFoundMoreError,
)
from tagvalue.parsing.line import (
    EmptyLine,
    KeylessLine,
    PairLine,
    ParsedLine,
    classify_line,
    split_lines,
)
from tagvalue.parsing.output import LineNumber, Output, OutputKind
from tagvalue.parsing.pair import KeyValuePair
from tagvalue.parsing.parser import KVParser, ParserState
from tagvalue.parsing.policy import (
    CompleteValue,
    ContinueMultiline,
    FinishMultiline,
    MarkerParsePolicy,
    ParsePolicy,
    PolicyKind,
    SPDXParsePolicy,
    StartOfMultiline,
    TrivialParsePolicy,
    get_policy,
)
from tagvalue.parsing.record import BlankLineRecordEmitter, Record, RecordEmitter, RecordParser

__all__ = [
    "BlankLineRecordEmitter",
    "CompleteValue",
    "ContinueMultiline",
    "EmptyLine",
    "FinishMultiline",
    "KVParser",
    "KeyValuePair",
    "KeylessLine",
    "LineNumber",
    "MarkerParsePolicy",
    "MissingFieldError",
    "Output",
    "OutputKind",
    "PairLine",
    "ParsePolicy",
    "ParsedLine",
    "ParserState",
    "PolicyKind",
    "Record",
    "RecordEmitter",
    "RecordError",
    "RecordParser",
    "SPDXParsePolicy",
    "StartOfMultiline",
    "TagValueError",
    "TrivialParsePolicy",
    "TruncatedValueError",
    "WantedAtMostOneFoundMoreError",
    "WantedOneFoundMoreError",
    "classify_line",
    "get_policy",
    "split_lines",
]
