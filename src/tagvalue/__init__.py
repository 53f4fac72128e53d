# topmark:header:start
#
#   project      : TagValue
#   file         : __init__.py
#   file_relpath : src/tagvalue/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TagValue package.

TagValue parses line-oriented ``key: value`` documents (such as SPDX tag-value
files) incrementally, one line at a time, into pairs and blank-line-delimited
records. It exposes a typed parsing API and a small CLI.
"""

from __future__ import annotations

from tagvalue.api import iter_pairs, iter_records, parse_pairs, parse_records
from tagvalue.parsing import (
    KeyValuePair,
    KVParser,
    MarkerParsePolicy,
    Record,
    RecordParser,
    SPDXParsePolicy,
    TrivialParsePolicy,
)

__all__ = [
    "KVParser",
    "KeyValuePair",
    "MarkerParsePolicy",
    "Record",
    "RecordParser",
    "SPDXParsePolicy",
    "TrivialParsePolicy",
    "iter_pairs",
    "iter_records",
    "parse_pairs",
    "parse_records",
]
