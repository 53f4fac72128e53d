# topmark:header:start
#
#   project      : TagValue
#   file         : formats.py
#   file_relpath : src/tagvalue/core/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output formats of the parsing commands.

``text`` lists pairs (prefixed with their line number) or records (with a
heading each) and sends diagnostics to stderr. ``json`` and ``ndjson`` embed
diagnostics in the output and never carry ANSI color.
"""

from __future__ import annotations

from tagvalue.core.enum_mixins import KeyedStrEnum


class OutputFormat(KeyedStrEnum):
    """Rendering of parsed pairs, records and diagnostics."""

    TEXT = ("text", "Human-readable listing", ("plain",))
    JSON = ("json", "One JSON document with pairs or records and diagnostics")
    NDJSON = ("ndjson", "One JSON object per pair, record or diagnostic", ("jsonl",))

    @property
    def is_machine(self) -> bool:
        """True for the JSON based formats."""
        return self is not OutputFormat.TEXT


def is_machine_format(fmt: OutputFormat | None) -> bool:
    """Return True if ``fmt`` is set and is a JSON based format."""
    return fmt is not None and fmt.is_machine
