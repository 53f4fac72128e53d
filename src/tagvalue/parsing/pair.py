# topmark:header:start
#
#   project      : TagValue
#   file         : pair.py
#   file_relpath : src/tagvalue/parsing/pair.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The `KeyValuePair` type shared by all TagValue parsers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class KeyValuePair:
    """A single ``key: value`` entry extracted from one or more input lines.

    Attributes:
        key (str): The key text, exactly as it appeared before the delimiter.
        value (str): The value text. Values assembled from a multi-line span
            are joined with ``"\\n"`` in original line order.
    """

    key: str
    value: str

    def as_tuple(self) -> tuple[str, str]:
        """Return the pair as a ``(key, value)`` tuple."""
        return (self.key, self.value)

    def to_dict(self) -> dict[str, str]:
        """Return a JSON-friendly mapping with ``key`` and ``value`` entries."""
        return {"key": self.key, "value": self.value}
