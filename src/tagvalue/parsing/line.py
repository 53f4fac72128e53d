# topmark:header:start
#
#   project      : TagValue
#   file         : line.py
#   file_relpath : src/tagvalue/parsing/line.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Low-level classification of a single self-contained line.

`classify_line` decides whether one raw line is blank, keyless, or a
``key: value`` pair. It knows nothing about multi-line values; those are
handled by [`KVParser`][tagvalue.parsing.parser.KVParser] together with a
[`ParsePolicy`][tagvalue.parsing.policy.ParsePolicy].
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from tagvalue.constants import KEY_VALUE_DELIMITER
from tagvalue.parsing.pair import KeyValuePair

if TYPE_CHECKING:
    from collections.abc import Callable


class _ParsedLineBase:
    """Shared extraction helpers for the `ParsedLine` variants."""

    def is_pair(self) -> bool:
        """True if this line holds a key-value pair."""
        return isinstance(self, PairLine)

    def pair(self) -> KeyValuePair | None:
        """Return the contained pair, or ``None`` for blank and keyless lines."""
        if isinstance(self, PairLine):
            return self.kv
        return None

    def pair_or_err_on_keyless(self, err: BaseException) -> KeyValuePair | None:
        """Raise ``err`` for a keyless line, otherwise return the pair if present."""
        if isinstance(self, KeylessLine):
            raise err
        return self.pair()

    def pair_or_else_err_on_keyless(
        self, err: Callable[[str], BaseException]
    ) -> KeyValuePair | None:
        """Like `pair_or_err_on_keyless`, calling ``err(text)`` to build the exception."""
        if isinstance(self, KeylessLine):
            raise err(self.text)
        return self.pair()


@dataclass(frozen=True, slots=True)
class EmptyLine(_ParsedLineBase):
    """A line that is empty or consists only of whitespace."""


@dataclass(frozen=True, slots=True)
class KeylessLine(_ParsedLineBase):
    """A non-blank line without a key delimiter, kept verbatim."""

    text: str


@dataclass(frozen=True, slots=True)
class PairLine(_ParsedLineBase):
    """A line holding a proper ``key: value`` pair."""

    kv: KeyValuePair


ParsedLine = EmptyLine | KeylessLine | PairLine

EMPTY_LINE: Final[EmptyLine] = EmptyLine()


def classify_line(line: str) -> ParsedLine:
    """Classify one line of input.

    The first occurrence of ``": "`` splits the line: everything before it is the
    key, everything after it is the value. Neither side is trimmed.

    Args:
        line (str): A single line, without its line terminator.

    Returns:
        ParsedLine: ``EmptyLine`` for blank or whitespace-only input, ``PairLine``
            when the delimiter is present, ``KeylessLine`` (carrying ``line``
            unchanged) otherwise.
    """
    if not line.strip():
        return EMPTY_LINE
    key, delim, value = line.partition(KEY_VALUE_DELIMITER)
    if not delim:
        return KeylessLine(line)
    return PairLine(KeyValuePair(key=key, value=value))


def split_lines(text: str) -> list[str]:
    """Split a document into lines on ``"\\n"`` and ``"\\r\\n"`` only.

    Other characters that `str.splitlines` treats as boundaries (form feed,
    vertical tab, ``U+2028`` and friends) stay inside their line, so license
    texts keep their page breaks. A final terminator does not produce an extra
    empty line.

    Args:
        text (str): The whole document.

    Returns:
        list[str]: The lines, without terminators.
    """
    lines: list[str] = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]
