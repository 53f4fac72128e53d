# topmark:header:start
#
#   project      : TagValue
#   file         : policy.py
#   file_relpath : src/tagvalue/parsing/policy.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parse policies: the pluggable strategy behind multi-line values.

A *parse policy* tells [`KVParser`][tagvalue.parsing.parser.KVParser] whether
a value stands alone or opens a span that continues over following lines, and
strips any decoration from the fragments it keeps.

Contract:
    - ``process_value(key, value)`` is called for every ``key: value`` line
      read while no span is open. It returns `CompleteValue` or
      `StartOfMultiline`.
    - ``process_continuation(key, line)`` is called with each raw line while a
      span is open. It returns `ContinueMultiline` or `FinishMultiline`.

Both methods are pure. Policies are stateless strategy objects: construct one
and hand it to the parser; the same instance can serve any number of parsers.

Bundled policies:
    - `TrivialParsePolicy`: every value is complete; no multi-line support.
    - `MarkerParsePolicy`: values wrapped in an open/close marker pair may span
      lines (``<text>``/``</text>`` by default, see `SPDXParsePolicy`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from tagvalue.config.logging import get_logger
from tagvalue.constants import SPDX_TEXT_CLOSE, SPDX_TEXT_OPEN
from tagvalue.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from tagvalue.config.logging import TagValueLogger

logger: TagValueLogger = get_logger(__name__)


# --- Results returned by policies ---


@dataclass(frozen=True, slots=True)
class CompleteValue:
    """The value is complete and not continued on the following line.

    Attributes:
        value (str): The value with any decoration stripped.
    """

    value: str


@dataclass(frozen=True, slots=True)
class StartOfMultiline:
    """The value opens a multi-line span.

    Attributes:
        value (str | None): First fragment of the value, decoration stripped.
            ``None`` means this line contributes nothing.
    """

    value: str | None = None


@dataclass(frozen=True, slots=True)
class ContinueMultiline:
    """The span continues past this line.

    Attributes:
        value (str | None): Fragment to append, or ``None`` to drop the line.
    """

    value: str | None = None


@dataclass(frozen=True, slots=True)
class FinishMultiline:
    """This line terminates the span.

    Attributes:
        value (str | None): Final fragment to append, or ``None`` to drop the line.
    """

    value: str | None = None


ProcessedValue = CompleteValue | StartOfMultiline
ProcessedContinuationValue = ContinueMultiline | FinishMultiline


class ParsePolicy(Protocol):
    """Protocol implemented by parse policies."""

    def process_value(self, key: str, value: str) -> ProcessedValue:
        """Inspect a value parsed from a single ``key: value`` line.

        Args:
            key (str): The key of the pair.
            value (str): The raw value text following the delimiter.

        Returns:
            ProcessedValue: `CompleteValue` if the value stands alone,
                `StartOfMultiline` if following lines belong to it.
        """
        ...

    def process_continuation(self, key: str, continuation_line: str) -> ProcessedContinuationValue:
        """Inspect a raw line while a multi-line value for ``key`` is open.

        Args:
            key (str): The key of the pending pair.
            continuation_line (str): The raw input line; never blank-checked or split.

        Returns:
            ProcessedContinuationValue: `ContinueMultiline` to keep reading,
                `FinishMultiline` if this line ends the value.
        """
        ...


# --- Bundled policies ---


@dataclass(frozen=True, slots=True)
class TrivialParsePolicy:
    """A policy that never treats a value as multi-line."""

    def process_value(self, key: str, value: str) -> ProcessedValue:
        """Return the value unchanged as a `CompleteValue`."""
        return CompleteValue(value)

    def process_continuation(self, key: str, continuation_line: str) -> ProcessedContinuationValue:
        """Finish immediately with the line as-is.

        Unreachable through `KVParser`, which only asks for continuations after
        `StartOfMultiline`.
        """
        return FinishMultiline(continuation_line)


@dataclass(frozen=True, slots=True)
class MarkerParsePolicy:
    """A policy for values wrapped in an open/close marker pair.

    A value that starts with ``open_marker`` is decorated. If ``close_marker``
    appears later on the same line, the text between the markers is the complete
    value. Otherwise the value opens a span that ends on the first following line
    containing ``close_marker``. Markers are stripped from the kept fragments,
    and so is anything after the close marker on its line.

    Empty fragments on the opening and closing lines are dropped; lines inside
    the span, blank ones included, are kept as they are.

    Attributes:
        open_marker (str): Token opening a decorated value.
        close_marker (str): Token closing a decorated value.
    """

    open_marker: str = SPDX_TEXT_OPEN
    close_marker: str = SPDX_TEXT_CLOSE

    def __post_init__(self) -> None:
        if not self.open_marker or not self.close_marker:
            raise ValueError("Markers must be non-empty strings")

    def process_value(self, key: str, value: str) -> ProcessedValue:
        """Strip the markers from a decorated value, or open a span if unterminated."""
        if not value.startswith(self.open_marker):
            return CompleteValue(value)
        rest: str = value[len(self.open_marker) :]
        body, closed = self._split_at_close(key, rest)
        if closed:
            return CompleteValue(body)
        return StartOfMultiline(body or None)

    def process_continuation(self, key: str, continuation_line: str) -> ProcessedContinuationValue:
        """Finish on the line holding the close marker; keep every other line."""
        body, closed = self._split_at_close(key, continuation_line)
        if closed:
            return FinishMultiline(body or None)
        return ContinueMultiline(continuation_line)

    def _split_at_close(self, key: str, text: str) -> tuple[str, bool]:
        """Return ``(text before close marker, found)``."""
        body, marker, trailing = text.partition(self.close_marker)
        if not marker:
            return text, False
        if trailing:
            logger.trace("Dropping text after %s for key %r: %r", self.close_marker, key, trailing)
        return body, True


@dataclass(frozen=True, slots=True)
class SPDXParsePolicy(MarkerParsePolicy):
    """Marker policy for SPDX tag-value ``<text>``/``</text>`` blocks."""


# --- Selection by name ---


class PolicyKind(KeyedStrEnum):
    """Names under which the bundled policies can be selected.

    Used by configuration files and the CLI ``--policy`` option.
    """

    TRIVIAL = ("trivial", "Every value is a single line", ("plain", "none"))
    MARKERS = ("markers", "Values wrapped in open/close markers may span lines", ("marker",))
    SPDX = ("spdx", "SPDX <text>...</text> blocks may span lines", ())


def get_policy(
    kind: PolicyKind,
    *,
    open_marker: str = SPDX_TEXT_OPEN,
    close_marker: str = SPDX_TEXT_CLOSE,
) -> ParsePolicy:
    """Build the bundled policy registered under ``kind``.

    Args:
        kind (PolicyKind): Which policy to build.
        open_marker (str): Open marker; only used by ``PolicyKind.MARKERS``.
        close_marker (str): Close marker; only used by ``PolicyKind.MARKERS``.

    Returns:
        ParsePolicy: A new policy instance.
    """
    if kind is PolicyKind.TRIVIAL:
        return TrivialParsePolicy()
    if kind is PolicyKind.SPDX:
        return SPDXParsePolicy()
    return MarkerParsePolicy(open_marker=open_marker, close_marker=close_marker)
