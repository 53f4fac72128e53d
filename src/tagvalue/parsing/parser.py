# topmark:header:start
#
#   project      : TagValue
#   file         : parser.py
#   file_relpath : src/tagvalue/parsing/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Incremental ``key: value`` parsing with [`KVParser`][tagvalue.parsing.parser.KVParser].

The parser is a two-state machine fed one line at a time:

- ``READY``: the line is classified (see
  [`classify_line`][tagvalue.parsing.line.classify_line]). Blank and keyless
  lines are reported as such. A pair is handed to the policy's
  ``process_value``; a complete value is emitted right away, a multi-line start
  stores the key and first fragment and moves to ``AWAITING_CONTINUATION``.
- ``AWAITING_CONTINUATION``: the raw line goes to the policy's
  ``process_continuation``. Fragments accumulate until the policy reports the
  end of the span; the fragments are then joined with ``"\\n"`` and the pair is
  emitted.

Every call to `KVParser.process_line` counts as one line, whatever the state or
outcome, and returns the output tagged with that count.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from tagvalue.config.logging import get_logger
from tagvalue.constants import MULTILINE_JOINER
from tagvalue.parsing.errors import TruncatedValueError
from tagvalue.parsing.line import EmptyLine, KeylessLine, classify_line
from tagvalue.parsing.output import LineNumber, Output
from tagvalue.parsing.pair import KeyValuePair
from tagvalue.parsing.policy import (
    CompleteValue,
    ContinueMultiline,
    ParsePolicy,
    TrivialParsePolicy,
)

if TYPE_CHECKING:
    from tagvalue.config.logging import TagValueLogger

logger: TagValueLogger = get_logger(__name__)


class ParserState(Enum):
    """States of the [`KVParser`][tagvalue.parsing.parser.KVParser] machine."""

    READY = "ready"
    AWAITING_CONTINUATION = "awaiting_continuation"


class KVParser:
    """A parser for key-value pairs (aka tag-value files).

    Parameterized on a [`ParsePolicy`][tagvalue.parsing.policy.ParsePolicy] to
    allow different handling of e.g. multi-line values.

    Attributes:
        policy (ParsePolicy): The policy consulted for every value and continuation line.
    """

    def __init__(self, policy: ParsePolicy | None = None) -> None:
        """Create a parser wrapping a parse policy.

        Args:
            policy (ParsePolicy | None): The policy to use. Defaults to
                [`TrivialParsePolicy`][tagvalue.parsing.policy.TrivialParsePolicy].
        """
        self.policy: ParsePolicy = policy if policy is not None else TrivialParsePolicy()
        self._state: ParserState = ParserState.READY
        self._line_num: int = 0
        # Only meaningful in AWAITING_CONTINUATION
        self._pending_key: str = ""
        self._value_lines: list[str] = []

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(policy={self.policy!r}, state={self._state.name}, "
            f"lines_processed={self._line_num})"
        )

    @property
    def lines_processed(self) -> int:
        """The number of lines processed so far."""
        return self._line_num

    @property
    def state(self) -> ParserState:
        """The current machine state."""
        return self._state

    @property
    def is_pending(self) -> bool:
        """True while a multi-line value is open."""
        return self._state is ParserState.AWAITING_CONTINUATION

    @property
    def pending_key(self) -> str | None:
        """Key of the open multi-line value, or ``None`` when idle."""
        return self._pending_key if self.is_pending else None

    def process_line(self, line: str) -> LineNumber[Output[KeyValuePair]]:
        """Pass a line to process and advance the state of the parser.

        If a complete key: value pair is now available, it will be found in the
        return value.

        Args:
            line (str): One line of input, without its line terminator.

        Returns:
            LineNumber[Output[KeyValuePair]]: The output for this line, tagged
                with the number of lines processed so far.
        """
        self._line_num += 1

        if self._state is ParserState.READY:
            output = self._process_ready(line)
        else:
            output = self._process_continuation(line)

        logger.trace(
            "line %d: %s -> %r (state=%s)", self._line_num, line, output, self._state.name
        )
        return LineNumber(self._line_num, output)

    def take_pending_pair(self, *, strict: bool = False) -> KeyValuePair | None:
        """Take the pending key: value pair, if any, and treat it as having completed.

        Useful at the end of input, to flush a multi-line value whose closing line
        never arrived. The value is built from the fragments gathered so far; the
        policy is not consulted.

        Args:
            strict (bool): Raise instead of silently completing an open value.

        Returns:
            KeyValuePair | None: The completed pair, or ``None`` if no value was open.

        Raises:
            TruncatedValueError: If ``strict`` and a multi-line value was open.
                The parser is reset to ``READY`` before raising.
        """
        if self._state is ParserState.READY:
            return None
        n_fragments: int = len(self._value_lines)
        pair = self._take_pending()
        if strict:
            raise TruncatedValueError(pair.key, self._line_num)
        logger.warning(
            "Input ended after line %d inside the multi-line value for key %r; keeping %d line(s)",
            self._line_num,
            pair.key,
            n_fragments,
        )
        return pair

    # --- Transitions ---

    def _process_ready(self, line: str) -> Output[KeyValuePair]:
        parsed = classify_line(line)
        if isinstance(parsed, EmptyLine):
            return Output.blank()
        if isinstance(parsed, KeylessLine):
            return Output.keyless(parsed.text)

        key: str = parsed.kv.key
        processed = self.policy.process_value(key, parsed.kv.value)
        if isinstance(processed, CompleteValue):
            return Output.done(KeyValuePair(key=key, value=processed.value))

        self._pending_key = key
        self._value_lines.clear()
        self._maybe_push_value_line(processed.value)
        self._state = ParserState.AWAITING_CONTINUATION
        logger.trace("line %d: value for %r continues on next line", self._line_num, key)
        return Output.pending()

    def _process_continuation(self, line: str) -> Output[KeyValuePair]:
        processed = self.policy.process_continuation(self._pending_key, line)
        self._maybe_push_value_line(processed.value)
        if isinstance(processed, ContinueMultiline):
            return Output.pending()
        return Output.done(self._take_pending())

    def _maybe_push_value_line(self, maybe_value: str | None) -> None:
        if maybe_value is not None:
            self._value_lines.append(maybe_value)

    def _take_pending(self) -> KeyValuePair:
        """Assemble the pending pair and reset to ``READY``."""
        pair = KeyValuePair(key=self._pending_key, value=MULTILINE_JOINER.join(self._value_lines))
        self._pending_key = ""
        self._value_lines = []
        self._state = ParserState.READY
        return pair
