# topmark:header:start
#
#   project      : TagValue
#   file         : record.py
#   file_relpath : src/tagvalue/parsing/record.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Records: groups of key-value pairs delimited by blank lines.

This module provides:
    - `RecordEmitter`: protocol deciding where records begin and end, fed with
      the per-line output of a [`KVParser`][tagvalue.parsing.parser.KVParser].
    - `BlankLineRecordEmitter`: the canonical emitter, closing a record on a
      blank line.
    - `RecordParser`: wraps a `KVParser` and an emitter.
    - `Record`: an ordered collection of fields with lookup helpers.

Record boundaries:
    - A blank line closes the current record if it has at least one field;
      otherwise it is reported as blank. Empty records are never emitted.
    - Keyless lines pass through; they never join a record nor close it.
    - Each completed pair joins the record in progress and the line reports
      ``PENDING``.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING, Protocol, overload

from tagvalue.config.logging import get_logger
from tagvalue.parsing.errors import (
    MissingFieldError,
    WantedAtMostOneFoundMoreError,
    WantedOneFoundMoreError,
)
from tagvalue.parsing.output import LineNumber, Output, OutputKind
from tagvalue.parsing.pair import KeyValuePair
from tagvalue.parsing.parser import KVParser

if TYPE_CHECKING:
    from tagvalue.config.logging import TagValueLogger

logger: TagValueLogger = get_logger(__name__)


class RecordEmitter(Protocol):
    """Groups the per-line output of a `KVParser` into records."""

    def accumulate_output(self, maybe_field: Output[KeyValuePair]) -> Output[list[KeyValuePair]]:
        """Handle one line's parser output, updating internal state and/or emitting a record."""
        ...

    def end_input(self) -> Output[list[KeyValuePair]]:
        """Signal the end of input, returning the record in progress if any."""
        ...


class BlankLineRecordEmitter:
    """A record emitter that ends and emits records on a blank line."""

    def __init__(self) -> None:
        self._fields: list[KeyValuePair] = []

    @property
    def has_fields(self) -> bool:
        """True if the record in progress holds at least one field."""
        return bool(self._fields)

    def accumulate_output(self, maybe_field: Output[KeyValuePair]) -> Output[list[KeyValuePair]]:
        """Fold one parser output into the record in progress."""
        kind = maybe_field.kind
        if kind is OutputKind.BLANK:
            return self._try_take()
        if kind is OutputKind.PENDING:
            return Output.pending()
        if kind is OutputKind.KEYLESS:
            return maybe_field  # type: ignore[return-value]
        self._fields.append(maybe_field.payload)  # type: ignore[arg-type]
        return Output.pending()

    def end_input(self) -> Output[list[KeyValuePair]]:
        """Emit the record in progress, or blank if it is empty."""
        return self._try_take()

    def _try_take(self) -> Output[list[KeyValuePair]]:
        if not self._fields:
            return Output.blank()
        fields, self._fields = self._fields, []
        return Output.done(fields)


class RecordParser:
    """Parses key-value pairs that are grouped in blank-line-separated records."""

    def __init__(
        self,
        inner: KVParser | None = None,
        emitter: RecordEmitter | None = None,
    ) -> None:
        """Create a record parser wrapping a pair parser.

        Args:
            inner (KVParser | None): The pair parser to drive. Defaults to a
                `KVParser` with the trivial policy.
            emitter (RecordEmitter | None): The record emitter. Defaults
                to a new `BlankLineRecordEmitter`.
        """
        self.inner: KVParser = inner if inner is not None else KVParser()
        self.emitter: RecordEmitter = (
            emitter if emitter is not None else BlankLineRecordEmitter()
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(inner={self.inner!r})"

    @property
    def lines_processed(self) -> int:
        """The number of lines processed so far."""
        return self.inner.lines_processed

    def process_line(self, line: str) -> LineNumber[Output[list[KeyValuePair]]]:
        """Pass a line to process and advance the state of the parser.

        If a record has finished, it will be found in the return value.

        Args:
            line (str): One line of input, without its line terminator.

        Returns:
            LineNumber[Output[list[KeyValuePair]]]: The output for this line,
                tagged with the number of lines processed so far.
        """
        line_number, output = self.inner.process_line(line).into_tuple()
        record_output = self.emitter.accumulate_output(output)
        if record_output.is_done:
            logger.debug(
                "line %d: record closed with %d field(s)",
                line_number,
                len(record_output.payload or ()),
            )
        return LineNumber(line_number, record_output)

    def end_input(self, *, strict: bool = False) -> Output[list[KeyValuePair]]:
        """End the input and return any record in progress.

        An open multi-line value is completed first (see
        [`KVParser.take_pending_pair`][tagvalue.parsing.parser.KVParser.take_pending_pair])
        and joins the record. The line count is not advanced.

        Args:
            strict (bool): Raise instead of silently completing an open multi-line value.

        Returns:
            Output[list[KeyValuePair]]: ``DONE`` with the trailing record, or
                ``BLANK`` if no field was pending.

        Raises:
            TruncatedValueError: If ``strict`` and a multi-line value was open.
        """
        pending = self.inner.take_pending_pair(strict=strict)
        if pending is not None:
            self.emitter.accumulate_output(Output.done(pending))
        return self.emitter.end_input()


class Record(Sequence[KeyValuePair]):
    """An ordered collection of key-value pairs with no blank lines between.

    Duplicate keys are allowed; the lookup helpers let callers decide how many
    occurrences they accept.
    """

    def __init__(self, fields: Sequence[KeyValuePair] = ()) -> None:
        self._fields: list[KeyValuePair] = list(fields)

    @classmethod
    def from_output(cls, output: Output[list[KeyValuePair]]) -> Record | None:
        """Wrap the payload of a record parser ``DONE`` output, ``None`` otherwise."""
        fields = output.ok()
        return None if fields is None else cls(fields)

    @overload
    def __getitem__(self, index: int) -> KeyValuePair: ...

    @overload
    def __getitem__(self, index: slice) -> list[KeyValuePair]: ...

    def __getitem__(self, index: int | slice) -> KeyValuePair | list[KeyValuePair]:
        return self._fields[index]

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self) -> Iterator[KeyValuePair]:
        return iter(self._fields)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Record):
            return self._fields == other._fields
        if isinstance(other, list):
            return self._fields == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Record({self._fields!r})"

    @property
    def fields(self) -> list[KeyValuePair]:
        """A copy of the fields, in original order."""
        return list(self._fields)

    def push_field(self, pair: KeyValuePair) -> None:
        """Append a field."""
        self._fields.append(pair)

    def count_fields_with_key(self, key: str) -> int:
        """Return the number of fields whose key matches ``key``."""
        return sum(1 for pair in self._fields if pair.key == key)

    def iter_values_for_key(self, key: str) -> Iterator[str]:
        """Iterate over the values (in original order) of fields whose key matches ``key``."""
        return (pair.value for pair in self._fields if pair.key == key)

    def values_for_key(self, key: str) -> list[str]:
        """Return the values (in original order) of fields whose key matches ``key``."""
        return list(self.iter_values_for_key(key))

    def value_for_key(self, key: str) -> str | None:
        """Return the value of the field with the given key, if any.

        Raises:
            WantedAtMostOneFoundMoreError: If more than one such field exists.
        """
        values = self.values_for_key(key)
        if len(values) > 1:
            raise WantedAtMostOneFoundMoreError(key, len(values))
        return values[0] if values else None

    def value_for_required_key(self, key: str) -> str:
        """Return the value of the field with the given key.

        Raises:
            MissingFieldError: If no such field exists.
            WantedOneFoundMoreError: If more than one such field exists.
        """
        values = self.values_for_key(key)
        if not values:
            raise MissingFieldError(key)
        if len(values) > 1:
            raise WantedOneFoundMoreError(key, len(values))
        return values[0]

    def to_dict(self) -> dict[str, list[str]]:
        """Group values by key, preserving first-seen key order."""
        grouped: dict[str, list[str]] = {}
        for pair in self._fields:
            grouped.setdefault(pair.key, []).append(pair.value)
        return grouped
