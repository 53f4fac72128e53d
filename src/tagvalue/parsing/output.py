# topmark:header:start
#
#   project      : TagValue
#   file         : output.py
#   file_relpath : src/tagvalue/parsing/output.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-line output types returned by the TagValue parsers.

Every call to a parser's ``process_line`` yields exactly one
[`Output`][tagvalue.parsing.output.Output] wrapped in a
[`LineNumber`][tagvalue.parsing.output.LineNumber]:

- ``OutputKind.BLANK``: the line was empty or whitespace-only.
- ``OutputKind.PENDING``: a parse operation is in progress; no value yet.
- ``OutputKind.KEYLESS``: the line had no ``key: `` part and was not part of a
  multi-line value. ``text`` holds the line verbatim.
- ``OutputKind.DONE``: the line completed a value. ``payload`` holds it.

Construct outputs with the class methods (``Output.blank()``,
``Output.pending()``, ``Output.keyless(text)``, ``Output.done(payload)``) so
the one-variant-per-line invariant always holds.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, TypeVar, cast

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")
U = TypeVar("U")


class OutputKind(str, Enum):
    """Discriminator for the [`Output`][tagvalue.parsing.output.Output] variants."""

    BLANK = "blank"
    PENDING = "pending"
    KEYLESS = "keyless"
    DONE = "done"


@dataclass(frozen=True, slots=True)
class Output(Generic[T]):
    """Tagged result of processing one line.

    Attributes:
        kind (OutputKind): The active variant.
        text (str | None): The verbatim line for ``KEYLESS``; ``None`` otherwise.
        payload (T | None): The completed value for ``DONE``; ``None`` otherwise.
    """

    kind: OutputKind
    text: str | None = None
    payload: T | None = None

    # --- Constructors ---

    @classmethod
    def blank(cls) -> Output[Any]:
        """Return the output for an empty or whitespace-only line."""
        return _BLANK

    @classmethod
    def pending(cls) -> Output[Any]:
        """Return the output for a line that did not complete a value."""
        return _PENDING

    @classmethod
    def keyless(cls, text: str) -> Output[Any]:
        """Return the output for a line without a key, carrying it verbatim."""
        return cls(OutputKind.KEYLESS, text=text)

    @classmethod
    def done(cls, payload: T) -> Output[T]:
        """Return the output for a line that completed ``payload``."""
        return cls(OutputKind.DONE, payload=payload)

    # --- Predicates ---

    @property
    def is_blank(self) -> bool:
        """True if the variant is ``BLANK``."""
        return self.kind is OutputKind.BLANK

    @property
    def is_pending(self) -> bool:
        """True if the variant is ``PENDING``."""
        return self.kind is OutputKind.PENDING

    @property
    def is_keyless(self) -> bool:
        """True if the variant is ``KEYLESS``."""
        return self.kind is OutputKind.KEYLESS

    @property
    def is_done(self) -> bool:
        """True if the variant is ``DONE``."""
        return self.kind is OutputKind.DONE

    # --- Extraction helpers ---

    def ok(self) -> T | None:
        """Return the payload of a ``DONE`` output, ``None`` for every other variant.

        Similar to ``Result.ok()`` in other languages.
        """
        if self.kind is OutputKind.DONE:
            return cast("T", self.payload)
        return None

    def ok_or_err_on_keyless(self, err: BaseException) -> T | None:
        """Raise ``err`` on a keyless line, otherwise return the payload if present.

        Args:
            err (BaseException): The exception to raise for a ``KEYLESS`` output.

        Returns:
            T | None: The payload for ``DONE``; ``None`` for ``BLANK`` and ``PENDING``.

        Raises:
            BaseException: ``err``, when the output is ``KEYLESS``.
        """
        if self.kind is OutputKind.KEYLESS:
            raise err
        return self.ok()

    def ok_or_else_err_on_keyless(self, err: Callable[[str], BaseException]) -> T | None:
        """Like `ok_or_err_on_keyless`, building the exception lazily.

        Args:
            err (Callable[[str], BaseException]): Factory called with the keyless
                line text; the returned exception is raised.

        Returns:
            T | None: The payload for ``DONE``; ``None`` for ``BLANK`` and ``PENDING``.
        """
        if self.kind is OutputKind.KEYLESS:
            raise err(cast("str", self.text))
        return self.ok()

    def map(self, func: Callable[[T], U]) -> Output[U]:
        """Apply ``func`` to the payload of a ``DONE`` output.

        All other variants pass through unchanged.
        """
        if self.kind is OutputKind.DONE:
            return Output.done(func(cast("T", self.payload)))
        return cast("Output[U]", self)

    def __repr__(self) -> str:
        if self.kind is OutputKind.KEYLESS:
            return f"Output.keyless({self.text!r})"
        if self.kind is OutputKind.DONE:
            return f"Output.done({self.payload!r})"
        return f"Output.{self.kind.value}()"


_BLANK: Output[Any] = Output(OutputKind.BLANK)
_PENDING: Output[Any] = Output(OutputKind.PENDING)


@dataclass(frozen=True, slots=True)
class LineNumber(Generic[T]):
    """Wrap a value with the number of lines processed when it was produced.

    The number is 1-based and cumulative: it is typically the *last* line
    associated with the value.

    Attributes:
        line_number (int): Lines processed so far, including the current one.
        value (T): The wrapped value, usually an `Output`.
    """

    line_number: int
    value: T

    def into_inner(self) -> T:
        """Return the wrapped value."""
        return self.value

    def into_tuple(self) -> tuple[int, T]:
        """Return ``(line_number, value)``."""
        return (self.line_number, self.value)

    def map(self, func: Callable[[T], U]) -> LineNumber[U]:
        """Return a `LineNumber` with the same number and ``func(value)``."""
        return LineNumber(self.line_number, func(self.value))

    # The helpers below only apply when the wrapped value is an `Output`

    def ok(self: LineNumber[Output[U]]) -> U | None:
        """Delegate to ``value.ok()`` (see `Output.ok`)."""
        return self.value.ok()

    def ok_or_err_on_keyless(self: LineNumber[Output[U]], err: BaseException) -> U | None:
        """Delegate to ``value.ok_or_err_on_keyless(err)``."""
        return self.value.ok_or_err_on_keyless(err)

    def ok_or_else_err_on_keyless(
        self: LineNumber[Output[U]], err: Callable[[str], BaseException]
    ) -> U | None:
        """Delegate to ``value.ok_or_else_err_on_keyless(err)``."""
        return self.value.ok_or_else_err_on_keyless(err)
