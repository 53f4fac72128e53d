# topmark:header:start
#
#   project      : TagValue
#   file         : test_output.py
#   file_relpath : tests/parsing/test_output.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the `Output` and `LineNumber` wrappers."""

from __future__ import annotations

import pytest

from tagvalue.parsing.output import LineNumber, Output, OutputKind
from tagvalue.parsing.pair import KeyValuePair


class KeylessLineError(Exception):
    """Raised by the tests for keyless lines."""


def test_variant_predicates() -> None:
    """Exactly one predicate holds per variant."""
    cases = {
        OutputKind.BLANK: Output.blank(),
        OutputKind.PENDING: Output.pending(),
        OutputKind.KEYLESS: Output.keyless("x"),
        OutputKind.DONE: Output.done(1),
    }
    for kind, output in cases.items():
        flags = (output.is_blank, output.is_pending, output.is_keyless, output.is_done)
        assert sum(flags) == 1
        assert output.kind is kind


def test_ok_only_returns_done_payload() -> None:
    """`ok()` extracts the payload of ``DONE`` only."""
    assert Output.done("v").ok() == "v"
    assert Output.blank().ok() is None
    assert Output.pending().ok() is None
    assert Output.keyless("x").ok() is None


def test_ok_or_err_on_keyless() -> None:
    """Keyless outputs raise the given error; other variants behave like `ok()`."""
    err = KeylessLineError("no key")
    assert Output.done("v").ok_or_err_on_keyless(err) == "v"
    assert Output.pending().ok_or_err_on_keyless(err) is None
    with pytest.raises(KeylessLineError, match="no key"):
        Output.keyless("x").ok_or_err_on_keyless(err)


def test_ok_or_else_err_on_keyless_passes_line_text() -> None:
    """The error factory receives the keyless line text."""
    with pytest.raises(KeylessLineError, match="stray text"):
        Output.keyless("stray text").ok_or_else_err_on_keyless(KeylessLineError)
    assert Output.blank().ok_or_else_err_on_keyless(KeylessLineError) is None


def test_map_touches_done_only() -> None:
    """`map` transforms ``DONE`` payloads and passes other variants through."""
    assert Output.done(2).map(lambda n: n * 10) == Output.done(20)
    assert Output.keyless("x").map(lambda n: n * 10) == Output.keyless("x")
    assert Output.pending().map(lambda n: n * 10) is Output.pending()


def test_repr() -> None:
    """Reprs read like the constructors."""
    assert repr(Output.blank()) == "Output.blank()"
    assert repr(Output.pending()) == "Output.pending()"
    assert repr(Output.keyless("x")) == "Output.keyless('x')"
    assert repr(Output.done(KeyValuePair("k", "v"))) == (
        "Output.done(KeyValuePair(key='k', value='v'))"
    )


def test_line_number_helpers() -> None:
    """`LineNumber` unwraps, maps and delegates the extraction helpers."""
    numbered = LineNumber(7, Output.done(KeyValuePair("k", "v")))
    assert numbered.into_tuple() == (7, Output.done(KeyValuePair("k", "v")))
    assert numbered.into_inner() == Output.done(KeyValuePair("k", "v"))
    assert numbered.ok() == KeyValuePair("k", "v")
    assert numbered.map(lambda o: o.ok()) == LineNumber(7, KeyValuePair("k", "v"))

    keyless = LineNumber(8, Output.keyless("junk"))
    assert keyless.ok() is None
    with pytest.raises(KeylessLineError):
        keyless.ok_or_err_on_keyless(KeylessLineError())
    with pytest.raises(KeylessLineError, match="junk"):
        keyless.ok_or_else_err_on_keyless(KeylessLineError)
    assert LineNumber(9, Output.blank()).ok_or_err_on_keyless(KeylessLineError()) is None
