# topmark:header:start
#
#   project      : TagValue
#   file         : test_policy.py
#   file_relpath : tests/parsing/test_policy.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the bundled parse policies and policy selection by name."""

from __future__ import annotations

import pytest

from tests.conftest import parametrize
from tagvalue.parsing.policy import (
    CompleteValue,
    ContinueMultiline,
    FinishMultiline,
    MarkerParsePolicy,
    PolicyKind,
    SPDXParsePolicy,
    StartOfMultiline,
    TrivialParsePolicy,
    get_policy,
)


def test_trivial_policy_never_opens_a_span() -> None:
    """Every value is complete, markers included."""
    policy = TrivialParsePolicy()
    assert policy.process_value("K", "<text>open") == CompleteValue("<text>open")
    assert policy.process_continuation("K", "line") == FinishMultiline("line")


@parametrize(
    "value,expected",
    [
        ("plain", CompleteValue("plain")),
        ("<text>one line</text>", CompleteValue("one line")),
        ("<text></text>", CompleteValue("")),
        ("<text>kept</text> dropped", CompleteValue("kept")),
        ("<text>first", StartOfMultiline("first")),
        ("<text>", StartOfMultiline(None)),
        (" <text>not at start", CompleteValue(" <text>not at start")),
    ],
)
def test_spdx_policy_process_value(value: str, expected: object) -> None:
    """Values starting with ``<text>`` are unwrapped or open a span."""
    assert SPDXParsePolicy().process_value("K", value) == expected


@parametrize(
    "line,expected",
    [
        ("middle", ContinueMultiline("middle")),
        ("", ContinueMultiline("")),
        ("Other: looks like a pair", ContinueMultiline("Other: looks like a pair")),
        ("last</text>", FinishMultiline("last")),
        ("</text>", FinishMultiline(None)),
        ("end</text> and trailing", FinishMultiline("end")),
    ],
)
def test_spdx_policy_process_continuation(line: str, expected: object) -> None:
    """Lines inside a span are kept verbatim until the close marker."""
    assert SPDXParsePolicy().process_continuation("K", line) == expected


def test_custom_markers() -> None:
    """Any non-empty marker pair works the same way."""
    policy = MarkerParsePolicy(open_marker="{{", close_marker="}}")
    assert policy.process_value("K", "{{a}}") == CompleteValue("a")
    assert policy.process_value("K", "{{a") == StartOfMultiline("a")
    assert policy.process_continuation("K", "b}}") == FinishMultiline("b")
    assert policy.process_value("K", "<text>x") == CompleteValue("<text>x")


@parametrize("open_marker,close_marker", [("", "}}"), ("{{", "")])
def test_empty_markers_are_rejected(open_marker: str, close_marker: str) -> None:
    """Empty markers would match everywhere."""
    with pytest.raises(ValueError, match="non-empty"):
        MarkerParsePolicy(open_marker=open_marker, close_marker=close_marker)


def test_spdx_policy_uses_text_markers() -> None:
    """The SPDX policy is the marker policy with ``<text>``/``</text>``."""
    policy = SPDXParsePolicy()
    assert isinstance(policy, MarkerParsePolicy)
    assert (policy.open_marker, policy.close_marker) == ("<text>", "</text>")


@parametrize(
    "raw,kind",
    [
        ("trivial", PolicyKind.TRIVIAL),
        ("PLAIN", PolicyKind.TRIVIAL),
        ("markers", PolicyKind.MARKERS),
        ("marker", PolicyKind.MARKERS),
        ("spdx", PolicyKind.SPDX),
        (" Spdx ", PolicyKind.SPDX),
    ],
)
def test_policy_kind_parse(raw: str, kind: PolicyKind) -> None:
    """Policy names are case-insensitive and accept aliases."""
    assert PolicyKind.parse(raw) is kind


def test_policy_kind_parse_unknown() -> None:
    """Unknown names parse to ``None``."""
    assert PolicyKind.parse("yaml") is None


def test_get_policy_builds_each_kind() -> None:
    """`get_policy` maps each kind to its bundled policy."""
    assert isinstance(get_policy(PolicyKind.TRIVIAL), TrivialParsePolicy)
    assert isinstance(get_policy(PolicyKind.SPDX), SPDXParsePolicy)
    markers = get_policy(PolicyKind.MARKERS, open_marker="[[", close_marker="]]")
    assert markers == MarkerParsePolicy(open_marker="[[", close_marker="]]")
