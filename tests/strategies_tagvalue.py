# topmark:header:start
#
#   project      : TagValue
#   file         : strategies_tagvalue.py
#   file_relpath : tests/strategies_tagvalue.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for generating tag-value lines and documents.

Generated documents come with the pairs (or records) they are expected to parse
into, so property tests can compare parser output against a known answer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from hypothesis import strategies as st

from tagvalue.parsing.pair import KeyValuePair

Draw = Callable[[st.SearchStrategy[Any]], Any]

OPEN = "<text>"
CLOSE = "</text>"

# Only "\n" (and "\r\n") end a line; form feeds, NEL and the Unicode
# separators are ordinary line content. Surrogates are not valid text.
_TEXT_ALPHABET = st.characters(
    blacklist_categories=("Cs",),
    blacklist_characters="\r\n",
    whitelist_characters="\u2028\u2029",
    max_codepoint=0x00FF,
)

s_keys: st.SearchStrategy[str] = st.text(
    alphabet=st.characters(whitelist_categories=("Lu", "Ll", "Nd"), whitelist_characters="_-"),
    min_size=1,
    max_size=12,
)

s_raw_lines: st.SearchStrategy[str] = st.text(alphabet=_TEXT_ALPHABET, max_size=40)


def _no_markers(s: str) -> bool:
    return OPEN not in s and CLOSE not in s


s_plain_values: st.SearchStrategy[str] = st.text(alphabet=_TEXT_ALPHABET, max_size=30).filter(
    _no_markers
)

s_fragments: st.SearchStrategy[str] = s_plain_values.filter(lambda s: s != "")


@st.composite
def s_spdx_pair(draw: Draw) -> tuple[list[str], KeyValuePair]:
    """Draw one pair and its rendering under the SPDX policy.

    Returns:
        tuple[list[str], KeyValuePair]: The input lines and the expected pair.
    """
    key: str = draw(s_keys)
    if draw(st.booleans()):
        value: str = draw(s_plain_values)
        return [f"{key}: {value}"], KeyValuePair(key, value)

    first: str = draw(s_fragments)
    middle: list[str] = draw(st.lists(s_plain_values, max_size=4))
    last: str = draw(s_fragments)
    lines: list[str] = [f"{key}: {OPEN}{first}", *middle, f"{last}{CLOSE}"]
    return lines, KeyValuePair(key, "\n".join([first, *middle, last]))


@st.composite
def s_spdx_document(draw: Draw) -> tuple[list[str], list[KeyValuePair]]:
    """Draw a document of SPDX-rendered pairs, with blank lines sprinkled between."""
    lines: list[str] = []
    expected: list[KeyValuePair] = []
    for _ in range(draw(st.integers(min_value=0, max_value=8))):
        if draw(st.booleans()):
            lines.append("")
        pair_lines, pair = draw(s_spdx_pair())
        lines.extend(pair_lines)
        expected.append(pair)
    return lines, expected


@st.composite
def s_record_document(draw: Draw) -> tuple[list[str], list[list[KeyValuePair]]]:
    """Draw a document of single-line records separated by runs of blank lines."""
    lines: list[str] = [""] * draw(st.integers(min_value=0, max_value=2))
    records: list[list[KeyValuePair]] = []
    for _ in range(draw(st.integers(min_value=0, max_value=5))):
        fields: list[KeyValuePair] = [
            KeyValuePair(key, value)
            for key, value in draw(
                st.lists(st.tuples(s_keys, s_plain_values), min_size=1, max_size=4)
            )
        ]
        lines.extend(f"{f.key}: {f.value}" for f in fields)
        lines.extend([""] * draw(st.integers(min_value=1, max_value=3)))
        records.append(fields)
    if records and draw(st.booleans()):
        # Drop the separators after the last record; end of input closes it
        while lines and lines[-1] == "":
            lines.pop()
    return lines, records
