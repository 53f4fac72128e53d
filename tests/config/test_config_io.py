# topmark:header:start
#
#   project      : TagValue
#   file         : test_config_io.py
#   file_relpath : tests/config/test_config_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for TOML I/O helpers in tagvalue.config.io."""

from __future__ import annotations

from pathlib import Path

from tests.conftest import parametrize
from tagvalue.config.io import (
    extract_tagvalue_table,
    get_bool_value_or_none,
    get_string_value_or_none,
    load_toml_dict,
    to_toml,
)


def test_load_toml_dict_missing_file(tmp_path: Path) -> None:
    """A missing file yields an empty dict instead of raising."""
    assert load_toml_dict(tmp_path / "absent.toml") == {}


def test_extract_table_from_pyproject() -> None:
    """``pyproject.toml`` documents are read from ``[tool.tagvalue]`` only."""
    data = {"tool": {"tagvalue": {"policy": "spdx"}}, "policy": "ignored"}
    assert extract_tagvalue_table(data, Path("pyproject.toml")) == {"policy": "spdx"}
    assert extract_tagvalue_table({"project": {}}, Path("pyproject.toml")) == {}


def test_extract_table_from_tagvalue_toml() -> None:
    """Other documents use ``[tagvalue]`` or, failing that, the top level."""
    assert extract_tagvalue_table({"tagvalue": {"records": True}}) == {"records": True}
    assert extract_tagvalue_table({"records": True}) == {"records": True}


@parametrize(
    "raw,expected",
    [("spdx", "spdx"), (1, "1"), (True, "True"), (None, None), ([1], None)],
)
def test_get_string_value_or_none(raw: object, expected: str | None) -> None:
    """Scalars are coerced to strings; other values are dropped."""
    assert get_string_value_or_none({"k": raw}, "k") == expected


@parametrize("raw,expected", [(True, True), (0, False), (None, None), ("yes", None)])
def test_get_bool_value_or_none(raw: object, expected: bool | None) -> None:
    """Booleans and integers are accepted; strings are not."""
    assert get_bool_value_or_none({"k": raw}, "k") == expected


def test_to_toml_omits_none() -> None:
    """TOML has no null; ``None`` entries are dropped at any depth."""
    text = to_toml({"tagvalue": {"policy": "spdx", "open_marker": None}})
    assert "policy" in text
    assert "open_marker" not in text
