# topmark:header:start
#
#   project      : TagValue
#   file         : io.py
#   file_relpath : src/tagvalue/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load, query and render TOML configuration.

Parsing and rendering are done with `tomlkit`; parsed documents are returned as
plain `dict` structures. The getters never raise: they log and fall back to a
default so that a config mistake does not stop a run.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from tagvalue.config.keys import Toml
from tagvalue.config.logging import get_logger
from tagvalue.constants import PYPROJECT_TOML_NAME

if TYPE_CHECKING:
    from pathlib import Path

    from tagvalue.config.logging import TagValueLogger

TomlTable = dict[str, Any]

logger: TagValueLogger = get_logger(__name__)


def parse_toml_file(path: Path) -> TomlTable:
    """Parse a TOML file, letting read and parse errors propagate.

    Raises:
        OSError: If the file cannot be read.
        TomlkitParseError: If the file is not valid TOML.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    doc: tomlkit.TOMLDocument = tomlkit.parse(path.read_text(encoding="utf-8"))
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``tagvalue.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        return parse_toml_file(path)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except (TomlkitParseError, UnicodeDecodeError) as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_tagvalue_table(data: TomlTable, path: Path | None = None) -> TomlTable:
    """Return the TagValue table of a parsed document.

    ``pyproject.toml`` documents use ``[tool.tagvalue]``; any other document uses
    ``[tagvalue]``, or its top level when that table is absent.

    Args:
        data: Parsed TOML document.
        path: Where the document came from, used to recognize ``pyproject.toml``.

    Returns:
        The configuration table (possibly empty).
    """
    if path is not None and path.name == PYPROJECT_TOML_NAME:
        tool = get_table_value(data, Toml.SECTION_TOOL)
        return get_table_value(tool, Toml.SECTION_TAGVALUE)
    if Toml.SECTION_TAGVALUE in data:
        return get_table_value(data, Toml.SECTION_TAGVALUE)
    return data


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table, or an empty dict if missing or not a table."""
    value: Any | None = table.get(key)
    if isinstance(value, Mapping):
        return dict(cast("Mapping[str, Any]", value))
    if value is not None:
        logger.warning("Expected a table for %r, got %r; ignoring", key, value)
    return {}


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    If the value is a ``str``, it is returned as is. If the value is of type
    ``int``, ``float``, or ``bool``, it is coerced to a string using ``str(...)``.
    When the key is missing, or the value is not coercible, ``None`` is returned.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float, bool)):
        return str(value)
    logger.warning("Cannot coerce %r for %r to string; ignoring", value, key)
    return None


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Extract an optional boolean value from a TOML table.

    If the value is a ``bool``, it is returned as is. If the value is an integer,
    it is coerced via ``bool(value)``. When the key is missing, or the value is
    not coercible, ``None`` is returned.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value)
    logger.warning("Cannot coerce %r for %r to bool; ignoring", value, key)
    return None


def _strip_none(table: Mapping[str, Any]) -> TomlTable:
    out: TomlTable = {}
    for k, v in table.items():
        if v is None:
            continue
        out[k] = _strip_none(v) if isinstance(v, Mapping) else v
    return out


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string.

    TOML has no ``null``: entries whose value is ``None`` are omitted, at any depth.
    """
    return tomlkit.dumps(_strip_none(toml_dict))
