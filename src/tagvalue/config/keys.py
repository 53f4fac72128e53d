# topmark:header:start
#
#   project      : TagValue
#   file         : keys.py
#   file_relpath : src/tagvalue/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML section and key names used by TagValue configuration files."""

from __future__ import annotations

from typing import Final


class Toml:
    """Names of TOML tables and keys.

    ``tagvalue.toml`` holds a ``[tagvalue]`` table; ``pyproject.toml`` holds
    the same keys under ``[tool.tagvalue]``.
    """

    SECTION_TAGVALUE: Final[str] = "tagvalue"
    SECTION_TOOL: Final[str] = "tool"

    KEY_POLICY: Final[str] = "policy"
    KEY_OPEN_MARKER: Final[str] = "open_marker"
    KEY_CLOSE_MARKER: Final[str] = "close_marker"
    KEY_RECORDS: Final[str] = "records"
    KEY_END_OF_INPUT: Final[str] = "end_of_input"
    KEY_FAIL_ON_KEYLESS: Final[str] = "fail_on_keyless"
