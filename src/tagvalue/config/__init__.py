# topmark:header:start
#
#   project      : TagValue
#   file         : __init__.py
#   file_relpath : src/tagvalue/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for TagValue.

- ``logging``: TRACE-aware logger class and colored log formatting.
- ``keys``: TOML section and key names.
- ``io``: tomlkit-based loading and typed value extraction.
- ``model``: the frozen `Config` snapshot and its `MutableConfig` builder.

Nothing is re-exported here so that ``tagvalue.config.logging`` stays importable
from the parsing layer without pulling in the configuration model.
"""

from __future__ import annotations
