# topmark:header:start
#
#   project      : TagValue
#   file         : constants.py
#   file_relpath : src/tagvalue/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TagValue Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

TAGVALUE_VERSION: str = get_version("tagvalue")

# Separates the key from the value on a single line; only the first occurrence counts.
KEY_VALUE_DELIMITER: str = ": "

# Separates the fragments of a value assembled from a multi-line span.
MULTILINE_JOINER: str = "\n"

# SPDX tag-value text block markers.
SPDX_TEXT_OPEN: str = "<text>"
SPDX_TEXT_CLOSE: str = "</text>"

# Configuration discovery.
TAGVALUE_TOML_NAME: str = "tagvalue.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"

LOG_LEVEL_ENV_VAR: str = "TAGVALUE_LOG_LEVEL"
