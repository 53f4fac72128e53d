# topmark:header:start
#
#   project      : TagValue
#   file         : __init__.py
#   file_relpath : src/tagvalue/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TagValue CLI subcommands."""

from __future__ import annotations
