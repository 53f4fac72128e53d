# topmark:header:start
#
#   project      : TagValue
#   file         : __init__.py
#   file_relpath : src/tagvalue/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across TagValue.

Included modules:

- ``diagnostics``
  Diagnostic types collected while running the CLI over a document
  (keyless lines, truncated multi-line values).

- ``exit_codes``
  Centralized exit codes for the CLI, aligned with BSD-style ``sysexits``
  where practical.

- ``enum_mixins``
  Typing-friendly Enum utilities (keyed enums parsed from config and CLI tokens).

- ``formats``
  The output format vocabulary shared by CLI commands.
"""

from __future__ import annotations
