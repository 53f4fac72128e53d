# topmark:header:start
#
#   project      : TagValue
#   file         : __init__.py
#   file_relpath : src/tagvalue/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for TagValue.

The entry point is [`tagvalue.cli.main.cli`][tagvalue.cli.main.cli], exposed as
the ``tagvalue`` console script and via ``python -m tagvalue``.
"""

from __future__ import annotations
