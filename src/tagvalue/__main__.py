# topmark:header:start
#
#   project      : TagValue
#   file         : __main__.py
#   file_relpath : src/tagvalue/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running TagValue via ``python -m tagvalue``.

Delegates to [`cli`][tagvalue.cli.main.cli], equivalent to running the
``tagvalue`` console script.
"""

from __future__ import annotations

from tagvalue.cli.main import cli

if __name__ == "__main__":
    cli()
