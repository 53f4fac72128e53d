# topmark:header:start
#
#   project      : TagValue
#   file         : errors.py
#   file_relpath : src/tagvalue/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the TagValue CLI.

Raise these in CLI commands to signal errors with standardized messages and
exit codes. Click prints the message and exits with ``exit_code``.
"""

from __future__ import annotations

import click

from tagvalue.core.exit_codes import ExitCode


class TagValueCliError(click.ClickException):
    """Base class for all TagValue CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text."""
        return str(getattr(self, "message", ""))


class TagValueUsageError(TagValueCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class TagValueConfigError(TagValueCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class TagValueFileNotFoundError(TagValueCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class TagValueIOError(TagValueCliError):
    """Error when an input file cannot be read or decoded."""

    exit_code = ExitCode.IO_ERROR


class TagValueDataError(TagValueCliError):
    """Error for malformed input, e.g. a truncated multi-line value in strict mode."""

    exit_code = ExitCode.DATA_ERROR
