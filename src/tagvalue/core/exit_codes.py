# topmark:header:start
#
#   project      : TagValue
#   file         : exit_codes.py
#   file_relpath : src/tagvalue/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the TagValue CLI.

TagValue aligns with the BSD `sysexits` convention where practical, so that other tooling
can interpret failures consistently. The one deliberate divergence is `KEYLESS_FOUND=2`,
used with ``--fail-on-keyless`` to signal that the input held lines without a key.
Tests must assert `result.exception is None` to disambiguate it from Click's own usage
errors (which also default to 2).
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the TagValue CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        KEYLESS_FOUND: Keyless lines were found and ``--fail-on-keyless`` was set.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        DATA_ERROR: Malformed input, e.g. a truncated multi-line value in strict
            mode. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading a file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Configuration error (missing/invalid/malformed config).
            Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    KEYLESS_FOUND = 2

    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
