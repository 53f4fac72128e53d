# topmark:header:start
#
#   project      : TagValue
#   file         : errors.py
#   file_relpath : src/tagvalue/parsing/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by TagValue outside the line-processing core.

The line-processing state machines never raise on input. These exceptions are
raised by the field-lookup helpers on a completed
[`Record`][tagvalue.parsing.record.Record], and by the end-of-input flush
operations when strict truncation handling is requested.
"""

from __future__ import annotations


class TagValueError(Exception):
    """Base class for all TagValue errors."""


class RecordError(TagValueError):
    """Base class for errors found while interpreting the fields of a record.

    Attributes:
        key (str): The key that was looked up.
    """

    def __init__(self, key: str, message: str) -> None:
        super().__init__(message)
        self.key = key


class WantedAtMostOneFoundMoreError(RecordError):
    """A key expected zero or one times occurred two or more times.

    Attributes:
        count (int): The number of fields found with the key.
    """

    def __init__(self, key: str, count: int) -> None:
        super().__init__(
            key, f"Found {count} fields named {key} instead of the zero or one expected."
        )
        self.count = count


class WantedOneFoundMoreError(RecordError):
    """A key expected exactly once occurred two or more times.

    Attributes:
        count (int): The number of fields found with the key.
    """

    def __init__(self, key: str, count: int) -> None:
        super().__init__(key, f"Found {count} fields named {key} instead of the one expected.")
        self.count = count


class MissingFieldError(RecordError):
    """A mandatory key has no occurrence in the record."""

    def __init__(self, key: str) -> None:
        super().__init__(key, f"Missing mandatory field {key}")

    @property
    def count(self) -> int:
        """Always zero; present for symmetry with the too-many-fields errors."""
        return 0


class TruncatedValueError(TagValueError):
    """Input ended while a multi-line value was still open.

    Only raised when the caller asks for strict end-of-input handling.

    Attributes:
        key (str): Key of the unterminated value.
        line_number (int): Number of lines processed when input ended.
    """

    def __init__(self, key: str, line_number: int) -> None:
        super().__init__(
            f"Input ended after line {line_number} inside the multi-line value for key {key!r}"
        )
        self.key = key
        self.line_number = line_number
