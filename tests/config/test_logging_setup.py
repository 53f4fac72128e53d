# topmark:header:start
#
#   project      : TagValue
#   file         : test_logging_setup.py
#   file_relpath : tests/config/test_logging_setup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for TagValue's logging setup (TRACE level and env resolution)."""

from __future__ import annotations

import logging

import pytest

from tests.conftest import parametrize
from tagvalue.config.logging import (
    LOG_FORMAT,
    TRACE_LEVEL,
    ChalkFormatter,
    TagValueLogger,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)
from tagvalue.constants import LOG_LEVEL_ENV_VAR


@parametrize(
    "raw,expected",
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("10", 10),
        ("bogus", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: int | None
) -> None:
    """Names (any case) and numbers are accepted; unknown names are ignored."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, raw)
    assert resolve_env_log_level() == expected


def test_resolve_env_log_level_unset() -> None:
    """No variable, no level (the autouse fixture clears it)."""
    assert resolve_env_log_level() is None


def test_setup_logging_defaults_to_critical() -> None:
    """Without an explicit or env level, only CRITICAL gets through."""
    setup_logging()
    root = logging.getLogger()
    assert root.level == logging.CRITICAL
    assert len(root.handlers) == 1


def test_trace_messages(caplog: pytest.LogCaptureFixture) -> None:
    """Loggers are `TagValueLogger` instances with a working ``trace``."""
    logger = get_logger("tagvalue.tests.trace")
    assert isinstance(logger, TagValueLogger)
    with caplog.at_level(TRACE_LEVEL):
        logger.trace("state %s", "READY")
    assert ("TRACE", "state READY") in [(r.levelname, r.getMessage()) for r in caplog.records]


def test_chalk_formatter_keeps_level_and_message() -> None:
    """Coloring wraps the formatted text without altering it."""
    record = logging.LogRecord(
        "tagvalue", logging.WARNING, __file__, 1, "careful %s", ("now",), None
    )
    formatted = ChalkFormatter(LOG_FORMAT).format(record)
    assert "WARNING: careful now" in formatted
