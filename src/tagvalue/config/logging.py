# topmark:header:start
#
#   project      : TagValue
#   file         : logging.py
#   file_relpath : src/tagvalue/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logging for TagValue: a TRACE level, a colored formatter and env-driven setup.

The parsers log every state transition at TRACE, record boundaries at DEBUG
and truncated values at WARNING. Nothing is shown by default; set
``TAGVALUE_LOG_LEVEL`` (a level name or number) to see more. Log records go to
stderr so they never interleave with JSON on stdout.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from tagvalue.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Callable

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

logging.addLevelName(TRACE_LEVEL, "TRACE")


class TagValueLogger(logging.Logger):
    """Logger with a `trace` method for the per-line parser messages."""

    def trace(self, msg: object, *args: object) -> None:
        """Log ``msg % args`` at TRACE level."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, stacklevel=2)


logging.setLoggerClass(TagValueLogger)

# Below INFO the source location is worth the noise
LOG_FORMAT: Final[str] = "%(levelname)s: %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "%(levelname)s %(name)s:%(lineno)d: %(message)s"

# Checked in order; the first threshold at or below the record's level wins
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Color each formatted record by severity."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and color it with the style of its level."""
        message: str = super().format(record)
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return message


def resolve_env_log_level() -> int | None:
    """Return the level named by ``TAGVALUE_LOG_LEVEL``, or ``None``.

    Accepts any registered level name (case-insensitive, ``TRACE`` included) or
    a plain number. Unknown names are ignored.
    """
    raw: str | None = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not raw:
        return None
    token: str = raw.strip().upper()
    if token.isdigit():
        return int(token)
    # getLevelName maps a registered name to its number, anything else to a str
    level: int | str = logging.getLevelName(token)
    return level if isinstance(level, int) else None


def setup_logging(level: int | None = None) -> None:
    """(Re)configure the root logger with a single colored stderr handler.

    Args:
        level (int | None): Log level; when ``None``, the environment is
            consulted and CRITICAL is the fallback.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root: logging.Logger = logging.getLogger()
    root.setLevel(level)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(
        ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    )
    root.addHandler(stderr_handler)


def get_logger(name: str) -> TagValueLogger:
    """Return the `TagValueLogger` named ``name``."""
    return cast("TagValueLogger", logging.getLogger(name))
