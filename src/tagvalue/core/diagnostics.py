# topmark:header:start
#
#   project      : TagValue
#   file         : diagnostics.py
#   file_relpath : src/tagvalue/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostics collected while running a parser over a document.

The parsing core never fails; the CLI turns noteworthy outputs (keyless lines,
truncated multi-line values) into diagnostics and reports them after the run.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import cast

from yachalk import chalk


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics, ordered ERROR > WARNING > INFO."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level.

        Intended for human-readable output only; machine formats should not use colors.
        """
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


@dataclass(frozen=True)
class Diagnostic:
    """A diagnostic with a severity level, a message and the line it refers to.

    Attributes:
        level (DiagnosticLevel): Severity.
        message (str): Human-readable message.
        line_number (int | None): 1-based input line, if known.
    """

    level: DiagnosticLevel
    message: str
    line_number: int | None = None

    def render(self, *, color: bool = False) -> str:
        """Return ``"[level] line N: message"``, colored when ``color`` is set."""
        where: str = f"line {self.line_number}: " if self.line_number is not None else ""
        text: str = f"[{self.level.value}] {where}{self.message}"
        return self.level.color(text) if color else text

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping."""
        return {"level": self.level.value, "line": self.line_number, "message": self.message}


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for diagnostics by severity level."""

    n_info: int
    n_warning: int
    n_error: int

    @property
    def total(self) -> int:
        """Return the total count of diagnostics."""
        return self.n_info + self.n_warning + self.n_error


def compute_diagnostic_stats(diags: Sequence[Diagnostic]) -> DiagnosticStats:
    """Return per-level counts for a sequence of diagnostics."""
    n_info: int = sum(1 for d in diags if d.level == DiagnosticLevel.INFO)
    n_warn: int = sum(1 for d in diags if d.level == DiagnosticLevel.WARNING)
    n_err: int = sum(1 for d in diags if d.level == DiagnosticLevel.ERROR)
    return DiagnosticStats(n_info=n_info, n_warning=n_warn, n_error=n_err)
