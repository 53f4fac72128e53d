# topmark:header:start
#
#   project      : TagValue
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the TagValue test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs, and provides typed wrappers around pytest marks and a few parser
driving helpers shared by the parsing tests.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs using `tagvalue.config.model.MutableConfig` (mutable), then
      `freeze()` into a `tagvalue.config.model.Config`.
    - Do **not** mutate a frozen `Config`. If you need to tweak one, call
      `Config.thaw()`, edit the returned `MutableConfig`, then `freeze()` again.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from tagvalue.config import logging
from tagvalue.config.model import Config, MutableConfig
from tagvalue.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tagvalue.parsing.output import LineNumber, Output
    from tagvalue.parsing.pair import KeyValuePair
    from tagvalue.parsing.parser import KVParser
    from tagvalue.parsing.record import RecordParser

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def reset_tagvalue_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure TagValue's runtime log level and color are not forced via env during tests.

    CLI invocations reconfigure the root logger (and bind its handler to the
    runner's stderr), so the TRACE setup is restored before every test.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    logging.setup_logging(level=logging.TRACE_LEVEL)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for the whole test session.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def feed(parser: KVParser, lines: Iterable[str]) -> list[LineNumber[Output[KeyValuePair]]]:
    """Feed ``lines`` to a pair parser and return every per-line output.

    Args:
        parser (KVParser): The parser to drive.
        lines (Iterable[str]): Input lines without terminators.

    Returns:
        list[LineNumber[Output[KeyValuePair]]]: One tagged output per line.
    """
    return [parser.process_line(line) for line in lines]


def feed_records(
    parser: RecordParser, lines: Iterable[str]
) -> list[LineNumber[Output[list[KeyValuePair]]]]:
    """Feed ``lines`` to a record parser and return every per-line output."""
    return [parser.process_line(line) for line in lines]


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and overrides.

    Args:
        **overrides (Any): Keyword overrides applied to the mutable builder before freezing.

    Returns:
        Config: An immutable configuration snapshot for use in tests.
    """
    m: MutableConfig = MutableConfig.from_defaults()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m.freeze()
