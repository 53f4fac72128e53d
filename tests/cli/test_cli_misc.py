# topmark:header:start
#
#   project      : TagValue
#   file         : test_cli_misc.py
#   file_relpath : tests/cli/test_cli_misc.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for the group options and the `version` and `config` commands."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click
import tomlkit

from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli, run_cli_in
from tests.conftest import mark_cli
from tagvalue.constants import TAGVALUE_VERSION

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


@mark_cli
def test_no_command_prints_help() -> None:
    """Invoking the group alone prints a hint and the help text."""
    result: Result = run_cli([])
    assert_SUCCESS(result)
    assert "Hint:" in result.stdout
    assert "pairs" in result.stdout
    assert "records" in result.stdout


@mark_cli
def test_verbose_and_quiet_are_exclusive() -> None:
    """``-v`` and ``-q`` together are a usage error."""
    result: Result = run_cli(["-v", "-q", "version"])
    assert_USAGE_ERROR(result)


@mark_cli
def test_version_plain_and_json() -> None:
    """`version` prints the installed version, optionally as JSON."""
    result: Result = run_cli(["--no-color", "version"])
    assert_SUCCESS(result)
    assert result.stdout.strip() == TAGVALUE_VERSION

    result = run_cli(["version", "--format", "json"])
    assert_SUCCESS(result)
    assert json.loads(result.stdout) == {"version": TAGVALUE_VERSION}


@mark_cli
def test_config_defaults() -> None:
    """`config defaults` prints the built-in configuration."""
    result: Result = run_cli(["config", "defaults"])
    assert_SUCCESS(result)
    parsed = tomlkit.parse(result.stdout).unwrap()
    assert parsed["tagvalue"]["policy"] == "trivial"
    assert parsed["tagvalue"]["end_of_input"] == "lenient"


@mark_cli
def test_config_dump_merges_file_and_options(tmp_path: Path) -> None:
    """`config dump` shows the discovered file overlaid with CLI options."""
    (tmp_path / "tagvalue.toml").write_text(
        '[tagvalue]\npolicy = "spdx"\nfail_on_keyless = true\n', encoding="utf-8"
    )
    result: Result = run_cli_in(tmp_path, ["config", "dump", "--strict"])
    assert_SUCCESS(result)
    table = tomlkit.parse(result.stdout).unwrap()["tagvalue"]
    assert table["policy"] == "spdx"
    assert table["fail_on_keyless"] is True
    assert table["end_of_input"] == "strict"


@mark_cli
def test_config_dump_verbose_names_sources(tmp_path: Path) -> None:
    """With ``-v`` the contributing files are listed as a TOML comment."""
    (tmp_path / "tagvalue.toml").write_text('policy = "markers"\n', encoding="utf-8")
    result: Result = run_cli_in(tmp_path, ["-v", "config", "dump"])
    assert_SUCCESS(result)
    first_line = result.stdout.splitlines()[0]
    assert first_line.startswith("# sources: ")
    assert first_line.endswith("tagvalue.toml")


@mark_cli
def test_color_modes(tmp_path: Path) -> None:
    """Color is off when not writing to a terminal, unless ``--color always``."""
    (tmp_path / "doc.txt").write_text("A: 1\n", encoding="utf-8")

    plain: Result = run_cli_in(tmp_path, ["pairs", "doc.txt"])
    assert_SUCCESS(plain)
    assert "\x1b[" not in plain.stdout

    colored: Result = run_cli_in(tmp_path, ["--color", "always", "pairs", "doc.txt"])
    assert_SUCCESS(colored)
    assert "\x1b[" in colored.stdout
    assert click.unstyle(colored.stdout) == plain.stdout
