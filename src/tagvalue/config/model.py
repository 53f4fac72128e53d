# topmark:header:start
#
#   project      : TagValue
#   file         : model.py
#   file_relpath : src/tagvalue/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot used by the CLI and the stream API.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.

Layering:
    Defaults, then the discovered (or explicitly given) config file, then CLI
    arguments. In a `MutableConfig`, ``None`` means "not set by this layer";
    `MutableConfig.merge_with` lets the other layer's set values win, and
    `MutableConfig.freeze` fills whatever is still unset with defaults.

Invalid values are logged as warnings and ignored; they never abort a run.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

from tagvalue.config.io import (
    extract_tagvalue_table,
    get_bool_value_or_none,
    get_string_value_or_none,
    load_toml_dict,
    to_toml,
)
from tagvalue.config.keys import Toml
from tagvalue.config.logging import get_logger
from tagvalue.constants import (
    PYPROJECT_TOML_NAME,
    SPDX_TEXT_CLOSE,
    SPDX_TEXT_OPEN,
    TAGVALUE_TOML_NAME,
)
from tagvalue.core.enum_mixins import KeyedStrEnum
from tagvalue.parsing.policy import ParsePolicy, PolicyKind, get_policy

if TYPE_CHECKING:
    from tagvalue.config.io import TomlTable
    from tagvalue.config.logging import TagValueLogger

# ArgsLike: generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

logger: TagValueLogger = get_logger(__name__)


class EndOfInputMode(KeyedStrEnum):
    """How to treat a multi-line value still open when input ends."""

    LENIENT = ("lenient", "Complete the value with the lines read so far")
    STRICT = ("strict", "Report the truncated value as an error", ("error",))


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        policy (PolicyKind): Which bundled parse policy to use.
        open_marker (str): Open marker for ``PolicyKind.MARKERS``.
        close_marker (str): Close marker for ``PolicyKind.MARKERS``.
        records (bool): Group pairs into blank-line-delimited records.
        end_of_input (EndOfInputMode): Handling of an unterminated multi-line value.
        fail_on_keyless (bool): Treat keyless lines as a failure (CLI exit code).
        config_files (tuple[Path, ...]): Files that contributed to this config.
    """

    policy: PolicyKind = PolicyKind.TRIVIAL
    open_marker: str = SPDX_TEXT_OPEN
    close_marker: str = SPDX_TEXT_CLOSE
    records: bool = False
    end_of_input: EndOfInputMode = EndOfInputMode.LENIENT
    fail_on_keyless: bool = False
    config_files: tuple[Path, ...] = ()

    @property
    def strict(self) -> bool:
        """True if an unterminated multi-line value is an error."""
        return self.end_of_input is EndOfInputMode.STRICT

    def make_policy(self) -> ParsePolicy:
        """Build the parse policy this config selects."""
        return get_policy(
            self.policy,
            open_marker=self.open_marker,
            close_marker=self.close_marker,
        )

    def to_toml_dict(self) -> TomlTable:
        """Return the config as a ``{"tagvalue": {...}}`` TOML table."""
        return {
            Toml.SECTION_TAGVALUE: {
                Toml.KEY_POLICY: self.policy.key,
                Toml.KEY_OPEN_MARKER: self.open_marker,
                Toml.KEY_CLOSE_MARKER: self.close_marker,
                Toml.KEY_RECORDS: self.records,
                Toml.KEY_END_OF_INPUT: self.end_of_input.key,
                Toml.KEY_FAIL_ON_KEYLESS: self.fail_on_keyless,
            }
        }

    def to_toml(self) -> str:
        """Render the config as TOML text."""
        return to_toml(self.to_toml_dict())

    def thaw(self) -> MutableConfig:
        """Return a mutable copy with every value set."""
        return MutableConfig(
            policy=self.policy,
            open_marker=self.open_marker,
            close_marker=self.close_marker,
            records=self.records,
            end_of_input=self.end_of_input,
            fail_on_keyless=self.fail_on_keyless,
            config_files=list(self.config_files),
        )


# ------------------ Mutable builder ------------------


@dataclass
class MutableConfig:
    """Mutable configuration layer; ``None`` marks a value as unset."""

    policy: PolicyKind | None = None
    open_marker: str | None = None
    close_marker: str | None = None
    records: bool | None = None
    end_of_input: EndOfInputMode | None = None
    fail_on_keyless: bool | None = None
    config_files: list[Path] = field(default_factory=list)

    def freeze(self) -> Config:
        """Return an immutable `Config`, filling unset values with defaults."""
        defaults = Config()
        return Config(
            policy=self.policy if self.policy is not None else defaults.policy,
            open_marker=self.open_marker if self.open_marker is not None else defaults.open_marker,
            close_marker=(
                self.close_marker if self.close_marker is not None else defaults.close_marker
            ),
            records=self.records if self.records is not None else defaults.records,
            end_of_input=(
                self.end_of_input if self.end_of_input is not None else defaults.end_of_input
            ),
            fail_on_keyless=(
                self.fail_on_keyless
                if self.fail_on_keyless is not None
                else defaults.fail_on_keyless
            ),
            config_files=tuple(self.config_files),
        )

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder with every value explicitly set to its default."""
        return Config().thaw()

    @classmethod
    def from_toml_dict(cls, data: TomlTable, path: Path | None = None) -> MutableConfig:
        """Build a layer from a parsed TOML document.

        Args:
            data (TomlTable): Parsed document (``tagvalue.toml`` or ``pyproject.toml``).
            path (Path | None): Source path, recorded in ``config_files`` and used
                to recognize ``pyproject.toml``.

        Returns:
            MutableConfig: A layer holding only the keys present in ``data``.
        """
        table: TomlTable = extract_tagvalue_table(data, path)
        cfg = cls()
        if path is not None:
            cfg.config_files.append(path)

        known = {
            Toml.KEY_POLICY,
            Toml.KEY_OPEN_MARKER,
            Toml.KEY_CLOSE_MARKER,
            Toml.KEY_RECORDS,
            Toml.KEY_END_OF_INPUT,
            Toml.KEY_FAIL_ON_KEYLESS,
        }
        for unknown in sorted(set(table) - known):
            logger.warning("Ignoring unknown config key %r (%s)", unknown, path or "<dict>")

        cfg.policy = _parse_keyed(PolicyKind, get_string_value_or_none(table, Toml.KEY_POLICY))
        cfg.open_marker = _non_empty(
            Toml.KEY_OPEN_MARKER, get_string_value_or_none(table, Toml.KEY_OPEN_MARKER)
        )
        cfg.close_marker = _non_empty(
            Toml.KEY_CLOSE_MARKER, get_string_value_or_none(table, Toml.KEY_CLOSE_MARKER)
        )
        cfg.records = get_bool_value_or_none(table, Toml.KEY_RECORDS)
        cfg.end_of_input = _parse_keyed(
            EndOfInputMode, get_string_value_or_none(table, Toml.KEY_END_OF_INPUT)
        )
        cfg.fail_on_keyless = get_bool_value_or_none(table, Toml.KEY_FAIL_ON_KEYLESS)
        return cfg

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load a layer from a TOML file.

        Returns:
            MutableConfig | None: The layer, or ``None`` if the file could not be
                read or parsed (the error is logged).
        """
        data: TomlTable = load_toml_dict(path)
        if not data:
            return None
        logger.debug("Loaded config from %s", path)
        return cls.from_toml_dict(data, path)

    @classmethod
    def discover(cls, start: Path) -> Path | None:
        """Find the nearest config file at or above ``start``.

        In each directory, ``tagvalue.toml`` is preferred; a ``pyproject.toml``
        only counts if it has a ``[tool.tagvalue]`` table.

        Args:
            start (Path): A file or directory to start from.

        Returns:
            Path | None: The config file found, or ``None``.
        """
        current: Path = start.resolve()
        if current.is_file():
            current = current.parent
        for directory in (current, *current.parents):
            candidate = directory / TAGVALUE_TOML_NAME
            if candidate.is_file():
                return candidate
            pyproject = directory / PYPROJECT_TOML_NAME
            if pyproject.is_file() and extract_tagvalue_table(load_toml_dict(pyproject), pyproject):
                return pyproject
        return None

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        config_file: Path | None = None,
    ) -> MutableConfig:
        """Build defaults, then merge the given or discovered config file on top.

        Args:
            start (Path | None): Where discovery starts when ``config_file`` is
                not given. Defaults to the current working directory.
            config_file (Path | None): Explicit config file; disables discovery.

        Returns:
            MutableConfig: The merged layers.
        """
        merged: MutableConfig = cls.from_defaults()
        path: Path | None = config_file or cls.discover(start or Path.cwd())
        if path is None:
            return merged
        layer = cls.from_toml_file(path)
        return merged.merge_with(layer) if layer is not None else merged

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new layer where the values set in ``other`` win."""
        merged = replace(self, config_files=[*self.config_files, *other.config_files])
        for name in (
            "policy",
            "open_marker",
            "close_marker",
            "records",
            "end_of_input",
            "fail_on_keyless",
        ):
            value = getattr(other, name)
            if value is not None:
                setattr(merged, name, value)
        return merged

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Overlay CLI (or API) arguments onto this layer in place.

        Recognized keys: ``policy``, ``open_marker``, ``close_marker``,
        ``records``, ``strict``, ``fail_on_keyless``. ``None`` values are ignored.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        policy = args.get("policy")
        if isinstance(policy, PolicyKind):
            self.policy = policy
        elif policy is not None:
            self.policy = _parse_keyed(PolicyKind, str(policy)) or self.policy

        open_marker = _non_empty(Toml.KEY_OPEN_MARKER, args.get("open_marker"))
        if open_marker is not None:
            self.open_marker = open_marker
        close_marker = _non_empty(Toml.KEY_CLOSE_MARKER, args.get("close_marker"))
        if close_marker is not None:
            self.close_marker = close_marker

        if args.get("records") is not None:
            self.records = bool(args["records"])
        if args.get("strict") is not None:
            self.end_of_input = EndOfInputMode.STRICT if args["strict"] else EndOfInputMode.LENIENT
        if args.get("fail_on_keyless") is not None:
            self.fail_on_keyless = bool(args["fail_on_keyless"])
        return self


def _parse_keyed(enum_cls: type[Any], raw: str | None) -> Any:
    if raw is None:
        return None
    member = enum_cls.parse(raw)
    if member is None:
        logger.warning(
            "Invalid %s %r (expected one of: %s); ignoring",
            enum_cls.__name__,
            raw,
            ", ".join(enum_cls.keys()),
        )
    return member


def _non_empty(key: str, value: str | None) -> str | None:
    if value is not None and not value:
        logger.warning("Config key %r must not be empty; ignoring", key)
        return None
    return value
