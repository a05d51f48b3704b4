# topmark:header:start
#
#   project      : BoxLog
#   file         : model.py
#   file_relpath : src/boxlog/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `RenderOptions`: the immutable snapshot the tree and table renderers read.
    - `LogConfig`: an immutable runtime snapshot used by `boxlog.log.Log`.
    - `MutableLogConfig`: a mutable builder used while merging layers; it
      can be frozen into `LogConfig` and thawed back for edits.

Layering (lowest precedence first):
    1. runtime defaults (`boxlog.config.io.load_defaults_dict`),
    2. discovered files (``[tool.boxlog]`` in ``pyproject.toml``, then ``boxlog.toml``),
    3. an explicit config file,
    4. per-instance overrides (``Log(label=...)``, ``log.use(...)``).

Options are resolved once, when a snapshot is frozen. Renderers receive a
`RenderOptions` value and never look anything up in a fallback chain.

Immutability:
    - `LogConfig` and `RenderOptions` are ``frozen=True``. Use `LogConfig.thaw`
      → edit → `MutableLogConfig.freeze` for updates.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

from boxlog.config.io import discover_config_files, load_boxlog_table, load_defaults_dict
from boxlog.config.logging import get_logger
from boxlog.constants import DEFAULT_BORDER, DEFAULT_LINE_SEPARATOR

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from boxlog.config.io import TomlTable
    from boxlog.config.logging import BoxlogLogger

logger: BoxlogLogger = get_logger(__name__)

BOOL_KEYS: frozenset[str] = frozenset(
    {"mute", "mute_info", "mute_warn", "mute_fail", "returns", "tree", "table"}
)
STR_KEYS: frozenset[str] = frozenset(
    {
        "label",
        "divider",
        "border",
        "ansi_label",
        "ansi_text",
        "ansi_tree",
        "ansi_table",
        "ansi_header",
        "ansi_value",
        "line_separator",
    }
)


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Immutable options for a single tree or table render.

    Attributes:
        border (str): Border set name; unknown names fall back to ``"light"``.
        ansi (bool): Whether to emit ANSI styles at all.
        ansi_tree (str): Style spec for tree branch glyphs and indents.
        ansi_table (str): Style spec for table border glyphs.
        ansi_header (str): Style spec for table header cells; empty means "use ``ansi_value``".
        ansi_value (str): Style spec for values (table cells, tree leaves).
        line_separator (str): String used to join output lines.
    """

    border: str = DEFAULT_BORDER
    ansi: bool = False
    ansi_tree: str = "dim bright-black"
    ansi_table: str = "dim bright-yellow"
    ansi_header: str = ""
    ansi_value: str = ""
    line_separator: str = DEFAULT_LINE_SEPARATOR

    def with_overrides(self, **overrides: Any) -> RenderOptions:
        """Return a copy with ``overrides`` applied; ``None`` values are ignored.

        Raises:
            TypeError: If an override names an unknown option.
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise TypeError(f"Unknown render option(s): {', '.join(unknown)}")
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self

    @property
    def header_style(self) -> str:
        """Return the effective header style spec."""
        return self.ansi_header or self.ansi_value


@dataclass(frozen=True, slots=True)
class LogConfig:
    """Immutable runtime configuration for a `boxlog.log.Log` instance.

    Attributes:
        label (str): Prefix of every log line.
        divider (str): Text between the label and the message.
        mute (bool): Suppress writing for all levels.
        mute_info (bool): Suppress writing ``info`` lines.
        mute_warn (bool): Suppress writing ``warn`` lines.
        mute_fail (bool): Suppress writing ``fail`` lines.
        returns (bool): Make the level methods return the plain message.
        tree (bool): Render container values as trees.
        table (bool): Render mapping values as tables (checked after ``tree``).
        filters (tuple[str, ...]): Names of string filters applied in order.
        border (str): Border set name.
        ansi (bool | None): Emit ANSI styles; ``None`` means auto-detect.
        ansi_label (str): Style spec of the label and divider.
        ansi_text (str): Style spec of the literal template text.
        ansi_tree (str): Style spec of tree glyphs.
        ansi_table (str): Style spec of table borders.
        ansi_header (str): Style spec of table headers.
        ansi_value (str): Style spec of rendered values.
        line_separator (str): Line separator of rendered trees and tables.
        config_files (tuple[Path, ...]): Files that contributed to this snapshot.
    """

    label: str
    divider: str
    mute: bool
    mute_info: bool
    mute_warn: bool
    mute_fail: bool
    returns: bool
    tree: bool
    table: bool
    filters: tuple[str, ...]
    border: str
    ansi: bool | None
    ansi_label: str
    ansi_text: str
    ansi_tree: str
    ansi_table: str
    ansi_header: str
    ansi_value: str
    line_separator: str
    config_files: tuple[Path, ...] = ()

    def thaw(self) -> MutableLogConfig:
        """Return a mutable copy of this snapshot."""
        draft = MutableLogConfig()
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name in ("filters", "config_files"):
                value = list(value)
            setattr(draft, f.name, value)
        return draft

    def render_options(self, ansi: bool | None = None) -> RenderOptions:
        """Project the render-related fields into a `RenderOptions` snapshot.

        Args:
            ansi (bool | None): Effective color decision; defaults to ``bool(self.ansi)``.

        Returns:
            RenderOptions: Options for the tree/table renderers.
        """
        return RenderOptions(
            border=self.border,
            ansi=bool(self.ansi) if ansi is None else ansi,
            ansi_tree=self.ansi_tree,
            ansi_table=self.ansi_table,
            ansi_header=self.ansi_header,
            ansi_value=self.ansi_value,
            line_separator=self.line_separator,
        )


@dataclass
class MutableLogConfig:
    """Mutable builder for `LogConfig`.

    Every field defaults to ``None`` ("inherit"); `merge_with` lets the
    non-``None`` fields of a higher-precedence layer win, and `freeze` fills the
    remaining gaps from the runtime defaults.
    """

    label: str | None = None
    divider: str | None = None
    mute: bool | None = None
    mute_info: bool | None = None
    mute_warn: bool | None = None
    mute_fail: bool | None = None
    returns: bool | None = None
    tree: bool | None = None
    table: bool | None = None
    filters: list[str] | None = None
    border: str | None = None
    ansi: bool | None = None
    ansi_label: str | None = None
    ansi_text: str | None = None
    ansi_tree: str | None = None
    ansi_table: str | None = None
    ansi_header: str | None = None
    ansi_value: str | None = None
    line_separator: str | None = None
    config_files: list[Path] = field(default_factory=lambda: [])

    @classmethod
    def from_defaults(cls) -> MutableLogConfig:
        """Return a draft holding the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(cls, data: TomlTable, source: Path | None = None) -> MutableLogConfig:
        """Build a draft from a parsed BoxLog table.

        Unknown keys and values of the wrong type are skipped with a warning.

        Args:
            data (TomlTable): The ``[tool.boxlog]`` table or a ``boxlog.toml`` document.
            source (Path | None): File the data came from, recorded for provenance.

        Returns:
            MutableLogConfig: The draft.
        """
        draft = cls()
        where = str(source) if source is not None else "<defaults>"
        for key, value in data.items():
            if key in BOOL_KEYS or key == "ansi":
                if not isinstance(value, bool):
                    logger.warning("%s: '%s' must be a boolean, got %r", where, key, value)
                    continue
            elif key in STR_KEYS:
                if not isinstance(value, str):
                    logger.warning("%s: '%s' must be a string, got %r", where, key, value)
                    continue
            elif key == "filters":
                if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                    logger.warning("%s: 'filters' must be a list of strings", where)
                    continue
                value = list(value)
            else:
                logger.warning("%s: ignoring unknown config key '%s'", where, key)
                continue
            setattr(draft, key, value)
        if source is not None:
            draft.config_files.append(source)
        return draft

    @classmethod
    def load_merged(
        cls,
        *,
        config_path: Path | None = None,
        cwd: Path | None = None,
        discover: bool = True,
    ) -> MutableLogConfig:
        """Merge defaults, discovered files and an explicit file, in that order.

        Args:
            config_path (Path | None): Explicit config file (highest file precedence).
            cwd (Path | None): Directory for discovery; defaults to the current directory.
            discover (bool): Whether to look for ``pyproject.toml`` / ``boxlog.toml``.

        Returns:
            MutableLogConfig: The merged draft.
        """
        draft = cls.from_defaults()
        paths: list[Path] = []
        if discover:
            paths.extend(discover_config_files(cwd or Path.cwd()))
        if config_path is not None:
            paths.append(config_path)
        for path in paths:
            logger.debug("Merging config file %s", path)
            draft = draft.merge_with(cls.from_toml_dict(load_boxlog_table(path), source=path))
        return draft

    def merge_with(self, other: MutableLogConfig) -> MutableLogConfig:
        """Return a new draft where the non-``None`` fields of ``other`` win."""
        merged = MutableLogConfig()
        for f in fields(self):
            if f.name == "config_files":
                continue
            mine = getattr(self, f.name)
            theirs = getattr(other, f.name)
            setattr(merged, f.name, theirs if theirs is not None else mine)
        merged.config_files = [*self.config_files, *other.config_files]
        return merged

    def apply_overrides(self, overrides: Mapping[str, Any]) -> MutableLogConfig:
        """Apply keyword overrides in place; ``None`` values are ignored.

        Args:
            overrides (Mapping[str, Any]): Field names and values.

        Returns:
            MutableLogConfig: ``self``, for chaining.

        Raises:
            TypeError: If an override names an unknown option.
        """
        known = {f.name for f in fields(self)} - {"config_files"}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise TypeError(f"Unknown log option(s): {', '.join(unknown)}")
        for key, value in overrides.items():
            if value is None:
                continue
            if key == "filters":
                value = _as_filter_list(value)
            setattr(self, key, value)
        return self

    def freeze(self) -> LogConfig:
        """Return an immutable snapshot, filling unset fields from the defaults."""
        base = MutableLogConfig.from_defaults()
        full = base.merge_with(self)
        values: dict[str, Any] = {}
        for f in fields(LogConfig):
            value = getattr(full, f.name)
            if f.name in ("filters", "config_files"):
                value = tuple(value or ())
            values[f.name] = value
        return LogConfig(**values)


def _as_filter_list(value: str | Iterable[str]) -> list[str]:
    if isinstance(value, str):
        return [value]
    return list(value)


def default_log_config() -> LogConfig:
    """Return the runtime defaults as a frozen snapshot (no file discovery)."""
    return MutableLogConfig.from_defaults().freeze()


def load_config(
    config_path: Path | None = None,
    *,
    cwd: Path | None = None,
    discover: bool = True,
    **overrides: Any,
) -> LogConfig:
    """Resolve a frozen configuration from defaults, files and overrides.

    Args:
        config_path (Path | None): Explicit config file, merged last.
        cwd (Path | None): Directory searched for ``pyproject.toml`` / ``boxlog.toml``.
        discover (bool): Whether to search ``cwd`` at all.
        **overrides (Any): Field overrides applied on top of the files.

    Returns:
        LogConfig: The resolved snapshot.
    """
    draft = MutableLogConfig.load_merged(config_path=config_path, cwd=cwd, discover=discover)
    return draft.apply_overrides(overrides).freeze()
