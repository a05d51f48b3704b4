# topmark:header:start
#
#   project      : BoxLog
#   file         : logger.py
#   file_relpath : src/boxlog/log/logger.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Labeled console log lines with tree and table rendering of values.

`Log` writes user-facing lines of the form ``label + divider + message``:

```python
from boxlog import Log

log = Log(label="[app]", tree=True)
log.info("config loaded:\\n{}", {"db": {"host": "localhost", "port": 5432}})
```

Messages are ``str.format`` templates. Replacement fields holding containers
are rendered as trees (``tree=True``) or, for mappings, as tables
(``table=True``); everything else goes through the inspector.

``info`` and ``warn`` write to ``out`` (default stdout), ``fail`` writes to
``err`` (default stderr). Observers registered with `Log.on` (per instance) or
`Log.on_global` (every instance) are notified after each call, even when the
level is muted.

This is program output, not diagnostics: BoxLog's own internal logging goes
through `boxlog.config.logging`.
"""

from __future__ import annotations

import sys
from collections import defaultdict
from dataclasses import replace
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, TextIO

import click

from boxlog.config.logging import get_logger
from boxlog.config.model import LogConfig, MutableLogConfig, default_log_config
from boxlog.core.shapes import is_container, is_mapping
from boxlog.log.filters import apply_filters, canonical_filter_name, resolve_filter
from boxlog.log.template import iter_template
from boxlog.rendering.ansi import wrap
from boxlog.rendering.color import resolve_color_mode, stream_isatty
from boxlog.rendering.inspector import inspect_value
from boxlog.rendering.table import build_table
from boxlog.rendering.tree import build_tree

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from pathlib import Path

    from boxlog.config.logging import BoxlogLogger
    from boxlog.config.model import RenderOptions
    from boxlog.log.template import Field

logger: BoxlogLogger = get_logger(__name__)


class Level(str, Enum):
    """Log levels of the `Log` facade."""

    INFO = "info"
    WARN = "warn"
    FAIL = "fail"


class Log:
    """Write labeled, optionally colored log lines.

    Args:
        config (LogConfig | None): Base configuration; defaults to the runtime defaults.
        out (TextIO | None): Stream for ``info``/``warn``; ``None`` means the
            current ``sys.stdout`` at write time.
        err (TextIO | None): Stream for ``fail``; ``None`` means the current
            ``sys.stderr`` at write time.
        **overrides (Any): `LogConfig` field overrides (``label="[db]"``, ``tree=True``...).

    Raises:
        TypeError: If an override names an unknown option.
    """

    _global_observers: ClassVar[dict[Level, list[Callable[..., object]]]] = defaultdict(list)

    def __init__(
        self,
        config: LogConfig | None = None,
        *,
        out: TextIO | None = None,
        err: TextIO | None = None,
        **overrides: Any,
    ) -> None:
        base = config if config is not None else default_log_config()
        if overrides:
            base = base.thaw().apply_overrides(overrides).freeze()
        self.config: LogConfig = base
        self.out = out
        self.err = err
        self._observers: dict[Level, list[Callable[..., object]]] = defaultdict(list)

    @classmethod
    def from_files(
        cls,
        config_path: Path | None = None,
        *,
        cwd: Path | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
        **overrides: Any,
    ) -> Log:
        """Build a logger from discovered config files plus an explicit file.

        See `boxlog.config.model.MutableLogConfig.load_merged` for the layering.
        """
        draft = MutableLogConfig.load_merged(config_path=config_path, cwd=cwd)
        return cls(draft.apply_overrides(overrides).freeze(), out=out, err=err)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(label={self.config.label!r})"

    # ---- derived loggers and configuration -------------------------------

    def use(self, **overrides: Any) -> Log:
        """Return a new logger with ``overrides`` applied, sharing the streams.

        Instance observers are not copied; global observers apply to every logger.
        """
        return type(self)(self.config, out=self.out, err=self.err, **overrides)

    def filtered(self, *names: str) -> Log:
        """Return a new logger with the named filters appended."""
        for name in names:
            resolve_filter(name)
        return self.use(filters=[*self.config.filters, *names])

    def add_filter(self, name: str) -> None:
        """Append a string filter to this logger.

        Raises:
            UnknownFilterError: If ``name`` is not a registered filter.
        """
        resolve_filter(name)
        self.config = replace(self.config, filters=(*self.config.filters, name))

    def remove_filter(self, name: str) -> None:
        """Remove every occurrence of a filter, whatever spelling it was added with."""
        target = canonical_filter_name(name)
        kept = tuple(f for f in self.config.filters if canonical_filter_name(f) != target)
        self.config = replace(self.config, filters=kept)

    # ---- observers ---------------------------------------------------------

    def on(self, level: Level | str, callback: Callable[..., object]) -> None:
        """Call ``callback(message, *args)`` after every ``level`` call on this logger."""
        self._observers[Level(level)].append(callback)

    def off(self, level: Level | str, callback: Callable[..., object]) -> None:
        """Remove an instance observer (no-op if it is not registered)."""
        observers = self._observers[Level(level)]
        if callback in observers:
            observers.remove(callback)

    @classmethod
    def on_global(cls, level: Level | str, callback: Callable[..., object]) -> None:
        """Call ``callback(config, message, *args)`` after every ``level`` call on any logger."""
        cls._global_observers[Level(level)].append(callback)

    @classmethod
    def remove_all_listeners(cls) -> None:
        """Drop every global observer."""
        cls._global_observers.clear()

    # ---- rendering ---------------------------------------------------------

    def _stream(self, level: Level) -> TextIO:
        if level is Level.FAIL:
            return self.err or sys.stderr
        return self.out or sys.stdout

    def ansi_enabled(self, stream: TextIO | None = None) -> bool:
        """Return the effective color decision for ``stream`` (stdout by default)."""
        if self.config.ansi is not None:
            return self.config.ansi
        target = stream if stream is not None else (self.out or sys.stdout)
        return resolve_color_mode(color_mode_override=None, stdout_isatty=stream_isatty(target))

    def render_options(self, ansi: bool | None = None) -> RenderOptions:
        """Return the render options of this logger."""
        return self.config.render_options(ansi=self.ansi_enabled() if ansi is None else ansi)

    def tree(self, value: object) -> str:
        """Render ``value`` as a tree with this logger's options."""
        return build_tree(value, self.render_options())

    def table(self, columns: Mapping[Any, Any]) -> str:
        """Render ``columns`` as a table with this logger's options."""
        return build_table(columns, self.render_options())

    def _render_field(self, field: Field, options: RenderOptions) -> tuple[str, bool]:
        """Return ``(text, is_block)`` for a replacement field.

        Blocks (trees and tables) carry their own styling and skip the filters.
        """
        value = field.value
        if not field.converted and not field.format_spec:
            if self.config.tree and is_container(value):
                return build_tree(value, options), True
            if self.config.table and is_mapping(value) and value:
                return build_table(value, options), True
        if field.format_spec or isinstance(value, str):
            return format(value, field.format_spec), False
        return inspect_value(value), False

    def compose(self, template: str, *args: Any, **kwargs: Any) -> tuple[str, str]:
        """Format a message and return ``(plain, decorated)``.

        ``plain`` is the message alone, without label or ANSI styles.
        ``decorated`` is the full line as written: label, divider and message,
        styled when ANSI is enabled.
        """
        return self._compose(template, args, kwargs, self.ansi_enabled())

    def _compose(
        self,
        template: str,
        args: tuple[Any, ...],
        kwargs: Mapping[str, Any],
        ansi: bool,
    ) -> tuple[str, str]:
        cfg = self.config
        options = cfg.render_options(ansi=ansi)
        plain_options = cfg.render_options(ansi=False)
        plain_parts: list[str] = []
        styled_parts: list[str] = []

        for literal, field in iter_template(template, args, kwargs):
            if literal:
                text = apply_filters(literal, cfg.filters)
                plain_parts.append(text)
                styled_parts.append(wrap(text, cfg.ansi_text) if ansi else text)
            if field is None:
                continue
            text, is_block = self._render_field(field, options)
            if not is_block:
                text = apply_filters(text, cfg.filters)
                styled_parts.append(wrap(text, cfg.ansi_value) if ansi else text)
                plain_parts.append(text)
                continue
            styled_parts.append(text)
            # blocks carry their own styles; the plain message needs them unstyled
            plain_parts.append(self._render_field(field, plain_options)[0] if ansi else text)

        prefix = cfg.label + cfg.divider
        if ansi:
            prefix = wrap(prefix, cfg.ansi_label)
        return "".join(plain_parts), prefix + "".join(styled_parts)

    def format(self, template: str, *args: Any, **kwargs: Any) -> str:
        """Return the full decorated line for ``template`` (without newline)."""
        return self.compose(template, *args, **kwargs)[1]

    # ---- levels ------------------------------------------------------------

    def _muted(self, level: Level) -> bool:
        cfg = self.config
        if cfg.mute:
            return True
        flags = {Level.INFO: cfg.mute_info, Level.WARN: cfg.mute_warn, Level.FAIL: cfg.mute_fail}
        return flags[level]

    def _emit(
        self,
        level: Level,
        template: str,
        args: tuple[Any, ...],
        kwargs: Mapping[str, Any],
    ) -> str | None:
        stream = self._stream(level)
        ansi = self.ansi_enabled(stream)
        plain, decorated = self._compose(template, args, kwargs, ansi)

        if not self._muted(level):
            click.echo(decorated, file=stream, color=ansi)
        else:
            logger.trace("Muted %s message: %r", level.value, plain)

        for callback in list(self._observers[level]):
            callback(plain, *args)
        for callback in list(type(self)._global_observers[level]):
            callback(self.config, plain, *args)

        return plain if self.config.returns else None

    def info(self, template: str, *args: Any, **kwargs: Any) -> str | None:
        """Write an informational line to ``out``.

        Returns:
            str | None: The plain message when ``returns`` is enabled, else ``None``.
        """
        return self._emit(Level.INFO, template, args, kwargs)

    def warn(self, template: str, *args: Any, **kwargs: Any) -> str | None:
        """Write a warning line to ``out``."""
        return self._emit(Level.WARN, template, args, kwargs)

    def fail(self, template: str, *args: Any, **kwargs: Any) -> str | None:
        """Write a failure line to ``err``."""
        return self._emit(Level.FAIL, template, args, kwargs)
