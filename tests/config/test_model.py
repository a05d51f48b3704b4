# topmark:header:start
#
#   project      : BoxLog
#   file         : test_model.py
#   file_relpath : tests/config/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for config layering, freezing and overrides (`boxlog.config.model`)."""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from typing import TYPE_CHECKING

import pytest

from boxlog.config import (
    LogConfig,
    MutableLogConfig,
    RenderOptions,
    default_log_config,
    load_config,
)

if TYPE_CHECKING:
    from pathlib import Path


def test_default_config() -> None:
    cfg = default_log_config()
    assert cfg.label == "[LOG]"
    assert cfg.divider == " ⇢ "
    assert cfg.border == "light"
    assert cfg.ansi is None
    assert cfg.filters == ()
    assert cfg.config_files == ()
    assert not (cfg.mute or cfg.returns or cfg.tree or cfg.table)


def test_log_config_is_frozen() -> None:
    cfg = default_log_config()
    with pytest.raises(FrozenInstanceError):
        cfg.label = "x"  # type: ignore[misc]


def test_thaw_and_freeze_round_trip() -> None:
    cfg = default_log_config()
    draft = cfg.thaw()
    draft.label = "[db]"
    draft.filters = ["upper_case"]
    frozen = draft.freeze()
    assert isinstance(frozen, LogConfig)
    assert frozen.label == "[db]"
    assert frozen.filters == ("upper_case",)
    assert cfg.label == "[LOG]"


def test_merge_with_prefers_set_fields() -> None:
    low = MutableLogConfig(label="low", border="heavy")
    high = MutableLogConfig(label="high")
    merged = low.merge_with(high)
    assert merged.label == "high"
    assert merged.border == "heavy"


def test_from_toml_dict_skips_bad_values(tmp_path: Path) -> None:
    source = tmp_path / "boxlog.toml"
    draft = MutableLogConfig.from_toml_dict(
        {"tree": "yes", "label": 3, "filters": ["ok", 1], "colour": True, "border": "double"},
        source=source,
    )
    assert draft.tree is None
    assert draft.label is None
    assert draft.filters is None
    assert draft.border == "double"
    assert draft.config_files == [source]


def test_apply_overrides() -> None:
    overrides = {"label": "[x]", "filters": "upper_case", "tree": None}
    draft = MutableLogConfig().apply_overrides(overrides)
    assert draft.label == "[x]"
    assert draft.filters == ["upper_case"]
    assert draft.tree is None
    with pytest.raises(TypeError, match="colour"):
        MutableLogConfig().apply_overrides({"colour": True})


def test_load_config_layers(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[tool.boxlog]\nlabel = "[py]"\nborder = "heavy"\ntree = true\n', encoding="utf-8"
    )
    (tmp_path / "boxlog.toml").write_text('label = "[box]"\n', encoding="utf-8")
    explicit = tmp_path / "explicit.toml"
    explicit.write_text('border = "double"\n', encoding="utf-8")

    cfg = load_config(explicit, cwd=tmp_path, divider=": ")
    assert cfg.label == "[box]"
    assert cfg.border == "double"
    assert cfg.tree is True
    assert cfg.divider == ": "
    assert [p.name for p in cfg.config_files] == ["pyproject.toml", "boxlog.toml", "explicit.toml"]


def test_load_config_without_discovery(tmp_path: Path) -> None:
    (tmp_path / "boxlog.toml").write_text('label = "[box]"\n', encoding="utf-8")
    assert load_config(cwd=tmp_path, discover=False).label == "[LOG]"


def test_render_options_projection() -> None:
    cfg = load_config(discover=False, border="rounded", ansi_value="green", ansi=True)
    options = cfg.render_options()
    assert options.border == "rounded"
    assert options.ansi is True
    assert options.ansi_value == "green"
    assert cfg.render_options(ansi=False).ansi is False


def test_render_options_overrides() -> None:
    options = RenderOptions()
    assert options.with_overrides(border=None) is options
    assert options.with_overrides(border="heavy").border == "heavy"
    assert options.header_style == ""
    assert RenderOptions(ansi_value="red").header_style == "red"
    assert RenderOptions(ansi_value="red", ansi_header="bold").header_style == "bold"
    with pytest.raises(TypeError):
        options.with_overrides(colour=True)
