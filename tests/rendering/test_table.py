# topmark:header:start
#
#   project      : BoxLog
#   file         : test_table.py
#   file_relpath : tests/rendering/test_table.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the bordered table renderer (`boxlog.rendering.table`)."""

from __future__ import annotations

import pytest

from boxlog import render_table
from boxlog.config.model import RenderOptions
from boxlog.core.errors import ErrorCode, TableValidationError
from boxlog.rendering.ansi import strip_ansi
from boxlog.rendering.table import Alignment, column_alignment, content_lines, validate_columns

SIMPLE = {"foo": ["bar"], "baz": ["qux"]}


def lines(*rows: str) -> str:
    return "\n".join(rows)


def test_simple_table() -> None:
    assert render_table(SIMPLE) == lines(
        "┌─────┬─────┐",
        "│ foo │ baz │",
        "├─────┼─────┤",
        "│ bar │ qux │",
        "└─────┴─────┘",
    )


@pytest.mark.parametrize(
    ("border", "expected"),
    [
        (
            "heavy",
            ["┏━━━━━┳━━━━━┓", "┃ foo ┃ baz ┃", "┣━━━━━╋━━━━━┫", "┃ bar ┃ qux ┃", "┗━━━━━┻━━━━━┛"],
        ),
        (
            "double",
            ["╔═════╦═════╗", "║ foo ║ baz ║", "╠═════╬═════╣", "║ bar ║ qux ║", "╚═════╩═════╝"],
        ),
        (
            "light-heavy",
            ["┍━━━━━┯━━━━━┑", "│ foo │ baz │", "┝━━━━━┿━━━━━┥", "│ bar │ qux │", "┕━━━━━┷━━━━━┙"],
        ),
        (
            "heavy-light",
            ["┎─────┰─────┒", "┃ foo ┃ baz ┃", "┠─────╂─────┨", "┃ bar ┃ qux ┃", "┖─────┸─────┚"],
        ),
        (
            "light-double",
            ["╒═════╤═════╕", "│ foo │ baz │", "╞═════╪═════╡", "│ bar │ qux │", "╘═════╧═════╛"],
        ),
        (
            "double-light",
            ["╓─────╥─────╖", "║ foo ║ baz ║", "╟─────╫─────╢", "║ bar ║ qux ║", "╙─────╨─────╜"],
        ),
        (
            "dashed",
            ["┌╌╌╌╌╌┬╌╌╌╌╌┐", "┆ foo ┆ baz ┆", "├╌╌╌╌╌┼╌╌╌╌╌┤", "┆ bar ┆ qux ┆", "└╌╌╌╌╌┴╌╌╌╌╌┘"],
        ),
        (
            "rounded",
            ["╭─────┬─────╮", "│ foo │ baz │", "├─────┼─────┤", "│ bar │ qux │", "╰─────┴─────╯"],
        ),
        ("list", ["──────────", " foo  baz ", "──────────", " bar  qux ", "──────────"]),
        ("list-double", ["══════════", " foo  baz ", "══════════", " bar  qux ", "══════════"]),
        (
            "diamond",
            ["◤     ▼     ◥", "  foo   baz  ", "▶     ◆     ◀", "  bar   qux  ", "◣     ▲     ◢"],
        ),
        (
            "tiny",
            ["◜           ◝", "  foo   baz  ", "      ‧      ", "  bar   qux  ", "◟           ◞"],
        ),
    ],
)
def test_border_sets(border: str, expected: list[str]) -> None:
    assert render_table(SIMPLE, border=border) == lines(*expected)


def test_none_border_keeps_empty_border_rows() -> None:
    assert render_table(SIMPLE, border="none") == "\n foo  baz \n\n bar  qux \n"


def test_unknown_border_falls_back_to_light() -> None:
    assert render_table(SIMPLE, border="nonexistent") == render_table(SIMPLE)


def test_numeric_columns_are_right_aligned_with_row_dividers() -> None:
    rendered = render_table({"foo": [10, 11], "bar": [200, 21]})
    assert rendered == lines(
        "┌─────┬─────┐",
        "│ foo │ bar │",
        "├─────┼─────┤",
        "│  10 │ 200 │",
        "├─────┼─────┤",
        "│  11 │  21 │",
        "└─────┴─────┘",
    )


def test_numeric_strings_count_as_numeric() -> None:
    rendered = render_table({"amount": ["1", "2.5"]})
    assert rendered.splitlines()[3] == "│      1 │"


def test_python_only_number_spellings_stay_left_aligned() -> None:
    rendered = render_table({"n": ["1_000", "2"], "m": ["inf", "3"]})
    assert rendered.splitlines()[5] == "│ 2     │ 3   │"


def test_keys_that_print_alike_stay_separate_columns() -> None:
    assert render_table({1: ["a"], "1": ["b"]}) == lines(
        "┌───┬───┐",
        "│ 1 │ 1 │",
        "├───┼───┤",
        "│ a │ b │",
        "└───┴───┘",
    )
    assert validate_columns({1: ["a"], "1": ["b"]}) == {1: ["a"], "1": ["b"]}


def test_none_cells_render_visibly() -> None:
    assert render_table({"a": [None, 1]}).splitlines()[3] == "│ None │"


def test_complex_cells() -> None:
    """Multi-line strings and sequences stack lines; None renders as None."""
    columns = {
        "foobar": ["foo\nbar", 1, 2.3, True, None, ["FOO", "BAR"]],
        "bar": [False] * 6,
        "qux": [None] * 6,
    }
    assert render_table(columns) == lines(
        "┌────────┬───────┬──────┐",
        "│ foobar │ bar   │ qux  │",
        "├────────┼───────┼──────┤",
        "│ foo    │ False │ None │",
        "│ bar    │       │      │",
        "├────────┼───────┼──────┤",
        "│ 1      │ False │ None │",
        "├────────┼───────┼──────┤",
        "│ 2.3    │ False │ None │",
        "├────────┼───────┼──────┤",
        "│ True   │ False │ None │",
        "├────────┼───────┼──────┤",
        "│ None   │ False │ None │",
        "├────────┼───────┼──────┤",
        "│ FOO    │ False │ None │",
        "│ BAR    │       │      │",
        "└────────┴───────┴──────┘",
    )


def test_nested_table_in_cell() -> None:
    columns = {"foo": ["bar"], "baz": [{"foo": ["bar"], "baz": ["qux"]}]}
    assert render_table(columns) == lines(
        "┌─────┬───────────────┐",
        "│ foo │ baz           │",
        "├─────┼───────────────┤",
        "│ bar │ ┌─────┬─────┐ │",
        "│     │ │ foo │ baz │ │",
        "│     │ ├─────┼─────┤ │",
        "│     │ │ bar │ qux │ │",
        "│     │ └─────┴─────┘ │",
        "└─────┴───────────────┘",
    )


def test_flat_mapping_is_a_single_row() -> None:
    assert render_table({"foo": "bar", "baz": "qux"}) == render_table(SIMPLE)


def test_flat_mapping_with_nested_mapping() -> None:
    assert render_table({"foo": "bar", "baz": {"qux": 123}}) == lines(
        "┌─────┬─────────┐",
        "│ foo │ baz     │",
        "├─────┼─────────┤",
        "│ bar │ ┌─────┐ │",
        "│     │ │ qux │ │",
        "│     │ ├─────┤ │",
        "│     │ │ 123 │ │",
        "│     │ └─────┘ │",
        "└─────┴─────────┘",
    )


def test_columns_without_rows_render_header_only() -> None:
    assert render_table({"a": [], "b": []}) == lines(
        "┌───┬───┐",
        "│ a │ b │",
        "├───┼───┤",
        "└───┴───┘",
    )


def test_empty_table_is_rejected() -> None:
    with pytest.raises(TableValidationError) as excinfo:
        render_table({})
    assert excinfo.value.code is ErrorCode.TABLE_EMPTY


def test_row_length_mismatch_is_rejected() -> None:
    with pytest.raises(TableValidationError) as excinfo:
        render_table({"a": [1, 2], "b": [1]})
    assert excinfo.value.code is ErrorCode.TABLE_ROW_LENGTH_MISMATCH
    assert isinstance(excinfo.value, ValueError)


def test_nested_table_errors_propagate() -> None:
    with pytest.raises(TableValidationError):
        render_table({"a": [{"x": [1, 2], "y": [1]}]})


def test_ansi_table() -> None:
    border = "\x1b[2m\x1b[93m"
    cell = "\x1b[96m"
    reset = "\x1b[0m"
    rendered = render_table(SIMPLE, RenderOptions(ansi=True, ansi_value="bright-cyan"))

    def b(text: str) -> str:
        return f"{border}{text}{reset}"

    def c(text: str) -> str:
        return f"{cell}{text}{reset}"

    assert rendered == lines(
        b("┌") + b("─────") + b("┬") + b("─────") + b("┐"),
        b("│") + c(" foo ") + b("│") + c(" baz ") + b("│"),
        b("├") + b("─────") + b("┼") + b("─────") + b("┤"),
        b("│") + c(" bar ") + b("│") + c(" qux ") + b("│"),
        b("└") + b("─────") + b("┴") + b("─────") + b("┘"),
    )
    assert strip_ansi(rendered) == render_table(SIMPLE)


def test_header_style_overrides_value_style() -> None:
    rendered = render_table(SIMPLE, ansi=True, ansi_table="", ansi_header="bold", ansi_value="")
    assert rendered.splitlines()[1] == "│\x1b[1m foo \x1b[0m│\x1b[1m baz \x1b[0m│"
    assert rendered.splitlines()[3] == "│ bar │ qux │"


def test_validate_columns_normalizes_mixed_values() -> None:
    assert validate_columns({"a": 1, "b": [2, 3]}) == {"a": [1], "b": [[2, 3]]}


def test_content_lines() -> None:
    options = RenderOptions()
    assert content_lines("  padded\n", options) == ["padded"]
    assert content_lines(None, options) == ["None"]
    assert content_lines([], options) == [""]
    assert content_lines({}, options) == ["{}"]


@pytest.mark.parametrize(
    ("values", "expected"),
    [
        ([1, 2.5, "3"], Alignment.RIGHT),
        ([1, "x"], Alignment.LEFT),
        ([True, 1], Alignment.LEFT),
        ([], Alignment.LEFT),
    ],
)
def test_column_alignment(values: list[object], expected: Alignment) -> None:
    assert column_alignment(values) is expected
