# topmark:header:start
#
#   project      : BoxLog
#   file         : table.py
#   file_relpath : src/boxlog/rendering/table.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bordered grid rendering of column mappings.

A *table input* maps column headers to the sequence of that column's row values:

```python
{"name": ["foo", "bar"], "size": [10, 200]}
```

renders (``light`` border) as:

```
┌──────┬──────┐
│ name │ size │
├──────┼──────┤
│ foo  │   10 │
├──────┼──────┤
│ bar  │  200 │
└──────┴──────┘
```

Rendering runs in four stages:

1. **validate** the input (`validate_columns`): at least one column, equal lengths;
2. **normalize** flat mappings (``{"a": 1}``) into one-row columns;
3. **layout**: every value becomes a `Cell` (padded content lines); column width
   and row height are computed from the ANSI-stripped text;
4. **emit**: border rows and content rows are produced top to bottom.

Nested mappings inside cells render as complete sub-tables whose lines become
the cell content, so nesting works to any depth.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from boxlog.config.logging import get_logger
from boxlog.core.errors import ErrorCode, TableValidationError
from boxlog.core.shapes import Shape, is_sequence, shape_of
from boxlog.rendering.ansi import visible_length, wrap
from boxlog.rendering.borders import resolve_border
from boxlog.rendering.inspector import inspect_value, is_numeric

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping, Sequence

    from boxlog.config.logging import BoxlogLogger
    from boxlog.config.model import RenderOptions
    from boxlog.rendering.borders import BorderGlyphSet

logger: BoxlogLogger = get_logger(__name__)

CELL_PADDING: str = " "


class Alignment(str, Enum):
    """Horizontal justification of a column."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True, slots=True)
class Cell:
    """Content lines of one table cell, already padded by one space on each side.

    Attributes:
        lines (tuple[str, ...]): Content lines (may carry ANSI from nested tables).
    """

    lines: tuple[str, ...]

    @property
    def width(self) -> int:
        """Widest visible line."""
        return max((visible_length(line) for line in self.lines), default=0)

    @property
    def height(self) -> int:
        """Number of content lines."""
        return len(self.lines)


@dataclass(frozen=True, slots=True)
class Column:
    """Laid-out column: header cell, data cells, alignment and width."""

    header: Cell
    cells: tuple[Cell, ...]
    align: Alignment
    width: int


def validate_columns(columns: Mapping[Any, Any]) -> dict[Any, list[Any]]:
    """Validate ``columns`` and return them normalized to equal-length lists.

    When any column value is not a sequence, every value is wrapped as a
    one-element list, so ``{"a": 1, "b": [2, 3]}`` becomes a single row. Keys are
    kept as given, so ``1`` and ``"1"`` stay two columns.

    Args:
        columns (Mapping[Any, Any]): Header -> row values.

    Returns:
        dict[Any, list[Any]]: Header key -> row values.

    Raises:
        TableValidationError: If there is no column (``E_TABLE_EMPTY``) or the
            columns differ in length (``E_TABLE_ROW_LENGTH_MISMATCH``).
    """
    if not columns:
        raise TableValidationError("A table needs at least one column", ErrorCode.TABLE_EMPTY)

    if all(is_sequence(values) for values in columns.values()):
        normalized = {k: list(v) for k, v in columns.items()}
    else:
        normalized = {k: [v] for k, v in columns.items()}

    lengths = {len(values) for values in normalized.values()}
    if len(lengths) > 1:
        detail = ", ".join(f"{k!r}={len(v)}" for k, v in normalized.items())
        raise TableValidationError(
            f"All table columns must have the same number of rows ({detail})",
            ErrorCode.TABLE_ROW_LENGTH_MISMATCH,
        )
    return normalized


def content_lines(value: object, options: RenderOptions) -> list[str]:
    """Return the unpadded content lines of a cell value.

    Args:
        value (object): Raw cell value.
        options (RenderOptions): Options forwarded to nested tables.

    Returns:
        list[str]: At least one line.
    """
    match shape_of(value):
        case Shape.MAPPING:
            if value:
                return build_table_lines(value, options)  # type: ignore[arg-type]
            return inspect_value(value).split("\n")
        case Shape.SEQUENCE:
            stacked: list[str] = []
            for item in value:  # type: ignore[attr-defined]
                stacked.extend(content_lines(item, options))
            return stacked or [""]
        case Shape.SCALAR:
            if isinstance(value, str):
                return value.strip().split("\n")
            return inspect_value(value).split("\n")


def make_cell(value: object, options: RenderOptions) -> Cell:
    """Build a padded `Cell` from a raw value."""
    lines = content_lines(value, options)
    return Cell(tuple(f"{CELL_PADDING}{line}{CELL_PADDING}" for line in lines))


def column_alignment(values: Sequence[Any]) -> Alignment:
    """Right-align a column only when every raw value in it is numeric."""
    if values and all(is_numeric(v) for v in values):
        return Alignment.RIGHT
    return Alignment.LEFT


def justify(text: str, width: int, align: Alignment) -> str:
    """Pad ``text`` to ``width`` visible characters."""
    fill = " " * max(width - visible_length(text), 0)
    return fill + text if align is Alignment.RIGHT else text + fill


def layout_columns(columns: dict[Any, list[Any]], options: RenderOptions) -> list[Column]:
    """Turn normalized columns into laid-out `Column` records."""
    laid_out: list[Column] = []
    for header, values in columns.items():
        header_cell = make_cell(str(header), options)
        cells = tuple(make_cell(v, options) for v in values)
        width = max(c.width for c in (header_cell, *cells))
        laid_out.append(Column(header_cell, cells, column_alignment(values), width))
    return laid_out


class GridEmitter:
    """Emit the text rows of a laid-out grid.

    Args:
        glyphs (BorderGlyphSet): Border glyphs.
        options (RenderOptions): Colors and ANSI switch.
    """

    def __init__(self, glyphs: BorderGlyphSet, options: RenderOptions) -> None:
        self.glyphs = glyphs
        self.options = options

    def border(self, text: str) -> str:
        return wrap(text, self.options.ansi_table) if self.options.ansi else text

    def content(self, text: str, *, header: bool) -> str:
        if not self.options.ansi:
            return text
        style = self.options.header_style if header else self.options.ansi_value
        return wrap(text, style)

    def rule(self, left: str, joint: str, right: str, widths: Sequence[int]) -> str:
        """Return a horizontal border row; all-empty glyphs yield an empty line."""
        parts = [self.border(left)]
        for index, width in enumerate(widths):
            if index:
                parts.append(self.border(joint))
            parts.append(self.border(self.glyphs.horizontal * width))
        parts.append(self.border(right))
        return "".join(parts)

    def row(
        self,
        cells: Sequence[Cell],
        columns: Sequence[Column],
        *,
        header: bool,
    ) -> Iterator[str]:
        """Yield the text lines of one grid row, padded to the row height."""
        height = max(c.height for c in cells)
        vertical = self.border(self.glyphs.vertical)
        for line_no in range(height):
            parts: list[str] = []
            for cell, column in zip(cells, columns, strict=True):
                if line_no < cell.height:
                    text = justify(cell.lines[line_no], column.width, column.align)
                else:
                    text = " " * column.width
                parts.append(self.content(text, header=header))
            yield vertical + vertical.join(parts) + vertical

    def grid(self, columns: Sequence[Column]) -> Iterator[str]:
        """Yield every line of the table, top border to bottom border."""
        g = self.glyphs
        widths = [c.width for c in columns]
        divider = self.rule(g.tee_left, g.cross, g.tee_right, widths)

        yield self.rule(g.top_left, g.tee_up, g.top_right, widths)
        yield from self.row([c.header for c in columns], columns, header=True)
        yield divider
        row_count = len(columns[0].cells)
        for index in range(row_count):
            if index:
                yield divider
            yield from self.row([c.cells[index] for c in columns], columns, header=False)
        yield self.rule(g.bottom_left, g.tee_down, g.bottom_right, widths)


def build_table_lines(columns: Mapping[Any, Any], options: RenderOptions) -> list[str]:
    """Render ``columns`` and return the individual output lines.

    Raises:
        TableValidationError: See `validate_columns`.
    """
    normalized = validate_columns(columns)
    laid_out = layout_columns(normalized, options)
    emitter = GridEmitter(resolve_border(options.border), options)
    lines = list(emitter.grid(laid_out))
    logger.trace(
        "Rendered table: %d column(s), %d line(s)",
        len(laid_out),
        len(lines),
    )
    return lines


def build_table(columns: Mapping[Any, Any], options: RenderOptions) -> str:
    """Render ``columns`` as a bordered grid.

    Args:
        columns (Mapping[Any, Any]): Header -> row values (or a flat mapping).
        options (RenderOptions): Resolved render options.

    Returns:
        str: The grid, lines joined by ``options.line_separator`` (no trailing separator).

    Raises:
        TableValidationError: If the input has no column or unequal column lengths.
    """
    return options.line_separator.join(build_table_lines(columns, options))
