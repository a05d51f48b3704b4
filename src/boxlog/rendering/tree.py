# topmark:header:start
#
#   project      : BoxLog
#   file         : tree.py
#   file_relpath : src/boxlog/rendering/tree.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Box-drawn outline rendering of nested sequences and mappings.

Every line of the outline is ``indent + branch + " " + text``:

- the *branch* is ``tee_left + horizontal`` for a sibling that has followers and
  ``bottom_left + horizontal`` for the last sibling;
- the *indent* grows by ``vertical + "  "`` under a non-last ancestor and by three
  spaces under a last one, so vertical rules continue exactly under open branches.

Example (``light`` border):

```
├─ foo
├──┬─ bar
│  └─ baz
└─ qux
   └─ 42
```

renders ``["foo", ["bar", "baz"], {"qux": 42}]``. A nested sequence opens with
its first element on the parent's line (joined by ``─┬─``); mapping entries
print the key, then their value one level deeper.

Lines are produced lazily by a recursive generator and joined at the end.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from boxlog.config.logging import get_logger
from boxlog.core.shapes import Shape, is_container, shape_of
from boxlog.rendering.ansi import wrap
from boxlog.rendering.borders import resolve_border
from boxlog.rendering.inspector import inspect_value

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping, Sequence

    from boxlog.config.logging import BoxlogLogger
    from boxlog.config.model import RenderOptions
    from boxlog.rendering.borders import BorderGlyphSet

logger: BoxlogLogger = get_logger(__name__)


def trim_separator(text: str, separator: str) -> str:
    """Remove leading and trailing occurrences of ``separator`` from ``text``."""
    if not separator:
        return text
    while text.startswith(separator):
        text = text[len(separator) :]
    while text.endswith(separator):
        text = text[: -len(separator)]
    return text


class TreeLayout:
    """Line emitter for one tree render.

    Args:
        glyphs (BorderGlyphSet): Border glyphs used for branches and indents.
        options (RenderOptions): Resolved render options (colors).
    """

    def __init__(self, glyphs: BorderGlyphSet, options: RenderOptions) -> None:
        self.options = options
        self.branch = glyphs.tee_left + glyphs.horizontal
        self.last_branch = glyphs.bottom_left + glyphs.horizontal
        self.opener = glyphs.horizontal + glyphs.tee_up + glyphs.horizontal
        # An empty vertical glyph still occupies one column
        self.pipe_indent = (glyphs.vertical or " ") + "  "
        self.blank_indent = "   "

    def text(self, value: object) -> str:
        """Return the leaf text of ``value``."""
        text = inspect_value(value)
        if self.options.ansi and self.options.ansi_value:
            return wrap(text, self.options.ansi_value)
        return text

    def line(self, prefix: str, last: bool, text: str, *, opener: bool = False) -> str:
        """Compose one outline line."""
        glyph = prefix + (self.last_branch if last else self.branch)
        if opener:
            glyph += self.opener
        if self.options.ansi:
            glyph = wrap(glyph, self.options.ansi_tree)
        return f"{glyph} {text}" if text else glyph

    def child_prefix(self, prefix: str, last: bool) -> str:
        """Return the indent of the children of a branch drawn at ``prefix``."""
        return prefix + (self.blank_indent if last else self.pipe_indent)

    def walk(self, value: object, prefix: str = "") -> Iterator[str]:
        """Yield the lines of a container value."""
        match shape_of(value):
            case Shape.SEQUENCE:
                yield from self.sequence(value, prefix)  # type: ignore[arg-type]
            case Shape.MAPPING:
                yield from self.mapping(value, prefix)  # type: ignore[arg-type]

    def sequence(self, items: Sequence[Any], prefix: str) -> Iterator[str]:
        """Yield the lines of a sequence, one branch per element."""
        count = len(items)
        for index, item in enumerate(items):
            last = index == count - 1
            match shape_of(item):
                case Shape.SCALAR:
                    yield self.line(prefix, last, self.text(item))
                case Shape.SEQUENCE:
                    if not item:
                        continue
                    child = self.child_prefix(prefix, last)
                    first = item[0]
                    if is_container(first):
                        yield self.line(prefix, last, "", opener=True)
                        yield from self.sequence(item, child)
                    else:
                        yield self.line(prefix, last, self.text(first), opener=True)
                        yield from self.sequence(item[1:], child)
                case Shape.MAPPING:
                    # Entries inherit the element's position so the closing
                    # branch is only drawn for the very last entry.
                    yield from self.mapping(item, prefix, last_override=last)

    def mapping(
        self,
        mapping: Mapping[Any, Any],
        prefix: str,
        *,
        last_override: bool = True,
    ) -> Iterator[str]:
        """Yield the lines of a mapping, one key branch per entry."""
        count = len(mapping)
        for index, (key, value) in enumerate(mapping.items()):
            last = last_override and index == count - 1
            yield from self.entry(key, value, prefix, last)

    def entry(self, key: object, value: object, prefix: str, last: bool) -> Iterator[str]:
        """Yield a key branch followed by its value one level deeper."""
        yield self.line(prefix, last, str(key))
        child = self.child_prefix(prefix, last)
        match shape_of(value):
            case Shape.SCALAR:
                yield self.line(child, True, self.text(value))
            case Shape.SEQUENCE:
                yield from self.sequence(value, child)  # type: ignore[arg-type]
            case Shape.MAPPING:
                yield from self.mapping(value, child)  # type: ignore[arg-type]


def build_tree(value: object, options: RenderOptions) -> str:
    """Render ``value`` as a box-drawn outline.

    A bare scalar renders as its inspector text, without branch glyphs.

    Args:
        value (object): A scalar, sequence or mapping (arbitrarily nested).
        options (RenderOptions): Resolved render options.

    Returns:
        str: The outline, lines joined by ``options.line_separator``.
    """
    if shape_of(value) is Shape.SCALAR:
        return inspect_value(value)

    layout = TreeLayout(resolve_border(options.border), options)
    lines = list(layout.walk(value))
    logger.trace("Rendered tree with %d line(s)", len(lines))
    separator = options.line_separator
    return trim_separator(separator.join(lines), separator)
