# topmark:header:start
#
#   project      : BoxLog
#   file         : borders.py
#   file_relpath : src/boxlog/rendering/borders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Border glyph sets used by the tree and table renderers.

A `BorderGlyphSet` is an immutable record of the box-drawing characters needed
to frame a grid. Glyphs a set does not define are empty strings, which is how
the borderless ("list", "none") styles are expressed.

Glyph naming follows the position of the junction in the grid:

```
top_left ──── tee_up ──── top_right
   │            │            │
tee_left ───── cross ───── tee_right
   │            │            │
bottom_left ─ tee_down ── bottom_right
```

Sets are looked up by name through `resolve_border`; unknown names fall back
to the default ``"light"`` set instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Final

from boxlog.config.logging import get_logger
from boxlog.constants import DEFAULT_BORDER

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class BorderGlyphSet:
    """Named set of single-character (or empty) border glyphs.

    Attributes:
        name (str): Registry key of the set.
        horizontal (str): Horizontal edge.
        vertical (str): Vertical edge.
        top_left (str): Top-left corner.
        top_right (str): Top-right corner.
        bottom_left (str): Bottom-left corner; also the last-sibling branch in trees.
        bottom_right (str): Bottom-right corner.
        tee_left (str): Left-edge junction; also the sibling branch in trees.
        tee_right (str): Right-edge junction.
        tee_up (str): Top-edge junction; also the nested-list opener in trees.
        tee_down (str): Bottom-edge junction.
        cross (str): Inner junction.
    """

    name: str
    horizontal: str = ""
    vertical: str = ""
    top_left: str = ""
    top_right: str = ""
    bottom_left: str = ""
    bottom_right: str = ""
    tee_left: str = ""
    tee_right: str = ""
    tee_up: str = ""
    tee_down: str = ""
    cross: str = ""

    def glyphs(self) -> dict[str, str]:
        """Return the glyph fields as a plain dict (without the name)."""
        return {f.name: getattr(self, f.name) for f in fields(self) if f.name != "name"}


def _box(name: str, chars: str) -> BorderGlyphSet:
    """Build a full set from an 11-character string.

    Order: horizontal, vertical, top_left, top_right, bottom_left, bottom_right,
    tee_left, tee_right, tee_up, tee_down, cross.
    """
    h, v, tl, tr, bl, br, tel, ter, teu, ted, cr = chars
    return BorderGlyphSet(name, h, v, tl, tr, bl, br, tel, ter, teu, ted, cr)


def _list(name: str, horizontal: str) -> BorderGlyphSet:
    """Build a borderless "list" set that only draws horizontal rules."""
    return BorderGlyphSet(name, horizontal=horizontal)


_SETS: Final[tuple[BorderGlyphSet, ...]] = (
    _box("light", "─│┌┐└┘├┤┬┴┼"),
    _box("heavy", "━┃┏┓┗┛┣┫┳┻╋"),
    _box("light-heavy", "━│┍┑┕┙┝┥┯┷┿"),
    _box("heavy-light", "─┃┎┒┖┚┠┨┰┸╂"),
    _box("double", "═║╔╗╚╝╠╣╦╩╬"),
    _box("light-double", "═│╒╕╘╛╞╡╤╧╪"),
    _box("double-light", "─║╓╖╙╜╟╢╥╨╫"),
    _box("dashed", "╌┆┌┐└┘├┤┬┴┼"),
    _box("dashed-heavy", "╍┇┏┓┗┛┣┫┳┻╋"),
    _box("dotted", "‧⁚‧‧‧‧⁚⁚‧‧⁚"),
    _box("rounded", "─│╭╮╰╯├┤┬┴┼"),
    _box("rounded-dashed", "╌┆╭╮╰╯├┤┬┴┼"),
    _list("list", "─"),
    _list("list-heavy", "━"),
    _list("list-double", "═"),
    _list("list-dashed", "╌"),
    _list("list-dashed-heavy", "╍"),
    _list("list-dotted", "┈"),
    _list("list-dotted-heavy", "∙"),
    _box("diamond", "  ◤◥◣◢▶◀▼▲◆"),
    _box("tiny", "  ◜◝◟◞    ‧"),
    BorderGlyphSet("none"),
    # Edge-only sets: no corners or junctions
    BorderGlyphSet("dashed-2", horizontal="╌", vertical="╎"),
    BorderGlyphSet("dashed-3", horizontal="┄", vertical="┆"),
    BorderGlyphSet("dashed-4", horizontal="┈", vertical="┊"),
    BorderGlyphSet("dashed-2-heavy", horizontal="╍", vertical="╏"),
)

BORDERS: Final[dict[str, BorderGlyphSet]] = {s.name: s for s in _SETS}


def border_names() -> tuple[str, ...]:
    """Return the registered border set names, in registration order."""
    return tuple(BORDERS)


def resolve_border(name: str | None) -> BorderGlyphSet:
    """Return the border set registered under ``name``.

    Unknown (or missing) names fall back to the default ``"light"`` set.

    Args:
        name (str | None): Border set name.

    Returns:
        BorderGlyphSet: The resolved glyph set.
    """
    if name is None:
        return BORDERS[DEFAULT_BORDER]
    found = BORDERS.get(name)
    if found is None:
        logger.debug("Unknown border set %r, falling back to %r", name, DEFAULT_BORDER)
        return BORDERS[DEFAULT_BORDER]
    return found
