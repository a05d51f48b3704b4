# topmark:header:start
#
#   project      : BoxLog
#   file         : api.py
#   file_relpath : src/boxlog/rendering/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public entry points of the tree and table renderers.

Both functions take an optional `RenderOptions` snapshot plus keyword overrides
that are applied on top of it:

```python
from boxlog import render_table, render_tree

print(render_tree({"src": ["a.py", "b.py"]}))
print(render_table({"name": ["foo"], "size": [12]}, border="rounded"))
```

Options are resolved once here; the renderers only see the final snapshot.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from boxlog.config.model import RenderOptions
from boxlog.rendering.table import build_table
from boxlog.rendering.tree import build_tree

if TYPE_CHECKING:
    from collections.abc import Mapping


def resolve_options(options: RenderOptions | None, overrides: Mapping[str, Any]) -> RenderOptions:
    """Return ``options`` (or the defaults) with ``overrides`` applied.

    Raises:
        TypeError: If an override names an unknown option.
    """
    base = options if options is not None else RenderOptions()
    return base.with_overrides(**overrides)


def render_tree(value: object, options: RenderOptions | None = None, **overrides: Any) -> str:
    """Render ``value`` as a box-drawn outline.

    Args:
        value (object): Scalar, sequence or mapping, nested to any depth.
        options (RenderOptions | None): Base options; defaults to `RenderOptions()`.
        **overrides (Any): Individual option overrides (``border="heavy"``, ``ansi=True``...).

    Returns:
        str: The rendered outline (no trailing line separator).
    """
    return build_tree(value, resolve_options(options, overrides))


def render_table(
    columns: Mapping[Any, Any],
    options: RenderOptions | None = None,
    **overrides: Any,
) -> str:
    """Render ``columns`` as a bordered table.

    Args:
        columns (Mapping[Any, Any]): Header -> row values, or a flat mapping (one row).
        options (RenderOptions | None): Base options; defaults to `RenderOptions()`.
        **overrides (Any): Individual option overrides.

    Returns:
        str: The rendered table (no trailing line separator).

    Raises:
        TableValidationError: If ``columns`` is empty or its columns differ in length.
    """
    return build_table(columns, resolve_options(options, overrides))
