# topmark:header:start
#
#   project      : BoxLog
#   file         : __main__.py
#   file_relpath : src/boxlog/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running BoxLog via ``python -m boxlog``.

Delegates to :func:`boxlog.cli.main.cli`, the same entry point as the
``boxlog`` console script.

Examples:
    Render a JSON document as a tree::

        python -m boxlog tree data.json
"""

from __future__ import annotations

from boxlog.cli.main import cli

if __name__ == "__main__":
    cli()
