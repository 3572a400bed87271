"""giru - a simple memory-saving tool.

This package provides the `giru` command-line tool, which appends titled
snippets to a markdown log under ~/.giru and opens that log in external
viewers and editors.

Exports:
    __version__: Package version string.
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "1.0.0"
