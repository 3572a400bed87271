"""CLI command modules for giru.

This package contains all user-facing CLI commands organized by domain:
    - memories: Saving, listing, viewing and opening the memory log
    - about: Help menu and author
"""

from __future__ import annotations

from . import about, memories

__all__ = ["about", "memories"]
