"""Core shared infrastructure for giru.

This package contains:
    - config: Application configuration management
    - console: Rich console output and logging
    - controller: The note store controller behind every command
    - launcher: External process spawning
    - result: Error handling patterns
"""

from __future__ import annotations

from . import config, console

__all__ = ["config", "console"]
