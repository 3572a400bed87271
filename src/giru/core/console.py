"""Console output and logging configuration.

Provides Rich-based console output and logging setup:
    - console: Main Rich console for stdout
    - stderr_console: Rich console for stderr
    - setup_logging(): Configure logging with Rich handler
    - get_logger(): Get a named logger instance
    - markdown_theme(): Theme used when rendering the memory log
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.style import Style
from rich.theme import Theme

console = Console()
stderr_console = Console(stderr=True)

DEFAULT_ACCENT_COLOR = "#f6bd00"


def _normalize_level(level: str | int) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return int(level)


def setup_logging(level: str | int = logging.WARNING, verbose: bool = False) -> logging.Logger:
    """Configure logging with a Rich handler and return the app logger."""
    numeric_level = logging.DEBUG if verbose else _normalize_level(level)

    handler = RichHandler(
        console=stderr_console,
        markup=True,
        rich_tracebacks=True,
        tracebacks_show_locals=False,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler.setLevel(numeric_level)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(numeric_level)
    root.addHandler(handler)

    logger = logging.getLogger("giru")
    logger.handlers.clear()
    logger.setLevel(numeric_level)
    logger.addHandler(handler)
    logger.propagate = False

    return logger


def markdown_theme(accent_color: str = DEFAULT_ACCENT_COLOR) -> Theme:
    """Theme that paints every markdown header level in the accent colour."""
    header = Style(color=accent_color, bold=True)
    styles = {f"markdown.h{level}": header for level in range(1, 7)}
    styles["markdown.h1.border"] = Style(color=accent_color)
    return Theme(styles)


def get_console(stderr: bool = False) -> Console:
    return stderr_console if stderr else console


def get_logger(name: str | None = None) -> logging.Logger:
    return logging.getLogger(name or "giru")
