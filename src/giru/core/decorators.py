from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, NoReturn, TypeVar

import typer
from rich.markup import escape

from giru.core.console import get_console, get_logger
from giru.core.result import GiruError

F = TypeVar("F", bound=Callable[..., Any])

logger = get_logger(__name__)


def abort(exc: GiruError) -> NoReturn:
    """Print a hard failure on stderr and exit with status 1."""
    logger.debug("Aborting after %s", type(exc).__name__, exc_info=exc)
    get_console(stderr=True).print(
        f"[red]{escape(str(exc))}[/red]", highlight=False, soft_wrap=True
    )
    raise typer.Exit(code=1)


def handle_exceptions(func: F) -> F:
    """Decorate CLI entrypoints to present friendly errors and exit with status 1."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except GiruError as exc:
            abort(exc)

    return wrapper  # type: ignore[return-value]


__all__ = ["abort", "handle_exceptions"]
