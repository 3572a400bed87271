from __future__ import annotations

import typer


def show_help(ctx: typer.Context) -> None:
    """Display help information."""
    ctx.obj.controller.show_help()


def author(ctx: typer.Context) -> None:
    """Display the author of the tool."""
    ctx.obj.controller.show_author()
