"""Memory log commands.

Provides CLI commands for:
    - Appending a memory interactively (also the default action)
    - Pretty-printing, viewing or editing the memory log
    - Opening any path in the notes app or the terminal editor
"""

from __future__ import annotations

import typer

from giru.core.decorators import handle_exceptions


@handle_exceptions
def list_memories(ctx: typer.Context) -> None:
    """List all saved memories."""
    ctx.obj.controller.list_memories()


@handle_exceptions
def open_memories(ctx: typer.Context) -> None:
    """Open the memory file with Neovim in Alacritty."""
    ctx.obj.controller.open_memories()


@handle_exceptions
def view_memories(ctx: typer.Context) -> None:
    """View the memory file with Frogmouth."""
    ctx.obj.controller.view_memories()


@handle_exceptions
def save_memory(ctx: typer.Context) -> None:
    """Save a new memory."""
    ctx.obj.controller.save_memory()


@handle_exceptions
def obsidian(
    ctx: typer.Context,
    path: str | None = typer.Argument(None, help="Path or file to open. Defaults to ~."),
    neovim: bool = typer.Option(
        False, "--neovim", help="Open with Neovim in Alacritty instead of Obsidian."
    ),
) -> None:
    """Open a path or file with Obsidian or Neovim."""
    ctx.obj.controller.launch_external(path, neovim=neovim)
