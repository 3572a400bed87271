from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from time import perf_counter

import typer
from rich.markup import escape
from rich.panel import Panel

from . import __version__
from .commands.memories import save_memory
from .core.config import AppConfig, ConfigLoadResult, load_config
from .core.console import get_console, setup_logging
from .core.controller import NoteStoreController
from .core.decorators import abort
from .core.registry import discover_commands
from .core.result import ConfigurationError

app = typer.Typer(
    help="Giru: a simple memory-saving tool. Runs `save` when no command is given.",
    add_completion=False,
)
logger = logging.getLogger(__name__)


@dataclass
class AppState:
    config: AppConfig
    config_meta: ConfigLoadResult
    logger: logging.Logger
    controller: NoteStoreController


def _version_callback(value: bool) -> None:
    if value:
        get_console().print(f"Giru {__version__}", highlight=False)
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Path to a giru config file (TOML or JSON)."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    try:
        loaded_config, meta = load_config(config_path=config)
    except ConfigurationError as exc:
        abort(exc)

    app_logger = setup_logging(level=loaded_config.log_level, verbose=verbose)

    ctx.obj = AppState(
        config=loaded_config,
        config_meta=meta,
        logger=app_logger,
        controller=NoteStoreController(loaded_config),
    )

    if meta.error:
        get_console(stderr=True).print(
            Panel(
                f"[bold red]Configuration Error - Safe Mode Active[/bold red]\n\n"
                f"Failed to load {escape(str(meta.path))}:\n{escape(meta.error)}\n\n"
                f"[yellow]Using default settings.[/yellow]",
                border_style="red",
            )
        )
    else:
        app_logger.debug(
            "Loaded configuration from %s (file loaded: %s, env overrides: %s)",
            meta.path,
            meta.file_loaded,
            sorted(meta.env_overrides),
        )
    app_logger.debug("Memory log: %s", loaded_config.log_path)

    if ctx.invoked_subcommand is None:
        save_memory(ctx)


def _register_commands() -> None:
    commands_path = Path(__file__).resolve().parent / "commands"
    for spec in discover_commands(commands_path):
        app.command(spec.name)(spec.handler)


def _register_commands_with_timing() -> None:
    start = perf_counter()
    _register_commands()
    elapsed = perf_counter() - start
    logger.debug("Command registry initialized in %.3f seconds", elapsed)


_register_commands_with_timing()


def cli() -> None:
    app()


if __name__ == "__main__":
    cli()
