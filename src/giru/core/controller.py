"""The note store controller.

Every CLI action maps onto one method here. Hard failures surface as
GiruError subclasses; soft failures (no log yet, viewer exiting non-zero)
are printed to stderr and the method simply returns.

External capabilities are injected so tests can replace them:
    - launcher: spawns the editor, viewer and notes app
    - read_line: supplies interactive input for `save`
    - coin_flip: picks the hint printed after `save`
"""

from __future__ import annotations

import shlex

from rich.console import Console
from rich.markdown import Markdown

from giru.core.config import AppConfig
from giru.core.console import get_console, get_logger, markdown_theme
from giru.core.launcher import ProcessLauncher, SubprocessLauncher
from giru.core.prompt import CoinFlip, LineReader, random_coin_flip, read_stdin_line
from giru.core.store import MemoryLog

logger = get_logger(__name__)

AUTHOR = "WMouton"
HOME_MARKER = "~"

MISSING_LOG_MESSAGE = "🤖 (Giru): No memories found. Please save a memory first."
BODY_PROMPT = "🤖 (Giru): What do you want to remember?"
TITLE_PROMPT = "🤖 (Giru): Enter Title of this memory:"

HELP_LINES = (
    "🤖 Giru Help Menu:",
    "  giru list           - List all saved memories",
    "  giru open           - Open the memory file with Neovim in Alacritty",
    "  giru view           - View the memory file with Frogmouth",
    "  giru save           - Save a new memory",
    "  giru obsidian [path] - Open the specified path or file with Obsidian",
    "  giru obsidian [path] --neovim - Open the specified path or file with Neovim in Alacritty",
    "  giru help           - Display this help menu",
    "  giru author         - Display the author of the tool",
)


def _say(console: Console, text: str) -> None:
    console.print(text, markup=False, highlight=False, soft_wrap=True)


class NoteStoreController:
    def __init__(
        self,
        config: AppConfig,
        *,
        launcher: ProcessLauncher | None = None,
        read_line: LineReader | None = None,
        coin_flip: CoinFlip | None = None,
        out: Console | None = None,
        err: Console | None = None,
    ) -> None:
        self.config = config
        self.log = MemoryLog(config.log_path)
        self.launcher = launcher or SubprocessLauncher()
        self.read_line = read_line or read_stdin_line
        self.coin_flip = coin_flip or random_coin_flip
        self.out = out or get_console()
        self.err = err or get_console(stderr=True)

    def _log_present(self) -> bool:
        if self.log.exists():
            return True
        _say(self.err, MISSING_LOG_MESSAGE)
        return False

    def _spawn_terminal_editor(self, target: str) -> None:
        self.launcher.spawn_detached(
            self.config.terminal, ["-e", *shlex.split(self.config.editor), target]
        ).unwrap()

    def list_memories(self) -> None:
        """Pretty-print the memory log to the terminal."""
        if not self._log_present():
            return

        contents = self.log.read_text()
        _say(self.out, "🤖 Giru Contents Below 🤖")
        with self.out.use_theme(markdown_theme(self.config.accent_color)):
            self.out.print(Markdown(contents))

    def open_memories(self) -> None:
        """Open the memory log in the terminal editor without waiting for it."""
        if not self._log_present():
            return
        self._spawn_terminal_editor(str(self.log.path))

    def view_memories(self) -> None:
        """Show the memory log in the external viewer and wait for it to close."""
        if not self._log_present():
            return

        status = self.launcher.spawn_blocking(self.config.viewer, [str(self.log.path)]).unwrap()
        if status != 0:
            logger.debug("%s exited with status %s", self.config.viewer, status)
            _say(self.err, f"🤖 (Giru): Failed to view file with {self.config.viewer}.")

    def save_memory(self) -> str:
        """Interactively append one memory and return the suggested next command."""
        self.log.ensure()

        with self.log.open_for_append() as handle:
            _say(self.out, BODY_PROMPT)
            body = self.read_line().unwrap().strip()

            _say(self.out, TITLE_PROMPT)
            title = self.read_line().unwrap().strip()

            self.log.write_entry(handle, title, body, with_header=self.log.is_empty())

        logger.debug("Appended memory %r to %s", title, self.log.path)

        hint = "list" if self.coin_flip() else "view"
        _say(
            self.out,
            "🤖 (Giru): I've saved the new item.\n"
            f" Hint: use `giru {hint}` to open all my memories.",
        )
        return hint

    def launch_external(self, path: str | None = None, neovim: bool = False) -> None:
        """Open a path in the notes app, or in the terminal editor when `neovim` is set."""
        target = path if path is not None else HOME_MARKER
        if neovim:
            self._spawn_terminal_editor(target)
            return
        self.launcher.spawn_detached(self.config.notes_app, [target]).unwrap()

    def show_help(self) -> None:
        for line in HELP_LINES:
            _say(self.out, line)

    def show_author(self) -> None:
        _say(self.out, f"🤖 Author: {AUTHOR}")


__all__ = ["NoteStoreController"]
