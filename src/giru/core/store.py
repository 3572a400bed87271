from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from giru.core.console import get_logger
from giru.core.result import StorageError

logger = get_logger(__name__)

LOG_HEADER = "# Your Giru File"


def format_header() -> str:
    return f"{LOG_HEADER}\n\n"


def format_entry(title: str, body: str) -> str:
    """Render one memory as a level-two heading followed by a fenced block."""
    return f"## {title}\n\n```\n{body}\n```\n\n"


@dataclass(frozen=True)
class MemoryLog:
    """The single append-only markdown file holding every saved memory."""

    path: Path

    def exists(self) -> bool:
        return self.path.exists()

    def read_text(self) -> str:
        try:
            return self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError(
                "Error occurred, could not read giru file", context={"path": self.path}
            ) from exc

    def ensure(self) -> None:
        """Create the log file and its parent directory if they are missing."""
        if self.path.exists():
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.touch()
        except OSError as exc:
            raise StorageError(
                "Failed to create file, please try again", context={"path": self.path}
            ) from exc
        logger.debug("Created memory log at %s", self.path)

    def open_for_append(self) -> TextIO:
        try:
            return self.path.open("a", encoding="utf-8")
        except OSError as exc:
            raise StorageError(
                "Failed to open file, please try again", context={"path": self.path}
            ) from exc

    def is_empty(self) -> bool:
        try:
            return self.path.stat().st_size == 0
        except OSError as exc:
            raise StorageError(
                "Failed to inspect file, please try again", context={"path": self.path}
            ) from exc

    @staticmethod
    def write_entry(handle: TextIO, title: str, body: str, *, with_header: bool) -> None:
        """Append an entry to an already opened log, preceded by the header if asked."""
        text = format_entry(title, body)
        if with_header:
            text = format_header() + text
        try:
            handle.write(text)
            handle.flush()
        except OSError as exc:
            raise StorageError("Failed to write to file, please try again") from exc
