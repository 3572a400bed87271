"""External process launching.

Provides:
- ProcessLauncher protocol with detached and blocking spawn operations
- SubprocessLauncher, the implementation backed by the subprocess module
"""

from __future__ import annotations

import shlex
import subprocess
from collections.abc import Sequence
from typing import Protocol

from giru.core.console import get_logger
from giru.core.result import Err, LaunchError, Ok, Result

logger = get_logger(__name__)


class ProcessLauncher(Protocol):
    def spawn_detached(self, command: str, args: Sequence[str]) -> Result[None, LaunchError]:
        """Start a child process and return without waiting for it."""
        ...

    def spawn_blocking(self, command: str, args: Sequence[str]) -> Result[int, LaunchError]:
        """Start a child process, wait for it and return its exit status."""
        ...


def _describe(command: str, args: Sequence[str]) -> str:
    return shlex.join([command, *args])


class SubprocessLauncher:
    """Launch external tools with the inherited terminal attached."""

    def spawn_detached(self, command: str, args: Sequence[str]) -> Result[None, LaunchError]:
        logger.debug("Spawning detached: %s", _describe(command, args))
        try:
            # A new session keeps the child alive after giru exits.
            subprocess.Popen([command, *args], start_new_session=True)
        except OSError as exc:
            return Err(
                LaunchError(
                    f"Failed to launch {command}",
                    context={"command": _describe(command, args), "error": str(exc)},
                )
            )
        return Ok(None)

    def spawn_blocking(self, command: str, args: Sequence[str]) -> Result[int, LaunchError]:
        logger.debug("Spawning and waiting: %s", _describe(command, args))
        try:
            completed = subprocess.run([command, *args], check=False)
        except OSError as exc:
            return Err(
                LaunchError(
                    f"Failed to launch {command}",
                    context={"command": _describe(command, args), "error": str(exc)},
                )
            )
        logger.debug("%s exited with status %s", command, completed.returncode)
        return Ok(completed.returncode)


__all__ = ["ProcessLauncher", "SubprocessLauncher"]
