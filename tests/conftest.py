from __future__ import annotations

import io
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest
from rich.console import Console
from typer.testing import CliRunner

ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from giru.core.config import AppConfig  # noqa: E402
from giru.core.controller import NoteStoreController  # noqa: E402
from giru.core.result import Err, InputError, LaunchError, Ok, Result  # noqa: E402


@dataclass
class LaunchCall:
    mode: str
    command: str
    args: list[str]


@dataclass
class FakeLauncher:
    """Records spawn requests instead of starting processes."""

    exit_status: int = 0
    fail: bool = False
    calls: list[LaunchCall] = field(default_factory=list)

    def spawn_detached(self, command: str, args: Sequence[str]) -> Result[None, LaunchError]:
        self.calls.append(LaunchCall("detached", command, list(args)))
        if self.fail:
            return Err(LaunchError(f"Failed to launch {command}"))
        return Ok(None)

    def spawn_blocking(self, command: str, args: Sequence[str]) -> Result[int, LaunchError]:
        self.calls.append(LaunchCall("blocking", command, list(args)))
        if self.fail:
            return Err(LaunchError(f"Failed to launch {command}"))
        return Ok(self.exit_status)


def canned_reader(*lines: str) -> Callable[[], Result[str, InputError]]:
    """Line reader that replays `lines` and then reports end of input."""
    queue = list(lines)

    def _read() -> Result[str, InputError]:
        if not queue:
            return Err(InputError("Failed to read your request. Please try again"))
        return Ok(queue.pop(0))

    return _read


def recording_console() -> Console:
    return Console(file=io.StringIO(), width=120, color_system=None)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def home(tmp_path: Path) -> Path:
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture(autouse=True)
def isolate_environment(home: Path, tmp_path: Path, monkeypatch: Any) -> Path:
    """Point HOME and the config file at temp paths so tests don't touch user state."""
    monkeypatch.setenv("HOME", str(home))
    cfg_path = tmp_path / "config.toml"
    monkeypatch.setenv("GIRU_CONFIG", str(cfg_path))
    for field_name in AppConfig.model_fields:
        monkeypatch.delenv(f"GIRU_{field_name.upper()}", raising=False)
    return cfg_path


@pytest.fixture
def test_config(home: Path) -> AppConfig:
    return AppConfig(home=home)


@pytest.fixture
def fake_launcher() -> FakeLauncher:
    return FakeLauncher()


@pytest.fixture
def log_path(home: Path) -> Path:
    return home / ".giru" / "giru.md"


@pytest.fixture
def make_controller(
    test_config: AppConfig, fake_launcher: FakeLauncher
) -> Callable[..., NoteStoreController]:
    """Build a controller wired to the fake launcher, canned input and recording consoles."""

    def _make(
        *lines: str, heads: bool = True, config: AppConfig | None = None
    ) -> NoteStoreController:
        return NoteStoreController(
            config or test_config,
            launcher=fake_launcher,
            read_line=canned_reader(*lines),
            coin_flip=lambda: heads,
            out=recording_console(),
            err=recording_console(),
        )

    return _make
