"""Application configuration management.

Handles loading and validating configuration from multiple sources:
    - TOML/JSON config file
    - Environment variables (GIRU_* prefix)
    - Default values

Key components:
    - AppConfig: Main configuration model
    - load_config(): Safe config loading with fallback
    - ConfigLoadResult: Metadata about config source
"""

from __future__ import annotations

import json
import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from giru.core.console import DEFAULT_ACCENT_COLOR
from giru.core.result import ConfigurationError

CONFIG_ENV_VAR = "GIRU_CONFIG"
HOME_ENV_VAR = "HOME"
GIRU_DIRNAME = ".giru"
LOG_FILENAME = "giru.md"
CONFIG_FILENAME = "config.toml"


class ConfigFileError(RuntimeError):
    """Raised when the config file cannot be parsed."""


class AppConfig(BaseSettings):
    """Giru configuration: where the memory log lives and which tools open it."""

    model_config = SettingsConfigDict(
        env_prefix="GIRU_",
        extra="ignore",
    )

    home: Path = Field(description="Home directory the memory log lives under.")
    terminal: str = Field(default="alacritty", description="Terminal emulator for editor launches.")
    editor: str = Field(default="nvim", description="Editor run inside the terminal emulator.")
    viewer: str = Field(default="frogmouth", description="Blocking markdown viewer.")
    notes_app: str = Field(default="obsidian", description="Notes application launcher.")
    accent_color: str = Field(
        default=DEFAULT_ACCENT_COLOR, description="Header colour used by `giru list`."
    )
    log_level: str = Field(default="WARNING", description="Log level for giru output.")

    @field_validator("terminal", "editor", "viewer", "notes_app")
    @classmethod
    def ensure_command(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("command name must not be empty")
        return v

    @property
    def giru_dir(self) -> Path:
        return self.home / GIRU_DIRNAME

    @property
    def log_path(self) -> Path:
        return self.giru_dir / LOG_FILENAME


@dataclass
class ConfigLoadResult:
    path: Path
    file_loaded: bool
    env_overrides: set[str]
    error: str | None = None


def resolve_home(env_vars: Mapping[str, str]) -> Path:
    """Return the home directory from the environment or raise ConfigurationError."""
    home = env_vars.get(HOME_ENV_VAR, "")
    if not home:
        raise ConfigurationError(f"{HOME_ENV_VAR} is not set; cannot locate the memory log.")
    return Path(home)


def _resolve_config_path(
    config_path: Path | None, env_vars: Mapping[str, str], home: Path
) -> Path:
    candidate = (
        config_path or env_vars.get(CONFIG_ENV_VAR) or (home / GIRU_DIRNAME / CONFIG_FILENAME)
    )
    return Path(candidate).expanduser()


def _read_config_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigFileError(f"Cannot read {path}: {exc}") from exc

    parser = json.loads if path.suffix.lower() == ".json" else tomllib.loads

    try:
        data = parser(raw)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ConfigFileError(f"Syntax error in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigFileError(f"Config root in {path} must be a mapping.")

    return data


def _read_env_overrides(env_vars: Mapping[str, str]) -> dict[str, str]:
    """Collect GIRU_* values for every field except `home`, which only follows HOME."""
    prefix = AppConfig.model_config.get("env_prefix", "")
    overrides: dict[str, str] = {}
    for field in AppConfig.model_fields:
        env_key = f"{prefix}{field}".upper()
        if field != "home" and env_key in env_vars:
            overrides[field] = env_vars[env_key]
    return overrides


def load_config(
    config_path: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> tuple[AppConfig, ConfigLoadResult]:
    """
    Load configuration with Safe Mode fallback.

    A missing HOME raises ConfigurationError. If the config file is invalid,
    returns the default config plus an error message. `env` replaces
    os.environ for HOME, the config file location and GIRU_* overrides.
    """
    env_vars: Mapping[str, str] = os.environ if env is None else env
    home = resolve_home(env_vars)
    resolved_path = _resolve_config_path(config_path, env_vars, home)
    env_values = _read_env_overrides(env_vars)

    error: str | None = None
    file_loaded = False
    file_data: dict[str, Any] = {}

    try:
        file_data = _read_config_file(resolved_path)
        file_loaded = resolved_path.exists()
    except ConfigFileError as exc:
        error = str(exc)

    # Environment beats the file; the storage location always follows HOME.
    # model_validate skips the settings sources, so os.environ is not read again.
    settings = {**file_data, **env_values, "home": home}

    try:
        config = AppConfig.model_validate(settings)
    except ValidationError as exc:
        error = str(exc)
        config = AppConfig.model_construct(home=home)

    load_result = ConfigLoadResult(
        path=resolved_path,
        file_loaded=file_loaded,
        env_overrides=set(env_values),
        error=error,
    )

    return config, load_result
