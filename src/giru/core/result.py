"""
Result types and error hierarchy for giru.

This module provides:
1. Result[T, E] type for explicit error handling at capability seams
2. Domain-specific exception hierarchy

Usage:
    from giru.core.result import Ok, Err, Result, LaunchError

    def spawn() -> Result[None, LaunchError]:
        if failed:
            return Err(LaunchError("Failed to open file with nvim"))
        return Ok(None)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Represents a successful result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Represents a failed result containing an error."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> T:
        """Raise the contained error."""
        raise self.error


Result = Ok[T] | Err[E]


# ---------------------------------------------------------------------------
# Domain-specific error hierarchy
# ---------------------------------------------------------------------------


class GiruError(Exception):
    """Base exception for all giru errors.

    Anything raised as a GiruError is a hard failure: the CLI layer prints
    it and exits with status 1.
    """

    def __init__(self, message: str, *, context: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} [{ctx_str}]"
        return self.message


class ConfigurationError(GiruError):
    """Raised when the environment cannot produce a usable configuration.

    Examples:
    - HOME is not set
    """


class StorageError(GiruError):
    """Raised when the memory log cannot be created, opened or written."""


class LaunchError(GiruError):
    """Raised when an external program cannot be spawned."""


class InputError(GiruError):
    """Raised when a line cannot be read from standard input."""


__all__ = [
    "Ok",
    "Err",
    "Result",
    "GiruError",
    "ConfigurationError",
    "StorageError",
    "LaunchError",
    "InputError",
]
