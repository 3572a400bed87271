"""Interactive input capabilities: reading a line and drawing a hint."""

from __future__ import annotations

import random
import sys
from typing import Callable, TextIO

from giru.core.result import Err, InputError, Ok, Result

LineReader = Callable[[], Result[str, InputError]]
CoinFlip = Callable[[], bool]

READ_FAILURE = "Failed to read your request. Please try again"


def read_stdin_line(stream: TextIO | None = None) -> Result[str, InputError]:
    """Read one line from stdin. End of input counts as a failure."""
    source = stream if stream is not None else sys.stdin
    try:
        line = source.readline()
    except (OSError, UnicodeDecodeError) as exc:
        return Err(InputError(READ_FAILURE, context={"error": str(exc)}))
    if not line:
        return Err(InputError(READ_FAILURE))
    return Ok(line)


def random_coin_flip() -> bool:
    return random.randint(1, 2) == 1


__all__ = ["CoinFlip", "LineReader", "random_coin_flip", "read_stdin_line"]
