"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from typing import Final

MESSAGE: Final[str] = "Hello World from Another Message Producer"


def produce() -> str:
    """Return the fixed producer message.

    The message is a process-wide constant, so every call returns the same
    string and the function is safe to call from any thread.

    Returns:
        The literal producer message.

    Example:
        >>> produce()
        'Hello World from Another Message Producer'
        >>> produce() == produce()
        True
    """
    return MESSAGE


__all__ = [
    "MESSAGE",
    "produce",
]
