"""Output formats understood by the ``produce`` and ``config`` commands."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """How a command writes its result to stdout.

    ``HUMAN`` is plain text for a terminal, ``JSON`` a single document for
    scripts.

    Example:
        >>> OutputFormat("json") is OutputFormat.JSON
        True
        >>> OutputFormat.choices()
        ['human', 'json']
    """

    HUMAN = "human"
    JSON = "json"

    @classmethod
    def choices(cls) -> list[str]:
        """Member values in declaration order, as ``click.Choice`` wants them."""
        return [member.value for member in cls]


__all__ = ["OutputFormat"]
