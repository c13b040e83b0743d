"""Exit statuses returned by ``message-producer``."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit statuses.

    ``USAGE`` is what Click returns for bad options and unknown commands.
    ``INVALID_ARGUMENT`` is errno EINVAL: the value was well-formed but
    names something that does not exist, such as a config section.

    Example:
        >>> int(ExitCode.INVALID_ARGUMENT)
        22
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE = 2
    INVALID_ARGUMENT = 22


__all__ = ["ExitCode"]
