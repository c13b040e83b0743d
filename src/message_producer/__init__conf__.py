"""Static package metadata surfaced to the CLI and configuration layers.

Values mirror ``pyproject.toml`` and are checked against it by the
metadata sync tests.
"""

from __future__ import annotations

from typing import Final

#: Distribution name declared in ``pyproject.toml``.
name: Final[str] = "message_producer"
#: One-line summary used as CLI help title.
title: Final[str] = "Produces the canonical Another Message Producer string"
#: Release version, kept in sync with ``pyproject.toml``.
version: Final[str] = "1.0.0"
homepage: Final[str] = "https://github.com/bitranox/message_producer"
author: Final[str] = "bitranox"
author_email: Final[str] = "bitranox@gmail.com"
#: Console script name installed by pip.
shell_command: Final[str] = "message-producer"

# lib_layered_config identifiers (platform-specific config paths)
LAYEREDCONF_VENDOR: Final[str] = "bitranox"
LAYEREDCONF_APP: Final[str] = "Message Producer"
LAYEREDCONF_SLUG: Final[str] = "message-producer"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for message_producer:
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
