"""Subcommands of ``message-producer``."""

from __future__ import annotations

from .config import config_command
from .info import info_command
from .produce import produce_command, render_message

__all__ = ["config_command", "info_command", "produce_command", "render_message"]
