"""Command-line adapter: the ``cli`` group and the ``main`` runner."""

from __future__ import annotations

from .main import main
from .root import cli

__all__ = ["cli", "main"]
