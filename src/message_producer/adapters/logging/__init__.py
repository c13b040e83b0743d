"""Logging adapter: lib_log_rich configured from layered config."""

from __future__ import annotations

from .runtime import LogSettings, runtime_config_from, start_logging

__all__ = ["LogSettings", "runtime_config_from", "start_logging"]
