"""Layered configuration: loading, profile checks and ``--set`` overrides."""

from __future__ import annotations

from .loader import BUNDLED_DEFAULTS, check_profile, load_config
from .overrides import Override, coerce_value, merge_overrides, parse_override

__all__ = [
    "BUNDLED_DEFAULTS",
    "Override",
    "check_profile",
    "coerce_value",
    "load_config",
    "merge_overrides",
    "parse_override",
]
