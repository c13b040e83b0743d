"""In-memory stand-ins for the configuration and logging ports."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from lib_layered_config import Config


class FixedConfigLoader:
    """Config loader that returns the same in-memory Config for any profile.

    Each requested profile is appended to :attr:`profiles`, so tests can see
    what the CLI asked for.

    Example:
        >>> loader = FixedConfigLoader({"s": {"k": 1}})
        >>> loader(profile="qa")["s"]["k"], loader.profiles
        (1, ['qa'])
    """

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self.config = Config(dict(data or {}), {})
        self.profiles: list[str | None] = []

    def __call__(self, *, profile: str | None = None) -> Config:
        self.profiles.append(profile)
        return self.config


def skip_logging(config: Config) -> None:
    """Leave the lib_log_rich runtime exactly as it is."""


__all__ = ["FixedConfigLoader", "skip_logging"]
