"""Layered configuration loading through lib_layered_config.

Layers, lowest precedence first: the bundled ``defaultconfig.toml``, the
system-wide app and host files, the user file, ``.env`` files, then the
environment.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import DEFAULT_MAX_PROFILE_LENGTH, Config, read_config, validate_profile_name

from message_producer import __init__conf__

#: Defaults shipped inside the wheel; the lowest configuration layer.
BUNDLED_DEFAULTS: Path = Path(__file__).with_name("defaultconfig.toml")


def check_profile(profile: str) -> str:
    """Return *profile* if it is usable as a directory name in every layer.

    A profile becomes a ``profile/<name>/`` path segment, so empty names,
    overly long names and anything with separators or ``..`` are refused.

    Args:
        profile: Name passed to ``--profile``.

    Returns:
        The unchanged name.

    Raises:
        ValueError: If lib_layered_config rejects the name.

    Examples:
        >>> check_profile("staging")
        'staging'
        >>> check_profile("../etc")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: invalid profile name
    """
    validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH)
    return profile


@lru_cache(maxsize=4)
def load_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Read and merge every configuration layer.

    One result is cached per ``(profile, start_dir)`` for the life of the
    process. ``load_config.cache_clear()`` forces the next call to re-read.
    A rejected profile raises before any file is touched and is not cached.

    Args:
        profile: Optional profile selecting ``profile/<name>/`` in each layer.
        start_dir: Where ``.env`` discovery starts; the working directory
            when None.

    Returns:
        Immutable merged configuration with per-key provenance.

    Raises:
        ValueError: If *profile* is not a valid profile name.

    Example:
        >>> isinstance(load_config(), Config)
        True
    """
    if profile is not None:
        check_profile(profile)
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=BUNDLED_DEFAULTS,
        start_dir=start_dir,
    )


__all__ = ["BUNDLED_DEFAULTS", "check_profile", "load_config"]
