"""lib_log_rich bootstrap shared by the console script, ``python -m`` and tests."""

from __future__ import annotations

from typing import Any

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from message_producer import __init__conf__


class LogSettings(BaseModel):
    """The ``[lib_log_rich]`` section, validated where it enters the program.

    ``service`` and ``environment`` are typed; any other key is handed to
    ``RuntimeConfig`` as is.

    Example:
        >>> LogSettings.model_validate({"console_level": "DEBUG"}).passthrough()
        {'console_level': 'DEBUG'}
    """

    model_config = ConfigDict(extra="allow")

    service: str | None = None
    environment: str = "prod"

    def passthrough(self) -> dict[str, Any]:
        """Untyped keys, without the ones explicitly set to ``None``."""
        return {key: value for key, value in (self.model_extra or {}).items() if value is not None}


def runtime_config_from(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Build the ``RuntimeConfig`` described by the ``[lib_log_rich]`` section.

    Args:
        config: Merged configuration; a missing section means defaults.

    Returns:
        Runtime settings whose ``service`` falls back to the distribution name.

    Raises:
        pydantic.ValidationError: If ``service`` or ``environment`` is not text.
    """
    settings = LogSettings.model_validate(config.get("lib_log_rich", default={}) or {})
    return lib_log_rich.runtime.RuntimeConfig(
        service=settings.service or __init__conf__.name,
        environment=settings.environment,
        **settings.passthrough(),
    )


def start_logging(config: Config) -> None:
    """Start the lib_log_rich runtime and route stdlib ``logging`` into it.

    ``.env`` files are read first so ``LOG_*`` variables take effect. When
    the runtime is already up the call does nothing.

    Args:
        config: Merged configuration carrying the ``[lib_log_rich]`` section.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(runtime_config_from(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = ["LogSettings", "runtime_config_from", "start_logging"]
