"""What the CLI needs from the outside world, as callable Protocols.

Plain module functions satisfy these structurally, so adapters carry no
base classes and the composition root can swap them freely.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from lib_layered_config import Config


class ProduceMessage(Protocol):
    """Return the producer message. Takes no input and cannot fail."""

    def __call__(self) -> str: ...


class LoadConfig(Protocol):
    """Return the merged layered configuration, optionally for a profile."""

    def __call__(self, *, profile: str | None = None) -> Config: ...


class StartLogging(Protocol):
    """Bring up logging from the ``[lib_log_rich]`` section of a config."""

    def __call__(self, config: Config) -> None: ...


__all__ = ["LoadConfig", "ProduceMessage", "StartLogging"]
