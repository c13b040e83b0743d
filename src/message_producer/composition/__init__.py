"""Composition root: decides which adapter backs each port.

The CLI never imports this package at runtime. It receives a zero-argument
factory through ``ctx.obj`` from one of the two entry points.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..adapters.config.loader import load_config
from ..adapters.logging.runtime import start_logging
from ..domain.behaviors import produce

if TYPE_CHECKING:
    from ..application.ports import LoadConfig, ProduceMessage, StartLogging

    # pyright checks these; nothing happens at runtime
    _produce_conforms: ProduceMessage = produce
    _load_config_conforms: LoadConfig = load_config
    _start_logging_conforms: StartLogging = start_logging


@dataclass(frozen=True, slots=True)
class ProducerServices:
    """Port implementations for one CLI invocation.

    Attributes:
        produce: Returns the producer message.
        load_config: Loads the layered configuration for a profile.
        start_logging: Initialises the lib_log_rich runtime.
    """

    produce: ProduceMessage
    load_config: LoadConfig
    start_logging: StartLogging


def build_production() -> ProducerServices:
    """Services backed by real configuration files and lib_log_rich.

    Example:
        >>> build_production().produce()
        'Hello World from Another Message Producer'
    """
    return ProducerServices(produce=produce, load_config=load_config, start_logging=start_logging)


def build_in_memory(config_data: Mapping[str, Any] | None = None) -> ProducerServices:
    """Services that read no files and leave the logging runtime untouched.

    Args:
        config_data: Sections the loader returns, whatever profile is asked for.

    Returns:
        Services with the real producer and in-memory config and logging.

    Example:
        >>> services = build_in_memory({"lib_log_rich": {"environment": "test"}})
        >>> services.load_config(profile="staging")["lib_log_rich"]["environment"]
        'test'
    """
    from ..adapters.memory import FixedConfigLoader, skip_logging

    return ProducerServices(produce=produce, load_config=FixedConfigLoader(config_data), start_logging=skip_logging)


__all__ = ["ProducerServices", "build_in_memory", "build_production"]
