"""Fixtures shared by the producer, CLI and packaging tests."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator, Mapping
from dataclasses import replace
from typing import Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner

from message_producer.adapters.cli.state import TracebackFlags
from message_producer.adapters.config.loader import load_config
from message_producer.adapters.memory import FixedConfigLoader
from message_producer.composition import ProducerServices, build_production

_ANSI = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")

ServicesFactory = Callable[[], ProducerServices]


@pytest.fixture(autouse=True)
def fresh_config_cache() -> Iterator[None]:
    """Every test reads the configuration layers anew."""
    load_config.cache_clear()
    yield
    load_config.cache_clear()


@pytest.fixture
def runner() -> CliRunner:
    """A CliRunner; assert on ``result.stdout`` so log lines on stderr stay out."""
    return CliRunner()


@pytest.fixture
def production() -> ServicesFactory:
    return build_production


@pytest.fixture
def services_with_config() -> Callable[[Mapping[str, Any]], tuple[ServicesFactory, FixedConfigLoader]]:
    """Production services whose loader returns *data* instead of reading files.

    Logging stays real so commands can bind their log context. The loader is
    returned too, so a test can check which profiles were requested.
    """

    def _build(data: Mapping[str, Any]) -> tuple[ServicesFactory, FixedConfigLoader]:
        loader = FixedConfigLoader(data)
        services = replace(build_production(), load_config=loader)
        return (lambda: services), loader

    return _build


@pytest.fixture
def plain() -> Callable[[str], str]:
    """Strip ANSI colour codes from captured output."""
    return lambda text: _ANSI.sub("", text)


@pytest.fixture
def traceback_flags() -> Iterator[None]:
    """Run with tracebacks off, then put the flags back as they were."""
    before = TracebackFlags.capture()
    lib_cli_exit_tools.reset_config()
    TracebackFlags(traceback=False, force_color=False).restore()
    try:
        yield
    finally:
        before.restore()
