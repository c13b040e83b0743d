"""``info``: show the metadata of the installed distribution."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from message_producer import __init__conf__

from ..settings import CONTEXT_SETTINGS

logger = logging.getLogger(__name__)


@click.command("info", context_settings=CONTEXT_SETTINGS)
def info_command() -> None:
    """Show name, version, homepage and console script of this installation."""
    with lib_log_rich.runtime.bind(job_id="info", extra={"version": __init__conf__.version}):
        logger.info("Showing package metadata")
        __init__conf__.print_info()


__all__ = ["info_command"]
