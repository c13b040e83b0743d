"""``config``: print the merged configuration the other commands run with."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click
from lib_layered_config import Config, display_config
from lib_layered_config import OutputFormat as LayeredFormat

from message_producer.adapters.config.loader import check_profile
from message_producer.adapters.config.overrides import merge_overrides
from message_producer.domain.formats import OutputFormat

from ..exit_codes import ExitCode
from ..settings import CONTEXT_SETTINGS
from ..state import InvocationState, current_state

logger = logging.getLogger(__name__)


def _config_for_profile(state: InvocationState, profile: str) -> Config:
    """Load *profile* and re-apply the group's ``--set`` assignments.

    Raises:
        click.BadParameter: If *profile* is not a valid profile name.
    """
    try:
        check_profile(profile)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="'--profile'") from exc
    return merge_overrides(state.services.load_config(profile=profile), state.overrides)


@click.command("config", context_settings=CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OutputFormat.choices(), case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    show_default=True,
    help="'human' prints TOML with provenance comments, 'json' a JSON document",
)
@click.option("--section", metavar="NAME", default=None, help="Print only the top-level section NAME")
@click.option("--profile", metavar="NAME", default=None, help="Show profile NAME instead of the group's profile")
@click.pass_context
def config_command(ctx: click.Context, output_format: str, section: str | None, profile: str | None) -> None:
    """Print the merged configuration and the layer each value came from.

    Precedence, lowest first: bundled defaults, app, host, user, .env,
    environment. An unknown --section exits with status 22.
    """
    state = current_state(ctx)
    config = state.config if profile is None else _config_for_profile(state, profile)
    shown_profile = profile or state.profile
    fmt = OutputFormat(output_format.lower())

    with lib_log_rich.runtime.bind(job_id="config", extra={"section": section, "profile": shown_profile}):
        logger.info("Showing configuration", extra={"format": fmt.value})
        if lib_log_rich.runtime.is_initialised():
            # pending records must not interleave with the dump
            lib_log_rich.runtime.flush()
        click.echo()
        try:
            display_config(config, output_format=LayeredFormat(fmt.value), section=section, profile=shown_profile)
        except ValueError as exc:
            click.echo(f"Error: {exc}", err=True)
            ctx.exit(ExitCode.INVALID_ARGUMENT)


__all__ = ["config_command"]
